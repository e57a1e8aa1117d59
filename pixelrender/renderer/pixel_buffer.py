"""
RU: Плоский буфер упакованных 32-битных пикселей (построчно, слева направо).
EN: Flat row-major buffer of packed 32-bit pixels returned by the renderer.
"""

from __future__ import annotations

import logging
import sys
from array import array
from dataclasses import dataclass
from io import BytesIO
from typing import Final, Tuple

from PIL import Image

from pixelrender.renderer.caption import NO_CAPTION, CaptionSpec

logger = logging.getLogger(__name__)

__all__ = ["PackedPixelBuffer", "PIXEL_TYPECODE", "new_pixel_array"]

# Беззнаковый 32-битный элемент array (unsigned int)
PIXEL_TYPECODE: Final[str] = "I"


def new_pixel_array(size: int) -> array:
    """Zero-filled (transparent black) pixel storage of ``size`` elements."""
    return array(PIXEL_TYPECODE, [0]) * size


@dataclass
class PackedPixelBuffer:
    """
    Result of one render call. The caller owns ``pixels``.

    Attributes:
        width: Pixels per row.
        height: Number of rows.
        pixels: ``width * height`` packed values, ``A<<24 | B<<16 | G<<8 | R``.
        caption: Caption decision computed for the same call.
    """

    width: int
    height: int
    pixels: array
    caption: CaptionSpec = NO_CAPTION

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"pixel count {len(self.pixels)} does not match "
                f"{self.width}x{self.height}"
            )

    def __len__(self) -> int:
        return len(self.pixels)

    def pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} buffer")
        return self.pixels[y * self.width + x]

    def row(self, y: int) -> Tuple[int, ...]:
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside the {self.height}-row buffer")
        start = y * self.width
        return tuple(self.pixels[start : start + self.width])

    def to_bytes(self) -> bytes:
        """Байты пикселей в порядке R, G, B, A независимо от порядка байт платформы."""
        data = array(PIXEL_TYPECODE, self.pixels)
        if sys.byteorder == "big":
            data.byteswap()
        return data.tobytes()

    def to_image(self) -> Image.Image:
        """
        Build a Pillow RGBA image from the buffer.

        The packed layout stores R in the lowest byte, so the little-endian
        byte stream is exactly Pillow's raw "RGBA".
        """
        img = Image.frombytes("RGBA", (self.width, self.height), self.to_bytes())
        logger.debug("Exported %dx%d pixel buffer to PIL image", self.width, self.height)
        return img

    def to_png_bytes(self) -> bytes:
        buf = BytesIO()
        self.to_image().save(buf, format="PNG")
        buf.seek(0)
        return buf.read()
