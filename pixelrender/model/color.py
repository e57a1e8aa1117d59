"""
RU: Цвет с четырьмя 8-битными каналами и упаковкой в 32-битный пиксель.
EN: Four-channel 8-bit colour and its packed 32-bit pixel form.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from PIL import ImageColor

from pixelrender.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

__all__ = ["Color", "BLACK", "WHITE", "TRANSPARENT"]


@dataclass(frozen=True)
class Color:
    """
    ARGB colour, every channel 0..255. Alpha defaults to fully opaque.

    Examples:
        >>> Color(r=255, g=0, b=0).packed == 0xFF0000FF
        True
        >>> Color.from_string("#00ff0080")
        Color(r=0, g=255, b=0, a=128)
    """

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise InvalidArgumentError(
                    f"Color channel {name} must be an int in 0..255, got {value!r}"
                )

    @property
    def packed(self) -> int:
        """
        Упакованный пиксель: A в старшем байте, затем B, G, R.

        Синий и зелёный стоят на местах, обратных «наивному» ARGB: в памяти
        little-endian это байты R, G, B, A поверхности отображения.
        """
        return self.a << 24 | self.b << 16 | self.g << 8 | self.r

    @classmethod
    def from_packed(cls, value: int) -> "Color":
        if not 0 <= value <= 0xFFFFFFFF:
            raise InvalidArgumentError(f"Packed pixel out of 32-bit range: {value!r}")
        return cls(
            r=value & 0xFF,
            g=(value >> 8) & 0xFF,
            b=(value >> 16) & 0xFF,
            a=(value >> 24) & 0xFF,
        )

    @classmethod
    def from_string(cls, value: str) -> "Color":
        """Parse a CSS colour name or hex string ("black", "#fff", "#RRGGBBAA")."""
        try:
            r, g, b, a = ImageColor.getcolor(value, "RGBA")
        except (ValueError, TypeError, AttributeError) as e:
            logger.error("Cannot parse colour %r", value)
            raise InvalidArgumentError(f"Unknown colour specifier: {value!r}") from e
        return cls(r=r, g=g, b=b, a=a)

    def to_rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


BLACK: Final[Color] = Color(0, 0, 0)
WHITE: Final[Color] = Color(255, 255, 255)
TRANSPARENT: Final[Color] = Color(0, 0, 0, 0)
