from array import array
from io import BytesIO

import pytest
from PIL import Image

from pixelrender.model.bit_matrix import BitMatrix
from pixelrender.model.color import Color
from pixelrender.model.enums import BarcodeFormat
from pixelrender.renderer.caption import NO_CAPTION
from pixelrender.renderer.pixel_buffer import (
    PIXEL_TYPECODE,
    PackedPixelBuffer,
    new_pixel_array,
)
from pixelrender.renderer.pixel_renderer import PixelBufferRenderer


@pytest.fixture
def diagonal_buffer() -> PackedPixelBuffer:
    return PixelBufferRenderer().render(BitMatrix.parse("X.\n.X"), BarcodeFormat.QR_CODE)


def test_new_pixel_array_is_zeroed() -> None:
    pixels = new_pixel_array(12)
    assert len(pixels) == 12
    assert pixels.itemsize == 4
    assert set(pixels) == {0}


def test_accessors(diagonal_buffer: PackedPixelBuffer) -> None:
    black, white = 0xFF000000, 0xFFFFFFFF
    assert len(diagonal_buffer) == 4
    assert diagonal_buffer.pixel(0, 0) == black
    assert diagonal_buffer.pixel(1, 0) == white
    assert diagonal_buffer.row(1) == (white, black)
    assert diagonal_buffer.caption == NO_CAPTION


@pytest.mark.parametrize("x,y", [(-1, 0), (2, 0), (0, 2)])
def test_pixel_out_of_range(diagonal_buffer: PackedPixelBuffer, x: int, y: int) -> None:
    with pytest.raises(IndexError):
        diagonal_buffer.pixel(x, y)


def test_size_mismatch_rejected() -> None:
    with pytest.raises(ValueError, match="does not match"):
        PackedPixelBuffer(width=3, height=3, pixels=array(PIXEL_TYPECODE, [0] * 8))


def test_to_bytes_is_rgba_order() -> None:
    colour = Color(r=1, g=2, b=3, a=4)
    buf = PackedPixelBuffer(width=1, height=1, pixels=array(PIXEL_TYPECODE, [colour.packed]))
    assert buf.to_bytes() == bytes([1, 2, 3, 4])


def test_to_image_uses_configured_colours() -> None:
    fg = Color(r=10, g=20, b=30)
    bg = Color(r=250, g=240, b=230, a=200)
    buf = PixelBufferRenderer(foreground=fg, background=bg).render(
        BitMatrix.parse("X.\n.X"), BarcodeFormat.DATA_MATRIX
    )
    img = buf.to_image()
    assert isinstance(img, Image.Image)
    assert img.mode == "RGBA"
    assert img.size == (2, 2)
    assert img.getpixel((0, 0)) == (10, 20, 30, 255)
    assert img.getpixel((1, 0)) == (250, 240, 230, 200)
    assert img.getpixel((1, 1)) == (10, 20, 30, 255)


def test_reserved_strip_is_transparent_in_image() -> None:
    matrix = BitMatrix.from_modules("1010", height=20)
    buf = PixelBufferRenderer().render(matrix, BarcodeFormat.CODE_128, "AB")
    img = buf.to_image()
    assert img.getpixel((0, 3)) == (0, 0, 0, 255)
    assert img.getpixel((1, 3)) == (255, 255, 255, 255)
    assert img.getpixel((0, 4)) == (0, 0, 0, 0)
    assert img.getpixel((3, 19)) == (0, 0, 0, 0)


def test_to_png_bytes(diagonal_buffer: PackedPixelBuffer) -> None:
    data = diagonal_buffer.to_png_bytes()
    assert data[:4] == b"\x89PNG"
    with Image.open(BytesIO(data)) as img:
        assert img.size == (2, 2)
        assert img.convert("RGBA").getpixel((0, 0)) == (0, 0, 0, 255)
