"""
renderer

Растеризация BitMatrix в буфер пикселей и подписи одномерных штрихкодов.

Public API:
    - PixelBufferRenderer: рендерер BitMatrix -> PackedPixelBuffer (class)
    - PackedPixelBuffer: результат рендеринга с экспортом в Pillow (class)
    - BarcodeRenderer: протокол рендерера (Protocol)
    - CaptionSpec, format_caption, CAPTION_HEIGHT: подпись под штрихкодом
    - calculate_checksum_digit_modulo10 и др.: контрольная цифра EAN/UPC
"""

from pixelrender.renderer.caption import CAPTION_HEIGHT, CaptionSpec, format_caption
from pixelrender.renderer.checksum import (
    calculate_checksum_digit_modulo10,
    checksum_digit_modulo10,
    is_valid_modulo10,
)
from pixelrender.renderer.pixel_buffer import PackedPixelBuffer
from pixelrender.renderer.pixel_renderer import PixelBufferRenderer
from pixelrender.renderer.protocols import BarcodeRenderer

__all__ = [
    "PixelBufferRenderer",
    "PackedPixelBuffer",
    "BarcodeRenderer",
    "CaptionSpec",
    "CAPTION_HEIGHT",
    "format_caption",
    "calculate_checksum_digit_modulo10",
    "checksum_digit_modulo10",
    "is_valid_modulo10",
]
