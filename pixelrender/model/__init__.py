"""Модель данных рендерера: BitMatrix, Color и перечисления форматов."""

from pixelrender.model.bit_matrix import BitMatrix
from pixelrender.model.color import BLACK, TRANSPARENT, WHITE, Color
from pixelrender.model.enums import (
    CAPTION_FORMATS,
    BarcodeFormat,
    FontStretch,
    FontStyle,
    FontWeight,
)

__all__ = [
    "BitMatrix",
    "Color",
    "BLACK",
    "WHITE",
    "TRANSPARENT",
    "BarcodeFormat",
    "CAPTION_FORMATS",
    "FontStretch",
    "FontStyle",
    "FontWeight",
]
