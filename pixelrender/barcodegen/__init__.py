"""
barcodegen

Источники BitMatrix для рендерера.

Public API:
    - linear_matrix: 1D-штрихкод через python-barcode -> BitMatrix
    - qr_matrix: QR через qrcode -> BitMatrix
    - matrix_for: выбор источника по BarcodeFormat
    - supported_formats: форматы, для которых есть источник

Примеры:
    >>> from pixelrender.barcodegen import matrix_for
    >>> matrix = matrix_for(BarcodeFormat.CODE_128, "TEST", height=40)

Зависимости:
    python-barcode, qrcode
"""

from pixelrender.barcodegen.matrix_source import (
    DEFAULT_LINEAR_HEIGHT,
    linear_matrix,
    matrix_for,
    qr_matrix,
    supported_formats,
)

__all__ = [
    "DEFAULT_LINEAR_HEIGHT",
    "linear_matrix",
    "qr_matrix",
    "matrix_for",
    "supported_formats",
]
