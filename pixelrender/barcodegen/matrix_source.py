"""
RU: Построение BitMatrix из данных: 1D-штрихкоды через python-barcode,
QR через qrcode.
EN: BitMatrix sources backed by python-barcode (1D) and qrcode (QR).

Requirements: python-barcode, qrcode
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Final, Optional, Set

import barcode as pybarcode
import qrcode
from barcode.errors import BarcodeError, BarcodeNotFoundError
from qrcode.constants import (
    ERROR_CORRECT_H,
    ERROR_CORRECT_L,
    ERROR_CORRECT_M,
    ERROR_CORRECT_Q,
)
from qrcode.exceptions import DataOverflowError

from pixelrender.exceptions import InvalidArgumentError, MatrixSourceError
from pixelrender.model.bit_matrix import BitMatrix
from pixelrender.model.enums import BarcodeFormat

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_LINEAR_HEIGHT",
    "linear_matrix",
    "qr_matrix",
    "matrix_for",
    "supported_formats",
]

DEFAULT_LINEAR_HEIGHT: Final[int] = 50

_pybarcode_support: Final[Dict[BarcodeFormat, str]] = {
    BarcodeFormat.EAN_8: "ean8",
    BarcodeFormat.EAN_13: "ean13",
    BarcodeFormat.UPC_A: "upc",
    BarcodeFormat.CODE_39: "code39",
    BarcodeFormat.CODE_128: "code128",
    BarcodeFormat.ITF: "itf",
    BarcodeFormat.CODABAR: "codabar",
}

_error_correction: Final[Dict[str, int]] = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


def supported_formats() -> Set[BarcodeFormat]:
    return set(_pybarcode_support) | {BarcodeFormat.QR_CODE}


def _require_content(barcode_format: BarcodeFormat, content: str) -> None:
    if not isinstance(content, str) or not content.strip():
        logger.error("Input data is empty or not string, got %r", content)
        raise InvalidArgumentError(
            "Barcode data must be a non-empty string", barcode_format=barcode_format
        )


def linear_matrix(
    barcode_format: BarcodeFormat,
    content: str,
    height: int = DEFAULT_LINEAR_HEIGHT,
    module_width: int = 1,
    quiet_zone: int = 0,
    options: Optional[Dict[str, Any]] = None,
) -> BitMatrix:
    """
    Закодировать данные одномерным штрихкодом и вернуть BitMatrix.

    Ряд модулей из ``python-barcode`` (``build()``) повторяется ``height`` раз.

    Args:
        barcode_format: Один из форматов, поддерживаемых python-barcode.
        content: Данные для кодирования.
        height: Высота матрицы в строках.
        module_width: Ширина модуля в ячейках.
        quiet_zone: Пустые ячейки слева и справа.
        options: Дополнительные аргументы конструктора python-barcode
            (например, ``{"add_checksum": False}`` для Code 39).

    Raises:
        InvalidArgumentError: пустые данные или неверные размеры.
        MatrixSourceError: формат не поддерживается или python-barcode
            отклонил данные.
    """
    _require_content(barcode_format, content)
    barcode_name = _pybarcode_support.get(barcode_format)
    if not barcode_name:
        logger.error("Barcode format %r not supported by python-barcode", barcode_format)
        raise MatrixSourceError(
            f"Barcode format {barcode_format.name} not supported by python-barcode",
            barcode_format=barcode_format,
        )

    try:
        bclass = pybarcode.get_barcode_class(barcode_name)
        modules = "".join(bclass(content, **(options or {})).build())
    except BarcodeNotFoundError as e:
        logger.error("Barcode class not found for %s", barcode_name)
        raise MatrixSourceError(
            f"Barcode class not found for format: {barcode_format.name}",
            barcode_format=barcode_format,
        ) from e
    except (BarcodeError, ValueError, TypeError) as e:
        logger.error("python-barcode rejected %r for %s: %s", content, barcode_name, e)
        raise MatrixSourceError(
            f"Barcode encoding failed: {e}", barcode_format=barcode_format
        ) from e

    logger.debug("Encoded %s %r into %d modules", barcode_format.name, content, len(modules))
    return BitMatrix.from_modules(
        modules, height=height, module_width=module_width, quiet_zone=quiet_zone
    )


def qr_matrix(
    content: str,
    border: int = 4,
    error_correction: str = "M",
    version: Optional[int] = None,
) -> BitMatrix:
    """
    Encode ``content`` as a QR code and return its modules, quiet zone included.

    Args:
        content: Data to encode.
        border: Quiet zone width in modules.
        error_correction: One of "L", "M", "Q", "H".
        version: Fixed QR version (1-40); None picks the smallest that fits.
    """
    _require_content(BarcodeFormat.QR_CODE, content)
    level = _error_correction.get(str(error_correction).upper())
    if level is None:
        raise InvalidArgumentError(
            f"error_correction must be one of L, M, Q, H, got {error_correction!r}",
            barcode_format=BarcodeFormat.QR_CODE,
        )
    if border < 0:
        raise InvalidArgumentError(
            f"border must be >= 0, got {border}", barcode_format=BarcodeFormat.QR_CODE
        )

    try:
        qr = qrcode.QRCode(version=version, error_correction=level, border=border)
        qr.add_data(content)
        qr.make(fit=version is None)
        rows = qr.get_matrix()
    except (DataOverflowError, ValueError) as e:
        logger.error("QR encoding failed for %d characters: %s", len(content), e)
        raise MatrixSourceError(
            f"QR encoding failed: {e}", barcode_format=BarcodeFormat.QR_CODE
        ) from e

    return BitMatrix(rows)


def matrix_for(barcode_format: BarcodeFormat, content: str, **options: Any) -> BitMatrix:
    """
    Build a BitMatrix for any supported format.

    Keyword options go to ``qr_matrix`` for QR_CODE and to ``linear_matrix``
    otherwise.

    Example:
        >>> matrix_for(BarcodeFormat.EAN_13, "400638133393", height=30).width
        95
    """
    if not isinstance(barcode_format, BarcodeFormat):
        raise InvalidArgumentError(
            f"barcode_format must be BarcodeFormat enum, got {type(barcode_format)!r}"
        )
    if barcode_format is BarcodeFormat.QR_CODE:
        return qr_matrix(content, **options)
    return linear_matrix(barcode_format, content, **options)
