"""
RU: Подпись под одномерным штрихкодом: нужна ли она, сколько строк пикселей
резервировать и какой текст показать.
EN: Human-readable caption decision and text formatting for 1D barcodes.

The caption text is only computed here; drawing it into the reserved strip is
left to whatever text-layout engine hosts the pixel buffer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Final, Optional, Tuple

from pixelrender.exceptions import InvalidArgumentError
from pixelrender.model.enums import CAPTION_FORMATS, BarcodeFormat
from pixelrender.renderer.checksum import calculate_checksum_digit_modulo10

logger = logging.getLogger(__name__)

__all__ = ["CAPTION_HEIGHT", "CaptionSpec", "NO_CAPTION", "format_caption"]

# Высота полосы под подписью, в строках пикселей
CAPTION_HEIGHT: Final[int] = 16

GROUP_SEPARATOR: Final[str] = "   "

# Полная длина кода и позиции вставки разделителя (по убыванию индекса)
_EAN_LAYOUT: Final[Dict[BarcodeFormat, Tuple[int, Tuple[int, ...]]]] = {
    BarcodeFormat.EAN_8: (8, (4,)),
    BarcodeFormat.EAN_13: (13, (7, 1)),
}


@dataclass(frozen=True)
class CaptionSpec:
    """Caption decision for one render call."""

    show: bool
    reserved_rows: int
    text: str


NO_CAPTION: Final[CaptionSpec] = CaptionSpec(show=False, reserved_rows=0, text="")


def _format_ean(barcode_format: BarcodeFormat, content: str) -> str:
    full_length, insert_at = _EAN_LAYOUT[barcode_format]
    if len(content) not in (full_length - 1, full_length):
        logger.error(
            "%s caption content has %d characters, expected %d or %d",
            barcode_format.name,
            len(content),
            full_length - 1,
            full_length,
        )
        raise InvalidArgumentError(
            f"{barcode_format.name} caption needs {full_length - 1} or "
            f"{full_length} digits, got {len(content)}",
            barcode_format=barcode_format,
        )
    if not (content.isascii() and content.isdigit()):
        logger.error("%s caption content is not numeric: %r", barcode_format.name, content)
        raise InvalidArgumentError(
            f"{barcode_format.name} caption must contain only digits",
            barcode_format=barcode_format,
        )

    text = content
    if len(text) < full_length:
        text = calculate_checksum_digit_modulo10(text)
    # Сначала больший индекс, чтобы меньший не сдвинулся
    for index in insert_at:
        text = text[:index] + GROUP_SEPARATOR + text[index:]
    return text


def format_caption(barcode_format: BarcodeFormat, content: Optional[str]) -> CaptionSpec:
    """
    Определить подпись для формата и данных.

    Подпись показывается только для форматов из CAPTION_FORMATS и непустых
    данных; тогда под матрицей резервируется CAPTION_HEIGHT строк.

    EAN-8 и EAN-13 дополняются контрольной цифрой (если её нет) и
    разбиваются на группы тремя пробелами; остальные форматы выводятся
    без изменений.

    Raises:
        InvalidArgumentError: для EAN-8/EAN-13 с неверной длиной или
            нецифровыми данными.

    Example:
        >>> format_caption(BarcodeFormat.EAN_13, "400638133393").text
        '4   006381   333931'
        >>> format_caption(BarcodeFormat.QR_CODE, "hello").show
        False
    """
    if not content or barcode_format not in CAPTION_FORMATS:
        return NO_CAPTION

    if barcode_format in _EAN_LAYOUT:
        text = _format_ean(barcode_format, content)
    else:
        text = content

    return CaptionSpec(show=True, reserved_rows=CAPTION_HEIGHT, text=text)
