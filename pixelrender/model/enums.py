"""
model/enums.py

(Краткое RU: Перечисления форматов штрихкодов и параметров шрифта подписи.)

EN: Domain enums for the renderer: barcode symbologies and the font descriptor
fields stored as renderer configuration. No rendering logic here.
"""

from __future__ import annotations

from enum import Enum
from typing import Final, FrozenSet, Literal


class BarcodeFormat(str, Enum):
    AZTEC = "aztec"
    CODABAR = "codabar"
    CODE_39 = "code39"
    CODE_93 = "code93"
    CODE_128 = "code128"
    DATA_MATRIX = "datamatrix"
    EAN_8 = "ean8"
    EAN_13 = "ean13"
    ITF = "itf"
    MAXICODE = "maxicode"
    PDF_417 = "pdf417"
    QR_CODE = "qr"
    RSS_14 = "rss14"
    RSS_EXPANDED = "rss_expanded"
    UPC_A = "upca"
    UPC_E = "upce"
    UPC_EAN_EXTENSION = "upc_ean_extension"
    MSI = "msi"
    PLESSEY = "plessey"

    @property
    def is_one_dimensional(self) -> bool:
        return self not in _TWO_DIMENSIONAL

    @property
    def has_caption(self) -> bool:
        """True, если под символом резервируется место для подписи."""
        return self in CAPTION_FORMATS

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            BarcodeFormat.AZTEC: "Ацтек",
            BarcodeFormat.DATA_MATRIX: "DataMatrix",
            BarcodeFormat.ITF: "Чередующийся 2 из 5",
            BarcodeFormat.QR_CODE: "QR код",
            BarcodeFormat.RSS_EXPANDED: "GS1 DataBar расширенный",
            BarcodeFormat.UPC_EAN_EXTENSION: "Дополнение UPC/EAN",
        }
        names_en = {
            BarcodeFormat.AZTEC: "Aztec",
            BarcodeFormat.CODABAR: "Codabar",
            BarcodeFormat.CODE_39: "Code 39",
            BarcodeFormat.CODE_93: "Code 93",
            BarcodeFormat.CODE_128: "Code 128",
            BarcodeFormat.DATA_MATRIX: "DataMatrix",
            BarcodeFormat.EAN_8: "EAN-8",
            BarcodeFormat.EAN_13: "EAN-13",
            BarcodeFormat.ITF: "Interleaved 2 of 5",
            BarcodeFormat.MAXICODE: "MaxiCode",
            BarcodeFormat.PDF_417: "PDF417",
            BarcodeFormat.QR_CODE: "QR code",
            BarcodeFormat.RSS_14: "GS1 DataBar",
            BarcodeFormat.RSS_EXPANDED: "GS1 DataBar Expanded",
            BarcodeFormat.UPC_A: "UPC-A",
            BarcodeFormat.UPC_E: "UPC-E",
            BarcodeFormat.UPC_EAN_EXTENSION: "UPC/EAN extension",
            BarcodeFormat.MSI: "MSI Plessey",
            BarcodeFormat.PLESSEY: "Plessey",
        }
        if lang == "ru":
            return names_ru.get(self, names_en.get(self, self.value))
        return names_en.get(self, self.value)


_TWO_DIMENSIONAL: Final[FrozenSet[BarcodeFormat]] = frozenset(
    {
        BarcodeFormat.AZTEC,
        BarcodeFormat.DATA_MATRIX,
        BarcodeFormat.MAXICODE,
        BarcodeFormat.PDF_417,
        BarcodeFormat.QR_CODE,
    }
)

# Форматы, для которых под матрицей резервируется полоса подписи
CAPTION_FORMATS: Final[FrozenSet[BarcodeFormat]] = frozenset(
    {
        BarcodeFormat.CODE_39,
        BarcodeFormat.CODE_128,
        BarcodeFormat.EAN_13,
        BarcodeFormat.EAN_8,
        BarcodeFormat.CODABAR,
        BarcodeFormat.ITF,
        BarcodeFormat.UPC_A,
    }
)


class FontStretch(str, Enum):
    CONDENSED = "condensed"
    SEMI_CONDENSED = "semi_condensed"
    NORMAL = "normal"
    SEMI_EXPANDED = "semi_expanded"
    EXPANDED = "expanded"


class FontStyle(str, Enum):
    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


class FontWeight(str, Enum):
    LIGHT = "light"
    NORMAL = "normal"
    MEDIUM = "medium"
    BOLD = "bold"

    @property
    def numeric_value(self) -> int:
        mapping = {
            FontWeight.LIGHT: 300,
            FontWeight.NORMAL: 400,
            FontWeight.MEDIUM: 500,
            FontWeight.BOLD: 700,
        }
        return mapping[self]


DEFAULT_FONT_FAMILY: Final[str] = "Arial"
DEFAULT_FONT_SIZE: Final[float] = 10.0
DEFAULT_FONT_STRETCH: Final[FontStretch] = FontStretch.NORMAL
DEFAULT_FONT_STYLE: Final[FontStyle] = FontStyle.NORMAL
DEFAULT_FONT_WEIGHT: Final[FontWeight] = FontWeight.NORMAL


__all__ = [
    "BarcodeFormat",
    "CAPTION_FORMATS",
    "FontStretch",
    "FontStyle",
    "FontWeight",
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_FONT_STRETCH",
    "DEFAULT_FONT_STYLE",
    "DEFAULT_FONT_WEIGHT",
]
