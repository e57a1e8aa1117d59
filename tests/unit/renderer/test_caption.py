from typing import Optional

import pytest

from pixelrender.exceptions import InvalidArgumentError
from pixelrender.model.enums import CAPTION_FORMATS, BarcodeFormat
from pixelrender.renderer.caption import (
    CAPTION_HEIGHT,
    NO_CAPTION,
    CaptionSpec,
    format_caption,
)
from pixelrender.renderer.checksum import is_valid_modulo10


class TestFormatCaption:
    """Caption decision and text per barcode format."""

    # === Visibility ===
    @pytest.mark.parametrize("content", [None, ""])
    def test_no_caption_without_content(self, content: Optional[str]) -> None:
        for barcode_format in BarcodeFormat:
            assert format_caption(barcode_format, content) == NO_CAPTION

    @pytest.mark.parametrize(
        "barcode_format",
        [f for f in BarcodeFormat if f not in CAPTION_FORMATS],
    )
    def test_no_caption_for_ineligible_formats(self, barcode_format: BarcodeFormat) -> None:
        spec = format_caption(barcode_format, "12345")
        assert spec.show is False
        assert spec.reserved_rows == 0
        assert spec.text == ""

    def test_caption_height_is_16_rows(self) -> None:
        assert CAPTION_HEIGHT == 16
        spec = format_caption(BarcodeFormat.CODE_39, "ABC-123")
        assert spec == CaptionSpec(show=True, reserved_rows=16, text="ABC-123")

    # === Pass-through formats ===
    @pytest.mark.parametrize(
        "barcode_format,content",
        [
            (BarcodeFormat.CODE_39, "HELLO WORLD"),
            (BarcodeFormat.CODE_128, "Test123!@#"),
            (BarcodeFormat.CODABAR, "A123B"),
            (BarcodeFormat.ITF, "1234"),
            (BarcodeFormat.UPC_A, "03600029145"),
        ],
    )
    def test_other_formats_pass_text_through(
        self, barcode_format: BarcodeFormat, content: str
    ) -> None:
        spec = format_caption(barcode_format, content)
        assert spec.show is True
        assert spec.text == content

    # === EAN-13 ===
    def test_ean13_appends_checksum_and_groups(self) -> None:
        spec = format_caption(BarcodeFormat.EAN_13, "400638133393")
        assert spec.text == "4   006381   333931"
        assert is_valid_modulo10(spec.text.replace(" ", ""))

    def test_ean13_full_length_keeps_digits(self) -> None:
        spec = format_caption(BarcodeFormat.EAN_13, "4006381333931")
        assert spec.text == "4   006381   333931"

    def test_ean13_group_positions(self) -> None:
        text = format_caption(BarcodeFormat.EAN_13, "590123412345").text
        digits = "5901234123457"
        assert text == digits[:1] + "   " + digits[1:7] + "   " + digits[7:]

    # === EAN-8 ===
    def test_ean8_full_length_no_checksum(self) -> None:
        spec = format_caption(BarcodeFormat.EAN_8, "96385074")
        assert spec.text == "9638   5074"

    def test_ean8_short_appends_checksum(self) -> None:
        spec = format_caption(BarcodeFormat.EAN_8, "9638507")
        assert spec.text == "9638   5074"
        assert spec.reserved_rows == CAPTION_HEIGHT

    # === Bounds ===
    @pytest.mark.parametrize(
        "barcode_format,content",
        [
            (BarcodeFormat.EAN_13, "12345"),
            (BarcodeFormat.EAN_13, "40063813339312"),
            (BarcodeFormat.EAN_8, "123456"),
            (BarcodeFormat.EAN_8, "123456789"),
        ],
    )
    def test_ean_wrong_length_rejected(
        self, barcode_format: BarcodeFormat, content: str
    ) -> None:
        with pytest.raises(InvalidArgumentError, match="digits, got"):
            format_caption(barcode_format, content)

    @pytest.mark.parametrize(
        "barcode_format,content",
        [
            (BarcodeFormat.EAN_13, "40063813339A"),
            (BarcodeFormat.EAN_8, "9638 07"),
        ],
    )
    def test_ean_non_digits_rejected(
        self, barcode_format: BarcodeFormat, content: str
    ) -> None:
        with pytest.raises(InvalidArgumentError, match="only digits") as excinfo:
            format_caption(barcode_format, content)
        assert excinfo.value.barcode_format is barcode_format
