"""
RU: Растеризация BitMatrix в буфер упакованных 32-битных пикселей.
EN: Renders a BitMatrix into a PackedPixelBuffer, leaving a blank strip under
one-dimensional symbols for their human-readable caption.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from pixelrender.exceptions import InvalidArgumentError
from pixelrender.model.bit_matrix import BitMatrix
from pixelrender.model.color import BLACK, WHITE, Color
from pixelrender.model.enums import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_FONT_STRETCH,
    DEFAULT_FONT_STYLE,
    DEFAULT_FONT_WEIGHT,
    BarcodeFormat,
    FontStretch,
    FontStyle,
    FontWeight,
)
from pixelrender.renderer.caption import format_caption
from pixelrender.renderer.pixel_buffer import PackedPixelBuffer, new_pixel_array

logger = logging.getLogger(__name__)

__all__ = ["PixelBufferRenderer"]


def _as_color(value: Union[Color, str]) -> Color:
    if isinstance(value, Color):
        return value
    return Color.from_string(value)


class PixelBufferRenderer:
    """
    Renders a BitMatrix to a flat buffer of packed ARGB pixels.

    Args:
        foreground: Colour of set modules (Color or colour string).
        background: Colour of unset modules.
        font_family: Caption font family.
        font_size: Caption font size, must be positive.
        font_stretch: Caption font stretch.
        font_style: Caption font style.
        font_weight: Caption font weight.

    The font fields describe how an external text engine should draw
    ``buffer.caption.text``; the renderer itself never draws glyphs.
    Configuration is only read by ``render``, so one instance may serve
    concurrent renders as long as nobody reassigns its attributes meanwhile.

    Examples:
        >>> matrix = BitMatrix.parse("X.\\n.X")
        >>> buf = PixelBufferRenderer().render(matrix, BarcodeFormat.QR_CODE, "hi")
        >>> buf.pixel(0, 0) == BLACK.packed
        True
    """

    def __init__(
        self,
        foreground: Union[Color, str] = BLACK,
        background: Union[Color, str] = WHITE,
        font_family: str = DEFAULT_FONT_FAMILY,
        font_size: float = DEFAULT_FONT_SIZE,
        font_stretch: FontStretch = DEFAULT_FONT_STRETCH,
        font_style: FontStyle = DEFAULT_FONT_STYLE,
        font_weight: FontWeight = DEFAULT_FONT_WEIGHT,
    ) -> None:
        if font_size <= 0:
            raise InvalidArgumentError(f"font_size must be positive, got {font_size}")
        self.foreground: Color = _as_color(foreground)
        self.background: Color = _as_color(background)
        self.font_family = font_family
        self.font_size = float(font_size)
        self.font_stretch = FontStretch(font_stretch)
        self.font_style = FontStyle(font_style)
        self.font_weight = FontWeight(font_weight)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "PixelBufferRenderer":
        """
        Создать рендерер из словаря конфигурации (см. pixelrender.load_config).

        Отсутствующие ключи получают значения по умолчанию; лишние ключи
        игнорируются.
        """
        try:
            return cls(
                foreground=config.get("foreground", BLACK),
                background=config.get("background", WHITE),
                font_family=config.get("font_family", DEFAULT_FONT_FAMILY),
                font_size=float(config.get("font_size", DEFAULT_FONT_SIZE)),
                font_stretch=FontStretch(config.get("font_stretch", DEFAULT_FONT_STRETCH)),
                font_style=FontStyle(config.get("font_style", DEFAULT_FONT_STYLE)),
                font_weight=FontWeight(config.get("font_weight", DEFAULT_FONT_WEIGHT)),
            )
        except InvalidArgumentError:
            raise
        except (TypeError, ValueError) as e:
            logger.error("Invalid renderer configuration: %s", e)
            raise InvalidArgumentError(f"Invalid renderer configuration: {e}") from e

    def _validate(self, matrix: Any, barcode_format: Any) -> None:
        if matrix is None:
            logger.error("render() called without a matrix")
            raise InvalidArgumentError("matrix must not be None")
        if not isinstance(matrix, BitMatrix):
            logger.error("matrix must be BitMatrix, got %r", type(matrix))
            raise InvalidArgumentError(f"matrix must be BitMatrix, got {type(matrix).__name__}")
        if matrix.width <= 0 or matrix.height <= 0:
            logger.error("Degenerate matrix %dx%d", matrix.width, matrix.height)
            raise InvalidArgumentError(
                f"matrix dimensions must be positive, got {matrix.width}x{matrix.height}"
            )
        if not isinstance(barcode_format, BarcodeFormat):
            logger.error("barcode_format must be BarcodeFormat, got %r", type(barcode_format))
            raise InvalidArgumentError(
                f"barcode_format must be BarcodeFormat enum, got {type(barcode_format)!r}"
            )

    def render(
        self,
        matrix: BitMatrix,
        barcode_format: BarcodeFormat,
        content: Optional[str] = None,
    ) -> PackedPixelBuffer:
        """
        Растеризовать матрицу.

        Строки ``[0, height - reserved)`` заполняются цветом переднего плана
        или фона по ячейкам матрицы; нижние ``reserved`` строк (16 для
        одномерных форматов с подписью) остаются нулевыми, т.е. прозрачными.

        Args:
            matrix: Матрица модулей, width > 0 и height > 0.
            barcode_format: Формат штрихкода.
            content: Закодированные данные; None или "" - без подписи.

        Returns:
            Новый PackedPixelBuffer; ``buffer.caption`` содержит текст подписи.

        Raises:
            InvalidArgumentError: неверная матрица, формат или данные подписи.
        """
        self._validate(matrix, barcode_format)
        caption = format_caption(barcode_format, content)

        foreground = self.foreground.packed
        background = self.background.packed
        width = matrix.width
        height = matrix.height
        empty_area = caption.reserved_rows

        if height < empty_area:
            logger.warning(
                "Matrix height %d is smaller than the %d-row caption strip; "
                "no module rows will be drawn",
                height,
                empty_area,
            )

        pixels = new_pixel_array(width * height)
        index = 0
        for y in range(max(0, height - empty_area)):
            row = matrix.row(y)
            for x in range(width):
                pixels[index] = foreground if row[x] else background
                index += 1

        logger.debug(
            "Rendered %s %dx%d, caption=%r, reserved rows=%d",
            barcode_format.name,
            width,
            height,
            caption.text,
            empty_area,
        )
        return PackedPixelBuffer(width=width, height=height, pixels=pixels, caption=caption)
