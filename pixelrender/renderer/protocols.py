"""
Протокольный интерфейс рендереров BitMatrix.

typing.Protocol задаёт контракт без явного наследования; протокол помечен
@runtime_checkable для проверок isinstance().

Example:
    >>> from pixelrender.renderer.pixel_renderer import PixelBufferRenderer
    >>> isinstance(PixelBufferRenderer(), BarcodeRenderer)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from pixelrender.model.bit_matrix import BitMatrix
    from pixelrender.model.enums import BarcodeFormat

__all__ = ["BarcodeRenderer"]

TOutput_co = TypeVar("TOutput_co", covariant=True)


@runtime_checkable
class BarcodeRenderer(Protocol[TOutput_co]):
    """
    Протокол рендерера: BitMatrix + формат + данные -> выходной объект.

    Реализации не должны изменять собственную конфигурацию во время
    ``render``; каждый вызов создаёт новый результат.
    """

    def render(
        self,
        matrix: "BitMatrix",
        barcode_format: "BarcodeFormat",
        content: Optional[str] = None,
    ) -> TOutput_co:
        """Отрендерить матрицу в выходной формат."""
        ...
