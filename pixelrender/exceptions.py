"""
Исключения пакета pixelrender.

Иерархия:
    RenderError (базовое)
    ├── InvalidArgumentError (также ValueError)
    └── MatrixSourceError

Example:
    >>> from pixelrender.exceptions import RenderError
    >>> try:
    ...     renderer.render(matrix, BarcodeFormat.EAN_13, "12AB")
    ... except RenderError as e:
    ...     logger.error("Render failed: %s", e)
    ...     print(e.barcode_format)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__: list[str] = [
    "RenderError",
    "InvalidArgumentError",
    "MatrixSourceError",
]


class RenderError(Exception):
    """
    Базовое исключение для всех ошибок рендеринга.

    Attributes:
        message: Человекочитаемое сообщение об ошибке
        barcode_format: Формат штрихкода, при обработке которого произошла
            ошибка (опционально)
        context: Дополнительный контекст для отладки (опционально)
    """

    def __init__(
        self,
        message: str,
        *,
        barcode_format: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.barcode_format = barcode_format
        self.context = context or {}

    def __str__(self) -> str:
        parts = [self.__class__.__name__, ": ", self.message]

        if self.barcode_format is not None:
            name = getattr(self.barcode_format, "name", self.barcode_format)
            parts.append(f" [format={name}]")

        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")

        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"barcode_format={self.barcode_format!r}, "
            f"context={self.context!r})"
        )


class InvalidArgumentError(RenderError, ValueError):
    """
    Недопустимый аргумент: пустая или вырожденная матрица, неверный тип
    формата, нецифровые данные для контрольной суммы, неверная длина
    подписи EAN.
    """


class MatrixSourceError(RenderError):
    """Ошибка построения BitMatrix внешним кодировщиком (python-barcode, qrcode)."""
