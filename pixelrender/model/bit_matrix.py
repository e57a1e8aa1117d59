"""
RU: Неизменяемая булева матрица модулей штрихкода.
EN: Immutable boolean grid of barcode modules, addressed as ``matrix[x, y]``.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence, Tuple, Union

from pixelrender.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

__all__ = ["BitMatrix"]


class BitMatrix:
    """
    Rectangular width x height grid of booleans; True marks a foreground module.

    Instances are read-only once built. Use the ``from_rows``, ``parse`` and
    ``from_modules`` constructors.

    Examples:
        >>> m = BitMatrix.parse("X.X\\n.X.")
        >>> m.width, m.height
        (3, 2)
        >>> m[1, 1]
        True
    """

    __slots__ = ("_rows", "_width", "_height")

    def __init__(self, rows: Sequence[Sequence[Any]] = ()) -> None:
        frozen = tuple(tuple(bool(cell) for cell in row) for row in rows)
        width = len(frozen[0]) if frozen else 0
        for y, row in enumerate(frozen):
            if len(row) != width:
                logger.error("Row %d has %d cells, expected %d", y, len(row), width)
                raise InvalidArgumentError(
                    f"BitMatrix rows must have equal length: row {y} has "
                    f"{len(row)} cells, expected {width}"
                )
        self._rows: Tuple[Tuple[bool, ...], ...] = frozen
        self._width = width
        self._height = len(frozen)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> "BitMatrix":
        """Build from any iterable of rows of truthy/falsy cells."""
        return cls([list(row) for row in rows])

    @classmethod
    def parse(cls, text: str, set_char: str = "X", unset_char: str = ".") -> "BitMatrix":
        """
        Разобрать текстовое представление: одна строка текста на строку матрицы.

        Пустые строки в начале и в конце игнорируются.

        Raises:
            InvalidArgumentError: символ не равен set_char/unset_char или
                строки разной длины.
        """
        if set_char == unset_char:
            raise InvalidArgumentError("set_char and unset_char must differ")
        lines = text.strip("\r\n").splitlines()
        rows = []
        for y, line in enumerate(lines):
            row = []
            for x, ch in enumerate(line):
                if ch == set_char:
                    row.append(True)
                elif ch == unset_char:
                    row.append(False)
                else:
                    raise InvalidArgumentError(
                        f"Unexpected character {ch!r} at ({x}, {y})",
                        context={"set_char": set_char, "unset_char": unset_char},
                    )
            rows.append(row)
        return cls(rows)

    @classmethod
    def from_modules(
        cls,
        modules: Union[str, Sequence[Any]],
        height: int,
        module_width: int = 1,
        quiet_zone: int = 0,
    ) -> "BitMatrix":
        """
        Растянуть одномерный ряд модулей до матрицы высотой ``height``.

        Args:
            modules: "1"/"0" строка или последовательность булевых значений.
            height: Число строк матрицы.
            module_width: Ширина одного модуля в ячейках.
            quiet_zone: Пустые ячейки слева и справа.
        """
        if height <= 0:
            raise InvalidArgumentError(f"height must be positive, got {height}")
        if module_width <= 0:
            raise InvalidArgumentError(f"module_width must be positive, got {module_width}")
        if quiet_zone < 0:
            raise InvalidArgumentError(f"quiet_zone must be >= 0, got {quiet_zone}")

        if isinstance(modules, str):
            bits = [ch not in "0 " for ch in modules]
        else:
            bits = [bool(m) for m in modules]

        margin = [False] * quiet_zone
        row = margin + [bit for bit in bits for _ in range(module_width)] + margin
        return cls([row] * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def get(self, x: int, y: int) -> bool:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"({x}, {y}) is outside the {self._width}x{self._height} matrix"
            )
        return self._rows[y][x]

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        x, y = key
        return self.get(x, y)

    def row(self, y: int) -> Tuple[bool, ...]:
        if not 0 <= y < self._height:
            raise IndexError(f"row {y} is outside the {self._height}-row matrix")
        return self._rows[y]

    def to_string(self, set_char: str = "X", unset_char: str = ".") -> str:
        return "\n".join(
            "".join(set_char if cell else unset_char for cell in row) for row in self._rows
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BitMatrix(width={self._width}, height={self._height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)
