"""
RU: Контрольная цифра по модулю 10 (EAN/UPC).
EN: Weighted modulo-10 check digit used by EAN/UPC symbologies.

Weights alternate 3, 1, 3, ... starting from the rightmost digit of the
payload; the check digit brings the weighted sum to a multiple of 10.
"""

from __future__ import annotations

import logging

from pixelrender.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

__all__ = [
    "checksum_digit_modulo10",
    "calculate_checksum_digit_modulo10",
    "is_valid_modulo10",
]


def _require_digits(contents: str) -> None:
    if not isinstance(contents, str) or not contents:
        logger.error("Checksum input is empty or not a string: %r", contents)
        raise InvalidArgumentError("Checksum input must be a non-empty string of digits")
    if not (contents.isascii() and contents.isdigit()):
        logger.error("Checksum input contains non-digit characters: %r", contents)
        raise InvalidArgumentError(
            f"Checksum input must contain only digits 0-9, got {contents!r}"
        )


def checksum_digit_modulo10(contents: str) -> int:
    """
    Вычислить контрольную цифру для строки цифр.

    Raises:
        InvalidArgumentError: пустая строка или нецифровые символы.

    Example:
        >>> checksum_digit_modulo10("400638133393")
        1
    """
    _require_digits(contents)
    odd_sum = sum(int(ch) for ch in contents[-1::-2])
    even_sum = sum(int(ch) for ch in contents[-2::-2])
    return (10 - (odd_sum * 3 + even_sum) % 10) % 10


def calculate_checksum_digit_modulo10(contents: str) -> str:
    """
    Return ``contents`` with its modulo-10 check digit appended.

    Example:
        >>> calculate_checksum_digit_modulo10("9638507")
        '96385074'
    """
    return contents + str(checksum_digit_modulo10(contents))


def is_valid_modulo10(code: str) -> bool:
    """True if the last digit of ``code`` is the correct check digit for the rest."""
    if not isinstance(code, str) or len(code) < 2:
        return False
    if not (code.isascii() and code.isdigit()):
        return False
    return checksum_digit_modulo10(code[:-1]) == int(code[-1])
