"""Conversions between decimal and positional bases from 2 to 10.

Numbers in other bases are written as ordinary integers whose decimal digits
are the digits in that base, so octal 17 is the integer ``17``.
"""

from __future__ import annotations

__all__ = ["InvalidDigitError", "to_decimal", "from_decimal", "binary_digits"]


class InvalidDigitError(ValueError):
    """A digit is too large for the base it is read in."""

    def __init__(self, number: int, base: int) -> None:
        super().__init__(
            f"{number} is not a valid base-{base} number; "
            f"digits must be between 0 and {base - 1}"
        )
        self.number = number
        self.base = base


def _check_base(base: int) -> None:
    if not 2 <= base <= 10:
        raise ValueError(f"base must be between 2 and 10, not {base}")


def to_decimal(number: int, base: int, strict: bool = False) -> int:
    """Read the decimal digits of ``number`` as base-``base`` digits.

    Without ``strict`` every digit is weighted by its place value even when
    it is too large for the base; with ``strict`` such a digit raises
    InvalidDigitError. The sign of ``number`` carries over to the result.
    """
    _check_base(base)
    sign = -1 if number < 0 else 1
    remaining = abs(number)
    total = 0
    weight = 1
    while remaining:
        remaining, digit = divmod(remaining, 10)
        if strict and digit >= base:
            raise InvalidDigitError(number, base)
        total += digit * weight
        weight *= base
    return sign * total


def from_decimal(n: int, base: int) -> int:
    """Write ``n`` in base ``base``, returned as an integer of those digits.

    The sign of ``n`` carries over to the result.
    """
    _check_base(base)
    sign = -1 if n < 0 else 1
    remaining = abs(n)
    result = 0
    place = 1
    while remaining:
        remaining, digit = divmod(remaining, base)
        result += digit * place
        place *= 10
    return sign * result


def binary_digits(n: int) -> list[int]:
    """Return the binary digits of ``n``, most significant first.

    Zero gives ``[0]``; negative numbers have no digits and give ``[]``.
    """
    if n == 0:
        return [0]
    digits: list[int] = []
    while n > 0:
        n, bit = divmod(n, 2)
        digits.append(bit)
    digits.reverse()
    return digits