"""Digit arithmetic on decimal integers."""

from __future__ import annotations

__all__ = ["digit_sum", "first_digit", "last_digit", "first_last_sum"]


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``, ignoring its sign."""
    n = abs(n)
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit
    return total


def first_digit(n: int) -> int:
    """Return the leading decimal digit of ``n``, ignoring its sign."""
    n = abs(n)
    while n >= 10:
        n //= 10
    return n


def last_digit(n: int) -> int:
    """Return the units digit of ``n``, ignoring its sign."""
    return abs(n) % 10


def first_last_sum(n: int) -> int:
    """Return the sum of the first and last decimal digits of ``n``."""
    return first_digit(n) + last_digit(n)