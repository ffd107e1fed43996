"""Comparisons of a few values: the largest, the youngest, and swapping."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

__all__ = ["largest_of_three", "youngest", "swap"]

T = TypeVar("T")
U = TypeVar("U")


def largest_of_three(a: int, b: int, c: int) -> int:
    """Return the largest of three numbers."""
    if a > b:
        return a if a > c else c
    return b if b > c else c


def youngest(ages: Mapping[str, int]) -> list[str]:
    """Return the names of everyone sharing the lowest age.

    Names come back in the order the mapping gives them. Raises ValueError
    when there is nobody to compare.
    """
    if not ages:
        raise ValueError("no ages to compare")
    lowest = min(ages.values())
    return [name for name, age in ages.items() if age <= lowest]


def swap(a: T, b: U) -> tuple[U, T]:
    """Return the two values in the other order."""
    return b, a