"""The weekday on which a year begins."""

from __future__ import annotations

__all__ = ["first_weekday"]

BASE_YEAR = 1900
_DAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _truncating_mod(a: int, b: int) -> int:
    return a - b * _truncating_div(a, b)


def first_weekday(year: int) -> str:
    """Return the lower-case name of the weekday of 1 January of ``year``.

    Every fourth year after 1900 is counted as a leap year. Raises
    ValueError for years the count cannot place on a weekday.
    """
    elapsed = (year - 1) - BASE_YEAR
    leap_years = _truncating_div(elapsed, 4)
    common_years = elapsed - leap_years
    total_days = common_years * 365 + leap_years * 366 + 1
    day = _truncating_mod(total_days, 7)
    if day < 0:
        raise ValueError(f"cannot find the first weekday of year {year}")
    return _DAYS[day]