"""Student marks, grades and a city's literacy figures."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "MarksReport",
    "PopulationReport",
    "grade",
    "evaluate_marks",
    "analyze_population",
]

MAX_MARKS_PER_SUBJECT = 100

_GRADE_LADDER = (
    (90, "A+ (Excellent)"),
    (80, "A (Very Good)"),
    (70, "B (Good)"),
    (60, "C (Satisfactory)"),
    (50, "D (Pass)"),
)
_FAIL = "F (Fail)"


@dataclass(frozen=True)
class MarksReport:
    """Total marks, percentage and grade of one student."""

    total: float
    percentage: float
    grade: str


@dataclass(frozen=True)
class PopulationReport:
    """Breakdown of a city's population by sex and literacy."""

    men: int
    women: int
    literate_men: int
    literate_women: int
    illiterate_men: int
    illiterate_women: int


def grade(percentage: float) -> str:
    """Return the letter grade and its description for a percentage."""
    for threshold, label in _GRADE_LADDER:
        if percentage >= threshold:
            return label
    return _FAIL


def evaluate_marks(marks: Sequence[float]) -> MarksReport:
    """Total the marks, each out of 100, and grade the percentage.

    Raises ValueError when no marks are given.
    """
    if not marks:
        raise ValueError("no marks to evaluate")
    total = sum(marks)
    percentage = total / (MAX_MARKS_PER_SUBJECT * len(marks)) * 100
    return MarksReport(total=total, percentage=percentage, grade=grade(percentage))


def _percent_of(percent: int, total: int) -> int:
    product = percent * total
    share = abs(product) // 100
    return -share if product < 0 else share


def analyze_population(
    total: int, men_percent: int, literacy_percent: int, literate_men_percent: int
) -> PopulationReport:
    """Split a population by the given whole-number percentages.

    Every percentage is taken of the whole population, and shares are
    rounded toward zero.
    """
    men = _percent_of(men_percent, total)
    women = total - men
    total_literate = _percent_of(literacy_percent, total)
    literate_men = _percent_of(literate_men_percent, total)
    literate_women = total_literate - literate_men
    return PopulationReport(
        men=men,
        women=women,
        literate_men=literate_men,
        literate_women=literate_women,
        illiterate_men=men - literate_men,
        illiterate_women=women - literate_women,
    )