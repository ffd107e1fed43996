"""Area and perimeter of rectangles and circles."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "RectangleMetrics",
    "CircleMetrics",
    "rectangle",
    "circle",
    "area_exceeds_perimeter",
]

PI = 3.1415


@dataclass(frozen=True)
class RectangleMetrics:
    """Area and perimeter of a rectangle."""

    area: float
    perimeter: float


@dataclass(frozen=True)
class CircleMetrics:
    """Area and circumference of a circle."""

    area: float
    circumference: float


def rectangle(length: float, width: float) -> RectangleMetrics:
    """Return the area and perimeter of a rectangle."""
    return RectangleMetrics(area=length * width, perimeter=2 * (length + width))


def circle(radius: float) -> CircleMetrics:
    """Return the area and circumference of a circle, taking pi as 3.1415."""
    return CircleMetrics(area=PI * radius * radius, circumference=2 * PI * radius)


def area_exceeds_perimeter(length: float, width: float) -> bool:
    """Tell whether a rectangle's area is strictly greater than its perimeter."""
    metrics = rectangle(length, width)
    return metrics.area > metrics.perimeter