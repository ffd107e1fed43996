"""Temperature and distance unit conversions."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "Distance",
    "fahrenheit_to_celsius",
    "celsius_to_fahrenheit",
    "distance_from_km",
    "distance_from_meters",
    "distance_from_feet",
]

METERS_PER_KM = 1000
FEET_PER_METER = 3.28
INCHES_PER_FOOT = 12
CENTIMETERS_PER_INCH = 2.5


@dataclass(frozen=True)
class Distance:
    """One distance expressed in several units."""

    km: float
    meters: float
    feet: float
    inches: float
    centimeters: float


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert degrees Fahrenheit to degrees Celsius."""
    return 5.0 / 9 * (fahrenheit - 32)


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return 9.0 / 5 * celsius + 32


def _distance(km: float, meters: float, feet: float) -> Distance:
    inches = feet * INCHES_PER_FOOT
    return Distance(
        km=km,
        meters=meters,
        feet=feet,
        inches=inches,
        centimeters=inches * CENTIMETERS_PER_INCH,
    )


def distance_from_km(km: float) -> Distance:
    """Express a distance given in kilometres in every unit."""
    meters = km * METERS_PER_KM
    return _distance(km, meters, meters * FEET_PER_METER)


def distance_from_meters(meters: float) -> Distance:
    """Express a distance given in metres in every unit."""
    return _distance(meters / METERS_PER_KM, meters, meters * FEET_PER_METER)


def distance_from_feet(feet: float) -> Distance:
    """Express a distance given in feet in every unit."""
    meters = feet / FEET_PER_METER
    return _distance(meters / METERS_PER_KM, meters, feet)