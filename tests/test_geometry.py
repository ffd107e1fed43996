import pytest

from numcraft.geometry import (
    CircleMetrics,
    RectangleMetrics,
    area_exceeds_perimeter,
    circle,
    rectangle,
)


def test_rectangle_worked_example():
    assert rectangle(2, 3) == RectangleMetrics(area=6, perimeter=10)


@pytest.mark.parametrize("length, width", [(1, 7), (2.5, 4), (10, 0.5)])
def test_rectangle_is_symmetric(length, width):
    assert rectangle(length, width) == rectangle(width, length)


@pytest.mark.parametrize("length, width", [(1, 7), (2.5, 4), (3, 3)])
def test_rectangle_scaling(length, width):
    base = rectangle(length, width)
    doubled = rectangle(2 * length, 2 * width)
    assert doubled.area == pytest.approx(4 * base.area)
    assert doubled.perimeter == pytest.approx(2 * base.perimeter)


def test_unit_circle_uses_source_pi():
    metrics = circle(1)
    assert metrics.area == pytest.approx(3.1415)
    assert metrics.circumference == pytest.approx(2 * 3.1415)


@pytest.mark.parametrize("radius", [0.5, 2, 7.25])
def test_circle_scales_with_radius(radius):
    unit = circle(1)
    metrics = circle(radius)
    assert metrics.area == pytest.approx(unit.area * radius * radius)
    assert metrics.circumference == pytest.approx(unit.circumference * radius)


def test_zero_radius_circle():
    assert circle(0) == CircleMetrics(area=0, circumference=0)


def test_square_of_side_four_is_not_larger():
    # area and perimeter are equal, so area does not exceed it
    metrics = rectangle(4, 4)
    assert metrics.area == metrics.perimeter
    assert area_exceeds_perimeter(4, 4) is False


def test_large_rectangle_area_exceeds_perimeter():
    assert area_exceeds_perimeter(10, 10) is True


def test_thin_rectangle_perimeter_wins():
    assert area_exceeds_perimeter(1, 100) is False