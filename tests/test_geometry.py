import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from numgeo.geometry import (
    Circle,
    Point,
    circle_from_three_points,
    circle_from_two_points,
    cross,
    distance2,
    is_point_on_segment,
    segments_intersect,
)

coords = st.integers(min_value=-1000, max_value=1000).map(float)
points = st.builds(Point, coords, coords)


@given(points, points)
def test_distance2_symmetric(p, q):
    assert distance2(p, q) == distance2(q, p)


@given(points)
def test_distance2_self_is_zero(p):
    assert distance2(p, p) == 0.0


def test_distance2_value():
    assert distance2(Point(0.0, 0.0), Point(3.0, 4.0)) == 25.0


def test_two_point_circle_of_coincident_points_is_none():
    assert circle_from_two_points(Point(1.0, 1.0), Point(1.0, 1.0)) is None


@given(points, points)
def test_two_point_circle_passes_through_both(p, q):
    circle = circle_from_two_points(p, q)
    if p == q:
        assert circle is None
    else:
        assert math.isclose(math.sqrt(distance2(circle.center, p)), circle.rad, rel_tol=1e-9)
        assert math.isclose(math.sqrt(distance2(circle.center, q)), circle.rad, rel_tol=1e-9)
        assert circle.contains(p) and circle.contains(q)


def test_three_point_circle_is_equidistant():
    a, b, c = Point(0.0, 0.0), Point(4.0, 0.0), Point(0.0, 3.0)
    circle = circle_from_three_points(a, b, c)
    for p in (a, b, c):
        assert math.isclose(math.sqrt(distance2(circle.center, p)), circle.rad, rel_tol=1e-9)


def test_collinear_points_use_farthest_pair():
    a, b, c = Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 2.0)
    assert circle_from_three_points(a, b, c) == circle_from_two_points(a, c)
    assert circle_from_three_points(b, a, c) == circle_from_two_points(a, c)


def test_three_identical_points_give_none():
    p = Point(5.0, 5.0)
    assert circle_from_three_points(p, p, p) is None


def test_contains_boundary_and_outside():
    circle = Circle(Point(0.0, 0.0), 1.0)
    assert circle.contains(Point(1.0, 0.0))
    assert circle.contains(Point(0.0, 0.0))
    assert not circle.contains(Point(1.1, 0.0))


def test_negative_radius_contains_nothing():
    assert not Circle(Point(0.0, 0.0), -1.0).contains(Point(0.0, 0.0))


@given(points, points, points)
def test_cross_antisymmetric(a, b, c):
    assert cross(a, b, c) == -cross(a, c, b)


def test_cross_collinear_is_zero():
    assert cross(Point(0.0, 0.0), Point(1.0, 1.0), Point(3.0, 3.0)) == 0.0


@pytest.mark.parametrize(
    "p, expected",
    [
        (Point(1.0, 1.0), True),
        (Point(0.0, 0.0), True),
        (Point(2.0, 2.0), True),
        (Point(3.0, 3.0), False),
        (Point(1.0, 0.0), False),
    ],
)
def test_point_on_segment(p, expected):
    assert is_point_on_segment(p, Point(0.0, 0.0), Point(2.0, 2.0)) is expected


@pytest.mark.parametrize(
    "a, b, c, d, expected",
    [
        (Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0), True),
        (Point(0, 0), Point(2, 0), Point(0, 1), Point(2, 1), False),
        (Point(0, 0), Point(2, 0), Point(2, 0), Point(3, 5), True),
        (Point(0, 0), Point(2, 0), Point(1, 0), Point(3, 0), True),
        (Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0), False),
        (Point(0, 0), Point(1, 1), Point(2, 0), Point(3, -1), False),
    ],
)
def test_segments_intersect(a, b, c, d, expected):
    assert segments_intersect(a, b, c, d) is expected
    assert segments_intersect(c, d, a, b) is expected