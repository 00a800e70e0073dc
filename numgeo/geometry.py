"""Planar points, circles and segment predicates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

EPS = 1e-9


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre and radius."""

    center: Point
    rad: float

    def contains(self, p: Point) -> bool:
        """Return True if ``p`` lies inside or on the circle, within tolerance."""
        if self.rad < 0:
            return False
        return distance2(self.center, p) <= self.rad * self.rad + EPS


def distance2(p1: Point, p2: Point) -> float:
    """Squared Euclidean distance between two points."""
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return dx * dx + dy * dy


def circle_from_two_points(p1: Point, p2: Point) -> Optional[Circle]:
    """Circle with ``p1``-``p2`` as diameter, or None if the points coincide."""
    dist = distance2(p1, p2)
    if dist <= EPS:
        return None
    center = Point(0.5 * (p1.x + p2.x), 0.5 * (p1.y + p2.y))
    return Circle(center, 0.5 * math.sqrt(dist))


def circle_from_three_points(a: Point, b: Point, c: Point) -> Optional[Circle]:
    """Circumscribed circle of three points.

    For collinear points the circle over the farthest pair is returned.
    """
    det = (a.x - b.x) * (c.y - b.y) - (a.y - b.y) * (c.x - b.x)

    if abs(det) < EPS:
        d1 = distance2(a, b)
        d2 = distance2(a, c)
        d3 = distance2(b, c)
        if d1 >= d2 and d1 >= d3:
            return circle_from_two_points(a, b)
        if d2 >= d1 and d2 >= d3:
            return circle_from_two_points(a, c)
        return circle_from_two_points(b, c)

    mid_ab = Point((a.x + b.x) * 0.5, (a.y + b.y) * 0.5)
    mid_bc = Point((c.x + b.x) * 0.5, (c.y + b.y) * 0.5)
    a1, b1 = b.x - a.x, b.y - a.y
    a2, b2 = c.x - b.x, c.y - b.y
    c1 = -(a1 * mid_ab.x + b1 * mid_ab.y)
    c2 = -(a2 * mid_bc.x + b2 * mid_bc.y)
    denom = a1 * b2 - a2 * b1
    center = Point((-c1 * b2 + c2 * b1) / denom, (-a1 * c2 + a2 * c1) / denom)
    return Circle(center, math.sqrt(distance2(center, a)))


def cross(a: Point, b: Point, c: Point) -> float:
    """Z component of the cross product of ``ab`` and ``ac``."""
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def is_point_on_segment(p: Point, p1: Point, p2: Point) -> bool:
    """Return True if ``p`` lies on the closed segment ``p1``-``p2``."""
    area = (p1.x - p.x) * (p2.y - p.y) - (p2.x - p.x) * (p1.y - p.y)
    if abs(area) > EPS:
        return False
    return (
        min(p1.x, p2.x) - EPS <= p.x <= max(p1.x, p2.x) + EPS
        and min(p1.y, p2.y) - EPS <= p.y <= max(p1.y, p2.y) + EPS
    )


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Return True if segments ``ab`` and ``cd`` share at least one point."""
    d1 = cross(a, b, c)
    d2 = cross(a, b, d)
    d3 = cross(c, d, a)
    d4 = cross(c, d, b)

    def straddles(u: float, v: float) -> bool:
        return (u > EPS and v < -EPS) or (u < -EPS and v > EPS)

    if straddles(d1, d2) and straddles(d3, d4):
        return True

    return (
        (abs(d1) < EPS and is_point_on_segment(c, a, b))
        or (abs(d2) < EPS and is_point_on_segment(d, a, b))
        or (abs(d3) < EPS and is_point_on_segment(a, c, d))
        or (abs(d4) < EPS and is_point_on_segment(b, c, d))
    )