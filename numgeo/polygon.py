"""Locating a point relative to a polygon by ray casting."""

from __future__ import annotations

import enum
import sys
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .geometry import EPS, Point, is_point_on_segment, segments_intersect


class Location(enum.Enum):
    """Where a point lies relative to a polygon."""

    ON_BOUNDARY = "Точка на границе"
    INSIDE = "Точка внутри"
    OUTSIDE = "Точка снаружи"


def _edges(polygon: Sequence[Point]) -> Iterable[Tuple[Point, Point]]:
    return zip(polygon, [*polygon[1:], *polygon[:1]])


def on_boundary(p: Point, polygon: Sequence[Point]) -> bool:
    """Return True if ``p`` lies on any edge of the closed polygon."""
    return any(is_point_on_segment(p, a, b) for a, b in _edges(polygon))


def inside_outside(p: Point, polygon: Sequence[Point]) -> Location:
    """Classify ``p`` as inside or outside by counting ray crossings."""
    if not polygon:
        raise ValueError("polygon has no vertices")
    min_x = min(v.x for v in polygon)
    max_x = max(v.x for v in polygon)
    min_y = min(v.y for v in polygon)
    max_y = max(v.y for v in polygon)
    if p.x < min_x - EPS or p.x > max_x + EPS or p.y < min_y - EPS or p.y > max_y + EPS:
        return Location.OUTSIDE

    far = Point(1e9, p.y)
    crossings = sum(segments_intersect(p, far, a, b) for a, b in _edges(polygon))
    return Location.INSIDE if crossings % 2 == 1 else Location.OUTSIDE


def locate(p: Point, polygon: Sequence[Point]) -> Location:
    """Classify ``p`` as on the boundary, inside or outside the polygon."""
    if on_boundary(p, polygon):
        return Location.ON_BOUNDARY
    return inside_outside(p, polygon)


def _read_point(tokens: Iterator[str], error: str) -> Point:
    try:
        return Point(float(next(tokens)), float(next(tokens)))
    except (StopIteration, ValueError):
        raise ValueError(error) from None


def read_problem(path: str) -> Tuple[List[Point], Point]:
    """Read a vertex count, the vertices and then the point to classify."""
    with open(path, encoding="utf-8") as fh:
        tokens = iter(fh.read().split())
    try:
        count = int(next(tokens))
    except (StopIteration, ValueError):
        count = 0
    if count < 3:
        raise ValueError("Ошибка: в файле должно быть число >= 3")
    polygon = [
        _read_point(tokens, f"Ошибка при чтении координат точки {index}")
        for index in range(1, count + 1)
    ]
    point = _read_point(tokens, "Ошибка при чтении координат проверяемой точки")
    return polygon, point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print where the point in a file lies relative to the polygon."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "input.txt"
    try:
        polygon, point = read_problem(path)
    except OSError as exc:
        print(f"Не удалось открыть файл: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc)
        return 1
    print(locate(point, polygon).value)
    return 0


if __name__ == "__main__":
    sys.exit(main())