"""Minimum enclosing circle by Welzl's randomized algorithm."""

from __future__ import annotations

import sys
from typing import Iterator, List, MutableSequence, Optional, Sequence

from .geometry import Circle, Point, circle_from_three_points, circle_from_two_points
from .xoroshiro import Xoroshiro128Plus


def _trivial(boundary: Sequence[Point]) -> Optional[Circle]:
    if not boundary:
        return None
    if len(boundary) == 1:
        return Circle(boundary[0], 0.0)
    if len(boundary) == 2:
        return circle_from_two_points(boundary[0], boundary[1])
    return circle_from_three_points(boundary[0], boundary[1], boundary[2])


def _welzl(
    points: MutableSequence[Point],
    n: int,
    boundary: List[Point],
    rng: Xoroshiro128Plus,
) -> Optional[Circle]:
    if n == 0 or len(boundary) == 3:
        return _trivial(boundary)

    # Each level of the recursion moves a random point of its prefix to the end.
    for k in range(n, 0, -1):
        j = rng.next() % k
        points[j], points[k - 1] = points[k - 1], points[j]

    circle = _trivial(boundary)
    for i, p in enumerate(points[:n]):
        if circle is None or not circle.contains(p):
            circle = _welzl(points, i, boundary + [p], rng)
    return circle


def welzl(
    points: MutableSequence[Point],
    boundary: Sequence[Point],
    rng: Xoroshiro128Plus,
) -> Optional[Circle]:
    """Smallest circle enclosing ``points`` with ``boundary`` on its edge.

    ``points`` is reordered in place. Returns None when no circle exists.
    """
    if len(boundary) > 3:
        raise ValueError("at most three boundary points are allowed")
    return _welzl(points, len(points), list(boundary), rng)


def min_enclosing_circle(
    points: Sequence[Point], rng: Optional[Xoroshiro128Plus] = None
) -> Circle:
    """Smallest circle that contains every point."""
    if not points:
        raise ValueError("at least one point is required")
    if len(points) == 1:
        return Circle(points[0], 0.0)
    if rng is None:
        rng = Xoroshiro128Plus.from_clock()
    work = list(points)
    rng.shuffle(work)
    circle = welzl(work, [], rng)
    if circle is None:
        raise ValueError("Ошибка: не удалось построить окружность")
    return circle


def _read_point(tokens: Iterator[str], error: str) -> Point:
    try:
        return Point(float(next(tokens)), float(next(tokens)))
    except (StopIteration, ValueError):
        raise ValueError(error) from None


def read_points(path: str) -> List[Point]:
    """Read a point count followed by that many ``x y`` pairs."""
    with open(path, encoding="utf-8") as fh:
        tokens = iter(fh.read().split())
    try:
        count = int(next(tokens))
    except (StopIteration, ValueError):
        count = 0
    if count < 1:
        raise ValueError("Ошибка: в файле должно быть число >= 1")
    return [
        _read_point(tokens, f"Ошибка при чтении координат точки {index}")
        for index in range(1, count + 1)
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the minimum enclosing circle of the points in a file."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "input.txt"
    rng = Xoroshiro128Plus.from_clock()
    try:
        points = read_points(path)
    except OSError as exc:
        print(f"Не удалось открыть файл: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc)
        return 1

    try:
        circle = min_enclosing_circle(points, rng)
    except ValueError as exc:
        print(exc)
        return 1

    print("Минимальная охватывающая окружность:")
    print(f"Центр: ({circle.center.x:.6f}, {circle.center.y:.6f})")
    print(f"Радиус: {circle.rad:.6f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())