# numgeo

Three small numerical and geometric tools, usable as a library or from the
command line:

- **Bisection** root finding on an interval (`numgeo.bisection`).
- **Minimum enclosing circle** of a set of points by Welzl's randomized
  algorithm, driven by a xoroshiro128+ generator (`numgeo.welzl`,
  `numgeo.xoroshiro`).
- **Point in polygon** classification by ray casting, with boundary
  detection (`numgeo.polygon`).

The shared planar primitives (`Point`, `Circle`, `distance2`, `cross`,
`is_point_on_segment`, `segments_intersect`, `circle_from_two_points`,
`circle_from_three_points`) live in `numgeo.geometry`. The geometry
predicates use an absolute tolerance of `1e-9`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The result messages of `numgeo-mec` and `numgeo-pip` are printed in Russian.

### Bisection

```
numgeo-bisection N A B
```

Runs at most `N` halvings on the interval `[A, B]` for each of the built-in
functions `linear` (x² + 2x − 10), `quadratic` (x² − 4), `sine` and `tricky`
(cos x − x), and prints each root with the function's value there, e.g.
`Tricky root: 0.739085, Error: 0.000000`. A root is `nan` when the function
has the same sign at both ends. Without arguments it prompts
`Enter: n, a, b` and reads the three values from standard input. It exits
with status 1 on unreadable input, and prints `Error: 'n' must be positive`
when `N` is not positive.

### Minimum enclosing circle

```
numgeo-mec [FILE]
```

Reads `FILE` (default `input.txt` in the current directory): first the
number of points (at least 1), then the `x y` coordinates of each point. It
prints the centre and radius of the smallest circle containing every point,
to six decimals. The generator is seeded from the clock.

### Point in polygon

```
numgeo-pip [FILE]
```

Reads `FILE` (default `input.txt`): the number of polygon vertices (at least
3), the `x y` coordinates of each vertex in order, and then the `x y`
coordinates of the point to classify. It prints whether the point lies on
the boundary, inside, or outside the polygon.

## Library use

```python
from numgeo.bisection import bisection, tricky
from numgeo.geometry import Point
from numgeo.welzl import min_enclosing_circle
from numgeo.xoroshiro import Xoroshiro128Plus
from numgeo.polygon import Location, locate

root = bisection(0.0, 1.0, 60, tricky)          # cos(x) = x

rng = Xoroshiro128Plus(12345, 67890)
circle = min_enclosing_circle([Point(0, 0), Point(2, 0), Point(1, 1)], rng)
print(circle.center, circle.rad)

square = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
assert locate(Point(2, 2), square) is Location.INSIDE
assert locate(Point(4, 2), square) is Location.ON_BOUNDARY
```

Notes:

- `bisection(a, b, n, f)` returns `nan` when `f(a)` and `f(b)` have the same
  strict sign.
- `min_enclosing_circle(points, rng=None)` raises `ValueError` for an empty
  list; without `rng` it seeds a generator from the clock. A fixed seed gives
  a reproducible order of work.
- `Xoroshiro128Plus` is an iterator of unsigned 64-bit values and has a
  `shuffle` method that reorders a list in place.
- `read_points(path)` (in `numgeo.welzl`) and `read_problem(path)` (in
  `numgeo.polygon`) parse the input files described above and raise
  `ValueError` on malformed content.

## Limitations

The functions for bisection are fixed in the command; other functions can
only be used through the library. Nothing is plotted or drawn.