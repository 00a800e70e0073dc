"""Root finding by interval bisection, with a few sample functions."""

from __future__ import annotations

import math
import sys
from typing import Callable, Optional, Sequence

EPS = 1e-9


def bisection(a: float, b: float, n: int, f: Callable[[float], float]) -> float:
    """Approximate a root of ``f`` in ``[a, b]`` with at most ``n`` halvings.

    Returns NaN when ``f(a)`` and ``f(b)`` have the same strict sign.
    """
    fa = f(a)
    fb = f(b)
    if fa * fb > 0:
        return math.nan
    if abs(fa) < EPS:
        return a
    if abs(fb) < EPS:
        return b

    c = (a + b) / 2
    fc = f(c)
    for _ in range(n):
        if abs(fc) < EPS:
            return c
        if fa * fc > 0:
            a, fa = c, fc
        else:
            b = c
        c = (a + b) / 2
    return c


def linear(x: float) -> float:
    return x * x + 2 * x - 10


def quadratic(x: float) -> float:
    return x * x - 4


def sine(x: float) -> float:
    return math.sin(x)


def tricky(x: float) -> float:
    return math.cos(x) - x


_SAMPLES = (
    ("Linear", linear),
    ("Quadratic", quadratic),
    ("Sine", sine),
    ("Tricky", tricky),
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run bisection on the sample functions for ``n a b``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Enter: n, a, b", end="", flush=True)
        args = sys.stdin.read().split()
    try:
        n = int(args[0])
        a = float(args[1])
        b = float(args[2])
    except (IndexError, ValueError):
        return 1

    if n <= 0:
        print("Error: 'n' must be positive")
        return 1

    for label, f in _SAMPLES:
        root = bisection(a, b, n, f)
        print(f"{label} root: {root:.6f}, Error: {f(root):.6f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())