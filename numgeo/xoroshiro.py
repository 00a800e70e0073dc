"""The xoroshiro128+ pseudo-random generator."""

from __future__ import annotations

import time
from typing import Any, MutableSequence

_MASK = (1 << 64) - 1


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _MASK


class Xoroshiro128Plus:
    """A 64-bit xoroshiro128+ generator with a 128-bit state."""

    def __init__(self, seed1: int, seed2: int) -> None:
        self._s0 = seed1 & _MASK
        self._s1 = seed2 & _MASK

    @classmethod
    def from_clock(cls) -> "Xoroshiro128Plus":
        """Seed from the wall clock and the processor time in microseconds."""
        return cls(int(time.time()), time.process_time_ns() // 1000)

    def next(self) -> int:
        """Return the next unsigned 64-bit value."""
        s0, s1 = self._s0, self._s1
        result = (s0 + s1) & _MASK
        s1 ^= s0
        self._s0 = _rotl(s0, 55) ^ s1 ^ ((s1 << 14) & _MASK)
        self._s1 = _rotl(s1, 36)
        return result

    def __iter__(self) -> "Xoroshiro128Plus":
        return self

    def __next__(self) -> int:
        return self.next()

    def shuffle(self, points: MutableSequence[Any]) -> None:
        """Shuffle ``points`` in place with a Fisher-Yates pass from the end."""
        for i in range(len(points) - 1, 0, -1):
            j = self.next() % (i + 1)
            points[i], points[j] = points[j], points[i]