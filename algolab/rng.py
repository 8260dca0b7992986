"""A xorshift random number generator and a helper to measure draw spread."""

from __future__ import annotations

import time
from collections.abc import Callable

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1


def _time_seed32() -> int:
    now = time.time_ns()
    return ((now >> 32) ^ now) & _MASK32


def _time_seed64() -> int:
    return time.time_ns() & _MASK64


class XorShiftRNG:
    """Xorshift generator with separate 32-bit and 64-bit states.

    A zero state is replaced by a clock-derived seed on first use.
    """

    def __init__(self, x: int = 0, y: int = 0) -> None:
        self._x = x & _MASK32
        self._y = y & _MASK64

    def uint32(self) -> int:
        """Advance the 32-bit state and return it."""
        while self._x == 0:
            self._x = _time_seed32()
        x = self._x
        x ^= (x << 13) & _MASK32
        x ^= x >> 17
        x ^= (x << 5) & _MASK32
        self._x = x
        return x

    def uint32n(self, max_n: int) -> int:
        """Return a value in ``[0, max_n)`` by multiply-shift reduction."""
        if not 0 <= max_n <= _MASK32:
            raise ValueError(f"max_n {max_n} does not fit in 32 bits")
        return (self.uint32() * max_n) >> 32

    def uint64(self) -> int:
        """Advance the 64-bit state and return it."""
        while self._y == 0:
            self._y = _time_seed64()
        y = self._y
        y ^= (y << 13) & _MASK64
        y ^= y >> 7
        y ^= (y << 5) & _MASK64
        self._y = y
        return y

    def uint64n(self, max_n: int) -> int:
        """Return a value in ``[0, max_n]`` (inclusive) by modulo reduction."""
        if not 0 <= max_n <= _MASK64:
            raise ValueError(f"max_n {max_n} does not fit in 64 bits")
        modulus = (max_n + 1) & _MASK64
        if modulus == 0:
            raise ZeroDivisionError("max_n + 1 overflows 64 bits")
        return self.uint64() % modulus


def histogram_spread(draw: Callable[[int], int], buckets: int, samples: int) -> int:
    """Draw ``samples`` values in ``[0, buckets)`` and return max minus min bucket count."""
    if buckets < 1:
        raise ValueError("at least one bucket is required")
    counts = [0] * buckets
    for _ in range(samples):
        n = draw(buckets)
        if not 0 <= n < buckets:
            raise ValueError(f"draw returned {n}, outside [0, {buckets})")
        counts[n] += 1
    return max(counts) - min(counts)