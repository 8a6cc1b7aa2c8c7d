# brandpalette/seeded_random.py
"""
Mulberry32 seeded PRNG.

Every palette draw comes from one of these, so the whole generation is
reproducible from a single integer. All state updates are done in unsigned
32-bit arithmetic, which keeps the stream identical to the JavaScript
reference implementation on any platform.
"""

import math
from typing import List, Sequence, TypeVar

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK32


class SeededRandom:
    def __init__(self, seed: int = 0):
        self._state = int(seed) & _MASK32

    def next(self) -> float:
        """Next float in [0, 1)."""
        self._state = (self._state + _INCREMENT) & _MASK32
        s = self._state
        t = _imul(s ^ (s >> 15), 1 | s)
        t = ((t + _imul(t ^ (t >> 7), 61 | t)) & _MASK32) ^ t
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32

    def next_int(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi], both inclusive."""
        return math.floor(self.next() * (hi - lo + 1)) + lo

    def next_float(self, lo: float, hi: float) -> float:
        return self.next() * (hi - lo) + lo

    def pick(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("cannot pick from an empty sequence")
        return items[self.next_int(0, len(items) - 1)]

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Fisher-Yates over a copy; the input is left untouched."""
        shuffled = list(items)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self.next_int(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled
