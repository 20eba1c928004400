"""
Seeded pseudo-random number generator.

SeededRandom is a 32-bit mulberry32 generator: each step advances the state
by a fixed odd increment and mixes it with a multiply-xor-shift avalanche.
The same seed always yields the same sequence, which is what makes tartan
generation reproducible and regression-testable.

All arithmetic is masked to 32 bits so results match other mulberry32
implementations bit for bit.
"""

from __future__ import annotations

import copy
from collections.abc import MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiply."""
    return (a * b) & _MASK32


class SeededRandom:
    """
    Explicit-state PRNG.

    The only state is ``state`` (an unsigned 32-bit int), so a generator can
    be copied with clone() to branch a sequence, or rebuilt from its seed to
    replay it.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self.state = seed & _MASK32

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed}, state={self.state:#010x})"

    def clone(self) -> SeededRandom:
        """Return an independent generator at the same position."""
        return copy.copy(self)

    def next_float(self) -> float:
        """Uniform float in [0, 1)."""
        self.state = (self.state + _INCREMENT) & _MASK32
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32

    def randint(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi], both inclusive."""
        if hi < lo:
            raise ValueError(f"empty range: [{lo}, {hi}]")
        return int(self.next_float() * (hi - lo + 1)) + lo

    def pick(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("cannot pick from an empty sequence")
        return items[int(self.next_float() * len(items))]

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Fisher–Yates shuffle in place; returns ``items`` for chaining."""
        for i in range(len(items) - 1, 0, -1):
            j = int(self.next_float() * (i + 1))
            items[i], items[j] = items[j], items[i]
        return items

    def weighted(self, items: Sequence[T], weights: Sequence[float]) -> T:
        """Pick one item with probability proportional to its weight."""
        if not items:
            raise ValueError("cannot pick from an empty sequence")
        if len(items) != len(weights):
            raise ValueError(
                f"items and weights differ in length: {len(items)} != {len(weights)}"
            )
        r = self.next_float() * sum(weights)
        for item, weight in zip(items, weights):
            r -= weight
            if r <= 0:
                return item
        return items[-1]
