from __future__ import annotations

"""
rng_v1 (seedable randomness + tiny math helpers)

Word scheduling draws random numbers; those draws go through an injected
DeterministicRNG so a seed reproduces a whole session.
"""

from typing import Sequence, TypeVar
import random

T = TypeVar("T")


class DeterministicRNG:
    """Deterministic RNG for word scheduling (seeded, never global)."""
    def __init__(self, seed: int = 0):
        self.seed = int(seed) & 0xFFFFFFFF
        self._rng = random.Random(self.seed)

    def rand(self) -> float:
        return self._rng.random()

    def choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)

    def uniform(self, a: float, b: float) -> float:
        return self._rng.uniform(a, b)


def clamp(x: float, lo: float, hi: float) -> float:
    if x < lo: return lo
    if x > hi: return hi
    return x


def clamp01(x: float) -> float:
    return clamp(x, 0.0, 1.0)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def smoothstep01(t: float) -> float:
    # t already in [0,1]
    return t * t * (3.0 - 2.0 * t)
