from __future__ import annotations
from typing import Iterable, List, Optional


def assert_close(a: float, b: float, eps: float = 1e-9):
    if abs(a - b) > eps:
        raise AssertionError(f"{a} != {b} (eps={eps})")


class ScriptedRNG:
    """RNG stand-in: rand() pops scripted rolls (default `fallback`), choice() prefers `pick`."""

    def __init__(self, rolls: Iterable[float] = (), pick: Optional[str] = None, fallback: float = 0.0):
        self.rolls: List[float] = list(rolls)
        self.pick = pick
        self.fallback = float(fallback)
        self.rand_calls = 0
        self.choices: List[list] = []

    def rand(self) -> float:
        self.rand_calls += 1
        if self.rolls:
            return self.rolls.pop(0)
        return self.fallback

    def choice(self, seq):
        self.choices.append(list(seq))
        if self.pick is not None and self.pick in seq:
            return self.pick
        return seq[0]


def grid_positions(n: int, spacing: float = 1.0) -> List[float]:
    """n particles on the x axis at 0, spacing, 2*spacing..."""
    out: List[float] = []
    for i in range(n):
        out.extend((i * spacing, 0.0, 0.0))
    return out
