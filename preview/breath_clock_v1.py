from __future__ import annotations
"""
Breath clock v1

Stand-in for the host's breath-phase clock: maps a monotonic time (ms) onto a
repeating breathing pattern and reports the phase type the word engine keys on
(0 inhale, 1 hold-in, 2 exhale, 3 hold-out).

The clock is stateless apart from its origin, so sampling the same time twice
gives the same answer (headless runs stay reproducible).
"""
from dataclasses import dataclass
from typing import Dict, Tuple

PHASE_IN = 0
PHASE_HOLD_IN = 1
PHASE_OUT = 2
PHASE_HOLD_OUT = 3


@dataclass(frozen=True)
class BreathPhaseV1:
    label: str
    duration_s: float
    phase_type: int


@dataclass(frozen=True)
class BreathPatternV1:
    key: str
    name: str
    phases: Tuple[BreathPhaseV1, ...]

    @property
    def total_s(self) -> float:
        return sum(float(p.duration_s) for p in self.phases)


@dataclass
class BreathSample:
    phase_type: int
    phase_index: int
    label: str
    progress: float        # 0..1 inside the current phase
    cycle_progress: float  # 0..1 inside the whole cycle
    cycle: int             # completed cycles since origin


PATTERNS: Dict[str, BreathPatternV1] = {
    "box": BreathPatternV1(
        key="box",
        name="Box Breathing",
        phases=(
            BreathPhaseV1("Breathe In", 4.0, PHASE_IN),
            BreathPhaseV1("Hold", 4.0, PHASE_HOLD_IN),
            BreathPhaseV1("Breathe Out", 4.0, PHASE_OUT),
            BreathPhaseV1("Hold", 4.0, PHASE_HOLD_OUT),
        ),
    ),
    "relaxation": BreathPatternV1(
        key="relaxation",
        name="4-7-8 Relaxation",
        phases=(
            BreathPhaseV1("Breathe In", 4.0, PHASE_IN),
            BreathPhaseV1("Hold", 7.0, PHASE_HOLD_IN),
            BreathPhaseV1("Breathe Out", 8.0, PHASE_OUT),
        ),
    ),
}

DEFAULT_PATTERN = "box"


class BreathClockV1:
    def __init__(self, pattern: str = DEFAULT_PATTERN, origin_ms: float = 0.0):
        if pattern not in PATTERNS:
            raise KeyError(f"unknown breathing pattern: {pattern!r} (known: {', '.join(sorted(PATTERNS))})")
        self.pattern = PATTERNS[pattern]
        if self.pattern.total_s <= 0:
            raise ValueError(f"breathing pattern {pattern!r} has zero length")
        self.origin_ms = float(origin_ms)

    def sample(self, now_ms: float) -> BreathSample:
        total = self.pattern.total_s
        t = max(0.0, (float(now_ms) - self.origin_ms) / 1000.0)
        cycle = int(t // total)
        pos = t - cycle * total

        elapsed = 0.0
        idx = 0
        phase = self.pattern.phases[0]
        for i, ph in enumerate(self.pattern.phases):
            if pos < elapsed + ph.duration_s:
                idx, phase = i, ph
                break
            elapsed += ph.duration_s
        else:
            # float edge at the very end of the cycle
            idx = len(self.pattern.phases) - 1
            phase = self.pattern.phases[idx]
            elapsed = total - phase.duration_s

        progress = (pos - elapsed) / phase.duration_s if phase.duration_s > 0 else 1.0
        return BreathSample(
            phase_type=int(phase.phase_type),
            phase_index=idx,
            label=phase.label,
            progress=min(1.0, max(0.0, progress)),
            cycle_progress=min(1.0, max(0.0, pos / total)),
            cycle=cycle,
        )

    def phase_type(self, now_ms: float) -> int:
        return self.sample(now_ms).phase_type
