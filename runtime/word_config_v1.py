from __future__ import annotations

"""
Word formation configuration (v1)

One immutable struct holds every tuning constant of the word formation engine.
Make variants with dataclasses.replace(WORD_CONFIG, ...) and call validate().
"""

from dataclasses import dataclass
from typing import Tuple

# Meditation and breathing words. Multi-word entries keep their space; the
# layout leaves that slot empty.
WORD_LIST: Tuple[str, ...] = (
    "CALM",
    "PEACE",
    "REST",
    "EASE",
    "FLOW",
    "SOFT",
    "WARM",
    "SAFE",
    "HERE",
    "NOW",
    "LOVE",
    "HOPE",
    "JOY",
    "BE",
    "BREATHE",
    "RELAX",
    "STILL",
    "QUIET",
    "GENTLE",
    "KIND",
    "TRUST",
    "FREE",
    "OPEN",
    "LET GO",
    "RELEASE",
    "ACCEPT",
    "ALLOW",
    "PRESENT",
    "AWARE",
    "LIGHT",
    "FLOAT",
    "DRIFT",
)


class WordConfigError(ValueError):
    """Raised by WordConfigV1.validate() for unusable settings."""


@dataclass(frozen=True)
class WordConfigV1:
    # Full word lifetime (formation + dissolve), milliseconds
    word_duration_ms: float = 4000.0

    # Upper bound of target points per letter
    particles_per_letter: int = 25

    # Minimum inhales between two words
    min_gap: int = 2

    # Trigger probability ramps from base to max over ramp_duration_s
    base_probability: float = 0.10
    max_probability: float = 0.25
    ramp_duration_s: float = 120.0

    # World units per glyph unit
    word_scale: float = 3.5

    # Progress at which formation hands over to dissolve
    formation_end: float = 0.7

    # Width of a single letter's reveal window (in reveal units)
    letter_overlap: float = 0.4

    # Formation progress multiplier; > 1 lets the last letter finish before formation_end
    reveal_spread: float = 1.5

    word_list: Tuple[str, ...] = WORD_LIST

    def validate(self) -> "WordConfigV1":
        if self.word_duration_ms <= 0:
            raise WordConfigError("word_duration_ms must be > 0")
        if int(self.particles_per_letter) <= 0:
            raise WordConfigError("particles_per_letter must be > 0")
        if int(self.min_gap) < 0:
            raise WordConfigError("min_gap must be >= 0")
        for name in ("base_probability", "max_probability"):
            v = float(getattr(self, name))
            if v < 0.0 or v > 1.0:
                raise WordConfigError(f"{name} must be within [0, 1] (got {v})")
        if self.base_probability > self.max_probability:
            raise WordConfigError("base_probability must not exceed max_probability")
        if self.ramp_duration_s <= 0:
            raise WordConfigError("ramp_duration_s must be > 0")
        if self.word_scale <= 0:
            raise WordConfigError("word_scale must be > 0")
        if not (0.0 < self.formation_end < 1.0):
            raise WordConfigError("formation_end must be within (0, 1)")
        if self.letter_overlap <= 0:
            raise WordConfigError("letter_overlap must be > 0")
        if self.reveal_spread <= 0:
            raise WordConfigError("reveal_spread must be > 0")
        if not self.word_list:
            raise WordConfigError("word_list must not be empty")
        if not all(isinstance(w, str) and w.strip() for w in self.word_list):
            raise WordConfigError("word_list entries must be non-blank strings")
        return self


WORD_CONFIG = WordConfigV1()
