from __future__ import annotations

"""Formation timeline v1.

Two states, IDLE and FORMING. A word's life is one progress value in [0, 1]
computed from elapsed time:

    [0, formation_end)   formation: letters reveal left to right in
                         overlapping windows (smoothstep eased)
    [formation_end, 1]   dissolve: every letter fades together (1 - d^2)

progress reaching 1.0 ends the word and returns the timeline to IDLE.

Every function here returns new values; the controller holds the live state.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple

from .rng_v1 import clamp01, smoothstep01
from .word_config_v1 import WORD_CONFIG, WordConfigV1
from .word_layout_v1 import WordPoint

IDLE = "idle"
FORMING = "forming"


@dataclass
class WordFormationState:
    state: str = IDLE
    word: Optional[str] = None
    start_time: float = 0.0
    progress: float = 0.0
    target_positions: List[WordPoint] = field(default_factory=list)
    recruited_indices: List[int] = field(default_factory=list)

    @property
    def is_forming(self) -> bool:
        return self.state == FORMING

    def copy(self) -> "WordFormationState":
        return replace(self, target_positions=list(self.target_positions), recruited_indices=list(self.recruited_indices))


def idle_state() -> WordFormationState:
    return WordFormationState()


def begin_formation(word: str, now: float, targets: Sequence[WordPoint], recruited: Sequence[int]) -> WordFormationState:
    return WordFormationState(
        state=FORMING,
        word=str(word),
        start_time=float(now),
        progress=0.0,
        target_positions=list(targets),
        recruited_indices=list(recruited),
    )


def elapsed_progress(start_time: float, now: float, cfg: WordConfigV1 = WORD_CONFIG) -> float:
    return min(1.0, max(0.0, (float(now) - float(start_time)) / float(cfg.word_duration_ms)))


def advance(state: WordFormationState, now: float, cfg: WordConfigV1 = WORD_CONFIG) -> Tuple[WordFormationState, bool]:
    """Recompute progress at `now`; returns (new_state, ended).

    `state` is left untouched. ended is True exactly on the call where
    progress reaches 1.0, and the returned state is then a fresh IDLE one.
    Progress never moves backwards, even if `now` does.
    """
    if state.state != FORMING:
        return state, False
    p = max(state.progress, elapsed_progress(state.start_time, now, cfg))
    if p >= 1.0:
        return idle_state(), True
    return replace(state, progress=p), False


def letter_progress(progress: float, letter_index: int, total_letters: int, cfg: WordConfigV1 = WORD_CONFIG) -> float:
    """Blend factor for one letter: 0 = particle on its orbit, 1 = on the glyph."""
    progress = clamp01(float(progress))
    fe = float(cfg.formation_end)

    if progress < fe:
        form = progress / fe
        reveal_at = float(letter_index) / float(max(1, int(total_letters)))
        raw = clamp01((form * cfg.reveal_spread - reveal_at) / cfg.letter_overlap)
        return smoothstep01(raw)

    dissolve = clamp01((progress - fe) / (1.0 - fe))
    return 1.0 - dissolve * dissolve


def formation_phase(progress: float, cfg: WordConfigV1 = WORD_CONFIG) -> str:
    return "formation" if float(progress) < cfg.formation_end else "dissolve"
