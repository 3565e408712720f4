from __future__ import annotations

"""
Word Formation v1 (engine primitive)

Per-frame controller that now and then borrows particles to spell a word.

Per update() call, in order:
  1. edge detect: phase_type entering inhale (0) from any other value
  2. on an edge, maybe trigger: scheduler decides, layout builds targets,
     recruiter binds particle indices
  3. advance the timeline; progress 1.0 ends the word

The controller only reads the particle buffer. The renderer polls get_state()
and get_letter_progress() once per frame and does the blending itself.

Typical host loop:

    words = WordFormationController(seed=project_seed)
    ...
    changed = words.update(now_ms, breath.phase_type, positions, count)
    for rp in words.recruited_particles():
        k = words.get_letter_progress(rp.letter_index, words.total_letters())
        ...
"""

import logging
from typing import List, Sequence

from .formation_timeline_v1 import (
    WordFormationState,
    advance,
    begin_formation,
    idle_state,
    letter_progress,
)
from .particle_recruit_v1 import RecruitedParticle, recruit_pairs
from .rng_v1 import DeterministicRNG
from .word_config_v1 import WORD_CONFIG, WordConfigV1
from .word_layout_v1 import layout_word_points, letter_count, letter_slots
from .word_scheduler_v1 import (
    SessionMemory,
    anchor_session,
    mark_word_shown,
    new_session,
    record_inhale,
    record_word,
    select_word,
    should_trigger,
)

logger = logging.getLogger(__name__)

PHASE_INHALE = 0
PHASE_HOLD_IN = 1
PHASE_EXHALE = 2
PHASE_HOLD_OUT = 3
NO_PHASE = -1


class WordFormationController:
    def __init__(self, config: WordConfigV1 = WORD_CONFIG, rng=None, seed: int = 0):
        self.config = config.validate()
        self.rng = rng if rng is not None else DeterministicRNG(seed)
        self._memory: SessionMemory = new_session()
        self._state: WordFormationState = idle_state()
        self._pairs: List[RecruitedParticle] = []
        self._last_phase: int = NO_PHASE

    # ---- queries
    @property
    def session(self) -> SessionMemory:
        return self._memory

    def get_state(self) -> WordFormationState:
        """Snapshot of the live state (safe to keep across frames)."""
        return self._state.copy()

    def is_forming(self) -> bool:
        return self._state.is_forming

    def total_letters(self) -> int:
        return letter_slots(self._state.word) if self._state.word else 0

    def recruited_particles(self) -> List[RecruitedParticle]:
        return list(self._pairs)

    def get_letter_progress(self, letter_index: int, total_letters: int) -> float:
        return letter_progress(self._state.progress, letter_index, total_letters, self.config)

    # ---- per frame
    def update(self, current_time: float, phase_type: int, positions: Sequence[float], particle_count: int) -> bool:
        """Advance one frame. Returns True iff IDLE/FORMING changed during this call."""
        changed = False
        now = float(current_time)
        phase = int(phase_type)
        self._memory = anchor_session(self._memory, now)

        if phase == PHASE_INHALE and self._last_phase != PHASE_INHALE:
            self._memory = record_inhale(self._memory, now)
            changed = self._on_inhale_start(now, positions, particle_count)
        self._last_phase = phase

        if self._state.is_forming:
            word = self._state.word
            self._state, ended = advance(self._state, now, self.config)
            if ended:
                self._pairs = []
                logger.info("word %r released at %.0fms", word, now)
                changed = True
        return changed

    def _on_inhale_start(self, now: float, positions: Sequence[float], particle_count: int) -> bool:
        if self._state.is_forming:
            return False
        if not should_trigger(self._memory, now, self.rng, self.config):
            return False
        word, self._memory = select_word(self._memory, self.rng, self.config)
        return self._begin(word, now, positions, particle_count)

    def start_word(self, word: str, current_time: float, positions: Sequence[float], particle_count: int) -> bool:
        """Form `word` now, bypassing the scheduler. No-op while a word is forming."""
        if self._state.is_forming:
            logger.debug("start_word(%r) ignored: %r is still forming", word, self._state.word)
            return False
        if letter_count(str(word)) == 0:
            logger.debug("start_word(%r) ignored: nothing drawable", word)
            return False
        self._memory = anchor_session(self._memory, float(current_time))
        # counts as the latest pick so the scheduler will not repeat it next
        self._memory = record_word(self._memory, str(word), self.config)
        return self._begin(str(word), float(current_time), positions, particle_count)

    def _begin(self, word: str, now: float, positions: Sequence[float], particle_count: int) -> bool:
        cfg = self.config
        targets = layout_word_points(word, cfg.particles_per_letter, cfg.word_scale)
        pairs = recruit_pairs(targets, positions, particle_count)
        if len(pairs) < len(targets):
            # trailing targets stay unmatched; the word renders incomplete
            logger.warning("word %r: recruited %d of %d targets (particle_count=%s)",
                           word, len(pairs), len(targets), particle_count)
        self._pairs = pairs
        self._state = begin_formation(word, now, targets, [p.particle_index for p in pairs])
        self._memory = mark_word_shown(self._memory)
        logger.info("word %r forming at %.0fms (inhale #%d, %d particles)",
                    word, now, self._memory.inhale_count, len(pairs))
        return True

    # ---- cancellation
    def force_end(self) -> None:
        if self._state.is_forming:
            logger.info("word %r force-ended", self._state.word)
        self._state = idle_state()
        self._pairs = []

    def reset_session(self) -> None:
        self._memory = new_session()
        self.force_end()
        logger.info("word session reset")
