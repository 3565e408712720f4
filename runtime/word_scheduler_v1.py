from __future__ import annotations

"""
Word scheduler v1

Decides when a word appears and which one. Session state is a SessionMemory
value: every function takes one and returns a new one, nothing is kept at
module level. Randomness comes from the rng argument (DeterministicRNG or any
object with rand() and choice()).

Timing rules:
- a word needs at least cfg.min_gap inhales since the previous word
- past that, each inhale fires with probability p(t), ramping from
  cfg.base_probability to cfg.max_probability over cfg.ramp_duration_s of
  session time

Word rules:
- draw uniformly from the list minus recently used words
- the used set keeps at most half the list; overflow evicts the oldest half
- the same word is never drawn twice in a row (unless the list has one entry);
  words started explicitly go through record_word() and count as picks too
"""

from dataclasses import dataclass, field, replace
import logging
import math
from typing import Optional, Tuple

from .rng_v1 import clamp01
from .word_config_v1 import WORD_CONFIG, WordConfigV1

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionMemory:
    session_start_time: Optional[float] = None  # ms, anchored on first update
    inhale_count: int = 0
    last_word_inhale: int = 0
    last_word: Optional[str] = None
    # insertion ordered (oldest first)
    used_words: Tuple[str, ...] = field(default_factory=tuple)

    def session_seconds(self, now_ms: float) -> float:
        if self.session_start_time is None:
            return 0.0
        return max(0.0, (float(now_ms) - float(self.session_start_time)) / 1000.0)

    @property
    def inhales_since_word(self) -> int:
        return self.inhale_count - self.last_word_inhale


def new_session() -> SessionMemory:
    return SessionMemory()


def anchor_session(memory: SessionMemory, now_ms: float) -> SessionMemory:
    if memory.session_start_time is not None:
        return memory
    return replace(memory, session_start_time=float(now_ms))


def record_inhale(memory: SessionMemory, now_ms: float) -> SessionMemory:
    m = replace(memory, inhale_count=memory.inhale_count + 1)
    logger.debug("inhale #%d at %.0fms", m.inhale_count, float(now_ms))
    return m


def trigger_probability(session_seconds: float, cfg: WordConfigV1 = WORD_CONFIG) -> float:
    ramp = clamp01(float(session_seconds) / float(cfg.ramp_duration_s))
    return cfg.base_probability + (cfg.max_probability - cfg.base_probability) * ramp


def gap_satisfied(memory: SessionMemory, cfg: WordConfigV1 = WORD_CONFIG) -> bool:
    return memory.inhales_since_word >= int(cfg.min_gap)


def should_trigger(memory: SessionMemory, now_ms: float, rng, cfg: WordConfigV1 = WORD_CONFIG) -> bool:
    """Gap check first (no draw consumed when it fails), then one draw against p(t)."""
    if not gap_satisfied(memory, cfg):
        return False
    p = trigger_probability(memory.session_seconds(now_ms), cfg)
    roll = rng.rand()
    logger.debug("trigger roll %.3f vs p=%.3f", roll, p)
    return roll < p


def select_word(memory: SessionMemory, rng, cfg: WordConfigV1 = WORD_CONFIG) -> Tuple[str, SessionMemory]:
    words = list(cfg.word_list)
    used = list(memory.used_words)

    candidates = [w for w in words if w not in used]
    if not candidates:
        memory = replace(memory, used_words=())
        candidates = list(words)
    if len(set(words)) > 1 and memory.last_word is not None:
        fresh = [w for w in candidates if w != memory.last_word]
        if fresh:
            candidates = fresh

    word = rng.choice(candidates)
    return word, record_word(memory, word, cfg)


def record_word(memory: SessionMemory, word: str, cfg: WordConfigV1 = WORD_CONFIG) -> SessionMemory:
    """Remember `word` as the latest pick (used set plus no-repeat guard).

    `word` is matched against the list case-insensitively; a word that is not
    listed only becomes last_word.
    """
    key = str(word).upper()
    word = next((w for w in cfg.word_list if w.upper() == key), str(word))
    if word not in cfg.word_list:
        return replace(memory, last_word=word)

    used = [w for w in memory.used_words if w != word]
    used.append(word)
    if len(used) > len(cfg.word_list) / 2.0:
        drop = int(math.ceil(len(used) / 2.0))
        used = used[drop:]
    return replace(memory, used_words=tuple(used), last_word=word)


def mark_word_shown(memory: SessionMemory) -> SessionMemory:
    return replace(memory, last_word_inhale=memory.inhale_count)
