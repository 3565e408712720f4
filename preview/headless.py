from __future__ import annotations
"""Headless word-formation runner for regression tests and the CLI.

Drives breath clock -> particle field -> WordFormationController frame by frame
without any renderer, blends recruited particles toward their word targets the
way the renderer would, and hashes the blended buffers. A given seed and
settings always produce the same hash and the same word events.
"""

from dataclasses import asdict, dataclass, field
from typing import List, Optional, Sequence
import hashlib
import logging

from preview.breath_clock_v1 import DEFAULT_PATTERN, BreathClockV1
from preview.particle_field_v1 import ParticleFieldV1
from runtime.rng_v1 import lerp
from runtime.word_config_v1 import WORD_CONFIG, WordConfigV1
from runtime.word_formation_v1 import WordFormationController

logger = logging.getLogger(__name__)


@dataclass
class WordEvent:
    kind: str          # "start" | "end"
    word: str
    t_ms: float
    inhale: int
    recruited: int = 0
    targets: int = 0


@dataclass
class HeadlessResult:
    sha256: str
    frames: int
    fps: float
    seed: int
    pattern: str
    particle_count: int
    events: List[WordEvent] = field(default_factory=list)

    @property
    def words(self) -> List[str]:
        return [e.word for e in self.events if e.kind == "start"]

    def to_dict(self) -> dict:
        return asdict(self)


def blend_word_positions(words: WordFormationController, positions: Sequence[float]) -> List[float]:
    """Copy of `positions` with recruited particles pulled toward their targets."""
    out = list(positions)
    total = words.total_letters()
    for rp in words.recruited_particles():
        k = words.get_letter_progress(rp.letter_index, total)
        i = rp.particle_index * 3
        out[i] = lerp(out[i], rp.target.x, k)
        out[i + 1] = lerp(out[i + 1], rp.target.y, k)
        out[i + 2] = lerp(out[i + 2], rp.target.z, k)
    return out


def _frame_bytes(blended: Sequence[float], words: WordFormationController) -> bytes:
    # Only recruited particles differ from the field; hash those plus the word.
    out = bytearray()
    st = words.get_state()
    out.extend((st.word or "").encode("utf-8"))
    for idx in st.recruited_indices:
        k = idx * 3
        out.extend(int(idx).to_bytes(4, "little", signed=False))
        for v in blended[k:k + 3]:
            out.extend(int(round(float(v) * 10000.0)).to_bytes(8, "little", signed=True))
    return bytes(out)


def run_headless(
    seconds: float = 120.0,
    fps: float = 30.0,
    seed: int = 1,
    pattern: str = DEFAULT_PATTERN,
    particle_count: int = 2000,
    config: Optional[WordConfigV1] = None,
    first_word: Optional[str] = None,
) -> HeadlessResult:
    cfg = config or WORD_CONFIG
    clock = BreathClockV1(pattern)
    field_ = ParticleFieldV1(count=particle_count, seed=seed)
    words = WordFormationController(config=cfg, seed=seed)

    fps = max(1.0, float(fps))
    frames = int(max(0.0, float(seconds)) * fps)
    h = hashlib.sha256()
    events: List[WordEvent] = []

    if first_word:
        words.start_word(first_word, 0.0, field_.step(0.0), particle_count)
        st = words.get_state()
        if st.is_forming:
            events.append(WordEvent("start", str(st.word), 0.0, 0, len(st.recruited_indices), len(st.target_positions)))

    for frame in range(frames):
        now = frame * 1000.0 / fps
        positions = field_.step(now)
        before = words.get_state()
        changed = words.update(now, clock.phase_type(now), positions, particle_count)
        if changed:
            st = words.get_state()
            inhale = words.session.inhale_count
            if st.is_forming:
                events.append(WordEvent("start", str(st.word), now, inhale, len(st.recruited_indices), len(st.target_positions)))
            else:
                events.append(WordEvent("end", str(before.word), now, inhale))
        h.update(_frame_bytes(blend_word_positions(words, positions), words))

    logger.info("headless run: %d frames, %d words, sha256=%s",
                frames, sum(1 for e in events if e.kind == "start"), h.hexdigest()[:12])
    return HeadlessResult(
        sha256=h.hexdigest(),
        frames=frames,
        fps=fps,
        seed=int(seed),
        pattern=str(pattern),
        particle_count=int(particle_count),
        events=events,
    )

