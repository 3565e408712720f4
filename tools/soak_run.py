"""Soak runner for the word formation engine.

Purpose:
- Run a long simulated session (simulated time, no sleeping) and check the
  engine's invariants on every frame.
- Catch crashes, duplicate recruitment, progress going backwards, or a word
  that never releases its particles.

Usage:
  python3 -m tools.soak_run --minutes 60 --fps 30 --seed 3

Notes:
- This is a diagnostic tool; it prints periodic status and exits non-zero on
  the first violation, followed by the recent log tail.
"""
from __future__ import annotations
import argparse, logging, traceback
from typing import List

from app import log_buffer
from preview.breath_clock_v1 import PATTERNS, BreathClockV1
from preview.particle_field_v1 import ParticleFieldV1
from runtime.word_formation_v1 import WordFormationController


class SoakFailure(AssertionError):
    pass


def check_frame(words: WordFormationController, last_progress: float) -> float:
    st = words.get_state()
    if not st.is_forming:
        if st.word is not None or st.recruited_indices or st.target_positions or st.progress != 0.0:
            raise SoakFailure(f"idle state carries data: {st!r}")
        return 0.0
    rec = st.recruited_indices
    if len(set(rec)) != len(rec):
        raise SoakFailure(f"duplicate recruited indices for {st.word!r}")
    if len(rec) > len(st.target_positions):
        raise SoakFailure(f"{len(rec)} recruited > {len(st.target_positions)} targets")
    if st.progress < last_progress:
        raise SoakFailure(f"progress went backwards: {last_progress} -> {st.progress}")
    if not (0.0 <= st.progress < 1.0):
        raise SoakFailure(f"forming progress out of range: {st.progress}")
    return st.progress


def soak(minutes: float, fps: float, seed: int, pattern: str, particles: int, log_every_s: float = 60.0) -> List[str]:
    clock = BreathClockV1(pattern)
    field_ = ParticleFieldV1(count=particles, seed=seed)
    words = WordFormationController(seed=seed)
    frames = int(minutes * 60.0 * fps)
    last_progress = 0.0
    formed: List[str] = []
    next_log = log_every_s * 1000.0
    for frame in range(frames):
        now = frame * 1000.0 / fps
        changed = words.update(now, clock.phase_type(now), field_.step(now), particles)
        if changed and words.is_forming():
            formed.append(str(words.get_state().word))
            last_progress = 0.0
        if words.is_forming() and (now - words.get_state().start_time) >= words.config.word_duration_ms:
            raise SoakFailure(f"word {words.get_state().word!r} outlived its duration")
        last_progress = check_frame(words, last_progress)
        if now >= next_log:
            next_log += log_every_s * 1000.0
            print(f"[soak] t={now / 1000.0:.0f}s inhales={words.session.inhale_count} words={len(formed)}")
    return formed


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--minutes", type=float, default=30.0)
    ap.add_argument("--fps", type=float, default=30.0)
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--pattern", choices=sorted(PATTERNS), default="box")
    ap.add_argument("--particles", type=int, default=1500)
    ap.add_argument("--log_every", type=float, default=60.0)
    args = ap.parse_args(argv)

    log_buffer.install(level=logging.INFO, stream_level=None)
    try:
        formed = soak(args.minutes, args.fps, args.seed, args.pattern, args.particles, args.log_every)
        print(f"[soak] OK duration={args.minutes:.1f}min words={len(formed)}")
        return 0
    except Exception as e:
        print("[soak] FAIL:", type(e).__name__, e)
        traceback.print_exc()
        print("--- recent log ---")
        for line in log_buffer.tail(50):
            print(line)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
