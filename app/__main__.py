"""Headless entry for `python -m app`.

Simulates a breathing session and prints every word the engine forms.

Usage:
  python -m app --seconds 300 --pattern box --seed 7
  python -m app --word "LET GO" --json out/run.json
"""
from __future__ import annotations
import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from app import log_buffer
from preview.breath_clock_v1 import PATTERNS
from preview.headless import run_headless
from runtime.word_config_v1 import WORD_CONFIG, WordConfigError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="python -m app", description="Headless word formation session")
    ap.add_argument("--seconds", type=float, default=180.0)
    ap.add_argument("--fps", type=float, default=30.0)
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--pattern", choices=sorted(PATTERNS), default="box")
    ap.add_argument("--particles", type=int, default=2000)
    ap.add_argument("--word", default=None, help="form this word at t=0 before scheduling")
    ap.add_argument("--base-probability", type=float, default=None)
    ap.add_argument("--max-probability", type=float, default=None)
    ap.add_argument("--min-gap", type=int, default=None)
    ap.add_argument("--json", dest="json_out", default=None, help="write the run result to this file")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    log_buffer.install(level=logging.DEBUG if args.verbose else logging.INFO,
                       stream_level=logging.DEBUG if args.verbose else logging.WARNING)

    overrides = {}
    if args.base_probability is not None:
        overrides["base_probability"] = args.base_probability
    if args.max_probability is not None:
        overrides["max_probability"] = args.max_probability
    if args.min_gap is not None:
        overrides["min_gap"] = args.min_gap
    try:
        cfg = dataclasses.replace(WORD_CONFIG, **overrides).validate()
    except WordConfigError as e:
        print(f"invalid word config: {e}", file=sys.stderr)
        return 2

    res = run_headless(
        seconds=args.seconds,
        fps=args.fps,
        seed=args.seed,
        pattern=args.pattern,
        particle_count=args.particles,
        config=cfg,
        first_word=args.word,
    )
    for ev in res.events:
        if ev.kind == "start":
            print(f"[{ev.t_ms / 1000.0:7.2f}s] + {ev.word:<10} inhale={ev.inhale} particles={ev.recruited}/{ev.targets}")
        else:
            print(f"[{ev.t_ms / 1000.0:7.2f}s] - {ev.word}")
    print(f"frames={res.frames} words={len(res.words)} sha256={res.sha256}")

    if args.json_out:
        out = Path(args.json_out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(res.to_dict(), indent=2), encoding="utf-8")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
