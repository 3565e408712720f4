"""Selftests for runtime.word_scheduler_v1 and runtime.word_config_v1

Run:
  python -m selftest.test_word_scheduler
"""

import dataclasses

from runtime.rng_v1 import DeterministicRNG
from runtime.word_config_v1 import WORD_CONFIG, WordConfigError, WordConfigV1
from runtime.word_scheduler_v1 import (
    SessionMemory,
    anchor_session,
    mark_word_shown,
    new_session,
    record_inhale,
    record_word,
    select_word,
    should_trigger,
    trigger_probability,
)
from selftest._helpers import ScriptedRNG, assert_close


def _cfg(**kw) -> WordConfigV1:
    return dataclasses.replace(WORD_CONFIG, **kw).validate()


def test_probability_ramp():
    assert_close(trigger_probability(0.0), 0.10)
    assert_close(trigger_probability(60.0), 0.175)
    assert_close(trigger_probability(120.0), 0.25)
    assert_close(trigger_probability(10_000.0), 0.25)
    assert_close(trigger_probability(-5.0), 0.10)


def test_gap_blocks_trigger_without_drawing():
    rng = ScriptedRNG(fallback=0.0)
    for inhales, last in ((0, 0), (1, 0), (5, 4), (7, 7)):
        m = SessionMemory(session_start_time=0.0, inhale_count=inhales, last_word_inhale=last)
        assert should_trigger(m, 500_000.0, rng) is False
    assert rng.rand_calls == 0


def test_trigger_is_draw_below_probability():
    m = SessionMemory(session_start_time=0.0, inhale_count=3, last_word_inhale=0)
    assert should_trigger(m, 0.0, ScriptedRNG([0.05])) is True
    assert should_trigger(m, 0.0, ScriptedRNG([0.10])) is False
    # two minutes in the bar is 0.25
    assert should_trigger(m, 120_000.0, ScriptedRNG([0.2])) is True
    assert should_trigger(m, 120_000.0, ScriptedRNG([0.26])) is False


def test_three_inhale_edges_scenario():
    m = anchor_session(new_session(), 0.0)
    rng = ScriptedRNG(fallback=0.0)
    m = record_inhale(m, 0.0)
    assert m.inhale_count == 1
    assert should_trigger(m, 0.0, rng) is False
    m = record_inhale(m, 8_000.0)
    m = record_inhale(m, 16_000.0)
    assert m.inhale_count == 3 and m.inhales_since_word == 3
    assert should_trigger(m, 16_000.0, rng) is True
    assert rng.rand_calls == 1


def test_session_anchor_only_once():
    m = anchor_session(new_session(), 2_500.0)
    assert m.session_start_time == 2_500.0
    assert anchor_session(m, 9_999.0).session_start_time == 2_500.0
    assert_close(m.session_seconds(4_500.0), 2.0)
    assert new_session().session_seconds(1e9) == 0.0


def test_mark_word_shown_resets_gap():
    m = SessionMemory(inhale_count=6, last_word_inhale=1)
    m2 = mark_word_shown(m)
    assert m2.last_word_inhale == 6 and m2.inhales_since_word == 0
    assert m.last_word_inhale == 1


def test_select_word_eviction_order():
    cfg = _cfg(word_list=("A", "B", "C", "D"))
    rng = ScriptedRNG()  # always takes the first candidate
    m = new_session()
    picks = []
    for _ in range(4):
        w, m = select_word(m, rng, cfg)
        picks.append(w)
    assert picks == ["A", "B", "C", "A"]
    # after C: [A, B, C] overflowed half of 4 -> oldest two evicted -> [C]; then A appended
    assert m.used_words == ("C", "A")
    assert m.last_word == "A"


def test_select_word_never_repeats_consecutively():
    rng = DeterministicRNG(42)
    m = new_session()
    prev = None
    for _ in range(300):
        w, m = select_word(m, rng)
        assert w in WORD_CONFIG.word_list
        assert w != prev
        assert len(m.used_words) <= len(WORD_CONFIG.word_list) / 2
        prev = w


def test_select_word_fresh_until_used_set_overflows():
    rng = DeterministicRNG(7)
    m = new_session()
    n = len(WORD_CONFIG.word_list)
    picks = []
    for _ in range(n // 2 + 1):
        w, m = select_word(m, rng)
        picks.append(w)
    assert len(set(picks)) == len(picks)


def test_select_word_small_lists():
    one = _cfg(word_list=("CALM",))
    m = new_session()
    for _ in range(5):
        w, m = select_word(m, DeterministicRNG(1), one)
        assert w == "CALM"

    two = _cfg(word_list=("HERE", "NOW"))
    rng = DeterministicRNG(3)
    m = new_session()
    seq = []
    for _ in range(6):
        w, m = select_word(m, rng, two)
        seq.append(w)
    assert all(a != b for a, b in zip(seq, seq[1:]))


def test_select_word_returns_new_memory():
    m = new_session()
    w, m2 = select_word(m, DeterministicRNG(0))
    assert m.used_words == () and m.last_word is None
    assert m2.used_words == (w,)


def test_record_word_matches_list_case_insensitively():
    cfg = _cfg(word_list=("CALM", "HOPE", "REST", "EASE"))
    m = record_word(new_session(), "calm", cfg)
    assert m.last_word == "CALM" and m.used_words == ("CALM",)
    w, m = select_word(m, ScriptedRNG(pick="CALM"), cfg)
    assert w == "HOPE"
    # unlisted words only block an immediate repeat
    m2 = record_word(m, "SMILE", cfg)
    assert m2.last_word == "SMILE" and m2.used_words == m.used_words


def test_config_validation():
    WORD_CONFIG.validate()
    _cfg(min_gap=0)
    bad = [
        dict(base_probability=0.5, max_probability=0.2),
        dict(max_probability=1.5),
        dict(word_duration_ms=0),
        dict(formation_end=1.0),
        dict(word_list=()),
        dict(word_list=("CALM", "  ")),
        dict(particles_per_letter=0),
    ]
    for kw in bad:
        try:
            _cfg(**kw)
        except WordConfigError:
            continue
        raise AssertionError(f"expected WordConfigError for {kw}")


def main():
    test_probability_ramp()
    test_gap_blocks_trigger_without_drawing()
    test_trigger_is_draw_below_probability()
    test_three_inhale_edges_scenario()
    test_session_anchor_only_once()
    test_mark_word_shown_resets_gap()
    test_select_word_eviction_order()
    test_select_word_never_repeats_consecutively()
    test_select_word_fresh_until_used_set_overflows()
    test_select_word_small_lists()
    test_select_word_returns_new_memory()
    test_record_word_matches_list_case_insensitively()
    test_config_validation()
    print("OK: word_scheduler selftests passed")


if __name__ == "__main__":
    main()
