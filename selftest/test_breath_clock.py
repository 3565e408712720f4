"""Selftests for preview.breath_clock_v1 and preview.particle_field_v1

Run:
  python -m selftest.test_breath_clock
"""

import math

from preview.breath_clock_v1 import (
    PATTERNS,
    PHASE_HOLD_IN,
    PHASE_HOLD_OUT,
    PHASE_IN,
    PHASE_OUT,
    BreathClockV1,
)
from preview.particle_field_v1 import ParticleFieldV1
from selftest._helpers import assert_close


def test_box_cycle():
    clock = BreathClockV1("box")
    assert [clock.phase_type(t) for t in (0, 4000, 8000, 12000, 16000)] == [
        PHASE_IN, PHASE_HOLD_IN, PHASE_OUT, PHASE_HOLD_OUT, PHASE_IN,
    ]
    s = clock.sample(2000)
    assert s.phase_index == 0 and s.label == "Breathe In"
    assert_close(s.progress, 0.5)
    assert_close(s.cycle_progress, 0.125)
    assert clock.sample(33_000).cycle == 2


def test_relaxation_has_no_hold_out():
    clock = BreathClockV1("relaxation")
    assert_close(PATTERNS["relaxation"].total_s, 19.0)
    assert clock.phase_type(3999) == PHASE_IN
    assert clock.phase_type(4000) == PHASE_HOLD_IN
    assert clock.phase_type(11000) == PHASE_OUT
    assert clock.phase_type(19000) == PHASE_IN
    seen = {clock.phase_type(t) for t in range(0, 19000, 250)}
    assert PHASE_HOLD_OUT not in seen


def test_origin_and_negative_time():
    clock = BreathClockV1("box", origin_ms=1000.0)
    assert clock.phase_type(5000) == PHASE_HOLD_IN
    assert clock.sample(0).phase_index == 0


def test_unknown_pattern():
    try:
        BreathClockV1("nope")
    except KeyError:
        return
    raise AssertionError("expected KeyError")


def _xyz(buf, i):
    return buf[i * 3], buf[i * 3 + 1], buf[i * 3 + 2]


def test_field_rotation_keeps_radius_and_height():
    f = ParticleFieldV1(count=64, seed=3)
    before = list(f.positions)
    f.step(7_500.0)
    for i in range(64):
        x0, y0, z0 = _xyz(before, i)
        x1, y1, z1 = _xyz(f.positions, i)
        assert_close(y1, y0, 1e-4)
        assert_close(math.hypot(x1, z1), math.hypot(x0, z0), 1e-3)
    # same time, same buffer
    a = list(f.step(1234.0))
    b = list(ParticleFieldV1(count=64, seed=3).step(1234.0))
    assert a == b


def test_field_shell_radius():
    f = ParticleFieldV1(count=100, radius=6.0, seed=0)
    for i in range(100):
        x, y, z = _xyz(f.positions, i)
        r = math.sqrt(x * x + y * y + z * z)
        assert 6.0 * 0.95 - 1e-3 <= r <= 6.0 * 1.05 + 1e-3
    assert len(ParticleFieldV1(count=0).positions) == 0


def main():
    test_box_cycle()
    test_relaxation_has_no_hold_out()
    test_origin_and_negative_time()
    test_unknown_pattern()
    test_field_rotation_keeps_radius_and_height()
    test_field_shell_radius()
    print("OK: breath_clock selftests passed")


if __name__ == "__main__":
    main()
