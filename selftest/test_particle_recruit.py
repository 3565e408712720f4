"""Selftests for runtime.particle_recruit_v1 (greedy recruitment)

Run:
  python -m selftest.test_particle_recruit
"""

from array import array

from runtime.particle_recruit_v1 import recruit_pairs, recruit_particles
from runtime.rng_v1 import DeterministicRNG
from runtime.word_layout_v1 import WordPoint, layout_word_points
from selftest._helpers import grid_positions


def _pt(x, y=0.0, z=0.0, letter=0, j=0):
    return WordPoint(float(x), float(y), float(z), letter, j)


def _random_cloud(n, seed):
    rng = DeterministicRNG(seed)
    out = []
    for _ in range(n):
        out.extend((rng.uniform(-6, 6), rng.uniform(-6, 6), rng.uniform(-6, 6)))
    return out


def test_nearest_unused_particle():
    pos = grid_positions(10)
    targets = [_pt(2.1), _pt(2.2)]
    # 2 goes to the first target; the second falls back to 3 (0.8 away) rather than 1 (1.2 away)
    assert recruit_particles(targets, pos, 10) == [2, 3]


def test_first_claim_wins_over_optimal_matching():
    pos = [0.0, 0.0, 0.0, 2.0, 0.0, 0.0]
    targets = [_pt(0.9), _pt(0.0)]
    # optimal would be [1, 0]; greedy lets the first target keep particle 0
    assert recruit_particles(targets, pos, 2) == [0, 1]


def test_ties_go_to_lowest_index():
    pos = [-1.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0]
    assert recruit_particles([_pt(0.0)], pos, 3) == [0]


def test_shortage_truncates_without_error():
    pos = grid_positions(3)
    targets = [_pt(i * 0.5) for i in range(10)]
    pairs = recruit_pairs(targets, pos, 3)
    assert len(pairs) == 3
    # matched targets are the leading ones, in order
    assert [p.target for p in pairs] == targets[:3]
    assert sorted(p.particle_index for p in pairs) == [0, 1, 2]


def test_no_duplicates_and_expected_length():
    targets = layout_word_points("BREATHE")
    for seed, n in ((1, 50), (2, 175), (3, 400), (4, 1)):
        pos = _random_cloud(n, seed)
        got = recruit_particles(targets, pos, n)
        assert len(set(got)) == len(got)
        assert len(got) == min(len(targets), n)
        assert all(0 <= i < n for i in got)


def test_deterministic():
    targets = layout_word_points("PEACE")
    pos = _random_cloud(300, 9)
    assert recruit_particles(targets, pos, 300) == recruit_particles(targets, list(pos), 300)


def test_count_bounded_by_buffer_and_sign():
    pos = grid_positions(4)
    targets = [_pt(i) for i in range(8)]
    assert len(recruit_particles(targets, pos, 100)) == 4
    assert recruit_particles(targets, pos, 0) == []
    assert recruit_particles(targets, pos, -5) == []
    assert recruit_particles([], pos, 4) == []


def test_only_first_particle_count_considered():
    pos = grid_positions(5)
    # particle 4 sits exactly on the target but is outside the active count
    assert recruit_particles([_pt(4.0)], pos, 2) == [1]


def test_accepts_float32_buffer():
    pos = array("f", grid_positions(6))
    pairs = recruit_pairs([_pt(5.0, letter=2), _pt(0.2, letter=3)], pos, 6)
    assert [p.particle_index for p in pairs] == [5, 0]
    assert [p.letter_index for p in pairs] == [2, 3]


def test_buffer_is_not_modified():
    pos = _random_cloud(60, 5)
    before = list(pos)
    recruit_particles(layout_word_points("CALM"), pos, 60)
    assert pos == before


def main():
    test_nearest_unused_particle()
    test_first_claim_wins_over_optimal_matching()
    test_ties_go_to_lowest_index()
    test_shortage_truncates_without_error()
    test_no_duplicates_and_expected_length()
    test_deterministic()
    test_count_bounded_by_buffer_and_sign()
    test_only_first_particle_count_considered()
    test_accepts_float32_buffer()
    test_buffer_is_not_modified()
    print("OK: particle_recruit selftests passed")


if __name__ == "__main__":
    main()
