"""
Tests for the seeded RNG.
"""

import pytest

from ..engine_core.rng import SeededRNG, derive_rng, derive_seed


def test_rng_determinism_same_seed():
    rng_a = SeededRNG(12345)
    rng_b = SeededRNG(12345)

    assert [rng_a.next_int(1, 7) for _ in range(20)] == [rng_b.next_int(1, 7) for _ in range(20)]


def test_rng_different_seed():
    rng_a = SeededRNG(11111)
    rng_b = SeededRNG(22222)

    assert [rng_a.next_int(0, 1000) for _ in range(5)] != [rng_b.next_int(0, 1000) for _ in range(5)]


def test_first_value_follows_lcg():
    """Seed 0 steps to the increment on the first call."""
    assert SeededRNG(0).next_int(0, 2 ** 32) == 1013904223


def test_values_stay_in_range():
    rng = SeededRNG(99)
    values = [rng.next_int(1, 7) for _ in range(500)]
    assert min(values) >= 1
    assert max(values) <= 6
    assert set(values) == {1, 2, 3, 4, 5, 6}


def test_empty_range_rejected():
    with pytest.raises(ValueError):
        SeededRNG(1).next_int(3, 3)


def test_roll_die_and_choice():
    rng = SeededRNG(5)
    assert 1 <= rng.roll_die() <= 6
    assert rng.choice(["a", "b", "c"]) in {"a", "b", "c"}
    with pytest.raises(ValueError):
        rng.choice([])


def test_derived_seed_formula(two_player_state):
    assert derive_seed(3, 2, 1) == 3 + 200 + 1

    two_player_state.turn = 4
    two_player_state.active_player_index = 1
    derived = derive_rng(two_player_state)
    expected = SeededRNG(two_player_state.seed + 400 + 1)
    assert [derived.next_int(0, 100) for _ in range(5)] == [expected.next_int(0, 100) for _ in range(5)]
