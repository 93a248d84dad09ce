"""Tests for the random source helpers."""

import random

import pytest

from hatchery.util.rng import (
    MissingRNGError,
    RandomSource,
    chance,
    choose,
    pick_weighted_tier,
    random_int,
    require_rng_param,
    shuffled,
    weighted_random_int,
)


def test_random_random_is_a_random_source():
    assert isinstance(random.Random(1), RandomSource)


def test_require_rng_param_rejects_none():
    with pytest.raises(MissingRNGError, match="GenotypeGenerator.generate"):
        require_rng_param(None, "GenotypeGenerator.generate")


def test_require_rng_param_returns_rng(seeded_rng):
    assert require_rng_param(seeded_rng, "test") is seeded_rng


class TestRandomInt:
    def test_bounds_are_inclusive(self, fixed_random):
        assert random_int(fixed_random(0.0), 2, 4) == 2
        assert random_int(fixed_random(0.9999), 2, 4) == 4

    def test_stays_in_range(self, seeded_rng):
        values = {random_int(seeded_rng, 2, 4) for _ in range(500)}
        assert values == {2, 3, 4}


class TestWeightedRandomInt:
    def test_zero_weights_never_chosen(self, seeded_rng):
        for _ in range(200):
            assert weighted_random_int(seeded_rng, 0, 3, [0, 0, 0, 1]) == 3

    def test_cumulative_buckets(self, fixed_random):
        # r = 0.5 * 2 = 1.0 falls past the first bucket into the second
        assert weighted_random_int(fixed_random(0.5), 0, 1, [1, 1]) == 1
        assert weighted_random_int(fixed_random(0.49), 0, 1, [1, 1]) == 0

    def test_no_weights_is_uniform(self, fixed_random):
        assert weighted_random_int(fixed_random(0.0), 1, 6, None) == 1
        assert weighted_random_int(fixed_random(0.99), 1, 6, []) == 6


class TestPickWeightedTier:
    def test_single_nonzero_tier(self, seeded_rng):
        for _ in range(100):
            assert pick_weighted_tier(seeded_rng, {0: 0, 1: 0, 2: 5, 3: 0}) == 2

    def test_orders_by_tier(self, fixed_random):
        # Sorted: 0 (w=1), 3 (w=1); r = 0.75 * 2 = 1.5 lands in tier 3
        assert pick_weighted_tier(fixed_random(0.75), {3: 1, 0: 1}) == 3


def test_shuffled_is_permutation(seeded_rng):
    items = [0, 1, 2, 3, 4]
    result = shuffled(seeded_rng, items)
    assert sorted(result) == items
    assert items == [0, 1, 2, 3, 4]


def test_chance_extremes(seeded_rng):
    assert not any(chance(seeded_rng, 0.0) for _ in range(100))
    assert all(chance(seeded_rng, 1.0) for _ in range(100))


def test_choose_picks_member(seeded_rng):
    options = ("a", "b", "c")
    assert {choose(seeded_rng, options) for _ in range(100)} == set(options)
