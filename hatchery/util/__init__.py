"""Shared utilities for the genetics core."""

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

__all__ = [
    "MissingRNGError",
    "RandomSource",
    "chance",
    "choose",
    "pick_weighted_tier",
    "random_int",
    "require_rng_param",
    "shuffled",
    "weighted_random_int",
]
