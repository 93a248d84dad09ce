"""Pytest configuration and fixtures for hatchery tests."""

import random

import pytest


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def catalog():
    """The game's standard trait catalog."""
    from hatchery.genetics import default_catalog

    return default_catalog()


@pytest.fixture
def resolver(catalog):
    from hatchery.genetics import PhenotypeResolver

    return PhenotypeResolver(catalog)


@pytest.fixture
def make_genotype(catalog):
    """Build a complete genotype: every gene ``[1, 1]`` unless overridden."""
    from hatchery.genetics import Genotype

    def _make(**overrides):
        alleles = {name: (1, 1) for name in catalog.genes}
        alleles.update(overrides)
        return Genotype(alleles)

    return _make


class FixedRandom:
    """RandomSource replaying a fixed sequence of floats (cycled)."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def fixed_random():
    """Factory for RandomSource stubs returning scripted values."""
    return FixedRandom
