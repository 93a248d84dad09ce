"""Tests for random genotype generation."""

import random
from dataclasses import replace

import pytest

from hatchery.genetics import Genotype, GenotypeGenerator, create_random_genotype
from hatchery.genetics.validation import validate_genotype
from hatchery.util.rng import MissingRNGError

COLOR_AXES = ("color_cyan", "color_magenta", "color_yellow")


@pytest.fixture
def extreme_catalog(catalog):
    """Color tiers 50/30/15/5 with alleles pinned to 0 (Low) or 3 (High)."""
    return replace(
        catalog,
        tier_weights={"color": {0: 50, 1: 30, 2: 15, 3: 5}},
        low_allele_weights=(1, 0, 0, 0),
        high_allele_weights=(0, 0, 0, 1),
    )


class TestGenerate:
    def test_genotype_is_complete_and_in_range(self, catalog, seeded_rng):
        generator = GenotypeGenerator(catalog)
        for _ in range(500):
            genotype = generator.generate(seeded_rng)
            assert isinstance(genotype, Genotype)
            assert list(genotype) == list(catalog.genes)
            assert validate_genotype(catalog, genotype) == []

    def test_same_seed_same_genotype(self, catalog):
        first = create_random_genotype(catalog, rng=random.Random(7))
        second = create_random_genotype(catalog, rng=random.Random(7))
        assert first == second

    def test_default_rng_from_constructor(self, catalog):
        generator = GenotypeGenerator(catalog, rng=random.Random(7))
        assert generator.generate() == create_random_genotype(catalog, rng=random.Random(7))

    def test_requires_rng(self, catalog):
        with pytest.raises(MissingRNGError):
            GenotypeGenerator(catalog).generate()

    def test_non_triangle_genes_use_full_range(self, catalog, seeded_rng):
        generator = GenotypeGenerator(catalog)
        seen = set()
        for _ in range(300):
            seen.update(generator.generate(seeded_rng)["body_size"])
        assert seen == {1, 2, 3, 4, 5, 6}

    def test_per_gene_weights_apply(self, catalog, seeded_rng):
        weighted = replace(catalog, gene_weights={"body_type": [0, 0, 1]})
        generator = GenotypeGenerator(weighted)
        for _ in range(100):
            assert generator.generate(seeded_rng)["body_type"] == (3, 3)


class TestTriangleAlleles:
    def test_high_axis_count_follows_tier(self, extreme_catalog, seeded_rng):
        generator = GenotypeGenerator(extreme_catalog)
        for _ in range(200):
            alleles, high_axes = generator.generate_triangle_alleles("color", seeded_rng)
            for index, axis in enumerate(COLOR_AXES):
                expected = (3, 3) if index in high_axes else (0, 0)
                assert alleles[axis] == expected

    def test_all_tiers_and_axes_appear(self, extreme_catalog, seeded_rng):
        generator = GenotypeGenerator(extreme_catalog)
        seen = set()
        for _ in range(1000):
            _, high_axes = generator.generate_triangle_alleles("color", seeded_rng)
            seen.add(high_axes)
        # 1 + 3 + 3 + 1 possible High-axis subsets
        assert len(seen) == 8

    def test_all_high_rate_follows_tier_weight(self, extreme_catalog):
        """5% tier weight gives ~5% all-High, not 1/64 or 1/8."""
        generator = GenotypeGenerator(extreme_catalog)
        rng = random.Random(2024)
        trials = 10_000
        all_high = 0
        for _ in range(trials):
            genotype = generator.generate(rng)
            if all(genotype[axis] == (3, 3) for axis in COLOR_AXES):
                all_high += 1
        rate = all_high / trials
        assert 0.04 < rate < 0.06

    def test_default_weights_mostly_land_on_intended_tier(self, catalog, resolver, seeded_rng):
        generator = GenotypeGenerator(catalog)
        matches = 0
        trials = 500
        for _ in range(trials):
            alleles, high_axes = generator.generate_triangle_alleles("color", seeded_rng)
            genotype = dict(generator.generate(seeded_rng))
            genotype.update(alleles)
            key = resolver.resolve(Genotype(genotype)).color.key.split("-")
            intended = ["H" if i in high_axes else "L" for i in range(3)]
            matches += key == intended
        assert matches / trials > 0.6
