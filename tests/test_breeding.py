"""Tests for breeding (meiosis with mutation)."""

import random

import pytest

from hatchery.exceptions import ConfigurationError, StructuralMismatchError
from hatchery.genetics import (
    BreedingConfig,
    BreedingEngine,
    Genotype,
    GenotypeGenerator,
    meiosis_one_gene,
    mutate_allele,
)
from hatchery.genetics.validation import validate_genotype
from hatchery.util.rng import MissingRNGError


@pytest.fixture
def parents(catalog):
    rng = random.Random(11)
    generator = GenotypeGenerator(catalog)
    return generator.generate(rng), generator.generate(rng)


class TestMutateAllele:
    def test_no_mutation_above_rate(self, catalog, fixed_random):
        spec = catalog.gene("body_size")
        assert mutate_allele(3, spec, 0.005, fixed_random(0.5)) == (3, False)

    def test_rate_is_exclusive_bound(self, catalog, fixed_random):
        spec = catalog.gene("body_size")
        assert mutate_allele(3, spec, 0.005, fixed_random(0.005)) == (3, False)
        draws = fixed_random(0.0049, 0.9)
        assert mutate_allele(3, spec, 0.005, draws) == (4, True)
        assert draws.calls == 2

    def test_shift_down(self, catalog, fixed_random):
        spec = catalog.gene("body_size")
        # First draw triggers the mutation, second picks the direction
        assert mutate_allele(3, spec, 0.5, fixed_random(0.1, 0.2)) == (2, True)

    def test_shift_up(self, catalog, fixed_random):
        spec = catalog.gene("body_size")
        assert mutate_allele(3, spec, 0.5, fixed_random(0.1, 0.7)) == (4, True)

    def test_clamped_shift_is_not_a_mutation(self, catalog, fixed_random):
        spec = catalog.gene("body_size")
        assert mutate_allele(1, spec, 0.5, fixed_random(0.1, 0.2)) == (1, False)
        assert mutate_allele(6, spec, 0.5, fixed_random(0.1, 0.7)) == (6, False)


class TestMeiosisOneGene:
    def test_position_zero_from_parent_a(self, catalog, fixed_random):
        spec = catalog.gene("body_size")
        # Picks pair_a[0] (0.1 < 0.5) and pair_b[1] (0.9); no mutation
        rng = fixed_random(0.1, 0.9, 0.9, 0.9)
        result = meiosis_one_gene((1, 2), (5, 6), spec, 0.005, rng)
        assert result.alleles == (1, 6)
        assert result.selected == (1, 6)
        assert result.origins == ("A", "B")
        assert not result.any_mutated

    def test_mutation_recorded_per_position(self, catalog, fixed_random):
        spec = catalog.gene("body_size")
        # a picks 2, b picks 5, a mutates up, b does not mutate
        rng = fixed_random(0.9, 0.1, 0.0, 0.9, 0.9)
        result = meiosis_one_gene((1, 2), (5, 6), spec, 0.005, rng)
        assert result.selected == (2, 5)
        assert result.alleles == (3, 5)
        assert result.mutated == (True, False)


class TestBreedingEngine:
    def test_clutch_size_within_configured_range(self, catalog, parents, seeded_rng):
        engine = BreedingEngine(catalog, BreedingConfig(clutch_size_min=2, clutch_size_max=4))
        sizes = {len(engine.breed(*parents, rng=seeded_rng)) for _ in range(200)}
        assert sizes == {2, 3, 4}

    def test_offspring_are_complete_and_in_range(self, catalog, parents, seeded_rng):
        engine = BreedingEngine(catalog, BreedingConfig(mutation_rate=0.3))
        for _ in range(50):
            for child in engine.breed(*parents, rng=seeded_rng):
                assert list(child.genotype) == list(catalog.genes)
                assert validate_genotype(catalog, child.genotype) == []

    def test_allele_origins(self, catalog, parents, seeded_rng):
        """Position 0 traces to parent A and position 1 to parent B, within one step."""
        parent_a, parent_b = parents
        engine = BreedingEngine(catalog, BreedingConfig(mutation_rate=0.2))
        for _ in range(50):
            for child in engine.breed(parent_a, parent_b, rng=seeded_rng):
                assert set(child.allele_origins) == set(catalog.genes)
                for gene, (from_a, from_b) in child.genotype.items():
                    assert child.allele_origins[gene] == ("A", "B")
                    assert min(abs(from_a - v) for v in parent_a[gene]) <= 1
                    assert min(abs(from_b - v) for v in parent_b[gene]) <= 1

    def test_no_mutation_means_alleles_copied(self, catalog, parents, seeded_rng):
        parent_a, parent_b = parents
        engine = BreedingEngine(catalog, BreedingConfig(mutation_rate=0.0))
        for child in engine.breed(parent_a, parent_b, rng=seeded_rng):
            assert child.mutations == frozenset()
            for gene, (from_a, from_b) in child.genotype.items():
                assert from_a in parent_a[gene]
                assert from_b in parent_b[gene]

    def test_mutation_list_matches_changed_genes(self, catalog):
        """A gene is listed exactly when an inherited allele could not come unchanged from its parent."""
        low = Genotype({name: (spec.min_allele, spec.min_allele) for name, spec in catalog.genes.items()})
        engine = BreedingEngine(catalog, BreedingConfig(mutation_rate=0.5))
        rng = random.Random(5)
        saw_mutation = False
        for _ in range(20):
            for child in engine.breed(low, low, rng=rng):
                for gene, pair in child.genotype.items():
                    # Both parents are homozygous at the minimum, so any change is upward
                    changed = pair != (catalog.genes[gene].min_allele,) * 2
                    assert (gene in child.mutations) == changed
                    saw_mutation = saw_mutation or changed
        assert saw_mutation

    def test_same_seed_same_clutch(self, catalog, parents):
        engine = BreedingEngine(catalog)
        first = engine.breed(*parents, rng=random.Random(3))
        second = engine.breed(*parents, rng=random.Random(3))
        assert [c.genotype for c in first] == [c.genotype for c in second]
        assert [c.mutations for c in first] == [c.mutations for c in second]

    def test_missing_gene_fails_fast(self, catalog, parents, seeded_rng):
        parent_a, parent_b = parents
        broken = {k: v for k, v in parent_b.items() if k != "tail_length"}
        with pytest.raises(StructuralMismatchError, match="tail_length"):
            BreedingEngine(catalog).breed(parent_a, Genotype(broken), rng=seeded_rng)

    def test_extra_gene_fails_fast(self, catalog, parents, seeded_rng):
        parent_a, parent_b = parents
        extra = dict(parent_a)
        extra["wing_spots"] = (1, 1)
        with pytest.raises(StructuralMismatchError, match="wing_spots"):
            BreedingEngine(catalog).breed(Genotype(extra), parent_b, rng=seeded_rng)

    @pytest.mark.parametrize("bad", [None, 2, [2], [2.5, 1], "22"])
    def test_malformed_pair_in_plain_dict_fails_fast(self, catalog, parents, seeded_rng, bad):
        parent_a, parent_b = parents
        raw = parent_a.to_dict()
        raw["tail_length"] = bad
        with pytest.raises(StructuralMismatchError, match="tail_length"):
            BreedingEngine(catalog).breed(raw, parent_b, rng=seeded_rng)

    def test_plain_dict_parents_breed(self, catalog, parents):
        parent_a, parent_b = parents
        engine = BreedingEngine(catalog)
        from_dicts = engine.breed(parent_a.to_dict(), parent_b.to_dict(), rng=random.Random(8))
        from_genotypes = engine.breed(parent_a, parent_b, rng=random.Random(8))
        assert [c.genotype for c in from_dicts] == [c.genotype for c in from_genotypes]

    def test_requires_rng(self, catalog, parents):
        with pytest.raises(MissingRNGError):
            BreedingEngine(catalog).breed(*parents)

    def test_breed_one(self, catalog, parents, seeded_rng):
        child = BreedingEngine(catalog).breed_one(*parents, rng=seeded_rng)
        assert validate_genotype(catalog, child.genotype) == []


class TestBreedingConfig:
    def test_defaults(self):
        config = BreedingConfig()
        assert config.mutation_rate == 0.005
        assert (config.clutch_size_min, config.clutch_size_max) == (2, 4)

    def test_rejects_bad_rate(self):
        with pytest.raises(ConfigurationError):
            BreedingConfig(mutation_rate=1.5)

    def test_rejects_inverted_clutch_range(self):
        with pytest.raises(ConfigurationError):
            BreedingConfig(clutch_size_min=5, clutch_size_max=2)
