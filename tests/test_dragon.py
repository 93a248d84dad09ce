"""Tests for the Dragon record: creation, breeding, save and load."""

import json
import random

import pytest

from hatchery import Dragon, SequentialIdIssuer
from hatchery.exceptions import AlleleRangeError, StructuralMismatchError
from hatchery.genetics import BreedingConfig, Genotype
from hatchery.util.rng import MissingRNGError


@pytest.fixture
def ids():
    return SequentialIdIssuer()


@pytest.fixture
def wild_pair(catalog, ids, seeded_rng):
    return (
        Dragon.create_random(catalog, rng=seeded_rng, ids=ids),
        Dragon.create_random(catalog, rng=seeded_rng, ids=ids),
    )


class TestCreateRandom:
    def test_wild_dragon(self, wild_pair):
        dragon = wild_pair[0]
        assert dragon.id == 1
        assert dragon.is_wild
        assert dragon.generation == 0
        assert dragon.mutations == frozenset()
        assert dragon.allele_origins is None
        assert dragon.sex in ("male", "female")
        assert dragon.name
        assert dragon.is_dark_energy == dragon.phenotype.is_dark_energy

    def test_ids_come_from_issuer(self, catalog, seeded_rng):
        issuer = SequentialIdIssuer(start=40)
        dragon = Dragon.create_random(catalog, rng=seeded_rng, ids=issuer)
        assert dragon.id == 40
        assert issuer.next_id == 41

    def test_same_seed_same_dragon(self, catalog):
        first = Dragon.create_random(catalog, rng=random.Random(5), ids=SequentialIdIssuer())
        second = Dragon.create_random(catalog, rng=random.Random(5), ids=SequentialIdIssuer())
        assert first.genotype == second.genotype
        assert first.name == second.name
        assert first.sex == second.sex

    def test_dragons_hash_by_identity(self, wild_pair):
        first, second = wild_pair
        assert len({first, second, first}) == 2
        assert first == first
        assert first != second

    def test_phenotype_is_not_hashable(self, wild_pair):
        with pytest.raises(TypeError):
            hash(wild_pair[0].phenotype)

    def test_requires_rng(self, catalog, ids):
        with pytest.raises(MissingRNGError):
            Dragon.create_random(catalog, ids=ids)


class TestBreed:
    def test_clutch_lineage(self, catalog, wild_pair, ids, seeded_rng):
        parent_a, parent_b = wild_pair
        clutch = Dragon.breed(parent_a, parent_b, catalog, rng=seeded_rng, ids=ids)
        assert 2 <= len(clutch) <= 4
        assert len({child.id for child in clutch}) == len(clutch)
        for child in clutch:
            assert child.parent_ids == (parent_a.id, parent_b.id)
            assert child.generation == 1
            assert not child.is_wild
            assert set(child.allele_origins) == set(catalog.genes)

    def test_generation_follows_older_parent(self, catalog, wild_pair, ids, seeded_rng):
        parent_a, parent_b = wild_pair
        child = Dragon.breed(parent_a, parent_b, catalog, rng=seeded_rng, ids=ids)[0]
        grandchild = Dragon.breed(child, parent_b, catalog, rng=seeded_rng, ids=ids)[0]
        assert grandchild.generation == 2

    def test_breeding_config_is_used(self, catalog, wild_pair, ids, seeded_rng):
        config = BreedingConfig(clutch_size_min=3, clutch_size_max=3)
        clutch = Dragon.breed(*wild_pair, catalog, rng=seeded_rng, ids=ids, config=config)
        assert len(clutch) == 3


class TestSaveData:
    def test_round_trip(self, catalog, wild_pair, ids, seeded_rng):
        child = Dragon.breed(*wild_pair, catalog, rng=seeded_rng, ids=ids)[0]
        data = json.loads(json.dumps(child.to_save_data()))
        restored = Dragon.from_save_data(data, catalog)
        assert restored.id == child.id
        assert restored.genotype == child.genotype
        assert restored.parent_ids == child.parent_ids
        assert restored.allele_origins == child.allele_origins
        assert restored.mutations == child.mutations
        assert restored.generation == child.generation
        assert restored.phenotype == child.phenotype

    def test_genotype_saved_as_pairs(self, wild_pair):
        data = wild_pair[0].to_save_data()
        assert all(isinstance(pair, list) and len(pair) == 2 for pair in data["genotype"].values())
        assert data["allele_origins"] is None
        assert data["parent_ids"] is None

    def test_dark_energy_restored_not_rerolled(self, catalog, make_genotype):
        void = make_genotype(breath_fire=(0, 0), breath_ice=(0, 0), breath_lightning=(0, 0))
        data = {"id": 9, "genotype": void.to_dict(), "is_dark_energy": True}
        for _ in range(20):
            dragon = Dragon.from_save_data(data, catalog)
            assert dragon.is_dark_energy is True
            assert dragon.phenotype.breath_element.display_name == "Dark Energy"

    def test_dark_energy_flag_on_non_void_is_dropped(self, catalog, make_genotype):
        fire = make_genotype(breath_fire=(3, 3))
        data = {"id": 9, "genotype": fire.to_dict(), "is_dark_energy": True}
        dragon = Dragon.from_save_data(data, catalog)
        assert dragon.is_dark_energy is False
        assert dragon.to_save_data()["is_dark_energy"] is False

    def test_missing_id(self, make_genotype):
        with pytest.raises(StructuralMismatchError, match="id"):
            Dragon.from_save_data({"genotype": make_genotype().to_dict()})

    def test_bad_allele_pair(self, make_genotype):
        genotype = make_genotype().to_dict()
        genotype["body_size"] = [1, 2, 3]
        with pytest.raises(StructuralMismatchError, match="body_size"):
            Dragon.from_save_data({"id": 1, "genotype": genotype})

    def test_out_of_range_allele(self, make_genotype):
        genotype = make_genotype().to_dict()
        genotype["frame_wings"] = [0, 9]
        with pytest.raises(AlleleRangeError, match="frame_wings"):
            Dragon.from_save_data({"id": 1, "genotype": genotype})


class TestGenotype:
    def test_is_immutable_mapping(self, make_genotype):
        genotype = make_genotype()
        with pytest.raises(TypeError):
            genotype["body_size"] = (2, 2)

    def test_equal_genotypes_hash_equal(self, make_genotype):
        assert hash(make_genotype(body_size=(2, 3))) == hash(make_genotype(body_size=(2, 3)))

    def test_rejects_non_integer_alleles(self):
        with pytest.raises(StructuralMismatchError):
            Genotype({"body_size": ("a", 1)})

    def test_from_dict_requires_mapping(self):
        with pytest.raises(StructuralMismatchError):
            Genotype.from_dict([["body_size", [1, 1]]])
