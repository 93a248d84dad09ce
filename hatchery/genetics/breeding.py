"""Breeding: meiosis with per-allele mutation.

Each offspring is built gene by gene with independent assortment:

1. From each parent, pick one of its two allele positions with equal
   probability (which chromosome is passed on).
2. Each picked allele may mutate: with probability ``mutation_rate`` it shifts
   by -1 or +1 (equal odds), clamped to the gene's range. A shift clamped back
   to the original value is not a mutation.
3. The offspring's pair is ``(from_a, from_b)``: position 0 always comes from
   parent A and position 1 from parent B, mutated or not.
4. A gene is listed in the offspring's mutations if either allele changed.

Breeding never inspects phenotypes.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple

from hatchery.config.breeding import CLUTCH_SIZE_MAX, CLUTCH_SIZE_MIN, MUTATION_RATE
from hatchery.exceptions import ConfigurationError
from hatchery.genetics.catalog import TraitCatalog, default_catalog
from hatchery.genetics.gene import AllelePair, GeneSpec
from hatchery.genetics.genotype import Genotype
from hatchery.genetics.validation import assert_valid_genotype
from hatchery.util.rng import RandomSource, chance, random_int, require_rng_param

logger = logging.getLogger(__name__)

PARENT_A = "A"
PARENT_B = "B"
ORIGINS: Tuple[str, str] = (PARENT_A, PARENT_B)


@dataclass(frozen=True)
class BreedingConfig:
    """Tunables for a breeding event.

    Attributes:
        mutation_rate: Chance per inherited allele of a +/-1 shift
        clutch_size_min: Smallest clutch (inclusive)
        clutch_size_max: Largest clutch (inclusive)
    """

    mutation_rate: float = MUTATION_RATE
    clutch_size_min: int = CLUTCH_SIZE_MIN
    clutch_size_max: int = CLUTCH_SIZE_MAX

    def __post_init__(self) -> None:
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ConfigurationError(f"mutation_rate {self.mutation_rate} not in [0, 1]")
        if self.clutch_size_min < 1 or self.clutch_size_min > self.clutch_size_max:
            raise ConfigurationError(
                f"Invalid clutch size range [{self.clutch_size_min}, {self.clutch_size_max}]"
            )


DEFAULT_BREEDING_CONFIG = BreedingConfig()


@dataclass(frozen=True)
class GeneInheritance:
    """Outcome of meiosis for one gene of one offspring."""

    alleles: AllelePair
    selected: AllelePair  # parent alleles picked, before mutation
    mutated: Tuple[bool, bool]
    origins: Tuple[str, str] = ORIGINS

    @property
    def any_mutated(self) -> bool:
        return self.mutated[0] or self.mutated[1]


@dataclass(frozen=True)
class Offspring:
    """One bred genotype plus the bookkeeping the UI shows.

    Attributes:
        genotype: The offspring's genetic code
        mutations: Genes where at least one allele mutated
        allele_origins: Gene -> origin tag of each allele position
    """

    genotype: Genotype
    mutations: FrozenSet[str]
    allele_origins: Dict[str, Tuple[str, str]]

    # dict fields
    __hash__ = None  # type: ignore[assignment]


def mutate_allele(
    value: int,
    spec: GeneSpec,
    mutation_rate: float,
    rng: RandomSource,
) -> Tuple[int, bool]:
    """Maybe shift an allele by +/-1 within the gene's range.

    Returns:
        ``(new_value, mutated)``; ``mutated`` is False when a shift was clamped
        back onto the original value.
    """
    if not chance(rng, mutation_rate):
        return value, False
    direction = -1 if chance(rng, 0.5) else 1
    new_value = spec.clamp(value + direction)
    return new_value, new_value != value


def meiosis_one_gene(
    pair_a: AllelePair,
    pair_b: AllelePair,
    spec: GeneSpec,
    mutation_rate: float,
    rng: RandomSource,
) -> GeneInheritance:
    """Pick one allele from each parent and apply mutation to both."""
    from_a = pair_a[0] if chance(rng, 0.5) else pair_a[1]
    from_b = pair_b[0] if chance(rng, 0.5) else pair_b[1]

    value_a, mutated_a = mutate_allele(from_a, spec, mutation_rate, rng)
    value_b, mutated_b = mutate_allele(from_b, spec, mutation_rate, rng)

    return GeneInheritance(
        alleles=(value_a, value_b),
        selected=(from_a, from_b),
        mutated=(mutated_a, mutated_b),
    )


class BreedingEngine:
    """Combines two genotypes into a clutch of offspring.

    Args:
        catalog: Trait catalog both parents must match
        config: Mutation rate and clutch size range
        rng: Default random source for :meth:`breed`
    """

    def __init__(
        self,
        catalog: Optional[TraitCatalog] = None,
        config: Optional[BreedingConfig] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.catalog = catalog or default_catalog()
        self.config = config or DEFAULT_BREEDING_CONFIG
        self.rng = rng

    def breed(
        self,
        parent_a: Genotype,
        parent_b: Genotype,
        rng: Optional[RandomSource] = None,
    ) -> List[Offspring]:
        """Breed two parents into a clutch of independently bred offspring.

        Raises:
            StructuralMismatchError: Either parent does not carry exactly the
                catalog's genes.
        """
        rng = require_rng_param(rng if rng is not None else self.rng, "BreedingEngine.breed")
        assert_valid_genotype(self.catalog, parent_a, path="parent_a")
        assert_valid_genotype(self.catalog, parent_b, path="parent_b")

        clutch_size = random_int(rng, self.config.clutch_size_min, self.config.clutch_size_max)
        clutch = [self._breed_one(parent_a, parent_b, rng) for _ in range(clutch_size)]
        logger.debug(
            "Bred clutch of %d (%d with mutations)",
            clutch_size,
            sum(1 for child in clutch if child.mutations),
        )
        return clutch

    def breed_one(
        self,
        parent_a: Genotype,
        parent_b: Genotype,
        rng: Optional[RandomSource] = None,
    ) -> Offspring:
        """Breed a single offspring (no clutch size roll)."""
        rng = require_rng_param(rng if rng is not None else self.rng, "BreedingEngine.breed_one")
        assert_valid_genotype(self.catalog, parent_a, path="parent_a")
        assert_valid_genotype(self.catalog, parent_b, path="parent_b")
        return self._breed_one(parent_a, parent_b, rng)

    def _breed_one(self, parent_a: Genotype, parent_b: Genotype, rng: RandomSource) -> Offspring:
        alleles: Dict[str, AllelePair] = {}
        origins: Dict[str, Tuple[str, str]] = {}
        mutations = set()

        for spec in self.catalog.genes.values():
            result = meiosis_one_gene(
                parent_a[spec.name],
                parent_b[spec.name],
                spec,
                self.config.mutation_rate,
                rng,
            )
            alleles[spec.name] = result.alleles
            origins[spec.name] = result.origins
            if result.any_mutated:
                mutations.add(spec.name)

        if mutations:
            logger.debug("Mutations in offspring: %s", sorted(mutations))
        return Offspring(
            genotype=Genotype(alleles),
            mutations=frozenset(mutations),
            allele_origins=origins,
        )
