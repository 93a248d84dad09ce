"""The Dragon record: genotype, resolved phenotype and lineage metadata.

A dragon is created in one of three ways:

- ``Dragon.create_random`` for a wild dragon (generation 0, no parents)
- ``Dragon.breed`` for a clutch from two parents
- ``Dragon.from_save_data`` to restore a saved dragon

The first two roll the Dark Energy variant exactly once. Restoring never
rolls; it re-derives the phenotype from the stored genotype and flag.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

from hatchery.config.names import NAME_PREFIXES, NAME_SUFFIXES, SEXES
from hatchery.entity_ids import DragonId, IdIssuer
from hatchery.exceptions import StructuralMismatchError
from hatchery.genetics.breeding import BreedingConfig, BreedingEngine
from hatchery.genetics.catalog import TraitCatalog, default_catalog
from hatchery.genetics.generator import GenotypeGenerator
from hatchery.genetics.genotype import Genotype
from hatchery.genetics.phenotype import Phenotype
from hatchery.genetics.resolver import PhenotypeResolver
from hatchery.util.rng import RandomSource, chance, choose, require_rng_param

logger = logging.getLogger(__name__)


def random_sex(rng: RandomSource) -> str:
    return SEXES[0] if chance(rng, 0.5) else SEXES[1]


def random_name(rng: RandomSource) -> str:
    return choose(rng, NAME_PREFIXES) + choose(rng, NAME_SUFFIXES)


@dataclass(frozen=True, eq=False)
class Dragon:
    """One individual.

    Attributes:
        id: Issued by an :class:`~hatchery.entity_ids.IdIssuer`
        genotype: Immutable genetic code
        sex: ``"male"`` or ``"female"`` (cosmetic only)
        name: Display name
        parent_ids: ``(parent_a, parent_b)`` for bred dragons, else None
        mutations: Genes that mutated when this dragon was bred
        allele_origins: Gene -> origin tag per allele position, None for wild dragons
        generation: 0 for wild dragons, one more than the older parent when bred
        is_dark_energy: The persisted Dark Energy roll
        phenotype: Resolved from ``genotype`` and ``is_dark_energy``
    """

    id: DragonId
    genotype: Genotype
    sex: str
    name: str
    phenotype: Phenotype
    parent_ids: Optional[Tuple[DragonId, DragonId]] = None
    mutations: FrozenSet[str] = frozenset()
    allele_origins: Optional[Dict[str, Tuple[str, str]]] = None
    generation: int = 0
    is_dark_energy: bool = False

    @property
    def is_wild(self) -> bool:
        return self.parent_ids is None

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def create_random(
        cls,
        catalog: Optional[TraitCatalog] = None,
        *,
        rng: Optional[RandomSource] = None,
        ids: IdIssuer,
    ) -> "Dragon":
        """Create a wild dragon with a freshly generated genotype."""
        rng = require_rng_param(rng, "Dragon.create_random")
        catalog = catalog or default_catalog()
        resolver = PhenotypeResolver(catalog)

        genotype = GenotypeGenerator(catalog).generate(rng)
        sex = random_sex(rng)
        name = random_name(rng)
        dark_energy = resolver.roll_dark_energy(genotype, rng)

        dragon = cls(
            id=ids.issue(),
            genotype=genotype,
            sex=sex,
            name=name,
            phenotype=resolver.resolve(genotype, dark_energy=dark_energy),
            is_dark_energy=dark_energy,
        )
        logger.debug("Created wild dragon %d (%s)", dragon.id, dragon.name)
        return dragon

    @classmethod
    def breed(
        cls,
        parent_a: "Dragon",
        parent_b: "Dragon",
        catalog: Optional[TraitCatalog] = None,
        *,
        rng: Optional[RandomSource] = None,
        ids: IdIssuer,
        config: Optional[BreedingConfig] = None,
    ) -> List["Dragon"]:
        """Breed two dragons into a clutch of new dragons."""
        rng = require_rng_param(rng, "Dragon.breed")
        catalog = catalog or default_catalog()
        resolver = PhenotypeResolver(catalog)

        clutch = BreedingEngine(catalog, config).breed(parent_a.genotype, parent_b.genotype, rng)
        generation = max(parent_a.generation, parent_b.generation) + 1

        children = []
        for offspring in clutch:
            sex = random_sex(rng)
            name = random_name(rng)
            dark_energy = resolver.roll_dark_energy(offspring.genotype, rng)
            children.append(
                cls(
                    id=ids.issue(),
                    genotype=offspring.genotype,
                    sex=sex,
                    name=name,
                    phenotype=resolver.resolve(offspring.genotype, dark_energy=dark_energy),
                    parent_ids=(parent_a.id, parent_b.id),
                    mutations=offspring.mutations,
                    allele_origins=dict(offspring.allele_origins),
                    generation=generation,
                    is_dark_energy=dark_energy,
                )
            )

        logger.info(
            "Bred %s x %s: clutch of %d (generation %d)",
            parent_a.id,
            parent_b.id,
            len(children),
            generation,
        )
        return children

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_save_data(self) -> Dict[str, Any]:
        """Plain JSON-compatible record; the phenotype is not stored."""
        return {
            "id": self.id,
            "genotype": self.genotype.to_dict(),
            "sex": self.sex,
            "name": self.name,
            "parent_ids": list(self.parent_ids) if self.parent_ids is not None else None,
            "mutations": sorted(self.mutations),
            "allele_origins": (
                {gene: list(tags) for gene, tags in self.allele_origins.items()}
                if self.allele_origins is not None
                else None
            ),
            "generation": self.generation,
            "is_dark_energy": self.is_dark_energy,
        }

    @classmethod
    def from_save_data(
        cls, data: Mapping[str, Any], catalog: Optional[TraitCatalog] = None
    ) -> "Dragon":
        """Restore a dragon, re-deriving its phenotype with the stored Dark Energy flag.

        Raises:
            StructuralMismatchError: The record is malformed or its genotype
                does not match the catalog.
            AlleleRangeError: A stored allele is out of range.
        """
        try:
            dragon_id = data["id"]
            raw_genotype = data["genotype"]
        except KeyError as e:
            raise StructuralMismatchError(f"Dragon save data missing field {e.args[0]!r}") from None

        genotype = Genotype.from_dict(raw_genotype)
        dark_energy = bool(data.get("is_dark_energy", False))
        phenotype = PhenotypeResolver(catalog).resolve(genotype, dark_energy=dark_energy)

        parent_ids = data.get("parent_ids")
        origins = data.get("allele_origins")
        return cls(
            id=dragon_id,
            genotype=genotype,
            sex=data.get("sex", SEXES[0]),
            name=data.get("name", ""),
            phenotype=phenotype,
            parent_ids=tuple(parent_ids) if parent_ids is not None else None,
            mutations=frozenset(data.get("mutations") or ()),
            allele_origins=(
                {gene: tuple(tags) for gene, tags in origins.items()} if origins is not None else None
            ),
            generation=data.get("generation", 0),
            # The resolver ignores a flag on a non-void genotype
            is_dark_energy=phenotype.is_dark_energy,
        )
