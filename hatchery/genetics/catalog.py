"""The trait catalog: every table the genetics algorithms read.

A ``TraitCatalog`` is assembled once (normally via :func:`default_catalog`)
and is read-only afterwards, so a single instance can be shared by any number
of generators, breeding engines and resolvers, across threads.

Construction validates the tables; a malformed catalog raises
``ConfigurationError`` immediately instead of producing odd dragons later.
"""

import functools
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from hatchery.config import breeding as breeding_config
from hatchery.config import generation as generation_config
from hatchery.config import triangles as triangle_config
from hatchery.config.genes import GENE_SYSTEMS
from hatchery.exceptions import ConfigurationError
from hatchery.genetics.gene import GeneSpec, InheritanceType, TriangleSpec

logger = logging.getLogger(__name__)

TIER_COUNTS = (0, 1, 2, 3)


@dataclass(frozen=True)
class TraitCatalog:
    """Gene definitions, triangle systems, weights and name tables.

    Attributes:
        genes: Gene name -> spec, in catalog order
        triangles: System name -> triangle spec
        triangle_phenotypes: System -> H/L key (``"H-L-L"``) -> base phenotype fields
        tier_names: System -> tier key (``"0-3-1"``) -> display name (64 entries)
        specialty_combos: ``"<color tier>|<finish tier>"`` -> {name, category}
        element_modifiers: ``"<finish tier>|<element H/L>"`` -> prefix
        dark_energy_phenotype: Fields replacing the void breath for Dark Energy
        tier_weights: System -> {number of High axes: weight}
        low_allele_weights: Allele weights for Low-biased triangle axes
        high_allele_weights: Allele weights for High-biased triangle axes
        gene_weights: Per-gene allele weights for non-triangle genes
        recessive_pull_strength: Pull toward 1.5 on recessive-extremes axes
        dark_energy_chance: Probability a void breath rolls Dark Energy
    """

    genes: Dict[str, GeneSpec]
    triangles: Dict[str, TriangleSpec]
    triangle_phenotypes: Dict[str, Dict[str, Dict[str, Any]]] = field(default_factory=dict)
    tier_names: Dict[str, Dict[str, str]] = field(default_factory=dict)
    specialty_combos: Dict[str, Dict[str, str]] = field(default_factory=dict)
    element_modifiers: Dict[str, str] = field(default_factory=dict)
    dark_energy_phenotype: Dict[str, str] = field(default_factory=dict)
    tier_weights: Dict[str, Dict[int, float]] = field(default_factory=dict)
    low_allele_weights: Optional[Sequence[float]] = None
    high_allele_weights: Optional[Sequence[float]] = None
    gene_weights: Dict[str, Sequence[float]] = field(default_factory=dict)
    recessive_pull_strength: float = breeding_config.RECESSIVE_PULL_STRENGTH
    dark_energy_chance: float = breeding_config.DARK_ENERGY_CHANCE

    # Compared by value but holds dicts, so instances are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        issues = validate_catalog(self)
        if issues:
            raise ConfigurationError("Invalid trait catalog:\n  " + "\n  ".join(issues))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @property
    def gene_names(self) -> Tuple[str, ...]:
        return tuple(self.genes)

    def gene(self, name: str) -> GeneSpec:
        try:
            return self.genes[name]
        except KeyError:
            raise ConfigurationError(f"Unknown gene {name!r}") from None

    def triangle(self, name: str) -> TriangleSpec:
        try:
            return self.triangles[name]
        except KeyError:
            raise ConfigurationError(f"Unknown triangle system {name!r}") from None

    def trait_genes(self) -> List[GeneSpec]:
        """Non-triangle genes, resolved one gene at a time."""
        return [spec for spec in self.genes.values() if not spec.is_triangle]

    def triangle_gene_names(self) -> List[str]:
        return [axis for tri in self.triangles.values() for axis in tri.axes]

    def weights_for_gene(self, name: str) -> Optional[Sequence[float]]:
        return self.gene_weights.get(name)


def validate_catalog(catalog: TraitCatalog) -> List[str]:
    """Check a catalog for structural problems.

    Returns a list of human-readable issues; empty means valid.
    """
    issues: List[str] = []

    for name, spec in catalog.genes.items():
        if spec.name != name:
            issues.append(f"genes.{name}: spec is named {spec.name!r}")
        if spec.min_allele > spec.max_allele:
            issues.append(f"genes.{name}: min_allele {spec.min_allele} > max_allele {spec.max_allele}")
            continue
        if spec.phenotype_map is not None:
            # Linear averages round back into the range, so every legal value
            # can be produced for both inheritance types
            missing = [v for v in spec.allele_values() if v not in spec.phenotype_map]
            if missing:
                issues.append(f"genes.{name}.phenotype_map: no names for values {missing}")

    claimed: Dict[str, str] = {}
    for system, tri in catalog.triangles.items():
        if len(tri.axes) != 3:
            issues.append(f"triangles.{system}: expected 3 axes, got {len(tri.axes)}")
        for axis in tri.axes:
            spec = catalog.genes.get(axis)
            if spec is None:
                issues.append(f"triangles.{system}: axis {axis!r} is not a catalog gene")
                continue
            if not spec.is_triangle:
                issues.append(f"triangles.{system}: axis {axis!r} is not marked system='triangle'")
            if axis in claimed:
                issues.append(f"triangles.{system}: axis {axis!r} already used by {claimed[axis]}")
            claimed[axis] = system
            for label, weights in (
                ("low_allele_weights", catalog.low_allele_weights),
                ("high_allele_weights", catalog.high_allele_weights),
            ):
                if weights is not None and len(weights) != spec.allele_count:
                    issues.append(
                        f"{label}: {len(weights)} weights for {axis} with {spec.allele_count} values"
                    )

        tiers = catalog.tier_weights.get(system)
        if tiers is not None:
            bad = [tier for tier in tiers if tier not in TIER_COUNTS]
            if bad:
                issues.append(f"tier_weights.{system}: tiers {bad} outside 0-3")
            if sum(tiers.values()) <= 0 or any(w < 0 for w in tiers.values()):
                issues.append(f"tier_weights.{system}: weights must be non-negative with a positive total")

    for name, spec in catalog.genes.items():
        if spec.is_triangle and name not in claimed:
            issues.append(f"genes.{name}: triangle gene not used by any triangle system")

    for name, weights in catalog.gene_weights.items():
        spec = catalog.genes.get(name)
        if spec is None:
            issues.append(f"gene_weights.{name}: not a catalog gene")
        elif len(weights) != spec.allele_count:
            issues.append(f"gene_weights.{name}: {len(weights)} weights for {spec.allele_count} values")

    if not 0.0 <= catalog.dark_energy_chance <= 1.0:
        issues.append(f"dark_energy_chance: {catalog.dark_energy_chance} not in [0, 1]")

    return issues


def build_gene_specs(systems=GENE_SYSTEMS) -> Dict[str, GeneSpec]:
    """Build GeneSpecs from the plain gene definition tables."""
    specs: Dict[str, GeneSpec] = {}
    for system, genes in systems:
        for name, raw in genes.items():
            specs[name] = GeneSpec(
                name=name,
                min_allele=raw["min"],
                max_allele=raw["max"],
                inheritance=InheritanceType(raw["inheritance"]),
                phenotype_map=dict(raw["phenotype_map"]) if "phenotype_map" in raw else None,
                system=system,
                label=raw.get("label", name),
            )
    return specs


def build_triangle_specs(
    systems: Mapping[str, Mapping[str, Any]] = triangle_config.TRIANGLE_SYSTEMS,
) -> Dict[str, TriangleSpec]:
    return {
        name: TriangleSpec(
            name=name,
            axes=tuple(raw["axes"]),
            label=raw.get("label", name),
            recessive_extremes=bool(raw.get("recessive_extremes", False)),
        )
        for name, raw in systems.items()
    }


@functools.lru_cache(maxsize=1)
def default_catalog() -> TraitCatalog:
    """The game's standard catalog, built from ``hatchery.config``."""
    catalog = TraitCatalog(
        genes=build_gene_specs(),
        triangles=build_triangle_specs(),
        triangle_phenotypes={
            "color": triangle_config.COLOR_PHENOTYPES,
            "finish": triangle_config.FINISH_PHENOTYPES,
            "breath_element": triangle_config.BREATH_ELEMENT_PHENOTYPES,
        },
        tier_names={
            "color": triangle_config.COLOR_NAMES,
            "finish": triangle_config.FINISH_NAMES,
            "breath_element": triangle_config.ELEMENT_NAMES,
        },
        specialty_combos=triangle_config.SPECIALTY_COMBOS,
        element_modifiers=triangle_config.ELEMENT_MODIFIERS,
        dark_energy_phenotype=triangle_config.DARK_ENERGY_PHENOTYPE,
        tier_weights=generation_config.TRIANGLE_TIER_WEIGHTS,
        low_allele_weights=generation_config.LOW_ALLELE_WEIGHTS,
        high_allele_weights=generation_config.HIGH_ALLELE_WEIGHTS,
        gene_weights=generation_config.RANDOM_ALLELE_WEIGHTS,
    )
    logger.debug(
        "Built default trait catalog: %d genes, %d triangle systems",
        len(catalog.genes),
        len(catalog.triangles),
    )
    return catalog
