"""Phenotype resolution: genotype in, named traits out.

Resolution is a pure function of the genotype plus one stored bit, the Dark
Energy flag. The flag is rolled exactly once per dragon by
:meth:`PhenotypeResolver.roll_dark_energy` and then passed back in on every
resolution, so a dragon never flickers between variants.

Triangle axes resolve in one of two modes:

- standard: the arithmetic mean of both alleles
- recessive extremes: ``mean + (1.5 - mean) * (spread / 3) * pull``, which
  drags heterozygous pairs toward the midpoint while homozygous pairs
  (spread 0) express unchanged
"""

import logging
from typing import Dict, Mapping, Optional, Sequence, Tuple

from hatchery.color import cmy_to_rgb, color_name_from_rgb, rgb_to_hex
from hatchery.config.triangles import VOID_KEY
from hatchery.exceptions import ConfigurationError
from hatchery.genetics import naming
from hatchery.genetics.catalog import TraitCatalog, default_catalog
from hatchery.genetics.gene import AllelePair, GeneSpec, InheritanceType
from hatchery.genetics.phenotype import (
    Phenotype,
    ResolvedBreathElement,
    ResolvedColor,
    ResolvedFinish,
    ResolvedTrait,
    TriangleResult,
)
from hatchery.genetics.validation import assert_valid_genotype
from hatchery.util.rng import RandomSource, chance, require_rng_param

logger = logging.getLogger(__name__)

AXIS_CENTER = 1.5
AXIS_SPAN = 3.0

COLOR = "color"
FINISH = "finish"
BREATH_ELEMENT = "breath_element"

UNKNOWN_NAME = "Unknown"
UNKNOWN_TIER_NAMES = {
    COLOR: "Unknown Color",
    FINISH: "Unknown Finish",
    BREATH_ELEMENT: "Unknown Element",
}


def resolve_axis(pair: AllelePair) -> float:
    return (pair[0] + pair[1]) / 2


def resolve_axis_recessive(pair: AllelePair, pull_strength: float) -> float:
    """Axis level with heterozygous pairs pulled toward the midpoint."""
    average = (pair[0] + pair[1]) / 2
    spread = abs(pair[0] - pair[1])
    return average + (AXIS_CENTER - average) * (spread / AXIS_SPAN) * pull_strength


def resolve_trait(spec: GeneSpec, pair: AllelePair) -> ResolvedTrait:
    """Resolve one non-triangle gene.

    Raises:
        UnresolvableValueError: The expressed value has no display name.
    """
    level, value = spec.express(pair)
    name = spec.display_name(value)
    if spec.inheritance is InheritanceType.CATEGORICAL:
        return ResolvedTrait(level=level, name=name)
    return ResolvedTrait(level=level, name=name, rounded=value)


class PhenotypeResolver:
    """Maps genotypes to phenotypes against one trait catalog.

    The resolver holds no mutable state; one instance may be shared freely.
    """

    def __init__(self, catalog: Optional[TraitCatalog] = None) -> None:
        self.catalog = catalog or default_catalog()
        missing = [s for s in (COLOR, FINISH, BREATH_ELEMENT) if s not in self.catalog.triangles]
        if missing:
            raise ConfigurationError(f"Catalog lacks triangle systems required for resolution: {missing}")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self, genotype: Mapping[str, AllelePair], *, dark_energy: bool = False) -> Phenotype:
        """Resolve a genotype into its full phenotype.

        Args:
            genotype: Complete genotype for this catalog
            dark_energy: The dragon's stored Dark Energy flag

        Raises:
            StructuralMismatchError: The genotype does not match the catalog.
            UnresolvableValueError: The catalog is missing a display name.
        """
        assert_valid_genotype(self.catalog, genotype)

        traits = {
            spec.name: resolve_trait(spec, genotype[spec.name])
            for spec in self.catalog.trait_genes()
        }

        color_base = self.resolve_triangle(genotype, COLOR)
        finish_base = self.resolve_triangle(genotype, FINISH)
        breath_base = self.resolve_triangle(genotype, BREATH_ELEMENT)

        finish = self._resolve_finish(finish_base)
        breath = self._resolve_breath(breath_base, dark_energy)
        color = self._resolve_color(color_base, finish_base, breath_base)

        return Phenotype(traits=traits, color=color, finish=finish, breath_element=breath)

    def roll_dark_energy(self, genotype: Mapping[str, AllelePair], rng: RandomSource) -> bool:
        """Roll the Dark Energy variant once for a dragon.

        Only a void (all-Low) breath element can roll it; any other genotype
        returns False without consuming randomness. Persist the result and
        pass it to :meth:`resolve` from then on.
        """
        rng = require_rng_param(rng, "PhenotypeResolver.roll_dark_energy")
        if self.breath_key(genotype) != VOID_KEY:
            return False
        rolled = chance(rng, self.catalog.dark_energy_chance)
        if rolled:
            logger.debug("Dark Energy rolled for void breath")
        return rolled

    def breath_key(self, genotype: Mapping[str, AllelePair]) -> str:
        """High/Low key of the breath element system."""
        assert_valid_genotype(self.catalog, genotype)
        return naming.high_low_key(self.axis_levels(genotype, BREATH_ELEMENT))

    def axis_levels(self, genotype: Mapping[str, AllelePair], system: str) -> Tuple[float, float, float]:
        triangle = self.catalog.triangle(system)
        if triangle.recessive_extremes:
            pull = self.catalog.recessive_pull_strength
            levels = [resolve_axis_recessive(genotype[axis], pull) for axis in triangle.axes]
        else:
            levels = [resolve_axis(genotype[axis]) for axis in triangle.axes]
        return (levels[0], levels[1], levels[2])

    def resolve_triangle(self, genotype: Mapping[str, AllelePair], system: str) -> TriangleResult:
        """Resolve the shared fields of one triangle system."""
        levels = self.axis_levels(genotype, system)
        key = naming.high_low_key(levels)
        base = self.catalog.triangle_phenotypes.get(system, {}).get(key, {})
        return TriangleResult(
            levels=levels,
            key=key,
            name=base.get("name", UNKNOWN_NAME),
            tier_key=naming.tier_key(levels),
        )

    # ------------------------------------------------------------------
    # Per-system resolution
    # ------------------------------------------------------------------

    def _tier_name(self, system: str, key: str) -> str:
        return self.catalog.tier_names.get(system, {}).get(key, UNKNOWN_TIER_NAMES.get(system, UNKNOWN_NAME))

    def _base_field(self, system: str, key: str, name: str, default: str = "") -> str:
        return self.catalog.triangle_phenotypes.get(system, {}).get(key, {}).get(name, default)

    def _resolve_color(
        self,
        base: TriangleResult,
        finish: TriangleResult,
        breath: TriangleResult,
    ) -> ResolvedColor:
        c_level, m_level, y_level = base.levels
        rgb = cmy_to_rgb(c_level, m_level, y_level)
        specialty, modifier = self._specialty(base.tier_key, finish.tier_key, breath.key)

        return ResolvedColor(
            levels=base.levels,
            key=base.key,
            name=base.name,
            tier_key=base.tier_key,
            tier_name=self._tier_name(COLOR, base.tier_key),
            rgb=rgb,
            hex=rgb_to_hex(*rgb),
            display_name=color_name_from_rgb(*rgb),
            cmy_breakdown=_breakdown("cmy", base.levels),
            specialty_name=specialty.get("name") if specialty else None,
            specialty_category=specialty.get("category") if specialty else None,
            modifier_prefix=modifier,
        )

    def _resolve_finish(self, base: TriangleResult) -> ResolvedFinish:
        opacity, shine, schiller = base.levels
        return ResolvedFinish(
            levels=base.levels,
            key=base.key,
            name=base.name,
            tier_key=base.tier_key,
            display_name=self._tier_name(FINISH, base.tier_key),
            desc=naming.finish_description(opacity, shine, schiller),
        )

    def _resolve_breath(self, base: TriangleResult, dark_energy: bool) -> ResolvedBreathElement:
        fire, ice, lightning = base.levels
        display_name = self._tier_name(BREATH_ELEMENT, base.tier_key)
        intensity_name = naming.breath_intensity_name(base.name, base.levels)
        display_color = self._base_field(BREATH_ELEMENT, base.key, "display_color")
        desc = naming.breath_description(fire, ice, lightning)

        is_dark_energy = False
        if dark_energy:
            if base.key == VOID_KEY:
                is_dark_energy = True
                variant = self.catalog.dark_energy_phenotype
                display_name = variant.get("name", display_name)
                intensity_name = display_name
                display_color = variant.get("display_color", display_color)
                desc = variant.get("desc", desc)
            else:
                logger.warning(
                    "Ignoring Dark Energy flag for non-void breath element %s", base.key
                )

        return ResolvedBreathElement(
            levels=base.levels,
            key=base.key,
            name=base.name,
            tier_key=base.tier_key,
            display_color=display_color,
            display_name=display_name,
            intensity_name=intensity_name,
            breath_breakdown=_breakdown("fil", base.levels),
            desc=desc,
            is_dark_energy=is_dark_energy,
        )

    def _specialty(
        self, color_tier: str, finish_tier: str, breath_key: str
    ) -> Tuple[Optional[Dict[str, str]], Optional[str]]:
        """Cross-system names: a Color+Finish specialty beats a Finish+Element prefix."""
        specialty = self.catalog.specialty_combos.get(f"{color_tier}|{finish_tier}")
        if specialty:
            return specialty, None
        return None, self.catalog.element_modifiers.get(f"{finish_tier}|{breath_key}")


def _breakdown(letters: str, levels: Sequence[float]) -> Dict[str, str]:
    return {letter: naming.level_name(level) for letter, level in zip(letters, levels)}
