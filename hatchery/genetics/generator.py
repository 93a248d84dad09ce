"""Random genotype generation for wild dragons.

Sampling every allele uniformly would make the rare triangle results far too
common (all-High would appear 1 time in 64 per system). Generation therefore
works in two stages for each triangle system:

1. Pick how many of the three axes are High from the catalog's tier weights,
   then choose *which* axes uniformly (a shuffle, take the first N).
2. Draw each axis' two alleles independently from the High- or Low-biased
   allele weights. The pair's average tends toward High or Low without being
   guaranteed to land there.

All other genes draw both alleles from their own weights if the catalog has
any, else uniformly over the gene's range.
"""

import logging
from typing import Dict, FrozenSet, Optional, Tuple

from hatchery.genetics.catalog import TraitCatalog, default_catalog
from hatchery.genetics.gene import AllelePair
from hatchery.genetics.genotype import Genotype
from hatchery.util.rng import RandomSource, pick_weighted_tier, require_rng_param, shuffled

logger = logging.getLogger(__name__)


class GenotypeGenerator:
    """Produces statistically controlled random genotypes.

    Args:
        catalog: Trait catalog to generate against (default: the game catalog)
        rng: Default random source for :meth:`generate`
    """

    def __init__(
        self,
        catalog: Optional[TraitCatalog] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.catalog = catalog or default_catalog()
        self.rng = rng

    def generate(self, rng: Optional[RandomSource] = None) -> Genotype:
        """Create a complete random genotype. Always succeeds."""
        rng = require_rng_param(rng if rng is not None else self.rng, "GenotypeGenerator.generate")
        alleles: Dict[str, AllelePair] = {}

        for system in self.catalog.triangles:
            if system not in self.catalog.tier_weights:
                continue
            drawn, _ = self.generate_triangle_alleles(system, rng)
            alleles.update(drawn)

        for spec in self.catalog.genes.values():
            if spec.name in alleles:
                continue
            alleles[spec.name] = spec.random_pair(rng, self.catalog.weights_for_gene(spec.name))

        # Catalog order, independent of generation order
        return Genotype({name: alleles[name] for name in self.catalog.genes})

    def generate_triangle_alleles(
        self, system: str, rng: RandomSource
    ) -> Tuple[Dict[str, AllelePair], FrozenSet[int]]:
        """Draw allele pairs for one triangle system with controlled rarity.

        Returns:
            ``(alleles, high_axes)`` where ``high_axes`` holds the indices of
            the axes that were biased High.
        """
        triangle = self.catalog.triangle(system)
        num_high = pick_weighted_tier(rng, self.catalog.tier_weights[system])
        high_axes = frozenset(shuffled(rng, range(3))[:num_high])

        alleles: Dict[str, AllelePair] = {}
        for index, axis in enumerate(triangle.axes):
            weights = (
                self.catalog.high_allele_weights
                if index in high_axes
                else self.catalog.low_allele_weights
            )
            alleles[axis] = self.catalog.gene(axis).random_pair(rng, weights)

        logger.debug("Generated %s with %d high axes %s", system, num_high, sorted(high_axes))
        return alleles, high_axes


def create_random_genotype(
    catalog: Optional[TraitCatalog] = None, *, rng: Optional[RandomSource] = None
) -> Genotype:
    """Convenience wrapper: one random genotype from *catalog*."""
    return GenotypeGenerator(catalog).generate(rng)
