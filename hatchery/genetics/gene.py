"""Gene and triangle system specifications.

This module provides:
- InheritanceType: how a gene's two alleles combine into an expressed value
- GeneSpec: declarative specification for one gene's range and display names
- TriangleSpec: a named group of three genes resolved together
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

from hatchery.exceptions import UnresolvableValueError
from hatchery.util.rng import RandomSource, weighted_random_int

AllelePair = Tuple[int, int]


class InheritanceType(Enum):
    """How the two alleles of a gene are expressed."""

    LINEAR = "linear"  # incomplete dominance: average, rounded half up
    CATEGORICAL = "categorical"  # higher allele wins outright


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class GeneSpec:
    """Declarative specification for a gene.

    Attributes:
        name: Gene name, the key used in genotypes
        min_allele: Minimum legal allele value
        max_allele: Maximum legal allele value
        inheritance: Linear (blend) or categorical (max wins) expression
        phenotype_map: Resolved value -> display name; None for triangle axes
        system: ``main``, ``sub`` or ``triangle``
        label: Human-readable name
    """

    name: str
    min_allele: int
    max_allele: int
    inheritance: InheritanceType = InheritanceType.LINEAR
    phenotype_map: Optional[Dict[int, str]] = field(default=None, compare=False)
    system: str = "main"
    label: str = ""

    @property
    def is_triangle(self) -> bool:
        return self.system == "triangle"

    @property
    def allele_count(self) -> int:
        """Number of distinct legal allele values."""
        return self.max_allele - self.min_allele + 1

    def allele_values(self) -> range:
        return range(self.min_allele, self.max_allele + 1)

    def contains(self, value: int) -> bool:
        return self.min_allele <= value <= self.max_allele

    def clamp(self, value: int) -> int:
        return max(self.min_allele, min(self.max_allele, value))

    def random_allele(
        self, rng: RandomSource, weights: Optional[Sequence[float]] = None
    ) -> int:
        """Draw one allele, weighted by ``weights[value - min_allele]`` if given."""
        return weighted_random_int(rng, self.min_allele, self.max_allele, weights)

    def random_pair(
        self, rng: RandomSource, weights: Optional[Sequence[float]] = None
    ) -> AllelePair:
        """Draw both alleles independently from the same distribution."""
        return (self.random_allele(rng, weights), self.random_allele(rng, weights))

    def express(self, pair: AllelePair) -> Tuple[float, int]:
        """Return ``(level, value)`` for an allele pair.

        For linear genes the level is the float average and the value is that
        average rounded half up. For categorical genes both are the higher
        allele.
        """
        if self.inheritance is InheritanceType.CATEGORICAL:
            expressed = max(pair[0], pair[1])
            return float(expressed), expressed
        level = (pair[0] + pair[1]) / 2
        return level, round_half_up(level)

    def display_name(self, value: int) -> str:
        """Look up the display name for a resolved value.

        Raises:
            UnresolvableValueError: The gene has a phenotype map without an
                entry for *value*. This is a catalog bug, never bad input.
        """
        if self.phenotype_map is None:
            return str(value)
        try:
            return self.phenotype_map[value]
        except KeyError:
            raise UnresolvableValueError(
                f"Gene {self.name!r} has no phenotype name for resolved value {value}"
            ) from None


@dataclass(frozen=True)
class TriangleSpec:
    """Three genes resolved together into one named result.

    Axis order is significant: it fixes the order of characters in the tier
    keys used for table lookups.
    """

    name: str
    axes: Tuple[str, str, str]
    label: str = ""
    recessive_extremes: bool = False
