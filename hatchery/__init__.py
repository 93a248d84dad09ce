"""Dragon hatchery genetics core.

This package contains the pure genetics logic for the dragon breeding game,
with no rendering, persistence or UI dependencies. Key modules include:

- genetics: trait catalog, genotype generation, breeding and phenotype resolution
- dragon: the Dragon record (genotype + phenotype + lineage)
- color: CMY/RGB/HSL conversions and color naming
- entity_ids: injected dragon id issuing
- util.rng: the random source protocol and helpers built on it

Design note: this module exposes a small, explicit public API via ``__all__``.
Use direct imports from subpackages for internal helpers.
"""

from . import genetics as genetics
from .dragon import Dragon
from .entity_ids import IdIssuer, SequentialIdIssuer
from .exceptions import HatcheryError

__all__ = [
    "genetics",
    "Dragon",
    "IdIssuer",
    "SequentialIdIssuer",
    "HatcheryError",
]
