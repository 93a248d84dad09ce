"""The genetic code of one dragon.

A ``Genotype`` maps every gene name to an ordered pair of allele values. It is
created once, by the generator or the breeding engine (or restored from save
data), and never changes afterwards.

Position matters only for bred dragons: position 0 holds the allele inherited
from parent A, position 1 the allele from parent B.
"""

import operator
from typing import Any, Dict, Iterator, List, Mapping, Sequence

from hatchery.exceptions import StructuralMismatchError
from hatchery.genetics.gene import AllelePair


def coerce_allele_pair(gene: str, raw: Any) -> AllelePair:
    """Return *raw* as an ``(int, int)`` pair.

    Raises:
        StructuralMismatchError: *raw* is not a two-item, non-string sequence
            of integers.
    """
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence) or len(raw) != 2:
        raise StructuralMismatchError(
            f"Gene {gene!r}: expected a pair of integer alleles, got {raw!r}"
        )
    try:
        return (operator.index(raw[0]), operator.index(raw[1]))
    except TypeError:
        raise StructuralMismatchError(
            f"Gene {gene!r}: expected a pair of integer alleles, got {raw!r}"
        ) from None


class Genotype(Mapping[str, AllelePair]):
    """Immutable mapping of gene name -> (allele0, allele1)."""

    __slots__ = ("_alleles",)

    def __init__(self, alleles: Mapping[str, Sequence[int]]) -> None:
        self._alleles: Dict[str, AllelePair] = {
            gene: coerce_allele_pair(gene, pair) for gene, pair in alleles.items()
        }

    def __getitem__(self, gene: str) -> AllelePair:
        return self._alleles[gene]

    def __iter__(self) -> Iterator[str]:
        return iter(self._alleles)

    def __len__(self) -> int:
        return len(self._alleles)

    def __hash__(self) -> int:
        return hash(frozenset(self._alleles.items()))

    def __repr__(self) -> str:
        return f"Genotype({self._alleles!r})"

    def to_dict(self) -> Dict[str, List[int]]:
        """Flat, JSON-compatible record of gene -> [int, int]."""
        return {gene: [pair[0], pair[1]] for gene, pair in self._alleles.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Sequence[int]]) -> "Genotype":
        """Restore a genotype from :meth:`to_dict` output."""
        if not isinstance(data, Mapping):
            raise StructuralMismatchError(f"Genotype data must be a mapping, got {type(data).__name__}")
        return cls(data)
