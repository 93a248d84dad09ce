"""Validation helpers for genotypes.

The breeding engine and resolver call :func:`assert_valid_genotype` at entry
so a genotype that does not match the catalog fails fast with a descriptive
error instead of being partially bred or resolved.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from hatchery.exceptions import AlleleRangeError, StructuralMismatchError
from hatchery.genetics.catalog import TraitCatalog
from hatchery.genetics.genotype import coerce_allele_pair

PAIR_ISSUE = "expected a pair of integer alleles"


def validate_genotype(
    catalog: TraitCatalog, genotype: Mapping[str, Sequence[int]], *, path: str = "genotype"
) -> List[str]:
    """Validate a genotype against the catalog.

    Returns a list of human-readable issues; empty means valid.
    """
    issues: List[str] = []
    for spec in catalog.genes.values():
        if spec.name not in genotype:
            issues.append(f"{path}.{spec.name}: missing gene")
            continue
        raw: Any = genotype[spec.name]
        try:
            pair = coerce_allele_pair(spec.name, raw)
        except StructuralMismatchError:
            issues.append(f"{path}.{spec.name}: {PAIR_ISSUE}, got {raw!r}")
            continue
        for position, value in enumerate(pair):
            if not spec.contains(value):
                issues.append(
                    f"{path}.{spec.name}[{position}]: {value} not in "
                    f"[{spec.min_allele}, {spec.max_allele}]"
                )
    for gene in genotype:
        if gene not in catalog.genes:
            issues.append(f"{path}.{gene}: not a catalog gene")
    return issues


def assert_valid_genotype(
    catalog: TraitCatalog, genotype: Mapping[str, Sequence[int]], *, path: str = "genotype"
) -> None:
    """Raise if *genotype* does not carry exactly the catalog's genes in range.

    Raises:
        StructuralMismatchError: Not a mapping, genes missing or unknown, or a
            gene that is not a pair of integer alleles.
        AlleleRangeError: Every gene is a well-formed pair but an allele is out
            of range.
    """
    if not isinstance(genotype, Mapping):
        raise StructuralMismatchError(
            f"{path} must be a mapping of gene -> allele pair, got {type(genotype).__name__}"
        )

    missing = [name for name in catalog.genes if name not in genotype]
    extra = [name for name in genotype if name not in catalog.genes]
    if missing or extra:
        parts = []
        if missing:
            parts.append(f"missing genes {missing}")
        if extra:
            parts.append(f"unknown genes {extra}")
        raise StructuralMismatchError(f"{path} does not match the trait catalog: " + "; ".join(parts))

    issues = validate_genotype(catalog, genotype, path=path)
    if issues:
        structural = [issue for issue in issues if PAIR_ISSUE in issue]
        if structural:
            raise StructuralMismatchError("; ".join(structural))
        raise AlleleRangeError("Alleles out of range: " + "; ".join(issues))
