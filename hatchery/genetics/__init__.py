"""Dragon genetics: catalog, generation, breeding and phenotype resolution.

Data flows one way:

    TraitCatalog -> GenotypeGenerator / BreedingEngine -> Genotype
                 -> PhenotypeResolver -> Phenotype

The generator and breeding engine never look at phenotypes, and the resolver
never changes a genotype.
"""

# Re-export main classes for package convenience
from hatchery.genetics.breeding import (
    DEFAULT_BREEDING_CONFIG,
    BreedingConfig,
    BreedingEngine,
    Offspring,
    meiosis_one_gene,
    mutate_allele,
)
from hatchery.genetics.catalog import TraitCatalog, default_catalog, validate_catalog
from hatchery.genetics.gene import AllelePair, GeneSpec, InheritanceType, TriangleSpec
from hatchery.genetics.generator import GenotypeGenerator, create_random_genotype
from hatchery.genetics.genotype import Genotype
from hatchery.genetics.paths import PhenotypePath, all_paths
from hatchery.genetics.phenotype import (
    Phenotype,
    ResolvedBreathElement,
    ResolvedColor,
    ResolvedFinish,
    ResolvedTrait,
    TriangleResult,
)
from hatchery.genetics.resolver import PhenotypeResolver
from hatchery.genetics.validation import assert_valid_genotype, validate_genotype

__all__ = [
    # Catalog
    "TraitCatalog",
    "default_catalog",
    "validate_catalog",
    "GeneSpec",
    "TriangleSpec",
    "InheritanceType",
    "AllelePair",
    # Genotypes
    "Genotype",
    "GenotypeGenerator",
    "create_random_genotype",
    "validate_genotype",
    "assert_valid_genotype",
    # Breeding
    "BreedingConfig",
    "DEFAULT_BREEDING_CONFIG",
    "BreedingEngine",
    "Offspring",
    "meiosis_one_gene",
    "mutate_allele",
    # Phenotypes
    "PhenotypeResolver",
    "Phenotype",
    "ResolvedTrait",
    "TriangleResult",
    "ResolvedColor",
    "ResolvedFinish",
    "ResolvedBreathElement",
    "PhenotypePath",
    "all_paths",
]
