"""Typed access to phenotype fields by stable path name.

Quest and achievement code match dragons with rules like "``color.displayName``
equals ``Deep Purple``". Instead of walking arbitrary attributes, every
addressable field is enumerated here; anything else is rejected when the path
is parsed, not when it is evaluated.

Addressable paths:

- ``traits.<gene>.name`` for every non-triangle gene
- ``color.displayName``, ``color.name``, ``color.specialtyName``,
  ``color.modifierPrefix``
- ``finish.displayName``, ``finish.name``
- ``breathElement.displayName``, ``breathElement.name``
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from hatchery.exceptions import UnknownPathError
from hatchery.genetics.catalog import TraitCatalog, default_catalog
from hatchery.genetics.phenotype import Phenotype

# Path string -> (phenotype section, attribute, triangle systems feeding it)
TRIANGLE_FIELDS = {
    "color.displayName": ("color", "display_name", ("color",)),
    "color.name": ("color", "name", ("color",)),
    "color.specialtyName": ("color", "specialty_name", ("color", "finish")),
    "color.modifierPrefix": ("color", "modifier_prefix", ("finish", "breath_element")),
    "finish.displayName": ("finish", "display_name", ("finish",)),
    "finish.name": ("finish", "name", ("finish",)),
    "breathElement.displayName": ("breath_element", "display_name", ("breath_element",)),
    "breathElement.name": ("breath_element", "name", ("breath_element",)),
}

TRAITS_PREFIX = "traits"


@dataclass(frozen=True)
class PhenotypePath:
    """One validated, addressable phenotype field.

    Attributes:
        text: The path as written, e.g. ``"traits.body_size.name"``
        section: ``traits``, ``color``, ``finish`` or ``breath_element``
        attribute: Attribute read from the section's result object
        genes: Genotype genes that influence this field
        gene: The trait gene for ``traits.*`` paths, else None
    """

    text: str
    section: str
    attribute: str
    genes: Tuple[str, ...]
    gene: Optional[str] = None

    @classmethod
    def parse(cls, text: str, catalog: Optional[TraitCatalog] = None) -> "PhenotypePath":
        """Validate a dotted path string.

        Raises:
            UnknownPathError: The path does not name an addressable field.
        """
        catalog = catalog or default_catalog()

        fixed = TRIANGLE_FIELDS.get(text)
        if fixed is not None:
            section, attribute, systems = fixed
            genes = tuple(
                axis
                for system in systems
                if system in catalog.triangles
                for axis in catalog.triangles[system].axes
            )
            return cls(text=text, section=section, attribute=attribute, genes=genes)

        parts = text.split(".")
        if len(parts) == 3 and parts[0] == TRAITS_PREFIX and parts[2] == "name":
            gene = parts[1]
            spec = catalog.genes.get(gene)
            if spec is not None and not spec.is_triangle:
                return cls(
                    text=text,
                    section=TRAITS_PREFIX,
                    attribute="name",
                    genes=(gene,),
                    gene=gene,
                )

        raise UnknownPathError(f"Unknown phenotype path {text!r}")

    def value_of(self, phenotype: Phenotype) -> Optional[str]:
        """Read this field from a phenotype; None when an optional field is unset."""
        if self.gene is not None:
            trait = phenotype.traits.get(self.gene)
            return trait.name if trait is not None else None
        result = getattr(phenotype, self.section)
        return getattr(result, self.attribute)

    def __str__(self) -> str:
        return self.text


def all_paths(catalog: Optional[TraitCatalog] = None) -> List[PhenotypePath]:
    """Every addressable path for *catalog*, traits first in catalog order."""
    catalog = catalog or default_catalog()
    texts = [f"{TRAITS_PREFIX}.{spec.name}.name" for spec in catalog.trait_genes()]
    texts.extend(TRIANGLE_FIELDS)
    return [PhenotypePath.parse(text, catalog) for text in texts]
