"""Request and response models for the genetics API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from hatchery.dragon import Dragon


class DragonRecord(BaseModel):
    """A dragon as stored by a client (same shape as ``Dragon.to_save_data``)."""

    id: int
    genotype: Dict[str, List[int]]
    sex: str = "male"
    name: str = ""
    parent_ids: Optional[List[int]] = None
    mutations: List[str] = Field(default_factory=list)
    allele_origins: Optional[Dict[str, List[str]]] = None
    generation: int = 0
    is_dark_energy: bool = False


class DragonResponse(DragonRecord):
    """A dragon record plus its resolved phenotype."""

    phenotype: Dict[str, Any]

    @classmethod
    def from_dragon(cls, dragon: Dragon) -> "DragonResponse":
        return cls(**dragon.to_save_data(), phenotype=dragon.phenotype.to_dict())


class BreedRequest(BaseModel):
    parent_a: DragonRecord
    parent_b: DragonRecord


class BreedResponse(BaseModel):
    count: int
    clutch: List[DragonResponse]


class PhenotypeRequest(BaseModel):
    """Resolve a bare genotype with an optional stored Dark Energy flag."""

    genotype: Dict[str, List[int]]
    is_dark_energy: bool = False


class GeneInfo(BaseModel):
    name: str
    label: str
    system: str
    min_allele: int
    max_allele: int
    inheritance: str
    phenotype_map: Optional[Dict[int, str]] = None


class TriangleInfo(BaseModel):
    name: str
    label: str
    axes: List[str]
    recessive_extremes: bool


class CatalogResponse(BaseModel):
    genes: List[GeneInfo]
    triangles: List[TriangleInfo]
    paths: List[str]
