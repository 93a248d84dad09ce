"""Genetics API endpoints.

This router provides endpoints for:
- Reading the trait catalog (genes, triangle systems, phenotype paths)
- Creating wild dragons
- Breeding two dragons into a clutch
- Resolving a genotype into its phenotype

All endpoints are stateless: dragons are passed in and returned as records,
nothing is stored server-side.
"""

import logging

from fastapi import APIRouter, HTTPException

from backend.models import (
    BreedRequest,
    BreedResponse,
    CatalogResponse,
    DragonRecord,
    DragonResponse,
    GeneInfo,
    PhenotypeRequest,
    TriangleInfo,
)
from hatchery.dragon import Dragon
from hatchery.exceptions import ConfigurationError, GeneticsError
from hatchery.genetics import Genotype, PhenotypeResolver, all_paths

logger = logging.getLogger(__name__)


def _load_dragon(record: DragonRecord, context, label: str) -> Dragon:
    try:
        return Dragon.from_save_data(record.model_dump(), context.catalog)
    except GeneticsError as e:
        raise HTTPException(status_code=422, detail=f"{label}: {e}") from e


def create_genetics_router(context) -> APIRouter:
    """Create the genetics API router.

    Args:
        context: The application's ``AppContext`` (catalog, RNG, id issuer)

    Returns:
        FastAPI router with genetics endpoints
    """
    router = APIRouter(prefix="/api/genetics", tags=["genetics"])
    resolver = PhenotypeResolver(context.catalog)

    @router.get("/catalog", response_model=CatalogResponse)
    async def get_catalog():
        """Describe every gene, triangle system and addressable phenotype path."""
        catalog = context.catalog
        genes = [
            GeneInfo(
                name=spec.name,
                label=spec.label,
                system=spec.system,
                min_allele=spec.min_allele,
                max_allele=spec.max_allele,
                inheritance=spec.inheritance.value,
                phenotype_map=spec.phenotype_map,
            )
            for spec in catalog.genes.values()
        ]
        triangles = [
            TriangleInfo(
                name=tri.name,
                label=tri.label,
                axes=list(tri.axes),
                recessive_extremes=tri.recessive_extremes,
            )
            for tri in catalog.triangles.values()
        ]
        paths = [path.text for path in all_paths(catalog)]
        return CatalogResponse(genes=genes, triangles=triangles, paths=paths)

    @router.post("/dragons/random", response_model=DragonResponse)
    async def create_random_dragon():
        """Create a wild dragon."""
        dragon = Dragon.create_random(context.catalog, rng=context.rng, ids=context.id_issuer)
        return DragonResponse.from_dragon(dragon)

    @router.post("/breed", response_model=BreedResponse)
    async def breed(request: BreedRequest):
        """Breed two dragons into a clutch."""
        parent_a = _load_dragon(request.parent_a, context, "parent_a")
        parent_b = _load_dragon(request.parent_b, context, "parent_b")

        try:
            clutch = Dragon.breed(
                parent_a,
                parent_b,
                context.catalog,
                rng=context.rng,
                ids=context.id_issuer,
                config=context.breeding_config,
            )
        except GeneticsError as e:
            raise HTTPException(status_code=422, detail=str(e)) from e

        return BreedResponse(
            count=len(clutch),
            clutch=[DragonResponse.from_dragon(child) for child in clutch],
        )

    @router.post("/phenotype")
    async def resolve_phenotype(request: PhenotypeRequest):
        """Resolve a genotype with its stored Dark Energy flag."""
        try:
            genotype = Genotype.from_dict(request.genotype)
            phenotype = resolver.resolve(genotype, dark_energy=request.is_dark_energy)
        except GeneticsError as e:
            raise HTTPException(status_code=422, detail=str(e)) from e
        except ConfigurationError as e:
            logger.error(f"Catalog cannot resolve genotype: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=str(e)) from e
        return phenotype.to_dict()

    return router
