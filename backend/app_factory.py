"""Application factory and context for the Dragon Hatchery API.

This module provides a clean factory pattern for creating the FastAPI app,
avoiding import-time side effects. Shared collaborators live in the
AppContext rather than in module-level globals.

Design Decision:
----------------
We use an AppContext dataclass to hold all runtime state instead of module-level
globals. This:
1. Makes testing easier (each test gets a fresh context)
2. Avoids cross-test pollution
3. Makes dependencies explicit and injectable

Usage:
------
    # For production (uses default settings from environment)
    app = create_app()

    # For testing (custom configuration)
    app = create_app(context=AppContext(rng=random.Random(7)))
"""

import logging
import os
import random
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.logging_config import configure_logging
from hatchery.entity_ids import IdIssuer, SequentialIdIssuer
from hatchery.genetics import DEFAULT_BREEDING_CONFIG, BreedingConfig, TraitCatalog, default_catalog
from hatchery.util.rng import RandomSource

DEFAULT_API_PORT = 8000


def _rng_from_env() -> random.Random:
    seed = os.getenv("HATCHERY_SEED")
    return random.Random(int(seed)) if seed else random.Random()


@dataclass
class AppContext:
    """Runtime context holding all application state.

    This replaces module-level globals, making dependencies explicit
    and enabling clean testing without cross-test pollution.
    """

    # Genetics collaborators
    catalog: TraitCatalog = field(default_factory=default_catalog)
    rng: RandomSource = field(default_factory=_rng_from_env)
    id_issuer: IdIssuer = field(default_factory=SequentialIdIssuer)
    breeding_config: BreedingConfig = DEFAULT_BREEDING_CONFIG

    # Configuration
    server_version: str = "1.0.0"
    api_port: int = field(
        default_factory=lambda: int(os.getenv("HATCHERY_API_PORT", str(DEFAULT_API_PORT)))
    )
    production_mode: bool = field(
        default_factory=lambda: os.getenv("PRODUCTION", "false").lower() == "true"
    )
    allowed_origins: list = field(
        default_factory=lambda: os.getenv("ALLOWED_ORIGINS", "*").split(",")
    )

    # Timing
    server_start_time: float = field(default_factory=time.time)

    # Logging
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("hatchery.backend"))


def create_app(
    *,
    production_mode: Optional[bool] = None,
    context: Optional[AppContext] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        production_mode: Override production mode (default: from PRODUCTION env var)
        context: Pre-configured AppContext (for testing). If None, creates a new one.

    Returns:
        Configured FastAPI application with context attached as app.state.context
    """
    # Configure logging (idempotent)
    logger = configure_logging()

    if context is None:
        context = AppContext()

    if production_mode is not None:
        context.production_mode = production_mode

    context.logger = logger

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown."""
        ctx = app.state.context
        ctx.logger.info(
            "Hatchery API ready: %d genes, %d triangle systems",
            len(ctx.catalog.genes),
            len(ctx.catalog.triangles),
        )
        yield
        uptime = time.time() - ctx.server_start_time
        ctx.logger.info("Hatchery API shutting down after %.1fs", uptime)

    app = FastAPI(
        title="Dragon Hatchery API",
        version=context.server_version,
        lifespan=lifespan,
        docs_url=None if context.production_mode else "/docs",
        redoc_url=None if context.production_mode else "/redoc",
    )

    # Attach context to app state for access in routes
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=context.allowed_origins if context.production_mode else ["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    _setup_routers(app, context)
    return app


def _setup_routers(app: FastAPI, ctx: AppContext) -> None:
    """Setup and include all API routers."""
    from backend.routers.genetics import create_genetics_router

    app.include_router(create_genetics_router(ctx))
    ctx.logger.info("API routers configured successfully")
