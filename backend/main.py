"""Uvicorn entry point for the Dragon Hatchery API.

``app`` is the module-level application uvicorn imports; ``main`` runs it
directly (also installed as the ``hatchery-api`` console script).
"""
import os

import uvicorn

from backend.app_factory import DEFAULT_API_PORT, create_app
from backend.logging_config import configure_logging

app = create_app()


def main() -> None:
    """Serve the API, configured from HATCHERY_* environment variables."""
    logger = configure_logging()
    port = int(os.getenv("HATCHERY_API_PORT", str(DEFAULT_API_PORT)))
    is_production = os.getenv("PRODUCTION", "false").lower() == "true"
    log_level = os.getenv("HATCHERY_LOG_LEVEL", "info").lower()

    logger.info("Serving Dragon Hatchery API on port %d", port)
    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=port,
        reload=not is_production,
        log_level=log_level,
        loop="asyncio" if os.name == "nt" else "auto",
    )


if __name__ == "__main__":
    main()
