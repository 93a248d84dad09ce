"""Logging setup for the hatchery API process.

The genetics core only creates module loggers (``hatchery.*``) and never
installs handlers; this module is where the service decides format and level.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL_ENV = "HATCHERY_LOG_LEVEL"

SERVICE_LOGGER = "hatchery.backend"
APP_LOGGERS = ("hatchery", "backend")
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def configure_logging(*, level: str | None = None, include_uvicorn: bool = True) -> logging.Logger:
    """Install the root handler and align the core, backend and uvicorn loggers.

    Args:
        level: Explicit level name; defaults to ``$HATCHERY_LOG_LEVEL``, then INFO.
        include_uvicorn: Also set the uvicorn loggers to the same level.

    Returns:
        The ``hatchery.backend`` service logger.
    """
    resolved_level = (level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    names = APP_LOGGERS + (UVICORN_LOGGERS if include_uvicorn else ())
    for name in names:
        logging.getLogger(name).setLevel(resolved_level)

    service_logger = logging.getLogger(SERVICE_LOGGER)
    service_logger.debug("Logging configured at %s", resolved_level)
    return service_logger
