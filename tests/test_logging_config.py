"""Tests for the service logging setup."""

import logging

import pytest

from backend.logging_config import APP_LOGGERS, SERVICE_LOGGER, UVICORN_LOGGERS, configure_logging


@pytest.fixture(autouse=True)
def restore_levels():
    names = APP_LOGGERS + UVICORN_LOGGERS
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_explicit_level_applies_to_core_and_uvicorn():
    logger = configure_logging(level="debug")
    assert logger.name == SERVICE_LOGGER
    for name in APP_LOGGERS + UVICORN_LOGGERS:
        assert logging.getLogger(name).level == logging.DEBUG


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("HATCHERY_LOG_LEVEL", "warning")
    configure_logging()
    assert logging.getLogger("hatchery").level == logging.WARNING


def test_uvicorn_loggers_left_alone_when_excluded():
    logging.getLogger("uvicorn.access").setLevel(logging.ERROR)
    configure_logging(level="INFO", include_uvicorn=False)
    assert logging.getLogger("uvicorn.access").level == logging.ERROR
    assert logging.getLogger("backend").level == logging.INFO
