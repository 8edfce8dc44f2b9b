"""Tests for logging configuration."""

import logging

from sugar_tracker.api.app import create_app
from sugar_tracker.app_logging import configure_logging
from sugar_tracker.config import Settings
from sugar_tracker.containers import build_container


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("sugar_tracker")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.propagate is False


def test_configure_logging_applies_level() -> None:
    logger = logging.getLogger("sugar_tracker")
    try:
        configure_logging("DEBUG")
        assert logger.level == logging.DEBUG
        configure_logging("WARNING")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
    finally:
        configure_logging()


def test_create_app_uses_configured_level() -> None:
    logger = logging.getLogger("sugar_tracker")
    settings = Settings(storage_backend="memory", log_level="ERROR")
    try:
        create_app(build_container(settings))
        assert logger.level == logging.ERROR
    finally:
        configure_logging()
