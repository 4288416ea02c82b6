"""Tests for logging configuration."""

import logging

from nutrimind.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("nutrimind")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_updates_level() -> None:
    logger = logging.getLogger("nutrimind")

    configure_logging(logging.DEBUG)

    assert logger.level == logging.DEBUG
    configure_logging()
