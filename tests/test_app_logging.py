"""Tests for logging configuration."""

import logging

from macro_tracker.app_logging import configure_logging
from macro_tracker.config import parse_log_level


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("macro_tracker")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging("debug")
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.level == logging.DEBUG


def test_parse_log_level() -> None:
    assert parse_log_level(None) == logging.INFO
    assert parse_log_level("warning") == logging.WARNING
    assert parse_log_level("10") == logging.DEBUG
    assert parse_log_level("nonsense") == logging.INFO
