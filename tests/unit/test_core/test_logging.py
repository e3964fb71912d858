# tests/unit/test_core/test_logging.py

"""Tests for the application logging setup."""

from __future__ import annotations

import logging

import pytest

from boardgame_collection.core.logging import LOGGER_NAME, logger, resolve_level, setup_logging


@pytest.fixture(autouse=True)
def isolated_logger():
    """Remove handlers added by a test so each starts clean."""
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    logger.handlers.clear()
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        (logging.ERROR, logging.ERROR),
        ("nonsense", logging.INFO),
    ],
)
def test_resolve_level(value, expected):
    assert resolve_level(value) == expected


def test_console_handler_only():
    setup_logging("WARNING")

    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.WARNING


def test_file_handler_receives_debug(tmp_path):
    log_file = tmp_path / "logs" / "app.log"

    setup_logging("INFO", log_file)
    logging.getLogger(f"{LOGGER_NAME}.database").debug("schema ready")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert "schema ready" in log_file.read_text(encoding="utf-8")


def test_second_call_only_adjusts_level():
    setup_logging("INFO")
    setup_logging("ERROR")

    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.ERROR
