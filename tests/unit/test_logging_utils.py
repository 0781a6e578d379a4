"""Tests for utils/logging.py: configure_logging and get_logger."""
from __future__ import annotations

import logging

import pytest

from build_annotator.core.config import AnnotatorSettings
from build_annotator.utils.logging import configure_from_settings, configure_logging, get_logger


@pytest.mark.parametrize(
    ("level", "json", "expected"),
    [
        ("DEBUG", False, logging.DEBUG),
        ("INFO", True, logging.INFO),
        ("warning", False, logging.WARNING),
        ("ERROR", True, logging.ERROR),
    ],
)
def test_configure_logging_sets_root_level(level: str, json: bool, expected: int) -> None:
    configure_logging(level, json=json)
    assert logging.getLogger().level == expected


def test_configure_logging_installs_single_handler() -> None:
    configure_logging("INFO", json=True)
    configure_logging("INFO", json=True)
    assert len(logging.getLogger().handlers) == 1


def test_configure_logging_invalid_level_falls_back_to_info() -> None:
    configure_logging("NOTAREAL_LEVEL", json=False)
    assert logging.getLogger().level == logging.INFO


def test_configure_from_settings() -> None:
    configure_from_settings(AnnotatorSettings(log_level="WARNING", log_json=False))
    assert logging.getLogger().level == logging.WARNING


def test_get_logger_returns_usable_logger() -> None:
    logger = get_logger("test.logging")
    assert hasattr(logger, "info")
    assert hasattr(logger, "warning")
