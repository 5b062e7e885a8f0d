"""Tests for labcompare logging configuration."""

from __future__ import annotations

import logging
import sys

import pytest

import labcompare  # noqa: F401  (installs the NullHandler)
from labcompare.utils.logging import configure_logging, get_logger


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("labcompare")
    saved_handlers = logger.handlers[:]
    saved_level = logger.level
    yield logger
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    for h in saved_handlers:
        logger.addHandler(h)
    logger.setLevel(saved_level)


def test_package_installs_null_handler():
    assert any(isinstance(h, logging.NullHandler) for h in logging.getLogger("labcompare").handlers)


def test_get_logger_default_and_named():
    assert get_logger().name == "labcompare"
    assert get_logger("labcompare.comparison").name == "labcompare.comparison"


def test_configure_logging_adds_single_stderr_handler(clean_logger):
    configure_logging(level="DEBUG")
    configure_logging(level="DEBUG")
    stderr_handlers = [
        h for h in clean_logger.handlers
        if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr
    ]
    assert len(stderr_handlers) == 1
    assert clean_logger.level == logging.DEBUG


def test_configure_logging_level_from_env(clean_logger, monkeypatch):
    monkeypatch.setenv("LABCOMPARE_LOG_LEVEL", "WARNING")
    configure_logging(force=True)
    assert clean_logger.level == logging.WARNING


def test_force_replaces_handler_with_custom_format(clean_logger):
    configure_logging(level="INFO", force=True)
    configure_logging(level="INFO", fmt="%(levelname)s %(message)s", force=True)
    assert len(clean_logger.handlers) == 1
    assert clean_logger.handlers[0].formatter._fmt == "%(levelname)s %(message)s"
