"""Tests for src/core/logging.py — root handler management, internal channel."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from src.core.config import reset_settings
from src.core.logging import INTERNAL_LOGGER_NAME, get_internal_logger, setup_logging


@pytest.fixture
def root() -> Iterator[logging.Logger]:
    """Root logger, with handlers and level restored afterwards."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    reset_settings()
    yield root_logger
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
    structlog.reset_defaults()
    reset_settings()


class TestSetupLogging:
    def test_repeated_setup_keeps_one_stderr_handler(self, root: logging.Logger) -> None:
        setup_logging(fmt="json")
        setup_logging(fmt="console")
        ours = [h for h in root.handlers if h.get_name() == "structlog_stderr"]
        assert len(ours) == 1

    def test_foreign_root_handlers_kept(self, root: logging.Logger) -> None:
        other = logging.NullHandler()
        root.addHandler(other)
        setup_logging(fmt="json")
        assert other in root.handlers

    def test_level_override(self, root: logging.Logger) -> None:
        setup_logging(level="DEBUG", fmt="json")
        assert root.level == logging.DEBUG


class TestInternalLogger:
    def test_isolated_from_root(self) -> None:
        get_internal_logger()
        stdlib_logger = logging.getLogger(INTERNAL_LOGGER_NAME)
        assert stdlib_logger.propagate is False
        assert stdlib_logger.handlers
