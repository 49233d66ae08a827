"""Convenience factory for wiring a Sentry target into logging."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from src.sink.client import ReportSender
from src.sink.handler import SentryHandler
from src.sink.target import SentryTarget

if TYPE_CHECKING:
    from src.core.config import SentryTargetConfig


def create_sentry_target(
    config: SentryTargetConfig,
    sender: ReportSender | None = None,
) -> SentryTarget:
    """Build a SentryTarget, with the default httpx client unless *sender* is given."""
    return SentryTarget(config, sender=sender)


def create_sentry_handler(
    config: SentryTargetConfig,
    level: int = logging.NOTSET,
    sender: ReportSender | None = None,
) -> SentryHandler:
    """Build a logging handler backed by a fresh SentryTarget."""
    return SentryHandler(create_sentry_target(config, sender=sender), level=level)


def install_sentry_handler(
    config: SentryTargetConfig,
    logger: logging.Logger | None = None,
    level: int = logging.NOTSET,
    sender: ReportSender | None = None,
) -> SentryHandler:
    """Attach a SentryHandler to *logger* (the root logger by default).

    The handler survives a later ``setup_logging()`` call, which only swaps
    its own stderr handler.

    Returns:
        The installed handler, so the caller can remove or close it.
    """
    handler = create_sentry_handler(config, level=level, sender=sender)
    (logger or logging.getLogger()).addHandler(handler)
    return handler
