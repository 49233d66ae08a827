"""Core module — config and logging."""

from src.core.config import (
    LoggingConfig,
    SentryTargetConfig,
    Settings,
    get_settings,
    load_settings,
    reset_settings,
)
from src.core.logging import get_internal_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "SentryTargetConfig",
    "Settings",
    "get_internal_logger",
    "get_settings",
    "load_settings",
    "reset_settings",
    "setup_logging",
]
