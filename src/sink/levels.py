"""Level mapping — host log levels to Sentry severities.

The mapping is lossy on purpose: TRACE and DEBUG both report as DEBUG.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from src.sink.exceptions import UnsupportedLevelError


class LogLevel(IntEnum):
    """Host-side level ordinals, lowest to highest."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    OFF = 6


class Severity(IntEnum):
    """Sentry severity — ordered so comparisons work naturally."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4

    @property
    def sentry_name(self) -> str:
        """Level name as the Sentry API spells it."""
        return self.name.lower()


# Ordinal → severity. None means "do not report".
_SEVERITY_BY_ORDINAL: dict[int, Severity | None] = {
    LogLevel.TRACE: Severity.DEBUG,
    LogLevel.DEBUG: Severity.DEBUG,
    LogLevel.INFO: Severity.INFO,
    LogLevel.WARN: Severity.WARNING,
    LogLevel.ERROR: Severity.ERROR,
    LogLevel.FATAL: Severity.FATAL,
    LogLevel.OFF: None,
}

# stdlib has no OFF level; records at or above this levelno are never reported.
OFF_LEVELNO = logging.CRITICAL + 10

_ORDINAL_BY_METHOD: dict[str, LogLevel] = {
    "trace": LogLevel.TRACE,
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "warn": LogLevel.WARN,
    "warning": LogLevel.WARN,
    "error": LogLevel.ERROR,
    "exception": LogLevel.ERROR,
    "critical": LogLevel.FATAL,
    "fatal": LogLevel.FATAL,
}


def map_level(ordinal: int) -> Severity | None:
    """Map a level ordinal (0-6) to a Severity, or None for OFF.

    Raises:
        UnsupportedLevelError: If the ordinal is outside the table.
    """
    if isinstance(ordinal, bool) or not isinstance(ordinal, int):
        raise UnsupportedLevelError(ordinal)
    try:
        return _SEVERITY_BY_ORDINAL[ordinal]
    except KeyError:
        raise UnsupportedLevelError(ordinal) from None


def ordinal_from_stdlib(levelno: int) -> LogLevel:
    """Bucket a stdlib ``logging`` levelno into a LogLevel."""
    if levelno >= OFF_LEVELNO:
        return LogLevel.OFF
    if levelno >= logging.CRITICAL:
        return LogLevel.FATAL
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARN
    if levelno >= logging.INFO:
        return LogLevel.INFO
    if levelno >= logging.DEBUG:
        return LogLevel.DEBUG
    return LogLevel.TRACE


def ordinal_from_method_name(method_name: str) -> LogLevel:
    """Map a structlog method name (``"warning"``, ``"exception"``…) to a LogLevel."""
    try:
        return _ORDINAL_BY_METHOD[method_name.lower()]
    except KeyError:
        raise UnsupportedLevelError(method_name) from None
