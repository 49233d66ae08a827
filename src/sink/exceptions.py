"""Exception hierarchy for the Sentry sink."""

from __future__ import annotations


class SinkError(Exception):
    """Base exception for all sink errors."""


class ConfigurationError(SinkError):
    """The sink is misconfigured. Raised at setup or at the offending call."""


class UnsupportedLevelError(ConfigurationError):
    """A level ordinal has no entry in the severity table."""

    def __init__(self, level: object) -> None:
        super().__init__(f"Unsupported log level ordinal: {level!r}")
        self.level = level


class InvalidDsnError(ConfigurationError, ValueError):
    """The Sentry DSN could not be parsed."""


class TransportError(SinkError):
    """The report could not be delivered to the Sentry server."""
