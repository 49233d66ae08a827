"""structlog integration: a processor that reports events to Sentry.

Place it *before* ``format_exc_info`` so the exception is still available
as an object::

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            SentryProcessor(target),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )
"""

from __future__ import annotations

import sys
from typing import Any

from src.core.logging import get_internal_logger
from src.sink.exceptions import ConfigurationError
from src.sink.levels import LogLevel, ordinal_from_method_name
from src.sink.target import SentryTarget
from src.sink.types import LogEvent

# Event-dict keys that describe the event rather than add context to it.
_RESERVED_KEYS = frozenset({
    "event",
    "exc_info",
    "exception",
    "stack_info",
    "level",
    "timestamp",
    "logger",
})

# Generic structlog methods that carry no level of their own.
_NEUTRAL_METHODS = frozenset({"msg", "log"})

internal_logger = get_internal_logger()


def _resolve_exception(exc_info: Any) -> BaseException | None:
    if isinstance(exc_info, BaseException):
        return exc_info
    if isinstance(exc_info, tuple):
        return exc_info[1] if len(exc_info) == 3 else None
    if exc_info:
        return sys.exc_info()[1]
    return None


class SentryProcessor:
    """Structlog processor that forwards each event to a SentryTarget.

    The event dict is passed on unchanged. Configuration errors propagate;
    any other failure to report is logged to the internal channel.
    """

    def __init__(self, target: SentryTarget) -> None:
        self._target = target

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        try:
            self._target.write(self.to_event(logger, method_name, event_dict))
        except ConfigurationError:
            raise
        except Exception as exc:
            internal_logger.warning(
                "sentry_report_failed",
                error=str(exc),
                error_type=type(exc).__name__,
                method_name=method_name,
            )
        return event_dict

    def to_event(
        self,
        logger: Any,
        method_name: str,
        event_dict: dict[str, Any],
    ) -> LogEvent:
        if method_name in _NEUTRAL_METHODS:
            level = LogLevel.INFO
        else:
            level = ordinal_from_method_name(method_name)

        logger_name = event_dict.get("logger") or getattr(logger, "name", "") or ""
        return LogEvent(
            level=level,
            logger_name=str(logger_name),
            message=str(event_dict.get("event", "")),
            exception=_resolve_exception(event_dict.get("exc_info")),
            properties={k: v for k, v in event_dict.items() if k not in _RESERVED_KEYS},
        )
