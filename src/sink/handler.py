"""stdlib ``logging`` integration — a Handler that feeds a SentryTarget."""

from __future__ import annotations

import logging
from typing import Any

from src.core.logging import INTERNAL_LOGGER_NAME
from src.sink.exceptions import ConfigurationError
from src.sink.levels import ordinal_from_stdlib
from src.sink.target import SentryTarget
from src.sink.types import LogEvent

# Attributes every LogRecord carries; anything else came in via ``extra=``.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

# Keys structlog's ProcessorFormatter.wrap_for_formatter adds to a record.
_STRUCTLOG_KEYS = frozenset({"_logger", "_name", "_from_structlog", "_record"})


def _is_internal(name: str) -> bool:
    return name == INTERNAL_LOGGER_NAME or name.startswith(INTERNAL_LOGGER_NAME + ".")


class SentryHandler(logging.Handler):
    """Forwards log records to Sentry through a :class:`SentryTarget`.

    Messages are rendered with the handler's formatter, which defaults to
    ``logging.Formatter(config.layout)``. The traceback is sent as a
    structured exception, not appended to the message.

    Usage::

        handler = SentryHandler(SentryTarget(config), level=logging.ERROR)
        logging.getLogger().addHandler(handler)
    """

    def __init__(self, target: SentryTarget, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._target = target
        self.setFormatter(logging.Formatter(target.config.layout))

    @property
    def target(self) -> SentryTarget:
        return self._target

    def emit(self, record: logging.LogRecord) -> None:
        if _is_internal(record.name):
            return
        try:
            self._target.write(self.to_event(record))
        except ConfigurationError:
            raise
        except Exception:
            self.handleError(record)

    def to_event(self, record: logging.LogRecord) -> LogEvent:
        """Convert a LogRecord into a LogEvent with its message already rendered."""
        exception = record.exc_info[1] if record.exc_info else None

        if isinstance(record.msg, dict):
            # Record produced by structlog's stdlib integration.
            event_dict: dict[str, Any] = dict(record.msg)
            message = str(event_dict.pop("event", ""))
            for key in ("level", "timestamp", "logger", "exc_info", "exception", "stack_info"):
                event_dict.pop(key, None)
            properties = event_dict
        else:
            message = self._render(record)
            properties = {}

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and key not in _STRUCTLOG_KEYS:
                properties[key] = value

        return LogEvent(
            level=ordinal_from_stdlib(record.levelno),
            logger_name=record.name,
            message=message,
            exception=exception,
            properties=properties,
        )

    def _render(self, record: logging.LogRecord) -> str:
        formatter = self.formatter or logging.Formatter()
        record.message = record.getMessage()
        if formatter.usesTime():
            record.asctime = formatter.formatTime(record, formatter.datefmt)
        return formatter.formatMessage(record)

    def close(self) -> None:
        try:
            self._target.close()
        finally:
            super().close()
