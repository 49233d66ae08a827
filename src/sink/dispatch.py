"""Best-effort delivery: a failing sender never reaches the caller."""

from __future__ import annotations

from collections.abc import Callable

from src.core.logging import get_internal_logger
from src.sink.types import ReportPayload

SendFn = Callable[[ReportPayload], object]

logger = get_internal_logger()


def dispatch(payload: ReportPayload, send: SendFn) -> None:
    """Hand *payload* to *send* once; log and drop any failure."""
    try:
        send(payload)
    except Exception as exc:
        logger.warning(
            "sentry_send_failed",
            error=str(exc),
            error_type=type(exc).__name__,
            logger_name=payload.logger_name,
        )
