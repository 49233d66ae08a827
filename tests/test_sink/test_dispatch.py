"""Tests for dispatch() — sender failures are logged once and swallowed."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

from src.core.logging import INTERNAL_LOGGER_NAME
from src.sink.dispatch import dispatch
from src.sink.exceptions import TransportError
from src.sink.levels import Severity
from src.sink.types import MessageContent, ReportPayload


# ── Helpers ─────────────────────────────────────────────────────


def _payload() -> ReportPayload:
    return ReportPayload(
        severity=Severity.ERROR,
        logger_name="tests.dispatch",
        content=MessageContent(message="boom"),
    )


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


# ── dispatch ────────────────────────────────────────────────────


class TestDispatch:
    def test_sender_called_once(self) -> None:
        send = MagicMock(return_value="event-id")
        payload = _payload()
        dispatch(payload, send)
        send.assert_called_once_with(payload)

    def test_transport_error_swallowed(self) -> None:
        send = MagicMock(side_effect=TransportError("connection refused"))
        with patch("src.sink.dispatch.logger") as mock_logger:
            dispatch(_payload(), send)
        mock_logger.warning.assert_called_once()
        _, kwargs = mock_logger.warning.call_args
        assert kwargs["error"] == "connection refused"
        assert kwargs["error_type"] == "TransportError"

    def test_any_exception_swallowed(self) -> None:
        send = MagicMock(side_effect=RuntimeError("unexpected"))
        with patch("src.sink.dispatch.logger"):
            dispatch(_payload(), send)  # should not raise

    def test_not_retried(self) -> None:
        send = MagicMock(side_effect=TransportError("down"))
        with patch("src.sink.dispatch.logger"):
            dispatch(_payload(), send)
        assert send.call_count == 1

    def test_no_diagnostic_on_success(self) -> None:
        with patch("src.sink.dispatch.logger") as mock_logger:
            dispatch(_payload(), MagicMock())
        mock_logger.warning.assert_not_called()


class TestInternalChannel:
    def test_one_line_written_to_internal_logger(self) -> None:
        capture = _ListHandler()
        internal = logging.getLogger(INTERNAL_LOGGER_NAME)
        internal.addHandler(capture)
        try:
            dispatch(_payload(), MagicMock(side_effect=TransportError("connection refused")))
        finally:
            internal.removeHandler(capture)

        assert len(capture.records) == 1
        assert "connection refused" in capture.records[0].getMessage()
        assert capture.records[0].levelno == logging.WARNING

    def test_internal_logger_does_not_propagate(self) -> None:
        assert logging.getLogger(INTERNAL_LOGGER_NAME).propagate is False
