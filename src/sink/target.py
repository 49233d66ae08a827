"""SentryTarget, the write entry point that ties the pieces together."""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.sink.client import ReportSender, SentryClient
from src.sink.dispatch import dispatch
from src.sink.translator import RenderFn, render_message, translate
from src.sink.types import LogEvent

if TYPE_CHECKING:
    from src.core.config import SentryTargetConfig


class SentryTarget:
    """Translates log events and ships them through a ReportSender.

    The sender and renderer are injected; when no sender is given a
    :class:`SentryClient` is built from ``config.dsn``.

    Usage::

        target = SentryTarget(config)
        target.write(LogEvent(level=LogLevel.ERROR, message="boom"))
    """

    def __init__(
        self,
        config: SentryTargetConfig,
        sender: ReportSender | None = None,
        render: RenderFn | None = None,
    ) -> None:
        self._config = config
        self._sender = (
            sender
            if sender is not None
            else SentryClient(config.dsn, timeout_secs=config.timeout_secs)
        )
        self._render = render or render_message

    @property
    def config(self) -> SentryTargetConfig:
        return self._config

    @property
    def sender(self) -> ReportSender:
        return self._sender

    def write(self, event: LogEvent) -> None:
        """Report *event* if it qualifies. Only configuration errors propagate."""
        payload = translate(event, self._config, self._render)
        if payload is None:
            return
        dispatch(payload, self._sender.send)

    def close(self) -> None:
        self._sender.close()
