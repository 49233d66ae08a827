"""Event translator — LogEvent + config → ReportPayload (or nothing)."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from src.sink.levels import map_level
from src.sink.properties import flatten_properties, partition_properties
from src.sink.types import (
    ExceptionContent,
    ExceptionInfo,
    LogEvent,
    MessageContent,
    ReportContent,
    ReportPayload,
)

if TYPE_CHECKING:
    from src.core.config import SentryTargetConfig

RenderFn = Callable[[LogEvent], str]


def render_message(event: LogEvent) -> str:
    """Default renderer: the event's message as-is."""
    return event.message


def translate(
    event: LogEvent,
    config: SentryTargetConfig,
    render: RenderFn = render_message,
) -> ReportPayload | None:
    """Build the report for *event*, or return None if it must not be sent.

    An event is skipped when its level maps to OFF, when it carries no
    exception and ``ignore_events_with_no_exception`` is set, or when a
    message-only event renders to an empty string. Exception events are
    always reported, whatever their message.

    Raises:
        UnsupportedLevelError: If the event level has no severity mapping.
    """
    severity = map_level(event.level)
    if severity is None:
        return None

    flat = flatten_properties(event.properties)
    tags, extra = partition_properties(
        flat,
        config.tag_property_names,
        all_as_tags=config.send_all_properties_as_tags,
    )

    content: ReportContent
    if event.exception is not None:
        content = ExceptionContent(
            exception=ExceptionInfo.from_exception(event.exception),
            message=render(event) or None,
        )
    elif config.ignore_events_with_no_exception:
        return None
    else:
        rendered = render(event)
        if not rendered:
            return None
        content = MessageContent(message=rendered)

    return ReportPayload(
        severity=severity,
        logger_name=event.logger_name,
        content=content,
        tags=tags,
        extra=extra,
    )
