"""Domain types for the Sentry sink."""

from __future__ import annotations

import traceback
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from src.sink.levels import Severity


class LogEvent(BaseModel):
    """A single log event as delivered by the host logging framework."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    level: int
    logger_name: str = ""
    message: str = ""
    exception: BaseException | None = None
    properties: dict[Any, Any] = Field(default_factory=dict)


class StackFrame(BaseModel):
    """One frame of an exception traceback."""

    model_config = ConfigDict(frozen=True)

    filename: str
    lineno: int | None = None
    function: str = ""
    context_line: str | None = None


class ExceptionInfo(BaseModel):
    """Structured view of a Python exception."""

    model_config = ConfigDict(frozen=True)

    type: str
    module: str | None = None
    value: str = ""
    frames: tuple[StackFrame, ...] = ()

    @classmethod
    def from_exception(cls, exc: BaseException) -> ExceptionInfo:
        exc_type = type(exc)
        module = exc_type.__module__
        frames = tuple(
            StackFrame(
                filename=fs.filename,
                lineno=fs.lineno,
                function=fs.name,
                context_line=fs.line or None,
            )
            for fs in traceback.extract_tb(exc.__traceback__)
        )
        return cls(
            type=exc_type.__qualname__,
            module=None if module == "builtins" else module,
            value=str(exc),
            frames=frames,
        )


class MessageContent(BaseModel):
    """Plain-message report content."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["message"] = "message"
    message: str


class ExceptionContent(BaseModel):
    """Exception report content, with the rendered log line alongside."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["exception"] = "exception"
    exception: ExceptionInfo
    message: str | None = None


ReportContent = Annotated[MessageContent | ExceptionContent, Field(discriminator="kind")]


class ReportPayload(BaseModel):
    """Normalised report ready for a sender."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    logger_name: str = ""
    content: ReportContent
    tags: dict[str, str] = Field(default_factory=dict)
    extra: dict[str, str] = Field(default_factory=dict)
