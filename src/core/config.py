"""Pydantic settings loaded from YAML configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from src.sink.client import Dsn
from src.sink.properties import parse_tag_names

_settings: Settings | None = None

_DEFAULT_CONFIG_PATH = Path("config/settings.yaml")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "json"


class SentryTargetConfig(BaseModel):
    """Sentry target configuration, immutable once built.

    ``dsn`` is parsed when the model is constructed, so a malformed
    connection string fails at setup rather than on the first event.
    """

    model_config = ConfigDict(frozen=True)

    dsn: Dsn
    layout: str = "%(message)s"
    ignore_events_with_no_exception: bool = False
    send_all_properties_as_tags: bool = False
    tag_property_names: tuple[str, ...] = ()
    timeout_secs: float = 5.0

    @field_validator("dsn", mode="before")
    @classmethod
    def _parse_dsn(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Dsn.parse(value)
        return value

    @field_validator("tag_property_names", mode="before")
    @classmethod
    def _split_tag_names(cls, value: Any) -> Any:
        return parse_tag_names(value)


class Settings(BaseModel):
    """Root settings container."""

    logging: LoggingConfig = LoggingConfig()
    sentry: SentryTargetConfig | None = None


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from a YAML file and cache globally.

    Args:
        path: Path to YAML config. Defaults to config/settings.yaml.

    Returns:
        Parsed Settings instance.
    """
    global _settings  # noqa: PLW0603

    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH

    data: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f)
            if isinstance(raw, dict):
                data = raw

    _settings = Settings(**data)
    return _settings


def get_settings() -> Settings:
    """Return the cached settings, loading defaults if not yet loaded."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Reset the cached settings (useful for testing)."""
    global _settings  # noqa: PLW0603
    _settings = None
