"""Event properties: flattening and the tags/extra split."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def flatten_properties(properties: Mapping[Any, Any]) -> dict[str, str]:
    """Stringify keys and values into a flat ``str → str`` dict.

    Entries with a ``None`` key or value are dropped. Keys that collide
    after stringification are merged, values joined with ``","`` in the
    order they were first seen.
    """
    collected: dict[str, list[str]] = {}
    for key, value in properties.items():
        if key is None or value is None:
            continue
        collected.setdefault(str(key), []).append(str(value))
    return {key: ",".join(values) for key, values in collected.items()}


def parse_tag_names(raw: str | Iterable[str] | None) -> tuple[str, ...]:
    """Parse a comma-separated allowlist into trimmed, unique names."""
    if raw is None:
        return ()
    items = raw.split(",") if isinstance(raw, str) else raw
    names: list[str] = []
    for item in items:
        name = item.strip()
        if name and name not in names:
            names.append(name)
    return tuple(names)


def partition_properties(
    flat: Mapping[str, str],
    tag_names: Iterable[str],
    all_as_tags: bool = False,
) -> tuple[dict[str, str], dict[str, str]]:
    """Split flattened properties into ``(tags, extra)``.

    Every key ends up in exactly one of the two dicts. Names in
    *tag_names* that are missing from *flat* are ignored.
    """
    if all_as_tags:
        return dict(flat), {}

    remaining = dict(flat)
    tags: dict[str, str] = {}
    for name in tag_names:
        if name in remaining:
            tags[name] = remaining.pop(name)
    return tags, remaining
