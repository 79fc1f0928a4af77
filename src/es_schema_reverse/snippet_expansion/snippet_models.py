"""Geometry snippet entities and registry."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from es_schema_reverse.schema_model import SchemaType

ARRAY_PARENT = "array"


class SnippetError(Exception):
    """Raised when a geometry snippet definition cannot be parsed."""


@dataclass(frozen=True)
class SnippetField:
    """One named or positional child template of a snippet."""

    type: SchemaType
    name: str | None = None
    parent_type: str | None = None
    children: tuple[SnippetField, ...] | None = None
    sample: Any = None

    @property
    def is_array_rooted(self) -> bool:
        return self.type is SchemaType.ARRAY or self.parent_type == ARRAY_PARENT


@dataclass(frozen=True)
class GeometrySnippet:
    """Expected schema shape of one geo representation."""

    key: str
    parent_type: str | None
    children: tuple[SnippetField, ...]

    @property
    def is_array_rooted(self) -> bool:
        return self.parent_type == ARRAY_PARENT


class SnippetRegistry(Mapping[str, GeometrySnippet]):
    """Read-only lookup of geometry snippets by subtype key."""

    def __init__(self, snippets: Mapping[str, GeometrySnippet]) -> None:
        self._snippets = dict(snippets)

    def __getitem__(self, key: str) -> GeometrySnippet:
        return self._snippets[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._snippets)

    def __len__(self) -> int:
        return len(self._snippets)

    @classmethod
    def from_definitions(cls, definitions: Mapping[str, Any]) -> SnippetRegistry:
        """Parse raw JSON-like snippet definitions keyed by subtype."""
        return cls({key: parse_snippet(key, raw) for key, raw in definitions.items()})

    def merged_with(self, other: Mapping[str, GeometrySnippet]) -> SnippetRegistry:
        combined = dict(self._snippets)
        combined.update(other)
        return SnippetRegistry(combined)


def parse_snippet(key: str, raw: Any) -> GeometrySnippet:
    """Parse one raw snippet definition."""
    if not isinstance(raw, Mapping):
        raise SnippetError(f"Snippet '{key}' must be a mapping.")
    return GeometrySnippet(
        key=key,
        parent_type=_optional_string(raw.get("parentType"), f"{key}.parentType"),
        children=_parse_children(raw.get("properties"), key),
    )


def load_snippet_registry(directory: Path | str) -> SnippetRegistry:
    """Load every ``<key>.json`` snippet file from ``directory``."""
    root = Path(directory)
    if not root.is_dir():
        raise SnippetError(f"Snippet directory not found: {root}")

    definitions: dict[str, Any] = {}
    for path in sorted(root.glob("*.json")):
        try:
            definitions[path.stem] = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SnippetError(f"Invalid snippet file {path.name}: {exc}") from exc
    return SnippetRegistry.from_definitions(definitions)


def _parse_children(value: Any, path: str) -> tuple[SnippetField, ...]:
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise SnippetError(f"Snippet '{path}' properties must be a list.")
    return tuple(_parse_field(item, f"{path}[{index}]") for index, item in enumerate(value))


def _parse_field(raw: Any, path: str) -> SnippetField:
    if not isinstance(raw, Mapping):
        raise SnippetError(f"Snippet field '{path}' must be a mapping.")
    try:
        field_type = SchemaType(raw.get("type"))
    except ValueError as exc:
        raise SnippetError(f"Snippet field '{path}' has unknown type {raw.get('type')!r}.") from exc
    name = _optional_string(raw.get("name"), f"{path}.name")
    children = _parse_children(raw["properties"], name or path) if "properties" in raw else None
    return SnippetField(
        type=field_type,
        name=name,
        parent_type=_optional_string(raw.get("parentType"), f"{path}.parentType"),
        children=children,
        sample=raw.get("sample"),
    )


def _optional_string(value: Any, label: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise SnippetError(f"Snippet value '{label}' must be a string.")
    return value
