"""Mapping and schema node entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Union

from .inference_context import MappingError


class _Missing:
    """Marker for a sample slot that carries no value at all."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class SchemaType(str, Enum):
    """Closed vocabulary of target schema node types."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    DATE = "date"
    BINARY = "binary"
    NULL = "null"
    OBJECT = "object"
    NESTED = "nested"
    ARRAY = "array"
    RANGE = "range"
    GEO_POINT = "geo-point"
    GEO_SHAPE = "geo-shape"


ARRAY_SHAPED_TYPES: frozenset[SchemaType] = frozenset(
    {SchemaType.NESTED, SchemaType.ARRAY, SchemaType.GEO_POINT, SchemaType.GEO_SHAPE}
)
GEO_TYPES: frozenset[SchemaType] = frozenset({SchemaType.GEO_POINT, SchemaType.GEO_SHAPE})


@dataclass(frozen=True)
class SchemaNode:
    """One node of the inferred schema tree.

    ``items`` elements are either nodes or, for record children of an
    array-shaped field, an ordered field map.
    """

    type: SchemaType | None = None
    mode: str | None = None
    sub_type: str | None = None
    properties: Mapping[str, SchemaNode] | None = None
    items: tuple[ItemTemplate, ...] | None = None
    annotations: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.properties is not None and self.items is not None:
            raise ValueError("Schema node cannot define both properties and items.")
        if self.sub_type is not None and self.type not in GEO_TYPES:
            raise ValueError("Only geo-point and geo-shape nodes carry a subType.")

    @property
    def is_array_shaped(self) -> bool:
        return self.type in ARRAY_SHAPED_TYPES

    @property
    def is_undetermined(self) -> bool:
        return self.type is None

    def with_properties(self, properties: Mapping[str, SchemaNode]) -> SchemaNode:
        return replace(self, properties=dict(properties), items=None)

    def with_items(self, items: tuple[ItemTemplate, ...]) -> SchemaNode:
        return replace(self, items=tuple(items), properties=None)

    def with_annotations(self, annotations: Mapping[str, Any]) -> SchemaNode:
        merged = dict(self.annotations)
        merged.update(annotations)
        return replace(self, annotations=merged)

    def to_dict(self) -> dict[str, Any]:
        """Render the node as a JSON-compatible mapping."""
        rendered: dict[str, Any] = {}
        if self.type is not None:
            rendered["type"] = self.type.value
        if self.mode is not None:
            rendered["mode"] = self.mode
        if self.sub_type is not None:
            rendered["subType"] = self.sub_type
        if self.properties is not None:
            rendered["properties"] = render_field_map(self.properties)
        if self.items is not None:
            rendered["items"] = [_render_item(item) for item in self.items]
        rendered.update(self.annotations)
        return rendered


ItemTemplate = Union[SchemaNode, Mapping[str, SchemaNode]]


def render_field_map(fields: Mapping[str, SchemaNode]) -> dict[str, Any]:
    return {name: node.to_dict() for name, node in fields.items()}


def _render_item(item: ItemTemplate) -> dict[str, Any]:
    if isinstance(item, SchemaNode):
        return item.to_dict()
    return render_field_map(item)


@dataclass(frozen=True)
class MappingNode:
    """Read-only view of one field definition from a `get mapping` response."""

    type_name: str | None
    children: Mapping[str, MappingNode] | None
    definition: Mapping[str, Any]

    @property
    def has_children(self) -> bool:
        return self.children is not None

    @classmethod
    def from_definition(cls, definition: Any, *, path: str = "") -> MappingNode:
        """Build a node tree from a raw field definition."""
        if definition is None:
            return cls(type_name=None, children=None, definition={})
        if not isinstance(definition, Mapping):
            raise MappingError(f"Field definition must be a mapping: {path or '<root>'}")

        type_name = definition.get("type")
        if type_name is not None and not isinstance(type_name, str):
            raise MappingError(f"Field type must be a string: {path or '<root>'}")

        raw_children = definition.get("properties")
        children: dict[str, MappingNode] | None = None
        if raw_children is not None:
            if not isinstance(raw_children, Mapping):
                raise MappingError(f"Field properties must be a mapping: {path or '<root>'}")
            children = {
                name: cls.from_definition(child, path=_join(path, name))
                for name, child in raw_children.items()
            }
        return cls(type_name=type_name, children=children, definition=definition)


def _join(prefix: str, name: str) -> str:
    return name if not prefix else f"{prefix}.{name}"
