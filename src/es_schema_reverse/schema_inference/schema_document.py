"""Top-level JSON Schema envelope."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from es_schema_reverse.schema_model import SchemaNode, render_field_map

SCHEMA_DIALECT = "http://json-schema.org/draft-04/schema#"
SERVICE_FIELD_NAMES: tuple[str, ...] = ("_index", "_type", "_id", "_source")
SOURCE_FIELD_NAME = "_source"


@dataclass(frozen=True)
class SchemaDocument:
    """Inferred schema of one index type, service fields included."""

    fields: Mapping[str, SchemaNode]

    @property
    def source_properties(self) -> Mapping[str, SchemaNode]:
        source = self.fields[SOURCE_FIELD_NAME]
        return source.properties or {}

    def to_dict(self) -> dict[str, Any]:
        """Render the draft-04 document."""
        return {
            "$schema": SCHEMA_DIALECT,
            "type": "object",
            "additionalProperties": False,
            "properties": render_field_map(self.fields),
        }
