"""Copying of type-specific mapping parameters onto schema nodes."""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from typing import Any

from es_schema_reverse.schema_model import MappingNode, SchemaNode, SchemaType

STRING_FIELDS_KEY = "stringfields"

ALLOWED_PROPERTIES: Mapping[SchemaType, tuple[str, ...]] = {
    SchemaType.STRING: (
        "boost",
        "eager_global_ordinals",
        "index",
        "index_options",
        "norms",
        "store",
        "similarity",
        "ignore_above",
        "doc_values",
        "include_in_all",
        "null_value",
    ),
    SchemaType.NUMBER: (
        "coerce",
        "boost",
        "doc_values",
        "ignore_malformed",
        "index",
        "null_value",
        "store",
        "scaling_factor",
    ),
    SchemaType.DATE: (
        "boost",
        "doc_values",
        "format",
        "locale",
        "ignore_malformed",
        "index",
        "null_value",
        "store",
    ),
    SchemaType.BOOLEAN: ("boost", "doc_values", "index", "null_value", "store"),
    SchemaType.BINARY: ("doc_values", "store"),
    SchemaType.RANGE: ("coerce", "boost", "index", "store"),
}


def decorate(node: SchemaNode, mapping_node: MappingNode) -> SchemaNode:
    """Return ``node`` with the allow-listed parameters of its type family."""
    if node.type is None:
        return node
    allowed = ALLOWED_PROPERTIES.get(node.type)
    if allowed is None:
        return node

    definition = mapping_node.definition
    copied: dict[str, Any] = {
        name: copy.deepcopy(definition[name]) for name in allowed if name in definition
    }
    if node.type is SchemaType.STRING and definition.get("fields"):
        copied[STRING_FIELDS_KEY] = json.dumps(definition["fields"], indent=4)
    if not copied:
        return node
    return node.with_annotations(copied)
