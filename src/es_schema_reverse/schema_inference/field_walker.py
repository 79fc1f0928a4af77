"""Recursive translation of a mapping tree into a schema document."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from es_schema_reverse.property_decoration import decorate
from es_schema_reverse.schema_model import (
    GEO_TYPES,
    MISSING,
    DiagnosticKind,
    InferenceContext,
    MappingError,
    MappingNode,
    SchemaNode,
    SchemaType,
)
from es_schema_reverse.snippet_expansion import (
    DEFAULT_SNIPPET_REGISTRY,
    GeometrySnippet,
    expand_snippet,
)
from es_schema_reverse.type_mapping import infer_from_sample, map_type

from .schema_document import SERVICE_FIELD_NAMES, SOURCE_FIELD_NAME, SchemaDocument


def build_schema(
    mapping: Mapping[str, Any],
    sample: Any = None,
    *,
    context: InferenceContext | None = None,
    registry: Mapping[str, GeometrySnippet] | None = None,
) -> SchemaDocument:
    """Build the schema document for one type mapping and optional sample document.

    Args:
      mapping: Type mapping as returned by `get mapping`, with a ``properties`` key.
      sample: Optional document shaped like a search hit (``_id``, ``_source``, ...).
      context: Per-call inference state; a fresh one is created when omitted.
      registry: Geometry snippets by subtype key.

    Returns:
      The inferred schema document.

    Raises:
      MappingError: If the mapping tree is structurally invalid.
      SchemaInferenceError: If the context is strict and a field fell back to a default.
    """
    if not isinstance(mapping, Mapping):
        raise MappingError("Type mapping must be a mapping.")
    active_context = context if context is not None else InferenceContext()
    active_registry = registry if registry is not None else DEFAULT_SNIPPET_REGISTRY

    root = MappingNode.from_definition(mapping)
    document_sample: Mapping[str, Any] = sample if isinstance(sample, Mapping) else {}

    fields = _service_fields(document_sample)
    source_properties = walk_fields(
        root.children or {},
        document_sample.get(SOURCE_FIELD_NAME, MISSING),
        registry=active_registry,
        context=active_context,
    )
    fields[SOURCE_FIELD_NAME] = SchemaNode(type=SchemaType.OBJECT, properties=source_properties)

    active_context.raise_if_strict()
    return SchemaDocument(fields=fields)


def walk_fields(
    children: Mapping[str, MappingNode],
    sample: Any,
    *,
    registry: Mapping[str, GeometrySnippet],
    context: InferenceContext,
    prefix: str = "",
) -> dict[str, SchemaNode]:
    """Translate one mapping level, pairing each field with its sample slot.

    Only a record sample has slots; children of a list or scalar sample see none.
    """
    record = sample if isinstance(sample, Mapping) else None
    return {
        name: walk_field(
            child,
            record.get(name, MISSING) if record is not None else MISSING,
            registry=registry,
            context=context,
            path=name if not prefix else f"{prefix}.{name}",
        )
        for name, child in children.items()
    }


def walk_field(
    mapping_node: MappingNode,
    sample: Any,
    *,
    registry: Mapping[str, GeometrySnippet],
    context: InferenceContext,
    path: str,
) -> SchemaNode:
    """Translate one field definition and its subtree."""
    node = map_type(mapping_node.type_name, sample, mapping_node.has_children)

    if mapping_node.children is not None:
        children = walk_fields(
            mapping_node.children,
            sample,
            registry=registry,
            context=context,
            prefix=path,
        )
        if node.is_array_shaped:
            node = node.with_items((children,))
        else:
            node = node.with_properties(children)

    if node.type in GEO_TYPES:
        node = expand_snippet(node, registry, context, path=path)
    if node.is_undetermined:
        context.report(DiagnosticKind.UNDETERMINED_TYPE, path, "no declared type and no sample")

    node = decorate(node, mapping_node)

    # The engine returns either a scalar or a list for any field.
    if isinstance(sample, list) and not node.is_array_shaped:
        node = SchemaNode(type=SchemaType.ARRAY, items=(node,))
    return node


def _service_fields(document_sample: Mapping[str, Any]) -> dict[str, SchemaNode]:
    fields = {
        name: SchemaNode(type=SchemaType.STRING, mode="text")
        for name in SERVICE_FIELD_NAMES
        if name != SOURCE_FIELD_NAME
    }
    fields[SOURCE_FIELD_NAME] = SchemaNode(type=SchemaType.OBJECT, properties={})
    for name, value in document_sample.items():
        if name in SERVICE_FIELD_NAMES:
            continue
        fields[name] = infer_from_sample(value, isinstance(value, Mapping))
    return fields
