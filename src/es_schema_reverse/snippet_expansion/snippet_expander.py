"""Expansion of geometry snippets into schema fragments."""

from __future__ import annotations

from collections.abc import Mapping

from es_schema_reverse.schema_model import DiagnosticKind, InferenceContext, SchemaNode

from .snippet_models import GeometrySnippet, SnippetField


def expand_snippet(
    node: SchemaNode,
    registry: Mapping[str, GeometrySnippet],
    context: InferenceContext,
    *,
    path: str = "",
) -> SchemaNode:
    """Attach the snippet registered for ``node.sub_type`` to ``node``.

    An unregistered subtype leaves the node as it is.
    """
    snippet = registry.get(node.sub_type) if node.sub_type is not None else None
    if snippet is None:
        context.report(
            DiagnosticKind.UNREGISTERED_SUBTYPE,
            path,
            f"no geometry snippet registered for subType {node.sub_type!r}",
        )
        return node

    if snippet.is_array_rooted:
        return node.with_items(_expand_positional(snippet.children))
    return node.with_properties(_expand_named(snippet.children))


def _expand_positional(children: tuple[SnippetField, ...]) -> tuple[SchemaNode, ...]:
    return tuple(_expand_field(child) for child in children)


def _expand_named(children: tuple[SnippetField, ...]) -> dict[str, SchemaNode]:
    return {
        child.name if child.name is not None else str(index): _expand_field(child)
        for index, child in enumerate(children)
    }


def _expand_field(template: SnippetField) -> SchemaNode:
    node = SchemaNode(type=template.type)
    if template.children is not None:
        if template.is_array_rooted:
            node = node.with_items(_expand_positional(template.children))
        else:
            node = node.with_properties(_expand_named(template.children))
    if template.sample is not None:
        node = node.with_annotations({"sample": template.sample})
    return node
