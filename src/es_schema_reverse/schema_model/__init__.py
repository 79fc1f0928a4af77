"""Schema model exports."""

from .inference_context import (
    DiagnosticKind,
    InferenceContext,
    InferenceDiagnostic,
    MappingError,
    SchemaInferenceError,
)
from .schema_nodes import (
    ARRAY_SHAPED_TYPES,
    GEO_TYPES,
    MISSING,
    ItemTemplate,
    MappingNode,
    SchemaNode,
    SchemaType,
    render_field_map,
)

__all__ = [
    "ARRAY_SHAPED_TYPES",
    "GEO_TYPES",
    "MISSING",
    "DiagnosticKind",
    "InferenceContext",
    "InferenceDiagnostic",
    "ItemTemplate",
    "MappingError",
    "MappingNode",
    "SchemaInferenceError",
    "SchemaNode",
    "SchemaType",
    "render_field_map",
]
