"""Schema inference exports."""

from .field_walker import build_schema, walk_field, walk_fields
from .schema_builder import MappingSchemaBuilder
from .schema_document import SCHEMA_DIALECT, SERVICE_FIELD_NAMES, SchemaDocument

__all__ = [
    "SCHEMA_DIALECT",
    "SERVICE_FIELD_NAMES",
    "MappingSchemaBuilder",
    "SchemaDocument",
    "build_schema",
    "walk_field",
    "walk_fields",
]
