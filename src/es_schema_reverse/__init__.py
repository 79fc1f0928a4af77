"""Reverse-engineer JSON Schema documents from search index mappings."""

import logging

from .schema_inference import MappingSchemaBuilder, SchemaDocument, build_schema

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["MappingSchemaBuilder", "SchemaDocument", "build_schema"]
