"""Schema output exports."""

from .schema_writer import render_schema_document, schema_output_path, write_schema_document

__all__ = ["render_schema_document", "schema_output_path", "write_schema_document"]
