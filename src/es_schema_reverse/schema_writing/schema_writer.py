"""Schema document output service."""

from __future__ import annotations

import json
import re
from pathlib import Path

from es_schema_reverse.schema_inference import SchemaDocument

_UNSAFE_NAME_CHARACTERS = re.compile(r"[^A-Za-z0-9._-]+")


def render_schema_document(document: SchemaDocument) -> str:
    """Serialize a schema document as indented JSON text."""
    return json.dumps(document.to_dict(), indent=4, ensure_ascii=False) + "\n"


def schema_output_path(directory: Path | str, index: str, type_name: str) -> Path:
    """Return the file path used for the schema of ``index``/``type_name``."""
    stem = f"{_safe_name(index)}.{_safe_name(type_name)}"
    return Path(directory) / f"{stem}.schema.json"


def write_schema_document(document: SchemaDocument, output_path: Path | str) -> Path:
    """Write ``document`` to ``output_path``, creating parent directories.

    Returns:
      The resolved destination path.

    Raises:
      OSError: If writing the document fails.
    """
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_schema_document(document), encoding="utf-8")
    return destination.resolve()


def _safe_name(value: str) -> str:
    return _UNSAFE_NAME_CHARACTERS.sub("_", value) or "unnamed"
