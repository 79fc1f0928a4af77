"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for es-schema-reverse.
# Replace every <REQUIRED> placeholder before running reverse.
# Remove <OPTIONAL> entries your setup does not need.

connection:
  # One or more cluster URLs.
  hosts:
    - "<REQUIRED>"
  # Authenticate with either username/password or api_key.
  username: "<OPTIONAL>"
  password: "<OPTIONAL>"
  # api_key: "<OPTIONAL>"
  verify_certs: true
  # ca_certs: "<OPTIONAL>"
  request_timeout_seconds: 30

request:
  # Indices whose mappings are reverse-engineered; reverse --index overrides them.
  indices:
    - "<REQUIRED>"
  # Mapping types to keep; leave empty to keep every type.
  types: []

inference:
  # Fetch one document per index to refine untyped and geo fields.
  use_sample_document: true
  # Fail when a field falls back to a default instead of being inferred.
  strict: false
  # Directory of <subtype>.json geometry snippets overriding the built-in ones.
  # snippets_path: "<OPTIONAL>"

output:
  directory: "schemas"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
