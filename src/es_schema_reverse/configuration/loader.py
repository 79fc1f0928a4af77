"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    Configuration,
    ConnectionSettings,
    InferenceSettings,
    OutputSettings,
    RequestSettings,
)

DEFAULT_OUTPUT_DIRECTORY = "schemas"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    return Configuration(
        path=path,
        connection=_parse_connection_section(parsed.get("connection"), base_path),
        request=_parse_request_section(parsed.get("request")),
        inference=_parse_inference_section(parsed.get("inference"), base_path),
        output=_parse_output_section(parsed.get("output"), base_path),
    )


def _parse_connection_section(value: Any, base_path: Path) -> ConnectionSettings:
    section = _require_mapping(value, "connection")
    hosts = _normalize_string_sequence(section.get("hosts"), "connection.hosts")
    if not hosts:
        raise ConfigurationError("connection.hosts must contain at least one host.")
    username = _optional_string(section.get("username"), "connection.username")
    password = _optional_string(section.get("password"), "connection.password")
    api_key = _optional_string(section.get("api_key"), "connection.api_key")
    if api_key and (username or password):
        raise ConfigurationError("connection must not set both api_key and username/password.")
    if bool(username) != bool(password):
        raise ConfigurationError("connection.username and connection.password go together.")
    ca_certs = _optional_string(section.get("ca_certs"), "connection.ca_certs")
    return ConnectionSettings(
        hosts=hosts,
        username=username,
        password=password,
        api_key=api_key,
        verify_certs=_require_bool(section.get("verify_certs", True), "connection.verify_certs"),
        ca_certs=_resolve_path(base_path, ca_certs) if ca_certs else None,
        request_timeout_seconds=_require_positive_int(
            section.get("request_timeout_seconds", 30), "connection.request_timeout_seconds"
        ),
    )


def _parse_request_section(value: Any) -> RequestSettings:
    section = _optional_mapping(value, "request")
    indices = _normalize_string_sequence(section.get("indices"), "request.indices")
    types = _normalize_string_sequence(section.get("types"), "request.types")
    return RequestSettings(indices=indices, types=types)


def _parse_inference_section(value: Any, base_path: Path) -> InferenceSettings:
    section = _optional_mapping(value, "inference")
    snippets_path = _optional_string(section.get("snippets_path"), "inference.snippets_path")
    return InferenceSettings(
        use_sample_document=_require_bool(
            section.get("use_sample_document", True), "inference.use_sample_document"
        ),
        strict=_require_bool(section.get("strict", False), "inference.strict"),
        snippets_path=_resolve_path(base_path, snippets_path) if snippets_path else None,
    )


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    directory = _require_non_empty_string(
        section.get("directory", DEFAULT_OUTPUT_DIRECTORY), "output.directory"
    )
    return OutputSettings(directory=_resolve_path(base_path, directory))


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(item.strip() for item in value.split(",") if item.strip())
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
