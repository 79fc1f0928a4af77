"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConnectionSettings:
    """Search cluster connectivity configuration."""

    hosts: tuple[str, ...]
    username: str | None
    password: str | None
    api_key: str | None
    verify_certs: bool
    ca_certs: Path | None
    request_timeout_seconds: int


@dataclass(frozen=True)
class RequestSettings:
    """Indices and mapping types to reverse-engineer."""

    indices: tuple[str, ...]
    types: tuple[str, ...]


@dataclass(frozen=True)
class InferenceSettings:
    """Schema inference switches."""

    use_sample_document: bool
    strict: bool
    snippets_path: Path | None


@dataclass(frozen=True)
class OutputSettings:
    """Where inferred schema documents are written."""

    directory: Path


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    connection: ConnectionSettings
    request: RequestSettings
    inference: InferenceSettings
    output: OutputSettings
