"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from es_schema_reverse.schema_model import InferenceDiagnostic


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one reverse-engineering run."""

    config_path: str
    indices: tuple[str, ...] = ()
    types: tuple[str, ...] = ()
    output_dir: str | None = None


@dataclass(frozen=True)
class WrittenSchema:
    """One schema document written by a run."""

    index: str
    type_name: str
    output_path: Path
    diagnostics: tuple[InferenceDiagnostic, ...] = ()


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    written: tuple[WrittenSchema, ...] = field(default_factory=tuple)

    @property
    def output_paths(self) -> tuple[Path, ...]:
        return tuple(schema.output_path for schema in self.written)
