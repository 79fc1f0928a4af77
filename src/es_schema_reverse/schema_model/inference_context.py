"""Per-call inference state and error types."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

_LOGGER = logging.getLogger("es_schema_reverse.inference")


class MappingError(Exception):
    """Raised when a mapping tree is structurally invalid."""


class SchemaInferenceError(Exception):
    """Raised in strict mode when inference had to fall back to defaults."""

    def __init__(self, diagnostics: tuple[InferenceDiagnostic, ...]) -> None:
        self.diagnostics = diagnostics
        details = "; ".join(diagnostic.describe() for diagnostic in diagnostics)
        super().__init__(f"Schema inference degraded for {len(diagnostics)} field(s): {details}")


class DiagnosticKind(str, Enum):
    """Silent fallbacks the walker can take."""

    UNREGISTERED_SUBTYPE = "unregistered_subtype"
    UNDETERMINED_TYPE = "undetermined_type"


@dataclass(frozen=True)
class InferenceDiagnostic:
    """One degraded field in the inferred schema."""

    kind: DiagnosticKind
    path: str
    detail: str

    def describe(self) -> str:
        return f"{self.path or '<root>'}: {self.detail}"


@dataclass
class InferenceContext:
    """State owned by exactly one schema build.

    Created per call so that nothing leaks between builds; the logger only
    observes the walk and never influences its output.
    """

    logger: logging.Logger = _LOGGER
    strict: bool = False
    diagnostics: list[InferenceDiagnostic] = field(default_factory=list)

    def report(self, kind: DiagnosticKind, path: str, detail: str) -> None:
        diagnostic = InferenceDiagnostic(kind=kind, path=path, detail=detail)
        self.diagnostics.append(diagnostic)
        self.logger.debug("Inference fallback at %s", diagnostic.describe())

    def raise_if_strict(self) -> None:
        """Surface recorded fallbacks when strict mode is enabled."""
        if self.strict and self.diagnostics:
            raise SchemaInferenceError(tuple(self.diagnostics))
