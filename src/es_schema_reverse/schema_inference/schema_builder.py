"""Reusable schema builder with an injectable diagnostic logger."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from es_schema_reverse.schema_model import InferenceContext
from es_schema_reverse.snippet_expansion import DEFAULT_SNIPPET_REGISTRY, GeometrySnippet

from .field_walker import build_schema
from .schema_document import SchemaDocument

_DEFAULT_LOGGER = logging.getLogger("es_schema_reverse.inference")


class MappingSchemaBuilder:
    """Builds schema documents, one fresh inference context per call."""

    def __init__(
        self,
        registry: Mapping[str, GeometrySnippet] | None = None,
        logger: logging.Logger | None = None,
        *,
        strict: bool = False,
    ) -> None:
        self._registry = registry if registry is not None else DEFAULT_SNIPPET_REGISTRY
        self._logger = logger or _DEFAULT_LOGGER
        self._strict = strict
        self._last_context: InferenceContext | None = None

    def set_logger(self, logger: logging.Logger) -> None:
        """Route diagnostics of subsequent builds to ``logger``."""
        self._logger = logger

    @property
    def last_context(self) -> InferenceContext | None:
        """Inference state of the most recent build."""
        return self._last_context

    def build_schema(self, mapping: Mapping[str, Any], sample: Any = None) -> SchemaDocument:
        context = InferenceContext(logger=self._logger, strict=self._strict)
        self._last_context = context
        return build_schema(mapping, sample, context=context, registry=self._registry)
