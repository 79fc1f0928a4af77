"""Reverse-engineering run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from es_schema_reverse.configuration import (
    Configuration,
    ConfigurationError,
    ConnectionSettings,
    load_configuration,
)
from es_schema_reverse.mapping_fetch import (
    IndexMappingReader,
    MappingRequest,
    TypeMapping,
    iter_type_mappings,
)
from es_schema_reverse.schema_inference import MappingSchemaBuilder
from es_schema_reverse.schema_model import MappingError, SchemaInferenceError
from es_schema_reverse.schema_writing import schema_output_path, write_schema_document
from es_schema_reverse.snippet_expansion import (
    DEFAULT_SNIPPET_REGISTRY,
    GeometrySnippet,
    SnippetError,
    load_snippet_registry,
)

from .run_contracts import RunOutcome, RunRequest, WrittenSchema

_LOGGER = logging.getLogger("es_schema_reverse.run")

ReaderFactory = Callable[[ConnectionSettings], IndexMappingReader]


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def execute_reverse_engineering_run(
    request: RunRequest,
    *,
    reader_factory: ReaderFactory | None = None,
) -> RunOutcome:
    """Fetch mappings, infer one schema per index/type and write them to disk.

    Search client failures are not wrapped and propagate to the caller.
    """
    resolved_reader_factory = reader_factory or IndexMappingReader
    configuration = _load_configuration(request.config_path)
    mapping_request = _build_mapping_request(configuration, request)
    builder = MappingSchemaBuilder(
        registry=_load_registry(configuration),
        logger=_LOGGER,
        strict=configuration.inference.strict,
    )
    output_dir = Path(request.output_dir) if request.output_dir else configuration.output.directory

    reader = resolved_reader_factory(configuration.connection)
    response = reader.fetch_mapping(mapping_request)
    samples: dict[str, Mapping[str, Any] | None] = {}
    written: list[WrittenSchema] = []
    try:
        for type_mapping in iter_type_mappings(response, mapping_request.types):
            sample = _sample_for(type_mapping, reader, configuration, samples)
            document = builder.build_schema(type_mapping.mapping, sample)
            output_path = write_schema_document(
                document,
                schema_output_path(output_dir, type_mapping.index, type_mapping.type_name),
            )
            context = builder.last_context
            written.append(
                WrittenSchema(
                    index=type_mapping.index,
                    type_name=type_mapping.type_name,
                    output_path=output_path,
                    diagnostics=tuple(context.diagnostics) if context else (),
                )
            )
    except (MappingError, SchemaInferenceError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc
    _LOGGER.info("Wrote %d schema document(s) to %s", len(written), output_dir)
    return RunOutcome(written=tuple(written))


def _load_configuration(config_path: str) -> Configuration:
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc


def _build_mapping_request(configuration: Configuration, request: RunRequest) -> MappingRequest:
    indices = request.indices or configuration.request.indices
    if not indices:
        raise RunExecutionError(
            "No index to reverse-engineer: pass --index or set request.indices."
        )
    mapping_request = MappingRequest()
    for index in indices:
        mapping_request = mapping_request.with_index(index)
    for type_name in request.types or configuration.request.types:
        mapping_request = mapping_request.with_type(type_name)
    return mapping_request


def _load_registry(configuration: Configuration) -> Mapping[str, GeometrySnippet]:
    snippets_path = configuration.inference.snippets_path
    if snippets_path is None:
        return DEFAULT_SNIPPET_REGISTRY
    try:
        return DEFAULT_SNIPPET_REGISTRY.merged_with(load_snippet_registry(snippets_path))
    except SnippetError as exc:
        raise RunExecutionError(str(exc)) from exc


def _sample_for(
    type_mapping: TypeMapping,
    reader: IndexMappingReader,
    configuration: Configuration,
    samples: dict[str, Mapping[str, Any] | None],
) -> Mapping[str, Any] | None:
    if not configuration.inference.use_sample_document:
        return None
    if type_mapping.index not in samples:
        samples[type_mapping.index] = reader.fetch_sample_document(type_mapping.index)
    return samples[type_mapping.index]
