"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
from elasticsearch import ApiError, TransportError

from es_schema_reverse.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from es_schema_reverse.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_reverse_engineering_run,
)
from es_schema_reverse.schema_inference import MappingSchemaBuilder
from es_schema_reverse.schema_model import MappingError, SchemaInferenceError
from es_schema_reverse.schema_writing import render_schema_document, write_schema_document


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="es-schema-reverse")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log inference diagnostics.")
def cli(verbose: bool) -> None:
    """Reverse-engineer JSON Schema documents from search index mappings."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="infer")
@click.option(
    "--mapping",
    "mapping_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a JSON type mapping (an object with a 'properties' key)",
)
@click.option(
    "--sample",
    "sample_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to one JSON sample document shaped like a search hit",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the schema file to write; prints to stdout when omitted",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail when a field falls back to a default instead of being inferred.",
)
def infer(
    mapping_path: str, sample_path: str | None, output_path: str | None, strict: bool
) -> None:
    """Infer a schema offline from a mapping file and an optional sample document."""
    builder = MappingSchemaBuilder(strict=strict)
    try:
        mapping = _read_json(mapping_path)
        sample = _read_json(sample_path) if sample_path else None
        document = builder.build_schema(mapping, sample)
        if output_path is None:
            click.echo(render_schema_document(document), nl=False)
            return
        resolved_output = write_schema_document(document, output_path)
    except (MappingError, SchemaInferenceError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="reverse")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--index",
    "indices",
    multiple=True,
    help="Index to reverse-engineer; overrides request.indices (repeatable)",
)
@click.option(
    "--type",
    "types",
    multiple=True,
    help="Mapping type to keep; overrides request.types (repeatable)",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Optional directory for schema documents; overrides output.directory",
)
def reverse(
    config_path: str, indices: tuple[str, ...], types: tuple[str, ...], output_dir: str | None
) -> None:
    """Fetch index mappings from the cluster and write one schema per index/type."""
    try:
        outcome = execute_reverse_engineering_run(
            RunRequest(
                config_path=config_path,
                indices=indices,
                types=types,
                output_dir=output_dir,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    except (ApiError, TransportError) as exc:
        raise CliError(f"Failed to fetch mappings: {exc}") from exc
    for output_path in outcome.output_paths:
        click.echo(str(output_path))


def _read_json(path: str) -> Any:
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
