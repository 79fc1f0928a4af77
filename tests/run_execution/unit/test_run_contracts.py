"""Tests for run execution domain entities."""

from __future__ import annotations

from pathlib import Path

from es_schema_reverse.run_execution.run_contracts import RunOutcome, RunRequest, WrittenSchema


def test_run_request_defaults_to_configured_indices() -> None:
    request = RunRequest(config_path="config.yaml")

    assert request.indices == ()
    assert request.types == ()
    assert request.output_dir is None


def test_run_outcome_lists_output_paths_in_write_order() -> None:
    outcome = RunOutcome(
        written=(
            WrittenSchema(index="a", type_name="_doc", output_path=Path("/tmp/a._doc.schema.json")),
            WrittenSchema(index="b", type_name="_doc", output_path=Path("/tmp/b._doc.schema.json")),
        )
    )

    assert [path.name for path in outcome.output_paths] == [
        "a._doc.schema.json",
        "b._doc.schema.json",
    ]
