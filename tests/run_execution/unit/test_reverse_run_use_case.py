"""Tests for the reverse-engineering run use case."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from es_schema_reverse.configuration.runtime_settings import ConnectionSettings
from es_schema_reverse.mapping_fetch import IndexMappingReader
from es_schema_reverse.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_reverse_engineering_run,
)
from es_schema_reverse.schema_model import DiagnosticKind

_MAPPING_RESPONSE = {
    "products": {
        "mappings": {
            "properties": {
                "name": {"type": "keyword"},
                "location": {"type": "geo_point"},
                "notes": {},
            }
        }
    },
    "orders": {"mappings": {"properties": {"total": {"type": "double"}}}},
}

_SAMPLES = {
    "products": {
        "_index": "products",
        "_id": "1",
        "_source": {"name": ["a", "b"], "location": "52.5,13.4"},
    },
    "orders": None,
}


class FakeIndices:
    def __init__(self, response: Any) -> None:
        self._response = response
        self.requested: list[Any] = []

    def get_mapping(self, *, index: Any = None, **kwargs: Any) -> Any:
        self.requested.append(index)
        if isinstance(self._response, Exception):
            raise self._response
        return self._response


class FakeClient:
    def __init__(self, response: Any = _MAPPING_RESPONSE) -> None:
        self.indices = FakeIndices(response)
        self.searched: list[str] = []

    def search(self, *, index: Any = None, **kwargs: Any) -> Any:
        self.searched.append(index)
        sample = _SAMPLES.get(index)
        return {"hits": {"hits": [sample] if sample else []}}


def _write_config(tmp_path: Path, **inference: Any) -> Path:
    config = {
        "connection": {"hosts": ["http://localhost:9200"]},
        "request": {"indices": ["products", "orders"]},
        "inference": inference,
        "output": {"directory": "schemas"},
    }
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


def _reader_factory(client: FakeClient):
    def factory(settings: ConnectionSettings) -> IndexMappingReader:
        return IndexMappingReader(settings, client=client)

    return factory


def test_writes_one_schema_per_index_type(tmp_path: Path) -> None:
    client = FakeClient()
    config_path = _write_config(tmp_path)

    outcome = execute_reverse_engineering_run(
        RunRequest(config_path=str(config_path)), reader_factory=_reader_factory(client)
    )

    assert [path.name for path in outcome.output_paths] == [
        "products._doc.schema.json",
        "orders._doc.schema.json",
    ]
    assert client.indices.requested == [["products", "orders"]]
    assert client.searched == ["products", "orders"]
    products = json.loads(outcome.output_paths[0].read_text(encoding="utf-8"))
    source = products["properties"]["_source"]["properties"]
    assert source["name"] == {"type": "array", "items": [{"type": "string", "mode": "keyword"}]}
    assert source["location"]["subType"] == "string"
    assert outcome.written[0].diagnostics[0].kind is DiagnosticKind.UNDETERMINED_TYPE
    assert outcome.written[1].diagnostics == ()


def test_request_overrides_indices_and_output_dir(tmp_path: Path) -> None:
    client = FakeClient()
    config_path = _write_config(tmp_path, use_sample_document=False)
    output_dir = tmp_path / "custom"

    outcome = execute_reverse_engineering_run(
        RunRequest(config_path=str(config_path), indices=("orders",), output_dir=str(output_dir)),
        reader_factory=_reader_factory(client),
    )

    assert client.indices.requested == [["orders"]]
    assert client.searched == []
    assert all(path.parent == output_dir.resolve() for path in outcome.output_paths)


def test_strict_inference_fails_run(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, strict=True)

    with pytest.raises(RunExecutionError, match="notes"):
        execute_reverse_engineering_run(
            RunRequest(config_path=str(config_path)),
            reader_factory=_reader_factory(FakeClient()),
        )


def test_fetch_failure_propagates_unchanged(tmp_path: Path) -> None:
    failure = ConnectionError("cluster unreachable")
    config_path = _write_config(tmp_path)

    with pytest.raises(ConnectionError) as excinfo:
        execute_reverse_engineering_run(
            RunRequest(config_path=str(config_path)),
            reader_factory=_reader_factory(FakeClient(failure)),
        )

    assert excinfo.value is failure


def test_invalid_configuration_raises_run_error(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"connection": {"hosts": []}}), encoding="utf-8")

    with pytest.raises(RunExecutionError, match="connection.hosts"):
        execute_reverse_engineering_run(
            RunRequest(config_path=str(config_path)),
            reader_factory=_reader_factory(FakeClient()),
        )


def test_custom_snippets_extend_registry(tmp_path: Path) -> None:
    snippets_dir = tmp_path / "snippets"
    snippets_dir.mkdir()
    (snippets_dir / "string.json").write_text(
        json.dumps({"parentType": "object", "properties": [{"name": "pair", "type": "string"}]}),
        encoding="utf-8",
    )
    config_path = _write_config(tmp_path, snippets_path="snippets")

    outcome = execute_reverse_engineering_run(
        RunRequest(config_path=str(config_path)), reader_factory=_reader_factory(FakeClient())
    )

    products = json.loads(outcome.output_paths[0].read_text(encoding="utf-8"))
    location = products["properties"]["_source"]["properties"]["location"]
    assert location["properties"] == {"pair": {"type": "string"}}


def test_run_without_any_index_fails_before_fetching(tmp_path: Path) -> None:
    client = FakeClient()
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"connection": {"hosts": ["http://localhost:9200"]}}), encoding="utf-8"
    )

    with pytest.raises(RunExecutionError, match="No index to reverse-engineer"):
        execute_reverse_engineering_run(
            RunRequest(config_path=str(config_path)), reader_factory=_reader_factory(client)
        )

    assert client.indices.requested == []
