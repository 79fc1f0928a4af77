"""Geometry snippet registry tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from es_schema_reverse.schema_model import SchemaType
from es_schema_reverse.snippet_expansion import (
    DEFAULT_SNIPPET_REGISTRY,
    SnippetError,
    SnippetRegistry,
    load_snippet_registry,
)


def test_default_registry_holds_all_geo_point_and_geo_shape_subtypes() -> None:
    assert set(DEFAULT_SNIPPET_REGISTRY) == {
        "geoJSON",
        "geo-bounding",
        "string",
        "geohash",
        "object",
        "envelope",
        "linestring",
        "multipoint",
        "point",
        "circle",
        "geometrycollection",
        "multilinestring",
        "multipolygon",
        "polygon",
    }


def test_only_geojson_point_snippet_is_array_rooted() -> None:
    array_rooted = {
        key for key, snippet in DEFAULT_SNIPPET_REGISTRY.items() if snippet.is_array_rooted
    }

    assert array_rooted == {"geoJSON"}


def test_parses_nested_children_and_samples() -> None:
    registry = SnippetRegistry.from_definitions(
        {
            "pair": {
                "parentType": "object",
                "properties": [
                    {
                        "name": "coordinates",
                        "type": "array",
                        "properties": [{"type": "number", "sample": 1.5}],
                    }
                ],
            }
        }
    )

    snippet = registry["pair"]
    coordinates = snippet.children[0]
    assert snippet.is_array_rooted is False
    assert coordinates.name == "coordinates"
    assert coordinates.type is SchemaType.ARRAY
    assert coordinates.is_array_rooted is True
    assert coordinates.children is not None
    assert coordinates.children[0].sample == 1.5


def test_rejects_unknown_field_type() -> None:
    with pytest.raises(SnippetError, match="unknown type"):
        SnippetRegistry.from_definitions({"bad": {"properties": [{"type": "polygon"}]}})


def test_rejects_non_list_properties() -> None:
    with pytest.raises(SnippetError, match="must be a list"):
        SnippetRegistry.from_definitions({"bad": {"properties": {"lat": {"type": "number"}}}})


def test_loads_snippet_files_by_stem(tmp_path: Path) -> None:
    (tmp_path / "hexagon.json").write_text(
        json.dumps({"parentType": "object", "properties": [{"name": "side", "type": "number"}]}),
        encoding="utf-8",
    )

    registry = load_snippet_registry(tmp_path)
    merged = DEFAULT_SNIPPET_REGISTRY.merged_with(registry)

    assert list(registry) == ["hexagon"]
    assert "hexagon" in merged
    assert "polygon" in merged
    assert "hexagon" not in DEFAULT_SNIPPET_REGISTRY


def test_load_fails_for_invalid_json(tmp_path: Path) -> None:
    (tmp_path / "broken.json").write_text("{not-json", encoding="utf-8")

    with pytest.raises(SnippetError, match="broken.json"):
        load_snippet_registry(tmp_path)


def test_load_fails_for_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(SnippetError, match="Snippet directory not found"):
        load_snippet_registry(tmp_path / "missing")
