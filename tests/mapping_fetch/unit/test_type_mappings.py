"""Mapping response splitting tests."""

from __future__ import annotations

import pytest
from es_schema_reverse.mapping_fetch import MappingRequest, TypeMapping, iter_type_mappings
from es_schema_reverse.schema_model import MappingError


def test_typeless_response_reports_doc_type() -> None:
    response = {
        "products": {"mappings": {"dynamic": "strict", "properties": {"name": {"type": "text"}}}},
        "orders": {"mappings": {}},
    }

    mappings = list(iter_type_mappings(response))

    assert mappings == [
        TypeMapping(
            index="products",
            type_name="_doc",
            mapping={"dynamic": "strict", "properties": {"name": {"type": "text"}}},
        ),
        TypeMapping(index="orders", type_name="_doc", mapping={}),
    ]


def test_settings_only_mapping_is_reported_as_doc_type() -> None:
    response = {
        "empty": {"mappings": {"dynamic": "strict"}},
        "meta_only": {"mappings": {"_meta": {"owner": "search"}}},
    }

    mappings = list(iter_type_mappings(response))

    assert mappings == [
        TypeMapping(index="empty", type_name="_doc", mapping={"dynamic": "strict"}),
        TypeMapping(index="meta_only", type_name="_doc", mapping={"_meta": {"owner": "search"}}),
    ]


def test_typed_response_yields_one_mapping_per_type() -> None:
    response = {
        "legacy": {
            "mappings": {
                "tweet": {"properties": {"message": {"type": "text"}}},
                "user": {"properties": {"name": {"type": "keyword"}}},
            }
        }
    }

    mappings = list(iter_type_mappings(response))

    assert [(item.index, item.type_name) for item in mappings] == [
        ("legacy", "tweet"),
        ("legacy", "user"),
    ]


def test_types_filter_keeps_requested_types_only() -> None:
    response = {
        "legacy": {
            "mappings": {
                "tweet": {"properties": {}},
                "user": {"properties": {}},
            }
        }
    }

    mappings = list(iter_type_mappings(response, ("user",)))

    assert [item.type_name for item in mappings] == ["user"]


def test_invalid_index_body_raises() -> None:
    with pytest.raises(MappingError, match="index 'broken'"):
        list(iter_type_mappings({"broken": ["mappings"]}))


def test_mapping_request_accumulates_per_run() -> None:
    request = MappingRequest().with_index("a").with_index("b").with_type("doc")

    assert request.indices == ("a", "b")
    assert request.types == ("doc",)
    assert MappingRequest().indices == ()
