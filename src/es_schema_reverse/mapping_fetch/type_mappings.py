"""Splitting of `get mapping` responses into per-type mappings."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from es_schema_reverse.schema_model import MappingError

from .mapping_request import DEFAULT_TYPE_NAME, TypeMapping


def iter_type_mappings(
    response: Mapping[str, Any], types: Sequence[str] = ()
) -> Iterator[TypeMapping]:
    """Yield every index/type mapping of a response, keeping only ``types`` when given.

    Typeless responses, including bodies with no field properties at all,
    report the type as ``_doc``; older typed responses nest one mapping per
    type name.
    """
    if not isinstance(response, Mapping):
        raise MappingError("Mapping response must be a mapping.")
    wanted = set(types)
    for index, index_body in response.items():
        if not isinstance(index_body, Mapping):
            raise MappingError(f"Mapping response for index '{index}' must be a mapping.")
        mappings = index_body.get("mappings") or {}
        if not isinstance(mappings, Mapping):
            raise MappingError(f"Mappings of index '{index}' must be a mapping.")
        for type_name, mapping in _split_types(mappings):
            if wanted and type_name not in wanted:
                continue
            yield TypeMapping(index=index, type_name=type_name, mapping=dict(mapping))


def _split_types(mappings: Mapping[str, Any]) -> Iterator[tuple[str, Mapping[str, Any]]]:
    if "properties" in mappings:
        yield DEFAULT_TYPE_NAME, mappings
        return
    typed = [
        (type_name, mapping)
        for type_name, mapping in mappings.items()
        if isinstance(mapping, Mapping) and "properties" in mapping
    ]
    # Settings-only bodies such as {"dynamic": "strict"} are typeless too.
    yield from typed or [(DEFAULT_TYPE_NAME, mappings)]
