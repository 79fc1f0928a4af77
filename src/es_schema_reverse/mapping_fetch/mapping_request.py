"""Per-run mapping request entities."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

DEFAULT_TYPE_NAME = "_doc"


@dataclass(frozen=True)
class MappingRequest:
    """Indices and mapping types queried by one run."""

    indices: tuple[str, ...] = ()
    types: tuple[str, ...] = ()

    def with_index(self, index: str) -> MappingRequest:
        return replace(self, indices=(*self.indices, index))

    def with_type(self, type_name: str) -> MappingRequest:
        return replace(self, types=(*self.types, type_name))


@dataclass(frozen=True)
class TypeMapping:
    """Mapping of one type within one index."""

    index: str
    type_name: str
    mapping: dict[str, Any]
