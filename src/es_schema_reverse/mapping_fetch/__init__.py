"""Mapping fetch exports."""

from .mapping_reader import IndexMappingReader, SearchClientProtocol
from .mapping_request import DEFAULT_TYPE_NAME, MappingRequest, TypeMapping
from .type_mappings import iter_type_mappings

__all__ = [
    "DEFAULT_TYPE_NAME",
    "IndexMappingReader",
    "MappingRequest",
    "SearchClientProtocol",
    "TypeMapping",
    "iter_type_mappings",
]
