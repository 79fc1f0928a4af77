"""Source field types declared by index mappings."""

from __future__ import annotations

from enum import Enum


class SourceType(str, Enum):
    """Mapping type names with a fixed schema translation."""

    LONG = "long"
    INTEGER = "integer"
    SHORT = "short"
    BYTE = "byte"
    DOUBLE = "double"
    FLOAT = "float"
    HALF_FLOAT = "half_float"
    SCALED_FLOAT = "scaled_float"
    KEYWORD = "keyword"
    TEXT = "text"
    INTEGER_RANGE = "integer_range"
    FLOAT_RANGE = "float_range"
    LONG_RANGE = "long_range"
    DOUBLE_RANGE = "double_range"
    DATE_RANGE = "date_range"
    NULL = "null"
    BOOLEAN = "boolean"
    BINARY = "binary"
    NESTED = "nested"
    DATE = "date"
    GEO_POINT = "geo_point"
    GEO_SHAPE = "geo_shape"

    @classmethod
    def parse(cls, name: str | None) -> SourceType | None:
        """Return the known type for ``name`` or ``None`` for unknown names."""
        if not name:
            return None
        try:
            return cls(name)
        except ValueError:
            return None


NUMBER_SOURCE_TYPES: frozenset[SourceType] = frozenset(
    {
        SourceType.LONG,
        SourceType.INTEGER,
        SourceType.SHORT,
        SourceType.BYTE,
        SourceType.DOUBLE,
        SourceType.FLOAT,
        SourceType.HALF_FLOAT,
        SourceType.SCALED_FLOAT,
    }
)
STRING_SOURCE_TYPES: frozenset[SourceType] = frozenset({SourceType.KEYWORD, SourceType.TEXT})
RANGE_SOURCE_TYPES: frozenset[SourceType] = frozenset(
    {
        SourceType.INTEGER_RANGE,
        SourceType.FLOAT_RANGE,
        SourceType.LONG_RANGE,
        SourceType.DOUBLE_RANGE,
        SourceType.DATE_RANGE,
    }
)
PASSTHROUGH_SOURCE_TYPES: frozenset[SourceType] = frozenset(
    {
        SourceType.NULL,
        SourceType.BOOLEAN,
        SourceType.BINARY,
        SourceType.NESTED,
        SourceType.DATE,
    }
)
