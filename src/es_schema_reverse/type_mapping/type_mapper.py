"""Translation of declared mapping types into schema nodes."""

from __future__ import annotations

import math
from typing import Any

from es_schema_reverse.geo_resolution import resolve_point_subtype, resolve_shape_subtype
from es_schema_reverse.schema_model import MISSING, SchemaNode, SchemaType

from .source_types import (
    NUMBER_SOURCE_TYPES,
    PASSTHROUGH_SOURCE_TYPES,
    RANGE_SOURCE_TYPES,
    STRING_SOURCE_TYPES,
    SourceType,
)

_BYTE_LIMIT = 0x7F
_SHORT_LIMIT = 0x7FFF
_INT_LIMIT = 0x7FFFFFFF


def map_type(source_type_name: str | None, sample: Any, has_nested_definition: bool) -> SchemaNode:
    """Map a declared type name, or a sample value when the name is unknown.

    Returns an undetermined node when neither the name nor a sample decide
    the type and the field has no nested definition.
    """
    source_type = SourceType.parse(source_type_name)
    if source_type is None:
        return infer_from_sample(sample, has_nested_definition)

    if source_type in NUMBER_SOURCE_TYPES:
        return SchemaNode(type=SchemaType.NUMBER, mode=source_type.value)
    if source_type in STRING_SOURCE_TYPES:
        return SchemaNode(type=SchemaType.STRING, mode=source_type.value)
    if source_type in RANGE_SOURCE_TYPES:
        return SchemaNode(type=SchemaType.RANGE, mode=source_type.value)
    if source_type in PASSTHROUGH_SOURCE_TYPES:
        return SchemaNode(type=SchemaType(source_type.value))
    if source_type is SourceType.GEO_POINT:
        return SchemaNode(type=SchemaType.GEO_POINT, sub_type=resolve_point_subtype(sample))
    return SchemaNode(type=SchemaType.GEO_SHAPE, sub_type=resolve_shape_subtype(sample))


def infer_from_sample(sample: Any, has_nested_definition: bool) -> SchemaNode:
    """Infer a node from the observed sample value alone."""
    if sample is MISSING:
        if has_nested_definition:
            return SchemaNode(type=SchemaType.OBJECT)
        return SchemaNode()

    if isinstance(sample, str):
        return SchemaNode(type=SchemaType.STRING, mode=SourceType.TEXT.value)
    if isinstance(sample, bool):
        return SchemaNode(type=SchemaType.BOOLEAN)
    if isinstance(sample, (int, float)):
        return SchemaNode(type=SchemaType.NUMBER, mode=numeric_mode(sample))
    if isinstance(sample, list):
        return SchemaNode(type=SchemaType.ARRAY)
    if sample is None:
        return SchemaNode(type=SchemaType.NULL)
    return SchemaNode(type=SchemaType.OBJECT)


def numeric_mode(value: int | float) -> str:
    """Return the narrowest numeric mode able to hold ``value``.

    Lower bounds are exclusive and upper bounds inclusive: 127 is a byte,
    128 and -128 are shorts.
    """
    if isinstance(value, float) and (not math.isfinite(value) or value - math.trunc(value) != 0):
        return SourceType.FLOAT.value
    if -(_BYTE_LIMIT + 1) < value <= _BYTE_LIMIT:
        return SourceType.BYTE.value
    if -(_SHORT_LIMIT + 1) < value <= _SHORT_LIMIT:
        return SourceType.SHORT.value
    if -(_INT_LIMIT + 1) < value <= _INT_LIMIT:
        return SourceType.INTEGER.value
    return SourceType.LONG.value
