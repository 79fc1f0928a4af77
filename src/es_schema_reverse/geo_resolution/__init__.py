"""Geospatial subtype resolution exports."""

from .subtype_resolvers import (
    DEFAULT_POINT_SUBTYPE,
    DEFAULT_SHAPE_SUBTYPE,
    resolve_point_subtype,
    resolve_shape_subtype,
)

__all__ = [
    "DEFAULT_POINT_SUBTYPE",
    "DEFAULT_SHAPE_SUBTYPE",
    "resolve_point_subtype",
    "resolve_shape_subtype",
]
