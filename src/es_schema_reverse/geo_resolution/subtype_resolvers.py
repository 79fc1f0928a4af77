"""Geo-point and geo-shape representation detection."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_LAT_LON_PATTERN = re.compile(r"^\s*-?\d+(?:\.\d+)?\s*,\s*-?\d+(?:\.\d+)?\s*$")

# Order matters: the first matching keyword wins.
_WKT_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("POINT", "point"),
    ("LINESTRING", "linestring"),
    ("POLYGON", "polygon"),
    ("MULTIPOINT", "multipoint"),
    ("MULTILINESTRING", "multilinestring"),
    ("MULTIPOLYGON", "multipolygon"),
    ("GEOMETRYCOLLECTION", "geometrycollection"),
    ("BBOX", "envelope"),
)
_WKT_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(rf"^{keyword}\s*(.+)", re.IGNORECASE), subtype)
    for keyword, subtype in _WKT_KEYWORDS
)

DEFAULT_POINT_SUBTYPE = "object"
DEFAULT_SHAPE_SUBTYPE = "point"


def resolve_point_subtype(sample: Any) -> str:
    """Return the geo-point representation used by ``sample``.

    A ``"lat,lon"`` string is ``string``, any other string a ``geohash``, a list
    the ``geoJSON`` coordinate pair and a record with both corner keys a
    ``geo-bounding`` box. Everything else, including no sample, is ``object``.
    """
    if isinstance(sample, str):
        return "string" if _LAT_LON_PATTERN.match(sample) else "geohash"
    if isinstance(sample, list):
        return "geoJSON"
    if isinstance(sample, Mapping) and "top_left" in sample and "bottom_right" in sample:
        return "geo-bounding"
    return DEFAULT_POINT_SUBTYPE


def resolve_shape_subtype(sample: Any) -> str:
    """Return the geo-shape representation used by ``sample``.

    WKT strings are matched by their leading keyword. GeoJSON-like records hand
    back their own ``type`` without checking it against the known templates.
    """
    if isinstance(sample, str):
        text = sample.strip()
        for pattern, subtype in _WKT_PATTERNS:
            if pattern.match(text):
                return subtype
        return DEFAULT_SHAPE_SUBTYPE
    if isinstance(sample, Mapping):
        declared = sample.get("type")
        if declared:
            return declared.lower() if isinstance(declared, str) else str(declared)
    return DEFAULT_SHAPE_SUBTYPE
