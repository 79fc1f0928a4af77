"""Built-in geometry snippets for geo-point and geo-shape representations."""

from __future__ import annotations

from typing import Any

from .snippet_models import SnippetRegistry


def _number(sample: float) -> dict[str, Any]:
    return {"type": "number", "sample": sample}


def _position(lon: float, lat: float) -> dict[str, Any]:
    return {"type": "array", "properties": [_number(lon), _number(lat)]}


def _lat_lon(name: str, lat: float, lon: float) -> dict[str, Any]:
    return {
        "name": name,
        "type": "object",
        "properties": [
            {"name": "lat", **_number(lat)},
            {"name": "lon", **_number(lon)},
        ],
    }


def _shape_type(sample: str) -> dict[str, Any]:
    return {"name": "type", "type": "string", "sample": sample}


def _coordinates(*positions: dict[str, Any]) -> dict[str, Any]:
    return {"name": "coordinates", "type": "array", "properties": list(positions)}


def _ring(*positions: dict[str, Any]) -> dict[str, Any]:
    return {"type": "array", "properties": list(positions)}


GEO_POINT_SNIPPETS: dict[str, Any] = {
    "geoJSON": {
        "parentType": "array",
        "properties": [_number(-71.34), _number(41.12)],
    },
    "geo-bounding": {
        "parentType": "object",
        "properties": [
            _lat_lon("top_left", 40.73, -74.1),
            _lat_lon("bottom_right", 40.01, -71.12),
        ],
    },
    "string": {
        "parentType": "object",
        "properties": [{"name": "location", "type": "string", "sample": "41.12,-71.34"}],
    },
    "geohash": {
        "parentType": "object",
        "properties": [{"name": "location", "type": "string", "sample": "drm3btev3e86"}],
    },
    "object": {
        "parentType": "object",
        "properties": [
            {"name": "lat", **_number(41.12)},
            {"name": "lon", **_number(-71.34)},
        ],
    },
}

GEO_SHAPE_SNIPPETS: dict[str, Any] = {
    "point": {
        "parentType": "object",
        "properties": [
            _shape_type("point"),
            _coordinates(_number(-77.03653), _number(38.897676)),
        ],
    },
    "linestring": {
        "parentType": "object",
        "properties": [
            _shape_type("linestring"),
            _coordinates(_position(-77.03653, 38.897676), _position(-77.009051, 38.889939)),
        ],
    },
    "polygon": {
        "parentType": "object",
        "properties": [
            _shape_type("polygon"),
            _coordinates(
                _ring(
                    _position(100.0, 0.0),
                    _position(101.0, 0.0),
                    _position(101.0, 1.0),
                    _position(100.0, 1.0),
                    _position(100.0, 0.0),
                )
            ),
        ],
    },
    "multipoint": {
        "parentType": "object",
        "properties": [
            _shape_type("multipoint"),
            _coordinates(_position(102.0, 2.0), _position(103.0, 2.0)),
        ],
    },
    "multilinestring": {
        "parentType": "object",
        "properties": [
            _shape_type("multilinestring"),
            _coordinates(
                _ring(_position(102.0, 2.0), _position(103.0, 2.0)),
                _ring(_position(100.0, 0.0), _position(101.0, 1.0)),
            ),
        ],
    },
    "multipolygon": {
        "parentType": "object",
        "properties": [
            _shape_type("multipolygon"),
            _coordinates(
                _ring(
                    _ring(
                        _position(102.0, 2.0),
                        _position(103.0, 2.0),
                        _position(103.0, 3.0),
                        _position(102.0, 3.0),
                        _position(102.0, 2.0),
                    )
                ),
            ),
        ],
    },
    "geometrycollection": {
        "parentType": "object",
        "properties": [
            _shape_type("geometrycollection"),
            {
                "name": "geometries",
                "type": "array",
                "properties": [
                    {
                        "type": "object",
                        "properties": [
                            _shape_type("point"),
                            _coordinates(_number(100.0), _number(0.0)),
                        ],
                    },
                    {
                        "type": "object",
                        "properties": [
                            _shape_type("linestring"),
                            _coordinates(_position(101.0, 0.0), _position(102.0, 1.0)),
                        ],
                    },
                ],
            },
        ],
    },
    "envelope": {
        "parentType": "object",
        "properties": [
            _shape_type("envelope"),
            _coordinates(_position(-45.0, 45.0), _position(45.0, -45.0)),
        ],
    },
    "circle": {
        "parentType": "object",
        "properties": [
            _shape_type("circle"),
            _coordinates(_number(-45.0), _number(45.0)),
            {"name": "radius", "type": "string", "sample": "100m"},
        ],
    },
}

DEFAULT_SNIPPET_REGISTRY = SnippetRegistry.from_definitions(
    {**GEO_POINT_SNIPPETS, **GEO_SHAPE_SNIPPETS}
)
