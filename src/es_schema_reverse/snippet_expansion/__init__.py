"""Geometry snippet exports."""

from .geometry_snippets import DEFAULT_SNIPPET_REGISTRY
from .snippet_expander import expand_snippet
from .snippet_models import (
    GeometrySnippet,
    SnippetError,
    SnippetField,
    SnippetRegistry,
    load_snippet_registry,
    parse_snippet,
)

__all__ = [
    "DEFAULT_SNIPPET_REGISTRY",
    "GeometrySnippet",
    "SnippetError",
    "SnippetField",
    "SnippetRegistry",
    "expand_snippet",
    "load_snippet_registry",
    "parse_snippet",
]
