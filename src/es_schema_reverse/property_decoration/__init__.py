"""Property decoration exports."""

from .property_decorator import ALLOWED_PROPERTIES, STRING_FIELDS_KEY, decorate

__all__ = ["ALLOWED_PROPERTIES", "STRING_FIELDS_KEY", "decorate"]
