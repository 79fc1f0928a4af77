"""Type mapping exports."""

from .source_types import SourceType
from .type_mapper import infer_from_sample, map_type, numeric_mode

__all__ = ["SourceType", "infer_from_sample", "map_type", "numeric_mode"]
