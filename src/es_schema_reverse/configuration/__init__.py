"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    Configuration,
    ConnectionSettings,
    InferenceSettings,
    OutputSettings,
    RequestSettings,
)

__all__ = [
    "Configuration",
    "ConnectionSettings",
    "InferenceSettings",
    "OutputSettings",
    "RequestSettings",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
