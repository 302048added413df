"""Configuration domain exports."""

from .loader import ConfigurationError, load_settings, parse_settings
from .runtime_settings import ResolutionSettings, SchemaSettings, SerializationSettings
from .settings_scaffold_builder import (
    DEFAULT_SETTINGS_FILENAME,
    build_settings_template,
    write_settings_template,
)

__all__ = [
    "ResolutionSettings",
    "SchemaSettings",
    "SerializationSettings",
    "ConfigurationError",
    "load_settings",
    "parse_settings",
    "DEFAULT_SETTINGS_FILENAME",
    "build_settings_template",
    "write_settings_template",
]
