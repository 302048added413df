"""Schema document core: `$ref` resolution, example synthesis, serialization."""

from .configuration import ConfigurationError, SchemaSettings, load_settings
from .example_synthesis import ExampleDepthError
from .reference_resolution import ReferenceDepthError, ReferenceResolutionError
from .schema import Schema

__all__ = [
    "ConfigurationError",
    "ExampleDepthError",
    "ReferenceDepthError",
    "ReferenceResolutionError",
    "Schema",
    "SchemaSettings",
    "load_settings",
]
