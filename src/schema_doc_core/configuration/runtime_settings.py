"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from schema_doc_core.example_synthesis.example_synthesizer import DEFAULT_MAX_SYNTHESIS_DEPTH
from schema_doc_core.reference_resolution.reference_resolver import DEFAULT_MAX_REFERENCE_DEPTH
from schema_doc_core.serialization.schema_serializer import DEFAULT_JSON_INDENT


@dataclass(frozen=True)
class SerializationSettings:
    """Text rendering options."""

    json_indent: int = DEFAULT_JSON_INDENT
    yaml_explicit_start: bool = True
    yaml_sort_keys: bool = False


@dataclass(frozen=True)
class ResolutionSettings:
    """Recursion limits for `$ref` chains and example synthesis."""

    max_reference_depth: int = DEFAULT_MAX_REFERENCE_DEPTH
    max_synthesis_depth: int = DEFAULT_MAX_SYNTHESIS_DEPTH


@dataclass(frozen=True)
class SchemaSettings:
    """Top-level settings aggregate."""

    serialization: SerializationSettings = field(default_factory=SerializationSettings)
    resolution: ResolutionSettings = field(default_factory=ResolutionSettings)
    path: Path | None = None
