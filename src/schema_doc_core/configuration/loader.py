"""Settings loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import ResolutionSettings, SchemaSettings, SerializationSettings

_DEFAULT_SERIALIZATION = SerializationSettings()
_DEFAULT_RESOLUTION = ResolutionSettings()


class ConfigurationError(Exception):
    """Raised when the settings file is invalid."""


def load_settings(settings_path: Path | str) -> SchemaSettings:
    """Load and validate a YAML settings file."""
    path = Path(settings_path)
    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse settings file: {exc}") from exc

    return parse_settings(parsed, path=path)


def parse_settings(parsed: Any, *, path: Path | None = None) -> SchemaSettings:
    """Validate already-parsed settings data; missing sections use defaults."""
    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Settings root must be a mapping.")

    serialization = _parse_serialization_section(parsed.get("serialization"))
    resolution = _parse_resolution_section(parsed.get("resolution"))
    return SchemaSettings(serialization=serialization, resolution=resolution, path=path)


def _parse_serialization_section(value: Any) -> SerializationSettings:
    section = _optional_mapping(value, "serialization")
    json_indent = _require_positive_int(
        section.get("json_indent", _DEFAULT_SERIALIZATION.json_indent),
        "serialization.json_indent",
    )
    yaml_explicit_start = _require_bool(
        section.get("yaml_explicit_start", _DEFAULT_SERIALIZATION.yaml_explicit_start),
        "serialization.yaml_explicit_start",
    )
    yaml_sort_keys = _require_bool(
        section.get("yaml_sort_keys", _DEFAULT_SERIALIZATION.yaml_sort_keys),
        "serialization.yaml_sort_keys",
    )
    return SerializationSettings(
        json_indent=json_indent,
        yaml_explicit_start=yaml_explicit_start,
        yaml_sort_keys=yaml_sort_keys,
    )


def _parse_resolution_section(value: Any) -> ResolutionSettings:
    section = _optional_mapping(value, "resolution")
    max_reference_depth = _require_positive_int(
        section.get("max_reference_depth", _DEFAULT_RESOLUTION.max_reference_depth),
        "resolution.max_reference_depth",
    )
    max_synthesis_depth = _require_positive_int(
        section.get("max_synthesis_depth", _DEFAULT_RESOLUTION.max_synthesis_depth),
        "resolution.max_synthesis_depth",
    )
    return ResolutionSettings(
        max_reference_depth=max_reference_depth,
        max_synthesis_depth=max_synthesis_depth,
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Settings section '{section_name}' must be a mapping.")
    return value


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
