"""Settings scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_SETTINGS_FILENAME = "schema-doc.yaml"

_SETTINGS_SCAFFOLD_TEMPLATE = """# Settings template for schema-doc-core.
# Every key is optional; removed keys fall back to the defaults shown here.

serialization:
  # Indentation width of the pretty-printed JSON schema.
  json_indent: 2
  # Start YAML output with a `---` document marker.
  yaml_explicit_start: true
  # Sort mapping keys in YAML output instead of keeping document order.
  yaml_sort_keys: false

resolution:
  # Longest $ref chain followed before resolution fails.
  max_reference_depth: 64
  # Deepest schema nesting visited while building examples.
  max_synthesis_depth: 64
"""


def build_settings_template() -> str:
    """Build a YAML settings template with defaults and inline guidance."""
    return _SETTINGS_SCAFFOLD_TEMPLATE


def write_settings_template(output_path: Path | str) -> Path:
    """Write the settings template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Settings file already exists: {destination.resolve()}")
    destination.write_text(build_settings_template(), encoding="utf-8")
    return destination.resolve()
