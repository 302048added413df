"""Settings scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from schema_doc_core.configuration.loader import load_settings
from schema_doc_core.configuration.runtime_settings import SchemaSettings
from schema_doc_core.configuration.settings_scaffold_builder import (
    build_settings_template,
    write_settings_template,
)


def test_build_settings_template_contains_all_supported_sections() -> None:
    scaffold = build_settings_template()
    parsed = yaml.safe_load(scaffold)

    assert "Settings template" in scaffold
    assert set(parsed) == {"serialization", "resolution"}
    assert set(parsed["serialization"]) == {"json_indent", "yaml_explicit_start", "yaml_sort_keys"}
    assert set(parsed["resolution"]) == {"max_reference_depth", "max_synthesis_depth"}


def test_written_template_loads_as_default_settings(tmp_path: Path) -> None:
    output_path = tmp_path / "schema-doc.yaml"

    written_path = write_settings_template(output_path)
    settings = load_settings(written_path)

    assert written_path == output_path.resolve()
    assert settings.serialization == SchemaSettings().serialization
    assert settings.resolution == SchemaSettings().resolution


def test_write_settings_template_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "schema-doc.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_settings_template(output_path)
