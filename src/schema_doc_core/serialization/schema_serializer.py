"""JSON and YAML rendering of schema documents."""

from __future__ import annotations

import json
from collections.abc import Mapping

import yaml

from schema_doc_core.schema_document.schema_nodes import SchemaNode

DEFAULT_JSON_INDENT = 2


def render_json(
    node: Mapping[str, SchemaNode] | SchemaNode, *, indent: int = DEFAULT_JSON_INDENT
) -> str:
    """Pretty-print `node` without blank lines and with one trailing newline."""
    text = json.dumps(node, indent=indent, ensure_ascii=False)
    lines = [line for line in text.splitlines() if line.strip()]
    return "\n".join(lines) + "\n"


def render_yaml(
    node: Mapping[str, SchemaNode] | SchemaNode,
    *,
    explicit_start: bool = True,
    sort_keys: bool = False,
) -> str:
    """Render `node` as block-style YAML."""
    return yaml.safe_dump(
        node,
        default_flow_style=False,
        explicit_start=explicit_start,
        sort_keys=sort_keys,
        allow_unicode=True,
    )
