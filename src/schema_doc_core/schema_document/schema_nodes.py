"""Schema node values, normalization and merging."""

from __future__ import annotations

import copy
from collections.abc import Mapping

SchemaNode = bool | int | float | str | list["SchemaNode"] | dict[str, "SchemaNode"] | None

TYPE_KEY = "type"
EXAMPLE_KEY = "example"


def normalize_node(node: object) -> SchemaNode:
    """Return a copy of `node` with every string `type` wrapped into a list.

    Subtrees reached through an `example` key are user payloads: they are copied
    as authored, even when they carry their own `type` field.
    """
    if isinstance(node, Mapping):
        normalized: dict[str, SchemaNode] = {}
        for key, value in node.items():
            if key == EXAMPLE_KEY:
                normalized[key] = copy.deepcopy(value)
            elif key == TYPE_KEY and isinstance(value, str):
                normalized[key] = [value]
            else:
                normalized[key] = normalize_node(value)
        return normalized
    if isinstance(node, list | tuple):
        return [normalize_node(element) for element in node]
    return node  # type: ignore[return-value]


def merge_nodes(
    base: Mapping[str, SchemaNode], override: Mapping[str, SchemaNode]
) -> dict[str, SchemaNode]:
    """Shallow merge into a new mapping; `override` wins on shared keys."""
    merged = dict(base)
    merged.update(override)
    return merged
