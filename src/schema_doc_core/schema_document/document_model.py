"""Normalized schema document."""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .schema_nodes import SchemaNode, merge_nodes, normalize_node

LINKS_KEY = "links"
SELF_REL = "self"


class SupportsSchemaRoot(Protocol):
    """Anything exposing a schema root mapping (documents and schemas)."""

    def to_dict(self) -> dict[str, SchemaNode]: ...


class SchemaDocument:
    """Owns one normalized schema tree and exposes top-level key access."""

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        normalized = normalize_node(data or {})
        if not isinstance(normalized, dict):
            raise TypeError("Schema document root must be a mapping.")
        self._root: dict[str, SchemaNode] = normalized

    @property
    def root(self) -> Mapping[str, SchemaNode]:
        return self._root

    def get(self, key: str, default: SchemaNode = None) -> SchemaNode:
        return self._root.get(key, default)

    def set(self, key: str, value: Any) -> None:
        normalized = normalize_node({key: value})
        assert isinstance(normalized, dict)
        self._root[key] = normalized[key]

    def __getitem__(self, key: str) -> SchemaNode:
        return self._root[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._root

    def merge(self, other: Mapping[str, Any] | SupportsSchemaRoot) -> None:
        """Overwrite top-level keys with the ones from `other`."""
        source = other if isinstance(other, Mapping) else other.to_dict()
        normalized = normalize_node(source)
        if not isinstance(normalized, dict):
            raise TypeError("Merged schema data must be a mapping.")
        self._root = merge_nodes(self._root, normalized)

    def href(self) -> SchemaNode:
        """Return the `href` of the first `rel: self` link, if any."""
        links = self._root.get(LINKS_KEY)
        if not isinstance(links, Sequence) or isinstance(links, str):
            return None
        for link in links:
            if isinstance(link, Mapping) and link.get("rel") == SELF_REL:
                return link.get("href")
        return None

    def to_dict(self) -> dict[str, SchemaNode]:
        return copy.deepcopy(self._root)
