"""Per-schema memoization of definition examples."""

from __future__ import annotations

from collections.abc import Callable

from schema_doc_core.schema_document.schema_nodes import SchemaNode


class ExampleCache:
    """Get-or-compute store keyed by definition identifier.

    `None` results are cached like any other value. The cache is not locked:
    confine a schema to one thread or guard access externally.
    """

    def __init__(self) -> None:
        self._examples: dict[str, SchemaNode] = {}

    def get_or_compute(self, identifier: str, compute: Callable[[], SchemaNode]) -> SchemaNode:
        if identifier not in self._examples:
            self._examples[identifier] = compute()
        return self._examples[identifier]

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._examples

    def __len__(self) -> int:
        return len(self._examples)

    def clear(self) -> None:
        self._examples.clear()
