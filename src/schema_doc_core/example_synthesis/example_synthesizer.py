"""Example value synthesis from schema definitions."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from schema_doc_core.reference_resolution.reference_resolver import (
    REF_KEY,
    ReferenceResolver,
    pointer_basename,
)
from schema_doc_core.schema_document.schema_nodes import EXAMPLE_KEY, SchemaNode

from .example_cache import ExampleCache

ALL_OF = "allOf"
ANY_OF = "anyOf"
ONE_OF = "oneOf"
PROPERTIES = "properties"
ITEMS = "items"
PREFERRED_ALTERNATIVE = "id"
DEFINITIONS_POINTER = "#/definitions/"
DEFAULT_MAX_SYNTHESIS_DEPTH = 64

_LOGGER = logging.getLogger(__name__)


class ExampleDepthError(Exception):
    """Raised when example synthesis nests deeper than the configured limit."""

    def __init__(self, depth: int) -> None:
        super().__init__(f"Example synthesis exceeds {depth} nested levels (cyclic schema?).")
        self.depth = depth


class ExampleSynthesizer:
    """Builds one representative example value per schema node.

    `example_for_value` works on a single (already dereferenced) property
    schema, `example_for_schema` on a definition or `$ref`. The two recurse into
    each other; a node without any usable keyword yields `None`.
    """

    def __init__(
        self,
        resolver: ReferenceResolver,
        *,
        cache: ExampleCache | None = None,
        max_depth: int = DEFAULT_MAX_SYNTHESIS_DEPTH,
    ) -> None:
        self._resolver = resolver
        self._cache = cache if cache is not None else ExampleCache()
        self._max_depth = max_depth

    def example_for_value(self, node: SchemaNode) -> SchemaNode:
        return self._value_example(node, depth=0)

    def example_for_schema(self, schema: SchemaNode) -> SchemaNode:
        return self._schema_example(schema, depth=0)

    def example_for_definition(self, identifier: str) -> SchemaNode:
        """Return the memoized example of `#/definitions/<identifier>`."""
        return self._cache.get_or_compute(
            identifier, lambda: self._definition_example(identifier)
        )

    def _definition_example(self, identifier: str) -> SchemaNode:
        _, schema = self._resolver.dereference(f"{DEFINITIONS_POINTER}{identifier}")
        _LOGGER.debug("Synthesizing example for definition %s", identifier)
        return self._schema_example(schema, depth=0)

    def _value_example(self, node: SchemaNode, *, depth: int) -> SchemaNode:
        self._check_depth(depth)
        if not isinstance(node, Mapping):
            return None

        if EXAMPLE_KEY in node:
            example = node[EXAMPLE_KEY]
            if isinstance(example, Mapping) and ONE_OF in example:
                return _first(example[ONE_OF])
            return example

        for keyword in (ANY_OF, ONE_OF):
            if keyword in node:
                chosen = _preferred_alternative(node[keyword])
                return self._schema_example(chosen, depth=depth + 1)

        if PROPERTIES in node:
            return self._schema_example(node, depth=depth + 1)

        if ITEMS in node:
            items = self._resolve_node(node[ITEMS])
            if not isinstance(items, Mapping):
                return None
            if EXAMPLE_KEY in items:
                example = items[EXAMPLE_KEY]
                return example if isinstance(example, list) else [example]
            if ONE_OF in items:
                chosen = _preferred_alternative(items[ONE_OF])
                return [self._schema_example(chosen, depth=depth + 1)]
            return [self._schema_example(items, depth=depth + 1)]

        return None

    def _schema_example(self, schema: SchemaNode, *, depth: int) -> SchemaNode:
        self._check_depth(depth)
        if not isinstance(schema, Mapping | str):
            return None
        _, resolved = self._resolver.dereference(schema)
        if not isinstance(resolved, Mapping):
            return None

        if EXAMPLE_KEY in resolved:
            example = resolved[EXAMPLE_KEY]
            if isinstance(example, Mapping) and REF_KEY in example:
                return self._schema_example(example, depth=depth + 1)
            return example

        if ALL_OF in resolved:
            merged: dict[str, SchemaNode] = {}
            for member in _as_list(resolved[ALL_OF]):
                member_example = self._schema_example(member, depth=depth + 1)
                if isinstance(member_example, Mapping):
                    merged.update(member_example)
            return merged

        if PROPERTIES in resolved:
            properties = resolved[PROPERTIES]
            if not isinstance(properties, Mapping):
                return None
            return {
                key: self._value_example(self._resolve_node(value), depth=depth + 1)
                for key, value in properties.items()
            }

        if ITEMS in resolved:
            return self._value_example(resolved, depth=depth + 1)

        return None

    def _resolve_node(self, node: SchemaNode) -> SchemaNode:
        if not isinstance(node, Mapping):
            return node
        _, resolved = self._resolver.dereference(node)
        return resolved

    def _check_depth(self, depth: int) -> None:
        if depth > self._max_depth:
            raise ExampleDepthError(self._max_depth)


def _preferred_alternative(alternatives: SchemaNode) -> SchemaNode:
    """Pick the alternative pointing at an `id` definition, else the first one."""
    candidates = _as_list(alternatives)
    for alternative in candidates:
        if not isinstance(alternative, Mapping):
            continue
        ref = alternative.get(REF_KEY)
        if isinstance(ref, str) and pointer_basename(ref) == PREFERRED_ALTERNATIVE:
            return alternative
    return _first(candidates)


def _first(values: SchemaNode) -> SchemaNode:
    candidates = _as_list(values)
    return candidates[0] if candidates else None


def _as_list(values: SchemaNode) -> list[SchemaNode]:
    if isinstance(values, Sequence) and not isinstance(values, str):
        return list(values)
    return []
