"""Schema entity used by documentation renderers."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from schema_doc_core.configuration.runtime_settings import SchemaSettings
from schema_doc_core.example_synthesis import ExampleCache, ExampleSynthesizer
from schema_doc_core.reference_resolution import ReferenceResolver
from schema_doc_core.reference_resolution.reference_resolver import Dereferenced, Reference
from schema_doc_core.schema_document import SchemaDocument, SchemaNode
from schema_doc_core.serialization import render_json, render_yaml


class Schema:
    """A normalized schema document with lazily cached definition examples.

    Examples handed out are copies, so callers cannot alter the cache or the
    document through them. A `Schema` is meant to be used from one thread.
    """

    def __init__(
        self, data: Mapping[str, Any] | None = None, *, settings: SchemaSettings | None = None
    ) -> None:
        self._settings = settings or SchemaSettings()
        self._document = SchemaDocument(data)
        self._examples = ExampleCache()
        self._resolver = ReferenceResolver(
            self._document, max_depth=self._settings.resolution.max_reference_depth
        )
        self._synthesizer = ExampleSynthesizer(
            self._resolver,
            cache=self._examples,
            max_depth=self._settings.resolution.max_synthesis_depth,
        )

    @property
    def settings(self) -> SchemaSettings:
        return self._settings

    def get(self, key: str, default: SchemaNode = None) -> SchemaNode:
        return self._document.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._document.set(key, value)

    def __getitem__(self, key: str) -> SchemaNode:
        return self._document[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._document[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._document

    def merge(self, other: Mapping[str, Any] | Schema | SchemaDocument) -> None:
        """Shallow-merge `other` into this schema, its top-level keys winning."""
        self._document.merge(other)

    def href(self) -> SchemaNode:
        return self._document.href()

    def dereference(self, reference: Reference) -> Dereferenced:
        return self._resolver.dereference(reference)

    def example_for_value(self, node: SchemaNode) -> SchemaNode:
        return copy.deepcopy(self._synthesizer.example_for_value(node))

    def example_for_schema(self, schema: SchemaNode) -> SchemaNode:
        return copy.deepcopy(self._synthesizer.example_for_schema(schema))

    def example_for_definition(self, identifier: str) -> SchemaNode:
        return copy.deepcopy(self._synthesizer.example_for_definition(identifier))

    def to_dict(self) -> dict[str, SchemaNode]:
        return self._document.to_dict()

    def to_json(self) -> str:
        return render_json(self._document.root, indent=self._settings.serialization.json_indent)

    def to_yaml(self) -> str:
        serialization = self._settings.serialization
        return render_yaml(
            self._document.to_dict(),
            explicit_start=serialization.yaml_explicit_start,
            sort_keys=serialization.yaml_sort_keys,
        )

    def to_text(self) -> str:
        return self.to_json()

    def __str__(self) -> str:
        return self.to_text()
