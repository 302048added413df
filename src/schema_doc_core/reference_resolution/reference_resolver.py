"""`$ref` pointer resolution against a schema document."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from schema_doc_core.schema_document.document_model import SchemaDocument
from schema_doc_core.schema_document.schema_nodes import SchemaNode, merge_nodes

REF_KEY = "$ref"
POINTER_PREFIX = "#/"
DEFAULT_MAX_REFERENCE_DEPTH = 64

Reference = Mapping[str, SchemaNode] | str
Dereferenced = tuple[str | None, SchemaNode]

_LOGGER = logging.getLogger(__name__)


class ReferenceResolutionError(Exception):
    """Raised when a `$ref` pointer cannot be followed inside the document.

    `pointer` is the pointer that failed; `chain` lists every pointer followed
    to reach it, outermost first.
    """

    def __init__(self, pointer: str, message: str, *, fragment: str | None = None) -> None:
        super().__init__(message)
        self.pointer = pointer
        self.fragment = fragment
        self.chain: list[str] = []


class ReferenceDepthError(ReferenceResolutionError):
    """Raised when a `$ref` chain is nested deeper than the configured limit."""

    def __init__(self, pointer: str, depth: int) -> None:
        super().__init__(
            pointer,
            f"Reference chain exceeds {depth} levels at `{pointer}` (cyclic $ref?).",
        )
        self.depth = depth


def pointer_fragments(pointer: str) -> list[str]:
    """Split a pointer into path fragments, dropping anything up to the last `#/`."""
    _, _, path = pointer.rpartition(POINTER_PREFIX)
    return path.split("/")


def pointer_basename(pointer: str) -> str:
    return pointer.split("/")[-1]


class ReferenceResolver:
    """Follows `$ref` chains and merges sibling override keys onto the target."""

    def __init__(
        self, document: SchemaDocument, *, max_depth: int = DEFAULT_MAX_REFERENCE_DEPTH
    ) -> None:
        self._document = document
        self._max_depth = max_depth

    def dereference(self, reference: Reference) -> Dereferenced:
        """Resolve `reference` to `(identifier, value)`.

        A mapping without `$ref` needs no dereference and comes back as
        `(None, reference)`. Keys next to `$ref` override the resolved target.
        """
        try:
            return self._dereference(reference, depth=0)
        except ReferenceResolutionError as exc:
            _log_failure(exc)
            raise

    def resolve_pointer(self, pointer: str) -> SchemaNode:
        """Walk the document along `pointer` without following nested refs."""
        try:
            return self._walk(pointer)
        except ReferenceResolutionError as exc:
            exc.chain.insert(0, pointer)
            _log_failure(exc)
            raise

    def _dereference(self, reference: Reference, *, depth: int) -> Dereferenced:
        if isinstance(reference, Mapping):
            if REF_KEY not in reference:
                return None, reference  # type: ignore[return-value]
            pointer = reference[REF_KEY]
            override = {key: value for key, value in reference.items() if key != REF_KEY}
        else:
            pointer = reference
            override = {}
        if not isinstance(pointer, str):
            raise ReferenceResolutionError(
                str(pointer), f"`$ref` must be a string pointer, got {type(pointer).__name__}."
            )

        try:
            if depth >= self._max_depth:
                raise ReferenceDepthError(pointer, self._max_depth)
            target = self._walk(pointer)
            if isinstance(target, Mapping):
                inner_key, inner_value = self._dereference(target, depth=depth + 1)
            else:
                inner_key, inner_value = None, target
        except ReferenceResolutionError as exc:
            exc.chain.insert(0, pointer)
            raise

        key = pointer_basename(pointer) or inner_key
        if isinstance(inner_value, Mapping):
            return key, merge_nodes(inner_value, override)
        if override:
            _LOGGER.debug(
                "Ignoring override keys %s on `%s`: target is not a mapping",
                sorted(override),
                pointer,
            )
        return key, inner_value

    def _walk(self, pointer: str) -> SchemaNode:
        datum: SchemaNode = self._document.root  # type: ignore[assignment]
        for fragment in pointer_fragments(pointer):
            if not isinstance(datum, Mapping):
                raise ReferenceResolutionError(
                    pointer,
                    f"Cannot follow `{fragment}` in `{pointer}`: parent is not a mapping.",
                    fragment=fragment,
                )
            if fragment not in datum:
                raise ReferenceResolutionError(
                    pointer,
                    f"Key `{fragment}` not found while resolving `{pointer}`.",
                    fragment=fragment,
                )
            datum = datum[fragment]
        return datum


def _log_failure(error: ReferenceResolutionError) -> None:
    chain = " -> ".join(error.chain) or error.pointer
    _LOGGER.error("Failed to dereference `%s`: %s", chain, error)
