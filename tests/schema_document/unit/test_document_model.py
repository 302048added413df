"""Schema document tests."""

from __future__ import annotations

import pytest
from schema_doc_core.schema_document import SchemaDocument


def test_construction_normalizes_and_copies_input() -> None:
    raw = {"type": "object", "properties": {"id": {"type": "string"}}}

    document = SchemaDocument(raw)

    assert document["type"] == ["object"]
    assert document.get("properties") == {"id": {"type": ["string"]}}
    assert raw["type"] == "object"


def test_empty_document_defaults_to_empty_mapping() -> None:
    document = SchemaDocument()

    assert document.to_dict() == {}
    assert document.get("missing") is None
    assert document.get("missing", "fallback") == "fallback"


def test_non_mapping_root_is_rejected() -> None:
    with pytest.raises(TypeError, match="mapping"):
        SchemaDocument(["not", "a", "mapping"])  # type: ignore[arg-type]


def test_set_normalizes_value_but_keeps_examples() -> None:
    document = SchemaDocument()

    document.set("definitions", {"a": {"type": "string", "example": {"type": "raw"}}})
    document["type"] = "object"

    assert document["definitions"] == {"a": {"type": ["string"], "example": {"type": "raw"}}}
    assert document["type"] == ["object"]
    assert "type" in document


def test_example_set_at_top_level_is_not_normalized() -> None:
    document = SchemaDocument()

    document["example"] = {"type": "raw"}

    assert document["example"] == {"type": "raw"}


def test_merge_overwrites_top_level_keys_and_retains_the_rest() -> None:
    document = SchemaDocument({"a": 1, "b": 2})

    document.merge({"b": 3, "c": 4})

    assert document.to_dict() == {"a": 1, "b": 3, "c": 4}


def test_merge_accepts_another_document() -> None:
    document = SchemaDocument({"title": "base", "definitions": {"a": {"type": "string"}}})
    other = SchemaDocument({"definitions": {"b": {"type": "integer"}}})

    document.merge(other)

    assert document["title"] == "base"
    assert document["definitions"] == {"b": {"type": ["integer"]}}


def test_merge_does_not_alias_merged_mapping() -> None:
    document = SchemaDocument()
    incoming = {"definitions": {"a": {"type": ["string"]}}}

    document.merge(incoming)
    incoming["definitions"]["a"]["type"].append("null")

    assert document["definitions"] == {"a": {"type": ["string"]}}


def test_href_returns_self_link() -> None:
    document = SchemaDocument(
        {
            "links": [
                {"rel": "instances", "href": "/apps"},
                {"rel": "self", "href": "https://api.example.com"},
                {"rel": "self", "href": "https://ignored.example.com"},
            ]
        }
    )

    assert document.href() == "https://api.example.com"


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"links": []},
        {"links": [{"rel": "instances", "href": "/apps"}]},
        {"links": "not-a-list"},
    ],
)
def test_href_is_none_without_self_link(data: dict[str, object]) -> None:
    assert SchemaDocument(data).href() is None


def test_to_dict_returns_independent_copy() -> None:
    document = SchemaDocument({"definitions": {"a": {"type": "string"}}})

    snapshot = document.to_dict()
    snapshot["definitions"]["a"]["type"] = ["integer"]

    assert document["definitions"]["a"]["type"] == ["string"]


def test_construction_copies_example_payloads() -> None:
    raw = {"definitions": {"a": {"type": "object", "example": {"x": 1, "tags": ["t"]}}}}

    document = SchemaDocument(raw)
    raw["definitions"]["a"]["example"]["x"] = 2
    raw["definitions"]["a"]["example"]["tags"].append("u")

    assert document["definitions"]["a"]["example"] == {"x": 1, "tags": ["t"]}


def test_set_copies_example_payloads() -> None:
    document = SchemaDocument()
    value = {"a": {"example": {"x": 1}}}

    document.set("definitions", value)
    value["a"]["example"]["x"] = 2

    assert document["definitions"] == {"a": {"example": {"x": 1}}}


def test_merge_copies_example_payloads() -> None:
    document = SchemaDocument({"title": "base"})
    incoming = {"definitions": {"a": {"example": {"type": "raw", "x": 1}}}}

    document.merge(incoming)
    incoming["definitions"]["a"]["example"]["x"] = 2

    assert document["definitions"] == {"a": {"example": {"type": "raw", "x": 1}}}
