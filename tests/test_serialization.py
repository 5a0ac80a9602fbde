"""
Tests for serialization and deserialization of arffdoc objects.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `arffdoc.serialization`.
"""

import pytest

from arffdoc.examples import build_example_weather_document
from arffdoc.model import (
    DateAttribute,
    Document,
    IntegerAttribute,
    NominalAttribute,
    RealAttribute,
    RelationalAttribute,
    StringAttribute,
)
from arffdoc.serialization import (
    attribute_from_dict,
    attribute_to_dict,
    document_from_dict,
    document_from_json,
    document_from_yaml,
    document_to_dict,
    document_to_json,
    document_to_yaml,
)


def build_sample_document() -> Document:
    doc = Document(relation="Serialization Test")
    doc.attributes = [
        IntegerAttribute("id"),
        RealAttribute("score"),
        StringAttribute("comment"),
        DateAttribute("seen", date_format="yyyy-MM-dd"),
        NominalAttribute("flag", values=("yes", "no", "true")),
        RelationalAttribute("bag"),
    ]
    doc.rows = [
        ["1", "0.5", "'first one'", "2020-01-01", "yes", "x"],
        ["2", "007", "null", "2020-01-02", "true", "y"],
    ]
    return doc


def test_attribute_dict_shape():
    attr = NominalAttribute("flag", values=("yes", "no"))
    assert attribute_to_dict(attr) == {"type": "nominal", "name": "flag", "values": ["yes", "no"]}
    assert attribute_from_dict(attribute_to_dict(attr)) == attr


def test_unknown_attribute_dict_type():
    with pytest.raises(TypeError):
        attribute_from_dict({"type": "bitmap", "name": "x"})


def test_dict_roundtrip():
    doc = build_sample_document()
    assert document_from_dict(document_to_dict(doc)) == doc


def test_json_roundtrip():
    doc = build_sample_document()
    before = document_to_dict(doc)
    json_str = document_to_json(doc)
    restored = document_from_json(json_str)
    after = document_to_dict(restored)
    assert before == after


def test_yaml_roundtrip():
    """Values that look like numbers or booleans stay strings."""
    doc = build_sample_document()
    yaml_str = document_to_yaml(doc)
    restored = document_from_yaml(yaml_str)
    assert restored == doc
    assert restored.rows[1][1] == "007"
    assert restored.rows[1][4] == "true"


def test_weather_roundtrip():
    doc = build_example_weather_document()
    assert document_from_yaml(document_to_yaml(doc)) == doc
