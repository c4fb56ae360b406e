"""
Tests for parsing JSON Schema into SchemaNode objects.
"""

import pytest

from json_schema_to_rust.pipeline.errors import SchemaParseError
from json_schema_to_rust.pipeline.schema_ast import SchemaNode, SchemaParser


def parse(value):
    return SchemaParser().parse(value)


def test_parse_object_schema():
    node = SchemaParser().parse_text(
        """{
            "type": "object",
            "title": "Record",
            "description": "A record",
            "required": ["id"],
            "properties": {
                "id": {"type": "string", "format": "uuid"},
                "count": {"type": "integer", "minimum": 0, "maximum": 10}
            }
        }"""
    )

    assert node.type == "object"
    assert node.title == "Record"
    assert node.description == "A record"
    assert list(node.properties) == ["id", "count"]
    assert node.is_required("id")
    assert not node.is_required("count")
    assert node.properties["id"].format == "uuid"
    assert node.properties["count"].minimum == 0
    assert node.properties["count"].maximum == 10
    assert node.properties["id"].source_path == "/properties/id"


def test_missing_keywords_are_none():
    node = parse({})
    assert node.type is None
    assert node.properties is None
    assert node.required is None
    assert node.items is None
    assert node.additional_properties is None
    assert not node.has_default
    assert not node.has_properties()


def test_default_null_is_kept():
    node = parse({"type": "string", "default": None})
    assert node.has_default
    assert node.default_value is None


def test_items_are_parsed():
    node = parse({"type": "array", "items": {"type": "string"}})
    assert isinstance(node.items, SchemaNode)
    assert node.items.type == "string"
    assert node.items.source_path == "/items"


def test_string_enum_values():
    assert parse({"enum": ["a", "b"]}).string_enum_values() == ["a", "b"]
    assert parse({"enum": []}).string_enum_values() is None
    assert parse({"enum": ["a", 1]}).string_enum_values() is None


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, True),
        (False, False),
        ("nope", None),
        ({"type": 1}, None),
    ],
)
def test_additional_properties_is_lenient(value, expected):
    node = parse({"type": "object", "additionalProperties": value})
    assert node.additional_properties is expected


def test_additional_properties_schema():
    node = parse({"type": "object", "additionalProperties": {"type": "integer"}})
    assert isinstance(node.additional_properties, SchemaNode)
    assert node.additional_properties.type == "integer"


def test_invalid_json():
    with pytest.raises(SchemaParseError) as exc_info:
        SchemaParser().parse_text("{not json")
    assert exc_info.value.path == ""
    assert str(exc_info.value).startswith("Invalid schema at <root>: invalid JSON")


@pytest.mark.parametrize(
    "schema, path",
    [
        ([], ""),
        ({"title": 3}, "/title"),
        ({"type": ["string", "null"]}, "/type"),
        ({"properties": []}, "/properties"),
        ({"properties": {"a": "string"}}, "/properties/a"),
        ({"properties": {"a": {"description": False}}}, "/properties/a/description"),
        ({"required": "a"}, "/required"),
        ({"required": ["a", 1]}, "/required/1"),
        ({"enum": "a"}, "/enum"),
        ({"type": "array", "items": True}, "/items"),
    ],
)
def test_malformed_keywords_report_path(schema, path):
    with pytest.raises(SchemaParseError) as exc_info:
        parse(schema)
    assert exc_info.value.path == path
