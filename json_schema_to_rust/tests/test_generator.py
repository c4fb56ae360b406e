"""
End-to-end tests for PipelineGenerator.
"""

import json

import pytest

from json_schema_to_rust import GenerateSettings, PipelineGenerator, generate
from json_schema_to_rust.pipeline.errors import GenerationError, SchemaParseError, SchemaValidationError

MIXED = {
    "type": "object",
    "title": "Mixed",
    "required": ["req"],
    "properties": {"opt": {"type": "string"}, "req": {"type": "string"}},
}


def test_mixed_scenario():
    assert generate(json.dumps(MIXED)) == (
        "//! Generated by json_schema_to_rust. Do not edit manually.\n"
        "\n"
        "use serde::{Deserialize, Serialize};\n"
        "\n"
        "#[derive(Debug, Clone, Serialize, Deserialize)]\n"
        "pub struct Mixed {\n"
        "    pub opt: Option<String>,\n"
        "    pub req: String,\n"
        "}\n"
    )


def test_decoded_schema_is_accepted():
    assert generate(MIXED) == generate(json.dumps(MIXED))


def test_additional_properties_false_scenario():
    schema = {
        "type": "object",
        "title": "Strict",
        "additionalProperties": False,
        "properties": {"a": {"type": "string"}},
    }
    assert (
        "#[derive(Debug, Clone, Serialize, Deserialize)]\n"
        "#[serde(deny_unknown_fields)]\n"
        "pub struct Strict {\n"
        "    pub a: Option<String>,\n"
        "}\n"
    ) in generate(schema)


def test_output_is_deterministic():
    schema = {
        "type": "object",
        "properties": {
            "b": {"type": "object", "properties": {"y": {"enum": ["z", "a"]}, "x": {"type": "integer"}}},
            "a": {"type": "array", "items": {"type": "object", "properties": {"k": {"type": "number"}}}},
        },
    }
    reordered = {
        "properties": {
            "a": {"items": {"properties": {"k": {"type": "number"}}, "type": "object"}, "type": "array"},
            "b": {"properties": {"x": {"type": "integer"}, "y": {"enum": ["a", "z"]}}, "type": "object"},
        },
        "type": "object",
    }
    first = generate(schema)
    assert generate(schema) == first
    assert generate(reordered) == first


def test_nested_structs_precede_parents():
    schema = {
        "type": "object",
        "title": "Top",
        "properties": {
            "mid": {
                "type": "object",
                "properties": {"leaf": {"type": "object", "properties": {"v": {"type": "string"}}}},
            }
        },
    }
    output = generate(schema)
    assert output.index("pub struct Leaf") < output.index("pub struct Mid") < output.index("pub struct Top")


def test_optional_keyword_does_not_change_output():
    baseline = {
        "type": "object",
        "title": "IgnoreOptional",
        "required": ["a"],
        "properties": {"a": {"type": "string"}, "b": {"type": "string"}},
    }
    with_optional = json.loads(json.dumps(baseline))
    with_optional["properties"]["a"]["optional"] = True
    with_optional["properties"]["b"]["optional"] = False
    assert generate(with_optional) == generate(baseline)


def test_root_must_be_object():
    with pytest.raises(GenerationError, match='Root schema must have type "object"'):
        generate({"type": "array", "items": {"type": "string"}})


def test_nothing_to_generate():
    with pytest.raises(GenerationError, match="No structs to generate"):
        generate({"type": "object", "properties": {}})


def test_invalid_json_text():
    with pytest.raises(SchemaParseError, match="invalid JSON"):
        generate("{")


def test_strict_mode_collects_issues_before_parsing():
    schema = {"type": "object", "required": 5, "properties": {"a": {"type": ["string", "null"]}}}
    with pytest.raises(SchemaValidationError) as exc_info:
        PipelineGenerator(schema, GenerateSettings(deny_invalid_unknown_json_schema=True)).generate()
    assert [issue.path for issue in exc_info.value.issues] == ["/required", "/properties/a/type"]


def test_strict_mode_accepts_supported_schema():
    settings = GenerateSettings(deny_invalid_unknown_json_schema=True)
    assert generate(MIXED, settings) == generate(MIXED)


def test_lenient_mode_skips_unknown_keywords():
    schema = dict(MIXED, **{"$schema": "http://json-schema.org/draft-07/schema#", "examples": []})
    assert generate(schema) == generate(MIXED)


def test_struct_named_like_a_used_type_is_suffixed():
    out = generate(
        {
            "type": "object",
            "title": "Root",
            "properties": {"string": {"type": "object", "properties": {"a": {"type": "string"}}}},
        }
    )
    assert "pub struct String2 {\n    pub a: Option<String>,\n}" in out
    assert "pub string: Option<String2>," in out
    assert "pub struct String " not in out


def test_root_titled_like_an_import_is_suffixed():
    out = generate({"type": "object", "title": "Serialize", "properties": {"a": {"type": "string"}}})
    assert "pub struct Serialize2 {" in out
    assert "pub struct Serialize " not in out


def test_self_enum_literal():
    out = generate({"type": "object", "properties": {"kind": {"enum": ["self", "other"]}}})
    assert '    #[serde(rename = "self")]\n    Self_,' in out
    assert "    Self," not in out


def test_control_characters_are_escaped_in_string_literals():
    out = generate(
        {
            "type": "object",
            "properties": {"a\rb": {"type": "string", "default": "x\ny"}},
        }
    )
    assert '    #[serde(rename = "a\\rb")]\n    #[serde(default = "default_Root_a_b")]\n    pub a_b: Option<String>,' in out
    assert '"x\\ny".to_string()' in out
    assert "\r" not in out
