"""
Tests for strict-mode schema validation.
"""

import unittest

import pytest

from json_schema_to_rust.pipeline.errors import IssueKind, SchemaValidationError, ValidationIssue
from json_schema_to_rust.validation_rules import BoundRule, EnumRule, RequiredRule, TypeRule
from json_schema_to_rust.validator import SchemaValidator, validate_schema


def issue_pairs(schema):
    return [(issue.path, issue.kind) for issue in validate_schema(schema)]


class TestKeywordRules(unittest.TestCase):
    def test_type_rule(self):
        rule = TypeRule()
        self.assertEqual(rule.check("string", {}, "/type"), [])
        self.assertEqual(rule.check("null", {}, "/type")[0].kind, IssueKind.NULL_TYPE_NOT_SUPPORTED)
        self.assertEqual(rule.check(["string"], {}, "/type")[0].kind, IssueKind.TYPE_ARRAY_NOT_SUPPORTED)
        self.assertEqual(rule.check("date", {}, "/type")[0].kind, IssueKind.PROPERTY_WITH_UNSUPPORTED_TYPE)
        self.assertEqual(rule.check(5, {}, "/type")[0].kind, IssueKind.INVALID_TYPE_VALUE)

    def test_required_rule_reports_first_problem(self):
        rule = RequiredRule()
        parent = {"properties": {"a": {}}}
        self.assertEqual(rule.check(["a"], parent, "/required"), [])
        issues = rule.check(["b", 1], parent, "/required")
        self.assertEqual(len(issues), 1)
        self.assertEqual(issues[0].kind, IssueKind.REQUIRED_PROPERTY_NOT_IN_PROPERTIES)
        self.assertEqual(rule.check("a", parent, "/required")[0].kind, IssueKind.INVALID_REQUIRED_FORMAT)

    def test_enum_rule_reports_empty_and_non_string(self):
        rule = EnumRule()
        self.assertEqual(rule.check(["a"], {}, "/enum"), [])
        self.assertEqual([i.kind for i in rule.check([], {}, "/enum")], [IssueKind.ENUM_EMPTY])
        self.assertEqual(
            [i.kind for i in rule.check(["a", 1], {}, "/enum")],
            [IssueKind.ENUM_CONTAINS_NON_STRING_VALUES],
        )
        self.assertEqual([i.kind for i in rule.check({}, {}, "/enum")], [IssueKind.INVALID_ENUM_FORMAT])

    def test_bound_rule(self):
        rule = BoundRule("minimum")
        self.assertEqual(rule.check(1.5, {}, "/minimum"), [])
        self.assertEqual(rule.check(True, {}, "/minimum")[0].kind, IssueKind.INVALID_MINIMUM_MAXIMUM)
        self.assertEqual(rule.check("1", {}, "/minimum")[0].kind, IssueKind.INVALID_MINIMUM_MAXIMUM)


def test_supported_schema_has_no_issues():
    schema = {
        "type": "object",
        "title": "Record",
        "description": "A record",
        "required": ["id"],
        "additionalProperties": False,
        "properties": {
            "id": {"type": "string", "format": "uuid"},
            "status": {"enum": ["on", "off"], "default": "on"},
            "tags": {"type": "array", "items": {"type": "string"}, "default": []},
            "count": {"type": "integer", "minimum": 0, "maximum": 9, "optional": True},
        },
    }
    assert validate_schema(schema) == []


def test_root_not_object():
    assert issue_pairs([]) == [("", IssueKind.ROOT_NOT_OBJECT)]
    assert issue_pairs({"type": "string"}) == [("", IssueKind.ROOT_NOT_OBJECT)]


def test_root_missing_type():
    assert issue_pairs({"properties": {"a": {"type": "string"}}}) == [("", IssueKind.ROOT_MISSING_TYPE)]


def test_no_properties_to_generate():
    assert issue_pairs({"type": "object"}) == [("", IssueKind.NO_STRUCTS_TO_GENERATE)]
    assert issue_pairs({"type": "object", "properties": {}}) == [("", IssueKind.NO_STRUCTS_TO_GENERATE)]


def test_unknown_keyword_is_reported_with_name():
    issues = validate_schema({"type": "object", "properties": {"a": {"type": "string", "foo": 1}}})
    assert issues == [ValidationIssue(path="/properties/a/foo", kind=IssueKind.UNKNOWN_KEYWORD, keyword="foo")]
    assert str(issues[0]) == "/properties/a/foo: unknown keyword: foo"


@pytest.mark.parametrize(
    "keyword, kind",
    [
        ("$ref", IssueKind.UNSUPPORTED_KEYWORD_REF),
        ("oneOf", IssueKind.UNSUPPORTED_KEYWORD_ONE_OF),
        ("pattern", IssueKind.UNSUPPORTED_KEYWORD_PATTERN),
        ("minItems", IssueKind.UNSUPPORTED_KEYWORD_MIN_ITEMS),
    ],
)
def test_unsupported_keywords(keyword, kind):
    schema = {"type": "object", "properties": {"a": {"type": "string", keyword: "x"}}}
    assert issue_pairs(schema) == [(f"/properties/a/{keyword}", kind)]


def test_all_issues_are_collected_in_one_pass():
    schema = {
        "type": "object",
        "required": ["missing"],
        "properties": {
            "a": {"type": "null"},
            "b": {"type": "array"},
            "c": {"enum": []},
            "d": {"type": "object", "default": {}},
            "e": {"type": "integer", "maximum": "big"},
            "f": {"type": "object", "additionalProperties": {"type": "null"}},
            "g": {"type": "array", "items": {"type": "string", "bogus": True}, "default": ["x"]},
        },
    }
    assert issue_pairs(schema) == [
        ("/required", IssueKind.REQUIRED_PROPERTY_NOT_IN_PROPERTIES),
        ("/properties/a/type", IssueKind.NULL_TYPE_NOT_SUPPORTED),
        ("/properties/b", IssueKind.ARRAY_MISSING_ITEMS),
        ("/properties/c/enum", IssueKind.ENUM_EMPTY),
        ("/properties/d/default", IssueKind.UNSUPPORTED_DEFAULT_OBJECT),
        ("/properties/e/maximum", IssueKind.INVALID_MINIMUM_MAXIMUM),
        ("/properties/f/additionalProperties", IssueKind.ADDITIONAL_PROPERTIES_UNSUPPORTED_SCHEMA),
        ("/properties/f/additionalProperties/type", IssueKind.NULL_TYPE_NOT_SUPPORTED),
        ("/properties/g/items/bogus", IssueKind.UNKNOWN_KEYWORD),
        ("/properties/g/default", IssueKind.UNSUPPORTED_DEFAULT_NON_EMPTY_ARRAY),
    ]


def test_pointer_segments_are_escaped():
    schema = {"type": "object", "properties": {"a/b": {"type": "string", "x": 1}}}
    assert issue_pairs(schema) == [("/properties/a~1b/x", IssueKind.UNKNOWN_KEYWORD)]


def test_check_raises_with_every_issue():
    schema = {"type": "object", "properties": {"a": {"type": "string", "x": 1, "$ref": "#"}}}
    with pytest.raises(SchemaValidationError) as exc_info:
        SchemaValidator().check(schema)

    error = exc_info.value
    assert len(error.issues) == 2
    assert str(error) == (
        "Schema validation failed with 2 issue(s):\n"
        "  /properties/a/x: unknown keyword: x\n"
        "  /properties/a/$ref: keyword $ref not supported"
    )


def test_check_passes_on_valid_schema():
    SchemaValidator().check({"type": "object", "properties": {"a": {"type": "string"}}})
