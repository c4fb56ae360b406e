"""
Validation rule objects for JSON Schema keywords.

Each rule checks the structure of one recognized keyword on one schema object
and reports issues instead of raising. Recursion into nested schemas is the
validator's job; rules only look at their own keyword.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .pipeline.errors import IssueKind, ValidationIssue
from .pipeline.schema_ast.nodes import SUPPORTED_TYPES

# Recognized keywords that the generator does not implement, and the issue
# kind reported for each
UNSUPPORTED_KEYWORDS: dict[str, IssueKind] = {
    "$ref": IssueKind.UNSUPPORTED_KEYWORD_REF,
    "$defs": IssueKind.UNSUPPORTED_KEYWORD_DEFS,
    "definitions": IssueKind.UNSUPPORTED_KEYWORD_DEFINITIONS,
    "minLength": IssueKind.UNSUPPORTED_KEYWORD_MIN_LENGTH,
    "maxLength": IssueKind.UNSUPPORTED_KEYWORD_MAX_LENGTH,
    "pattern": IssueKind.UNSUPPORTED_KEYWORD_PATTERN,
    "oneOf": IssueKind.UNSUPPORTED_KEYWORD_ONE_OF,
    "anyOf": IssueKind.UNSUPPORTED_KEYWORD_ANY_OF,
    "allOf": IssueKind.UNSUPPORTED_KEYWORD_ALL_OF,
    "$id": IssueKind.UNSUPPORTED_KEYWORD_ID,
    "examples": IssueKind.UNSUPPORTED_KEYWORD_EXAMPLES,
    "const": IssueKind.UNSUPPORTED_KEYWORD_CONST,
    "not": IssueKind.UNSUPPORTED_KEYWORD_NOT,
    "minProperties": IssueKind.UNSUPPORTED_KEYWORD_MIN_PROPERTIES,
    "maxProperties": IssueKind.UNSUPPORTED_KEYWORD_MAX_PROPERTIES,
    "minItems": IssueKind.UNSUPPORTED_KEYWORD_MIN_ITEMS,
    "maxItems": IssueKind.UNSUPPORTED_KEYWORD_MAX_ITEMS,
    "uniqueItems": IssueKind.UNSUPPORTED_KEYWORD_UNIQUE_ITEMS,
    "exclusiveMinimum": IssueKind.UNSUPPORTED_KEYWORD_EXCLUSIVE_MINIMUM,
    "exclusiveMaximum": IssueKind.UNSUPPORTED_KEYWORD_EXCLUSIVE_MAXIMUM,
    "multipleOf": IssueKind.UNSUPPORTED_KEYWORD_MULTIPLE_OF,
    "readOnly": IssueKind.UNSUPPORTED_KEYWORD_READ_ONLY,
    "writeOnly": IssueKind.UNSUPPORTED_KEYWORD_WRITE_ONLY,
    "deprecated": IssueKind.UNSUPPORTED_KEYWORD_DEPRECATED,
    "propertyNames": IssueKind.UNSUPPORTED_KEYWORD_PROPERTY_NAMES,
    "additionalItems": IssueKind.UNSUPPORTED_KEYWORD_ADDITIONAL_ITEMS,
}


def is_number(value: Any) -> bool:
    """JSON numbers only; booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class KeywordRule(ABC):
    """Base class for all keyword rules"""

    # The schema keyword this rule checks
    keyword: str = ""

    @abstractmethod
    def check(self, value: Any, parent: dict[str, Any], path: str) -> list[ValidationIssue]:
        """
        Check one occurrence of the keyword.

        Args:
            value: The keyword's value
            parent: The schema object holding the keyword
            path: JSON pointer to the keyword itself

        Returns:
            Issues found (empty when the keyword is well-formed)
        """

    def issue(self, path: str, kind: IssueKind) -> list[ValidationIssue]:
        return [ValidationIssue(path=path, kind=kind)]


class NoCheckRule(KeywordRule):
    """Recognized keyword whose value is not checked (title, format, ...)"""

    def __init__(self, keyword: str):
        self.keyword = keyword

    def check(self, value: Any, parent: dict[str, Any], path: str) -> list[ValidationIssue]:
        return []


class TypeRule(KeywordRule):
    keyword = "type"

    def check(self, value: Any, parent: dict[str, Any], path: str) -> list[ValidationIssue]:
        if isinstance(value, str):
            if value == "null":
                return self.issue(path, IssueKind.NULL_TYPE_NOT_SUPPORTED)
            if value not in SUPPORTED_TYPES:
                return self.issue(path, IssueKind.PROPERTY_WITH_UNSUPPORTED_TYPE)
            return []
        if isinstance(value, list):
            return self.issue(path, IssueKind.TYPE_ARRAY_NOT_SUPPORTED)
        return self.issue(path, IssueKind.INVALID_TYPE_VALUE)


class RequiredRule(KeywordRule):
    """required must list strings naming existing properties (first problem only)"""

    keyword = "required"

    def check(self, value: Any, parent: dict[str, Any], path: str) -> list[ValidationIssue]:
        if not isinstance(value, list):
            return self.issue(path, IssueKind.INVALID_REQUIRED_FORMAT)
        properties = parent.get("properties")
        names = set(properties) if isinstance(properties, dict) else set()
        for item in value:
            if not isinstance(item, str):
                return self.issue(path, IssueKind.INVALID_REQUIRED_FORMAT)
            if item not in names:
                return self.issue(path, IssueKind.REQUIRED_PROPERTY_NOT_IN_PROPERTIES)
        return []


class EnumRule(KeywordRule):
    keyword = "enum"

    def check(self, value: Any, parent: dict[str, Any], path: str) -> list[ValidationIssue]:
        if not isinstance(value, list):
            return self.issue(path, IssueKind.INVALID_ENUM_FORMAT)
        issues: list[ValidationIssue] = []
        if not value:
            issues.extend(self.issue(path, IssueKind.ENUM_EMPTY))
        if any(not isinstance(item, str) for item in value):
            issues.extend(self.issue(path, IssueKind.ENUM_CONTAINS_NON_STRING_VALUES))
        return issues


class ItemsRule(KeywordRule):
    keyword = "items"

    def check(self, value: Any, parent: dict[str, Any], path: str) -> list[ValidationIssue]:
        if parent.get("type") == "array" and not isinstance(value, dict):
            return self.issue(path, IssueKind.INVALID_ITEMS_FORMAT)
        return []


class AdditionalPropertiesRule(KeywordRule):
    """additionalProperties must be a boolean or a schema with a supported type"""

    keyword = "additionalProperties"

    def check(self, value: Any, parent: dict[str, Any], path: str) -> list[ValidationIssue]:
        if isinstance(value, bool):
            return []
        if isinstance(value, dict):
            value_type = value.get("type")
            if not isinstance(value_type, str) or value_type not in SUPPORTED_TYPES:
                return self.issue(path, IssueKind.ADDITIONAL_PROPERTIES_UNSUPPORTED_SCHEMA)
            return []
        return self.issue(path, IssueKind.ADDITIONAL_PROPERTIES_UNSUPPORTED_SCHEMA)


class DefaultRule(KeywordRule):
    keyword = "default"

    def check(self, value: Any, parent: dict[str, Any], path: str) -> list[ValidationIssue]:
        if isinstance(value, dict):
            return self.issue(path, IssueKind.UNSUPPORTED_DEFAULT_OBJECT)
        if isinstance(value, list) and value:
            return self.issue(path, IssueKind.UNSUPPORTED_DEFAULT_NON_EMPTY_ARRAY)
        return []


class BoundRule(KeywordRule):
    """minimum / maximum must be numbers"""

    def __init__(self, keyword: str):
        self.keyword = keyword

    def check(self, value: Any, parent: dict[str, Any], path: str) -> list[ValidationIssue]:
        if not is_number(value):
            return self.issue(path, IssueKind.INVALID_MINIMUM_MAXIMUM)
        return []


def default_rules() -> list[KeywordRule]:
    """One rule per known keyword; the keys of the result are the allow-list."""
    return [
        NoCheckRule("title"),
        NoCheckRule("description"),
        TypeRule(),
        # properties values are walked by the validator itself
        NoCheckRule("properties"),
        RequiredRule(),
        # optional is accepted but has no effect; optionality comes from required
        NoCheckRule("optional"),
        EnumRule(),
        ItemsRule(),
        NoCheckRule("format"),
        AdditionalPropertiesRule(),
        DefaultRule(),
        BoundRule("minimum"),
        BoundRule("maximum"),
    ]
