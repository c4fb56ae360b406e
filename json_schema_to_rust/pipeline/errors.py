"""
Errors raised by the generation pipeline.

Two regimes exist:
- Validation issues are collected in batch (strict mode only) and raised
  together as one SchemaValidationError.
- Parse and generation failures are raised immediately.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class JsonSchemaGenError(Exception):
    """Base class for every error raised while generating Rust code."""

    pass


class SchemaParseError(JsonSchemaGenError):
    """Raised when the schema text is not JSON or a keyword has the wrong shape.

    Attributes:
        path: JSON pointer to the offending node ("" for the root)
        message: Description of the problem
    """

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        location = path or "<root>"
        super().__init__(f"Invalid schema at {location}: {message}")


class GenerationError(JsonSchemaGenError):
    """Raised when generation cannot proceed (bad root, nothing to generate)."""

    pass


class IssueKind(str, Enum):
    """Every validation failure mode, with its human-readable message."""

    # Root / structural
    ROOT_NOT_OBJECT = 'root schema must have type "object"'
    ROOT_MISSING_TYPE = "root has no type key"
    NO_STRUCTS_TO_GENERATE = "root object has no supported properties"

    # Invalid schema structure
    INVALID_TYPE_VALUE = "type is not a string or array of strings"
    TYPE_ARRAY_NOT_SUPPORTED = "type array (multiple types) not supported"
    NULL_TYPE_NOT_SUPPORTED = 'type "null" not supported'
    INVALID_REQUIRED_FORMAT = "required is not an array of strings"
    REQUIRED_PROPERTY_NOT_IN_PROPERTIES = "required references property not in properties"
    INVALID_ENUM_FORMAT = "enum is not an array"
    ENUM_EMPTY = "enum is empty array"
    ENUM_CONTAINS_NON_STRING_VALUES = "enum has non-string values; only string enums supported"
    INVALID_ITEMS_FORMAT = "items is not an object when type is array"
    ARRAY_MISSING_ITEMS = "type is array but items is missing"
    UNSUPPORTED_DEFAULT_OBJECT = "default is object (not supported)"
    UNSUPPORTED_DEFAULT_NON_EMPTY_ARRAY = "default is non-empty array (not supported)"
    INVALID_MINIMUM_MAXIMUM = "minimum/maximum must be number when present"
    PROPERTY_WITH_UNSUPPORTED_TYPE = "property has unsupported type"
    ADDITIONAL_PROPERTIES_UNSUPPORTED_SCHEMA = "additionalProperties schema not supported"

    # Recognized but unsupported keywords
    UNSUPPORTED_KEYWORD_REF = "keyword $ref not supported"
    UNSUPPORTED_KEYWORD_DEFS = "keyword $defs not supported"
    UNSUPPORTED_KEYWORD_DEFINITIONS = "keyword definitions not supported"
    UNSUPPORTED_KEYWORD_MIN_LENGTH = "keyword minLength not supported"
    UNSUPPORTED_KEYWORD_MAX_LENGTH = "keyword maxLength not supported"
    UNSUPPORTED_KEYWORD_PATTERN = "keyword pattern not supported"
    UNSUPPORTED_KEYWORD_ONE_OF = "keyword oneOf not supported"
    UNSUPPORTED_KEYWORD_ANY_OF = "keyword anyOf not supported"
    UNSUPPORTED_KEYWORD_ALL_OF = "keyword allOf not supported"
    UNSUPPORTED_KEYWORD_ID = "keyword $id not supported"
    UNSUPPORTED_KEYWORD_EXAMPLES = "keyword examples not supported"
    UNSUPPORTED_KEYWORD_CONST = "keyword const not supported"
    UNSUPPORTED_KEYWORD_NOT = "keyword not not supported"
    UNSUPPORTED_KEYWORD_MIN_PROPERTIES = "keyword minProperties not supported"
    UNSUPPORTED_KEYWORD_MAX_PROPERTIES = "keyword maxProperties not supported"
    UNSUPPORTED_KEYWORD_MIN_ITEMS = "keyword minItems not supported"
    UNSUPPORTED_KEYWORD_MAX_ITEMS = "keyword maxItems not supported"
    UNSUPPORTED_KEYWORD_UNIQUE_ITEMS = "keyword uniqueItems not supported"
    UNSUPPORTED_KEYWORD_EXCLUSIVE_MINIMUM = "keyword exclusiveMinimum not supported"
    UNSUPPORTED_KEYWORD_EXCLUSIVE_MAXIMUM = "keyword exclusiveMaximum not supported"
    UNSUPPORTED_KEYWORD_MULTIPLE_OF = "keyword multipleOf not supported"
    UNSUPPORTED_KEYWORD_READ_ONLY = "keyword readOnly not supported"
    UNSUPPORTED_KEYWORD_WRITE_ONLY = "keyword writeOnly not supported"
    UNSUPPORTED_KEYWORD_DEPRECATED = "keyword deprecated not supported"
    UNSUPPORTED_KEYWORD_PROPERTY_NAMES = "keyword propertyNames not supported"
    UNSUPPORTED_KEYWORD_ADDITIONAL_ITEMS = "keyword additionalItems not supported"

    # Anything else
    UNKNOWN_KEYWORD = "unknown keyword"


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue.

    Attributes:
        path: JSON pointer (RFC 6901) into the schema where the issue occurs
        kind: The kind of validation failure
        keyword: The offending key, set for UNKNOWN_KEYWORD only
    """

    path: str
    kind: IssueKind
    keyword: str | None = None

    @property
    def message(self) -> str:
        if self.kind is IssueKind.UNKNOWN_KEYWORD:
            return f"{self.kind.value}: {self.keyword}"
        return self.kind.value

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class SchemaValidationError(JsonSchemaGenError):
    """Raised in strict mode with every issue found in the schema.

    Attributes:
        issues: All issues found, in traversal order; never empty
    """

    def __init__(self, issues: list[ValidationIssue] | tuple[ValidationIssue, ...]):
        self.issues: tuple[ValidationIssue, ...] = tuple(issues)
        lines = [f"Schema validation failed with {len(self.issues)} issue(s):"]
        lines.extend(f"  {issue}" for issue in self.issues)
        super().__init__("\n".join(lines))
