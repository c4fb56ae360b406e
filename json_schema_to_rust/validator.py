"""
Schema validator for strict (deny_invalid_unknown_json_schema) mode.

Walks the raw JSON tree, not the parsed AST, and collects every invalid or
unsupported construct in one pass. Nothing is raised until the walk is done.
"""

from __future__ import annotations

import logging
from typing import Any

from .pipeline import json_pointer
from .pipeline.errors import IssueKind, SchemaValidationError, ValidationIssue
from .validation_rules import UNSUPPORTED_KEYWORDS, KeywordRule, default_rules

logger = logging.getLogger(__name__)


class SchemaValidator:
    """Check a JSON Schema tree against the supported feature set using rule objects"""

    def __init__(self, rules: list[KeywordRule] | None = None):
        """
        Initialize the validator.

        Args:
            rules: Keyword rules to apply; defaults to default_rules(). A key
                with no rule is reported as unsupported or unknown.
        """
        self.rules: dict[str, KeywordRule] = {rule.keyword: rule for rule in (rules or default_rules())}

    def validate(self, schema: Any) -> list[ValidationIssue]:
        """
        Collect all issues in a schema.

        Args:
            schema: The decoded JSON schema

        Returns:
            Issues in traversal order (empty if the schema is supported)
        """
        if not isinstance(schema, dict):
            return [ValidationIssue(path="", kind=IssueKind.ROOT_NOT_OBJECT)]

        issues: list[ValidationIssue] = []
        root_type = schema.get("type")
        if "type" not in schema:
            issues.append(ValidationIssue(path="", kind=IssueKind.ROOT_MISSING_TYPE))
        elif isinstance(root_type, str) and root_type != "object":
            issues.append(ValidationIssue(path="", kind=IssueKind.ROOT_NOT_OBJECT))
        elif isinstance(root_type, list):
            issues.append(ValidationIssue(path="", kind=IssueKind.TYPE_ARRAY_NOT_SUPPORTED))

        self._walk(schema, "", issues)

        if root_type == "object":
            properties = schema.get("properties")
            if not isinstance(properties, dict) or not properties:
                issues.append(ValidationIssue(path="", kind=IssueKind.NO_STRUCTS_TO_GENERATE))

        logger.debug("Schema validation found %d issue(s)", len(issues))
        return issues

    def check(self, schema: Any) -> None:
        """
        Validate and raise if anything was found.

        Raises:
            SchemaValidationError: With every issue found
        """
        issues = self.validate(schema)
        if issues:
            raise SchemaValidationError(issues)

    def _walk(self, node: Any, path: str, issues: list[ValidationIssue]) -> None:
        """Check every key of one schema object and recurse into nested schemas."""
        if not isinstance(node, dict):
            return

        if node.get("type") == "array" and "items" not in node:
            issues.append(ValidationIssue(path=path, kind=IssueKind.ARRAY_MISSING_ITEMS))

        for key, value in node.items():
            key_path = json_pointer.append(path, key)
            rule = self.rules.get(key)

            if rule is None:
                if key in UNSUPPORTED_KEYWORDS:
                    issues.append(ValidationIssue(path=key_path, kind=UNSUPPORTED_KEYWORDS[key]))
                else:
                    issues.append(ValidationIssue(path=key_path, kind=IssueKind.UNKNOWN_KEYWORD, keyword=key))
                continue

            issues.extend(rule.check(value, node, key_path))

            # Nested schemas
            if key == "properties" and isinstance(value, dict):
                for name, prop_schema in value.items():
                    self._walk(prop_schema, json_pointer.append(key_path, name), issues)
            elif key in ("items", "additionalProperties") and isinstance(value, dict):
                self._walk(value, key_path, issues)


def validate_schema(schema: Any) -> list[ValidationIssue]:
    """Return every validation issue in ``schema`` (empty list when valid)."""
    return SchemaValidator().validate(schema)
