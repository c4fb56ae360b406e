"""
JSON Schema parser that builds the schema AST.

Phase 1 of the pipeline: turn the generic JSON tree into SchemaNode objects
without any semantic checks (the validator does those on the raw tree).
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .. import json_pointer
from ..errors import SchemaParseError
from .nodes import SchemaNode

logger = logging.getLogger(__name__)


class SchemaParser:
    """Parses a JSON Schema tree into SchemaNode objects."""

    # Keywords whose value must be a JSON string
    STRING_KEYWORDS = ("title", "description", "type", "format")

    def parse_text(self, text: str) -> SchemaNode:
        """
        Decode JSON text and parse it.

        Args:
            text: The schema as JSON text

        Returns:
            The root SchemaNode

        Raises:
            SchemaParseError: If the text is not JSON or the schema is malformed
        """
        return self.parse(self.load(text))

    @staticmethod
    def load(text: str) -> Any:
        """Decode JSON text into the generic tree."""
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise SchemaParseError("", f"invalid JSON: {e}") from e

    def parse(self, value: Any, path: str = "") -> SchemaNode:
        """
        Parse a generic JSON value into a SchemaNode.

        Args:
            value: The decoded JSON value
            path: JSON pointer of ``value`` (for error messages)

        Returns:
            SchemaNode for ``value``

        Raises:
            SchemaParseError: If ``value`` is not an object or a recognized
                keyword has the wrong shape
        """
        if not isinstance(value, dict):
            raise SchemaParseError(path, "schema must be an object")

        node = SchemaNode(source_path=path)

        for key in self.STRING_KEYWORDS:
            if key in value and value[key] is not None:
                setattr(node, key, self._expect_string(value[key], json_pointer.append(path, key)))

        if value.get("properties") is not None:
            node.properties = self._parse_properties(value["properties"], json_pointer.append(path, "properties"))

        if value.get("required") is not None:
            node.required = self._parse_required(value["required"], json_pointer.append(path, "required"))

        if value.get("enum") is not None:
            enum_path = json_pointer.append(path, "enum")
            if not isinstance(value["enum"], list):
                raise SchemaParseError(enum_path, "expected an array")
            node.enum = list(value["enum"])

        if value.get("items") is not None:
            node.items = self.parse(value["items"], json_pointer.append(path, "items"))

        if "additionalProperties" in value:
            node.additional_properties = self._parse_additional_properties(
                value["additionalProperties"], json_pointer.append(path, "additionalProperties")
            )

        if "default" in value:
            node.default_value = value["default"]
            node.has_default = True

        node.minimum = value.get("minimum")
        node.maximum = value.get("maximum")

        return node

    def _expect_string(self, value: Any, path: str) -> str:
        if not isinstance(value, str):
            raise SchemaParseError(path, "expected a string")
        return value

    def _parse_properties(self, value: Any, path: str) -> dict[str, SchemaNode]:
        if not isinstance(value, dict):
            raise SchemaParseError(path, "expected an object")
        return {name: self.parse(prop, json_pointer.append(path, name)) for name, prop in value.items()}

    def _parse_required(self, value: Any, path: str) -> list[str]:
        if not isinstance(value, list):
            raise SchemaParseError(path, "expected an array of strings")
        for index, item in enumerate(value):
            if not isinstance(item, str):
                raise SchemaParseError(json_pointer.append(path, str(index)), "expected a string")
        return list(value)

    def _parse_additional_properties(self, value: Any, path: str) -> bool | SchemaNode | None:
        """additionalProperties is lenient: an unusable schema counts as absent."""
        if isinstance(value, bool):
            return value
        if isinstance(value, dict):
            try:
                return self.parse(value, path)
            except SchemaParseError as e:
                logger.debug("Ignoring additionalProperties schema: %s", e)
                return None
        logger.debug("Ignoring additionalProperties at %s: not a boolean or object", path or "<root>")
        return None
