"""
AST node definitions for JSON Schema.

A SchemaNode is a typed, partial view of one schema object: only the keywords
the generator understands are modeled. Every other key stays in the raw JSON
tree and is ignored here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Type tags the generator knows how to map
SUPPORTED_TYPES = ("string", "boolean", "integer", "number", "object", "array")


@dataclass
class SchemaNode:
    """One object in a JSON Schema tree."""

    # Original source location in schema (for error messages)
    source_path: str = ""

    title: str | None = None
    description: str | None = None

    # Kept verbatim: any string other than SUPPORTED_TYPES is simply unsupported
    type: str | None = None
    format: str | None = None

    # Insertion-ordered; consumers sort keys themselves where order matters
    properties: dict[str, SchemaNode] | None = None
    required: list[str] | None = None

    enum: list[Any] | None = None
    items: SchemaNode | None = None

    # True / False, or a nested schema describing extra values
    additional_properties: bool | SchemaNode | None = None

    # has_default distinguishes a missing "default" from "default": null
    default_value: Any = None
    has_default: bool = False

    # Raw JSON values; the type resolver decides whether they are usable
    minimum: Any = None
    maximum: Any = None

    def is_required(self, name: str) -> bool:
        """Whether ``name`` is listed in this node's ``required`` array."""
        return self.required is not None and name in self.required

    def string_enum_values(self) -> list[str] | None:
        """Return the enum literals if this is a non-empty all-string enum."""
        if not self.enum:
            return None
        if not all(isinstance(value, str) for value in self.enum):
            return None
        return list(self.enum)

    def has_properties(self) -> bool:
        return bool(self.properties)
