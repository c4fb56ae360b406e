"""
IR (Intermediate Representation) node definitions.

These nodes describe the Rust types to generate: structs, enums and their
fields, with every type name, width and default already resolved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Rust type used when a value has no usable structure
JSON_VALUE_TYPE = "serde_json::Value"

# Rust type used for UUID-like identifier strings
UUID_TYPE = "Uuid"

# Name of the catch-all field holding undeclared keys
ADDITIONAL_PROPERTIES_FIELD = "additional_properties"


class FieldKind(Enum):
    """Kind of field in the IR."""

    STRING = "string"
    UUID = "uuid"
    BOOLEAN = "boolean"
    INTEGER = "integer"  # type_name is the chosen width, e.g. "u8"
    NUMBER = "number"  # type_name is "f32" or "f64"
    OBJECT = "object"  # type_name is a struct name or JSON_VALUE_TYPE
    ENUM = "enum"
    ARRAY = "array"  # type_name is the element type
    ADDITIONAL_PROPERTIES = "additional_properties"  # type_name is the map value type


@dataclass(frozen=True)
class UseTypeDefault:
    """Fill a missing key with the field type's zero / empty value."""

    pass


@dataclass(frozen=True)
class CustomDefault:
    """Fill a missing key from a helper function returning ``expr``."""

    # Rust expression, e.g. "42u8" or "Status::Active"
    expr: str


DefaultSpec = UseTypeDefault | CustomDefault


@dataclass
class FieldDef:
    """A field in a struct."""

    kind: FieldKind = FieldKind.STRING
    name: str = ""  # Rust identifier
    json_key: str = ""  # Original JSON property name
    type_name: str = ""
    optional: bool = False
    default: DefaultSpec | None = None
    description: str | None = None

    @property
    def references(self) -> str | None:
        """Name of the type this field may refer to, for ordering."""
        if self.kind in (FieldKind.OBJECT, FieldKind.ARRAY, FieldKind.ADDITIONAL_PROPERTIES):
            return self.type_name
        return None

    def uses_uuid(self) -> bool:
        return self.type_name == UUID_TYPE


@dataclass
class StructDef:
    """A struct definition."""

    name: str = ""
    fields: list[FieldDef] = field(default_factory=list)
    deny_unknown_fields: bool = False
    description: str | None = None


@dataclass(frozen=True)
class EnumVariant:
    """One enum variant and the JSON string it maps to."""

    name: str
    json_value: str


@dataclass
class EnumDef:
    """An enum definition."""

    name: str = ""
    variants: list[EnumVariant] = field(default_factory=list)
    description: str | None = None


Definition = StructDef | EnumDef
