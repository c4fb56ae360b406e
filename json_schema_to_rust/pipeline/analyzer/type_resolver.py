"""
Type resolution for scalar schema nodes.

Pure functions: pick integer and float widths from minimum/maximum, detect
UUID string formats, and turn a JSON "default" into a DefaultSpec.
"""

from __future__ import annotations

import math
import uuid
from enum import Enum
from typing import Any

from ...utils import escape_rust_string
from ..schema_ast.nodes import SchemaNode
from .ir_nodes import CustomDefault, DefaultSpec, EnumVariant, UseTypeDefault

# Unsigned widths first so that non-negative ranges prefer them
UNSIGNED_RANGES = (
    ("u8", 0, 2**8 - 1),
    ("u16", 0, 2**16 - 1),
    ("u32", 0, 2**32 - 1),
    ("u64", 0, 2**64 - 1),
)

SIGNED_RANGES = (
    ("i8", -(2**7), 2**7 - 1),
    ("i16", -(2**15), 2**15 - 1),
    ("i32", -(2**31), 2**31 - 1),
    ("i64", -(2**63), 2**63 - 1),
)

INTEGER_RANGES = {name: (low, high) for name, low, high in UNSIGNED_RANGES + SIGNED_RANGES}

DEFAULT_INTEGER_TYPE = "i64"

F32_MAX = 3.4028235e38

UUID_FORMATS = {"uuid"} | {f"uuid{version}" for version in range(1, 9)}


class DefaultKind(Enum):
    """Field kinds that resolve defaults differently."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    UUID = "uuid"
    ARRAY = "array"
    ENUM = "enum"
    OBJECT = "object"


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_uuid_literal(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def choose_integer_type(node: SchemaNode) -> str:
    """
    Choose the narrowest Rust integer type holding [minimum, maximum].

    Falls back to i64 when a bound is missing or not integral, when
    minimum > maximum, or when the range does not fit 64 bits.

    Args:
        node: An integer schema node

    Returns:
        One of "u8", "u16", "u32", "u64", "i8", "i16", "i32", "i64"
    """
    low, high = node.minimum, node.maximum
    if not (_is_integer(low) and _is_integer(high)) or low > high:
        return DEFAULT_INTEGER_TYPE

    candidates = UNSIGNED_RANGES if low >= 0 else SIGNED_RANGES
    for name, type_low, type_high in candidates:
        if type_low <= low and high <= type_high:
            return name
    return DEFAULT_INTEGER_TYPE


def choose_number_type(node: SchemaNode) -> str:
    """Return "f32" when both bounds are present and within f32 range, else "f64"."""
    low, high = node.minimum, node.maximum
    if _is_number(low) and _is_number(high) and -F32_MAX <= low and high <= F32_MAX:
        return "f32"
    return "f64"


def is_uuid_format(fmt: str | None) -> bool:
    """Whether a string format names a UUID (uuid, uuid1..uuid8, any case)."""
    return fmt is not None and fmt.lower() in UUID_FORMATS


def format_float(value: float | int) -> str:
    """Render a JSON number as a Rust float literal body (without suffix)."""
    return repr(float(value))


def resolve_default(
    node: SchemaNode,
    kind: DefaultKind,
    optional: bool,
    type_name: str = "",
    variants: list[EnumVariant] | None = None,
) -> DefaultSpec | None:
    """
    Resolve how a field is filled when its key is missing from the input.

    Args:
        node: The property's schema node
        kind: How the field's type treats default literals
        optional: Whether the field is optional (not in the parent's required)
        type_name: Rust type name (integer/float width, or enum name)
        variants: Enum variants, for DefaultKind.ENUM

    Returns:
        UseTypeDefault for zero/empty literals and null on optional fields,
        CustomDefault for other representable literals, or None when there is
        no default or it cannot be represented
    """
    if not node.has_default:
        return None

    value = node.default_value
    if value is None:
        return UseTypeDefault() if optional else None

    if kind is DefaultKind.BOOLEAN:
        if not isinstance(value, bool):
            return None
        return CustomDefault("true") if value else UseTypeDefault()

    if kind is DefaultKind.INTEGER:
        if not _is_integer(value):
            return None
        if value == 0:
            return UseTypeDefault()
        low, high = INTEGER_RANGES.get(type_name, INTEGER_RANGES[DEFAULT_INTEGER_TYPE])
        if not low <= value <= high:
            return None
        return CustomDefault(f"{value}{type_name}")

    if kind is DefaultKind.NUMBER:
        if not _is_number(value):
            return None
        try:
            value = float(value)
        except OverflowError:
            return None
        if not math.isfinite(value):
            return None
        if value == 0:
            return UseTypeDefault()
        if type_name == "f32" and abs(value) > F32_MAX:
            return None
        return CustomDefault(f"{format_float(value)}{type_name}")

    if kind is DefaultKind.STRING:
        if not isinstance(value, str):
            return None
        if value == "":
            return UseTypeDefault()
        return CustomDefault(f'"{escape_rust_string(value)}".to_string()')

    if kind is DefaultKind.UUID:
        if not isinstance(value, str) or not _is_uuid_literal(value):
            return None
        return CustomDefault(f'Uuid::parse_str("{escape_rust_string(value)}").expect("invalid default uuid")')

    if kind is DefaultKind.ARRAY:
        if isinstance(value, list) and not value:
            return UseTypeDefault()
        # Non-empty array defaults are not supported
        return None

    if kind is DefaultKind.ENUM:
        if not isinstance(value, str) or not variants:
            return None
        for variant in variants:
            if variant.json_value == value:
                return CustomDefault(f"{type_name}::{variant.name}")
        return None

    # Object defaults are not supported
    return None
