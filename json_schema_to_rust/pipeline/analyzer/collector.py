"""
Definition collector that turns the schema AST into Rust type definitions.

Phase 2 of the pipeline: walk the SchemaNode tree depth-first, build one
struct per object schema and one enum per string enum, and register them under
unique names. Nested definitions are registered before their parents.
"""

from __future__ import annotations

import logging

from ...utils import RESERVED_TYPE_NAMES, normalize_description, to_type_name, to_variant_name
from ..schema_ast.nodes import SchemaNode
from .ir_nodes import (
    ADDITIONAL_PROPERTIES_FIELD,
    JSON_VALUE_TYPE,
    UUID_TYPE,
    EnumDef,
    EnumVariant,
    FieldDef,
    FieldKind,
    StructDef,
)
from .name_resolver import FieldNamer, NameResolver
from .type_resolver import DefaultKind, choose_integer_type, choose_number_type, is_uuid_format, resolve_default

logger = logging.getLogger(__name__)

DEFAULT_ROOT_NAME = "Root"


def _usable_title(title: str | None) -> str | None:
    """A title that yields at least one word, trimmed; otherwise None."""
    if title is None:
        return None
    trimmed = title.strip()
    if any(ch.isascii() and ch.isalnum() for ch in trimmed):
        return trimmed
    return None


def root_struct_name(node: SchemaNode) -> str:
    """Name of the root struct: its title, or "Root"."""
    title = _usable_title(node.title)
    name = to_type_name(title) if title else DEFAULT_ROOT_NAME
    if name in RESERVED_TYPE_NAMES:
        return f"{name}2"
    return name


def struct_name_from_property(key: str, title: str | None) -> str:
    """Name of a nested struct or enum: the schema's title, else the property key."""
    return to_type_name(_usable_title(title) or key)


def build_enum_variants(values: list[str]) -> list[EnumVariant]:
    """
    Build enum variants from JSON enum literals.

    Literals are deduplicated and sorted. Literals whose variant names
    collide (e.g. "PENDING", "Pending", "pending") are suffixed ``_0``, ``_1``...
    in sorted literal order.

    Args:
        values: String enum literals

    Returns:
        Variants, each mapping a Rust name back to its literal
    """
    unique = sorted(set(values))
    base_names = [to_variant_name(value) for value in unique]

    counts: dict[str, int] = {}
    for base in base_names:
        counts[base] = counts.get(base, 0) + 1

    variants = []
    next_index: dict[str, int] = {}
    for value, base in zip(unique, base_names):
        if counts[base] > 1:
            index = next_index.get(base, 0)
            next_index[base] = index + 1
            name = f"{base}_{index}"
        else:
            name = base
        variants.append(EnumVariant(name=name, json_value=value))
    return variants


class DefinitionCollector:
    """Collects struct and enum definitions for one generation run."""

    def __init__(self):
        self.names = NameResolver()

    @property
    def structs(self) -> dict[str, StructDef]:
        """Collected structs, keyed and sorted by name."""
        return self.names.structs

    @property
    def enums(self) -> dict[str, EnumDef]:
        """Collected enums, keyed and sorted by name."""
        return self.names.enums

    def collect(self, node: SchemaNode, struct_name: str) -> None:
        """
        Collect the struct for an object schema and everything nested in it.

        Args:
            node: An object schema node
            struct_name: Name for the struct generated from ``node``
        """
        self.names.reserve(struct_name)
        self._collect_struct(node, struct_name, claim=True)

    def _collect_struct(self, node: SchemaNode, struct_name: str, claim: bool = False) -> str | None:
        """Build and register one struct; return its final name, or None if empty."""
        fields: list[FieldDef] = []
        namer = FieldNamer()
        deny_unknown_fields = node.additional_properties is False

        if isinstance(node.additional_properties, SchemaNode):
            value_type = self._resolve_additional_properties_type(node.additional_properties, struct_name)
            fields.append(
                FieldDef(
                    kind=FieldKind.ADDITIONAL_PROPERTIES,
                    name=namer.claim(ADDITIONAL_PROPERTIES_FIELD),
                    json_key=ADDITIONAL_PROPERTIES_FIELD,
                    type_name=value_type,
                )
            )

        properties = node.properties or {}
        for key in sorted(properties):
            field = self._collect_field(key, properties[key], node.is_required(key), namer)
            if field is not None:
                fields.append(field)

        if not fields and not deny_unknown_fields:
            logger.debug("Dropping struct %s: no supported fields", struct_name)
            return None

        struct = StructDef(
            name=struct_name,
            fields=fields,
            deny_unknown_fields=deny_unknown_fields,
            description=normalize_description(node.description),
        )
        return self.names.register(struct, claim=claim)

    def _collect_enum(self, name: str, values: list[str], description: str | None) -> EnumDef:
        enum = EnumDef(
            name=name,
            variants=build_enum_variants(values),
            description=normalize_description(description),
        )
        self.names.register(enum)
        return enum

    def _collect_field(self, key: str, prop: SchemaNode, required: bool, namer: FieldNamer) -> FieldDef | None:
        """Build the field for one property, or None when it is dropped."""
        optional = not required

        # A string enum wins over any declared type
        values = prop.string_enum_values()
        if values is not None:
            enum = self._collect_enum(struct_name_from_property(key, prop.title), values, prop.description)
            default = resolve_default(prop, DefaultKind.ENUM, optional, enum.name, enum.variants)
            return self._make_field(FieldKind.ENUM, key, prop, enum.name, optional, default, namer)

        if prop.type == "string":
            if is_uuid_format(prop.format):
                default = resolve_default(prop, DefaultKind.UUID, optional)
                return self._make_field(FieldKind.UUID, key, prop, UUID_TYPE, optional, default, namer)
            default = resolve_default(prop, DefaultKind.STRING, optional)
            return self._make_field(FieldKind.STRING, key, prop, "String", optional, default, namer)

        if prop.type == "boolean":
            default = resolve_default(prop, DefaultKind.BOOLEAN, optional)
            return self._make_field(FieldKind.BOOLEAN, key, prop, "bool", optional, default, namer)

        if prop.type == "integer":
            integer_type = choose_integer_type(prop)
            default = resolve_default(prop, DefaultKind.INTEGER, optional, integer_type)
            return self._make_field(FieldKind.INTEGER, key, prop, integer_type, optional, default, namer)

        if prop.type == "number":
            number_type = choose_number_type(prop)
            default = resolve_default(prop, DefaultKind.NUMBER, optional, number_type)
            return self._make_field(FieldKind.NUMBER, key, prop, number_type, optional, default, namer)

        if prop.type == "object":
            nested_name = self._collect_struct(prop, struct_name_from_property(key, prop.title))
            default = resolve_default(prop, DefaultKind.OBJECT, optional)
            return self._make_field(FieldKind.OBJECT, key, prop, nested_name or JSON_VALUE_TYPE, optional, default, namer)

        if prop.type == "array":
            if prop.items is None:
                logger.debug("Dropping array property %r: no items schema", key)
                return None
            element_type = self._resolve_array_item_type(key, prop.items)
            if element_type is None:
                logger.debug("Dropping array property %r: unsupported items type %r", key, prop.items.type)
                return None
            default = resolve_default(prop, DefaultKind.ARRAY, optional)
            return self._make_field(FieldKind.ARRAY, key, prop, element_type, optional, default, namer)

        logger.debug("Dropping property %r: unsupported type %r", key, prop.type)
        return None

    def _make_field(self, kind, key, prop, type_name, optional, default, namer) -> FieldDef:
        return FieldDef(
            kind=kind,
            name=namer.field_name(key),
            json_key=key,
            type_name=type_name,
            optional=optional,
            default=default,
            description=normalize_description(prop.description),
        )

    def _scalar_type(self, node: SchemaNode) -> str | None:
        """Rust type for a scalar schema, or None if it is not a scalar."""
        if node.type == "string":
            return UUID_TYPE if is_uuid_format(node.format) else "String"
        if node.type == "boolean":
            return "bool"
        if node.type == "integer":
            return choose_integer_type(node)
        if node.type == "number":
            return choose_number_type(node)
        return None

    def _resolve_array_item_type(self, key: str, items: SchemaNode) -> str | None:
        """Element type for an array property; None when no element type fits."""
        values = items.string_enum_values()
        if values is not None:
            return self._collect_enum(struct_name_from_property(key, items.title), values, items.description).name

        scalar = self._scalar_type(items)
        if scalar is not None:
            return scalar

        if items.type == "object" and items.has_properties():
            return self._collect_struct(items, struct_name_from_property(key, items.title)) or JSON_VALUE_TYPE

        return None

    def _resolve_additional_properties_type(self, schema: SchemaNode, owner_name: str) -> str:
        """Value type of the catch-all map for an additionalProperties schema."""
        values = schema.string_enum_values()
        if values is not None:
            return self._collect_enum(f"{owner_name}Value", values, schema.description).name

        scalar = self._scalar_type(schema)
        if scalar is not None:
            return scalar

        if schema.type == "object" and schema.has_properties():
            return self._collect_struct(schema, f"{owner_name}Extra") or JSON_VALUE_TYPE

        return JSON_VALUE_TYPE
