"""
Rust code generation backend.

Generates serde-annotated Rust structs and enums from the collected
definitions.
"""

from __future__ import annotations

from typing import Any

from ...utils import escape_rust_string
from ..analyzer.ir_nodes import CustomDefault, EnumDef, FieldDef, FieldKind, StructDef, UseTypeDefault
from .base import CodeBackend

HEADER = "Generated by json_schema_to_rust. Do not edit manually."


def doc_lines(description: str | None) -> list[str]:
    """Turn a description into ``///`` doc comment lines."""
    if description is None:
        return []
    return [f"/// {line}" if line else "///" for line in description.strip().splitlines()]


def unraw(name: str) -> str:
    """Strip the ``r#`` raw identifier prefix."""
    return name.removeprefix("r#")


class RustBackend(CodeBackend):
    """Rust code generation backend."""

    TEMPLATE_LANG = "rust"
    FILE_EXTENSION = "rs"

    def generate(self, structs: dict[str, StructDef], enums: dict[str, EnumDef], order: list[str]) -> str:
        """Generate Rust code: uses, enums, default helpers, then structs."""
        blocks = [self.prefix_template.render(self._prepare_prefix_context(structs))]

        for name in sorted(enums):
            blocks.append(self.enum_template.render(self._prepare_enum_context(enums[name])))

        for name in order:
            struct = structs[name]
            for field in struct.fields:
                if isinstance(field.default, CustomDefault):
                    blocks.append(self.default_fn_template.render(self._prepare_default_fn_context(struct, field)))

        for name in order:
            blocks.append(self.struct_template.render(self._prepare_struct_context(structs[name])))

        return "\n\n".join(block.rstrip() for block in blocks) + "\n"

    def translate_type(self, field: FieldDef) -> str:
        """Translate a field to its Rust type, including Vec/Option wrapping."""
        if field.kind is FieldKind.ADDITIONAL_PROPERTIES:
            return f"BTreeMap<String, {field.type_name}>"

        type_str = field.type_name
        if field.kind is FieldKind.ARRAY:
            type_str = f"Vec<{type_str}>"
        if field.optional:
            type_str = f"Option<{type_str}>"
        return type_str

    def default_fn_name(self, struct: StructDef, field: FieldDef) -> str:
        """Name of the helper function supplying a field's custom default."""
        return f"default_{struct.name}_{unraw(field.name)}"

    def _prepare_prefix_context(self, structs: dict[str, StructDef]) -> dict[str, Any]:
        fields = [field for struct in structs.values() for field in struct.fields]
        uses = []
        if any(field.kind is FieldKind.ADDITIONAL_PROPERTIES for field in fields):
            uses.append("std::collections::BTreeMap")
        if any(field.uses_uuid() for field in fields):
            uses.append("uuid::Uuid")
        return {"HEADER": HEADER, "USES": uses}

    def _prepare_enum_context(self, enum: EnumDef) -> dict[str, Any]:
        return {
            "DOC_LINES": doc_lines(enum.description),
            "ENUM_NAME": enum.name,
            "VARIANTS": enum.variants,
        }

    def _prepare_default_fn_context(self, struct: StructDef, field: FieldDef) -> dict[str, Any]:
        return {
            "FN_NAME": self.default_fn_name(struct, field),
            "RETURN_TYPE": self.translate_type(field),
            "OPTIONAL": field.optional,
            "EXPR": field.default.expr,
        }

    def _prepare_struct_context(self, struct: StructDef) -> dict[str, Any]:
        return {
            "DOC_LINES": doc_lines(struct.description),
            "STRUCT_NAME": struct.name,
            "DENY_UNKNOWN_FIELDS": struct.deny_unknown_fields,
            "FIELDS": [self._prepare_field_context(struct, field) for field in struct.fields],
        }

    def _prepare_field_context(self, struct: StructDef, field: FieldDef) -> dict[str, Any]:
        """
        Prepare the template context for a field.

        Attributes come in a fixed order: flatten or rename, then default.

        Args:
            struct: The struct owning the field
            field: The field definition

        Returns:
            Dictionary of template variables
        """
        attributes = []
        if field.kind is FieldKind.ADDITIONAL_PROPERTIES:
            attributes.append("flatten")
        elif unraw(field.name) != field.json_key:
            attributes.append(f'rename = "{escape_rust_string(field.json_key)}"')

        if isinstance(field.default, UseTypeDefault):
            attributes.append("default")
        elif isinstance(field.default, CustomDefault):
            attributes.append(f'default = "{self.default_fn_name(struct, field)}"')

        return {
            "DOC_LINES": doc_lines(field.description),
            "ATTRIBUTES": attributes,
            "NAME": field.name,
            "TYPE": self.translate_type(field),
        }
