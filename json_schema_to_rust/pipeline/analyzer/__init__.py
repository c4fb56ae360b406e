"""
Analyzer module.

Contains type resolution, name resolution, definition collection and
emission ordering.
"""

from __future__ import annotations

from .collector import DefinitionCollector, build_enum_variants, root_struct_name
from .emission_order import emission_order
from .ir_nodes import (
    CustomDefault,
    DefaultSpec,
    EnumDef,
    EnumVariant,
    FieldDef,
    FieldKind,
    StructDef,
    UseTypeDefault,
)
from .name_resolver import FieldNamer, NameResolver

__all__ = [
    "DefinitionCollector",
    "build_enum_variants",
    "root_struct_name",
    "emission_order",
    "CustomDefault",
    "DefaultSpec",
    "EnumDef",
    "EnumVariant",
    "FieldDef",
    "FieldKind",
    "StructDef",
    "UseTypeDefault",
    "FieldNamer",
    "NameResolver",
]
