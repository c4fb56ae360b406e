"""
Schema AST module.

Contains the AST node definition and parser for JSON Schema.
"""

from __future__ import annotations

from .nodes import SUPPORTED_TYPES, SchemaNode
from .parser import SchemaParser

__all__ = [
    "SUPPORTED_TYPES",
    "SchemaNode",
    "SchemaParser",
]
