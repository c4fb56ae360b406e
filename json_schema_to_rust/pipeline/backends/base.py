"""
Base class for code generation backends.

Defines the interface that language-specific backends implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ...utils import escape_rust_string
from ..analyzer.ir_nodes import EnumDef, FieldDef, StructDef


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self):
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        # Add custom filters
        self.jinja_env.filters["string_literal"] = escape_rust_string

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")
        self.default_fn_template = self.jinja_env.get_template(f"default_fn.{self.FILE_EXTENSION}.jinja2")
        self.struct_template = self.jinja_env.get_template(f"struct.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def generate(self, structs: dict[str, StructDef], enums: dict[str, EnumDef], order: list[str]) -> str:
        """
        Generate code from collected definitions.

        Args:
            structs: Structs keyed by name
            enums: Enums keyed by name
            order: Struct names in emission order

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def translate_type(self, field: FieldDef) -> str:
        """
        Translate a field to a language-specific type string.

        Args:
            field: The field definition

        Returns:
            Language-specific type string
        """
