"""
Pipeline generator.

Runs the phases in order: optional strict validation, parsing into the schema
AST, definition collection, emission ordering, and rendering with the Rust
backend.
"""

from __future__ import annotations

import logging
from typing import Any

from ..validator import SchemaValidator
from .analyzer import DefinitionCollector, emission_order, root_struct_name
from .backends import RustBackend
from .config import GenerateSettings
from .errors import GenerationError
from .schema_ast import SchemaParser

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates Rust source for one JSON Schema document."""

    def __init__(self, schema: str | Any, settings: GenerateSettings | None = None):
        """
        Initialize the generator.

        Args:
            schema: Schema JSON text, or an already decoded JSON value
            settings: Generation settings (defaults to GenerateSettings())
        """
        self.schema = schema
        self.settings = settings or GenerateSettings()
        self.parser = SchemaParser()
        self.backend = RustBackend()

    def generate(self) -> str:
        """
        Generate Rust source.

        Returns:
            The generated source text

        Raises:
            SchemaParseError: If the text is not JSON or a keyword is malformed
            SchemaValidationError: In strict mode, if the schema has any issue
            GenerationError: If the root is not an object or yields nothing
        """
        value = self.parser.load(self.schema) if isinstance(self.schema, str) else self.schema

        if self.settings.deny_invalid_unknown_json_schema:
            SchemaValidator().check(value)

        root = self.parser.parse(value)
        if root.type != "object":
            raise GenerationError('Root schema must have type "object"')

        root_name = root_struct_name(root)
        collector = DefinitionCollector()
        collector.collect(root, root_name)

        structs = collector.structs
        if not structs:
            raise GenerationError("No structs to generate (root object has no supported properties)")

        order = emission_order(structs, root_name)
        logger.debug("Emitting %d struct(s) and %d enum(s)", len(structs), len(collector.enums))
        return self.backend.generate(structs, collector.enums, order)


def generate(schema: str | Any, settings: GenerateSettings | None = None) -> str:
    """Generate Rust source from schema JSON text (or a decoded JSON value)."""
    return PipelineGenerator(schema, settings).generate()
