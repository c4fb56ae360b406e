"""
Name resolver for handling naming collisions.

Type names are derived from titles and property keys, so two different
schemas can ask for the same name (e.g. two sibling properties both titled
"Info"). The resolver keeps one namespace for structs and enums: an identical
definition reuses the existing name, a different one gets a numeric suffix.
Names the generated file already uses (``String``, ``Vec``, ``Serialize``...)
are never handed out.
"""

from __future__ import annotations

import dataclasses
import logging

from ...utils import RESERVED_TYPE_NAMES, to_field_name
from .ir_nodes import Definition, EnumDef, StructDef

logger = logging.getLogger(__name__)


class NameResolver:
    """Assigns unique type names for one generation run."""

    def __init__(self):
        self.definitions: dict[str, Definition] = {}
        self._reserved: set[str] = set()

    def reserve(self, name: str) -> None:
        """Keep ``name`` free until a definition registers with ``claim=True``."""
        self._reserved.add(name)

    def register(self, definition: Definition, claim: bool = False) -> str:
        """
        Register a definition under its name, or a suffixed one on collision.

        Args:
            definition: The struct or enum; its ``name`` is set to the name it
                ends up registered under
            claim: Whether this definition owns a reserved name

        Returns:
            The name the definition is registered under
        """
        base_name = definition.name
        candidate = base_name
        counter = 1
        while True:
            existing = self.definitions.get(candidate)
            if existing is not None:
                if existing == dataclasses.replace(definition, name=candidate):
                    definition.name = candidate
                    return candidate
            elif candidate not in RESERVED_TYPE_NAMES and (candidate not in self._reserved or claim):
                break
            counter += 1
            candidate = f"{base_name}{counter}"

        if candidate != base_name:
            logger.debug("Type name %s already taken, using %s", base_name, candidate)
        definition.name = candidate
        self.definitions[candidate] = definition
        self._reserved.discard(candidate)
        return candidate

    @property
    def structs(self) -> dict[str, StructDef]:
        return {name: d for name, d in sorted(self.definitions.items()) if isinstance(d, StructDef)}

    @property
    def enums(self) -> dict[str, EnumDef]:
        return {name: d for name, d in sorted(self.definitions.items()) if isinstance(d, EnumDef)}


class FieldNamer:
    """Assigns unique Rust field names within one struct."""

    def __init__(self):
        self._used: set[str] = set()

    def claim(self, name: str) -> str:
        """Mark an already-valid identifier as used."""
        self._used.add(name)
        return name

    def field_name(self, json_key: str) -> str:
        """Sanitize a property key, suffixing ``_1``, ``_2``... on collisions."""
        base_name = to_field_name(json_key)
        candidate = base_name
        counter = 0
        while candidate in self._used:
            counter += 1
            candidate = f"{base_name}_{counter}"
        if candidate != base_name:
            logger.debug("Field name %s already used, using %s for key %r", base_name, candidate, json_key)
        return self.claim(candidate)
