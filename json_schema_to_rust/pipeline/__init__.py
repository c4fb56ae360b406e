"""
Pipeline - JSON Schema to Rust generator.

This module provides a multi-phase architecture for generating serde-annotated
Rust types from JSON schemas:

1. Phase 0 (Validator): Optional strict check of the raw schema
2. Phase 1 (Parser): Parse JSON Schema into Schema AST
3. Phase 2 (Analyzer): Collect named struct and enum definitions
4. Phase 3 (Orderer): Order structs so dependencies come first
5. Phase 4 (Backend): Render Rust source with Jinja2 templates
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .config import GenerateSettings
from .errors import (
    GenerationError,
    IssueKind,
    JsonSchemaGenError,
    SchemaParseError,
    SchemaValidationError,
    ValidationIssue,
)
from .generator import PipelineGenerator, generate

__all__ = [
    "PipelineGenerator",
    "generate",
    "GenerateSettings",
    "AtomicWriter",
    "JsonSchemaGenError",
    "SchemaParseError",
    "SchemaValidationError",
    "GenerationError",
    "IssueKind",
    "ValidationIssue",
]
