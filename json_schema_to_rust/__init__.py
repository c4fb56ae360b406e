"""JSON Schema to Rust Generator

A Python package for generating serde-annotated Rust structs and enums from
JSON Schema definitions, with an optional strict validation mode that reports
every unsupported construct at once.
"""

__version__ = "0.1.0"

from .pipeline import (
    AtomicWriter,
    GenerateSettings,
    GenerationError,
    IssueKind,
    JsonSchemaGenError,
    PipelineGenerator,
    SchemaParseError,
    SchemaValidationError,
    ValidationIssue,
    generate,
)
from .validator import SchemaValidator, validate_schema

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
    "SchemaValidator",
    "validate_schema",
]
