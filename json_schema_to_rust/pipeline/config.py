"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GenerateSettings:
    """Settings that control code generation behavior."""

    # When True, validate the raw schema first and fail with every invalid or
    # unsupported feature found. When False (default), unsupported input is
    # silently dropped.
    deny_invalid_unknown_json_schema: bool = False

    @staticmethod
    def from_dict(d: dict) -> GenerateSettings:
        """Create settings from a dictionary, ignoring unknown keys."""
        settings = GenerateSettings()
        for k, v in d.items():
            if hasattr(settings, k):
                setattr(settings, k, v)
        return settings

    def to_dict(self) -> dict:
        """Convert settings to a dictionary."""
        return {
            "deny_invalid_unknown_json_schema": self.deny_invalid_unknown_json_schema,
        }
