"""
Atomic file writer for generated Rust sources.

Ensures that file writes are atomic so an interrupted run never leaves a
half-written module behind.
"""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path

from .errors import GenerationError


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_rust: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_rust: Optional validation function for Rust code
        """
        self._validate_rust = validate_rust or self._default_validate_rust

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            GenerationError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)

            if validate:
                self._validate_rust(content)

            temp_path.replace(path)

        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise

    def _default_validate_rust(self, content: str) -> None:
        """Default Rust validation.

        Args:
            content: Rust code to validate

        Raises:
            GenerationError: If validation fails
        """
        # Structural check only: braces and brackets must balance outside
        # string literals and line comments
        closing = {"}": "{", ")": "(", "]": "["}
        stack: list[str] = []
        in_string = False
        escaped = False
        for line_number, line in enumerate(content.splitlines(), start=1):
            i = 0
            while i < len(line):
                char = line[i]
                if in_string:
                    if escaped:
                        escaped = False
                    elif char == "\\":
                        escaped = True
                    elif char == '"':
                        in_string = False
                elif line.startswith("//", i):
                    break
                elif char == '"':
                    in_string = True
                elif char in "{([":
                    stack.append(char)
                elif char in closing:
                    if not stack or stack.pop() != closing[char]:
                        raise GenerationError(f"Generated Rust code has an unmatched '{char}' on line {line_number}")
                i += 1

        if in_string:
            raise GenerationError("Generated Rust code has an unterminated string literal")
        if stack:
            raise GenerationError(f"Generated Rust code has {len(stack)} unclosed delimiter(s)")
