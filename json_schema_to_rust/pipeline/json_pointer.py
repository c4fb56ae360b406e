"""
JSON Pointer (RFC 6901) helpers.

Pointers are ``/``-separated segments, with ``~`` escaped as ``~0`` and ``/``
escaped as ``~1``. The empty string points at the document root.
"""

from __future__ import annotations


def escape_segment(segment: str) -> str:
    """Escape a single reference token."""
    return segment.replace("~", "~0").replace("/", "~1")


def append(path: str, segment: str) -> str:
    """
    Return a new pointer with ``segment`` appended to ``path``.

    Args:
        path: Existing pointer ("" for the root)
        segment: Unescaped object key or synthetic segment (e.g. "items")

    Returns:
        The extended pointer
    """
    return f"{path}/{escape_segment(segment)}"


def join(*segments: str) -> str:
    """Build a pointer from the root through each segment in turn."""
    path = ""
    for segment in segments:
        path = append(path, segment)
    return path
