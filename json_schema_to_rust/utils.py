"""
Utility functions for JSON Schema to Rust generator.
"""

import re

# Splits on anything that is not an ASCII letter or digit
_WORD_SEPARATOR = re.compile(r"[^A-Za-z0-9]+")

# Characters not allowed in a Rust identifier
_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_]")


def _split_into_words(text: str) -> list[str]:
    """Split text into non-empty ASCII alphanumeric words."""
    return [word for word in _WORD_SEPARATOR.split(text) if word]


def to_type_name(text: str) -> str:
    """Convert a title or property key to a Rust type name (PascalCase).

    Only the first character of each word is uppercased; the rest is kept.

    Examples:
        "The Widget_Settings Schema" -> "TheWidgetSettingsSchema"
        "widget_settings" -> "WidgetSettings"
        "fooBar" -> "FooBar"
        "2fast" -> "T2fast"
        "" -> "T"

    Args:
        text: The text to convert

    Returns:
        A non-empty identifier that does not start with a digit
    """
    name = "".join(word[0].upper() + word[1:] for word in _split_into_words(text))
    if not name or name[0].isdigit():
        return f"T{name}"
    return name


def to_variant_name(text: str) -> str:
    """Convert an enum literal to a Rust enum variant name.

    Each word is capitalized and the rest of the word lowercased, so that
    "PENDING", "Pending" and "pending" all map to "Pending". An ``E`` prefix is
    added when the result is empty or starts with a digit, and "Self" becomes
    "Self_".
    """
    name = "".join(word.capitalize() for word in _split_into_words(text))
    if not name or name[0].isdigit():
        return f"E{name}"
    if name == "Self":
        return "Self_"
    return name


def to_field_name(key: str) -> str:
    """Convert a property key to a Rust field identifier.

    Characters that cannot appear in an identifier become ``_``. Keys that are
    empty or start with a digit get a ``field_`` prefix. Rust keywords become raw
    identifiers (``r#type``), except those that cannot be raw, which get a
    trailing underscore.
    """
    name = _NON_IDENTIFIER.sub("_", key)
    if not name or name[0].isdigit():
        name = f"field_{name}"
    if name == "_":
        return "field_"
    if name in RUST_NON_RAW_KEYWORDS:
        return f"{name}_"
    if name in RUST_KEYWORDS:
        return f"r#{name}"
    return name


def normalize_description(text: str | None) -> str | None:
    """Trim a description, treating empty or blank text as missing."""
    if text is None:
        return None
    trimmed = text.strip()
    return trimmed or None


def escape_rust_string(text: str) -> str:
    """Escape text for use inside a Rust double-quoted string or attribute.

    Control characters are written as escapes, since a bare carriage return
    is not allowed inside a Rust string literal.
    """
    escaped = []
    for char in text:
        if char in _STRING_ESCAPES:
            escaped.append(_STRING_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            escaped.append(f"\\u{{{ord(char):x}}}")
        else:
            escaped.append(char)
    return "".join(escaped)


_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}

# Type names the generated file itself refers to; definitions never take them
RESERVED_TYPE_NAMES = {
    "BTreeMap",
    "Deserialize",
    "Option",
    "Self",
    "Serialize",
    "String",
    "Uuid",
    "Vec",
}

# Keywords that cannot be used as raw identifiers
RUST_NON_RAW_KEYWORDS = {"self", "Self", "super", "crate"}

# Strict and reserved Rust keywords (2021 edition)
RUST_KEYWORDS = {
    "abstract",
    "as",
    "async",
    "await",
    "become",
    "box",
    "break",
    "const",
    "continue",
    "do",
    "dyn",
    "else",
    "enum",
    "extern",
    "false",
    "final",
    "fn",
    "for",
    "if",
    "impl",
    "in",
    "let",
    "loop",
    "macro",
    "match",
    "mod",
    "move",
    "mut",
    "override",
    "priv",
    "pub",
    "ref",
    "return",
    "static",
    "struct",
    "trait",
    "true",
    "try",
    "type",
    "typeof",
    "unsafe",
    "unsized",
    "use",
    "virtual",
    "where",
    "while",
    "yield",
}
