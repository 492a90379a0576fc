"""
Go-specific naming utilities and sanitization.

Handles Go reserved words, builtins, and package naming.
"""

from typing import Optional

from ...core.naming import NameSanitizer


# Go reserved words
GO_RESERVED_WORDS = {
    "break",
    "case",
    "chan",
    "const",
    "continue",
    "default",
    "defer",
    "else",
    "fallthrough",
    "for",
    "func",
    "go",
    "goto",
    "if",
    "import",
    "interface",
    "map",
    "package",
    "range",
    "return",
    "select",
    "struct",
    "switch",
    "type",
    "var",
}

# Predeclared identifiers a struct must not shadow
GO_BUILTIN_TYPES = {
    "any",
    "bool",
    "byte",
    "error",
    "float32",
    "float64",
    "int",
    "int32",
    "int64",
    "rune",
    "string",
    "nil",
    "true",
    "false",
}


def create_go_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Go."""
    # Exported identifiers must start with an upper-case letter
    return NameSanitizer(GO_RESERVED_WORDS, GO_BUILTIN_TYPES, digit_prefix="X")


def go_package_name(namespace: Optional[str]) -> str:
    """Package clause for a namespace: its last segment, lowercased."""
    if not namespace:
        return "main"
    name = namespace.rsplit(".", 1)[-1].lower()
    if name in GO_RESERVED_WORDS:
        name += "_"
    return name


def validate_go_package_name(name: str) -> list[str]:
    """
    Check a package name against Go conventions.

    Returns:
        List of style warnings (empty if idiomatic)
    """
    warnings = []

    if "_" in name:
        warnings.append(f"Go package name '{name}' should not contain underscores")

    if name in GO_RESERVED_WORDS or name.rstrip("_") in GO_RESERVED_WORDS:
        warnings.append(f"'{name.rstrip('_')}' is a Go reserved word")

    return warnings
