"""
Kotlin-specific naming utilities and sanitization.
"""

from ...core.naming import NameSanitizer


# Kotlin hard keywords; soft and modifier keywords are valid identifiers
KOTLIN_RESERVED_WORDS = {
    "as",
    "break",
    "class",
    "continue",
    "do",
    "else",
    "false",
    "for",
    "fun",
    "if",
    "in",
    "interface",
    "is",
    "null",
    "object",
    "package",
    "return",
    "super",
    "this",
    "throw",
    "true",
    "try",
    "typealias",
    "typeof",
    "val",
    "var",
    "when",
    "while",
}

# kotlin.* types a generated class must not shadow
KOTLIN_BUILTIN_TYPES = {
    "Any",
    "Boolean",
    "Double",
    "Int",
    "List",
    "Long",
    "String",
    "Unit",
    "Nothing",
}


def create_kotlin_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Kotlin."""
    return NameSanitizer(KOTLIN_RESERVED_WORDS, KOTLIN_BUILTIN_TYPES)
