"""
C#-specific naming utilities and sanitization.
"""

from ...core.naming import NameSanitizer


# C# keywords (contextual keywords are valid identifiers and are omitted)
CSHARP_RESERVED_WORDS = {
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
    "char", "checked", "class", "const", "continue", "decimal", "default",
    "delegate", "do", "double", "else", "enum", "event", "explicit",
    "extern", "false", "finally", "fixed", "float", "for", "foreach",
    "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
    "lock", "long", "namespace", "new", "null", "object", "operator",
    "out", "override", "params", "private", "protected", "public",
    "readonly", "ref", "return", "sbyte", "sealed", "short", "sizeof",
    "stackalloc", "static", "string", "struct", "switch", "this", "throw",
    "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe",
    "ushort", "using", "virtual", "void", "volatile", "while",
}

# Framework types referenced by generated code
CSHARP_BUILTIN_TYPES = {
    "Object",
    "String",
    "DateTime",
    "Guid",
    "List",
    "JsonProperty",
    "JsonPropertyName",
}


def create_csharp_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for C#."""
    return NameSanitizer(CSHARP_RESERVED_WORDS, CSHARP_BUILTIN_TYPES)
