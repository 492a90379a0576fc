"""
Python-specific naming: keywords and names the generated module imports.
"""

import keyword

from ...core.naming import NameSanitizer


# Keywords, plus the dataclasses helpers a class-body name would shadow
PYTHON_RESERVED_WORDS = set(keyword.kwlist) | {"field", "dataclass"}

# Imported or typing names a generated class must not take
PYTHON_BUILTIN_TYPES = {
    "Any",
    "BaseModel",
    "ConfigDict",
    "Field",
    "TypedDict",
    "UUID",
    "List",
    "Dict",
    "Optional",
    "Union",
}


def create_python_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Python."""
    return NameSanitizer(PYTHON_RESERVED_WORDS, PYTHON_BUILTIN_TYPES)
