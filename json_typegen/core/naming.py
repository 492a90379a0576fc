"""
Naming utilities for safe code generation.

Turns JSON keys into identifiers: case conversion, character
sanitization and reserved-word escaping across target languages.
"""

import re
from typing import Dict, Optional, Set
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""

    PRESERVE = "preserve"  # user_Name stays user_Name
    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName


DEFAULT_FIELD_NAME = "field"
DEFAULT_CLASS_NAME = "Model"


class NameSanitizer:
    """Handles name sanitization and case conversion.

    The sanitizer answers "what would this key be called"; it never tracks
    which names are already taken. Disambiguation lives in the graph builder.
    """

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        builtin_types: Optional[Set[str]] = None,
        digit_prefix: str = "_",
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Language keywords, invalid as any identifier
            builtin_types: Builtin type names a generated class must not shadow
            digit_prefix: Prepended to names that would start with a digit
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self.digit_prefix = digit_prefix
        self._name_cache: Dict[str, str] = {}

    def class_name_for(self, key: str) -> str:
        """Derive a PascalCase type name from a JSON key."""
        cache_key = f"class:{key}"
        if cache_key not in self._name_cache:
            name = self._convert_case(self._clean_basic(key), NamingCase.PASCAL_CASE)
            name = self._finalize(name, DEFAULT_CLASS_NAME)
            if name in self.reserved_words or name in self.builtin_types:
                name = f"{name}_"
            self._name_cache[cache_key] = name
        return self._name_cache[cache_key]

    def field_name_for(self, key: str, casing: NamingCase) -> str:
        """Derive a field name from a JSON key in the requested casing."""
        cache_key = f"field:{casing.value}:{key}"
        if cache_key not in self._name_cache:
            name = self._convert_case(self._clean_basic(key), casing)
            name = self._finalize(name, DEFAULT_FIELD_NAME)
            if name in self.reserved_words:
                name = f"{name}_"
            self._name_cache[cache_key] = name
        return self._name_cache[cache_key]

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - invalid characters become word separators."""
        return re.sub(r"[^a-zA-Z0-9_]", "_", name)

    def _finalize(self, name: str, fallback: str) -> str:
        # Ensure not empty and doesn't start with a number
        if not name.strip("_"):
            return fallback
        if name[0].isdigit():
            return f"{self.digit_prefix}{name}"
        return name

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return self._to_snake_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return self._to_camel_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return self._to_pascal_case(name)
        else:
            return re.sub(r"_+", "_", name).strip("_") or name

    def _to_snake_case(self, name: str) -> str:
        """Convert to snake_case."""
        # Split acronyms: HTTPServer -> HTTP_Server
        name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)

        # Insert underscore before uppercase letters
        name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)

        # Convert to lowercase and clean up multiple underscores
        name = name.lower()
        name = re.sub(r"_+", "_", name)

        return name.strip("_")

    def _to_camel_case(self, name: str) -> str:
        """Convert to camelCase."""
        parts = [part for part in self._to_snake_case(name).split("_") if part]

        if not parts:
            return ""

        # First part lowercase, rest title case
        return parts[0] + "".join(part.capitalize() for part in parts[1:])

    def _to_pascal_case(self, name: str) -> str:
        """Convert to PascalCase."""
        parts = self._to_snake_case(name).split("_")

        # All parts title case
        return "".join(part.capitalize() for part in parts if part)


def parse_naming_case(value: "str | NamingCase") -> NamingCase:
    """Coerce a config string such as ``"snake"`` into a NamingCase."""
    if isinstance(value, NamingCase):
        return value
    try:
        return NamingCase(str(value).lower())
    except ValueError:
        valid = ", ".join(case.value for case in NamingCase)
        raise ValueError(f"Invalid casing '{value}' (expected one of: {valid})")
