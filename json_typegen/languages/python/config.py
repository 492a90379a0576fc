"""
Python-specific configuration and type mappings.

Provides type mapping and import bookkeeping for dataclasses,
Pydantic models, and TypedDict generation.
"""

import re
from enum import Enum
from typing import Dict, Set

from ...core.formats import FormatTag


class PythonStyle(Enum):
    """Python code generation styles."""

    DATACLASS = "dataclass"
    PYDANTIC = "pydantic"
    TYPEDDICT = "typeddict"


# String formats with a richer Python type
PYTHON_FORMAT_MAP = {
    FormatTag.DATE_TIME: "datetime",
    FormatTag.DATE: "date",
    FormatTag.TIME: "time",
    FormatTag.UUID: "UUID",
}

# Types that require imports, grouped by module
PYTHON_IMPORT_MAP = {
    "datetime": ("datetime", "datetime"),
    "date": ("datetime", "date"),
    "time": ("datetime", "time"),
    "UUID": ("uuid", "UUID"),
    "Any": ("typing", "Any"),
}

# Additional imports by style
STYLE_IMPORTS = {
    PythonStyle.DATACLASS: [("dataclasses", "dataclass")],
    PythonStyle.PYDANTIC: [("pydantic", "BaseModel")],
    PythonStyle.TYPEDDICT: [("typing", "TypedDict")],
}


class ImportCollector:
    """Collects ``from module import name`` statements."""

    def __init__(self):
        self._imports: Dict[str, Set[str]] = {}

    def add(self, module: str, name: str) -> None:
        self._imports.setdefault(module, set()).add(name)

    def add_type(self, python_type: str) -> None:
        """Record imports needed by a rendered type expression."""
        for token in _type_tokens(python_type):
            if token in PYTHON_IMPORT_MAP:
                self.add(*PYTHON_IMPORT_MAP[token])

    def statements(self) -> list[str]:
        """Import lines: ``__future__`` first, stdlib next, then third-party."""
        lines = ["from __future__ import annotations"]

        def sort_key(module: str):
            return (0 if module != "pydantic" else 1, module)

        for module in sorted(self._imports, key=sort_key):
            names = ", ".join(sorted(self._imports[module]))
            lines.append(f"from {module} import {names}")
        return lines


def _type_tokens(type_string: str) -> Set[str]:
    return set(re.findall(r"[A-Za-z_][A-Za-z0-9_]*", type_string))
