"""
Language-specific code generators.

Each subpackage provides a ``CodeGenerator`` subclass, its naming rules and
its Jinja2 templates.
"""

from .csharp import CSharpGenerator
from .go import GoGenerator
from .jsonschema import JsonSchemaGenerator
from .kotlin import KotlinGenerator
from .python import PythonGenerator

__all__ = [
    "CSharpGenerator",
    "GoGenerator",
    "JsonSchemaGenerator",
    "KotlinGenerator",
    "PythonGenerator",
]
