"""
Python code generator module.

Generates Python dataclasses, Pydantic models, and TypedDict from inferred JSON shapes.
"""

from .generator import PythonGenerator
from .naming import create_python_sanitizer
from .config import PythonStyle, PYTHON_FORMAT_MAP, ImportCollector

__all__ = [
    # Generator
    "PythonGenerator",
    # Naming
    "create_python_sanitizer",
    # Configuration
    "PythonStyle",
    "PYTHON_FORMAT_MAP",
    "ImportCollector",
]
