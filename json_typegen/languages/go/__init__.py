"""
Go code generator module.

Generates Go structs with JSON tags from inferred JSON shapes.
"""

from .generator import GoGenerator
from .naming import create_go_sanitizer, go_package_name
from .config import GoTagStyle

__all__ = [
    "GoGenerator",
    "create_go_sanitizer",
    "go_package_name",
    "GoTagStyle",
]
