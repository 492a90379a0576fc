"""
Kotlin code generator module.

Generates Kotlin data classes from inferred JSON shapes.
"""

from .generator import KotlinGenerator, kotlin_string
from .naming import create_kotlin_sanitizer
from .config import KotlinAnnotationStyle, KotlinStyle

__all__ = [
    "KotlinGenerator",
    "kotlin_string",
    "create_kotlin_sanitizer",
    "KotlinAnnotationStyle",
    "KotlinStyle",
]
