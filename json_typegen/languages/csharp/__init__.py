"""
C# code generator module.

Generates C# classes and records from inferred JSON shapes.
"""

from .generator import CSharpGenerator
from .naming import create_csharp_sanitizer
from .config import CSharpAttributeStyle, CSharpStyle

__all__ = [
    "CSharpGenerator",
    "create_csharp_sanitizer",
    "CSharpAttributeStyle",
    "CSharpStyle",
]
