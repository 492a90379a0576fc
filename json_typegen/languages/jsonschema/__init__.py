"""
JSON Schema generator module.

Generates draft 2020-12 JSON Schema documents from inferred JSON shapes.
"""

from .generator import SCHEMA_DIALECT, JsonSchemaGenerator

__all__ = [
    "SCHEMA_DIALECT",
    "JsonSchemaGenerator",
]
