"""
C# code generator implementation.

Generates C# classes or records with System.Text.Json or Newtonsoft.Json
attributes from an inferred schema graph.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from ...core.config import GenerationOptions
from ...core.generator import CodeGenerator
from ...core.graph import FieldDef, ObjectShape, SchemaGraph
from ...core.naming import NameSanitizer, NamingCase
from ...core.nodes import BoolType, FloatType, IntType, ObjectRef, StrType, TypeNode
from .config import (
    COLLECTIONS_NAMESPACE,
    CSHARP_ATTRIBUTES,
    CSHARP_FORMAT_MAP,
    SYSTEM_NAMESPACE,
    CSharpAttributeStyle,
    CSharpStyle,
)
from .naming import create_csharp_sanitizer


class CSharpGenerator(CodeGenerator):
    """Code generator for C# classes and records."""

    default_casing = NamingCase.PASCAL_CASE
    declaration_styles = tuple(style.value for style in CSharpStyle)
    alias_styles = tuple(style.value for style in CSharpAttributeStyle)
    supports_namespace = True

    unknown_type = "object"
    nullable_type = "string?"

    def __init__(self, options: Optional[GenerationOptions] = None):
        super().__init__(options)
        self.usings: Set[str] = set()

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "csharp"

    @property
    def file_extension(self) -> str:
        """Return C# file extension."""
        return ".cs"

    @property
    def style(self) -> CSharpStyle:
        return CSharpStyle(self.options.declaration_style)

    def get_template_directory(self) -> Path:
        """Return the C# templates directory."""
        return Path(__file__).parent / "templates"

    def create_sanitizer(self) -> NameSanitizer:
        return create_csharp_sanitizer()

    def generate(self, graph: SchemaGraph) -> str:
        """Generate a complete C# file for all types."""
        self.usings = set()

        declarations = []
        if not graph.types or graph.root not in graph.types:
            # C# has no file-level type alias for arbitrary types
            declarations.append(f"// {graph.root} is {self.render_type(graph.root_node)}")
        for shape in graph.ordered_types():
            declarations.append(self._render_declaration(shape).rstrip())

        context = {
            "usings": sorted(self.usings),
            "namespace": self.options.namespace,
            "body": "\n\n".join(declarations),
        }
        return self.render_template("file.cs.j2", context)

    def _render_declaration(self, shape: ObjectShape) -> str:
        context = {
            "class_name": shape.name,
            "properties": self._properties(shape),
        }
        return self.render_template(f"{self.style.value}.cs.j2", context)

    def _properties(self, shape: ObjectShape) -> List[Dict[str, Any]]:
        used = {f.name for f in shape.fields}
        properties = []

        for field_def in shape.fields:
            name = field_def.name
            if name == shape.name:
                # Members cannot share the name of their enclosing type
                base = f"{name}Value"
                name = base
                counter = 2
                while name in used:
                    name = f"{base}{counter}"
                    counter += 1
                used.add(name)

            attribute = self._attribute_for(field_def, name)
            prefix = f"[property: {attribute}({_quote(field_def.key)})] " if attribute else ""
            properties.append(
                {
                    "name": name,
                    "key": field_def.key,
                    "type": self.render_type(field_def.node),
                    "attribute": attribute,
                    "prefix": prefix,
                }
            )

        return properties

    def _attribute_for(self, field_def: FieldDef, member_name: str) -> Optional[str]:
        if not self.options.emit_aliases or member_name == field_def.key:
            return None
        attribute, namespace = CSHARP_ATTRIBUTES[CSharpAttributeStyle(self.options.alias_style)]
        self.usings.add(namespace)
        return attribute

    def render_leaf(self, node: TypeNode) -> str:
        if isinstance(node, ObjectRef):
            return node.name
        if isinstance(node, BoolType):
            return "bool"
        if isinstance(node, IntType):
            return "int" if node.width == 32 else "long"
        if isinstance(node, FloatType):
            return "double"
        if isinstance(node, StrType):
            if node.format in CSHARP_FORMAT_MAP:
                self.usings.add(SYSTEM_NAMESPACE)
                return CSHARP_FORMAT_MAP[node.format]
            return "string"
        return self.unknown_type

    def wrap_array(self, element: str) -> str:
        self.usings.add(COLLECTIONS_NAMESPACE)
        return f"List<{element}>"

    def validate_graph(self, graph: SchemaGraph) -> List[str]:
        """Validate graph for C# generation."""
        warnings = super().validate_graph(graph)

        for shape in graph.types.values():
            if shape.get_field(shape.name) is not None:
                warnings.append(
                    f"Property {shape.name}.{shape.name} renamed to {shape.name}Value; "
                    f"members cannot share their type's name"
                )

        return warnings


def _quote(value: str) -> str:
    return json.dumps(value)
