"""
Kotlin code generator implementation.

Generates Kotlin data classes annotated for kotlinx.serialization, Moshi or
Gson from an inferred schema graph.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from ...core.config import GenerationOptions, NullablePolicy
from ...core.generator import CodeGenerator
from ...core.graph import FieldDef, ObjectShape, SchemaGraph
from ...core.naming import NameSanitizer, NamingCase
from ...core.nodes import BoolType, FloatType, IntType, ObjectRef, StrType, TypeNode
from .config import (
    KOTLIN_CLASS_ANNOTATIONS,
    KOTLIN_PROPERTY_ANNOTATIONS,
    KotlinAnnotationStyle,
    KotlinStyle,
)
from .naming import create_kotlin_sanitizer


class KotlinGenerator(CodeGenerator):
    """Code generator for Kotlin data classes."""

    default_casing = NamingCase.CAMEL_CASE
    declaration_styles = tuple(style.value for style in KotlinStyle)
    alias_styles = tuple(style.value for style in KotlinAnnotationStyle)
    supports_namespace = True

    unknown_type = "Any"
    nullable_type = "String?"

    def __init__(self, options: Optional[GenerationOptions] = None):
        super().__init__(options)
        self.imports: Set[str] = set()

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "kotlin"

    @property
    def file_extension(self) -> str:
        """Return Kotlin file extension."""
        return ".kt"

    @property
    def style(self) -> KotlinStyle:
        return KotlinStyle(self.options.declaration_style)

    @property
    def annotation_style(self) -> Optional[KotlinAnnotationStyle]:
        if not self.options.emit_aliases or self.options.alias_style is None:
            return None
        return KotlinAnnotationStyle(self.options.alias_style)

    def get_template_directory(self) -> Path:
        """Return the Kotlin templates directory."""
        return Path(__file__).parent / "templates"

    def create_sanitizer(self) -> NameSanitizer:
        return create_kotlin_sanitizer()

    def generate(self, graph: SchemaGraph) -> str:
        """Generate a complete Kotlin file for all types."""
        self.imports = set()

        declarations = []
        if not graph.types or graph.root not in graph.types:
            declarations.append(f"typealias {graph.root} = {self.render_type(graph.root_node)}")
        for shape in graph.ordered_types():
            declarations.append(self._render_class(shape).rstrip())

        context = {
            "package_name": self.options.namespace,
            "imports": sorted(self.imports),
            "body": "\n\n".join(declarations),
        }
        return self.render_template("file.kt.j2", context)

    def _render_class(self, shape: ObjectShape) -> str:
        class_annotations = []
        style = self.annotation_style
        if style in KOTLIN_CLASS_ANNOTATIONS:
            annotation, import_path = KOTLIN_CLASS_ANNOTATIONS[style]
            class_annotations.append(annotation)
            self.imports.add(import_path)

        context = {
            "class_name": shape.name,
            "keyword": "data class" if self.style == KotlinStyle.DATA_CLASS else "class",
            "class_annotations": class_annotations,
            "properties": [self._property(field_def) for field_def in shape.fields],
        }
        return self.render_template("class.kt.j2", context)

    def _property(self, field_def: FieldDef) -> Dict[str, Any]:
        annotation = ""
        if self.should_alias(field_def):
            name, import_path = KOTLIN_PROPERTY_ANNOTATIONS[self.annotation_style]
            self.imports.add(import_path)
            key = kotlin_string(field_def.key)
            if self.annotation_style == KotlinAnnotationStyle.MOSHI:
                annotation = f"@{name}(name = {key}) "
            else:
                annotation = f"@{name}({key}) "

        return {
            "name": field_def.name,
            "type": self.render_type(field_def.node),
            "annotation": annotation,
            "default": " = null" if field_def.nullable else "",
        }

    def render_null(self) -> str:
        if self.options.nullable_policy == NullablePolicy.WRAP:
            return self.nullable_type
        # Only a nullable type can hold the null default
        return f"{self.unknown_type}?"

    def render_leaf(self, node: TypeNode) -> str:
        if isinstance(node, ObjectRef):
            return node.name
        if isinstance(node, BoolType):
            return "Boolean"
        if isinstance(node, IntType):
            return "Int" if node.width == 32 else "Long"
        if isinstance(node, FloatType):
            return "Double"
        if isinstance(node, StrType):
            return "String"
        return self.unknown_type

    def wrap_array(self, element: str) -> str:
        return f"List<{element}>"

    def validate_graph(self, graph: SchemaGraph) -> List[str]:
        """Validate graph for Kotlin generation."""
        warnings = super().validate_graph(graph)

        if self.style == KotlinStyle.DATA_CLASS:
            for shape in graph.types.values():
                if not shape.fields:
                    warnings.append(
                        f"Data class {shape.name} would have no properties; "
                        f"declared as a plain class"
                    )

        if graph.has_renamed_fields() and self.annotation_style is None:
            warnings.append(
                "Property names differ from JSON keys but no serialization "
                "annotations are emitted"
            )

        return warnings


def kotlin_string(value: str) -> str:
    """Double-quoted Kotlin string literal; ``$`` is escaped to avoid templates."""
    out = []
    for char in value:
        if char in ('"', "\\", "$"):
            out.append("\\" + char)
        elif char == "\n":
            out.append("\\n")
        elif char == "\t":
            out.append("\\t")
        elif char == "\r":
            out.append("\\r")
        elif ord(char) < 0x20:
            out.append(f"\\u{ord(char):04x}")
        else:
            out.append(char)
    return '"' + "".join(out) + '"'
