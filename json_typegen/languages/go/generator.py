"""
Go code generator implementation.

Generates Go structs with JSON tags from an inferred schema graph.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.config import GenerationOptions
from ...core.generator import CodeGenerator
from ...core.graph import FieldDef, ObjectShape, SchemaGraph
from ...core.naming import NameSanitizer, NamingCase
from ...core.nodes import BoolType, FloatType, IntType, ObjectRef, StrType, TypeNode
from .config import (
    GO_BOOL,
    GO_FLOAT,
    GO_FORMAT_MAP,
    GO_INT32,
    GO_INT64,
    GO_STRING,
    GO_UNKNOWN,
    GoTagStyle,
)
from .naming import create_go_sanitizer, go_package_name, validate_go_package_name


class GoGenerator(CodeGenerator):
    """Code generator for Go structs with JSON tags."""

    default_casing = NamingCase.PASCAL_CASE
    declaration_styles = ("struct",)
    alias_styles = tuple(style.value for style in GoTagStyle)
    supports_namespace = True

    unknown_type = GO_UNKNOWN
    nullable_type = "*string"

    def __init__(self, options: Optional[GenerationOptions] = None):
        super().__init__(options)
        self.imports = set()

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    @property
    def package_name(self) -> str:
        return go_package_name(self.options.namespace)

    def get_template_directory(self) -> Path:
        """Return the Go templates directory."""
        return Path(__file__).parent / "templates"

    def create_sanitizer(self) -> NameSanitizer:
        return create_go_sanitizer()

    def generate(self, graph: SchemaGraph) -> str:
        """Generate complete Go code for all types using templates."""
        self.imports = set()

        declarations = []
        if not graph.types or graph.root not in graph.types:
            declarations.append(self._render_root_alias(graph))
        for shape in graph.ordered_types():
            declarations.append(self.generate_single_struct(shape).rstrip())

        parts = [self.render_template("package.go.j2", {"package_name": self.package_name})]
        if self.imports:
            context = {"imports": sorted(self.imports)}
            parts.append(self.render_template("imports.go.j2", context))
        parts.extend(declarations)

        return "\n\n".join(part.strip("\n") for part in parts)

    def _render_root_alias(self, graph: SchemaGraph) -> str:
        return f"type {graph.root} = {self.render_type(graph.root_node)}"

    def generate_single_struct(self, shape: ObjectShape) -> str:
        """Generate a Go struct for a single object shape."""
        fields = [self._field_data(field_def) for field_def in shape.fields]
        context = {"struct_name": shape.name, "fields": fields}
        return self.render_template("struct.go.j2", context)

    def _field_data(self, field_def: FieldDef) -> Dict[str, Any]:
        tag = ""
        if self.should_alias(field_def):
            tag = " " + self._render_json_tag(field_def)
        return {
            "name": field_def.name,
            "type": self.render_type(field_def.node),
            "tag": tag,
        }

    def _render_json_tag(self, field_def: FieldDef) -> str:
        """Render a json struct tag using the tag template."""
        omitempty = (
            self.options.alias_style == GoTagStyle.JSON_OMITEMPTY.value and field_def.nullable
        )
        context = {
            "key": field_def.key.replace("\\", "\\\\").replace('"', '\\"'),
            "omitempty": omitempty,
        }
        tag = self.render_template("json_tag.go.j2", context).strip()
        if "`" in field_def.key:
            # Raw strings cannot hold a backtick; fall back to an interpreted literal
            inner = tag[1:-1].replace("\\", "\\\\").replace('"', '\\"')
            tag = f'"{inner}"'
        return tag

    def render_leaf(self, node: TypeNode) -> str:
        if isinstance(node, ObjectRef):
            return node.name
        if isinstance(node, BoolType):
            return GO_BOOL
        if isinstance(node, IntType):
            return GO_INT32 if node.width == 32 else GO_INT64
        if isinstance(node, FloatType):
            return GO_FLOAT
        if isinstance(node, StrType):
            if node.format in GO_FORMAT_MAP:
                go_type, import_path = GO_FORMAT_MAP[node.format]
                self.imports.add(import_path)
                return go_type
            return GO_STRING
        return self.unknown_type

    def wrap_array(self, element: str) -> str:
        return f"[]{element}"

    def validate_graph(self, graph: SchemaGraph) -> List[str]:
        """Validate graph for Go generation."""
        warnings = super().validate_graph(graph)

        for shape in graph.types.values():
            for field_def in shape.fields:
                if not field_def.name[0].isupper():
                    warnings.append(
                        f"Field {shape.name}.{field_def.name} is unexported; "
                        f"encoding/json will ignore it"
                    )
                if "," in field_def.key and self.should_alias(field_def):
                    warnings.append(
                        f"JSON key '{field_def.key}' contains a comma and cannot be "
                        f"expressed in a json struct tag"
                    )

        if self.options.namespace:
            warnings.extend(validate_go_package_name(self.package_name))

        return warnings
