"""
Python code generator implementation.

Generates Python dataclasses, Pydantic models, or TypedDict using templates.
"""

import keyword
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.config import GenerationOptions
from ...core.generator import CodeGenerator
from ...core.graph import FieldDef, ObjectShape, SchemaGraph
from ...core.naming import NameSanitizer, NamingCase
from ...core.nodes import BoolType, FloatType, IntType, ObjectRef, StrType, TypeNode
from .config import PYTHON_FORMAT_MAP, STYLE_IMPORTS, ImportCollector, PythonStyle
from .naming import create_python_sanitizer


class PythonGenerator(CodeGenerator):
    """Code generator for Python dataclasses, Pydantic models, and TypedDict."""

    default_casing = NamingCase.SNAKE_CASE
    declaration_styles = tuple(style.value for style in PythonStyle)
    alias_styles = ("field",)

    unknown_type = "Any"
    nullable_type = "str | None"

    def __init__(self, options: Optional[GenerationOptions] = None):
        super().__init__(options)
        self.imports = ImportCollector()

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    @property
    def style(self) -> PythonStyle:
        return PythonStyle(self.options.declaration_style)

    @property
    def field_case(self) -> NamingCase:
        # TypedDict keys must match the JSON keys
        if self.style == PythonStyle.TYPEDDICT:
            return NamingCase.PRESERVE
        return super().field_case

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def create_sanitizer(self) -> NameSanitizer:
        return create_python_sanitizer()

    def generate(self, graph: SchemaGraph) -> str:
        """Generate complete Python code for all types."""
        self.imports = ImportCollector()
        for module, name in STYLE_IMPORTS[self.style]:
            self.imports.add(module, name)

        declarations = [self._render_class(shape) for shape in graph.ordered_types()]

        parts = []
        if not graph.types or graph.root not in graph.types:
            parts.append(self._render_root_alias(graph))

        parts.extend(declarations)

        # Imports are known only once every type has been rendered
        header = "\n".join(self.imports.statements())
        return "\n\n\n".join([header] + parts)

    def _render_root_alias(self, graph: SchemaGraph) -> str:
        python_type = self.render_type(graph.root_node)
        self.imports.add_type(python_type)
        return f"{graph.root} = {python_type}"

    def _render_class(self, shape: ObjectShape) -> str:
        """Render one declaration using the style's template."""
        if self.style == PythonStyle.PYDANTIC:
            context = self._pydantic_context(shape)
        elif self.style == PythonStyle.TYPEDDICT:
            context = self._typeddict_context(shape)
        else:
            context = self._dataclass_context(shape)

        context["class_name"] = shape.name
        return self.render_template(f"{self.style.value}.py.j2", context).rstrip()

    def _field_type(self, field_def: FieldDef) -> str:
        python_type = self.render_type(field_def.node)
        self.imports.add_type(python_type)
        return python_type

    def _dataclass_context(self, shape: ObjectShape) -> Dict[str, Any]:
        fields = []
        seen_default = False
        needs_kw_only = False

        for field_def in shape.fields:
            metadata = None
            if self.should_alias(field_def):
                metadata = f'metadata={{"alias": {_quote(field_def.key)}}}'
                self.imports.add("dataclasses", "field")

            if field_def.nullable:
                seen_default = True
                default = " = None"
                if metadata:
                    default = f" = field(default=None, {metadata})"
            else:
                # A required field after a defaulted one needs keyword-only init
                needs_kw_only = needs_kw_only or seen_default
                default = f" = field({metadata})" if metadata else ""

            fields.append(
                {"name": field_def.name, "type": self._field_type(field_def), "default": default}
            )

        return {
            "fields": fields,
            "decorator_args": "(kw_only=True)" if needs_kw_only else "",
        }

    def _pydantic_context(self, shape: ObjectShape) -> Dict[str, Any]:
        fields = []
        has_alias = False

        for field_def in shape.fields:
            field_args = []
            if field_def.nullable:
                field_args.append("default=None")
            if self.should_alias(field_def):
                field_args.append(f"alias={_quote(field_def.key)}")
                has_alias = True

            if field_args == ["default=None"]:
                default = " = None"
            elif field_args:
                default = f" = Field({', '.join(field_args)})"
                self.imports.add("pydantic", "Field")
            else:
                default = ""

            fields.append(
                {"name": field_def.name, "type": self._field_type(field_def), "default": default}
            )

        if has_alias:
            self.imports.add("pydantic", "ConfigDict")

        return {"fields": fields, "populate_by_name": has_alias}

    def _typeddict_context(self, shape: ObjectShape) -> Dict[str, Any]:
        fields = [
            {"key": field_def.key, "type": self._field_type(field_def)}
            for field_def in shape.fields
        ]
        # Keys that are not identifiers need the functional syntax
        functional = any(
            not f["key"].isidentifier() or keyword.iskeyword(f["key"]) for f in fields
        )
        return {"fields": fields, "functional": functional}

    def render_leaf(self, node: TypeNode) -> str:
        if isinstance(node, ObjectRef):
            return node.name
        if isinstance(node, BoolType):
            return "bool"
        if isinstance(node, IntType):
            return "int"
        if isinstance(node, FloatType):
            return "float"
        if isinstance(node, StrType):
            if node.format is not None and self.style != PythonStyle.TYPEDDICT:
                return PYTHON_FORMAT_MAP.get(node.format, "str")
            return "str"
        return self.unknown_type

    def wrap_array(self, element: str) -> str:
        return f"list[{element}]"

    def validate_graph(self, graph: SchemaGraph) -> List[str]:
        """Validate graph for Python generation."""
        warnings = super().validate_graph(graph)

        if self.style == PythonStyle.TYPEDDICT:
            warnings.append("TypedDict classes are type hints only - no runtime validation")
        elif self.style == PythonStyle.DATACLASS and graph.has_renamed_fields():
            if self.options.emit_aliases:
                warnings.append(
                    "Dataclass aliases are stored in field metadata; "
                    "a serializer must read them"
                )

        return warnings


def _quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
