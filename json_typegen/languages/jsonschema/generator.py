"""
JSON Schema generator implementation.

Emits a draft 2020-12 schema document. Unlike the source-code targets the
document is assembled as plain dictionaries and serialized with ``json``,
so no templates are involved.
"""

import json
import math
from typing import Any, Dict, List, Optional

from ...core.config import GenerationOptions, NullablePolicy
from ...core.generator import CodeGenerator
from ...core.graph import FieldDef, ObjectShape, SchemaGraph
from ...core.naming import NamingCase
from ...core.nodes import (
    BoolType,
    FloatType,
    IntType,
    NullType,
    ObjectRef,
    StrType,
    TypeNode,
    UnknownType,
    array_depth,
)

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

Schema = Dict[str, Any]


class JsonSchemaGenerator(CodeGenerator):
    """Generator for JSON Schema (draft 2020-12) documents."""

    # Keys are kept verbatim; there is nothing to alias
    default_casing = NamingCase.PRESERVE
    supports_schema_document = True

    def __init__(self, options: Optional[GenerationOptions] = None):
        super().__init__(options)
        self._graph: Optional[SchemaGraph] = None

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "jsonschema"

    @property
    def file_extension(self) -> str:
        """Return JSON Schema file extension."""
        return ".schema.json"

    @property
    def field_case(self) -> NamingCase:
        return NamingCase.PRESERVE

    def generate(self, graph: SchemaGraph) -> str:
        """Generate the schema document for a graph."""
        self._graph = graph

        document: Schema = {"$schema": SCHEMA_DIALECT, "title": graph.root}
        if self.options.description:
            document["description"] = self.options.description

        if graph.root_is_object:
            document.update(self.object_schema(graph.types[graph.root]))
        else:
            document.update(self.render_type(graph.root_node))

        defs = {
            shape.name: self.object_schema(shape)
            for shape in graph.ordered_types()
            if not (graph.root_is_object and shape.name == graph.root)
        }
        if defs:
            document["$defs"] = defs

        return json.dumps(document, indent=2, ensure_ascii=False)

    def object_schema(self, shape: ObjectShape) -> Schema:
        """Schema of one named object type."""
        properties = {f.key: self._property_schema(f) for f in shape.fields}
        schema: Schema = {"type": "object", "properties": properties}

        required = [f.key for f in shape.fields if not f.nullable]
        if required and self.options.required_by_default:
            schema["required"] = required
        return schema

    def _property_schema(self, field_def: FieldDef) -> Schema:
        schema = self.render_type(field_def.node)
        example = field_def.example
        if self.options.include_examples and example is not None:
            if not (isinstance(example, float) and not math.isfinite(example)):
                schema["examples"] = [example]
        return schema

    # Type rendering produces schema fragments instead of type expressions

    def render_type(self, node: TypeNode) -> Schema:
        depth, leaf = array_depth(node)
        if isinstance(leaf, NullType):
            schema = self.render_null()
        elif isinstance(leaf, UnknownType):
            schema = {}
        else:
            schema = self.render_leaf(leaf)
        for _ in range(depth):
            schema = self.wrap_array(schema)
        return schema

    def render_null(self) -> Schema:
        if self.options.nullable_policy == NullablePolicy.WRAP:
            return {"type": ["string", "null"]}
        return {}

    def render_leaf(self, node: TypeNode) -> Schema:
        if isinstance(node, ObjectRef):
            return {"$ref": self.ref_for(node.name)}
        if isinstance(node, BoolType):
            return {"type": "boolean"}
        if isinstance(node, IntType):
            return {"type": "integer"}
        if isinstance(node, FloatType):
            return {"type": "number"}
        if isinstance(node, StrType):
            if node.format is not None:
                return {"type": "string", "format": node.format.value}
            return {"type": "string"}
        return {}

    def wrap_array(self, element: Schema) -> Schema:
        return {"type": "array", "items": element}

    def ref_for(self, name: str) -> str:
        """JSON pointer to a named type; the root object is the document itself."""
        graph = self._graph
        if graph is not None and graph.root_is_object and name == graph.root:
            return "#"
        return f"#/$defs/{name}"

    def validate_graph(self, graph: SchemaGraph) -> List[str]:
        # Empty objects are legitimate schemas; only report broken invariants
        return [f"Graph invariant violated: {problem}" for problem in graph.validate()]
