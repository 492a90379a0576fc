"""
Core pipeline: type inference, naming, the schema graph and the emitter base.
"""

from .config import (
    DEFAULT_MAX_DEPTH,
    ConfigError,
    ConfigManager,
    GenerationOptions,
    NullablePolicy,
    load_options,
)
from .formats import FormatTag, detect_format
from .generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    InvalidJsonError,
    InvalidOptionsError,
    TooDeepError,
    generate_code,
)
from .graph import FieldDef, GraphBuilder, NamingPolicy, ObjectShape, SchemaGraph, build_graph
from .inference import SchemaInferencer, infer_type
from .naming import NameSanitizer, NamingCase, parse_naming_case
from .nodes import (
    ArrayType,
    BoolType,
    FloatType,
    IntType,
    NullType,
    ObjectRef,
    ObjectType,
    Property,
    StrType,
    TypeNode,
    UnknownType,
    array_depth,
    describe,
)
from .templates import TemplateEngine, TemplateError

__all__ = [
    # Options
    "DEFAULT_MAX_DEPTH",
    "ConfigError",
    "ConfigManager",
    "GenerationOptions",
    "NullablePolicy",
    "load_options",
    # Inference
    "FormatTag",
    "detect_format",
    "SchemaInferencer",
    "infer_type",
    # Nodes
    "ArrayType",
    "BoolType",
    "FloatType",
    "IntType",
    "NullType",
    "ObjectRef",
    "ObjectType",
    "Property",
    "StrType",
    "TypeNode",
    "UnknownType",
    "array_depth",
    "describe",
    # Naming and graph
    "NameSanitizer",
    "NamingCase",
    "parse_naming_case",
    "FieldDef",
    "GraphBuilder",
    "NamingPolicy",
    "ObjectShape",
    "SchemaGraph",
    "build_graph",
    # Emitters
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "InvalidJsonError",
    "InvalidOptionsError",
    "TooDeepError",
    "generate_code",
    "TemplateEngine",
    "TemplateError",
]
