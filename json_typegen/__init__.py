"""
JSON Typegen

Infers a schema from one JSON sample and generates type declarations for
several targets (JSON Schema, Python, Go, C#, Kotlin).
"""

import json
from typing import Any, Optional

from .core.config import (
    ConfigError,
    ConfigManager,
    GenerationOptions,
    NullablePolicy,
    load_options,
)
from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    InvalidJsonError,
    InvalidOptionsError,
    TooDeepError,
    generate_code,
)
from .core.graph import NamingPolicy, SchemaGraph, build_graph
from .core.inference import SchemaInferencer
from .core.naming import NamingCase
from .logging_config import get_logger
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_target_info,
    get_registry,
    list_targets,
)

logger = get_logger(__name__)

# Version info
__version__ = "0.1.0"


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"{name} is not valid JSON")


def generate(
    raw_json_text: Any, options: Optional[GenerationOptions] = None
) -> GenerationResult:
    """
    Generate type declarations from a JSON sample.

    Options are validated before the input is parsed. Expected failures
    (invalid options, invalid JSON, excessive nesting) are returned as a
    failed result rather than raised.

    Args:
        raw_json_text: JSON document as text (or bytes)
        options: Generation options; defaults to ``GenerationOptions()``

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    options = options or GenerationOptions()

    try:
        generator = get_registry().create(options.target, options)
    except (RegistryError, ConfigError) as e:
        return GenerationResult.failure(InvalidOptionsError(str(e)))
    except InvalidOptionsError as e:
        return GenerationResult.failure(e)

    try:
        data = json.loads(raw_json_text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        return GenerationResult.failure(
            InvalidJsonError(f"Invalid JSON at line {e.lineno} column {e.colno}: {e.msg}")
        )
    except RecursionError:
        return GenerationResult.failure(
            TooDeepError("JSON nesting is too deep for the parser")
        )
    except (TypeError, ValueError) as e:
        return GenerationResult.failure(InvalidJsonError(f"Invalid JSON input: {e}"))

    inferencer = SchemaInferencer(
        detect_formats=generator.options.detect_formats,
        max_depth=generator.options.max_depth,
    )
    try:
        root_node = inferencer.infer(data, generator.options.root_name)
    except TooDeepError as e:
        return GenerationResult.failure(e)

    graph = build_graph(
        root_node,
        generator.options.root_name,
        generator.sanitizer,
        generator.field_case,
        generator.options.naming_policy,
    )

    result = generate_code(generator, graph)
    result.warnings = inferencer.warnings + result.warnings

    if result.success:
        logger.info(
            "Generated %s code with %d types", generator.language_name, len(graph.types)
        )
    else:
        logger.debug("Generation failed: %s", result.error_message)
    return result


def quick_generate(json_data: Any, language: str = "python", **options: Any) -> str:
    """
    Quick code generation from JSON data.

    Args:
        json_data: JSON text, or already-parsed data (dict/list/scalar)
        language: Target name or alias
        **options: ``GenerationOptions`` fields, as plain values

    Returns:
        Generated code string

    Raises:
        ConfigError: On unknown or malformed options
        GeneratorError: If generation fails
    """
    if not isinstance(json_data, (str, bytes)):
        json_data = json.dumps(json_data)

    generation_options = GenerationOptions.from_dict({**options, "target": language})
    result = generate(json_data, generation_options)

    if result.success:
        return result.code
    raise result.error


# Export main interfaces
__all__ = [
    "generate",
    "quick_generate",
    "GenerationOptions",
    "GenerationResult",
    "NamingCase",
    "NamingPolicy",
    "NullablePolicy",
    "SchemaGraph",
    "CodeGenerator",
    "GeneratorRegistry",
    "ConfigManager",
    "load_options",
    # Errors
    "GeneratorError",
    "InvalidJsonError",
    "InvalidOptionsError",
    "TooDeepError",
    "ConfigError",
    "RegistryError",
    # Registry helpers
    "get_generator",
    "get_target_info",
    "list_targets",
]
