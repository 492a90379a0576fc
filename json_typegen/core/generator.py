"""
Base generator interface for all code generation targets.

Defines the contract that all language generators (emitters) implement,
the error taxonomy of a generation run, and the result container returned
to callers.
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .config import GenerationOptions, NullablePolicy
from .graph import FieldDef, SchemaGraph
from .naming import NameSanitizer, NamingCase
from .nodes import NullType, TypeNode, UnknownType, array_depth
from .templates import TemplateEngine, TemplateError


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    kind = "generator_error"


class InvalidJsonError(GeneratorError):
    """The input text is not valid JSON."""

    kind = "invalid_json"


class TooDeepError(GeneratorError):
    """The input nests deeper than the configured safety bound."""

    kind = "too_deep"


class InvalidOptionsError(GeneratorError):
    """The generation options are invalid for the selected target."""

    kind = "invalid_options"


_NAMESPACE_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*")


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    # Target conventions, overridden by subclasses
    default_casing: NamingCase = NamingCase.PRESERVE
    declaration_styles: Tuple[str, ...] = ()
    alias_styles: Tuple[str, ...] = ()
    supports_namespace: bool = False
    # Accepts the document-level description and required_by_default options
    supports_schema_document: bool = False

    # Type used for values with no inferable type
    unknown_type: str = "any"

    # Wrapped placeholder used for JSON nulls under NullablePolicy.WRAP
    nullable_type: str = "any"

    def __init__(self, options: Optional[GenerationOptions] = None):
        """Initialize generator with resolved options."""
        if options is None:
            options = GenerationOptions(target=self.language_name)
        self.options = self.resolve_options(options)
        self.sanitizer = self.create_sanitizer()
        self._template_engine: Optional[TemplateEngine] = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go', 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go', '.py')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Template-based targets override this; None means the target builds
        its output without templates.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = TemplateEngine(self.get_template_directory())
        return self._template_engine

    def create_sanitizer(self) -> NameSanitizer:
        """Name sanitizer carrying this target's reserved words."""
        return NameSanitizer()

    @property
    def field_case(self) -> NamingCase:
        return self.options.casing or self.default_casing

    # Options

    @classmethod
    def validate_options(cls, options: GenerationOptions) -> List[str]:
        """
        Check options against this target.

        Returns:
            List of problems (empty if the options are usable)
        """
        problems = []

        root_name = options.root_name
        if not isinstance(root_name, str) or not re.search(r"[A-Za-z0-9]", root_name):
            problems.append(f"Invalid root name: {root_name!r}")

        max_depth = options.max_depth
        if not isinstance(max_depth, int) or isinstance(max_depth, bool):
            problems.append(f"max_depth must be an integer, got {max_depth!r}")
        elif max_depth < 1:
            problems.append(f"max_depth must be positive, got {max_depth}")

        style = options.declaration_style
        if style is not None and style not in cls.declaration_styles:
            valid = ", ".join(cls.declaration_styles) or "none"
            problems.append(
                f"Unsupported declaration style '{style}' (valid: {valid})"
            )

        if options.alias_style is not None:
            if not options.emit_aliases:
                problems.append(
                    f"alias_style '{options.alias_style}' given but aliases are disabled"
                )
            elif options.alias_style not in cls.alias_styles:
                valid = ", ".join(cls.alias_styles) or "none"
                problems.append(
                    f"Unsupported alias style '{options.alias_style}' (valid: {valid})"
                )

        if options.namespace is not None:
            if not cls.supports_namespace:
                problems.append("This target does not support a namespace/package")
            elif not _NAMESPACE_RE.fullmatch(options.namespace):
                problems.append(f"Invalid namespace: {options.namespace!r}")

        if not cls.supports_schema_document:
            if options.description is not None:
                problems.append("description applies only to the jsonschema target")
            if not options.required_by_default:
                problems.append("required_by_default applies only to the jsonschema target")
        elif options.description is not None and not isinstance(options.description, str):
            problems.append(f"description must be a string, got {options.description!r}")

        return problems

    @classmethod
    def resolve_options(cls, options: GenerationOptions) -> GenerationOptions:
        """
        Validate options and fill in target defaults.

        Raises:
            InvalidOptionsError: If any option is invalid for this target
        """
        problems = cls.validate_options(options)
        if problems:
            raise InvalidOptionsError("; ".join(problems))

        changes: Dict[str, Any] = {}
        if options.declaration_style is None and cls.declaration_styles:
            changes["declaration_style"] = cls.declaration_styles[0]
        if options.alias_style is None and options.emit_aliases and cls.alias_styles:
            changes["alias_style"] = cls.alias_styles[0]
        return options.replace(**changes) if changes else options

    # Rendering

    @abstractmethod
    def generate(self, graph: SchemaGraph) -> str:
        """
        Generate code for all types of a schema graph.

        Args:
            graph: Named schema graph, root first in ``ordered_types()``

        Returns:
            Generated code as a string
        """
        pass

    def render_type(self, node: TypeNode) -> str:
        """Render a type expression, unwrapping arrays without recursion."""
        depth, leaf = array_depth(node)
        if isinstance(leaf, NullType):
            rendered = self.render_null()
        elif isinstance(leaf, UnknownType):
            rendered = self.unknown_type
        else:
            rendered = self.render_leaf(leaf)
        for _ in range(depth):
            rendered = self.wrap_array(rendered)
        return rendered

    def render_null(self) -> str:
        """Type for a JSON null under the configured nullable policy."""
        if self.options.nullable_policy == NullablePolicy.WRAP:
            return self.nullable_type
        return self.unknown_type

    @abstractmethod
    def render_leaf(self, node: TypeNode) -> str:
        """Render a non-array, non-null, non-unknown node."""
        pass

    @abstractmethod
    def wrap_array(self, element: str) -> str:
        """Render the collection type for an element type expression."""
        pass

    def should_alias(self, field_def: FieldDef) -> bool:
        """Whether a field needs an annotation preserving its JSON key."""
        return self.options.emit_aliases and field_def.is_renamed

    def validate_graph(self, graph: SchemaGraph) -> List[str]:
        """
        Validate a graph for structural issues.

        Language generators may override this to add language-specific checks.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for shape in graph.types.values():
            if not shape.fields:
                warnings.append(f"Type '{shape.name}' has no fields")

        for problem in graph.validate():
            warnings.append(f"Graph invariant violated: {problem}")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code, ending with a single newline
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Silent degradations and other notices from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error: Optional[GeneratorError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error else None

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error else None

    @classmethod
    def failure(cls, error: GeneratorError) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error = error
        return result

    def __repr__(self) -> str:
        if self.success:
            return f"GenerationResult(success=True, lines={self.code.count(chr(10))})"
        return f"GenerationResult(success=False, error={self.error!r})"


def generate_code(generator: CodeGenerator, graph: SchemaGraph) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        graph: Schema graph to render

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = list(graph.warnings)
        warnings.extend(generator.validate_graph(graph))

        code = generator.format_code(generator.generate(graph))

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "type_count": len(graph.types),
            "root": graph.root,
            "naming_policy": generator.options.naming_policy.value,
            "declaration_style": generator.options.declaration_style,
            "has_unknowns": any(
                isinstance(leaf, UnknownType) for leaf in graph.iter_leaf_nodes()
            ),
        }

        return GenerationResult(code, warnings, metadata)

    except TemplateError as e:
        return GenerationResult.failure(GeneratorError(f"Code generation failed: {e}"))
