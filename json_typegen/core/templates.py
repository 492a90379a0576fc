"""
Jinja2 environment shared by the template-based emitters.

Templates live next to each emitter (``languages/<target>/templates``).
Block tags are trimmed so a template line maps to one output line; the
emitters compute anything that would need inline conditionals in Python.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jinja2
from jinja2 import Environment, FileSystemLoader, StrictUndefined


class TemplateError(Exception):
    """Exception raised when a template cannot be loaded or rendered."""

    pass


class TemplateEngine:
    """Renders one target's templates with code generation filters."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing the ``*.j2`` files; None for
                emitters that build their output without templates
        """
        self.template_dir = template_dir
        self._env = self._create_environment()

    def _create_environment(self) -> Environment:
        loader = None
        if self.template_dir is not None and self.template_dir.is_dir():
            loader = FileSystemLoader(str(self.template_dir))

        env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )
        env.filters["quote"] = quote
        env.filters["indent_code"] = indent_code
        return env

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template file with the given context.

        Raises:
            TemplateError: If the template is missing or fails to render
        """
        if self._env.loader is None:
            raise TemplateError(f"No template directory for {template_name}")
        try:
            return self._env.get_template(template_name).render(**context)
        except jinja2.TemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e


# Filters


def quote(value: Any) -> str:
    """Double-quoted string literal valid in C-family targets."""
    return json.dumps(str(value))


def indent_code(value: str, spaces: int = 4) -> str:
    """Indent every non-blank line."""
    indent = " " * spaces
    return "\n".join(indent + line if line.strip() else line for line in str(value).split("\n"))
