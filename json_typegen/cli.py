"""
Command-line interface for type generation.

Usage:
    json-typegen data.json --language go --namespace models
    json-typegen --url https://example.com/data.json -l python --style pydantic
    json-typegen --stdin -l csharp -o Models.cs < data.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import generate
from .core.config import ConfigError, GenerationOptions, NullablePolicy, load_options
from .core.generator import GenerationResult
from .core.graph import NamingPolicy
from .logging_config import get_logger, setup_logging
from .registry import (
    RegistryError,
    get_target_info,
    get_registry,
    is_target_supported,
    list_all_target_info,
)
from .utils import JSONLoaderError, read_json_source, read_json_stream

logger = get_logger(__name__)


class CLIError(Exception):
    """Configuration or input problem reported by the CLI."""

    pass


# Initialize rich console; diagnostics go to stderr so stdout stays clean
console = Console(stderr=True)

# Pygments lexer names for syntax highlighting
_LEXERS = {
    "jsonschema": "json",
    "python": "python",
    "go": "go",
    "csharp": "csharp",
    "kotlin": "kotlin",
}


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="json-typegen",
        description="Generate type declarations from a JSON sample",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  json-typegen data.json --language go --namespace models
  json-typegen -l python --style pydantic --output models.py --stdin < data.json
  json-typegen --list-languages
  json-typegen --language-info kotlin
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="JSON file to read")
    input_group.add_argument("--url", help="URL to fetch JSON from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read JSON from standard input"
    )

    # Core generation options
    parser.add_argument(
        "--language", "-l", default="python", help="Target language (default: python)"
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument("--root-name", help="Name for the root type (default: Root)")
    parser.add_argument(
        "--namespace", "--package", help="Namespace/package for generated code"
    )

    # Naming and typing
    naming_group = parser.add_argument_group("naming and typing")
    naming_group.add_argument(
        "--field-case",
        choices=["preserve", "snake", "camel", "pascal"],
        help="Naming case for fields (default: target convention)",
    )
    naming_group.add_argument(
        "--naming-policy",
        choices=[policy.value for policy in NamingPolicy],
        help="How objects map to type names (default: legacy)",
    )
    naming_group.add_argument(
        "--nullable",
        choices=[policy.value for policy in NullablePolicy],
        help="Representation of JSON nulls (default: wrap)",
    )
    naming_group.add_argument(
        "--no-formats",
        action="store_true",
        help="Don't detect string formats (email, uuid, date-time, ...)",
    )

    # Output style
    style_group = parser.add_argument_group("output style")
    style_group.add_argument("--style", help="Declaration style (see --language-info)")
    style_group.add_argument("--alias-style", help="Alias/annotation style")
    style_group.add_argument(
        "--no-aliases",
        action="store_true",
        help="Don't annotate fields whose names differ from their JSON keys",
    )
    style_group.add_argument(
        "--examples",
        action="store_true",
        help="Include example values (JSON Schema only)",
    )
    style_group.add_argument("--description", help="Schema description (JSON Schema only)")
    style_group.add_argument(
        "--no-required",
        action="store_true",
        help="Omit 'required' lists (JSON Schema only)",
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed info about a language and exit",
    )
    info_group.add_argument(
        "--verbose", "-v", action="store_true", help="Show metadata and debug logging"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``json-typegen`` command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.list_languages:
            return _list_targets()

        if args.language_info:
            return _show_target_info(args.language_info)

        if not (args.file or args.url or args.stdin):
            console.print("[red]✗[/red] Input source required (file, --url, or --stdin)")
            return 1

        if not _check_target(args.language):
            return 1

        options = _build_options(args)
        source, text = _get_input(args)
        logger.debug("Generating %s code from %s", options.target, source)

        result = generate(text, options)
        return _output_result(result, options, args)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _list_targets() -> int:
    """Print the table of output targets."""
    target_info = list_all_target_info()

    table = Table(title="📋 Output Targets", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Target", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Styles")
    table.add_column("Aliases", style="blue")

    for target, info in sorted(target_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        styles = ", ".join(info["declaration_styles"]) or "[dim]n/a[/dim]"
        table.add_row(f"🔧 {target}", info["file_extension"], styles, aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] json-typegen [dim]input.json[/dim] --language [cyan]TARGET[/cyan]\n"
            "[bold]Info:[/bold] json-typegen --language-info [cyan]TARGET[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _show_target_info(name: str) -> int:
    """Print styles and conventions of one target."""
    if not _check_target(name):
        return 1

    info = get_target_info(name)

    info_text = (
        f"[bold]Target:[/bold] {info['name']}\n"
        f"[bold]File Extension:[/bold] {info['file_extension']}\n"
        f"[bold]Generator Class:[/bold] {info['class']}\n"
        f"[bold]Field Case:[/bold] {info['default_casing']}\n"
        f"[bold]Namespace:[/bold] {'yes' if info['supports_namespace'] else 'no'}"
    )
    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {info['name'].title()} Generator", border_style="green")
    )

    table = Table(
        title="⚙️  Styles",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Option", style="bold")
    table.add_column("Values (first is default)", style="green")
    table.add_row("--style", ", ".join(info["declaration_styles"]) or "n/a")
    table.add_row("--alias-style", ", ".join(info["alias_styles"]) or "n/a")

    console.print()
    console.print(table)
    return 0


def _check_target(name: str) -> bool:
    """Report an unknown target name; True if the name is usable."""
    if not is_target_supported(name):
        console.print(f"[red]✗ Unknown target '{name}'[/red]")
        console.print(f"[dim]Available: {', '.join(get_registry().targets())}[/dim]")
        return False
    return True


def _build_options(args: argparse.Namespace) -> GenerationOptions:
    """Merge the config file with command-line overrides."""
    overrides: Dict[str, Any] = {}

    if args.root_name:
        overrides["root_name"] = args.root_name
    if args.namespace:
        overrides["namespace"] = args.namespace
    if args.field_case:
        overrides["casing"] = args.field_case
    if args.naming_policy:
        overrides["naming_policy"] = args.naming_policy
    if args.nullable:
        overrides["nullable_policy"] = args.nullable
    if args.no_formats:
        overrides["detect_formats"] = False
    if args.no_aliases:
        overrides["emit_aliases"] = False
    if args.alias_style:
        overrides["alias_style"] = args.alias_style
    if args.style:
        overrides["declaration_style"] = args.style
    if args.examples:
        overrides["include_examples"] = True
    if args.description:
        overrides["description"] = args.description
    if args.no_required:
        overrides["required_by_default"] = False

    try:
        target = get_registry().resolve(args.language)
        return load_options(target, custom_config=overrides, config_file=args.config)
    except (ConfigError, RegistryError) as e:
        raise CLIError(f"Configuration error: {e}") from e


def _get_input(args: argparse.Namespace) -> tuple[str, str]:
    """Read the JSON document text from the selected source."""
    try:
        if args.stdin:
            return read_json_stream()
        return read_json_source(file_path=args.file, url=args.url)
    except (JSONLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _output_result(
    result: GenerationResult, options: GenerationOptions, args: argparse.Namespace
) -> int:
    """Write generated code and report warnings and metadata."""
    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(
            f"[green]✓[/green] Generated {options.target} code saved to [cyan]{output_path}[/cyan]"
        )
    elif sys.stdout.isatty():
        stdout = Console()
        stdout.print(Syntax(result.code, _LEXERS.get(options.target, "text"), theme="monokai"))
    else:
        sys.stdout.write(result.code)

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
