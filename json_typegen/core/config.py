"""
Configuration management for code generation.

``GenerationOptions`` is the closed, immutable set of options for one
``generate`` call. ``ConfigManager`` merges options from JSON files and
explicit overrides; target-specific defaults are filled in and validated
by the selected generator before inference runs.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .graph import NamingPolicy
from .naming import NamingCase, parse_naming_case

DEFAULT_MAX_DEPTH = 1000


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class NullablePolicy(Enum):
    """How a JSON null is represented in typed targets."""

    WRAP = "wrap"  # optional/nullable wrapper type
    NONE = "none"  # the target's "any" type


@dataclass(frozen=True)
class GenerationOptions:
    """Options for a single generation run."""

    target: str = "python"
    root_name: str = "Root"

    # Naming: None selects the target's conventional field casing
    casing: Optional[NamingCase] = None
    naming_policy: NamingPolicy = NamingPolicy.LEGACY

    # Type handling
    nullable_policy: NullablePolicy = NullablePolicy.WRAP
    detect_formats: bool = True

    # Preserving original JSON keys when generated names differ
    emit_aliases: bool = True
    alias_style: Optional[str] = None

    # Output layout
    namespace: Optional[str] = None
    declaration_style: Optional[str] = None
    include_examples: bool = False

    # JSON Schema document
    description: Optional[str] = None
    required_by_default: bool = True

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        # Enum fields also accept their config-file spelling
        try:
            if self.casing is not None:
                object.__setattr__(self, "casing", parse_naming_case(self.casing))
            object.__setattr__(self, "naming_policy", NamingPolicy(self.naming_policy))
            object.__setattr__(self, "nullable_policy", NullablePolicy(self.nullable_policy))
        except (TypeError, ValueError) as e:
            raise ConfigError(str(e)) from e

    def replace(self, **changes: Any) -> "GenerationOptions":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationOptions":
        """
        Build options from a plain dictionary (e.g. a JSON config file).

        Raises:
            ConfigError: On unknown keys or invalid enum values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-JSON representation, the inverse of ``from_dict``."""
        result = {}
        for key, value in asdict(self).items():
            result[key] = value.value if isinstance(value, Enum) else value
        return result


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self, defaults: Optional[Dict[str, Any]] = None):
        """
        Initialize configuration manager.

        Args:
            defaults: Base values applied before files and overrides
        """
        self._defaults: Dict[str, Any] = dict(defaults or {})

    def get_options(
        self,
        target: Optional[str] = None,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GenerationOptions:
        """
        Get merged options: defaults, then file, then overrides.

        Args:
            target: Target language name
            custom_config: Explicit overrides
            config_file: Path to JSON configuration file

        Returns:
            GenerationOptions (target-specific defaults are applied later)
        """
        merged = dict(self._defaults)

        if config_file:
            merged.update(self._load_config_file(config_file))

        if custom_config:
            merged.update(custom_config)

        if target:
            merged["target"] = target

        return GenerationOptions.from_dict(merged)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def save_options(self, options: GenerationOptions, output_path: Union[str, Path]) -> None:
        """Save options to a JSON file loadable by ``get_options``."""
        path = Path(output_path)
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(options.to_dict(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e


def load_options(
    target: Optional[str] = None,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GenerationOptions:
    """
    Convenience function to load options.

    Args:
        target: Target language name
        custom_config: Explicit overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged GenerationOptions
    """
    return ConfigManager().get_options(target, custom_config, config_file)


# Example configuration file for reference
EXAMPLE_CONFIG = {
    "target": "csharp",
    "root_name": "Order",
    "namespace": "Shop.Models",
    "declaration_style": "record",
    "alias_style": "system_text_json",
    "naming_policy": "structural",
}
