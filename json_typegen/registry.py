"""
Registry of output targets.

Maps target names and their aliases (``py``, ``golang``, ``c#``, ...) to
``CodeGenerator`` subclasses and builds generators with validated options.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import GenerationOptions, load_options
from .core.generator import CodeGenerator
from .logging_config import get_logger

logger = get_logger(__name__)

OptionsSource = Union[GenerationOptions, Dict[str, Any], str, Path, None]


class RegistryError(Exception):
    """Raised for unknown targets and invalid registrations."""

    pass


class GeneratorRegistry:
    """Target name and alias lookup for code generators."""

    def __init__(self):
        self._targets: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        target: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator class under a target name.

        Args:
            target: Primary target name (e.g. 'go', 'jsonschema')
            generator_class: ``CodeGenerator`` subclass
            aliases: Alternative names for the target
            replace: Overwrite an existing registration instead of keeping it

        Raises:
            RegistryError: If the class is not a generator or an alias is taken
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        key = target.lower()
        if key in self._targets and not replace:
            logger.debug("Target %s already registered; keeping %s", key, self._targets[key])
            return
        self._targets[key] = generator_class

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == key:
                continue
            if not replace:
                if alias_key in self._targets:
                    raise RegistryError(f"Alias '{alias}' conflicts with existing primary target")
                owner = self._aliases.get(alias_key)
                if owner is not None and owner != key:
                    raise RegistryError(f"Alias '{alias}' already points to '{owner}'")
            self._aliases[alias_key] = key

    def unregister(self, target: str):
        """Remove a target together with its aliases."""
        key = target.lower()
        self._targets.pop(key, None)
        self._aliases = {alias: t for alias, t in self._aliases.items() if t != key}

    def resolve(self, name: str) -> str:
        """
        Primary target name for a target name or alias.

        Raises:
            RegistryError: If nothing is registered under the name
        """
        key = name.lower()
        if key in self._targets:
            return key
        if key in self._aliases:
            return self._aliases[key]
        raise RegistryError(
            f"No generator registered for target: {name}. "
            f"Available: {', '.join(self.targets())}"
        )

    def generator_class_for(self, name: str) -> Type[CodeGenerator]:
        return self._targets[self.resolve(name)]

    def create(self, name: str, options: OptionsSource = None) -> CodeGenerator:
        """
        Instantiate the generator for a target.

        Args:
            name: Target name or alias
            options: GenerationOptions (its ``target`` is overridden), a dict
                of overrides, a JSON config file path, or None for defaults

        Raises:
            RegistryError: If the target is unknown or options have the wrong type
            InvalidOptionsError: If the options are invalid for the target
            ConfigError: If a config file or dict cannot be loaded
        """
        target = self.resolve(name)
        generator_class = self._targets[target]

        if isinstance(options, GenerationOptions):
            resolved = options.replace(target=target)
        elif isinstance(options, dict):
            resolved = load_options(target, custom_config=options)
        elif isinstance(options, (str, Path)):
            resolved = load_options(target, config_file=options)
        elif options is None:
            resolved = load_options(target)
        else:
            raise RegistryError(f"Invalid options type: {type(options)}")

        return generator_class(resolved)

    def targets(self) -> List[str]:
        """Sorted primary target names."""
        return sorted(self._targets)

    def aliases_of(self, target: str) -> List[str]:
        key = target.lower()
        return sorted(alias for alias, t in self._aliases.items() if t == key)

    def names(self) -> Dict[str, List[str]]:
        """Every accepted name per primary target, primary name first."""
        return {target: [target] + self.aliases_of(target) for target in self._targets}

    def supports(self, name: str) -> bool:
        key = name.lower()
        return key in self._targets or key in self._aliases

    def describe(self, name: str) -> Dict[str, Any]:
        """
        Summary of a target's generator, as shown by ``--language-info``.

        Raises:
            RegistryError: If the target is unknown
        """
        target = self.resolve(name)
        generator_class = self._targets[target]
        generator = generator_class(GenerationOptions(target=target))

        return {
            "name": generator.language_name,
            "class": generator_class.__name__,
            "module": generator_class.__module__,
            "file_extension": generator.file_extension,
            "aliases": self.aliases_of(target),
            "declaration_styles": list(generator_class.declaration_styles),
            "alias_styles": list(generator_class.alias_styles),
            "default_casing": generator_class.default_casing.value,
            "supports_namespace": generator_class.supports_namespace,
        }


_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """The process-wide registry, with the built-in targets registered."""
    global _registry
    if _registry is None:
        _registry = GeneratorRegistry()
        _register_builtin_targets(_registry)
    return _registry


def _register_builtin_targets(registry: GeneratorRegistry):
    from .languages.csharp import CSharpGenerator
    from .languages.go import GoGenerator
    from .languages.jsonschema import JsonSchemaGenerator
    from .languages.kotlin import KotlinGenerator
    from .languages.python import PythonGenerator

    registry.register("jsonschema", JsonSchemaGenerator, aliases=["schema", "json-schema"])
    registry.register("python", PythonGenerator, aliases=["py"])
    registry.register("go", GoGenerator, aliases=["golang"])
    registry.register("csharp", CSharpGenerator, aliases=["cs", "c#"])
    registry.register("kotlin", KotlinGenerator, aliases=["kt"])


# Shortcuts over the process-wide registry


def get_generator(target: str, options: OptionsSource = None) -> CodeGenerator:
    """Generator instance for a target name or alias."""
    return get_registry().create(target, options)


def list_targets() -> List[str]:
    return get_registry().targets()


def is_target_supported(name: str) -> bool:
    return get_registry().supports(name)


def get_target_info(name: str) -> Dict[str, Any]:
    return get_registry().describe(name)


def list_all_target_info() -> Dict[str, Dict[str, Any]]:
    return {target: get_target_info(target) for target in list_targets()}
