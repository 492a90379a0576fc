import pytest

from json_typegen import GenerationOptions, GeneratorRegistry, RegistryError
from json_typegen.languages.go import GoGenerator
from json_typegen.languages.python import PythonGenerator
from json_typegen.registry import (
    get_generator,
    get_target_info,
    get_registry,
    list_all_target_info,
    list_targets,
)


class TestGlobalRegistry:
    """Built-in targets"""

    def test_languages(self):
        assert list_targets() == ["csharp", "go", "jsonschema", "kotlin", "python"]

    @pytest.mark.parametrize(
        "name, primary",
        [
            ("py", "python"),
            ("golang", "go"),
            ("cs", "csharp"),
            ("C#", "csharp"),
            ("kt", "kotlin"),
            ("schema", "jsonschema"),
            ("json-schema", "jsonschema"),
            ("Python", "python"),
        ],
    )
    def test_aliases(self, name, primary):
        assert get_registry().resolve(name) == primary
        assert get_generator(name).options.target == primary

    def test_unknown_target(self):
        with pytest.raises(RegistryError, match="Available: csharp, go"):
            get_generator("cobol")

    def test_options_target_follows_language(self):
        generator = get_generator("go", GenerationOptions(target="python"))
        assert isinstance(generator, GoGenerator)
        assert generator.options.target == "go"

    def test_dict_options(self):
        generator = get_generator("kotlin", {"alias_style": "gson"})
        assert generator.options.alias_style == "gson"

    def test_invalid_options_type(self):
        with pytest.raises(RegistryError, match="Invalid options type"):
            get_generator("go", 42)

    def test_target_info(self):
        info = get_target_info("cs")
        assert info["name"] == "csharp"
        assert info["file_extension"] == ".cs"
        assert info["aliases"] == ["c#", "cs"]
        assert info["declaration_styles"] == ["class", "record"]
        assert info["alias_styles"] == ["system_text_json", "newtonsoft"]
        assert info["default_casing"] == "pascal"
        assert info["supports_namespace"] is True

    def test_all_target_info(self):
        info = list_all_target_info()
        assert set(info) == set(list_targets())
        assert info["jsonschema"]["file_extension"] == ".schema.json"
        assert info["python"]["supports_namespace"] is False


class TestGeneratorRegistry:
    """Registration rules on a fresh registry"""

    def test_register_and_unregister(self):
        registry = GeneratorRegistry()
        registry.register("python", PythonGenerator, aliases=["py"])

        assert registry.supports("py")
        assert registry.names() == {"python": ["python", "py"]}

        registry.unregister("python")
        assert not registry.supports("py")
        assert registry.targets() == []

    def test_rejects_non_generator(self):
        with pytest.raises(RegistryError, match="must inherit"):
            GeneratorRegistry().register("x", dict)

    def test_alias_conflict(self):
        registry = GeneratorRegistry()
        registry.register("python", PythonGenerator)
        with pytest.raises(RegistryError, match="conflicts"):
            registry.register("go", GoGenerator, aliases=["python"])

    def test_alias_already_taken(self):
        registry = GeneratorRegistry()
        registry.register("python", PythonGenerator, aliases=["p"])
        with pytest.raises(RegistryError, match="already points"):
            registry.register("go", GoGenerator, aliases=["p"])

    def test_existing_registration_kept_unless_replaced(self):
        registry = GeneratorRegistry()
        registry.register("lang", PythonGenerator)
        registry.register("lang", GoGenerator)
        assert registry.generator_class_for("lang") is PythonGenerator

        registry.register("lang", GoGenerator, replace=True)
        assert registry.generator_class_for("lang") is GoGenerator
