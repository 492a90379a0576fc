import pytest

from json_typegen import GenerationOptions, generate, quick_generate
from json_typegen.languages.go import GoGenerator


SAMPLE = {
    "id": 1,
    "user_name": "ada",
    "created": "2024-01-01T00:00:00Z",
    "n": None,
    "big": 2147483648,
    "ratio": 0.5,
    "tags": ["a"],
    "ok": True,
}


def go(data, **options):
    return quick_generate(data, "go", **options)


class TestGoStructs:
    """Go struct output"""

    def test_package_and_import(self):
        code = go(SAMPLE)
        assert code.startswith('package main\n\nimport "time"\n\ntype Root struct {\n')

    @pytest.mark.parametrize(
        "line",
        [
            '\tId int `json:"id"`',
            '\tUserName string `json:"user_name"`',
            '\tCreated time.Time `json:"created"`',
            '\tN *string `json:"n"`',
            '\tBig int64 `json:"big"`',
            '\tRatio float64 `json:"ratio"`',
            '\tTags []string `json:"tags"`',
            '\tOk bool `json:"ok"`',
        ],
    )
    def test_field_lines(self, line):
        assert line + "\n" in go(SAMPLE)

    def test_nested_struct_follows_root(self):
        code = go({"profile": {"age": 3}})
        assert code.index("type Root struct") < code.index("type Profile struct")
        assert '\tProfile Profile `json:"profile"`' in code

    def test_namespace_sets_package(self):
        assert go({"a": 1}, namespace="Shop.Models").startswith("package models\n")

    def test_omitempty_only_on_nullable(self):
        code = go(SAMPLE, alias_style="json_omitempty")
        assert '`json:"n,omitempty"`' in code
        assert '`json:"id"`' in code

    def test_no_tags_without_aliases(self):
        code = go({"id": 1}, emit_aliases=False)
        assert "\tId int\n" in code
        assert "`" not in code

    def test_no_time_import_without_formats(self):
        code = go({"created": "2024-01-01T00:00:00Z"}, detect_formats=False)
        assert "import" not in code
        assert "Created string" in code

    def test_quote_in_key_is_escaped(self):
        assert '`json:"a\\"b"`' in go({'a"b': 1})

    def test_backtick_in_key_uses_interpreted_literal(self):
        assert '"json:\\"a`b\\""' in go({"a`b": 1})

    def test_digit_leading_key_stays_exported(self):
        assert "\tX1st int" in go({"1st": 1})

    def test_empty_array(self):
        assert "\tTags []interface{}" in go({"tags": []})

    @pytest.mark.parametrize(
        "document, expected",
        [("[1]", "type Root = []int"), ('"x"', "type Root = string")],
    )
    def test_scalar_root_alias(self, document, expected):
        assert expected in go(document)


class TestGoWarnings:
    """Go-specific warnings"""

    def test_comma_in_key(self):
        result = generate('{"a,b": 1}', GenerationOptions(target="go"))
        assert result.success
        assert any("contains a comma" in warning for warning in result.warnings)

    def test_package_and_omitempty_options(self):
        generator = GoGenerator(
            GenerationOptions(target="go", namespace="models", alias_style="json_omitempty")
        )
        assert generator.options.namespace == "models"
        assert generator.options.alias_style == "json_omitempty"
        assert generator.package_name == "models"
