import pytest

from json_typegen import quick_generate


def python(data, **options):
    return quick_generate(data, "python", **options)


class TestDataclassStyle:
    """Default Python output: dataclasses"""

    def test_basic_output(self):
        code = python({"id": 1, "userName": "ada", "profile": {"age": 3}})

        assert code == (
            "from __future__ import annotations\n"
            "from dataclasses import dataclass, field\n"
            "\n"
            "\n"
            "@dataclass\n"
            "class Root:\n"
            "    id: int\n"
            '    user_name: str = field(metadata={"alias": "userName"})\n'
            "    profile: Profile\n"
            "\n"
            "\n"
            "@dataclass\n"
            "class Profile:\n"
            "    age: int\n"
        )

    def test_required_after_optional_needs_kw_only(self):
        assert "@dataclass(kw_only=True)\n" in python({"a": None, "b": 1})
        assert "@dataclass\n" in python({"b": 1, "a": None})

    def test_nullable_alias_keeps_default(self):
        code = python({"noteText": None})
        assert 'note_text: str | None = field(default=None, metadata={"alias": "noteText"})' in code

    def test_formats_map_to_richer_types(self):
        code = python(
            {
                "created": "2024-01-01T00:00:00Z",
                "uid": "123e4567-e89b-12d3-a456-426614174000",
                "day": "2024-01-01",
                "at": "10:00:00",
                "mail": "ada@example.com",
            }
        )

        assert "from datetime import date, datetime, time" in code
        assert "from uuid import UUID" in code
        assert "created: datetime" in code
        assert "uid: UUID" in code
        assert "day: date" in code
        assert "at: time" in code
        assert "mail: str" in code

    def test_formats_can_be_disabled(self):
        code = python({"created": "2024-01-01T00:00:00Z"}, detect_formats=False)
        assert "created: str" in code
        assert "datetime" not in code

    def test_no_aliases(self):
        code = python({"userName": "ada"}, emit_aliases=False)
        assert "    user_name: str\n" in code
        assert "field" not in code

    def test_empty_object(self):
        assert "class Root:\n    pass\n" in python({})

    def test_shadowing_key_is_renamed(self):
        code = python({"field": 1})
        assert 'field_: int = field(metadata={"alias": "field"})' in code

    def test_custom_casing(self):
        code = python({"user_name": "ada"}, casing="camel")
        assert 'userName: str = field(metadata={"alias": "user_name"})' in code


class TestPydanticStyle:
    """Pydantic v2 models"""

    def test_aliases_and_populate_by_name(self):
        code = python({"userName": "ada", "note": None}, declaration_style="pydantic")

        assert "from pydantic import BaseModel, ConfigDict, Field" in code
        assert "class Root(BaseModel):\n" in code
        assert "    model_config = ConfigDict(populate_by_name=True)\n\n" in code
        assert '    user_name: str = Field(alias="userName")\n' in code
        assert "    note: str | None = None\n" in code

    def test_no_config_without_aliases(self):
        code = python({"name": "ada", "n": None}, declaration_style="pydantic")

        assert "from pydantic import BaseModel\n" in code
        assert "model_config" not in code
        assert "Field(" not in code

    def test_nullable_alias(self):
        code = python({"noteText": None}, declaration_style="pydantic")
        assert 'note_text: str | None = Field(default=None, alias="noteText")' in code


class TestTypedDictStyle:
    """TypedDict declarations keep JSON keys"""

    def test_class_syntax(self):
        code = python({"userName": "ada", "tags": ["x"]}, declaration_style="typeddict")

        assert "from typing import TypedDict" in code
        assert "class Root(TypedDict):\n    userName: str\n    tags: list[str]\n" in code

    def test_functional_syntax_for_invalid_identifiers(self):
        code = python({"user-name": "ada", "ok": True}, declaration_style="typeddict")

        assert code.endswith(
            "Root = TypedDict(\n"
            '    "Root",\n'
            "    {\n"
            '        "user-name": "str",\n'
            '        "ok": "bool",\n'
            "    },\n"
            ")\n"
        )

    def test_formats_stay_strings(self):
        code = python({"created": "2024-01-01T00:00:00Z"}, declaration_style="typeddict")
        assert "created: str" in code


class TestPythonTypes:
    """Type mapping"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, "bool"),
            (1, "int"),
            (2**40, "int"),
            (1.5, "float"),
            ("x", "str"),
            ([[1]], "list[list[int]]"),
            ([], "list[Any]"),
            (None, "str | None"),
        ],
    )
    def test_field_types(self, value, expected):
        assert f"    v: {expected}" in python({"v": value})

    def test_unknown_imports_any(self):
        assert "from typing import Any" in python({"tags": []})

    def test_nullable_none_policy(self):
        assert "n: Any = None" in python({"n": None}, nullable_policy="none")

    @pytest.mark.parametrize(
        "document, expected",
        [("42", "Root = int"), ("[1, 2]", "Root = list[int]"), ('"x"', "Root = str")],
    )
    def test_scalar_root_alias(self, document, expected):
        assert expected in python(document)

    def test_root_array_of_objects(self):
        code = python('[{"id": 1}]')
        assert "class Root:\n    id: int\n" in code
        assert "Root =" not in code
