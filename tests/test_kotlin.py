import pytest

from json_typegen import GenerationOptions, generate, quick_generate
from json_typegen.languages.kotlin.generator import kotlin_string


def kotlin(data, **options):
    return quick_generate(data, "kotlin", **options)


class TestKotlinDataClasses:
    """Kotlin data classes with kotlinx.serialization"""

    def test_full_output(self):
        code = kotlin(
            {
                "id": 1,
                "user_name": "ada",
                "big": 2147483648,
                "ratio": 1.5,
                "ok": True,
                "tags": ["a"],
                "n": None,
                "profile": {"age": 3},
            }
        )

        assert code == (
            "import kotlinx.serialization.SerialName\n"
            "import kotlinx.serialization.Serializable\n"
            "\n"
            "@Serializable\n"
            "data class Root(\n"
            "    val id: Int,\n"
            '    @SerialName("user_name") val userName: String,\n'
            "    val big: Long,\n"
            "    val ratio: Double,\n"
            "    val ok: Boolean,\n"
            "    val tags: List<String>,\n"
            "    val n: String? = null,\n"
            "    val profile: Profile,\n"
            ")\n"
            "\n"
            "@Serializable\n"
            "data class Profile(\n"
            "    val age: Int,\n"
            ")\n"
        )

    def test_moshi(self):
        code = kotlin({"user_name": "ada"}, alias_style="moshi")
        assert "import com.squareup.moshi.Json" in code
        assert '@Json(name = "user_name") val userName: String,' in code
        assert "@Serializable" not in code

    def test_gson(self):
        code = kotlin({"user_name": "ada"}, alias_style="gson")
        assert "import com.google.gson.annotations.SerializedName" in code
        assert '@SerializedName("user_name") val userName: String,' in code

    def test_plain_class_style(self):
        code = kotlin({"id": 1}, declaration_style="class")
        assert "\nclass Root(\n" in code
        assert "data class" not in code

    def test_package(self):
        code = kotlin({"id": 1}, namespace="com.example.models")
        assert code.startswith("package com.example.models\n\n")

    def test_dollar_in_key_is_escaped(self):
        assert '@SerialName("\\$id") val id: String,' in kotlin({"$id": "x"})

    def test_nullable_none_policy(self):
        assert "val n: Any? = null," in kotlin({"n": None}, nullable_policy="none")

    def test_empty_array(self):
        assert "val tags: List<Any>," in kotlin({"tags": []})

    def test_scalar_root(self):
        assert "typealias Root = List<Int>" in kotlin("[1]")

    def test_empty_object_is_plain_class(self):
        result = generate("{}", GenerationOptions(target="kotlin"))
        assert result.success
        assert "@Serializable\nclass Root\n" in result.code
        assert any("would have no properties" in w for w in result.warnings)

    def test_renamed_without_annotations_warns(self):
        result = generate('{"user_name": 1}', GenerationOptions(target="kotlin", emit_aliases=False))
        assert "    val userName: Int,\n" in result.code
        assert any("no serialization annotations" in w for w in result.warnings)


class TestKotlinString:
    """String literal escaping"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("plain", '"plain"'),
            ('a"b', '"a\\"b"'),
            ("$x", '"\\$x"'),
            ("a\\b", '"a\\\\b"'),
            ("a\nb", '"a\\nb"'),
            ("\x01", '"\\u0001"'),
        ],
    )
    def test_escapes(self, value, expected):
        assert kotlin_string(value) == expected
