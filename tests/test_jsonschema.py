import json

from json_typegen import quick_generate
from json_typegen.languages.jsonschema.generator import SCHEMA_DIALECT


def schema(data, **options):
    return json.loads(quick_generate(data, "jsonschema", **options))


class TestJsonSchema:
    """JSON Schema documents"""

    def test_object_root(self):
        document = schema(
            {
                "id": 1,
                "profile": {"age": 3, "note": None},
                "tags": ["a"],
                "created": "2024-01-01T00:00:00Z",
            }
        )

        assert document == {
            "$schema": SCHEMA_DIALECT,
            "title": "Root",
            "type": "object",
            "properties": {
                "id": {"type": "integer"},
                "profile": {"$ref": "#/$defs/Profile"},
                "tags": {"type": "array", "items": {"type": "string"}},
                "created": {"type": "string", "format": "date-time"},
            },
            "required": ["id", "profile", "tags", "created"],
            "$defs": {
                "Profile": {
                    "type": "object",
                    "properties": {
                        "age": {"type": "integer"},
                        "note": {"type": ["string", "null"]},
                    },
                    "required": ["age"],
                }
            },
        }

    def test_keys_are_preserved(self):
        document = schema({"user-name": "x", "userName": "y"})
        assert list(document["properties"]) == ["user-name", "userName"]

    def test_output_keeps_key_order(self):
        text = quick_generate({"b": 1, "a": 2}, "jsonschema")
        assert text.index('"b"') < text.index('"a"')

    def test_root_array_of_objects(self):
        document = schema([{"id": 1}])
        assert document["type"] == "array"
        assert document["items"] == {"$ref": "#/$defs/Root"}
        assert document["$defs"]["Root"]["required"] == ["id"]

    def test_scalar_root(self):
        document = schema(1.5)
        assert document["type"] == "number"
        assert "$defs" not in document

    def test_examples(self):
        document = schema({"id": 7, "name": "ada", "ok": True}, include_examples=True)
        assert document["properties"]["id"]["examples"] == [7]
        assert document["properties"]["name"]["examples"] == ["ada"]
        assert "examples" not in document["properties"]["ok"]

    def test_no_examples_by_default(self):
        assert "examples" not in schema({"id": 7})["properties"]["id"]

    def test_nullable_none_and_unknown(self):
        document = schema({"n": None, "tags": []}, nullable_policy="none")
        assert document["properties"]["n"] == {}
        assert document["properties"]["tags"] == {"type": "array", "items": {}}
        assert document["required"] == ["tags"]

    def test_formats_disabled(self):
        document = schema({"mail": "ada@example.com"}, detect_formats=False)
        assert document["properties"]["mail"] == {"type": "string"}

    def test_empty_object(self):
        document = schema({})
        assert document["properties"] == {}
        assert "required" not in document

    def test_description(self):
        document = schema({"id": 1}, description="An order as returned by the API")

        assert list(document)[:3] == ["$schema", "title", "description"]
        assert document["description"] == "An order as returned by the API"

    def test_no_description_by_default(self):
        assert "description" not in schema({"id": 1})

    def test_required_can_be_turned_off(self):
        document = schema({"id": 1, "profile": {"age": 3}}, required_by_default=False)

        assert "required" not in document
        assert "required" not in document["$defs"]["Profile"]
        assert document["properties"]["id"] == {"type": "integer"}
