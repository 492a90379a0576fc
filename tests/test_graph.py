import pytest

from json_typegen.core.graph import NamingPolicy, build_graph
from json_typegen.core.inference import infer_type
from json_typegen.core.naming import NameSanitizer, NamingCase
from json_typegen.core.nodes import ArrayType, IntType, ObjectRef, ObjectType, StrType

# "home" appears twice with different structures
COLLIDING = {
    "home": {"city": "Paris"},
    "work": {"home": {"street": "Main St"}},
}

# The nested "home" sits inside an array element and has an extra key
HOME_IN_ARRAY = {"home": {"city": "NYC"}, "items": [{"home": {"city": "NYC", "zip": "1"}}]}


def graph_for(value, policy=NamingPolicy.LEGACY, field_case=NamingCase.PRESERVE, root="Root"):
    return build_graph(infer_type(value, root), root, NameSanitizer(), field_case, policy)


class TestLegacyPolicy:
    """Same derived name means same type"""

    def test_first_registered_shape_wins(self):
        graph = graph_for(COLLIDING)

        assert list(graph.types) == ["Root", "Home", "Work"]
        assert graph.types["Home"].keys == ["city"]
        assert graph.types["Work"].fields[0].node == ObjectRef("Home")

    def test_dropped_shape_is_reported(self):
        graph = graph_for(COLLIDING)
        assert any("reuses existing type Home" in w for w in graph.warnings)
        assert any("['street']" in w for w in graph.warnings)

    def test_identical_shapes_are_silent(self):
        graph = graph_for({"home": {"city": "A"}, "work": {"home": {"city": "B"}}})
        assert graph.warnings == []
        assert list(graph.types) == ["Root", "Home", "Work"]

    def test_array_element_reuses_first_shape(self):
        graph = graph_for(HOME_IN_ARRAY)

        assert list(graph.types) == ["Root", "Home", "Items"]
        assert graph.types["Home"].keys == ["city"]
        assert graph.types["Items"].fields[0].node == ObjectRef("Home")
        assert any("['city', 'zip']" in w for w in graph.warnings)


class TestStructuralPolicy:
    """Same structure means same type"""

    def test_different_shapes_get_suffixes(self):
        graph = graph_for(COLLIDING, NamingPolicy.STRUCTURAL)

        assert list(graph.types) == ["Root", "Home", "Work", "Home2"]
        assert graph.types["Home"].keys == ["city"]
        assert graph.types["Home2"].keys == ["street"]
        assert graph.types["Work"].fields[0].node == ObjectRef("Home2")

    def test_array_element_gets_its_own_shape(self):
        graph = graph_for(HOME_IN_ARRAY, NamingPolicy.STRUCTURAL)

        assert list(graph.types) == ["Root", "Home", "Items", "Home2"]
        assert graph.types["Home2"].keys == ["city", "zip"]
        assert graph.types["Root"].fields[1].node == ArrayType(ObjectRef("Items"))
        assert graph.types["Items"].fields[0].node == ObjectRef("Home2")
        assert graph.warnings == []

    def test_third_shape_gets_next_suffix(self):
        value = {"a": {"home": {"x": 1}}, "b": {"home": {"y": 1}}, "c": {"home": {"z": 1}}}
        graph = graph_for(value, NamingPolicy.STRUCTURAL)
        assert {"Home", "Home2", "Home3"} <= set(graph.types)

    def test_identical_shapes_share_declaration_across_keys(self):
        value = {"billing": {"street": "a"}, "shipping": {"street": "b"}}
        graph = graph_for(value, NamingPolicy.STRUCTURAL)

        assert list(graph.types) == ["Root", "Billing"]
        assert graph.types["Root"].fields[1].node == ObjectRef("Billing")


class TestGraphShape:
    """Ordering, arrays and field naming"""

    def test_pre_order_registration(self):
        value = {"a": {"b": {"c": {}}}, "d": {}}
        graph = graph_for(value)
        assert list(graph.types) == ["Root", "A", "B", "C", "D"]

    def test_root_first(self):
        graph = graph_for({"child": {"x": 1}}, root="Order")
        assert graph.root == "Order"
        assert [s.name for s in graph.ordered_types()] == ["Order", "Child"]
        assert graph.root_is_object

    def test_array_of_objects_is_hoisted(self):
        graph = graph_for({"items": [[{"sku": "x"}]]})

        assert graph.types["Root"].fields[0].node == ArrayType(ArrayType(ObjectRef("Items")))
        assert graph.types["Items"].keys == ["sku"]

    def test_root_array_names_its_element_after_the_root(self):
        graph = graph_for([{"id": 1}])

        assert graph.root_node == ArrayType(ObjectRef("Root"))
        assert list(graph.types) == ["Root"]
        assert not graph.root_is_object

    def test_scalar_root_has_no_types(self):
        graph = graph_for("text")
        assert graph.types == {}
        assert graph.root_node == StrType()

    def test_field_cardinality(self):
        value = {"a": 1, "b": "x", "c": None, "d": [1], "e": {"f": 1}}
        graph = graph_for(value)
        assert len(graph.types["Root"].fields) == 5

    def test_duplicate_field_names_are_suffixed(self):
        graph = graph_for({"userName": 1, "user_name": 2}, field_case=NamingCase.SNAKE_CASE)
        fields = graph.types["Root"].fields

        assert [f.name for f in fields] == ["user_name", "user_name_1"]
        assert [f.key for f in fields] == ["userName", "user_name"]
        assert any("renamed to 'user_name_1'" in w for w in graph.warnings)

    def test_field_metadata(self):
        graph = graph_for({"userId": 5, "note": None}, field_case=NamingCase.SNAKE_CASE)
        user_id, note = graph.types["Root"].fields

        assert user_id.is_renamed and user_id.node == IntType(32) and user_id.example == 5
        assert note.nullable and not note.is_renamed

    def test_no_unresolved_objects(self):
        graph = graph_for({"a": [{"b": {"c": [1]}}]})
        assert graph.validate() == []
        assert not any(isinstance(leaf, ObjectType) for leaf in graph.iter_leaf_nodes())

    @pytest.mark.parametrize("policy", list(NamingPolicy))
    def test_deep_nesting_is_iterative(self, policy):
        value = current = {}
        for _ in range(1500):
            current["n"] = {}
            current = current["n"]

        graph = build_graph(
            infer_type(value, max_depth=2000), "Root", NameSanitizer(), NamingCase.PRESERVE, policy
        )
        assert "N" in graph.types
