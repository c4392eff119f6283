"""Tests for the type IR: predicates, wrapper rendering, and comparators."""

import pytest

from schemakit.compare import is_equal_type, is_type_sub_type_of
from schemakit.introspection import INTROSPECTION_TYPES, SchemaType, is_introspection_type
from schemakit.types import (
    Boolean, Directive, EnumType, EnumValue, Field, Int, InputUnionType,
    InterfaceType, ListOf, NonNull, ObjectType, SPECIFIED_DIRECTIVES, String,
    TypeKind, UnionType, get_named_type, is_abstract_type, is_directive,
    is_input_type, is_input_union_type, is_list_type, is_named_type,
    is_non_null_type, is_output_type, is_wrapping_type,
)

from conftest import make_schema, some_enum, some_input_object, some_interface, some_object


# ===========================================================================
# Construction
# ===========================================================================

class TestConstruction:

    def test_field_names_filled_from_mapping(self):
        obj = ObjectType("Obj", {"a": Field(String), "b": Field(Int, name="b")})
        assert [f.name for f in obj.fields.values()] == ["a", "b"]

    def test_enum_accepts_plain_strings(self):
        enum = EnumType("E", ["A", EnumValue("B", 2)])
        assert [v.name for v in enum.values] == ["A", "B"]
        assert enum.values[1].value == 2

    def test_named_types_compare_by_identity(self):
        assert some_object() != some_object()
        obj = some_object()
        assert obj == obj

    def test_wrappers_compare_structurally(self):
        assert NonNull(ListOf(Int)) == NonNull(ListOf(Int))
        assert NonNull(Int) != ListOf(Int)

    def test_kind_per_class(self):
        assert some_object().kind == TypeKind.OBJECT
        assert InputUnionType("In").kind == TypeKind.INPUT_UNION
        assert some_input_object().kind == TypeKind.INPUT_OBJECT

    def test_repr(self):
        assert repr(some_object("Thing")) == "<ObjectType 'Thing'>"


# ===========================================================================
# Rendering
# ===========================================================================

class TestRendering:

    @pytest.mark.parametrize("type_, expected", [
        (Int, "Int"),
        (NonNull(Int), "Int!"),
        (ListOf(Int), "[Int]"),
        (NonNull(ListOf(NonNull(Int))), "[Int!]!"),
        (ListOf(ListOf(String)), "[[String]]"),
    ])
    def test_sdl_form(self, type_, expected):
        assert str(type_) == expected

    def test_directive_str(self):
        assert str(Directive("skip")) == "@skip"


# ===========================================================================
# Predicates
# ===========================================================================

class TestPredicates:

    def test_wrapping(self):
        assert is_wrapping_type(ListOf(Int))
        assert is_wrapping_type(NonNull(Int))
        assert not is_wrapping_type(Int)
        assert is_non_null_type(NonNull(Int)) and not is_non_null_type(Int)
        assert is_list_type(ListOf(Int)) and not is_list_type(NonNull(Int))

    def test_get_named_type_unwraps(self):
        assert get_named_type(NonNull(ListOf(NonNull(String)))) is String
        assert get_named_type(String) is String
        assert get_named_type("String") is None
        assert get_named_type(None) is None

    def test_is_named_type(self):
        assert is_named_type(some_enum())
        assert not is_named_type(NonNull(Int))
        assert not is_named_type("Int")

    @pytest.mark.parametrize("factory, is_input, is_output", [
        (lambda: Int, True, True),
        (some_enum, True, True),
        (some_input_object, True, False),
        (some_object, False, True),
        (some_interface, False, True),
        (lambda: UnionType("U", [some_object()]), False, True),
        (lambda: InputUnionType("In", [some_input_object()]), False, False),
    ], ids=["scalar", "enum", "input_object", "object", "interface", "union", "input_union"])
    def test_input_output_classification(self, factory, is_input, is_output):
        type_ = factory()
        assert is_input_type(type_) is is_input
        assert is_output_type(type_) is is_output
        assert is_input_type(NonNull(ListOf(type_))) is is_input
        assert is_output_type(ListOf(type_)) is is_output

    def test_non_types_are_neither(self):
        assert not is_input_type(None)
        assert not is_output_type("String")

    def test_abstract(self):
        assert is_abstract_type(some_interface())
        assert is_abstract_type(UnionType("U"))
        assert not is_abstract_type(InputUnionType("In"))
        assert not is_abstract_type(some_object())

    def test_input_union_predicate(self):
        assert is_input_union_type(InputUnionType("In"))
        assert not is_input_union_type(NonNull(InputUnionType("In")))

    def test_is_directive(self):
        assert all(is_directive(d) for d in SPECIFIED_DIRECTIVES)
        assert not is_directive(some_object())


# ===========================================================================
# Introspection
# ===========================================================================

class TestIntrospection:

    def test_introspection_types_are_named(self):
        assert all(t.name.startswith("__") for t in INTROSPECTION_TYPES)

    def test_membership_is_by_identity(self):
        assert is_introspection_type(SchemaType)
        assert not is_introspection_type(ObjectType("__Schema"))
        assert not is_introspection_type(None)

    def test_every_schema_carries_them(self):
        schema = make_schema()
        assert all(schema.get_type(t.name) is t for t in INTROSPECTION_TYPES)


# ===========================================================================
# Comparators
# ===========================================================================

class TestEqualType:

    @pytest.mark.parametrize("a, b", [
        (Int, Int),
        (NonNull(Int), NonNull(Int)),
        (ListOf(NonNull(String)), ListOf(NonNull(String))),
    ])
    def test_equal(self, a, b):
        assert is_equal_type(a, b)

    @pytest.mark.parametrize("a, b", [
        (Int, String),
        (Int, NonNull(Int)),
        (ListOf(Int), Int),
        (ListOf(Int), ListOf(NonNull(Int))),
    ])
    def test_not_equal(self, a, b):
        assert not is_equal_type(a, b)
        assert not is_equal_type(b, a)


class TestSubType:

    @pytest.fixture
    def schema_parts(self):
        node = some_interface("Node")
        impl = ObjectType("Impl", {"f": Field(String)}, interfaces=[node])
        other = some_object("Other")
        union = UnionType("U", [impl])
        schema = make_schema(impl, other, union)
        return schema, node, impl, other, union

    def test_same_type(self, schema_parts):
        schema, *_ = schema_parts
        assert is_type_sub_type_of(schema, Int, Int)

    def test_non_null_narrows(self, schema_parts):
        schema, *_ = schema_parts
        assert is_type_sub_type_of(schema, NonNull(Int), Int)
        assert not is_type_sub_type_of(schema, Int, NonNull(Int))

    def test_lists_are_covariant(self, schema_parts):
        schema, *_ = schema_parts
        assert is_type_sub_type_of(schema, ListOf(NonNull(Int)), ListOf(Int))
        assert not is_type_sub_type_of(schema, ListOf(Int), Int)
        assert not is_type_sub_type_of(schema, Int, ListOf(Int))

    def test_object_within_abstract(self, schema_parts):
        schema, node, impl, other, union = schema_parts
        assert is_type_sub_type_of(schema, impl, node)
        assert is_type_sub_type_of(schema, NonNull(impl), union)
        assert not is_type_sub_type_of(schema, other, node)
        assert not is_type_sub_type_of(schema, other, union)

    def test_only_objects_are_sub_types_of_abstract(self, schema_parts):
        schema, node, *_ = schema_parts
        assert not is_type_sub_type_of(schema, some_interface("Child"), node)

    def test_unrelated_scalars(self, schema_parts):
        schema, *_ = schema_parts
        assert not is_type_sub_type_of(schema, Boolean, String)
