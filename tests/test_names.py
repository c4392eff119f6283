"""Tests for the name grammar and message formatting helpers."""

import pytest

from schemakit.formatting import MAX_LENGTH, inspect, or_list, quoted_or_list
from schemakit.names import assert_valid_name, is_valid_name_error
from schemakit.types import Directive, Int, ListOf, NonNull

from conftest import some_object


# ===========================================================================
# Name grammar
# ===========================================================================

class TestNames:

    @pytest.mark.parametrize("name", ["A", "_", "_private", "camelCase", "with_123", "ALL_CAPS"])
    def test_valid(self, name):
        assert is_valid_name_error(name) is None
        assert assert_valid_name(name) == name

    @pytest.mark.parametrize("name", ["", "1abc", "bad-name", "has space", "é", "Foo\n", "\nFoo"])
    def test_grammar_violation(self, name):
        assert is_valid_name_error(name) == (
            f'Names must match /^[_a-zA-Z][_a-zA-Z0-9]*$/ but "{name}" does not.')

    @pytest.mark.parametrize("name", ["__Type", "__x", "___"])
    def test_reserved_prefix(self, name):
        assert is_valid_name_error(name) == (
            f'Name "{name}" must not begin with "__", '
            "which is reserved by GraphQL introspection.")

    def test_assert_valid_name_raises(self):
        with pytest.raises(ValueError, match="reserved by GraphQL introspection"):
            assert_valid_name("__bad")

    def test_non_string_rejected(self):
        with pytest.raises(TypeError):
            is_valid_name_error(42)


# ===========================================================================
# Formatting
# ===========================================================================

class TestOrList:

    def test_one(self):
        assert or_list(["A"]) == "A"

    def test_two(self):
        assert or_list(["A", "B"]) == "A or B"

    def test_three(self):
        assert or_list(["A", "B", "C"]) == "A, B, or C"

    def test_truncated(self):
        items = [chr(ord("A") + i) for i in range(MAX_LENGTH + 2)]
        assert or_list(items) == "A, B, C, D, or E"

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            or_list([])

    def test_quoted(self):
        assert quoted_or_list(["A", "B", "C"]) == '"A", "B", or "C"'


class TestInspect:

    def test_types_render_as_sdl(self):
        assert inspect(some_object("Thing")) == "Thing"
        assert inspect(NonNull(ListOf(Int))) == "[Int]!"

    def test_directive(self):
        assert inspect(Directive("tag")) == "@tag"

    def test_other_values(self):
        assert inspect(None) == "None"
        assert inspect("text") == "'text'"
        assert inspect(3) == "3"
