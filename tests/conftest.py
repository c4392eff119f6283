"""Shared fixtures and helpers for the test suite.

pytest discovers conftest.py automatically. Fixtures defined here are
available to all test files in this directory without explicit imports;
plain helpers are imported with `from conftest import ...`.
"""

import pytest

from schemakit.language import (
    EnumValueDefinitionNode, FieldDefinitionNode, InputValueDefinitionNode,
    NamedTypeNode, SourceLocation, TypeDefinitionNode,
)
from schemakit.schema import Schema
from schemakit.types import (
    EnumType, Field, InputField, InputObjectType, InputUnionType, InterfaceType,
    ObjectType, String, TypeKind, UnionType,
)
from schemakit.validation import ErrorCategory, SchemaDiagnostic


# ---------------------------------------------------------------------------
# Type factories (fresh instances per call; named types compare by identity)
# ---------------------------------------------------------------------------

def some_object(name: str = "SomeObject") -> ObjectType:
    return ObjectType(name, {"f": Field(String)})


def some_interface(name: str = "SomeInterface") -> InterfaceType:
    return InterfaceType(name, {"f": Field(String)})


def some_input_object(name: str = "SomeInputObject") -> InputObjectType:
    return InputObjectType(name, {"val": InputField(String, default_value="hello")})


def some_enum(name: str = "SomeEnum") -> EnumType:
    return EnumType(name, ["ONLY"])


def make_schema(*types, query=None, **kwargs) -> Schema:
    """A schema with a trivial valid Query root plus `types`."""
    if query is None:
        query = ObjectType("Query", {"field": Field(String)})
    return Schema(query=query, types=list(types), **kwargs)


# ---------------------------------------------------------------------------
# AST helpers
# ---------------------------------------------------------------------------

def loc(line: int, column: int) -> SourceLocation:
    return SourceLocation(line, column)


def field_def(name: str, type_name: str, line: int, column: int,
              arguments=None) -> FieldDefinitionNode:
    """`name: type_name` at line:column, type reference right after the colon."""
    return FieldDefinitionNode(
        name,
        NamedTypeNode(type_name, loc(line, column + len(name) + 2)),
        arguments or [],
        loc(line, column),
    )


def arg_def(name: str, type_name: str, line: int, column: int) -> InputValueDefinitionNode:
    return InputValueDefinitionNode(
        name, NamedTypeNode(type_name, loc(line, column + len(name) + 2)), loc=loc(line, column))


def type_def(kind: TypeKind, name: str, line: int, **payload) -> TypeDefinitionNode:
    return TypeDefinitionNode(kind, name, loc=loc(line, 1), **payload)


def value_def(name: str, line: int, column: int) -> EnumValueDefinitionNode:
    return EnumValueDefinitionNode(name, loc(line, column))


# ---------------------------------------------------------------------------
# Diagnostic helpers
# ---------------------------------------------------------------------------

def messages(errors: list[SchemaDiagnostic]) -> list[str]:
    return [e.message for e in errors]


def of_category(errors: list[SchemaDiagnostic], category: ErrorCategory) -> list[SchemaDiagnostic]:
    return [e for e in errors if e.category == category]


def positions(error: SchemaDiagnostic) -> list[tuple[int, int]]:
    return [(p.line, p.column) for p in error.locations]


@pytest.fixture
def valid_schema() -> Schema:
    """Query, an interface with one implementation, a union, an input union, an enum."""
    iface = some_interface("Node")
    obj = ObjectType("Thing", {"f": Field(String)}, interfaces=[iface])
    search = InputUnionType("SearchInput", [some_input_object()])
    return make_schema(
        obj,
        UnionType("Result", [obj]),
        search,
        some_enum(),
        query=ObjectType("Query", {"thing": Field(obj), "node": Field(iface)}),
    )
