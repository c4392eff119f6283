"""Diagnostic locator: maps schema entities to their SDL AST nodes.

A type's primary definition and every extension may each declare the
same field, member or value, so one entity can have several nodes. The
locator indexes every node once per validation pass, keyed by
(entity, container, member):

    (TYPE,      "Query",   None)     -> type definition + extension nodes
    (FIELD,     "Query",   "user")   -> field / input field definitions
    (ARGUMENT,  "Query.user", "id")  -> field argument definitions
    (ARGUMENT,  "@skip",   "if")     -> directive argument definitions
    (INTERFACE, "User",    "Node")   -> `implements` type references
    (MEMBER,    "Result",  "User")   -> union / input union member references
    (VALUE,     "Color",   "RED")    -> enum value definitions
    (OPERATION, None,      "query")  -> schema operation type definitions

Lookups for entities without AST nodes return empty lists / None, so
diagnostics just carry fewer locations.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

from ..schema import Schema
from ..types import Directive, NamedType, TypeKind


class Entity(Enum):
    TYPE      = auto()
    FIELD     = auto()
    ARGUMENT  = auto()
    INTERFACE = auto()
    MEMBER    = auto()
    VALUE     = auto()
    OPERATION = auto()


Key = tuple[Entity, str | None, str | None]


class DiagnosticLocator:
    """Index of AST nodes for every entity in a schema."""

    def __init__(self, schema: Schema) -> None:
        self._index: dict[Key, list[Any]] = {}
        self._build(schema)

    def _add(self, entity: Entity, container: str | None, member: str | None, node: Any) -> None:
        if node is not None:
            self._index.setdefault((entity, container, member), []).append(node)

    def _build(self, schema: Schema) -> None:
        if schema.ast_node is not None:
            for op in schema.ast_node.operation_types:
                self._add(Entity.OPERATION, None, op.operation, op)

        for d in schema.directives:
            if isinstance(d, Directive) and d.ast_node is not None:
                for arg in d.ast_node.arguments:
                    self._add(Entity.ARGUMENT, f"@{d.name}", arg.name, arg)

        for type_ in schema.type_map.values():
            if not isinstance(type_, NamedType):
                continue
            for node in [type_.ast_node, *type_.extension_ast_nodes]:
                if node is None:
                    continue
                self._add(Entity.TYPE, type_.name, None, node)
                self._index_definition(type_.name, node)

    def _index_definition(self, type_name: str, node: Any) -> None:
        kind = node.kind
        if kind in (TypeKind.OBJECT, TypeKind.INTERFACE, TypeKind.INPUT_OBJECT):
            for field_node in node.fields:
                self._add(Entity.FIELD, type_name, field_node.name, field_node)
                for arg in getattr(field_node, "arguments", ()):
                    self._add(Entity.ARGUMENT, f"{type_name}.{field_node.name}", arg.name, arg)
        if kind == TypeKind.OBJECT:
            for iface in node.interfaces:
                self._add(Entity.INTERFACE, type_name, iface.name, iface)
        elif kind in (TypeKind.UNION, TypeKind.INPUT_UNION):
            for member in node.types:
                self._add(Entity.MEMBER, type_name, member.name, member)
        elif kind == TypeKind.ENUM:
            for value in node.values:
                self._add(Entity.VALUE, type_name, value.name, value)

    # --- Generic lookups ---

    def nodes(self, entity: Entity, container: str | None, member: str | None = None) -> list[Any]:
        """All nodes for an entity, in primary-then-extension order."""
        return list(self._index.get((entity, container, member), ()))

    def node(self, entity: Entity, container: str | None, member: str | None = None) -> Any:
        """The first node for an entity, or None."""
        found = self._index.get((entity, container, member))
        return found[0] if found else None

    # --- Convenience lookups used by the validators ---

    def type_nodes(self, type_: Any) -> list[Any]:
        return self.nodes(Entity.TYPE, getattr(type_, "name", None))

    def field_nodes(self, type_name: str, field_name: str) -> list[Any]:
        return self.nodes(Entity.FIELD, type_name, field_name)

    def field_node(self, type_name: str, field_name: str) -> Any:
        return self.node(Entity.FIELD, type_name, field_name)

    def field_type_node(self, type_name: str, field_name: str) -> Any:
        field_node = self.field_node(type_name, field_name)
        return field_node.type if field_node is not None else None

    def arg_nodes(self, type_name: str, field_name: str, arg_name: str) -> list[Any]:
        return self.nodes(Entity.ARGUMENT, f"{type_name}.{field_name}", arg_name)

    def arg_node(self, type_name: str, field_name: str, arg_name: str) -> Any:
        return self.node(Entity.ARGUMENT, f"{type_name}.{field_name}", arg_name)

    def arg_type_node(self, type_name: str, field_name: str, arg_name: str) -> Any:
        arg = self.arg_node(type_name, field_name, arg_name)
        return arg.type if arg is not None else None

    def directive_arg_nodes(self, directive_name: str, arg_name: str) -> list[Any]:
        return self.nodes(Entity.ARGUMENT, f"@{directive_name}", arg_name)

    def directive_arg_type_node(self, directive_name: str, arg_name: str) -> Any:
        arg = self.node(Entity.ARGUMENT, f"@{directive_name}", arg_name)
        return arg.type if arg is not None else None

    def interface_nodes(self, type_name: str, iface_name: str) -> list[Any]:
        return self.nodes(Entity.INTERFACE, type_name, iface_name)

    def member_nodes(self, type_name: str, member_name: str) -> list[Any]:
        return self.nodes(Entity.MEMBER, type_name, member_name)

    def value_nodes(self, type_name: str, value_name: str) -> list[Any]:
        return self.nodes(Entity.VALUE, type_name, value_name)

    def operation_type_node(self, operation: str) -> Any:
        """The type reference of `query: X` etc. in the schema definition."""
        op = self.node(Entity.OPERATION, None, operation)
        return op.type if op is not None else None
