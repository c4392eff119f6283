"""SDL AST nodes attached to schema elements.

These are produced by an external parser; schemakit only reads them to
attach source locations to diagnostics. A type's full set of fields,
members or values is the union of its primary definition node and any
extension nodes, which is why duplicates are found here rather than in
the merged type objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .types import TypeKind


@dataclass(frozen=True)
class SourceLocation:
    """1-based line/column of a node in its source document."""
    line: int
    column: int

    def formatted(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


# --- Type references ---

@dataclass(eq=False)
class NamedTypeNode:
    name: str
    loc: SourceLocation | None = None


@dataclass(eq=False)
class ListTypeNode:
    type: TypeNode
    loc: SourceLocation | None = None


@dataclass(eq=False)
class NonNullTypeNode:
    type: TypeNode
    loc: SourceLocation | None = None


TypeNode = Union[NamedTypeNode, ListTypeNode, NonNullTypeNode]


# --- Definitions ---

@dataclass(eq=False)
class InputValueDefinitionNode:
    """An argument or input-object field definition."""
    name: str
    type: TypeNode
    default_value: object = None
    loc: SourceLocation | None = None


@dataclass(eq=False)
class FieldDefinitionNode:
    name: str
    type: TypeNode
    arguments: list[InputValueDefinitionNode] = field(default_factory=list)
    loc: SourceLocation | None = None


@dataclass(eq=False)
class EnumValueDefinitionNode:
    name: str
    loc: SourceLocation | None = None


@dataclass(eq=False)
class TypeDefinitionNode:
    """A type definition or extension (`type X ...` / `extend type X ...`).

    Only the payload lists relevant to `kind` are populated:
        OBJECT:       fields, interfaces
        INTERFACE:    fields
        UNION:        types
        INPUT_UNION:  types
        ENUM:         values
        INPUT_OBJECT: fields (InputValueDefinitionNode)
    """
    kind: TypeKind
    name: str
    fields: list[FieldDefinitionNode | InputValueDefinitionNode] = field(default_factory=list)
    interfaces: list[NamedTypeNode] = field(default_factory=list)
    types: list[NamedTypeNode] = field(default_factory=list)
    values: list[EnumValueDefinitionNode] = field(default_factory=list)
    loc: SourceLocation | None = None


@dataclass(eq=False)
class DirectiveDefinitionNode:
    name: str
    arguments: list[InputValueDefinitionNode] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)
    loc: SourceLocation | None = None


@dataclass(eq=False)
class OperationTypeDefinitionNode:
    operation: str          # "query" | "mutation" | "subscription"
    type: NamedTypeNode
    loc: SourceLocation | None = None


@dataclass(eq=False)
class SchemaDefinitionNode:
    operation_types: list[OperationTypeDefinitionNode] = field(default_factory=list)
    loc: SourceLocation | None = None


Node = Union[
    NamedTypeNode, ListTypeNode, NonNullTypeNode, InputValueDefinitionNode,
    FieldDefinitionNode, EnumValueDefinitionNode, TypeDefinitionNode,
    DirectiveDefinitionNode, OperationTypeDefinitionNode, SchemaDefinitionNode,
]
