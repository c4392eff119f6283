"""Type system IR for schemas.

A schema is a graph of named types. Every named type is one of seven
kinds (see TypeKind), each a small dataclass carrying a name, its
optional SDL AST nodes, and a kind-specific payload. Type references in
fields and arguments may wrap a named type in NonNull / ListOf to any
depth; the predicates here see through those wrappers.

Named types compare by identity. Wrappers are frozen and compare
structurally, so NonNull(Int) == NonNull(Int).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from .language import (
        DirectiveDefinitionNode,
        EnumValueDefinitionNode,
        FieldDefinitionNode,
        InputValueDefinitionNode,
        TypeDefinitionNode,
    )


class TypeKind(Enum):
    """The closed set of named type kinds."""
    SCALAR       = auto()
    OBJECT       = auto()
    INTERFACE    = auto()
    UNION        = auto()
    INPUT_UNION  = auto()
    ENUM         = auto()
    INPUT_OBJECT = auto()


class NamedType:
    """Base for the seven named type kinds. Subclasses set `kind`."""
    kind: TypeKind
    name: str

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


@dataclass(eq=False, repr=False)
class ScalarType(NamedType):
    name: str
    ast_node: TypeDefinitionNode | None = None
    extension_ast_nodes: list[TypeDefinitionNode] = field(default_factory=list)

    kind = TypeKind.SCALAR


@dataclass
class Argument:
    """A field or directive argument. Arguments are ordered, so they carry their name."""
    name: str
    type: Any
    default_value: Any = None
    ast_node: InputValueDefinitionNode | None = None


@dataclass
class Field:
    """An output field on an Object or Interface.

    `name` is filled from the owning type's field mapping when omitted.
    """
    type: Any
    args: list[Argument] = field(default_factory=list)
    ast_node: FieldDefinitionNode | None = None
    name: str | None = None


@dataclass
class InputField:
    """A field on an InputObject."""
    type: Any
    default_value: Any = None
    ast_node: InputValueDefinitionNode | None = None
    name: str | None = None


def _named(fields: dict) -> dict:
    for name, f in fields.items():
        if getattr(f, "name", None) is None:
            f.name = name
    return fields


@dataclass(eq=False, repr=False)
class ObjectType(NamedType):
    name: str
    fields: dict[str, Field] = field(default_factory=dict)
    interfaces: list[Any] = field(default_factory=list)
    ast_node: TypeDefinitionNode | None = None
    extension_ast_nodes: list[TypeDefinitionNode] = field(default_factory=list)

    kind = TypeKind.OBJECT

    def __post_init__(self) -> None:
        _named(self.fields)


@dataclass(eq=False, repr=False)
class InterfaceType(NamedType):
    name: str
    fields: dict[str, Field] = field(default_factory=dict)
    ast_node: TypeDefinitionNode | None = None
    extension_ast_nodes: list[TypeDefinitionNode] = field(default_factory=list)

    kind = TypeKind.INTERFACE

    def __post_init__(self) -> None:
        _named(self.fields)


@dataclass(eq=False, repr=False)
class UnionType(NamedType):
    name: str
    types: list[Any] = field(default_factory=list)
    ast_node: TypeDefinitionNode | None = None
    extension_ast_nodes: list[TypeDefinitionNode] = field(default_factory=list)

    kind = TypeKind.UNION


@dataclass(eq=False, repr=False)
class InputUnionType(NamedType):
    """Union-like type for input positions. Members must be InputObjects."""
    name: str
    types: list[Any] = field(default_factory=list)
    ast_node: TypeDefinitionNode | None = None
    extension_ast_nodes: list[TypeDefinitionNode] = field(default_factory=list)

    kind = TypeKind.INPUT_UNION


@dataclass
class EnumValue:
    name: str
    value: Any = None
    ast_node: EnumValueDefinitionNode | None = None


@dataclass(eq=False, repr=False)
class EnumType(NamedType):
    """Enum with ordered values. Plain strings are accepted as value names."""
    name: str
    values: list[EnumValue] = field(default_factory=list)
    ast_node: TypeDefinitionNode | None = None
    extension_ast_nodes: list[TypeDefinitionNode] = field(default_factory=list)

    kind = TypeKind.ENUM

    def __post_init__(self) -> None:
        self.values = [EnumValue(v) if isinstance(v, str) else v for v in self.values]


@dataclass(eq=False, repr=False)
class InputObjectType(NamedType):
    name: str
    fields: dict[str, InputField] = field(default_factory=dict)
    ast_node: TypeDefinitionNode | None = None
    extension_ast_nodes: list[TypeDefinitionNode] = field(default_factory=list)

    kind = TypeKind.INPUT_OBJECT

    def __post_init__(self) -> None:
        _named(self.fields)


# ---------------------------------------------------------------------------
# Wrapping types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ListOf:
    of_type: Any

    def __str__(self) -> str:
        return f"[{self.of_type}]"


@dataclass(frozen=True)
class NonNull:
    of_type: Any

    def __str__(self) -> str:
        return f"{self.of_type}!"


TypeRef = Union[NamedType, ListOf, NonNull]


@dataclass
class Directive:
    name: str
    locations: list[str] = field(default_factory=list)
    args: list[Argument] = field(default_factory=list)
    ast_node: DirectiveDefinitionNode | None = None

    def __str__(self) -> str:
        return f"@{self.name}"


# ---------------------------------------------------------------------------
# Classification predicates
# ---------------------------------------------------------------------------

INPUT_KINDS = frozenset({TypeKind.SCALAR, TypeKind.ENUM, TypeKind.INPUT_OBJECT})
OUTPUT_KINDS = frozenset({TypeKind.SCALAR, TypeKind.OBJECT, TypeKind.INTERFACE,
                          TypeKind.UNION, TypeKind.ENUM})


def is_named_type(type_: Any) -> bool:
    return isinstance(type_, NamedType)


def is_wrapping_type(type_: Any) -> bool:
    return isinstance(type_, (ListOf, NonNull))


def is_non_null_type(type_: Any) -> bool:
    return isinstance(type_, NonNull)


def is_list_type(type_: Any) -> bool:
    return isinstance(type_, ListOf)


def get_named_type(type_: Any) -> NamedType | None:
    """Unwrap NonNull / ListOf down to the named type, or None for non-types."""
    while is_wrapping_type(type_):
        type_ = type_.of_type
    return type_ if is_named_type(type_) else None


def _is_kind(type_: Any, kind: TypeKind) -> bool:
    return is_named_type(type_) and type_.kind == kind


def is_scalar_type(type_: Any) -> bool:
    return _is_kind(type_, TypeKind.SCALAR)


def is_object_type(type_: Any) -> bool:
    return _is_kind(type_, TypeKind.OBJECT)


def is_interface_type(type_: Any) -> bool:
    return _is_kind(type_, TypeKind.INTERFACE)


def is_union_type(type_: Any) -> bool:
    return _is_kind(type_, TypeKind.UNION)


def is_input_union_type(type_: Any) -> bool:
    return _is_kind(type_, TypeKind.INPUT_UNION)


def is_enum_type(type_: Any) -> bool:
    return _is_kind(type_, TypeKind.ENUM)


def is_input_object_type(type_: Any) -> bool:
    return _is_kind(type_, TypeKind.INPUT_OBJECT)


def is_abstract_type(type_: Any) -> bool:
    return is_interface_type(type_) or is_union_type(type_)


def is_input_type(type_: Any) -> bool:
    """Scalar, Enum or InputObject, possibly wrapped. InputUnion is not included."""
    named = get_named_type(type_)
    return named is not None and named.kind in INPUT_KINDS


def is_output_type(type_: Any) -> bool:
    """Scalar, Object, Interface, Union or Enum, possibly wrapped."""
    named = get_named_type(type_)
    return named is not None and named.kind in OUTPUT_KINDS


def is_directive(value: Any) -> bool:
    return isinstance(value, Directive)


# ---------------------------------------------------------------------------
# Specified scalars and directives
# ---------------------------------------------------------------------------

Int = ScalarType("Int")
Float = ScalarType("Float")
String = ScalarType("String")
Boolean = ScalarType("Boolean")
ID = ScalarType("ID")

SPECIFIED_SCALAR_TYPES: tuple[ScalarType, ...] = (String, Int, Float, Boolean, ID)

IncludeDirective = Directive(
    "include",
    locations=["FIELD", "FRAGMENT_SPREAD", "INLINE_FRAGMENT"],
    args=[Argument("if", NonNull(Boolean))],
)

SkipDirective = Directive(
    "skip",
    locations=["FIELD", "FRAGMENT_SPREAD", "INLINE_FRAGMENT"],
    args=[Argument("if", NonNull(Boolean))],
)

DEFAULT_DEPRECATION_REASON = "No longer supported"

DeprecatedDirective = Directive(
    "deprecated",
    locations=["FIELD_DEFINITION", "ENUM_VALUE"],
    args=[Argument("reason", String, default_value=DEFAULT_DEPRECATION_REASON)],
)

SPECIFIED_DIRECTIVES: tuple[Directive, ...] = (
    IncludeDirective, SkipDirective, DeprecatedDirective,
)
