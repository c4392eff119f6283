"""Named type validators (TYPES phase).

The dispatcher walks the type map in order and routes each named type
to the validator for its kind. KIND_VALIDATORS covers every TypeKind;
scalars have nothing beyond their name to check.

Once a duplicate is reported for an element, that element's deeper
checks are skipped. Its siblings are still checked.
"""

from typing import Any, Callable

from ..formatting import inspect
from ..types import (
    EnumType, InputObjectType, InputUnionType, InterfaceType,
    ObjectType, TypeKind, UnionType, get_named_type, is_input_object_type,
    is_input_type, is_input_union_type, is_named_type, is_object_type,
    is_output_type,
)
from .core import ErrorCategory, Phase, ValidationContext, register_validator
from .interfaces import validate_object_interfaces
from .names import validate_name

RESERVED_ENUM_VALUE_NAMES = frozenset({"true", "false", "null"})


def accepts_input(type_: Any) -> bool:
    """Input-position check: an input type or an input union, possibly wrapped."""
    return is_input_type(type_) or is_input_union_type(get_named_type(type_))


# ---------------------------------------------------------------------------
# Object / Interface fields
# ---------------------------------------------------------------------------

def validate_fields(context: ValidationContext, type_: ObjectType | InterfaceType) -> None:
    """Shared field checks for Object and Interface types."""
    locator = context.locator

    if not type_.fields:
        context.report_error(f"Type {type_.name} must define one or more fields.",
                             locator.type_nodes(type_), ErrorCategory.STRUCTURAL)

    for field_name, field in type_.fields.items():
        validate_name(context, field, owner=type_, name=field_name)

        # A field declared in both the definition and an extension.
        field_nodes = locator.field_nodes(type_.name, field_name)
        if len(field_nodes) > 1:
            context.report_error(f"Field {type_.name}.{field_name} can only be defined once.",
                                 field_nodes, ErrorCategory.DUPLICATE)
            continue

        if not is_output_type(field.type):
            context.report_error(
                f"The type of {type_.name}.{field_name} must be Output Type "
                f"but got: {inspect(field.type)}.",
                locator.field_type_node(type_.name, field_name),
                ErrorCategory.TYPE_COMPATIBILITY)

        seen: set[str] = set()
        for arg in field.args:
            arg_name = arg.name
            validate_name(context, arg, owner=type_)

            if arg_name in seen:
                context.report_error(
                    f"Field argument {type_.name}.{field_name}({arg_name}:) "
                    "can only be defined once.",
                    locator.arg_nodes(type_.name, field_name, arg_name),
                    ErrorCategory.DUPLICATE)
                continue
            seen.add(arg_name)

            if not accepts_input(arg.type):
                context.report_error(
                    f"The type of {type_.name}.{field_name}({arg_name}:) must be "
                    f"Input Type but got: {inspect(arg.type)}.",
                    locator.arg_type_node(type_.name, field_name, arg_name),
                    ErrorCategory.TYPE_COMPATIBILITY)


def validate_object(context: ValidationContext, type_: ObjectType) -> None:
    validate_fields(context, type_)
    validate_object_interfaces(context, type_)


def validate_interface(context: ValidationContext, type_: InterfaceType) -> None:
    validate_fields(context, type_)


# ---------------------------------------------------------------------------
# Union / InputUnion members
# ---------------------------------------------------------------------------

def _validate_members(
    context: ValidationContext,
    type_: UnionType | InputUnionType,
    label: str,
    member_label: str,
    accepts: Callable[[Any], bool],
) -> None:
    """Union and InputUnion share this; only the accepted member kind differs."""
    locator = context.locator

    if not type_.types:
        context.report_error(f"{label} {type_.name} must define one or more member types.",
                             locator.type_nodes(type_), ErrorCategory.STRUCTURAL)

    included: set[str] = set()
    for member in type_.types:
        member_name = getattr(member, "name", None)
        if member_name is not None and member_name in included:
            context.report_error(
                f"{label} {type_.name} can only include type {member_name} once.",
                locator.member_nodes(type_.name, member_name),
                ErrorCategory.DUPLICATE)
            continue
        if member_name is not None:
            included.add(member_name)

        if not accepts(member):
            context.report_error(
                f"{label} {type_.name} can only include {member_label} types, "
                f"it cannot include {inspect(member)}.",
                locator.member_nodes(type_.name, str(member)),
                ErrorCategory.KIND)


def validate_union(context: ValidationContext, type_: UnionType) -> None:
    _validate_members(context, type_, "Union type", "Object", is_object_type)


def validate_input_union(context: ValidationContext, type_: InputUnionType) -> None:
    _validate_members(context, type_, "Input Union type", "Input Object",
                      is_input_object_type)


# ---------------------------------------------------------------------------
# Enum values
# ---------------------------------------------------------------------------

def validate_enum(context: ValidationContext, type_: EnumType) -> None:
    locator = context.locator

    if not type_.values:
        context.report_error(f"Enum type {type_.name} must define one or more values.",
                             locator.type_nodes(type_), ErrorCategory.STRUCTURAL)

    for value in type_.values:
        value_name = value.name

        value_nodes = locator.value_nodes(type_.name, value_name)
        if len(value_nodes) > 1:
            context.report_error(
                f"Enum type {type_.name} can include value {value_name} only once.",
                value_nodes, ErrorCategory.DUPLICATE)

        validate_name(context, value, owner=type_)
        if value_name in RESERVED_ENUM_VALUE_NAMES:
            context.report_error(f"Enum type {type_.name} cannot include value: {value_name}.",
                                 value.ast_node, ErrorCategory.NAME)


# ---------------------------------------------------------------------------
# Input object fields
# ---------------------------------------------------------------------------

def validate_input_object(context: ValidationContext, type_: InputObjectType) -> None:
    # TODO: report input fields declared in both the definition and an extension.
    locator = context.locator

    if not type_.fields:
        context.report_error(f"Input Object type {type_.name} must define one or more fields.",
                             locator.type_nodes(type_), ErrorCategory.STRUCTURAL)

    for field_name, field in type_.fields.items():
        validate_name(context, field, owner=type_, name=field_name)

        if not accepts_input(field.type):
            context.report_error(
                f"The type of {type_.name}.{field_name} must be Input Type "
                f"but got: {inspect(field.type)}.",
                locator.field_type_node(type_.name, field_name),
                ErrorCategory.TYPE_COMPATIBILITY)


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

KIND_VALIDATORS: dict[TypeKind, Callable[[ValidationContext, Any], None] | None] = {
    TypeKind.SCALAR:       None,
    TypeKind.OBJECT:       validate_object,
    TypeKind.INTERFACE:    validate_interface,
    TypeKind.UNION:        validate_union,
    TypeKind.INPUT_UNION:  validate_input_union,
    TypeKind.ENUM:         validate_enum,
    TypeKind.INPUT_OBJECT: validate_input_object,
}

@register_validator("named_types", Phase.TYPES)
def validate_types(context: ValidationContext) -> None:
    """Validate every entry of the type map, in type-map order."""
    for type_ in context.schema.type_map.values():
        if not is_named_type(type_):
            context.report_error(f"Expected GraphQL named type but got: {inspect(type_)}.",
                                 getattr(type_, "ast_node", None), ErrorCategory.KIND)
            continue

        validate_name(context, type_)

        check = KIND_VALIDATORS[type_.kind]
        if check is not None:
            check(context, type_)
