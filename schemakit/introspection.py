"""Built-in introspection types.

Every schema carries these in its type map. Their names begin with "__",
which user-authored names may not, so name validation exempts them.
"""

from .types import (
    Argument, Boolean, EnumType, EnumValue, Field, ListOf,
    NamedType, NonNull, ObjectType, String, TypeKind,
)


DIRECTIVE_LOCATIONS = (
    # Executable
    "QUERY", "MUTATION", "SUBSCRIPTION", "FIELD", "FRAGMENT_DEFINITION",
    "FRAGMENT_SPREAD", "INLINE_FRAGMENT",
    # Type system
    "SCHEMA", "SCALAR", "OBJECT", "FIELD_DEFINITION", "ARGUMENT_DEFINITION",
    "INTERFACE", "UNION", "INPUT_UNION", "ENUM", "ENUM_VALUE", "INPUT_OBJECT",
    "INPUT_FIELD_DEFINITION",
)

_TYPE_KIND_VALUES = [k.name for k in TypeKind] + ["LIST", "NON_NULL"]


TypeKindEnum = EnumType("__TypeKind", [EnumValue(v, v) for v in _TYPE_KIND_VALUES])
DirectiveLocationEnum = EnumType(
    "__DirectiveLocation", [EnumValue(v, v) for v in DIRECTIVE_LOCATIONS])

# Populated below: these types reference each other.
SchemaType = ObjectType("__Schema")
DirectiveType = ObjectType("__Directive")
TypeType = ObjectType("__Type")
FieldType = ObjectType("__Field")
InputValueType = ObjectType("__InputValue")
EnumValueType = ObjectType("__EnumValue")


def _include_deprecated() -> list[Argument]:
    return [Argument("includeDeprecated", Boolean, default_value=False)]


SchemaType.fields.update({
    "types": Field(NonNull(ListOf(NonNull(TypeType))), name="types"),
    "queryType": Field(NonNull(TypeType), name="queryType"),
    "mutationType": Field(TypeType, name="mutationType"),
    "subscriptionType": Field(TypeType, name="subscriptionType"),
    "directives": Field(NonNull(ListOf(NonNull(DirectiveType))), name="directives"),
})

DirectiveType.fields.update({
    "name": Field(NonNull(String), name="name"),
    "description": Field(String, name="description"),
    "locations": Field(NonNull(ListOf(NonNull(DirectiveLocationEnum))), name="locations"),
    "args": Field(NonNull(ListOf(NonNull(InputValueType))), name="args"),
})

TypeType.fields.update({
    "kind": Field(NonNull(TypeKindEnum), name="kind"),
    "name": Field(String, name="name"),
    "description": Field(String, name="description"),
    "fields": Field(ListOf(NonNull(FieldType)), _include_deprecated(), name="fields"),
    "interfaces": Field(ListOf(NonNull(TypeType)), name="interfaces"),
    "possibleTypes": Field(ListOf(NonNull(TypeType)), name="possibleTypes"),
    "enumValues": Field(ListOf(NonNull(EnumValueType)), _include_deprecated(),
                        name="enumValues"),
    "inputFields": Field(ListOf(NonNull(InputValueType)), name="inputFields"),
    "ofType": Field(TypeType, name="ofType"),
})

FieldType.fields.update({
    "name": Field(NonNull(String), name="name"),
    "description": Field(String, name="description"),
    "args": Field(NonNull(ListOf(NonNull(InputValueType))), name="args"),
    "type": Field(NonNull(TypeType), name="type"),
    "isDeprecated": Field(NonNull(Boolean), name="isDeprecated"),
    "deprecationReason": Field(String, name="deprecationReason"),
})

InputValueType.fields.update({
    "name": Field(NonNull(String), name="name"),
    "description": Field(String, name="description"),
    "type": Field(NonNull(TypeType), name="type"),
    "defaultValue": Field(String, name="defaultValue"),
})

EnumValueType.fields.update({
    "name": Field(NonNull(String), name="name"),
    "description": Field(String, name="description"),
    "isDeprecated": Field(NonNull(Boolean), name="isDeprecated"),
    "deprecationReason": Field(String, name="deprecationReason"),
})


INTROSPECTION_TYPES: tuple[NamedType, ...] = (
    SchemaType, DirectiveType, DirectiveLocationEnum, TypeType, FieldType,
    InputValueType, EnumValueType, TypeKindEnum,
)


def is_introspection_type(type_) -> bool:
    """True for the built-in introspection types themselves (identity, not name)."""
    return isinstance(type_, NamedType) and any(type_ is t for t in INTROSPECTION_TYPES)
