"""schemakit: type system IR and validation for schemas with input unions.

    schema = Schema(query=Query, types=[SearchInput])
    errors = validate_schema(schema)      # [] when valid
    assert_valid_schema(schema)           # raises ValidationError otherwise
"""

from .schema import Schema, ValidationCache  # noqa: F401
from .types import (  # noqa: F401
    TypeKind,
    NamedType,
    ScalarType,
    ObjectType,
    InterfaceType,
    UnionType,
    InputUnionType,
    EnumType,
    EnumValue,
    InputObjectType,
    Field,
    InputField,
    Argument,
    Directive,
    ListOf,
    NonNull,
    Int,
    Float,
    String,
    Boolean,
    ID,
    SPECIFIED_DIRECTIVES,
)
from .validation import (  # noqa: F401
    ErrorCategory,
    SchemaDiagnostic,
    ValidationError,
    assert_valid_schema,
    check_schema,
    validate_schema,
)
