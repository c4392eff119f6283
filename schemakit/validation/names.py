"""Name validation glue between the validators and the name grammar."""

from typing import Any

from ..introspection import is_introspection_type
from ..names import is_valid_name_error
from .core import ErrorCategory, ValidationContext


def validate_name(
    context: ValidationContext, entity: Any, owner: Any = None, name: str | None = None,
) -> None:
    """Report a NAME diagnostic if the entity's name breaks the name grammar.

    `name` overrides `entity.name` for fields keyed by name in their owner.

    Skipped when the name is on the schema's legacy allowlist, or when
    the entity (or the type that owns it) is an introspection type.
    """
    if name is None:
        name = entity.name
    if name in context.schema.allowed_legacy_names:
        return
    if is_introspection_type(entity) or is_introspection_type(owner):
        return
    error = is_valid_name_error(name)
    if error:
        context.report_error(error, getattr(entity, "ast_node", None), ErrorCategory.NAME)
