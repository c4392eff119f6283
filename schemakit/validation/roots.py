"""Root operation type validators (ROOT_TYPES phase)."""

from ..formatting import inspect
from ..types import is_object_type
from .core import ErrorCategory, Phase, ValidationContext, register_validator


def _root_node(context: ValidationContext, root, operation: str):
    """Prefer the `operation: Type` reference in the schema definition, else the type's own node."""
    node = context.locator.operation_type_node(operation)
    return node if node is not None else getattr(root, "ast_node", None)


@register_validator("root_types", Phase.ROOT_TYPES)
def validate_root_types(context: ValidationContext) -> None:
    """Query is required and must be an Object; mutation/subscription must be Objects if present."""
    schema = context.schema

    query = schema.query_type
    if query is None:
        context.report_error("Query root type must be provided.", schema.ast_node,
                             ErrorCategory.STRUCTURAL)
    elif not is_object_type(query):
        context.report_error(
            f"Query root type must be Object type, it cannot be {inspect(query)}.",
            _root_node(context, query, "query"), ErrorCategory.KIND)

    for operation, root in (("mutation", schema.mutation_type),
                            ("subscription", schema.subscription_type)):
        if root is not None and not is_object_type(root):
            context.report_error(
                f"{operation.capitalize()} root type must be Object type if provided, "
                f"it cannot be {inspect(root)}.",
                _root_node(context, root, operation), ErrorCategory.KIND)
