"""Directive validators (DIRECTIVES phase).

Directive locations are not validated here.
"""

from ..formatting import inspect
from ..types import is_directive
from .core import ErrorCategory, Phase, ValidationContext, register_validator
from .names import validate_name
from .named_types import accepts_input


@register_validator("directives", Phase.DIRECTIVES)
def validate_directives(context: ValidationContext) -> None:
    """Check each registered directive's name and arguments, in registration order."""
    locator = context.locator

    for directive in context.schema.directives:
        if not is_directive(directive):
            context.report_error(f"Expected directive but got: {inspect(directive)}.",
                                 getattr(directive, "ast_node", None), ErrorCategory.KIND)
            continue

        validate_name(context, directive)

        seen: set[str] = set()
        for arg in directive.args:
            name = arg.name
            validate_name(context, arg)

            if name in seen:
                context.report_error(
                    f"Argument @{directive.name}({name}:) can only be defined once.",
                    locator.directive_arg_nodes(directive.name, name),
                    ErrorCategory.DUPLICATE)
                continue
            seen.add(name)

            if not accepts_input(arg.type):
                context.report_error(
                    f"The type of @{directive.name}({name}:) must be Input Type "
                    f"but got: {inspect(arg.type)}.",
                    locator.directive_arg_type_node(directive.name, name),
                    ErrorCategory.TYPE_COMPATIBILITY)
