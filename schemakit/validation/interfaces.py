"""Interface conformance: does an Object satisfy every Interface it claims?

Field types are checked covariantly (the object may return a more
specific type), argument types invariantly (exact match). Extra
arguments on the object's field must be optional.
"""

from typing import Any

from ..compare import is_equal_type, is_type_sub_type_of
from ..formatting import inspect
from ..types import Field, InterfaceType, ObjectType, is_interface_type, is_non_null_type
from .core import ErrorCategory, ValidationContext


def interface_argument_compatible(iface_arg_type: Any, object_arg_type: Any) -> bool:
    """Whether an object field argument may stand in for the interface's argument.

    Callers that only know the interface supply the argument values, so
    the accepted type may not widen or narrow: exact equality.
    """
    return is_equal_type(iface_arg_type, object_arg_type)


def validate_object_interfaces(context: ValidationContext, obj: ObjectType) -> None:
    """Check each interface claim of `obj`, in declaration order."""
    implemented: set[str] = set()
    for iface in obj.interfaces:
        iface_name = getattr(iface, "name", None)
        if iface_name is not None and iface_name in implemented:
            context.report_error(
                f"Type {obj.name} can only implement {iface_name} once.",
                context.locator.interface_nodes(obj.name, iface_name),
                ErrorCategory.DUPLICATE)
            continue
        if iface_name is not None:
            implemented.add(iface_name)
        validate_object_implements_interface(context, obj, iface)


def validate_object_implements_interface(
    context: ValidationContext, obj: ObjectType, iface: Any,
) -> None:
    locator = context.locator

    if not is_interface_type(iface):
        nodes = locator.interface_nodes(obj.name, getattr(iface, "name", None))
        context.report_error(
            f"Type {obj.name} must only implement Interface types, "
            f"it cannot implement {inspect(iface)}.",
            nodes[:1], ErrorCategory.KIND)
        return

    for field_name, iface_field in iface.fields.items():
        obj_field = obj.fields.get(field_name)
        if obj_field is None:
            context.report_error(
                f"Interface field {iface.name}.{field_name} expected "
                f"but {obj.name} does not provide it.",
                [locator.field_node(iface.name, field_name), obj.ast_node],
                ErrorCategory.TYPE_COMPATIBILITY)
            continue

        if not is_type_sub_type_of(context.schema, obj_field.type, iface_field.type):
            context.report_error(
                f"Interface field {iface.name}.{field_name} expects type "
                f"{inspect(iface_field.type)} but {obj.name}.{field_name} "
                f"is type {inspect(obj_field.type)}.",
                [locator.field_type_node(iface.name, field_name),
                 locator.field_type_node(obj.name, field_name)],
                ErrorCategory.TYPE_COMPATIBILITY)

        _validate_interface_arguments(context, obj, obj_field, iface, iface_field, field_name)


def _validate_interface_arguments(
    context: ValidationContext,
    obj: ObjectType, obj_field: Field,
    iface: InterfaceType, iface_field: Field, field_name: str,
) -> None:
    locator = context.locator

    # Every interface argument must be present with the same type.
    for iface_arg in iface_field.args:
        arg_name = iface_arg.name
        obj_arg = next((a for a in obj_field.args if a.name == arg_name), None)
        if obj_arg is None:
            context.report_error(
                f"Interface field argument {iface.name}.{field_name}({arg_name}:) "
                f"expected but {obj.name}.{field_name} does not provide it.",
                [locator.arg_node(iface.name, field_name, arg_name),
                 locator.field_node(obj.name, field_name)],
                ErrorCategory.TYPE_COMPATIBILITY)
            continue

        if not interface_argument_compatible(iface_arg.type, obj_arg.type):
            context.report_error(
                f"Interface field argument {iface.name}.{field_name}({arg_name}:) "
                f"expects type {inspect(iface_arg.type)} but "
                f"{obj.name}.{field_name}({arg_name}:) is type {inspect(obj_arg.type)}.",
                [locator.arg_type_node(iface.name, field_name, arg_name),
                 locator.arg_type_node(obj.name, field_name, arg_name)],
                ErrorCategory.TYPE_COMPATIBILITY)

    # Arguments beyond the interface's must be optional.
    iface_arg_names = {a.name for a in iface_field.args}
    for obj_arg in obj_field.args:
        arg_name = obj_arg.name
        if arg_name not in iface_arg_names and is_non_null_type(obj_arg.type):
            context.report_error(
                f"Object field argument {obj.name}.{field_name}({arg_name}:) "
                f"is of required type {inspect(obj_arg.type)} but is not also "
                f"provided by the Interface field {iface.name}.{field_name}.",
                [locator.arg_type_node(obj.name, field_name, arg_name),
                 locator.field_node(iface.name, field_name)],
                ErrorCategory.TYPE_COMPATIBILITY)
