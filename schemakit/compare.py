"""Comparators over (possibly wrapped) type references."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .types import (
    is_abstract_type, is_list_type, is_non_null_type, is_object_type,
)

if TYPE_CHECKING:
    from .schema import Schema


def is_equal_type(type_a: Any, type_b: Any) -> bool:
    """Exact equality: same named type under the same wrapper nesting."""
    if type_a is type_b:
        return True
    if is_non_null_type(type_a) and is_non_null_type(type_b):
        return is_equal_type(type_a.of_type, type_b.of_type)
    if is_list_type(type_a) and is_list_type(type_b):
        return is_equal_type(type_a.of_type, type_b.of_type)
    return False


def is_type_sub_type_of(schema: Schema, maybe_sub: Any, super_type: Any) -> bool:
    """Covariant check: can a value of `maybe_sub` be used where `super_type` is expected?

    NonNull(T) satisfies T, [S] satisfies [T] when S satisfies T, and an
    Object type satisfies an Interface or Union it belongs to.
    """
    if maybe_sub is super_type:
        return True

    if is_non_null_type(super_type):
        if is_non_null_type(maybe_sub):
            return is_type_sub_type_of(schema, maybe_sub.of_type, super_type.of_type)
        return False
    if is_non_null_type(maybe_sub):
        return is_type_sub_type_of(schema, maybe_sub.of_type, super_type)

    if is_list_type(super_type):
        if is_list_type(maybe_sub):
            return is_type_sub_type_of(schema, maybe_sub.of_type, super_type.of_type)
        return False
    if is_list_type(maybe_sub):
        return False

    return (is_abstract_type(super_type) and is_object_type(maybe_sub)
            and schema.is_possible_type(super_type, maybe_sub))
