"""Identifier grammar for type system names."""

import re

NAME_PATTERN = re.compile(r"[_a-zA-Z][_a-zA-Z0-9]*")


def is_valid_name_error(name: str) -> str | None:
    """Return an error message if `name` is not a valid name, else None.

    Names beginning with "__" are reserved for introspection.
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected name to be a string, got {type(name).__name__}")
    if len(name) > 1 and name.startswith("__"):
        return (f'Name "{name}" must not begin with "__", '
                "which is reserved by GraphQL introspection.")
    if not NAME_PATTERN.fullmatch(name):
        return f'Names must match /^[_a-zA-Z][_a-zA-Z0-9]*$/ but "{name}" does not.'
    return None


def assert_valid_name(name: str) -> str:
    """Return `name` unchanged, or raise ValueError if it breaks the grammar."""
    error = is_valid_name_error(name)
    if error:
        raise ValueError(error)
    return name
