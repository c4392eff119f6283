"""Small text helpers for diagnostic and suggestion messages."""

from typing import Any, Sequence

from .types import Directive, ListOf, NamedType, NonNull

MAX_LENGTH = 5


def or_list(items: Sequence[str]) -> str:
    """Given ["A", "B", "C"] return "A, B, or C".

    At most MAX_LENGTH items are shown. Two items read "A or B".
    """
    selected = list(items[:MAX_LENGTH])
    if not selected:
        raise ValueError("or_list requires at least one item")
    if len(selected) == 1:
        return selected[0]
    if len(selected) == 2:
        return f"{selected[0]} or {selected[1]}"
    return ", ".join(selected[:-1]) + f", or {selected[-1]}"


def quoted_or_list(items: Sequence[str]) -> str:
    """Like or_list, with each item wrapped in double quotes."""
    return or_list([f'"{item}"' for item in items])


def inspect(value: Any) -> str:
    """Render a value for a diagnostic: types by their SDL form, anything else by repr."""
    if isinstance(value, (NamedType, ListOf, NonNull, Directive)):
        return str(value)
    if value is None:
        return "None"
    return repr(value)
