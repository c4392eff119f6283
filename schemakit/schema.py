"""Schema: root types, the named type map, and directives.

The type map is collected once at construction by walking everything
reachable from the roots, the extra `types`, the introspection types and
the directive arguments. Iteration order of the type map is the order
types were first reached, and diagnostics follow it.

Schemas are treated as read-only after construction. The one exception
is `validation_cache`, which the validator fills exactly once.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Callable, Iterable

from .introspection import SchemaType
from .language import SchemaDefinitionNode
from .types import (
    SPECIFIED_DIRECTIVES, Directive, NamedType, ObjectType, get_named_type,
    is_input_object_type, is_input_union_type, is_interface_type,
    is_object_type, is_union_type,
)

if TYPE_CHECKING:
    from .validation.core import SchemaDiagnostic


class ValidationCache:
    """One-shot cell for a schema's validation result.

    Empty until the first validation pass stores its diagnostics. After
    that, `get_or_compute` returns the stored list without calling
    `compute` again. The check and the store happen under one lock, so a
    concurrent reader never sees a half-filled cell.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._errors: list[SchemaDiagnostic] | None = None

    @property
    def populated(self) -> bool:
        return self._errors is not None

    @property
    def errors(self) -> list[SchemaDiagnostic] | None:
        return self._errors

    def get_or_compute(self, compute: Callable[[], list[SchemaDiagnostic]]) -> list[SchemaDiagnostic]:
        with self._lock:
            if self._errors is None:
                self._errors = compute()
            return self._errors

    def set(self, errors: list[SchemaDiagnostic]) -> None:
        """Populate the cell directly. Ignored if already populated."""
        with self._lock:
            if self._errors is None:
                self._errors = errors


class Schema:
    """A complete type system: roots, named types and directives.

    Args:
        query: Query root type. Required for a valid schema, but a schema
            without one can still be built (validation reports it).
        mutation / subscription: Optional root types.
        types: Extra named types not reachable from the roots.
        directives: Registered directives. Defaults to @include, @skip
            and @deprecated.
        ast_node: The `schema { ... }` definition node, if any.
        allowed_legacy_names: Names exempt from the name grammar.
        assume_valid: Skip validation; the cache starts populated with [].
    """

    def __init__(
        self,
        query: Any = None,
        mutation: Any = None,
        subscription: Any = None,
        types: Iterable[Any] | None = None,
        directives: Iterable[Any] | None = None,
        ast_node: SchemaDefinitionNode | None = None,
        allowed_legacy_names: Iterable[str] | None = None,
        assume_valid: bool = False,
    ) -> None:
        self.query_type = query
        self.mutation_type = mutation
        self.subscription_type = subscription
        self.ast_node = ast_node
        self.allowed_legacy_names: frozenset[str] = frozenset(allowed_legacy_names or ())
        self.directives: list[Any] = (
            list(directives) if directives is not None else list(SPECIFIED_DIRECTIVES))

        self.validation_cache = ValidationCache()
        if assume_valid:
            self.validation_cache.set([])

        self.type_map: dict[str, Any] = {}
        initial = [query, mutation, subscription, *(types or ()), SchemaType]
        for t in initial:
            self._collect(t)
        for d in self.directives:
            if isinstance(d, Directive):
                for arg in d.args:
                    self._collect(arg.type)

        self._possible_types: dict[str, list[ObjectType]] | None = None

    # --- Type map collection ---

    def _collect(self, type_: Any) -> None:
        """Add a type and everything it references to the type map (iterative DFS)."""
        stack = [type_]
        while stack:
            named = get_named_type(stack.pop())
            if named is None:
                continue
            existing = self.type_map.get(named.name)
            if existing is not None:
                if existing is not named:
                    raise ValueError(
                        "Schema must contain unique named types but contains "
                        f"multiple types named \"{named.name}\".")
                continue
            self.type_map[named.name] = named

            refs: list[Any] = []
            if is_object_type(named) or is_interface_type(named):
                for f in named.fields.values():
                    refs.append(f.type)
                    refs.extend(arg.type for arg in f.args)
                if is_object_type(named):
                    refs.extend(named.interfaces)
            elif is_union_type(named) or is_input_union_type(named):
                refs.extend(named.types)
            elif is_input_object_type(named):
                refs.extend(f.type for f in named.fields.values())
            # Reversed so the first reference is visited first.
            stack.extend(reversed(refs))

    # --- Lookups ---

    @property
    def types(self) -> list[Any]:
        return list(self.type_map.values())

    def get_type(self, name: str) -> Any:
        return self.type_map.get(name)

    def get_directive(self, name: str) -> Directive | None:
        for d in self.directives:
            if isinstance(d, Directive) and d.name == name:
                return d
        return None

    def get_possible_types(self, abstract_type: NamedType) -> list[ObjectType]:
        """Object types a Union contains or that implement an Interface."""
        if is_union_type(abstract_type):
            return [t for t in abstract_type.types if is_object_type(t)]
        if self._possible_types is None:
            implementations: dict[str, list[ObjectType]] = {}
            for t in self.type_map.values():
                if is_object_type(t):
                    for iface in t.interfaces:
                        if is_interface_type(iface):
                            implementations.setdefault(iface.name, []).append(t)
            self._possible_types = implementations
        return self._possible_types.get(abstract_type.name, [])

    def is_possible_type(self, abstract_type: NamedType, possible_type: NamedType) -> bool:
        return any(t is possible_type for t in self.get_possible_types(abstract_type))

    def __repr__(self) -> str:
        return (f"<Schema query={self.query_type!s} types={len(self.type_map)} "
                f"directives={len(self.directives)}>")
