"""Core validation types, registry, and runner.

All types live here to avoid circular imports. Validator submodules
import from core; __init__ re-exports the public names.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Callable

from ..language import SourceLocation

if TYPE_CHECKING:
    from ..schema import Schema
    from .locator import DiagnosticLocator


class Phase(Enum):
    """Validation passes, in the order they run.

    Passes never feed results into each other; the fixed order only
    makes diagnostic order reproducible.
    """
    ROOT_TYPES = auto()   # query / mutation / subscription roots
    DIRECTIVES = auto()   # registered directives and their arguments
    TYPES      = auto()   # every entry of the type map, dispatched by kind


class ErrorCategory(Enum):
    """What kind of rule a diagnostic reports.

    STRUCTURAL:          Something required is missing (root, fields, members, values).
    KIND:                A type of the wrong kind in a position (non-Object root, ...).
    NAME:                Name grammar violation or reserved enum value name.
    DUPLICATE:           A name defined more than once within one scope.
    TYPE_COMPATIBILITY:  Input/output misuse or an interface contract not met.
    """
    STRUCTURAL         = auto()
    KIND               = auto()
    NAME               = auto()
    DUPLICATE          = auto()
    TYPE_COMPATIBILITY = auto()


@dataclass
class SchemaDiagnostic:
    """A single diagnostic: a message plus the AST nodes it points at."""
    message: str
    nodes: list[Any] = field(default_factory=list)
    category: ErrorCategory = ErrorCategory.STRUCTURAL

    @property
    def locations(self) -> list[SourceLocation]:
        return [n.loc for n in self.nodes if getattr(n, "loc", None) is not None]

    @property
    def formatted(self) -> dict[str, Any]:
        locations = self.locations
        return {
            "message": self.message,
            "locations": [loc.formatted() for loc in locations] if locations else None,
        }

    def __str__(self) -> str:
        locations = self.locations
        if not locations:
            return self.message
        where = ", ".join(f"{loc.line}:{loc.column}" for loc in locations)
        return f"{self.message} ({where})"


class ValidationError(Exception):
    """Raised by the strict entry points when a schema has diagnostics."""

    def __init__(self, errors: list[SchemaDiagnostic]) -> None:
        self.errors = errors
        super().__init__("\n\n".join(e.message for e in errors))


class ValidationContext:
    """Shared state for one validation pass: the schema, locator, and error sink.

    The error list is append-only. Validators report into it and never
    raise.
    """

    def __init__(self, schema: Schema, locator: DiagnosticLocator) -> None:
        self.schema = schema
        self.locator = locator
        self.errors: list[SchemaDiagnostic] = []

    def report_error(
        self,
        message: str,
        nodes: Any = None,
        category: ErrorCategory = ErrorCategory.STRUCTURAL,
    ) -> None:
        """Append a diagnostic. `nodes` may be None, one node, or an iterable; None entries are dropped."""
        if nodes is None:
            node_list = []
        elif isinstance(nodes, (list, tuple)):
            node_list = [n for n in nodes if n is not None]
        else:
            node_list = [nodes]
        self.errors.append(SchemaDiagnostic(message, node_list, category))


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@dataclass
class Validator:
    """A tagged validation pass.

    Attributes:
        name: Human-readable identifier.
        phase: When this validator runs.
        check: Callable that inspects the context's schema and reports
            into the context.
    """
    name: str
    phase: Phase
    check: Callable[[ValidationContext], None]


VALIDATORS: list[Validator] = []


def register_validator(name: str, phase: Phase):
    """Decorator to register a validation pass.

    Usage:
        @register_validator("root_types", Phase.ROOT_TYPES)
        def validate_root_types(context: ValidationContext) -> None:
            ...
    """
    def decorator(fn: Callable[[ValidationContext], None]):
        VALIDATORS.append(Validator(name=name, phase=phase, check=fn))
        return fn
    return decorator


def run_validators(context: ValidationContext) -> list[SchemaDiagnostic]:
    """Run every registered validator, phase by phase, into `context`.

    Returns the context's accumulated diagnostics.
    """
    for phase in Phase:
        for v in VALIDATORS:
            if v.phase == phase:
                v.check(context)
    return context.errors

