"""Schema validation.

Validators are tagged passes that run in phase order (ROOT_TYPES,
DIRECTIVES, TYPES) over a shared ValidationContext, reporting
diagnostics instead of raising:

    from schemakit.validation import validate_schema
    errors = validate_schema(schema)

Validators are defined in submodules:
    roots.py:       query / mutation / subscription roots
    directives.py:  registered directives and their arguments
    named_types.py: type map dispatch and per-kind checks
    interfaces.py:  Object-implements-Interface conformance

Core types live in core.py to avoid circular imports.
"""

from .core import (  # noqa: F401
    Phase,
    ErrorCategory,
    SchemaDiagnostic,
    ValidationContext,
    ValidationError,
    Validator,
    VALIDATORS,
    register_validator,
    run_validators,
)
from .locator import DiagnosticLocator, Entity  # noqa: F401
from .interfaces import interface_argument_compatible  # noqa: F401
from .runner import assert_valid_schema, check_schema, validate_schema  # noqa: F401

# Import submodules to trigger validator registration, in phase order.
from . import roots, directives, named_types  # noqa: F401
