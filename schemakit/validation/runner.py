"""Entry points: validate a schema once and cache the result on it."""

import logging

from ..schema import Schema
from .core import SchemaDiagnostic, ValidationContext, ValidationError, run_validators
from .locator import DiagnosticLocator

logger = logging.getLogger(__name__)


def validate_schema(schema: Schema) -> list[SchemaDiagnostic]:
    """Validate `schema` and return its diagnostics (empty = valid).

    The first call runs every pass (roots, directives, types) and stores
    the list in `schema.validation_cache`; later calls return that same
    list without recomputing.

    Raises:
        TypeError: If `schema` is not a Schema.
    """
    if not isinstance(schema, Schema):
        raise TypeError(f"Expected {schema!r} to be a Schema.")

    if schema.validation_cache.populated:
        logger.debug("Using cached validation result for %r", schema)

    def _compute() -> list[SchemaDiagnostic]:
        logger.debug("Validating %r", schema)
        context = ValidationContext(schema, DiagnosticLocator(schema))
        errors = run_validators(context)
        logger.info("Schema validation produced %d error(s)", len(errors))
        return errors

    return schema.validation_cache.get_or_compute(_compute)


def assert_valid_schema(schema: Schema) -> None:
    """Raise ValidationError (messages joined by blank lines) if `schema` is invalid."""
    errors = validate_schema(schema)
    if errors:
        raise ValidationError(errors)


def check_schema(schema: Schema, validation: str = "normal") -> list[SchemaDiagnostic]:
    """Validate with a configurable strictness.

    Args:
        validation: How strictly to enforce the checks.
            "strict":  Raise ValidationError on any diagnostic.
            "normal":  Return the diagnostics (default).
            "none":    Skip validation entirely and return [].
    """
    if validation == "none":
        return []
    if validation == "strict":
        assert_valid_schema(schema)
        return []
    if validation == "normal":
        return validate_schema(schema)
    raise ValueError(f"Unknown validation mode: {validation!r}")
