"""Entry points for running a schema against a value.

``validate`` returns the ValidationResult and logs failures according to
the settings. ``ensure`` raises instead, for call sites where an invalid
value should abort the operation.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .exceptions import TablecheckValidationError
from .result import ValidationResult
from .schema import assert_table
from .settings import TablecheckSettings, get_settings
from .validators import Validator, as_validator

logger = logging.getLogger(__name__)


def to_validator(schema: Any) -> Validator:
    """Accept a validator, a predicate, or a raw table schema definition."""
    if isinstance(schema, (Mapping, list, tuple)):
        return assert_table(schema)
    return as_validator(schema)


def validate(
    schema: Any,
    value: Any,
    settings: TablecheckSettings | None = None,
) -> ValidationResult:
    """Validate a value against a schema.

    Args:
        schema: Validator, predicate, or raw mapping/sequence schema
        value: Candidate value
        settings: Settings to use instead of the process-wide ones

    Returns:
        ValidationResult with validation outcome
    """
    settings = settings or get_settings()
    result = to_validator(schema).check(value)

    if not result.ok and settings.log_failures:
        message = f"Validation failed: {result.error or 'no error message'}"
        if settings.include_hints_in_log and result.hints:
            message += f" (hints: {'; '.join(result.hints)})"
        logger.log(settings.failure_level, message)

    return result


def ensure(
    schema: Any,
    value: Any,
    settings: TablecheckSettings | None = None,
) -> Any:
    """Return ``value`` if it conforms to ``schema``, otherwise raise.

    Raises:
        TablecheckValidationError: Carrying the failing error and hints
    """
    result = validate(schema, value, settings)
    if not result.ok:
        raise TablecheckValidationError(result.error, result.hints)
    return value
