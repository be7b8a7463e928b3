"""Exception hierarchy for the tablecheck package.

Validation failures are returned as ValidationResult values, never raised.
Exceptions are reserved for:

- schemas that cannot be built at all (``SchemaDefinitionError``)
- invalid configuration (``ConfigurationError``)
- callers that explicitly ask for raising via ``ensure``
  (``TablecheckValidationError``)

Example:
    ```python
    from dataknobs_tablecheck import ensure, TablecheckValidationError

    try:
        ensure(schema, payload)
    except TablecheckValidationError as e:
        logger.error(f"Rejected payload: {e}")
        for hint in e.hints:
            logger.error(f"Hint: {hint}")
    ```
"""

from typing import Any, Dict, Sequence


class TablecheckError(Exception):
    """Base exception for the tablecheck package.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (takes precedence if both are given)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class SchemaDefinitionError(TablecheckError):
    """Raised when a schema or combinator is given unusable arguments.

    Example:
        ```python
        raise SchemaDefinitionError(
            "Schema must be a mapping or a sequence",
            context={"schema_type": "int"}
        )
        ```
    """

    pass


class ConfigurationError(TablecheckError):
    """Raised when tablecheck settings are invalid."""

    pass


class TablecheckValidationError(TablecheckError):
    """Raised by ``ensure`` when a value does not conform to its schema.

    The failing error message and hints are kept in the context.
    """

    def __init__(self, error: str | None, hints: Sequence[str] | None = None):
        message = error or "Validation failed"
        super().__init__(
            message,
            context={"error": error, "hints": list(hints or [])},
        )
        self.error = error
        self.hints = tuple(hints or ())
