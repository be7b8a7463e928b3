"""Validator base class and logical composition.

A validator is called as ``validator(value, context=None)`` and returns a
ValidationResult. ``context`` is the container enclosing ``value`` when the
validator runs as a field of a table schema, otherwise None.

Validators compose with operators:

    number_or_string = Predicate(is_number) | Predicate(is_string)
    positive_number = Predicate(is_number) & Predicate(lambda v: v > 0)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from .exceptions import SchemaDefinitionError
from .result import ValidationResult


class Validator(ABC):
    """Base class for all validators with composable operators."""

    @abstractmethod
    def check(self, value: Any, context: Any = None) -> ValidationResult:
        """Validate a value.

        Args:
            value: Value to validate
            context: Enclosing container when validated as a table field

        Returns:
            ValidationResult with validation outcome
        """

    def __call__(self, value: Any, context: Any = None) -> ValidationResult:
        return self.check(value, context)

    def __and__(self, other: Any) -> All:
        """Combine with AND: both validators must pass."""
        other = as_validator(other)
        if isinstance(self, All):
            return All(*self.validators, other)
        elif isinstance(other, All):
            return All(self, *other.validators)
        return All(self, other)

    def __rand__(self, other: Any) -> All:
        return as_validator(other) & self

    def __or__(self, other: Any) -> AnyOf:
        """Combine with OR: at least one validator must pass."""
        other = as_validator(other)
        if isinstance(self, AnyOf):
            return AnyOf(*self.validators, other)
        elif isinstance(other, AnyOf):
            return AnyOf(self, *other.validators)
        return AnyOf(self, other)

    def __ror__(self, other: Any) -> AnyOf:
        return as_validator(other) | self

    def __invert__(self) -> Not:
        """Negate this validator."""
        return Not(self)


class Predicate(Validator):
    """Adapts a ``value -> bool`` function into a validator.

    The function only receives the value. A falsy return fails without
    diagnostics; wrap it in ``assert_`` to attach a message.
    """

    def __init__(self, func: Callable[[Any], Any]):
        if not callable(func):
            raise SchemaDefinitionError(
                "Predicate requires a callable",
                context={"type": type(func).__name__},
            )
        self.func = func

    def check(self, value: Any, context: Any = None) -> ValidationResult:
        return ValidationResult.coerce(self.func(value))

    def __repr__(self) -> str:
        return f"Predicate({getattr(self.func, '__name__', repr(self.func))})"


class Contextual(Validator):
    """Adapts a ``(value, context) -> result`` function into a validator.

    Used for cross-field rules, where the check needs to see the rest of
    the enclosing container:

        later = contextual(lambda end, row: end > row["start"])
    """

    def __init__(self, func: Callable[[Any, Any], Any]):
        if not callable(func):
            raise SchemaDefinitionError(
                "Contextual check requires a callable",
                context={"type": type(func).__name__},
            )
        self.func = func

    def check(self, value: Any, context: Any = None) -> ValidationResult:
        return ValidationResult.coerce(self.func(value, context))

    def __repr__(self) -> str:
        return f"Contextual({getattr(self.func, '__name__', repr(self.func))})"


class All(Validator):
    """All validators must pass (AND logic).

    Stops at the first failure and returns it unchanged, so the failing
    member's diagnostics reach the caller.
    """

    def __init__(self, *validators: Any):
        self.validators: tuple[Validator, ...] = tuple(as_validator(v) for v in validators)

    def check(self, value: Any, context: Any = None) -> ValidationResult:
        for validator in self.validators:
            result = validator.check(value, context)
            if not result.ok:
                return result
        return ValidationResult.success()

    def __repr__(self) -> str:
        return f"All({', '.join(repr(v) for v in self.validators)})"


class AnyOf(Validator):
    """At least one validator must pass (OR logic).

    Returns the first passing member's result. When every member fails,
    the last member's failure is returned.
    """

    def __init__(self, *validators: Any):
        self.validators: tuple[Validator, ...] = tuple(as_validator(v) for v in validators)

    def check(self, value: Any, context: Any = None) -> ValidationResult:
        result = ValidationResult.failure()
        for validator in self.validators:
            result = validator.check(value, context)
            if result.ok:
                return result
        return result

    def __repr__(self) -> str:
        return f"AnyOf({', '.join(repr(v) for v in self.validators)})"


class Not(Validator):
    """Negates a validator."""

    def __init__(self, validator: Any):
        self.validator = as_validator(validator)

    def check(self, value: Any, context: Any = None) -> ValidationResult:
        if self.validator.check(value, context).ok:
            return ValidationResult.failure()
        return ValidationResult.success()

    def __repr__(self) -> str:
        return f"Not({self.validator!r})"


def as_validator(check: Any) -> Validator:
    """Return ``check`` as a Validator, wrapping plain callables as predicates.

    Raises:
        SchemaDefinitionError: If ``check`` is neither a Validator nor callable
    """
    if isinstance(check, Validator):
        return check
    if callable(check):
        return Predicate(check)
    raise SchemaDefinitionError(
        f"Expected a validator or callable, got {type(check).__name__}",
        context={"type": type(check).__name__},
    )


def contextual(func: Callable[[Any, Any], Any]) -> Contextual:
    """Wrap a ``(value, context)`` function as a cross-field validator."""
    return Contextual(func)
