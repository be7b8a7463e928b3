"""Built-in validators that lift predicates into richer checks.

These mirror the usual schema vocabulary:

- ``optional(check)``: absent, or else ``check`` must hold
- ``table_of(check)``: a table whose every element satisfies ``check``
- ``one_of(values)``: equal to one of a fixed set of values
- ``nonempty(check)``: a table with at least one element
- ``assert_(check, error, hints)``: attach a message and hints to a check

Only ``assert_`` produces diagnostics. The others fail silently and are
meant to be wrapped:

    assert_(nonempty(table_of(is_number)), "Expected a list of numbers")
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .fn import has_value
from .predicates import container_length, is_nil, is_table, iter_elements
from .result import ValidationResult, merge_diagnostics, normalize_hints
from .validators import All, Validator, as_validator


class Optional(Validator):
    """Absent values pass; present values must satisfy every check."""

    def __init__(self, *validators: Any):
        self.inner = All(*validators)

    def check(self, value: Any, context: Any = None) -> ValidationResult:
        if is_nil(value):
            return ValidationResult.success()
        return self.inner.check(value, context)

    def __repr__(self) -> str:
        return f"Optional({', '.join(repr(v) for v in self.inner.validators)})"


class TableOf(Validator):
    """A table whose elements all satisfy a check.

    Mapping values and sequence items are the elements. An empty table
    passes.
    """

    def __init__(self, element_check: Any):
        self.element_check = as_validator(element_check)

    def check(self, value: Any, context: Any = None) -> ValidationResult:
        if not is_table(value):
            return ValidationResult.failure()
        for element in iter_elements(value):
            if not self.element_check.check(element, value).ok:
                return ValidationResult.failure()
        return ValidationResult.success()

    def __repr__(self) -> str:
        return f"TableOf({self.element_check!r})"


class OneOf(Validator):
    """Value must equal one of the allowed values."""

    def __init__(self, allowed_values: Iterable[Any]):
        self.allowed_values = tuple(allowed_values)

    def check(self, value: Any, context: Any = None) -> ValidationResult:
        # Equality scan rather than a set so unhashable values work
        if has_value(self.allowed_values, value):
            return ValidationResult.success()
        return ValidationResult.failure()

    def __repr__(self) -> str:
        return f"OneOf({list(self.allowed_values)!r})"


class Nonempty(Validator):
    """A table with at least one element, optionally also satisfying a check.

    The optional check receives the whole table, which makes
    ``nonempty(table_of(...))`` read naturally.
    """

    def __init__(self, element_check: Any = None):
        self.element_check = as_validator(element_check) if element_check is not None else None

    def check(self, value: Any, context: Any = None) -> ValidationResult:
        if not is_table(value) or container_length(value) == 0:
            return ValidationResult.failure()
        if self.element_check is None:
            return ValidationResult.success()
        return self.element_check.check(value, context)

    def __repr__(self) -> str:
        return f"Nonempty({self.element_check!r})" if self.element_check else "Nonempty()"


class Assert(Validator):
    """Attaches an error message and hints to a check.

    If the wrapped check fails with its own error or hints, those take
    precedence; the message and hints given here only fill the gaps.
    Success and failure are never changed.
    """

    def __init__(self, check: Any, error: str | None, hints: str | Iterable[str] | None = None):
        self.inner = as_validator(check)
        self.error = error
        self.hints = normalize_hints(hints)

    def check(self, value: Any, context: Any = None) -> ValidationResult:
        result = self.inner.check(value, context)
        if result.ok:
            return result
        return merge_diagnostics(result, self.error, self.hints)

    def __repr__(self) -> str:
        return f"Assert({self.inner!r}, {self.error!r})"


def optional(*validators: Any) -> Optional:
    """Optional value; when filled in it must meet every condition.

    Example: ``optional(is_number)`` accepts None or any number.
    """
    return Optional(*validators)


def table_of(element_check: Any) -> TableOf:
    """A table of which each element must meet ``element_check``.

    Example: ``table_of(is_number)`` demands a table containing only numbers.
    """
    return TableOf(element_check)


def one_of(allowed_values: Iterable[Any]) -> OneOf:
    """Checks whether a value is amongst a given set of values.

    Example: ``one_of(["jobs", "entities", "shipments"])``
    """
    return OneOf(allowed_values)


def nonempty(element_check: Any = None) -> Nonempty:
    """A table that is nonempty, also useful for wrapping around table_of.

    Example: ``nonempty(table_of(is_number))``
    """
    return Nonempty(element_check)


def assert_(check: Any, error: str | None, hints: str | Iterable[str] | None = None) -> Assert:
    """Assert a property and report ``error``/``hints`` when it fails.

    Args:
        check: Predicate or validator to run
        error: Message reported when ``check`` fails without its own
        hints: Remediation hints reported when ``check`` has none; a
            single string is one hint

    Returns:
        Assert validator
    """
    return Assert(check, error, hints)
