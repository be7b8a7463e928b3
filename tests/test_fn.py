"""Tests for functional combinators and validator composition."""

import pytest

from dataknobs_tablecheck import (
    All,
    AnyOf,
    Not,
    Predicate,
    SchemaDefinitionError,
    ValidationResult,
    as_validator,
    assert_,
    contextual,
    curry,
    eq,
    f_and,
    f_not,
    f_or,
    has_value,
    is_number,
    is_string,
)


def failing(error, hints=None):
    """Validator that always fails with the given diagnostics."""
    return Predicate(lambda value: ValidationResult.failure(error, hints))


class TestFAnd:
    """AND short-circuits on the first failure."""

    def test_all_pass(self):
        assert f_and(is_number, lambda v: v > 0)(5).ok

    def test_first_failure_wins(self):
        calls = []

        def tracked(value):
            calls.append(value)
            return True

        validator = f_and(failing("first"), failing("second"), tracked)
        result = validator("x")
        assert result == ValidationResult(ok=False, error="first")
        assert calls == []

    def test_empty_and_passes(self):
        assert f_and()(None).ok


class TestFOr:
    """OR short-circuits on the first success."""

    def test_any_pass(self):
        strnum = f_or(is_string, is_number)
        assert strnum("str").ok
        assert strnum(3).ok
        assert not strnum([]).ok

    def test_success_returns_passing_member(self):
        result = f_or(failing("nope"), is_number)(1)
        assert result.ok

    def test_total_failure_reports_last_member(self):
        result = f_or(failing("first"), failing("last", ["hint"]))(None)
        assert result == ValidationResult(ok=False, error="last", hints=("hint",))

    def test_empty_or_fails(self):
        assert not f_or()(1).ok


class TestFNot:
    def test_negation(self):
        assert f_not(is_number)("x").ok
        assert not f_not(is_number)(1).ok
        assert (~Predicate(is_number))("x").ok


class TestOperators:
    """Validators compose with & and | without mutating operands."""

    def test_and_operator_flattens(self):
        a, b, c = Predicate(is_number), Predicate(lambda v: v > 0), Predicate(lambda v: v < 10)
        combined = a & b & c
        assert isinstance(combined, All)
        assert len(combined.validators) == 3
        assert combined(5).ok
        assert not combined(50).ok

    def test_or_operator_flattens(self):
        combined = Predicate(is_string) | Predicate(is_number) | Predicate(lambda v: v is None)
        assert isinstance(combined, AnyOf)
        assert len(combined.validators) == 3
        assert combined(None).ok

    def test_operands_are_not_mutated(self):
        base = All(is_number)
        extended = base & (lambda v: v > 0)
        assert len(base.validators) == 1
        assert len(extended.validators) == 2

    def test_plain_function_on_left(self):
        combined = is_number & Predicate(lambda v: v > 0)
        assert isinstance(combined, All)
        assert combined(1).ok
        assert not combined(-1).ok

    def test_not_operator(self):
        assert isinstance(~Predicate(is_number), Not)


class TestAsValidator:
    def test_wraps_callables(self):
        validator = as_validator(is_number)
        assert isinstance(validator, Predicate)
        assert validator(1).ok

    def test_passes_validators_through(self):
        validator = assert_(is_number, "nope")
        assert as_validator(validator) is validator

    def test_rejects_non_callables(self):
        with pytest.raises(SchemaDefinitionError) as exc_info:
            as_validator(42)
        assert exc_info.value.context == {"type": "int"}


class TestContextual:
    def test_receives_context(self):
        after_start = contextual(lambda end, row: end > row["start"])
        assert after_start(5, {"start": 1}).ok
        assert not after_start(0, {"start": 1}).ok


class TestCurry:
    """Currying and equality helpers."""

    def test_curry_eq(self):
        is_nil = curry(eq, 2)(None)
        assert is_nil(None)
        assert not is_nil(0)

    def test_curry_infers_arity(self):
        def add3(a, b, c):
            return a + b + c

        curried = curry(add3)
        assert curried(1)(2)(3) == 6
        assert curried(1, 2)(3) == 6
        assert curried(1, 2, 3) == 6

    def test_curry_rejects_zero_arity(self):
        with pytest.raises(SchemaDefinitionError):
            curry(eq, 0)

    def test_has_value(self):
        assert has_value(["a", "b"], "b")
        assert not has_value(["a", "b"], "c")
        assert has_value([{"x": 1}], {"x": 1})
