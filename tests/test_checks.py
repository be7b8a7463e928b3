"""Tests for the validate/ensure entry points and exceptions."""

import logging

import pytest

from dataknobs_tablecheck import (
    SchemaDefinitionError,
    TablecheckError,
    TablecheckSettings,
    TablecheckValidationError,
    assert_,
    configure,
    ensure,
    is_number,
    is_string,
    one_of,
    validate,
)


@pytest.fixture
def gender_schema():
    return {
        "gender": assert_(
            one_of(["male", "female", "carp"]),
            "Gender not recognised!",
            ["Perhaps you are a carp?"],
        ),
    }


class TestValidate:
    """validate() runs a schema and logs failures per settings."""

    def test_raw_mapping_schema(self, gender_schema):
        assert validate(gender_schema, {"gender": "carp"}).ok
        assert validate(gender_schema, {"gender": "crap"}).error == "Gender not recognised!"

    def test_raw_positional_schema(self):
        assert validate([is_string, is_number], ["a", 1]).ok

    def test_predicate_schema(self):
        assert validate(is_number, 3).ok
        assert not validate(is_number, "3").ok

    def test_validator_schema(self):
        assert validate(assert_(is_number, "Must be a number!"), "x").error == "Must be a number!"

    def test_rejects_unusable_schema(self):
        with pytest.raises(SchemaDefinitionError):
            validate(42, {})

    def test_failures_not_logged_by_default(self, gender_schema, caplog):
        caplog.set_level(logging.DEBUG, logger="dataknobs_tablecheck")
        validate(gender_schema, {"gender": "crap"})
        assert "Validation failed" not in caplog.text

    def test_failures_logged_when_enabled(self, gender_schema, caplog):
        settings = TablecheckSettings(log_failures=True, failure_log_level="WARNING")
        validate(gender_schema, {"gender": "crap"}, settings)
        records = [r for r in caplog.records if r.name == "dataknobs_tablecheck.checks"]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert records[0].getMessage() == (
            "Validation failed: Gender not recognised! (hints: Perhaps you are a carp?)"
        )

    def test_hints_can_be_left_out_of_logs(self, gender_schema, caplog):
        settings = TablecheckSettings(
            log_failures=True, failure_log_level="ERROR", include_hints_in_log=False
        )
        validate(gender_schema, {"gender": "crap"}, settings)
        assert "Validation failed: Gender not recognised!" in caplog.text
        assert "carp?" not in caplog.text

    def test_uses_global_settings(self, caplog):
        configure(TablecheckSettings(log_failures=True, failure_log_level="ERROR"))
        validate(is_number, "x")
        assert "Validation failed: no error message" in caplog.text

    def test_success_not_logged(self, caplog):
        settings = TablecheckSettings(log_failures=True, failure_log_level="ERROR")
        validate(is_number, 1, settings)
        assert caplog.text == ""


class TestEnsure:
    """ensure() raises instead of returning a failure."""

    def test_returns_value_when_valid(self, gender_schema):
        payload = {"gender": "male"}
        assert ensure(gender_schema, payload) is payload

    def test_raises_with_diagnostics(self, gender_schema):
        with pytest.raises(TablecheckValidationError) as exc_info:
            ensure(gender_schema, {"gender": "crap"})
        error = exc_info.value
        assert str(error) == "Gender not recognised!"
        assert error.error == "Gender not recognised!"
        assert error.hints == ("Perhaps you are a carp?",)
        assert error.context == {
            "error": "Gender not recognised!",
            "hints": ["Perhaps you are a carp?"],
        }

    def test_raises_generic_message_without_error(self):
        with pytest.raises(TablecheckValidationError) as exc_info:
            ensure(is_number, "x")
        assert str(exc_info.value) == "Validation failed"
        assert exc_info.value.hints == ()


class TestExceptions:
    """Test the exception hierarchy."""

    def test_base_exception(self):
        error = TablecheckError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.context == {}
        assert error.details == {}

    def test_details_takes_precedence(self):
        error = TablecheckError("Error", context={"key": "c"}, details={"key": "d"})
        assert error.context == {"key": "d"}

    def test_hierarchy(self):
        assert issubclass(SchemaDefinitionError, TablecheckError)
        assert issubclass(TablecheckValidationError, TablecheckError)
        with pytest.raises(TablecheckError):
            raise TablecheckValidationError("bad")
