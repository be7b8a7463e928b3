"""Pytest configuration and fixtures for tablecheck tests."""

import pytest

from dataknobs_tablecheck import (
    assert_,
    assert_table,
    f_or,
    is_nil,
    is_number,
    is_string,
    nonempty,
    one_of,
    optional,
    reset_settings,
    table_of,
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from TABLECHECK_* variables and cached settings."""
    for name in ("TABLECHECK_LOG_FAILURES", "TABLECHECK_FAILURE_LOG_LEVEL",
                 "TABLECHECK_INCLUDE_HINTS_IN_LOG"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def person_schema():
    """Table schema exercising every built-in combinator."""
    return assert_table({
        "name": assert_(is_string, "The name must be a string!"),
        "id": assert_(is_number, "The id must be a number!"),
        "gender": assert_(
            one_of(["male", "female", "carp"]),
            "Gender missing or not recognised!",
            ["Perhaps you are a carp?"],
        ),
        "nilthing": assert_(is_nil, "nilthing must be nil"),
        "nonempty": assert_(nonempty(table_of(is_number)), "nonempty not table of numbers"),
        "optnum": assert_(optional(is_number), "optnum given, but not a number"),
        "strnum": assert_(f_or(is_string, is_number), "strnum must either be a string or a number"),
    })


@pytest.fixture
def valid_person():
    return {"name": "Dick", "id": 3, "gender": "carp", "nonempty": [1, 2, 3], "strnum": "str"}
