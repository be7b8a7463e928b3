"""Examples of building and combining tablecheck schemas."""

from dataknobs_tablecheck import (
    assert_,
    assert_table,
    contextual,
    ensure,
    f_and,
    f_or,
    is_number,
    is_string,
    nonempty,
    one_of,
    optional,
    table_of,
    TablecheckValidationError,
)


def example_1_simple_table():
    """Example validating a flat table with messages and hints."""
    schema = assert_table({
        "name": assert_(is_string, "The name must be a string!"),
        "id": assert_(is_number, "The id must be a number!"),
        "gender": assert_(
            one_of(["male", "female", "carp"]),
            "Gender missing or not recognised!",
            ["Perhaps you are a carp?"],
        ),
        "scores": assert_(nonempty(table_of(is_number)), "scores must be a non-empty list of numbers"),
        "nickname": assert_(optional(is_string), "nickname given, but not a string"),
    })

    correct, err, hints = schema({"name": "Dick", "id": 3, "gender": "carp", "scores": [1, 2]})
    print(correct)  # True

    correct, err, hints = schema({"name": "Dick", "id": 3, "gender": "crap", "scores": [1, 2]})
    print(correct)  # False
    print(err)  # Gender missing or not recognised!
    print(hints)  # ('Perhaps you are a carp?',)


def example_2_nesting():
    """Example nesting one schema inside another."""
    schema = assert_table({
        "nested": assert_table({
            "val": assert_(is_number, "'val' must be a number!"),
        }),
    })

    print(schema({"nested": {"val": 3}}).ok)  # True
    print(schema({}).error)  # Element 'nested' is corrupt!
    print(schema({"nested": {"val": "3"}}).error)  # 'val' must be a number!


def example_3_combining():
    """Example combining whole schemas with AND/OR."""
    num_schema = assert_table({"num": assert_(is_number, "num is not a number")})
    str_schema = assert_table({"str": assert_(is_string, "str is not a string")})

    both = f_and(num_schema, str_schema)
    either = f_or(num_schema, str_schema)

    print(both({"num": 1}).error)  # str is not a string
    print(either({"str": "string!"}).ok)  # True


def example_4_cross_field():
    """Example of a rule that looks at sibling fields."""
    schema = assert_table({
        "start": assert_(is_number, "start must be a number"),
        "end": assert_(
            contextual(lambda end, row: is_number(end) and end > row["start"]),
            "end must come after start",
        ),
    })

    try:
        ensure(schema, {"start": 10, "end": 5})
    except TablecheckValidationError as e:
        print(f"Rejected: {e}")  # Rejected: end must come after start


if __name__ == "__main__":
    example_1_simple_table()
    example_2_nesting()
    example_3_combining()
    example_4_cross_field()
