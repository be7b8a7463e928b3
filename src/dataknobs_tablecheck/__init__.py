"""DataKnobs Tablecheck package.

Composable validation of values and tables against schemas built from
plain predicates. Inspired by Joi.

Example:
    ```python
    from dataknobs_tablecheck import assert_, assert_table, is_number, is_string, one_of

    schema = assert_table({
        "name": assert_(is_string, "The name must be a string!"),
        "id": assert_(is_number, "The id must be a number!"),
        "gender": assert_(
            one_of(["male", "female", "carp"]),
            "Gender missing or not recognised!",
            ["Perhaps you are a carp?"],
        ),
    })

    ok, error, hints = schema({"name": "Dick", "id": 3, "gender": "crap"})
    # ok is False
    # error == "Gender missing or not recognised!"
    # hints == ("Perhaps you are a carp?",)
    ```
"""

from dataknobs_tablecheck.checks import ensure, validate
from dataknobs_tablecheck.combinators import (
    Assert,
    Nonempty,
    OneOf,
    Optional,
    TableOf,
    assert_,
    nonempty,
    one_of,
    optional,
    table_of,
)
from dataknobs_tablecheck.exceptions import (
    ConfigurationError,
    SchemaDefinitionError,
    TablecheckError,
    TablecheckValidationError,
)
from dataknobs_tablecheck.fn import curry, eq, f_and, f_not, f_or, has_value
from dataknobs_tablecheck.predicates import (
    instance_of,
    is_bool,
    is_function,
    is_nil,
    is_number,
    is_string,
    is_table,
)
from dataknobs_tablecheck.result import ValidationResult, merge_diagnostics
from dataknobs_tablecheck.schema import (
    CORRUPT_ELEMENT_ERROR,
    NOT_A_TABLE_ERROR,
    Check,
    Presence,
    SchemaEntry,
    TableSchema,
    assert_table,
)
from dataknobs_tablecheck.settings import (
    TablecheckSettings,
    configure,
    get_settings,
    reset_settings,
)
from dataknobs_tablecheck.validators import (
    All,
    AnyOf,
    Contextual,
    Not,
    Predicate,
    Validator,
    as_validator,
    contextual,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Result types
    "ValidationResult",
    "merge_diagnostics",
    # Validators
    "Validator",
    "Predicate",
    "Contextual",
    "All",
    "AnyOf",
    "Not",
    "as_validator",
    "contextual",
    # Predicates
    "is_nil",
    "is_number",
    "is_string",
    "is_bool",
    "is_table",
    "is_function",
    "instance_of",
    # Functional combinators
    "f_and",
    "f_or",
    "f_not",
    "curry",
    "eq",
    "has_value",
    # Combinators
    "Optional",
    "TableOf",
    "OneOf",
    "Nonempty",
    "Assert",
    "optional",
    "table_of",
    "one_of",
    "nonempty",
    "assert_",
    # Schema
    "TableSchema",
    "SchemaEntry",
    "Presence",
    "Check",
    "assert_table",
    "NOT_A_TABLE_ERROR",
    "CORRUPT_ELEMENT_ERROR",
    # Entry points
    "validate",
    "ensure",
    # Settings
    "TablecheckSettings",
    "get_settings",
    "configure",
    "reset_settings",
    # Exceptions
    "TablecheckError",
    "SchemaDefinitionError",
    "ConfigurationError",
    "TablecheckValidationError",
]
