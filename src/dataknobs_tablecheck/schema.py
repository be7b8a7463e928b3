"""Structural validation of tables against a schema.

A schema maps each expected key to a check:

    user = assert_table({
        "name": assert_(is_string, "The name must be a string!"),
        "id": assert_(is_number, "The id must be a number!"),
        "tags": True,  # presence only
    })

    ok, error, hints = user({"name": "Dick", "id": 3, "tags": []})

Lists and tuples act as positional schemas keyed by index. Schemas nest by
composition: a TableSchema is itself a validator and can be a field of
another schema.

Fields are checked in declaration order and the first failing field is
reported. Errors are not aggregated across fields.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from .exceptions import SchemaDefinitionError
from .predicates import is_table, lookup
from .result import ValidationResult
from .validators import Validator, as_validator

logger = logging.getLogger(__name__)

NOT_A_TABLE_ERROR = "Not a table!"
CORRUPT_ELEMENT_ERROR = "Element '{key}' is corrupt!"


@dataclass(frozen=True)
class Presence:
    """Schema entry that only requires the key to hold a non-None value."""

    key: Hashable

    def check(self, container: Any) -> ValidationResult:
        if lookup(container, self.key) is None:
            return ValidationResult.failure()
        return ValidationResult.success()


@dataclass(frozen=True)
class Check:
    """Schema entry that runs a validator on the field value.

    The validator receives the field value and the whole container as
    context.
    """

    key: Hashable
    validator: Validator

    def check(self, container: Any) -> ValidationResult:
        return self.validator.check(lookup(container, self.key), container)


SchemaEntry = Union[Presence, Check]


def resolve_entry(key: Hashable, definition: Any) -> SchemaEntry:
    """Turn one raw schema value into a tagged entry.

    Callables and validators become Check entries; anything else is a
    presence marker.
    """
    if isinstance(definition, Validator) or callable(definition):
        return Check(key, as_validator(definition))
    return Presence(key)


class TableSchema(Validator):
    """Validates a table field by field against resolved schema entries."""

    def __init__(self, schema: Any = None):
        """Initialize from a raw schema definition.

        Args:
            schema: Mapping of key to check, a list/tuple of checks
                (keyed by index), or None for an empty schema

        Raises:
            SchemaDefinitionError: If the schema is not a mapping or sequence
        """
        if schema is None:
            items: list[tuple[Hashable, Any]] = []
        elif isinstance(schema, Mapping):
            items = list(schema.items())
        elif isinstance(schema, (list, tuple)):
            items = list(enumerate(schema))
        else:
            raise SchemaDefinitionError(
                f"Schema must be a mapping or a sequence, got {type(schema).__name__}",
                context={"schema_type": type(schema).__name__},
            )

        self.entries: tuple[SchemaEntry, ...] = tuple(
            resolve_entry(key, definition) for key, definition in items
        )
        logger.debug(
            f"Built table schema with {len(self.entries)} entries "
            f"({sum(isinstance(e, Presence) for e in self.entries)} presence-only)"
        )

    @property
    def keys(self) -> list[Hashable]:
        return [entry.key for entry in self.entries]

    def check(self, value: Any, context: Any = None) -> ValidationResult:
        """Validate a table against this schema.

        Args:
            value: Candidate table
            context: Enclosing container when nested inside another schema

        Returns:
            Success, or the first failing field's result
        """
        if not is_table(value):
            if value is None and context is not None:
                # Missing nested table: let the enclosing field name it
                return ValidationResult.failure()
            return ValidationResult.failure(NOT_A_TABLE_ERROR)

        for entry in self.entries:
            result = entry.check(value)
            if not result.ok:
                error = result.error
                if error is None:
                    error = CORRUPT_ELEMENT_ERROR.format(key=entry.key)
                return ValidationResult(ok=False, error=error, hints=result.hints)

        return ValidationResult.success()

    def __repr__(self) -> str:
        return f"TableSchema({self.keys!r})"


def assert_table(schema: Any = None) -> TableSchema:
    """Build a validator that checks a table against ``schema``.

    Capable of nesting: any field may itself be an ``assert_table`` result.
    """
    return TableSchema(schema)
