"""Primitive predicates and container helpers.

Predicates are plain ``value -> bool`` functions. Anything matching that
shape can be used wherever a predicate is expected; these are just the
common ones.

"Table" here means a structured container: any mapping, list or tuple.
Strings, bytes and sets are not tables.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from numbers import Number
from typing import Any

TABLE_TYPES: tuple[type, ...] = (Mapping, list, tuple)


def is_nil(value: Any) -> bool:
    """Return whether a value is absent."""
    return value is None


def is_number(value: Any) -> bool:
    """Return whether a value is a real number (booleans excluded)."""
    return isinstance(value, Number) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def is_table(value: Any) -> bool:
    """Return whether a value is a structured container."""
    return isinstance(value, TABLE_TYPES)


def is_function(value: Any) -> bool:
    return callable(value)


def instance_of(*types: type) -> Callable[[Any], bool]:
    """Build a predicate that checks the value against one or more types.

    Example:
        is_path = instance_of(pathlib.Path)
    """
    if not types:
        raise TypeError("instance_of() requires at least one type")

    def predicate(value: Any) -> bool:
        return isinstance(value, types)

    predicate.__name__ = f"instance_of({', '.join(t.__name__ for t in types)})"
    return predicate


def iter_elements(container: Any) -> Iterator[Any]:
    """Iterate the elements of a table: mapping values or sequence items."""
    if isinstance(container, Mapping):
        return iter(container.values())
    return iter(container)


def container_length(container: Any) -> int:
    return len(container)


def lookup(container: Any, key: Any) -> Any:
    """Fetch ``container[key]``, returning None when it does not exist.

    Mappings are looked up by key. Lists and tuples are looked up by
    non-negative integer index; any other key is absent.
    """
    if isinstance(container, Mapping):
        return container.get(key)
    if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(container):
        return container[key]
    return None
