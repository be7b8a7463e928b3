"""Functional combinators over validators and predicates.

``f_and`` and ``f_or`` accept validators or plain predicates and return a
single validator. Both short-circuit: AND on the first failure, OR on the
first success.

Example:
    ```python
    strnum = f_or(is_string, is_number)
    is_nil = curry(eq, 2)(None)
    ```
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Iterable
from typing import Any

from .exceptions import SchemaDefinitionError
from .validators import All, AnyOf, Not


def f_and(*validators: Any) -> All:
    """Succeeds iff every validator succeeds; returns the first failure."""
    return All(*validators)


def f_or(*validators: Any) -> AnyOf:
    """Succeeds iff at least one validator succeeds."""
    return AnyOf(*validators)


def f_not(validator: Any) -> Not:
    return Not(validator)


def eq(a: Any, b: Any) -> bool:
    return a == b


def has_value(values: Iterable[Any], value: Any) -> bool:
    """Return whether ``value`` equals any member of ``values``."""
    return any(candidate == value for candidate in values)


def curry(func: Callable[..., Any], arity: int | None = None) -> Callable[..., Any]:
    """Curry a function so it can be applied one argument at a time.

    Args:
        func: Function to curry
        arity: Number of arguments to collect before calling ``func``.
            Defaults to the number of positional parameters of ``func``.

    Returns:
        A function that keeps collecting arguments until ``arity`` is reached

    Raises:
        SchemaDefinitionError: If the arity is less than 1
    """
    if arity is None:
        arity = len(inspect.signature(func).parameters)
    if arity < 1:
        raise SchemaDefinitionError(
            f"curry() needs an arity of at least 1, got {arity}",
            context={"arity": arity},
        )

    @functools.wraps(func)
    def curried(*args: Any) -> Any:
        if len(args) >= arity:
            return func(*args)
        return curry(functools.partial(func, *args), arity - len(args))

    return curried
