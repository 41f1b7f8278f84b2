"""Comprehension operations for Result.

where() turns a failed check into Err; Err inputs pass through untouched
and the predicate is never called for them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from fallible.foundation.errors import require_all
from fallible.monads.result import Err, Result

from ._sentinel import MISSING

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
E = TypeVar("E")


def select(result: Result[T, E], projector: Callable[[T], U]) -> Result[U, E]:
    """Equivalent to result.map(projector)."""
    require_all(projector=projector)
    return result.map(projector)


def select_many(
    result: Result[T, E],
    binder: Callable[[T], Result[U, E]],
    result_combiner: Callable[[T, U], V] = MISSING,
) -> Result[U, E] | Result[V, E]:
    """Bind, optionally combining the outer and inner values.

    Example:
        >>> select_many(Ok(3), lambda x: Ok(x + 1), lambda x, y: (x, y))
        Ok((3, 4))
        >>> select_many(Ok(3), lambda x: Err("no"), lambda x, y: (x, y))
        Err('no')
    """
    if result_combiner is MISSING:
        require_all(binder=binder)
        return result.and_then(binder)
    require_all(binder=binder, result_combiner=result_combiner)
    return result.and_then(lambda x: binder(x).map(lambda y: result_combiner(x, y)))


def where(result: Result[T, E], predicate: Callable[[T], bool], error: E) -> Result[T, E]:
    """Keep Ok when predicate holds, else Err(error)."""
    require_all(predicate=predicate)
    if result.is_err():
        return result

    def check(value: T) -> Result[T, E]:
        return result if predicate(value) else Err(error)

    return result.and_then(check)


def where_with(result: Result[T, E], predicate: Callable[[T], bool], error_factory: Callable[[T], E]) -> Result[T, E]:
    """Keep Ok when predicate holds, else Err(error_factory(value)).

    The factory runs once, and only when the predicate is false.

    Example:
        >>> where_with(Ok(-1), lambda n: n >= 0, lambda n: f"{n} is negative")
        Err('-1 is negative')
    """
    require_all(predicate=predicate, error_factory=error_factory)
    if result.is_err():
        return result

    def check(value: T) -> Result[T, E]:
        return result if predicate(value) else Err(error_factory(value))

    return result.and_then(check)
