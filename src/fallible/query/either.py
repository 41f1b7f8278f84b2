"""Comprehension operations for Either. Right is the value side, Left the error side."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from fallible.foundation.errors import require_all
from fallible.monads.either import Either, Left

from ._sentinel import MISSING

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")
V = TypeVar("V")


def select(either: Either[L, R], projector: Callable[[R], U]) -> Either[L, U]:
    """Equivalent to either.map_right(projector)."""
    require_all(projector=projector)
    return either.map_right(projector)


def select_many(
    either: Either[L, R],
    binder: Callable[[R], Either[L, U]],
    result_combiner: Callable[[R, U], V] = MISSING,
) -> Either[L, U] | Either[L, V]:
    if result_combiner is MISSING:
        require_all(binder=binder)
        return either.and_then(binder)
    require_all(binder=binder, result_combiner=result_combiner)
    return either.and_then(lambda x: binder(x).map_right(lambda y: result_combiner(x, y)))


def where(either: Either[L, R], predicate: Callable[[R], bool], error: L) -> Either[L, R]:
    """Keep Right when predicate holds, else Left(error)."""
    require_all(predicate=predicate)

    def check(value: R) -> Either[L, R]:
        return either if predicate(value) else Left(error)

    return either.and_then(check)


def where_with(either: Either[L, R], predicate: Callable[[R], bool], error_factory: Callable[[R], L]) -> Either[L, R]:
    """Keep Right when predicate holds, else Left(error_factory(value))."""
    require_all(predicate=predicate, error_factory=error_factory)

    def check(value: R) -> Either[L, R]:
        return either if predicate(value) else Left(error_factory(value))

    return either.and_then(check)
