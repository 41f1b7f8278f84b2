"""Comprehension operations for Try.

Built on Try.and_then, so an exception raised by a projector, binder,
predicate or error factory ends up as a Failure like any other Try step.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from fallible.foundation.errors import require_all
from fallible.monads.try_ import Failure, Try

from ._sentinel import MISSING

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


def select(t: Try[T], projector: Callable[[T], U]) -> Try[U]:
    """Equivalent to t.map(projector)."""
    require_all(projector=projector)
    return t.map(projector)


def select_many(
    t: Try[T],
    binder: Callable[[T], Try[U]],
    result_combiner: Callable[[T, U], V] = MISSING,
) -> Try[U] | Try[V]:
    """Bind, optionally combining the outer and inner values.

    Example:
        >>> select_many(Success("4"), lambda s: Try.of(lambda: int(s)), lambda s, n: s * n)
        Success('4444')
    """
    if result_combiner is MISSING:
        require_all(binder=binder)
        return t.and_then(binder)
    require_all(binder=binder, result_combiner=result_combiner)
    return t.and_then(lambda x: binder(x).map(lambda y: result_combiner(x, y)))


def where(t: Try[T], predicate: Callable[[T], bool], error: Exception) -> Try[T]:
    """Keep Success when predicate holds, else Failure(error).

    Raises:
        NullArgumentError: predicate is None
        TypeError: error is not an Exception instance
    """
    require_all(predicate=predicate)
    if not isinstance(error, Exception):
        raise TypeError(f"where() expects an Exception instance, got {type(error).__name__}")

    def check(value: T) -> Try[T]:
        return t if predicate(value) else Failure(error)

    return t.and_then(check)


def where_with(t: Try[T], predicate: Callable[[T], bool], error_factory: Callable[[T], Exception]) -> Try[T]:
    """Keep Success when predicate holds, else Failure(error_factory(value))."""
    require_all(predicate=predicate, error_factory=error_factory)

    def check(value: T) -> Try[T]:
        return t if predicate(value) else Failure(error_factory(value))

    return t.and_then(check)
