"""Comprehension operations for Option.

Option has no error channel, so where() is plain filtering.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from fallible.foundation.errors import require_all
from fallible.monads.option import Option

from ._sentinel import MISSING

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


def select(option: Option[T], projector: Callable[[T], U]) -> Option[U]:
    """Equivalent to option.map(projector)."""
    require_all(projector=projector)
    return option.map(projector)


def select_many(
    option: Option[T],
    binder: Callable[[T], Option[U]],
    result_combiner: Callable[[T, U], V] = MISSING,
) -> Option[U] | Option[V]:
    """Bind, optionally combining the outer and inner values.

    With a combiner this is
    ``option.and_then(lambda x: binder(x).map(lambda y: result_combiner(x, y)))``,
    so the outer value stays in scope for the combination.

    Example:
        >>> select_many(Some(2), lambda x: Some(x * 10), lambda x, y: x + y)
        Some(22)
    """
    if result_combiner is MISSING:
        require_all(binder=binder)
        return option.and_then(binder)
    require_all(binder=binder, result_combiner=result_combiner)
    return option.and_then(lambda x: binder(x).map(lambda y: result_combiner(x, y)))


def where(option: Option[T], predicate: Callable[[T], bool]) -> Option[T]:
    """Equivalent to option.filter(predicate)."""
    require_all(predicate=predicate)
    return option.filter(predicate)
