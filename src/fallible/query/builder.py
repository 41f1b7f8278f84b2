"""Fluent comprehension chains over any supported container.

    >>> from fallible.monads import Some
    >>> (query(Some(2))
    ...     .select_many(lambda x: Some(x + 1), lambda x, y: x * y)
    ...     .where(lambda n: n > 5)
    ...     .select(str)
    ...     .value)
    Some('6')

Every step dispatches to the per-shape function of the same name, so a chain
is exactly the nested calls written by hand.
"""

from __future__ import annotations

from collections.abc import Callable
from types import ModuleType
from typing import Any, Generic, TypeVar

from fallible.monads import Either, Option, Result, Try

from . import either as _either
from . import option as _option
from . import result as _result
from . import try_ as _try
from ._sentinel import MISSING

C = TypeVar("C")

_DISPATCH: dict[type, ModuleType] = {
    Option: _option,
    Result: _result,
    Either: _either,
    Try: _try,
}


def _table_for(container: object) -> ModuleType:
    for kind, table in _DISPATCH.items():
        if isinstance(container, kind):
            return table
    raise TypeError(f"query() does not support {type(container).__name__}")


class Query(Generic[C]):
    """Immutable wrapper; each step returns a new Query around the new container."""

    __slots__ = ("_value", "_table")

    def __init__(self, container: C) -> None:
        self._table = _table_for(container)
        self._value = container

    @property
    def value(self) -> C:
        return self._value

    def select(self, projector: Callable[[Any], Any]) -> Query[Any]:
        return Query(self._table.select(self._value, projector))

    def select_many(
        self,
        binder: Callable[[Any], Any],
        result_combiner: Callable[[Any, Any], Any] = MISSING,
    ) -> Query[Any]:
        return Query(self._table.select_many(self._value, binder, result_combiner))

    def where(self, predicate: Callable[[Any], bool], error: Any = MISSING) -> Query[C]:
        """Filter. Option takes no error; the other shapes require one.

        Raises:
            TypeError: error given for Option, or missing for an error-bearing shape
        """
        if self._table is _option:
            if error is not MISSING:
                raise TypeError("Option.where() takes no error argument")
            return Query(_option.where(self._value, predicate))
        if error is MISSING:
            raise TypeError(f"where() on {type(self._value).__name__} requires an error argument")
        return Query(self._table.where(self._value, predicate, error))

    def where_with(self, predicate: Callable[[Any], bool], error_factory: Callable[[Any], Any]) -> Query[C]:
        if self._table is _option:
            raise TypeError("Option has no error channel; use where()")
        return Query(self._table.where_with(self._value, predicate, error_factory))

    def __repr__(self) -> str:
        return f"Query({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Query):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Query, self._value))


def query(container: C) -> Query[C]:
    """Start a chain. Raises TypeError for unsupported container types."""
    return Query(container)
