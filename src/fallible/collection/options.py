"""Collection operations over Option."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

from fallible.foundation.errors import require, require_all
from fallible.monads.option import NOTHING, Option

from .generic import Collected, first_okM, sequenceM, traverseM

T = TypeVar("T")
U = TypeVar("U")


def _is_some(o: Option[T]) -> bool:
    return o._is_some


def _payload(o: Option[T]) -> T:
    return o._value  # type: ignore[return-value]


def _some(values: list[T]) -> Option[list[T]]:
    return Option(values, True)


def _nothing(_: Option[T]) -> Option[list[T]]:
    return NOTHING


def sequence(options: Iterable[Option[T]]) -> Option[list[T]]:
    """Some(list) if every option is Some, otherwise Nothing (stops at the first)."""
    require(options, "options")
    return sequenceM(options, is_ok=_is_some, get_value=_payload, combine_ok=_some, combine_err=_nothing)


def traverse(source: Iterable[T], selector: Callable[[T], Option[U]]) -> Option[list[U]]:
    """Map selector over source; Nothing as soon as one mapping is Nothing."""
    require_all(source=source, selector=selector)
    return traverseM(source, selector, is_ok=_is_some, get_value=_payload, combine_ok=_some, combine_err=_nothing)


def choose(options: Iterable[Option[T]]) -> Iterable[T]:
    """Lazily unwrap the Some values, dropping Nothing (filter_map)."""
    require(options, "options")
    return Collected(options, _is_some, _payload)


def choose_map(source: Iterable[T], selector: Callable[[T], Option[U]]) -> Iterable[U]:
    """Map and filter in one step, keeping only Some results."""
    require_all(source=source, selector=selector)
    return _ChooseMap(source, selector)


def first_some(options: Iterable[Option[T]]) -> Option[T]:
    """First Some in the iterable, Nothing if there is none (empty included)."""
    require(options, "options")
    found = first_okM(options, is_ok=_is_some)
    return found if found is not None and found._is_some else NOTHING


class _ChooseMap(Generic[T, U]):
    __slots__ = ("_source", "_selector")

    def __init__(self, source: Iterable[T], selector: Callable[[T], Option[U]]) -> None:
        self._source = source
        self._selector = selector

    def __iter__(self) -> Iterator[U]:
        for item in self._source:
            option = self._selector(item)
            if option._is_some:
                yield option._value  # type: ignore[misc]
