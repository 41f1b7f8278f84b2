"""Collection operations over Result."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from fallible.foundation.errors import empty_sequence, require, require_all
from fallible.monads.result import Result

from .generic import Collected, collect_allM, first_okM, partitionM, sequenceM, traverseM

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


def _is_ok(r: Result[T, E]) -> bool:
    return r._is_ok


def _is_err(r: Result[T, E]) -> bool:
    return not r._is_ok


def _payload(r: Result[T, E]) -> T:
    return r._value  # type: ignore[return-value]


def _ok(values: list[T]) -> Result[list[T], E]:
    return Result(values, True)


def _err(r: Result[T, E]) -> Result[list[T], E]:
    return Result(r._value, False)  # type: ignore[arg-type]


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Iterable[Result[T,E]] → Result[list[T], E]. Fail-fast on first Err."""
    require(results, "results")
    return sequenceM(results, is_ok=_is_ok, get_value=_payload, combine_ok=_ok, combine_err=_err)


def traverse(source: Iterable[T], selector: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map selector over source, sequence results. Fail-fast on first Err.

    Example:
        >>> def parse_int(s: str) -> Result[int, str]:
        ...     return Ok(int(s)) if s.isdigit() else Err(f"invalid: {s}")
        >>> traverse(["1", "bad", "3"], parse_int)
        Err('invalid: bad')
    """
    require_all(source=source, selector=selector)
    return traverseM(source, selector, is_ok=_is_ok, get_value=_payload, combine_ok=_ok, combine_err=_err)


def collect_ok(results: Iterable[Result[T, E]]) -> Iterable[T]:
    """Lazily yield every Ok value in order."""
    require(results, "results")
    return Collected(results, _is_ok, _payload)


def collect_err(results: Iterable[Result[T, E]]) -> Iterable[E]:
    """Lazily yield every Err value in order."""
    require(results, "results")
    return Collected(results, _is_err, _payload)  # type: ignore[arg-type]


def partition(results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Split into (ok values, errors), each in input order."""
    require(results, "results")
    return partitionM(results, is_ok=_is_ok, get_value=_payload, get_error=_payload)  # type: ignore[arg-type]


def collect_all(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating ALL errors (not fail-fast).

    Example:
        >>> collect_all([Ok(1), Err("e1"), Ok(3), Err("e2")])
        Err(['e1', 'e2'])
    """
    require(results, "results")
    return collect_allM(results, is_ok=_is_ok, get_value=_payload, get_error=_payload,
                        combine_ok=_ok, combine_err=lambda errors: Result(errors, False))


def first_ok(results: Iterable[Result[T, E]]) -> Result[T, E]:
    """First Ok, or the last Err if all are Err. Raises EmptySequenceError when empty."""
    require(results, "results")
    found = first_okM(results, is_ok=_is_ok)
    if found is None:
        raise empty_sequence("results")
    return found


def first_ok_or_default(results: Iterable[Result[T, E]], default_error: E) -> Result[T, E]:
    """First Ok, or the last Err, or Err(default_error) when results is empty."""
    require(results, "results")
    found = first_okM(results, is_ok=_is_ok)
    return Result(default_error, False) if found is None else found
