"""Collection operations over Try.

Aggregate an iterable of Try values, or map plain inputs through a
Try-producing function:

- sequence / traverse: all-or-first-failure, short-circuiting
- collect_success / collect_failures: lazy, never short-circuit
- partition: split into (values, exceptions) in one pass
- first_success: first Success, else the last Failure
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from fallible.foundation.errors import empty_sequence, require, require_all
from fallible.monads.try_ import Try

from .generic import Collected, first_okM, partitionM, sequenceM, traverseM

T = TypeVar("T")
U = TypeVar("U")


def _is_success(t: Try[T]) -> bool:
    return t._is_success


def _is_failure(t: Try[T]) -> bool:
    return not t._is_success


def _payload(t: Try[T]) -> T:
    return t._value  # type: ignore[return-value]


def _ok_list(values: list[T]) -> Try[list[T]]:
    return Try(values, True)


def _carry_failure(t: Try[T]) -> Try[list[T]]:
    return Try(t._value, False)


def sequence(tries: Iterable[Try[T]]) -> Try[list[T]]:
    """Iterable[Try[T]] → Try[list[T]]. Fail-fast on first Failure.

    Elements after the first Failure are never pulled from the iterable.

    Example:
        >>> sequence([Success(1), Success(2)])
        Success([1, 2])
        >>> boom = ValueError("boom")
        >>> sequence([Success(1), Failure(boom), Success(3)]) == Failure(boom)
        True
    """
    require(tries, "tries")
    return sequenceM(tries, is_ok=_is_success, get_value=_payload,
                     combine_ok=_ok_list, combine_err=_carry_failure)


def traverse(source: Iterable[T], selector: Callable[[T], Try[U]]) -> Try[list[U]]:
    """Map selector over source and sequence the results in one pass.

    The selector is invoked left to right and never past the first Failure.
    Exceptions raised by the selector propagate; wrap it with Try.of to
    capture them.

    Example:
        >>> traverse(["1", "2"], lambda s: Try.of(lambda: int(s)))
        Success([1, 2])
    """
    require_all(source=source, selector=selector)
    return traverseM(source, selector, is_ok=_is_success, get_value=_payload,
                     combine_ok=_ok_list, combine_err=_carry_failure)


def collect_success(tries: Iterable[Try[T]]) -> Iterable[T]:
    """Lazily yield every Success value in order; Failures are skipped."""
    require(tries, "tries")
    return Collected(tries, _is_success, _payload)


def collect_failures(tries: Iterable[Try[T]]) -> Iterable[Exception]:
    """Lazily yield every Failure exception in order; Successes are skipped."""
    require(tries, "tries")
    return Collected(tries, _is_failure, _payload)  # type: ignore[arg-type]


def partition(tries: Iterable[Try[T]]) -> tuple[list[T], list[Exception]]:
    """Split into (success values, failure exceptions), each in input order."""
    require(tries, "tries")
    return partitionM(tries, is_ok=_is_success, get_value=_payload, get_error=_payload)  # type: ignore[arg-type]


def first_success(tries: Iterable[Try[T]]) -> Try[T]:
    """First Success in the iterable, or the last Failure when there is none.

    Stops pulling elements as soon as a Success is found. Keeping the *last*
    Failure (not the first) when everything fails is intentional: the most
    recent failure is the representative error.

    Raises:
        NullArgumentError: tries is None
        EmptySequenceError: tries yields no elements
    """
    require(tries, "tries")
    found = first_okM(tries, is_ok=_is_success)
    if found is None:
        raise empty_sequence("tries")
    return found
