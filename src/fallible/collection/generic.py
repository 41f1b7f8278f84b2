"""Shape-agnostic aggregation algorithms.

Every container shape (Try, Result, Option, Either) shares the same scanning
logic; only the way a variant is inspected and the way the outcome is wrapped
differ. The *M functions take those as parameters (extract + wrap pattern) and
the per-shape modules are thin sugar over them.

All functions assume their arguments were already validated by the caller.
Sources are consumed lazily, at most once, left to right.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

from fallible.foundation.config import get_settings
from fallible.observability import get_logger

from ._capacity import PresizedBuffer, length_hint

A = TypeVar("A")
C = TypeVar("C")
T = TypeVar("T")
E = TypeVar("E")
R = TypeVar("R")

_log = get_logger("fallible.collection")


def traverseM(
    source: Iterable[A],
    selector: Callable[[A], C],
    *,
    is_ok: Callable[[C], bool],
    get_value: Callable[[C], T],
    combine_ok: Callable[[list[T]], R],
    combine_err: Callable[[C], R],
    op: str = "traverse",
) -> R:
    """Map selector over source, stop at the first failing container.

    combine_err receives the failing container itself so each shape decides
    what to carry over (its error, nothing, ...). No element after the failing
    one is pulled from the source.
    """
    values: list[T] = []
    for index, item in enumerate(source):
        container = selector(item)
        if not is_ok(container):
            _log.debug("short-circuit", op=op, index=index)
            return combine_err(container)
        values.append(get_value(container))
    return combine_ok(values)


def sequenceM(
    containers: Iterable[C],
    *,
    is_ok: Callable[[C], bool],
    get_value: Callable[[C], T],
    combine_ok: Callable[[list[T]], R],
    combine_err: Callable[[C], R],
) -> R:
    """Flip structure: [M[T]] -> M[[T]]. Implemented as traverse(id)."""
    return traverseM(
        containers,
        _identity,
        is_ok=is_ok,
        get_value=get_value,
        combine_ok=combine_ok,
        combine_err=combine_err,
        op="sequence",
    )


def partitionM(
    containers: Iterable[C],
    *,
    is_ok: Callable[[C], bool],
    get_value: Callable[[C], T],
    get_error: Callable[[C], E],
) -> tuple[list[T], list[E]]:
    """Single pass split into (successes, failures), order preserved in each.

    Buffers are pre-sized when the source is Sized: the success side to
    the full count, the failure side to a fraction of it.
    """
    cfg = get_settings().collection
    count = length_hint(containers)
    if count:
        successes: PresizedBuffer[T] = PresizedBuffer(count)
        failures: PresizedBuffer[E] = PresizedBuffer(count // cfg.failure_capacity_divisor)
    else:
        successes, failures = PresizedBuffer(cfg.min_capacity), PresizedBuffer(cfg.min_capacity)

    for container in containers:
        if is_ok(container):
            successes.append(get_value(container))
        else:
            failures.append(get_error(container))
    return successes.to_list(), failures.to_list()


def first_okM(containers: Iterable[C], *, is_ok: Callable[[C], bool]) -> C | None:
    """First ok container, else the LAST failing one, else None for empty input.

    Returns as soon as an ok container is seen.
    """
    last_failure: C | None = None
    for index, container in enumerate(containers):
        if is_ok(container):
            _log.debug("short-circuit", op="first_ok", index=index)
            return container
        last_failure = container
    return last_failure


def collect_allM(
    containers: Iterable[C],
    *,
    is_ok: Callable[[C], bool],
    get_value: Callable[[C], T],
    get_error: Callable[[C], E],
    combine_ok: Callable[[list[T]], R],
    combine_err: Callable[[list[E]], R],
) -> R:
    """Like sequence, but never short-circuits: every error is accumulated."""
    values, errors = partitionM(containers, is_ok=is_ok, get_value=get_value, get_error=get_error)
    return combine_err(errors) if errors else combine_ok(values)


class Collected(Generic[C, T]):
    """Lazy view emitting pick(c) for every container c where keep(c) holds.

    Holds nothing but a reference to the source: iterating it again iterates
    the source again, so the view is restartable exactly when the source is.
    """

    __slots__ = ("_source", "_keep", "_pick")

    def __init__(self, source: Iterable[C], keep: Callable[[C], bool], pick: Callable[[C], T]) -> None:
        self._source = source
        self._keep = keep
        self._pick = pick

    def __iter__(self) -> Iterator[T]:
        keep, pick = self._keep, self._pick
        for container in self._source:
            if keep(container):
                yield pick(container)

    def __repr__(self) -> str:
        return f"Collected({self._source!r})"


def _identity(x: C) -> C:
    return x
