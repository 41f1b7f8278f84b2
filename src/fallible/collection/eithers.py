"""Collection operations over Either. Right is the success side."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from fallible.foundation.errors import require
from fallible.monads.either import Either

from .generic import Collected, partitionM

L = TypeVar("L")
R = TypeVar("R")


def _is_right(e: Either[L, R]) -> bool:
    return e._is_right


def _is_left(e: Either[L, R]) -> bool:
    return not e._is_right


def _payload(e: Either[L, R]) -> R:
    return e._value  # type: ignore[return-value]


def collect_rights(eithers: Iterable[Either[L, R]]) -> Iterable[R]:
    """Lazily yield every Right value in order."""
    require(eithers, "eithers")
    return Collected(eithers, _is_right, _payload)


def collect_lefts(eithers: Iterable[Either[L, R]]) -> Iterable[L]:
    """Lazily yield every Left value in order."""
    require(eithers, "eithers")
    return Collected(eithers, _is_left, _payload)  # type: ignore[arg-type]


def partition(eithers: Iterable[Either[L, R]]) -> tuple[list[L], list[R]]:
    """Split into (lefts, rights). Note the order: lefts come first."""
    require(eithers, "eithers")
    rights, lefts = partitionM(eithers, is_ok=_is_right, get_value=_payload, get_error=_payload)
    return lefts, rights  # type: ignore[return-value]
