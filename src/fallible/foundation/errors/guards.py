"""Argument guards. Raise before any element or primitive is touched."""

from __future__ import annotations

from typing import TypeVar

from fallible.observability.logging import get_logger

from .errors import EmptySequenceError, NullArgumentError, PreconditionError

T = TypeVar("T")
P = TypeVar("P", bound=PreconditionError)

_log = get_logger("fallible.guards")


def require(value: T | None, name: str) -> T:
    """Return value unchanged, raise NullArgumentError if it is None."""
    if value is None:
        raise _violated(NullArgumentError.for_argument(name))
    return value


def require_all(**arguments: object) -> None:
    """Check several arguments at once, in keyword order."""
    for name, value in arguments.items():
        if value is None:
            raise _violated(NullArgumentError.for_argument(name))


def empty_sequence(name: str) -> EmptySequenceError:
    """Build (and log) the error for an empty input sequence."""
    return _violated(EmptySequenceError.for_argument(name))


def _violated(exc: P) -> P:
    v = exc.violation
    _log.debug("precondition violated", code=str(v.code), argument=v.argument)
    return exc
