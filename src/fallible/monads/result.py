"""Result: a success value or a caller-defined error.

Ok(value) or Err(error). Unlike Try, nothing is captured implicitly: a
callback that raises propagates, and the error type is whatever the caller
puts into Err.

Example:
    >>> def port(raw: str) -> Result[int, str]:
    ...     return Ok(int(raw)) if raw.isdigit() else Err(f"not a port: {raw!r}")
    >>> port("8080").map(lambda p: p + 1)
    Ok(8081)
    >>> port("http").and_then(lambda p: Ok(p) if p < 65536 else Err("range"))
    Err("not a port: 'http'")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from fallible.foundation.errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .either import Either
    from .option import Option

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Discriminated union of Ok and Err.

    Err passes untouched through map/and_then, so a chain of steps reads as
    the happy path and the first error rides through to the end.
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    # ─── Variant ─────────────────────────────────────────────────────

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    def _as_err(self) -> Result[U, E]:
        return Result(self._value, _ERR)  # type: ignore[arg-type]

    # ─── Extraction ──────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Ok value, or UnwrapError naming the error."""
        return self.expect("unwrap() on Err")

    def unwrap_err(self) -> E:
        return self.expect_err("unwrap_err() on Ok")

    def expect(self, msg: str) -> T:
        if not self._is_ok:
            raise UnwrapError.create(f"{msg}: {self._value!r}")
        return self._value  # type: ignore[return-value]

    def expect_err(self, msg: str) -> E:
        if self._is_ok:
            raise UnwrapError.create(f"{msg}: {self._value!r}")
        return self._value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Ok value, or f(error)."""
        return self._value if self._is_ok else f(self._value)  # type: ignore[return-value,arg-type]

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return f(self._value) if self._is_ok else default  # type: ignore[arg-type]

    # ─── Transformation ──────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        if not self._is_ok:
            return self._as_err()
        return Result(f(self._value), _OK)  # type: ignore[arg-type]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        if self._is_ok:
            return self  # type: ignore[return-value]
        return Result(f(self._value), _ERR)  # type: ignore[arg-type]

    def bimap(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> Result[U, F]:
        return self.map(ok_fn).map_err(err_fn)  # type: ignore[return-value]

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Bind: feed the Ok value to f, which decides the next Result."""
        if not self._is_ok:
            return self._as_err()
        return f(self._value)  # type: ignore[arg-type]

    and_then = flat_map

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from Err by computing a new Result from the error."""
        if self._is_ok:
            return self  # type: ignore[return-value]
        return f(self._value)  # type: ignore[arg-type]

    def apply(self, wrapped: Result[Callable[[T], U], E]) -> Result[U, E]:
        """Call a function held in another Result; the function's Err wins."""
        return wrapped.and_then(self.map)

    def flatten(self: Result[Result[T, E], E]) -> Result[T, E]:
        return self.and_then(lambda inner: inner)

    # ─── Combination ─────────────────────────────────────────────────

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        return other if self._is_ok else self._as_err()

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        return self if self._is_ok else other  # type: ignore[return-value]

    # ─── Side effects ────────────────────────────────────────────────

    def inspect(self, f: Callable[[T], None]) -> Result[T, E]:
        if self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    def inspect_err(self, f: Callable[[E], None]) -> Result[T, E]:
        if not self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    # ─── Conversion ──────────────────────────────────────────────────

    def ok(self) -> Option[T]:
        """Some(value) for Ok, Nothing for Err."""
        from .option import NOTHING, Some
        return Some(self._value) if self._is_ok else NOTHING  # type: ignore[arg-type]

    def err(self) -> Option[E]:
        from .option import NOTHING, Some
        return NOTHING if self._is_ok else Some(self._value)  # type: ignore[arg-type]

    def to_either(self) -> Either[E, T]:
        """Ok -> Right, Err -> Left."""
        from .either import Either
        return Either(self._value, self._is_ok)

    def to_tuple(self) -> tuple[T | None, E | None]:
        """(value, None) or (None, error)."""
        if self._is_ok:
            return self._value, None  # type: ignore[return-value]
        return None, self._value  # type: ignore[return-value]

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_ok

    def __iter__(self) -> Iterator[T]:
        if self._is_ok:
            yield self._value  # type: ignore[misc]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Result):
            return (self._is_ok, self._value) == (other._is_ok, other._value)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Result, self._is_ok, self._value))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})" if self._is_ok else f"Err({self._value!r})"

    __str__ = __repr__


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    return Result(error, _ERR)
