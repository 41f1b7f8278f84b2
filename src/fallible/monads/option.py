"""Option monad: a value that may be absent.

Some(value) or NOTHING. Unlike a bare ``None`` check, an Option composes:
map/filter/and_then chain without branching and absence short-circuits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from fallible.foundation.errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
E = TypeVar("E")


class Option(Generic[T]):
    """Discriminated union of Some(value) and Nothing.

    Examples:
        >>> Some(2).map(lambda x: x + 1)
        Some(3)
        >>> Some(2).filter(lambda x: x > 5)
        Nothing
        >>> Option.of(None).unwrap_or(0)
        0
    """

    __slots__ = ("_value", "_is_some")
    __match_args__ = ("_value",)

    def __init__(self, value: T | None, is_some: bool) -> None:
        self._value = value
        self._is_some = is_some

    @staticmethod
    def of(value: T | None) -> Option[T]:
        """Some(value) unless value is None."""
        return NOTHING if value is None else Option(value, True)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_some(self) -> bool:
        return self._is_some

    def is_none(self) -> bool:
        return not self._is_some

    # ─── Value Extraction ──────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract value. Raises UnwrapError on Nothing."""
        if self._is_some:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.create("unwrap() on Nothing")

    def expect(self, msg: str) -> T:
        if self._is_some:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.create(msg)

    def unwrap_or(self, default: T) -> T:
        return self._value if self._is_some else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return self._value if self._is_some else f()  # type: ignore[return-value]

    # ─── Functor / Monad ───────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Option[U]:
        return Option(f(self._value), True) if self._is_some else NOTHING  # type: ignore[arg-type]

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep Some only if predicate holds; Nothing stays Nothing."""
        return self if self._is_some and predicate(self._value) else NOTHING  # type: ignore[arg-type]

    def flat_map(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Monadic bind (>>=)."""
        return f(self._value) if self._is_some else NOTHING  # type: ignore[arg-type]

    and_then = flat_map

    def flatten(self: Option[Option[T]]) -> Option[T]:
        return self._value if self._is_some else NOTHING  # type: ignore[return-value]

    # ─── Combining ────────────────────────────────────────────────────

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        if self._is_some and other._is_some:
            return Option((self._value, other._value), True)  # type: ignore[arg-type]
        return NOTHING

    def zip_with(self, other: Option[U], combiner: Callable[[T, U], V]) -> Option[V]:
        if self._is_some and other._is_some:
            return Option(combiner(self._value, other._value), True)  # type: ignore[arg-type]
        return NOTHING

    def or_(self, other: Option[T]) -> Option[T]:
        return self if self._is_some else other

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        return self if self._is_some else f()

    def xor(self, other: Option[T]) -> Option[T]:
        """Some if exactly one side is Some."""
        if self._is_some != other._is_some:
            return self if self._is_some else other
        return NOTHING

    # ─── Inspection & Conversion ───────────────────────────────────────

    def tap(self, f: Callable[[T], None]) -> Option[T]:
        if self._is_some:
            f(self._value)  # type: ignore[arg-type]
        return self

    def match(self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        return some(self._value) if self._is_some else none()  # type: ignore[arg-type]

    def ok_or(self, error: E) -> Result[T, E]:
        from .result import Err, Ok
        return Ok(self._value) if self._is_some else Err(error)  # type: ignore[arg-type]

    def ok_or_else(self, f: Callable[[], E]) -> Result[T, E]:
        from .result import Err, Ok
        return Ok(self._value) if self._is_some else Err(f())  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_some

    def __hash__(self) -> int:
        return hash((Option, self._is_some, self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._is_some else "Nothing"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._is_some == other._is_some and (not self._is_some or self._value == other._value)

    def __iter__(self) -> Iterator[T]:
        if self._is_some:
            yield self._value  # type: ignore[misc]


NOTHING: Option = Option(None, False)


def Some(value: T) -> Option[T]:  # noqa: N802
    """Construct Some variant (present value, None included)."""
    return Option(value, True)


def Nothing() -> Option[T]:  # noqa: N802
    """Return the Nothing singleton."""
    return NOTHING
