"""Try monad: the outcome of a computation that may have raised.

Success(value) or Failure(exception). Callbacks passed to map/flat_map/filter
run inside the Try: an Exception they raise becomes a Failure instead of
propagating, so a chain of Try steps never needs try/except at the call site.

Example:
    >>> Try.of(lambda: int("42")).map(lambda n: n + 1)
    Success(43)
    >>> Try.of(lambda: int("abc")).is_failure()
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar, overload

from fallible.foundation.errors import PredicateError, UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .option import Option
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")

_SUCCESS = True
_FAILURE = False


class Try(Generic[T]):
    """Discriminated union of Success(value) and Failure(exception)."""

    __slots__ = ("_value", "_is_success")
    __match_args__ = ("_value",)

    def __init__(self, value: T | Exception, is_success: bool) -> None:
        self._value = value
        self._is_success = is_success

    @staticmethod
    def of(fn: Callable[[], T]) -> Try[T]:
        """Run fn, capturing any Exception it raises as Failure."""
        try:
            return Try(fn(), _SUCCESS)
        except Exception as exc:  # noqa: BLE001 - capturing is the point of Try
            return Try(exc, _FAILURE)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_success(self) -> bool:
        return self._is_success

    def is_failure(self) -> bool:
        return not self._is_success

    is_ok = is_success
    is_err = is_failure

    # ─── Value Extraction ──────────────────────────────────────────────

    def get(self) -> T:
        """Extract Success value. Raises UnwrapError on Failure."""
        if self._is_success:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.create(f"get() on Failure: {self._value!r}")

    def get_exception(self) -> Exception:
        """Extract Failure exception. Raises UnwrapError on Success."""
        if not self._is_success:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.create(f"get_exception() on Success: {self._value!r}")

    unwrap = get
    unwrap_err = get_exception

    def get_or_else(self, default: T) -> T:
        return self._value if self._is_success else default  # type: ignore[return-value]

    def get_or_else_with(self, recovery: Callable[[Exception], T]) -> T:
        return self._value if self._is_success else recovery(self._value)  # type: ignore[return-value,arg-type]

    # ─── Functor / Monad ───────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Try[U]:
        if not self._is_success:
            return self  # type: ignore[return-value]
        try:
            return Try(f(self._value), _SUCCESS)  # type: ignore[arg-type]
        except Exception as exc:  # noqa: BLE001
            return Try(exc, _FAILURE)

    def flat_map(self, f: Callable[[T], Try[U]]) -> Try[U]:
        """Monadic bind (>>=). An exception raised by f becomes a Failure."""
        if not self._is_success:
            return self  # type: ignore[return-value]
        try:
            return f(self._value)  # type: ignore[arg-type]
        except Exception as exc:  # noqa: BLE001
            return Try(exc, _FAILURE)

    and_then = flat_map

    @overload
    def filter(self, predicate: Callable[[T], bool]) -> Try[T]: ...
    @overload
    def filter(self, predicate: Callable[[T], bool], error: str) -> Try[T]: ...
    @overload
    def filter(self, predicate: Callable[[T], bool], error: Callable[[], Exception]) -> Try[T]: ...

    def filter(
        self,
        predicate: Callable[[T], bool],
        error: str | Callable[[], Exception] | None = None,
    ) -> Try[T]:
        """Turn Success into Failure when predicate is false.

        The Failure carries PredicateError (default or custom message) or the
        exception built by a zero-argument factory.
        """
        if not self._is_success:
            return self
        try:
            if predicate(self._value):  # type: ignore[arg-type]
                return self
            if error is None or isinstance(error, str):
                return Try(PredicateError(*(() if error is None else (error,))), _FAILURE)
            return Try(error(), _FAILURE)
        except Exception as exc:  # noqa: BLE001
            return Try(exc, _FAILURE)

    def flatten(self: Try[Try[T]]) -> Try[T]:
        return self._value if self._is_success else self  # type: ignore[return-value]

    # ─── Recovery ──────────────────────────────────────────────────────

    def recover(self, f: Callable[[Exception], T]) -> Try[T]:
        """Replace a Failure with a Success computed from the exception."""
        if self._is_success:
            return self
        return Try.of(lambda: f(self._value))  # type: ignore[arg-type]

    def recover_with(self, f: Callable[[Exception], Try[T]]) -> Try[T]:
        if self._is_success:
            return self
        try:
            return f(self._value)  # type: ignore[arg-type]
        except Exception as exc:  # noqa: BLE001
            return Try(exc, _FAILURE)

    # ─── Inspection & Conversion ───────────────────────────────────────

    def tap(self, f: Callable[[T], None]) -> Try[T]:
        if self._is_success:
            f(self._value)  # type: ignore[arg-type]
        return self

    def tap_failure(self, f: Callable[[Exception], None]) -> Try[T]:
        if not self._is_success:
            f(self._value)  # type: ignore[arg-type]
        return self

    def match(self, *, success: Callable[[T], U], failure: Callable[[Exception], U]) -> U:
        return success(self._value) if self._is_success else failure(self._value)  # type: ignore[arg-type]

    def to_option(self) -> Option[T]:
        from .option import NOTHING, Some
        return Some(self._value) if self._is_success else NOTHING  # type: ignore[arg-type]

    def to_result(self, error_mapper: Callable[[Exception], E] | None = None) -> Result[T, E]:
        """Success -> Ok, Failure -> Err(exception) or Err(error_mapper(exception))."""
        from .result import Err, Ok
        if self._is_success:
            return Ok(self._value)  # type: ignore[arg-type]
        return Err(error_mapper(self._value) if error_mapper else self._value)  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_success

    def __hash__(self) -> int:
        return hash((Try, self._is_success, self._value))

    def __repr__(self) -> str:
        return f"{'Success' if self._is_success else 'Failure'}({self._value!r})"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Try):
            return NotImplemented
        return self._is_success == other._is_success and self._value == other._value

    def __iter__(self) -> Iterator[T]:
        if self._is_success:
            yield self._value  # type: ignore[misc]


def Success(value: T) -> Try[T]:  # noqa: N802
    """Construct Success variant."""
    return Try(value, _SUCCESS)


def Failure(exception: Exception) -> Try[T]:  # noqa: N802
    """Construct Failure variant. The payload must be an Exception instance."""
    if not isinstance(exception, Exception):
        raise TypeError(f"Failure() expects an Exception instance, got {type(exception).__name__}")
    return Try(exception, _FAILURE)
