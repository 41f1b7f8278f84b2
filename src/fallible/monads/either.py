"""Either: one of two alternatives, Right-biased.

Left(value) or Right(value). By convention Right is the success channel, so
map/and_then act on Right and pass Left through untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from fallible.foundation.errors import UnwrapError

if TYPE_CHECKING:
    from .option import Option
    from .result import Result

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")
M = TypeVar("M")

_RIGHT = True
_LEFT = False


class Either(Generic[L, R]):
    """Discriminated union of Left and Right.

    Examples:
        >>> Right(2).map_right(lambda x: x * 10)
        Right(20)
        >>> Left("missing").map_right(lambda x: x * 10)
        Left('missing')
    """

    __slots__ = ("_value", "_is_right")
    __match_args__ = ("_value",)

    def __init__(self, value: L | R, is_right: bool) -> None:
        self._value = value
        self._is_right = is_right

    def is_left(self) -> bool:
        return not self._is_right

    def is_right(self) -> bool:
        return self._is_right

    def unwrap_right(self) -> R:
        """Extract Right value. Raises UnwrapError on Left."""
        if self._is_right:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.create(f"unwrap_right() on Left: {self._value!r}")

    def unwrap_left(self) -> L:
        """Extract Left value. Raises UnwrapError on Right."""
        if not self._is_right:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.create(f"unwrap_left() on Right: {self._value!r}")

    def right_or(self, default: R) -> R:
        return self._value if self._is_right else default  # type: ignore[return-value]

    def left_or(self, default: L) -> L:
        return self._value if not self._is_right else default  # type: ignore[return-value]

    def map_right(self, f: Callable[[R], U]) -> Either[L, U]:
        return Either(f(self._value), _RIGHT) if self._is_right else self  # type: ignore[arg-type,return-value]

    map = map_right

    def map_left(self, f: Callable[[L], M]) -> Either[M, R]:
        return Either(f(self._value), _LEFT) if not self._is_right else self  # type: ignore[arg-type,return-value]

    def bimap(self, left_fn: Callable[[L], M], right_fn: Callable[[R], U]) -> Either[M, U]:
        if self._is_right:
            return Either(right_fn(self._value), _RIGHT)  # type: ignore[arg-type]
        return Either(left_fn(self._value), _LEFT)  # type: ignore[arg-type]

    def and_then(self, f: Callable[[R], Either[L, U]]) -> Either[L, U]:
        """Monadic bind on the Right side."""
        return f(self._value) if self._is_right else self  # type: ignore[arg-type,return-value]

    flat_map = and_then

    def or_else(self, f: Callable[[L], Either[M, R]]) -> Either[M, R]:
        return f(self._value) if not self._is_right else self  # type: ignore[arg-type,return-value]

    def swap(self) -> Either[R, L]:
        return Either(self._value, not self._is_right)

    def match(self, *, left: Callable[[L], U], right: Callable[[R], U]) -> U:
        return right(self._value) if self._is_right else left(self._value)  # type: ignore[arg-type]

    def right_option(self) -> Option[R]:
        from .option import NOTHING, Some
        return Some(self._value) if self._is_right else NOTHING  # type: ignore[arg-type]

    def left_option(self) -> Option[L]:
        from .option import NOTHING, Some
        return Some(self._value) if not self._is_right else NOTHING  # type: ignore[arg-type]

    def to_result(self) -> Result[R, L]:
        """Right -> Ok, Left -> Err."""
        from .result import Err, Ok
        return Ok(self._value) if self._is_right else Err(self._value)  # type: ignore[arg-type]

    def __hash__(self) -> int:
        return hash((Either, self._is_right, self._value))

    def __repr__(self) -> str:
        return f"{'Right' if self._is_right else 'Left'}({self._value!r})"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self._is_right == other._is_right and self._value == other._value


def Left(value: L) -> Either[L, R]:  # noqa: N802
    return Either(value, _LEFT)


def Right(value: R) -> Either[L, R]:  # noqa: N802
    return Either(value, _RIGHT)
