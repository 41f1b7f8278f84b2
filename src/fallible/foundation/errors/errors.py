"""Precondition violations raised by containers and combinators.

Two kinds of failure flow through fallible:
- Domain failures: caller data carried inside Err/Failure/Left. Never raised.
- Precondition violations: programmer error (missing argument, empty input,
  unwrapping the wrong variant). Raised eagerly as PreconditionError.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel


class ErrorCode(StrEnum):
    """Standard codes for precondition violations."""
    NULL_ARGUMENT = "NULL_ARGUMENT"
    EMPTY_SEQUENCE = "EMPTY_SEQUENCE"
    INVALID_UNWRAP = "INVALID_UNWRAP"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class Violation(BaseModel):
    """Structured description of a violated precondition."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    argument: str | None = None

    @classmethod
    def create(cls, code: ErrorCode, message: str, *, argument: str | None = None) -> Self:
        """Factory method for construction."""
        return cls(code=code, message=message, argument=argument)

    def render(self) -> str:
        arg = f" (argument: {self.argument})" if self.argument else ""
        return f"[{self.code}] {self.message}{arg}"

    __str__ = render


class PreconditionError(Exception):
    """Exception wrapping a Violation for raising."""

    code: ErrorCode = ErrorCode.INVALID_ARGUMENT

    def __init__(self, violation: Violation) -> None:
        self.violation = violation
        super().__init__(violation.message)

    @classmethod
    def create(cls, message: str, *, argument: str | None = None) -> Self:
        """Create with the class's default error code."""
        return cls(Violation.create(cls.code, message, argument=argument))


class NullArgumentError(PreconditionError, ValueError):
    """A required argument was None."""

    code = ErrorCode.NULL_ARGUMENT

    @classmethod
    def for_argument(cls, name: str) -> Self:
        return cls.create(f"Argument '{name}' must not be None", argument=name)


class EmptySequenceError(PreconditionError):
    """An operation that needs at least one element received none."""

    code = ErrorCode.EMPTY_SEQUENCE

    @classmethod
    def for_argument(cls, name: str) -> Self:
        return cls.create("Sequence contains no elements.", argument=name)


class UnwrapError(PreconditionError):
    """Value or error extracted from the wrong variant."""

    code = ErrorCode.INVALID_UNWRAP


class PredicateError(Exception):
    """Domain failure produced by Try.filter when the predicate does not hold."""

    def __init__(self, message: str = "Predicate not satisfied") -> None:
        super().__init__(message)
