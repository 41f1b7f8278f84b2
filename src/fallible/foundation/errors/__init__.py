"""Error handling for fallible.

- ErrorCode/Violation: structured description of a precondition violation
- PreconditionError and subclasses: raised eagerly on programmer error
- PredicateError: domain failure placed into a Try by filter()
- require/require_all: argument guards used at every public boundary
"""

from .errors import (
    EmptySequenceError,
    ErrorCode,
    NullArgumentError,
    PreconditionError,
    PredicateError,
    UnwrapError,
    Violation,
)
from .guards import empty_sequence, require, require_all

__all__ = [
    # Codes & models
    "ErrorCode", "Violation",
    # Exceptions
    "PreconditionError", "NullArgumentError", "EmptySequenceError", "UnwrapError", "PredicateError",
    # Guards
    "require", "require_all", "empty_sequence",
]
