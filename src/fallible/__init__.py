"""Fallible - algebraic containers and the combinators that aggregate them.

Option, Result, Either and Try model absence, recoverable errors, two-way
outcomes and captured exceptions as plain values. On top of them:

- fallible.collection: turn many containers into one (sequence, traverse,
  partition, first_success, lazy collectors)
- fallible.query: the comprehension table (select, select_many, where) and a
  fluent Query chain

Quick Start:
    >>> from fallible import Try, traverse, partition, first_success
    >>>
    >>> parse = lambda s: Try.of(lambda: int(s))
    >>> traverse(["1", "2", "3"], parse)
    Success([1, 2, 3])
    >>> traverse(["1", "abc", "3"], parse).is_failure()
    True
    >>> partition([parse("1"), parse("x"), parse("2")])[0]
    [1, 2]

Comprehensions:
    >>> from fallible import Ok, query
    >>> query(Ok(4)).where(lambda n: n % 2 == 0, "odd").select(lambda n: n // 2).value
    Ok(2)

Configuration comes from FALLIBLE_* environment variables (see
fallible.foundation.config); logs go through fallible.observability.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Containers
from .monads import NOTHING, Either, Err, Failure, Left, Nothing, Ok, Option, Result, Right, Some, Success, Try

# Collection combinators (Try family at top level, other shapes as namespaces)
from .collection import (
    Collected,
    collect_failures,
    collect_success,
    eithers,
    first_success,
    options,
    partition,
    results,
    sequence,
    traverse,
    tries,
)

# Comprehensions
from .query import Query, query

# Errors
from .foundation.errors import (
    EmptySequenceError,
    ErrorCode,
    NullArgumentError,
    PreconditionError,
    PredicateError,
    UnwrapError,
    Violation,
)

# Config & logging
from .foundation.config import FallibleSettings, clear_settings_cache, get_settings
from .observability import configure_logging, get_logger

__all__ = [
    "__version__",
    # Containers
    "Option", "Some", "Nothing", "NOTHING",
    "Result", "Ok", "Err",
    "Either", "Left", "Right",
    "Try", "Success", "Failure",
    # Collection
    "sequence", "traverse", "collect_success", "collect_failures", "partition", "first_success",
    "tries", "results", "options", "eithers", "Collected",
    # Query
    "Query", "query",
    # Errors
    "ErrorCode", "Violation", "PreconditionError", "NullArgumentError", "EmptySequenceError",
    "UnwrapError", "PredicateError",
    # Config & logging
    "FallibleSettings", "get_settings", "clear_settings_cache", "configure_logging", "get_logger",
]
