"""Aggregate many containers into one.

One module per container shape, all built on the shape-agnostic algorithms
in generic:

- tries: sequence, traverse, collect_success, collect_failures, partition, first_success
- results: sequence, traverse, collect_ok, collect_err, partition, collect_all, first_ok, first_ok_or_default
- options: sequence, traverse, choose, choose_map, first_some
- eithers: collect_rights, collect_lefts, partition

The Try family is also available at package level.

Example:
    >>> from fallible.collection import results, traverse
    >>> from fallible.monads import Ok, Err, Try
    >>> traverse(["1", "2"], lambda s: Try.of(lambda: int(s)))
    Success([1, 2])
    >>> results.partition([Ok(1), Err("x"), Ok(2)])
    ([1, 2], ['x'])
"""

from . import eithers, options, results, tries
from .generic import Collected
from .tries import collect_failures, collect_success, first_success, partition, sequence, traverse

__all__ = [
    # Per-shape namespaces
    "tries", "results", "options", "eithers",
    # Try family
    "sequence", "traverse", "collect_success", "collect_failures", "partition", "first_success",
    # Lazy view
    "Collected",
]
