"""Tests for the Result, Option and Either collection families."""

from __future__ import annotations

import pytest

from fallible import NOTHING, EmptySequenceError, Err, Left, NullArgumentError, Ok, Right, Some
from fallible.collection import eithers, options, results


# ═════════════════════════════════════════════════════════════════════════════
# Result
# ═════════════════════════════════════════════════════════════════════════════


def test_results_sequence() -> None:
    """Fail-fast on first Err, Ok(list) otherwise."""
    assert results.sequence([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])
    assert results.sequence([Ok(1), Err("first"), Err("second")]) == Err("first")
    assert results.sequence([]) == Ok([])


def test_results_traverse(recorder) -> None:
    """Selector stops at the first Err."""
    source = recorder(["1", "x", "3"])
    parse = lambda s: Ok(int(s)) if s.isdigit() else Err(f"invalid: {s}")

    assert results.traverse(source, parse) == Err("invalid: x")
    assert source.pulled == [0, 1]
    assert results.traverse(["4", "5"], parse) == Ok([4, 5])


def test_results_collectors_and_partition() -> None:
    """collect_ok / collect_err / partition keep input order."""
    rs = [Ok(1), Err("a"), Ok(2), Err("b")]
    assert list(results.collect_ok(rs)) == [1, 2]
    assert list(results.collect_err(rs)) == ["a", "b"]
    assert results.partition(rs) == ([1, 2], ["a", "b"])


def test_results_collect_all_accumulates() -> None:
    """Every error is kept; no short-circuit."""
    assert results.collect_all([Ok(1), Err("e1"), Ok(3), Err("e2")]) == Err(["e1", "e2"])
    assert results.collect_all([Ok(1), Ok(2)]) == Ok([1, 2])
    assert results.collect_all([]) == Ok([])


def test_results_first_ok() -> None:
    """First Ok, else last Err, else EmptySequenceError."""
    assert results.first_ok([Err("a"), Ok(2), Ok(3)]) == Ok(2)
    assert results.first_ok([Err("a"), Err("b")]) == Err("b")
    with pytest.raises(EmptySequenceError):
        results.first_ok([])


def test_results_first_ok_or_default() -> None:
    """Empty input gives Err(default_error) instead of raising."""
    assert results.first_ok_or_default([], "none") == Err("none")
    assert results.first_ok_or_default([Err("a"), Ok(1)], "none") == Ok(1)
    assert results.first_ok_or_default([Err("a")], "none") == Err("a")


# ═════════════════════════════════════════════════════════════════════════════
# Option
# ═════════════════════════════════════════════════════════════════════════════


def test_options_sequence_and_traverse() -> None:
    """Nothing as soon as one element is Nothing."""
    assert options.sequence([Some(1), Some(2)]) == Some([1, 2])
    assert options.sequence([Some(1), NOTHING, Some(3)]) is NOTHING
    assert options.sequence([]) == Some([])

    lookup = {"a": 1, "b": 2}
    assert options.traverse("ab", lambda k: Some(lookup[k]) if k in lookup else NOTHING) == Some([1, 2])
    assert options.traverse("azb", lambda k: Some(lookup[k]) if k in lookup else NOTHING) is NOTHING


def test_options_choose() -> None:
    """choose / choose_map drop Nothing lazily; Some(None) is kept."""
    assert list(options.choose([Some(1), NOTHING, Some(None), Some(3)])) == [1, None, 3]

    calls: list[int] = []
    halves = options.choose_map(range(5), lambda n: calls.append(n) or (Some(n // 2) if n % 2 == 0 else NOTHING))
    assert calls == []
    assert list(halves) == [0, 1, 2]
    assert calls == [0, 1, 2, 3, 4]


def test_options_first_some(recorder) -> None:
    """First Some wins and stops; Nothing when none or empty."""
    source = recorder([NOTHING, Some(2), Some(3)])
    assert options.first_some(source) == Some(2)
    assert source.pulled == [0, 1]
    assert options.first_some([NOTHING, NOTHING]) is NOTHING
    assert options.first_some([]) is NOTHING


# ═════════════════════════════════════════════════════════════════════════════
# Either
# ═════════════════════════════════════════════════════════════════════════════


def test_eithers_collectors() -> None:
    """collect_rights / collect_lefts are complementary."""
    es = [Right(1), Left("x"), Right(2)]
    assert list(eithers.collect_rights(es)) == [1, 2]
    assert list(eithers.collect_lefts(es)) == ["x"]


def test_eithers_partition_lefts_first() -> None:
    """partition returns (lefts, rights)."""
    assert eithers.partition([Right(1), Left("x"), Left("y"), Right(2)]) == (["x", "y"], [1, 2])


# ═════════════════════════════════════════════════════════════════════════════
# Argument validation
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("call", [
    lambda: results.sequence(None),
    lambda: results.traverse([], None),
    lambda: results.collect_ok(None),
    lambda: results.collect_err(None),
    lambda: results.partition(None),
    lambda: results.collect_all(None),
    lambda: results.first_ok(None),
    lambda: results.first_ok_or_default(None, "e"),
    lambda: options.sequence(None),
    lambda: options.traverse(None, Some),
    lambda: options.choose(None),
    lambda: options.choose_map([], None),
    lambda: options.first_some(None),
    lambda: eithers.collect_rights(None),
    lambda: eithers.collect_lefts(None),
    lambda: eithers.partition(None),
])
def test_none_arguments_raise(call) -> None:
    """Every combinator rejects None eagerly."""
    with pytest.raises(NullArgumentError):
        call()
