"""Tests for the comprehension table and the fluent Query chain.

Validates:
- Each table entry equals its primitive form
- Two-clause select_many equals the hand-nested chain
- where / where_with semantics per error-bearing shape
- None guards fire before the container is touched
"""

from __future__ import annotations

import itertools

import pytest

from fallible import (
    NOTHING,
    Err,
    Failure,
    Left,
    NullArgumentError,
    Ok,
    PredicateError,
    Query,
    Right,
    Some,
    Success,
    Try,
    query,
)
from fallible.query import either as qe
from fallible.query import option as qo
from fallible.query import result as qr
from fallible.query import try_ as qt


# ═════════════════════════════════════════════════════════════════════════════
# Comprehension equivalence
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("a_present,b_present", list(itertools.product([True, False], repeat=2)))
def test_option_two_clause_equivalence(a_present: bool, b_present: bool) -> None:
    """from x in a from y in b(x) select f(x, y) == a.and_then(x => b(x).map(y => f(x, y)))"""
    a = Some(3) if a_present else NOTHING
    b = lambda x: Some(x + 1) if b_present else NOTHING
    f = lambda x, y: (x, y)

    desugared = qo.select_many(a, b, f)
    assert desugared == a.and_then(lambda x: b(x).map(lambda y: f(x, y)))
    assert desugared == qo.select(qo.select_many(a, lambda x: qo.select(b(x), lambda y: (x, y))), lambda p: f(*p))
    assert desugared == (Some((3, 4)) if a_present and b_present else NOTHING)


def test_two_clause_keeps_outer_value_in_scope() -> None:
    """The combiner sees the outer binding even though the binder depends on it."""
    assert qr.select_many(Ok(2), lambda x: Ok(x * 10), lambda x, y: x + y) == Ok(22)
    assert qe.select_many(Right("a"), lambda s: Right(s * 3), lambda s, t: f"{s}|{t}") == Right("a|aaa")
    assert qt.select_many(Success(2), lambda x: Success(x ** 3), lambda x, y: (x, y)) == Success((2, 8))


@pytest.mark.parametrize("module,wrap,fail", [
    (qr, Ok, Err("e")),
    (qe, Right, Left("e")),
    (qt, Success, Failure(ValueError("e"))),
    (qo, Some, NOTHING),
])
def test_select_and_single_select_many_match_primitives(module, wrap, fail) -> None:
    """select == map; select_many == and_then; failures pass through."""
    assert module.select(wrap(2), lambda x: x + 1) == wrap(3)
    assert module.select_many(wrap(2), lambda x: wrap(x * 5)) == wrap(10)
    assert module.select(fail, lambda x: x + 1) == fail
    assert module.select_many(fail, lambda x: wrap(x)) == fail
    assert module.select_many(wrap(2), lambda x: fail, lambda x, y: y) == fail


# ═════════════════════════════════════════════════════════════════════════════
# where
# ═════════════════════════════════════════════════════════════════════════════


def test_option_where_is_filter() -> None:
    """Option.where == filter."""
    assert qo.where(Some(4), lambda x: x > 3) == Some(4)
    assert qo.where(Some(2), lambda x: x > 3) is NOTHING
    assert qo.where(NOTHING, lambda x: x > 3) is NOTHING


@pytest.mark.parametrize("module,wrap,failed,error", [
    (qr, Ok, Err("earlier"), "too small"),
    (qe, Right, Left("earlier"), "too small"),
    (qt, Success, Failure(KeyError("earlier")), ValueError("too small")),
])
def test_where_value_form(module, wrap, failed, error) -> None:
    """Passing keeps the container; failing carries error; failure untouched."""
    ok = wrap(10)
    assert module.where(ok, lambda x: x > 5, error) is ok
    assert module.where(wrap(1), lambda x: x > 5, error) == (
        Err(error) if module is qr else Left(error) if module is qe else Failure(error)
    )

    calls: list[object] = []
    assert module.where(failed, lambda x: calls.append(x) or True, error) is failed
    assert calls == []


def test_where_with_factory_called_once_with_value() -> None:
    """Failing predicate: error == factory(value), factory invoked exactly once."""
    for module, wrap, unwrap_error in [
        (qr, Ok, lambda c: c.unwrap_err()),
        (qe, Right, lambda c: c.unwrap_left()),
        (qt, Success, lambda c: c.get_exception()),
    ]:
        calls: list[int] = []

        def factory(value: int) -> Exception:
            calls.append(value)
            return ValueError(f"{value} is odd")

        result = module.where_with(wrap(7), lambda n: n % 2 == 0, factory)

        assert calls == [7]
        assert str(unwrap_error(result)) == "7 is odd"


def test_where_with_factory_not_called_when_predicate_holds() -> None:
    """No error is computed on the happy path or for failures."""
    calls: list[int] = []
    factory = lambda v: calls.append(v) or "err"

    assert qr.where_with(Ok(2), lambda n: n % 2 == 0, factory) == Ok(2)
    assert qr.where_with(Err("x"), lambda n: False, factory) == Err("x")
    assert qe.where_with(Right(2), lambda n: True, factory) == Right(2)
    assert calls == []


def test_try_where_requires_exception() -> None:
    """Try carries exceptions only."""
    with pytest.raises(TypeError):
        qt.where(Success(1), lambda x: False, "not an exception")  # type: ignore[arg-type]


def test_try_where_captures_raising_predicate() -> None:
    """Try keeps its capture semantics through where."""
    result = qt.where(Success(0), lambda x: 1 / x > 0, PredicateError())
    assert isinstance(result.get_exception(), ZeroDivisionError)


# ═════════════════════════════════════════════════════════════════════════════
# Argument guards
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("call,argument", [
    (lambda: qo.select(Some(1), None), "projector"),
    (lambda: qo.select_many(Some(1), None), "binder"),
    (lambda: qo.where(Some(1), None), "predicate"),
    (lambda: qr.select(Ok(1), None), "projector"),
    (lambda: qr.select_many(Ok(1), None, lambda x, y: y), "binder"),
    (lambda: qr.where(Ok(1), None, "e"), "predicate"),
    (lambda: qr.where_with(Ok(1), lambda x: True, None), "error_factory"),
    (lambda: qe.select(Right(1), None), "projector"),
    (lambda: qe.where_with(Right(1), None, str), "predicate"),
    (lambda: qt.select_many(Success(1), None), "binder"),
    (lambda: qt.where_with(Success(1), lambda x: True, None), "error_factory"),
    (lambda: qo.select_many(Some(1), lambda x: Some(x), None), "result_combiner"),
    (lambda: qr.select_many(Ok(1), lambda x: Ok(x), None), "result_combiner"),
    (lambda: qe.select_many(Right(1), lambda x: Right(x), None), "result_combiner"),
    (lambda: qt.select_many(Success(1), lambda x: Success(x), None), "result_combiner"),
    (lambda: query(Ok(1)).select_many(lambda x: Ok(x), None), "result_combiner"),
])
def test_none_function_arguments_raise(call, argument: str) -> None:
    """None callables are rejected with the argument named."""
    with pytest.raises(NullArgumentError) as info:
        call()
    assert info.value.violation.argument == argument


def test_guards_fire_before_primitive_on_failure_state() -> None:
    """Even a container that would ignore the callable rejects None."""
    with pytest.raises(NullArgumentError):
        qr.select(Err("e"), None)  # type: ignore[arg-type]
    with pytest.raises(NullArgumentError):
        qo.where(NOTHING, None)  # type: ignore[arg-type]


def test_omitted_combiner_is_one_clause_form() -> None:
    """Leaving result_combiner out binds; passing None is an error."""
    assert qo.select_many(Some(2), lambda x: Some(x * 3)) == Some(6)
    assert qr.select_many(Ok(2), lambda x: Ok(x * 3)) == Ok(6)
    assert qe.select_many(Right(2), lambda x: Right(x * 3)) == Right(6)
    assert qt.select_many(Success(2), lambda x: Success(x * 3)) == Success(6)
    assert query(Some(2)).select_many(lambda x: Some(x * 3)).value == Some(6)

    with pytest.raises(NullArgumentError):
        qr.select_many(Err("e"), lambda x: Ok(x), None)  # type: ignore[arg-type]


def test_result_where_returns_same_err() -> None:
    """Err comes back as the same object and the predicate is never called."""
    failed = Err("earlier")
    calls: list[object] = []
    assert qr.where(failed, lambda x: calls.append(x) or True, "too small") is failed
    assert qr.where_with(failed, lambda x: calls.append(x) or True, str) is failed
    assert calls == []


# ═════════════════════════════════════════════════════════════════════════════
# Query
# ═════════════════════════════════════════════════════════════════════════════


def test_query_matches_table_calls() -> None:
    """A fluent chain is the same as nesting the table functions."""
    chain = (query(Ok(3))
             .select_many(lambda x: Ok(x + 1), lambda x, y: x * y)
             .where(lambda n: n > 10, "small")
             .select(str))
    by_hand = qr.select(qr.where(qr.select_many(Ok(3), lambda x: Ok(x + 1), lambda x, y: x * y),
                                 lambda n: n > 10, "small"), str)

    assert chain.value == by_hand == Ok("12")
    assert chain == Query(Ok("12"))


def test_query_dispatches_per_shape() -> None:
    """Option, Either and Try chains use their own tables."""
    assert query(Some(2)).where(lambda x: x > 5).value is NOTHING
    assert query(Right(2)).where_with(lambda x: x > 5, lambda x: f"{x}<=5").value == Left("2<=5")
    assert query(Try.of(lambda: int("x"))).select(lambda n: n + 1).value.is_failure()


def test_query_where_arity_checked() -> None:
    """Option takes no error; error-bearing shapes need one."""
    with pytest.raises(TypeError):
        query(Some(1)).where(lambda x: True, "error")
    with pytest.raises(TypeError):
        query(Ok(1)).where(lambda x: True)
    with pytest.raises(TypeError):
        query(Some(1)).where_with(lambda x: True, str)


def test_query_rejects_unsupported_types() -> None:
    """Plain values are not containers."""
    with pytest.raises(TypeError, match="list"):
        query([1, 2, 3])
