"""Tests for the IsNil, NotNil and Not checkers."""

import gc
import queue
import weakref
from collections.abc import Sized

import pytest

from verdict.checkers import CheckerInfo, Not, is_nil, matches, not_nil, panic, panics
from verdict.reflection import Ref


class _Target:
    pass


def _dead_weakref() -> weakref.ref:
    target = _Target()
    ref = weakref.ref(target)
    del target
    gc.collect()
    return ref


def _check(checker, params, ok, error=""):
    params = list(params)
    names = list(checker.info().params)
    assert checker.check(params, names) == (ok, error)
    return params, names


NIL_VALUES = [
    None,
    Ref.nil(list),
    Ref.nil(dict),
    Ref.nil(queue.Queue),
]

NON_NIL_VALUES = [
    "a",
    "",
    0,
    False,
    [],
    [1],
    {},
    queue.Queue(),
    ValueError(""),
    lambda: None,
    Ref.to([1]),
    Ref.var(Sized),
]


def test_is_nil_info():
    assert is_nil.info() == CheckerInfo(name="IsNil", params=("value",))


def test_not_nil_info():
    assert not_nil.info() == CheckerInfo(name="NotNil", params=("value",))


@pytest.mark.parametrize("value", NIL_VALUES)
def test_nil_values(value):
    _check(is_nil, [value], True)
    _check(not_nil, [value], False)


@pytest.mark.parametrize("value", NON_NIL_VALUES)
def test_non_nil_values(value):
    _check(is_nil, [value], False)
    _check(not_nil, [value], True)


def test_weak_references():
    target = _Target()
    live = weakref.ref(target)

    _check(is_nil, [live], False)
    _check(is_nil, [_dead_weakref()], True)
    _check(not_nil, [_dead_weakref()], False)


def test_ref_becomes_nil_when_cleared():
    ref = Ref.to([1, 2])
    _check(is_nil, [ref], False)

    ref.set(None)
    _check(is_nil, [ref], True)


class TestNot:
    def test_info(self):
        info = Not(is_nil).info()
        assert info.name == "Not(IsNil)"
        assert info.params == ("value",)

    def test_nested_name(self):
        assert Not(Not(is_nil)).info().name == "Not(Not(IsNil))"

    def test_inverts_result(self):
        _check(Not(is_nil), [None], False)
        _check(Not(is_nil), ["a"], True)

    def test_error_passes_through_with_inverted_result(self):
        ok, error = matches(1, "a.c")
        assert (ok, error) == (False, "Obtained value is not a string and has no .String()")

        _check(Not(matches), [1, "a.c"], True, "Obtained value is not a string and has no .String()")

    def test_inner_rewrites_are_visible(self):
        params, names = _check(Not(panics), [lambda: panic("KABOOM"), "BOOM"], True)
        assert params[0] == "KABOOM"
        assert names[0] == "panic"

    def test_rejects_non_checker(self):
        with pytest.raises(TypeError):
            Not(42)
