"""Tests for the Panics checker and the recovery scope."""

import logging

import pytest

from verdict.checkers import CheckerInfo, Panic, equals, panic, panics, recovery_scope


PANIC_LOGGER = "verdict.checkers.panic_checkers"


def _check(checker, params, ok, error=""):
    params = list(params)
    names = list(checker.info().params)
    assert checker.check(params, names) == (ok, error)
    return params, names


def _returns_bool_then_panics() -> bool:
    panic("BOOM")


def _raises_value_error():
    raise ValueError("BOOM")


def test_info():
    assert panics.info() == CheckerInfo(name="Panics", params=("function", "expected"))


def test_plain_strings():
    _check(panics, [lambda: panic("BOOM"), "BOOM"], True)
    _check(panics, [lambda: panic("KABOOM"), "BOOM"], False)
    _check(panics, [_returns_bool_then_panics, "BOOM"], True)


def test_error_values():
    _check(panics, [lambda: panic(ValueError("BOOM")), ValueError("BOOM")], True)
    _check(panics, [lambda: panic(ValueError("KABOOM")), ValueError("BOOM")], False)
    _check(panics, [lambda: panic(ValueError("BOOM")), TypeError("BOOM")], False)


def test_raised_exceptions_are_panics():
    _check(panics, [_raises_value_error, ValueError("BOOM")], True)
    _check(panics, [_raises_value_error, "BO.M"], True)


def test_string_matching():
    _check(panics, [lambda: panic(ValueError("BOOM")), "BO.M"], True)
    _check(panics, [lambda: panic(ValueError("KABOOM")), "BO.M"], False)


def test_non_string_payloads():
    _check(panics, [lambda: panic(42), 42], True)
    _check(panics, [lambda: panic(42), 42.0], False)
    _check(panics, [lambda: panic(42), "4."], True)
    _check(panics, [lambda: panic({"code": 1}), {"code": 1}], True)


def test_function_has_not_panicked():
    _check(panics, [lambda: False, "BOOM"], False, "Function has not panicked")


def test_function_must_take_zero_arguments():
    _check(panics, [1, "BOOM"], False, "Function must take zero arguments")
    _check(panics, [lambda x: panic(x), "BOOM"], False, "Function must take zero arguments")


def test_default_arguments_are_accepted():
    def fn(value="BOOM"):
        panic(value)

    _check(panics, [fn, "BOOM"], True)


def test_params_and_names_rewritten_on_panic():
    params, names = _check(panics, [lambda: panic(ValueError("KABOOM")), ValueError("BOOM")], False)

    assert equals(params[0], ValueError("KABOOM")) == (True, "")
    assert names[0] == "panic"
    assert names[1] == "expected"


def test_params_rewritten_when_check_passes():
    params, names = _check(panics, [lambda: panic("BOOM"), "BOOM"], True)

    assert params == ["BOOM", "BOOM"]
    assert names == ["panic", "expected"]


def test_params_kept_when_function_does_not_panic():
    def fn():
        return None

    params, names = _check(panics, [fn, "BOOM"], False, "Function has not panicked")

    assert params[0] is fn
    assert names[0] == "function"


def test_keyboard_interrupt_is_not_captured():
    def fn():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        panics.check([fn, "BOOM"], ["function", "expected"])


class TestRecoveryScope:
    def test_captures_panic_payload(self):
        with recovery_scope() as recovered:
            panic("BOOM")

        assert recovered.panicked is True
        assert recovered.value == "BOOM"

    def test_captures_exception_object(self):
        error = RuntimeError("BOOM")
        with recovery_scope() as recovered:
            raise error

        assert recovered.panicked is True
        assert recovered.value is error

    def test_no_panic(self):
        with recovery_scope() as recovered:
            pass

        assert recovered.panicked is False
        assert recovered.value is None

    def test_panic_can_carry_none(self):
        with recovery_scope() as recovered:
            panic(None)

        assert recovered.panicked is True
        assert recovered.value is None

    def test_panic_exception_exposes_value(self):
        with pytest.raises(Panic) as excinfo:
            panic([1, 2])

        assert excinfo.value.value == [1, 2]

    def test_base_exceptions_pass_through(self):
        class Stop(BaseException):
            pass

        with pytest.raises(Stop):
            with recovery_scope() as recovered:
                raise Stop()

        assert recovered.panicked is False
        assert recovered.value is None

        with pytest.raises(KeyboardInterrupt):
            with recovery_scope():
                raise KeyboardInterrupt

    def test_nested_scopes_recover_innermost_only(self, caplog):
        caplog.set_level(logging.DEBUG, logger=PANIC_LOGGER)
        with recovery_scope() as outer:
            with recovery_scope() as inner:
                panic("inner")
            assert inner.value == "inner"

        assert inner.panicked is True
        assert outer.panicked is False
        assert outer.value is None
        assert [r.getMessage() for r in caplog.records if r.name == PANIC_LOGGER] == ["Recovered panic: 'inner'"]

    def test_outer_scope_recovers_after_inner_completes(self):
        with recovery_scope() as outer:
            with recovery_scope() as inner:
                pass
            panic("outer")

        assert inner.panicked is False
        assert outer.value == "outer"
