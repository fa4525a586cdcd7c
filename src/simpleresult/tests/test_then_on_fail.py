"""Tests for the `then_on_fail` recovery combinator."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from simpleresult import Error, Fail, Ok, Result, TypedResult, then_on_fail
from simpleresult.extensions import takes_argument
from simpleresult.testing import CallSpy, assert_failed, assert_success_with_same_value, assert_success_with_value


# ═════════════════════════════════════════════════════════════════════════════
# Zero-Argument Factories
# ═════════════════════════════════════════════════════════════════════════════


def test_success_with_factory_is_not_invoked() -> None:
    source = Ok("Good time need good result")
    invoked = {"value": False, "result": False}

    def action() -> str:
        invoked["value"] = True
        return "Hello there!"

    def action_result() -> Result:
        invoked["result"] = True
        return Ok("Hello there!")

    assert then_on_fail(source, action) is source
    assert then_on_fail(source, action_result) is source
    assert invoked == {"value": False, "result": False}


def test_failed_with_factory_is_invoked_and_returns_new_result() -> None:
    source = Fail(Error("Deadlocker"), typed=True)
    internal_value = "Hello there!"
    internal_result = Ok(internal_value)
    calls: list[str] = []

    def action() -> str:
        calls.append("value")
        return internal_value

    def action_result() -> Result:
        calls.append("result")
        return internal_result

    first = then_on_fail(source, action)
    second = then_on_fail(source, action_result)

    assert first is not source and first != source
    assert second is not source and second != source
    assert calls == ["value", "result"]
    assert_success_with_same_value(first, internal_value)
    assert_success_with_same_value(second, internal_value)
    assert second is internal_result


# ═════════════════════════════════════════════════════════════════════════════
# Errors-Consuming Recovery
# ═════════════════════════════════════════════════════════════════════════════


def test_success_with_errors_func_is_not_invoked() -> None:
    source = Ok("Good time need good result")
    spy = CallSpy(return_value="Hello there!")
    spy_result = CallSpy(return_value=Ok("Hello there!"))

    assert then_on_fail(source, spy) is source
    assert then_on_fail(source, spy_result) is source
    spy.assert_not_called()
    spy_result.assert_not_called()


def test_failed_with_errors_func_receives_errors() -> None:
    error = Error("Deadlocker")
    source = Fail(error, typed=True)
    internal_value = "Hello there!"
    received: list[Sequence[Error]] = []

    def action(errors: Sequence[Error]) -> str:
        received.append(errors)
        return internal_value

    result = then_on_fail(source, action)

    assert result is not source
    assert_success_with_same_value(result, internal_value)
    assert received == [(error,)]
    assert received[0] is source.errors


def test_failed_with_errors_func_returning_result_is_verbatim() -> None:
    source = Fail(Error("Deadlocker"))
    replacement = Ok("Hello there!")
    spy = CallSpy(return_value=replacement)

    result = then_on_fail(source, spy)

    assert result is replacement
    spy.assert_called_once()
    assert spy.last_call is not None and spy.last_call.args == (source.errors,)


def test_recovery_returning_failure_is_verbatim() -> None:
    """Recovery may itself fail; that failure is the chain result."""
    source = Fail(Error("primary down"))
    secondary = Fail(Error("secondary down"), Error("no fallback left"))

    result = then_on_fail(source, lambda errors: secondary)

    assert result is secondary
    assert_failed(result, Error("secondary down"), Error("no fallback left"))


def test_errors_view_is_immutable() -> None:
    source = Fail(Error("a"), Error("b"))

    def mutate(errors: tuple[Error, ...]) -> str:
        with pytest.raises(AttributeError):
            errors.append(Error("c"))  # type: ignore[attr-defined]
        return "ok"

    then_on_fail(source, mutate)
    assert len(source.errors) == 2


def test_untyped_failure_recovers_to_typed_success() -> None:
    result = then_on_fail(Fail(Error("e")), lambda: "recovered")

    assert isinstance(result, TypedResult)
    assert_success_with_value(result, "recovered")


# ═════════════════════════════════════════════════════════════════════════════
# Shape Detection
# ═════════════════════════════════════════════════════════════════════════════


def test_takes_argument_detection() -> None:
    def zero() -> int: return 0
    def one(errors: tuple[Error, ...]) -> int: return len(errors)
    def optional(errors: tuple[Error, ...] | None = None) -> int: return 0
    def varargs(*args: object) -> int: return len(args)
    def keyword_only(*, errors: tuple[Error, ...] = ()) -> int: return 0

    assert takes_argument(zero) is False
    assert takes_argument(one) is True
    assert takes_argument(optional) is False
    assert takes_argument(varargs) is True
    assert takes_argument(keyword_only) is False
    assert takes_argument(lambda: 0) is False
    assert takes_argument(lambda errs: 0) is True


def test_pass_errors_override() -> None:
    source = Fail(Error("e"))
    spy = CallSpy(return_value=1)

    then_on_fail(source, spy, pass_errors=False)
    then_on_fail(source, spy, pass_errors=True)

    assert [call.args for call in spy.invocations] == [(), (source.errors,)]


def test_bound_method_recovery() -> None:
    class Fallback:
        def __init__(self) -> None:
            self.seen: tuple[Error, ...] = ()

        def recover(self, errors: tuple[Error, ...]) -> str:
            self.seen = errors
            return "fallback"

    fallback = Fallback()
    source = Fail(Error("e"))

    result = then_on_fail(source, fallback.recover)

    assert_success_with_value(result, "fallback")
    assert fallback.seen is source.errors


# ═════════════════════════════════════════════════════════════════════════════
# Chains & Exceptions
# ═════════════════════════════════════════════════════════════════════════════


def test_method_chain_recovers_then_continues() -> None:
    result = (
        Fail(Error("cache miss"), typed=True)
        .then_on_fail(lambda: Ok("db"))
        .then(lambda source: f"loaded from {source}")
    )

    assert_success_with_value(result, "loaded from db")


def test_recovery_exception_propagates() -> None:
    def explode(errors: tuple[Error, ...]) -> str:
        raise ValueError(errors[0].message)

    with pytest.raises(ValueError, match="original"):
        then_on_fail(Fail(Error("original")), explode)


def test_example_recovered_result_is_not_the_failed_one() -> None:
    source = Fail(Error("e"))

    result = then_on_fail(source, lambda: Ok("recovered"))

    assert_success_with_value(result, "recovered")
    assert result is not source


def test_example_success_kept_without_recovery() -> None:
    source = Ok("kept")
    spy = CallSpy(return_value=Ok("replaced"))

    result = then_on_fail(source, spy)

    assert result is source
    assert_success_with_value(result, "kept")
    spy.assert_not_called()
