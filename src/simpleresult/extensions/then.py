"""Chaining combinators for railway-oriented composition.

`then` continues a chain on success, `then_on_fail` recovers on failure.
Both branch on the discriminant only:

- the skipped side returns the source Result itself (same instance)
- a continuation returning a Result is taken verbatim (same instance)
- a continuation returning anything else is wrapped in a new `Ok(value)`
- exceptions raised by a continuation propagate untouched

A continuation receives the typed value (or the errors tuple) only when its
signature asks for one, so zero-argument factories work on every source.

Example:
    >>> from simpleresult import Error, Fail, Ok
    >>> (
    ...     Ok("a")
    ...     .then(lambda s: Ok(s + "!"))
    ...     .then(lambda s: s.upper())
    ... ).value
    'A!'
    >>> Fail(Error("boom")).then_on_fail(lambda errors: len(errors)).value
    1
"""

from __future__ import annotations

import inspect
from typing import Any, Callable

from ..config import get_settings
from ..core.result import Ok, Result, TypedResult
from ..observability import get_logger

_log = get_logger("simpleresult.then")


# ═══════════════════════════════════════════════════════════════════════════════
# Combinators
# ═══════════════════════════════════════════════════════════════════════════════


def then(result: Result, fn: Callable[..., Any], *, pass_value: bool | None = None) -> Result:
    """Invoke `fn` only when `result` succeeded.

    Untyped successes call `fn()`. Typed successes call `fn(result.value)`
    with the stored object itself when `fn` declares a required positional
    parameter (or *args), otherwise `fn()`. `pass_value` forces either shape.

    Type signatures:
        Result        -> (() -> U | Result)  -> TypedResult[U] | Result
        TypedResult[T] -> (T -> U | Result) -> TypedResult[U] | Result
        TypedResult[T] -> (() -> U | Result) -> TypedResult[U] | Result
    """
    if not result.is_success:
        _trace("then.skipped", result, fn)
        return result
    lifted = lift(fn(result.value) if _passes_value(result, fn, pass_value) else fn())
    _trace("then.invoked", result, fn, outcome=lifted.is_success)
    return lifted


def then_on_fail(result: Result, fn: Callable[..., Any], *, pass_errors: bool | None = None) -> Result:
    """Invoke recovery `fn` only when `result` failed.

    `fn` is called as `fn(errors)` when it declares a required positional
    parameter (or *args), otherwise as `fn()`. `pass_errors` forces either
    shape. The errors tuple is the failed result's own, read-only.

    Type signatures:
        Result -> (() -> U | Result)       -> TypedResult[U] | Result
        Result -> (errors -> U | Result) -> TypedResult[U] | Result
    """
    if result.is_success:
        _trace("then_on_fail.skipped", result, fn)
        return result
    with_errors = takes_argument(fn) if pass_errors is None else pass_errors
    lifted = lift(fn(result.errors) if with_errors else fn())
    _trace("then_on_fail.invoked", result, fn, outcome=lifted.is_success)
    return lifted


# ═══════════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════════


def lift(out: Any) -> Result:
    """Return `out` verbatim if it is a Result, else wrap it in `Ok(out)`."""
    return out if isinstance(out, Result) else Ok(out)


def takes_argument(fn: Callable[..., Any]) -> bool:
    """Whether `fn` expects the typed value or the errors tuple as its argument.

    Callables whose signature cannot be inspected (some builtins) are
    assumed to take it.
    """
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return True
    for p in params:
        if p.kind is p.VAR_POSITIONAL:
            return True
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty:
            return True
    return False


def _passes_value(result: Result, fn: Callable[..., Any], pass_value: bool | None) -> bool:
    if not isinstance(result, TypedResult):
        return False
    return takes_argument(fn) if pass_value is None else pass_value


def _trace(event: str, result: Result, fn: Callable[..., Any], **kw: Any) -> None:
    if not get_settings().tracing:
        return
    _log.debug(
        event,
        source="typed" if isinstance(result, TypedResult) else "untyped",
        success=result.is_success,
        error_count=len(result.errors),
        continuation=getattr(fn, "__qualname__", type(fn).__name__),
        **kw,
    )
