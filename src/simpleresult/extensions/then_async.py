"""Async-aware forms of `then` and `then_on_fail`.

Same propagation rules and call-shape detection as the sync combinators. A
continuation may be a coroutine function or return any awaitable; its output
is awaited before being inspected. Plain sync continuations work unchanged.

Usage, inside a coroutine:

    async def load(user_id: int) -> Result:
        return Ok({"id": user_id})

    result = await then_async(Ok(7), load)
"""

from __future__ import annotations

import inspect
from typing import Any, Callable

from ..core.result import Result
from .then import _passes_value, _trace, lift, takes_argument


async def then_async(result: Result, fn: Callable[..., Any], *, pass_value: bool | None = None) -> Result:
    """Invoke `fn` only on success, awaiting its output if needed."""
    if not result.is_success:
        _trace("then.skipped", result, fn)
        return result
    out = fn(result.value) if _passes_value(result, fn, pass_value) else fn()
    if inspect.isawaitable(out):
        out = await out
    lifted = lift(out)
    _trace("then.invoked", result, fn, outcome=lifted.is_success)
    return lifted


async def then_on_fail_async(result: Result, fn: Callable[..., Any], *, pass_errors: bool | None = None) -> Result:
    """Invoke recovery `fn` only on failure, awaiting its output if needed."""
    if result.is_success:
        _trace("then_on_fail.skipped", result, fn)
        return result
    with_errors = takes_argument(fn) if pass_errors is None else pass_errors
    out = fn(result.errors) if with_errors else fn()
    if inspect.isawaitable(out):
        out = await out
    lifted = lift(out)
    _trace("then_on_fail.invoked", result, fn, outcome=lifted.is_success)
    return lifted
