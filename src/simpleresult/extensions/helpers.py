"""Opt-in exception boundary and outcome merging.

The combinators never catch. `try_fn` is the one place where a raised
exception becomes a failed Result, and only when the caller asks for it.
"""

from __future__ import annotations

from typing import Any, Callable, ParamSpec

from ..core.error import Error, ErrorLike
from ..core.result import Fail, Ok, Result
from .then import lift

P = ParamSpec("P")


def try_fn(fn: Callable[P, Any], *args: P.args, **kwargs: P.kwargs) -> Result:
    """Run `fn`, converting a raised Exception into a typed failure.

    Returned Results pass through verbatim; plain values become `Ok(value)`.

    Example:
        >>> try_fn(int, "42").value
        42
        >>> try_fn(int, "nope").errors[0].metadata["exception_type"]
        'ValueError'
    """
    try:
        out = fn(*args, **kwargs)
    except Exception as e:
        return Fail(Error.from_exception(e), typed=True)
    return lift(out)


def merge(*results: Result) -> Result:
    """Combine outcomes: success iff every input succeeded.

    Unlike a fail-fast chain this collects ALL errors, in input order, into a
    new untyped failure. An all-success merge returns a fresh `Ok()`.
    """
    errors: list[ErrorLike] = [e for r in results for e in r.errors]
    return Fail(errors) if errors else Ok()
