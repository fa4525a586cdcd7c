"""Combinators over Result and TypedResult.

- then / then_on_fail: success-path chaining and failure-path recovery
- then_async / then_on_fail_async: awaitable continuations
- try_fn / merge: exception boundary and error accumulation
"""

from .helpers import merge, try_fn
from .then import lift, takes_argument, then, then_on_fail
from .then_async import then_async, then_on_fail_async

__all__ = [
    "then", "then_on_fail",
    "then_async", "then_on_fail_async",
    "try_fn", "merge",
    "lift", "takes_argument",
]
