"""Testing utilities for code built on simpleresult.

- assert_* helpers: outcome, value, and identity checks
- CallSpy: records continuation invocations
"""

from .assertions import assert_failed, assert_success, assert_success_with_same_value, assert_success_with_value
from .spy import CallSpy, Invocation

__all__ = [
    "assert_success", "assert_success_with_value", "assert_success_with_same_value", "assert_failed",
    "CallSpy", "Invocation",
]
