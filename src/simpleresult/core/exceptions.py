"""Misuse exceptions.

Domain failures travel in-band as failed Results. These exceptions signal
programmer errors only: building a failure without errors, or reading the
value of a failed TypedResult.
"""

from __future__ import annotations


class SimpleResultError(Exception):
    """Base class for all simpleresult misuse errors."""

    __slots__ = ()


class InvalidArgumentError(SimpleResultError, ValueError):
    """Raised when a factory receives arguments that violate its contract."""

    __slots__ = ()


class ValueAccessError(SimpleResultError, RuntimeError):
    """Raised when `value` is read from a failed TypedResult."""

    __slots__ = ("errors",)

    def __init__(self, errors: tuple[object, ...]) -> None:
        self.errors = errors
        super().__init__(f"value accessed on failed result: {', '.join(map(str, errors))}")
