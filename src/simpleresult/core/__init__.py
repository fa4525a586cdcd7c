"""Core entities: Error, Result, TypedResult and their factories."""

from .error import Error, ErrorLike, HasMessage, HasMetadata
from .exceptions import InvalidArgumentError, SimpleResultError, ValueAccessError
from .result import Errors, Fail, Ok, Result, TypedResult

__all__ = [
    "Error", "ErrorLike", "HasMessage", "HasMetadata",
    "Result", "TypedResult", "Errors", "Ok", "Fail",
    "SimpleResultError", "InvalidArgumentError", "ValueAccessError",
]
