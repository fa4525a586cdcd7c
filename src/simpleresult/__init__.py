"""simpleresult - Result values and chaining combinators for fallible steps.

A Result is either a success (optionally carrying a value) or a failure
carrying one or more structured errors. Combinators compose steps without
branching on the outcome at every call site.

Quick Start:
    >>> from simpleresult import Error, Fail, Ok
    >>>
    >>> def parse_port(raw: str):
    ...     return Ok(int(raw)) if raw.isdigit() else Fail(Error("not a port", {"raw": raw}), typed=True)
    >>>
    >>> parse_port("8080").then(lambda port: port + 1).value
    8081
    >>> parse_port("http").then(lambda port: port + 1).is_failed
    True

Recovery:
    >>> parse_port("http").then_on_fail(lambda errors: 80).value
    80

Free-function form:
    >>> from simpleresult import then, then_on_fail
    >>> then(Ok(), lambda: "hi").value
    'hi'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core
from .core import (
    Error,
    ErrorLike,
    Errors,
    Fail,
    HasMessage,
    HasMetadata,
    InvalidArgumentError,
    Ok,
    Result,
    SimpleResultError,
    TypedResult,
    ValueAccessError,
)

# Combinators
from .extensions import merge, then, then_async, then_on_fail, then_on_fail_async, try_fn

# Config
from .config import SimpleResultSettings, clear_settings_cache, get_settings

# Logging
from .observability import configure_logging, get_logger

__all__ = [
    "__version__",
    # Core
    "Error", "ErrorLike", "HasMessage", "HasMetadata",
    "Result", "TypedResult", "Errors", "Ok", "Fail",
    "SimpleResultError", "InvalidArgumentError", "ValueAccessError",
    # Combinators
    "then", "then_on_fail", "then_async", "then_on_fail_async", "try_fn", "merge",
    # Config
    "SimpleResultSettings", "get_settings", "clear_settings_cache",
    # Logging
    "configure_logging", "get_logger",
]
