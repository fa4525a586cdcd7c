"""Result and TypedResult: discriminated success/failure containers.

A Result is either a success with no errors or a failure with at least one
error. TypedResult refines Result with a value on the success side. Both are
immutable; combinators build new instances or hand back existing ones.

Examples:
    >>> from simpleresult import Error, Fail, Ok
    >>> Ok().is_success
    True
    >>> Ok("hi").value
    'hi'
    >>> Fail(Error("Deadlock")).errors
    (Error(message='Deadlock', metadata={}),)
    >>> Fail(Error("Deadlock"), typed=True).value_or("fallback")
    'fallback'
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable, Generic, Literal, TypeVar, overload

from .error import ErrorLike
from .exceptions import InvalidArgumentError, ValueAccessError

T = TypeVar("T")
U = TypeVar("U")

Errors = tuple[ErrorLike, ...]

_NO_ERRORS: Errors = ()


class _Missing:
    """Sentinel distinguishing `Ok()` from `Ok(None)`."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Any = _Missing()


class Result:
    """Untyped outcome of a fallible step.

    Exactly one of success/failure holds. A success carries zero errors, a
    failure carries one or more, in the order they were given.

    Notes:
        - Uses __slots__; attributes are read-only properties
        - Use Ok() / Fail() instead of calling the constructor
    """

    __slots__ = ("_is_success", "_errors")

    def __init__(self, is_success: bool, errors: Errors = _NO_ERRORS) -> None:
        if is_success and errors:
            raise InvalidArgumentError("a successful result cannot carry errors")
        if not is_success and not errors:
            raise InvalidArgumentError("a failed result requires at least one error")
        self._is_success = is_success
        self._errors = errors

    # ─── Construction ────────────────────────────────────────────────

    @classmethod
    def ok(cls) -> Result:
        """Untyped success."""
        return Result(True)

    @classmethod
    def fail(cls, *errors: ErrorLike | Iterable[ErrorLike]) -> Result:
        """Untyped failure. Raises InvalidArgumentError when no errors are given."""
        return Result(False, _collect_errors(errors))

    # ─── Discriminant ────────────────────────────────────────────────

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_failed(self) -> bool:
        return not self._is_success

    @property
    def errors(self) -> Errors:
        """Errors in insertion order. Empty for successes."""
        return self._errors

    # ─── Chaining ────────────────────────────────────────────────────

    def then(self, fn: Callable[..., Any], *, pass_value: bool | None = None) -> Result:
        """Run `fn` on success. See `simpleresult.extensions.then.then`."""
        from ..extensions.then import then
        return then(self, fn, pass_value=pass_value)

    def then_on_fail(self, fn: Callable[..., Any], *, pass_errors: bool | None = None) -> Result:
        """Run recovery `fn` on failure. See `simpleresult.extensions.then.then_on_fail`."""
        from ..extensions.then import then_on_fail
        return then_on_fail(self, fn, pass_errors=pass_errors)

    async def then_async(self, fn: Callable[..., Any], *, pass_value: bool | None = None) -> Result:
        """Awaitable form of `then`."""
        from ..extensions.then_async import then_async
        return await then_async(self, fn, pass_value=pass_value)

    async def then_on_fail_async(self, fn: Callable[..., Any], *, pass_errors: bool | None = None) -> Result:
        """Awaitable form of `then_on_fail`."""
        from ..extensions.then_async import then_on_fail_async
        return await then_on_fail_async(self, fn, pass_errors=pass_errors)

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, ok: Callable[[], U], fail: Callable[[Errors], U]) -> U:
        """Exhaustive case analysis: `ok()` on success, `fail(errors)` on failure."""
        return ok() if self._is_success else fail(self._errors)

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_success

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Result):
            return NotImplemented
        return type(self) is type(other) and self._is_success == other._is_success and self._errors == other._errors

    def __hash__(self) -> int:
        return hash((type(self), self._is_success, self._errors))

    def __repr__(self) -> str:
        return "Ok()" if self._is_success else f"Fail({list(self._errors)!r})"


class TypedResult(Result, Generic[T]):
    """Result whose success side carries a value of type T.

    The value is stored and handed out by identity, never copied. Reading
    `value` on a failure raises ValueAccessError.
    """

    __slots__ = ("_value",)

    def __init__(self, is_success: bool, errors: Errors = _NO_ERRORS, value: T | None = None) -> None:
        super().__init__(is_success, errors)
        self._value = value

    @classmethod
    def ok(cls, value: T) -> TypedResult[T]:  # type: ignore[override]
        """Typed success holding `value`."""
        return TypedResult(True, _NO_ERRORS, value)

    @classmethod
    def fail(cls, *errors: ErrorLike | Iterable[ErrorLike]) -> TypedResult[Any]:
        """Typed failure. Raises InvalidArgumentError when no errors are given."""
        return TypedResult(False, _collect_errors(errors))

    @property
    def value(self) -> T:
        if not self._is_success:
            raise ValueAccessError(self._errors)
        return self._value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        """Value on success, `default` on failure."""
        return self._value if self._is_success else default  # type: ignore[return-value]

    def match(self, *, ok: Callable[[T], U], fail: Callable[[Errors], U]) -> U:  # type: ignore[override]
        """Exhaustive case analysis: `ok(value)` on success, `fail(errors)` on failure."""
        return ok(self._value) if self._is_success else fail(self._errors)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Result):
            return NotImplemented
        if type(self) is not type(other) or self._is_success != other._is_success:
            return False
        return self._value == other._value if self._is_success else self._errors == other._errors  # type: ignore[attr-defined]

    # Values may be unhashable; equal results still share a hash
    __hash__ = Result.__hash__

    def __repr__(self) -> str:
        return f"Ok({self._value!r})" if self._is_success else f"Fail({list(self._errors)!r}, typed=True)"


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


@overload
def Ok() -> Result: ...  # noqa: N802
@overload
def Ok(value: T) -> TypedResult[T]: ...  # noqa: N802


def Ok(value: Any = _MISSING) -> Result:  # noqa: N802
    """Construct a success. With a value the result is typed.

    Type signature: () -> Result | T -> TypedResult[T]
    """
    return Result(True) if value is _MISSING else TypedResult(True, _NO_ERRORS, value)


@overload
def Fail(*errors: ErrorLike | Iterable[ErrorLike], typed: Literal[False] = False) -> Result: ...  # noqa: N802
@overload
def Fail(*errors: ErrorLike | Iterable[ErrorLike], typed: Literal[True]) -> TypedResult[Any]: ...  # noqa: N802


def Fail(*errors: ErrorLike | Iterable[ErrorLike], typed: bool = False) -> Result:  # noqa: N802
    """Construct a failure from one or more errors.

    Accepts errors positionally, as iterables of errors, or a mix:
    `Fail(e)`, `Fail(e1, e2)`, `Fail([e1, e2])`, `Fail(failed.errors, typed=True)`.

    Raises:
        InvalidArgumentError: If no errors are given or an item is not error-like
    """
    collected = _collect_errors(errors)
    return TypedResult(False, collected) if typed else Result(False, collected)


def _collect_errors(items: Iterable[ErrorLike | Iterable[ErrorLike]]) -> Errors:
    """Flatten one level of nesting into an error tuple, validating each item."""
    out: list[ErrorLike] = []
    for item in items:
        # Error models are iterable, so the capability check comes first
        if isinstance(item, ErrorLike):
            out.append(item)
        elif isinstance(item, Iterable) and not isinstance(item, (str, bytes)):
            for nested in item:
                if not isinstance(nested, ErrorLike):
                    raise InvalidArgumentError(f"not an error: {nested!r}")
                out.append(nested)
        else:
            raise InvalidArgumentError(f"not an error: {item!r}")
    if not out:
        raise InvalidArgumentError("a failed result requires at least one error")
    return tuple(out)
