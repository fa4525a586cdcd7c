"""Structured error payload carried by failed Results.

Uses a frozen Pydantic model so errors are validated on construction and
immutable afterwards. Metadata is exposed read-only.
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

JsonDict = dict[str, Any]

# Shared read-only empty mapping for errors without metadata
_EMPTY_META: Mapping[str, Any] = MappingProxyType({})


# ═══════════════════════════════════════════════════════════════════════════════
# Capabilities
# ═══════════════════════════════════════════════════════════════════════════════


@runtime_checkable
class HasMessage(Protocol):
    """Anything exposing a human-readable failure message."""

    @property
    def message(self) -> str: ...


@runtime_checkable
class HasMetadata(Protocol):
    """Anything exposing contextual key/value metadata."""

    @property
    def metadata(self) -> Mapping[str, Any]: ...


@runtime_checkable
class ErrorLike(HasMessage, HasMetadata, Protocol):
    """Full error capability set accepted by Result failures."""


# ═══════════════════════════════════════════════════════════════════════════════
# Error
# ═══════════════════════════════════════════════════════════════════════════════


class Error(BaseModel):
    """Immutable failure payload: a message plus arbitrary metadata.

    Accepts positional arguments for brevity:

        >>> Error("Deadlock")
        Error(message='Deadlock', metadata={})
        >>> Error("Timeout", {"attempt": 3}).metadata["attempt"]
        3

    Equality is by value. Metadata key order does not matter.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        revalidate_instances="never",
        json_schema_extra={"title": "Error", "examples": [{"message": "Deadlock", "metadata": {"table": "orders"}}]},
    )

    message: str
    metadata: Mapping[str, Any] = Field(default_factory=lambda: _EMPTY_META)

    def __init__(self, message: str | None = None, metadata: Mapping[str, Any] | None = None, /, **data: Any) -> None:
        if message is not None:
            data["message"] = message
        if metadata is not None:
            data["metadata"] = metadata
        super().__init__(**data)

    @field_validator("metadata", mode="after")
    @classmethod
    def _freeze_metadata(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        """Snapshot metadata into a read-only view."""
        return MappingProxyType(dict(v)) if v else _EMPTY_META

    @field_serializer("metadata")
    def _serialize_metadata(self, v: Mapping[str, Any]) -> JsonDict:
        return dict(v)

    # ─── Derivation ────────────────────────────────────────────────────

    def with_metadata(self, **metadata: Any) -> Error:
        """Return a copy with `metadata` merged over the existing entries."""
        return self.model_copy(update={"metadata": MappingProxyType({**self.metadata, **metadata})})

    @classmethod
    def from_exception(cls, exc: BaseException, context: str = "", *, include_trace: bool | None = None) -> Error:
        """Build an error describing `exc`.

        Records the exception type in metadata. The formatted traceback is
        added under `details` when `include_trace` is true; when left as None
        the `SIMPLERESULT_TRACE_INCLUDE_DETAILS` setting decides.
        """
        if include_trace is None:
            from ..config import get_settings
            include_trace = get_settings().trace.include_details
        meta: JsonDict = {"exception_type": type(exc).__name__}
        if include_trace:
            meta["details"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return cls(f"{context}: {exc}" if context else str(exc), meta)

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message and dict(self.metadata) == dict(other.metadata)

    def __hash__(self) -> int:
        # Metadata values may be unhashable
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, metadata={dict(self.metadata)!r})"

    def __str__(self) -> str:
        shown = [f"{k}={v}" for k, v in self.metadata.items() if k != "details"]
        return f"{self.message} ({', '.join(shown)})" if shown else self.message
