"""Structured logging for combinator tracing.

`then` / `then_on_fail` report each decision as an event with key/value
fields. Where those events go is chosen once via `configure_logging`:

- "console": one human-readable line per event on stderr
- "json": JSON Lines on stdout, for log aggregation
- "none": dropped

Quick Start:
    >>> from simpleresult.observability import configure_logging, get_logger
    >>> _ = configure_logging(format="none", level="DEBUG")
    >>> get_logger("checkout", step=1).debug("then.invoked", outcome=True)
"""

from __future__ import annotations

import logging
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Protocol, TextIO, runtime_checkable

import orjson

Fields = dict[str, Any]


@dataclass(slots=True, frozen=True)
class LogEntry:
    """One event with its level name and merged fields."""

    timestamp: float
    level: str
    event: str
    fields: Fields

    @property
    def when(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=UTC)


@dataclass(slots=True, frozen=True)
class BoundLogger:
    """Logger carrying fixed fields merged into every event it emits.

    `renderer` and `level` pin this logger; left as None they follow the
    process-wide `configure_logging` choice at emit time.
    """

    context: Fields = field(default_factory=dict)
    renderer: LogRenderer | None = None
    level: int | None = None

    def is_enabled_for(self, level: int) -> bool:
        return level >= (_level.get() if self.level is None else self.level)

    def debug(self, event: str, **fields: Any) -> None:
        if not self.is_enabled_for(logging.DEBUG):
            return
        entry = LogEntry(time.time(), "debug", event, {**self.context, **fields})
        (self.renderer or _current_renderer()).render(entry)


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    def render(self, entry: LogEntry) -> None: ...


_DIM, _BOLD, _RESET = "\033[2m", "\033[1m", "\033[0m"


@dataclass(slots=True)
class ConsoleRenderer:
    """`HH:MM:SS.mmm [level] event key=value ...`, fields sorted by key."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool = False
    show_timestamp: bool = True

    def render(self, entry: LogEntry) -> None:
        dim, bold, reset = (_DIM, _BOLD, _RESET) if self.colors else ("", "", "")
        head = f"{dim}{entry.when:%H:%M:%S}.{entry.when.microsecond // 1000:03d}{reset} " if self.show_timestamp else ""
        pairs = " ".join(f"{k}={_format_value(v)}" for k, v in sorted(entry.fields.items()))
        line = f"{head}[{entry.level}] {bold}{entry.event}{reset}"
        print(f"{line} {pairs}" if pairs else line, file=self.output)


def _format_value(v: Any) -> str:
    # Strings with spaces are quoted so pairs stay splittable
    return repr(v) if isinstance(v, str) and " " in v else str(v)


@dataclass(slots=True)
class JsonRenderer:
    """One JSON object per line: timestamp, level, event, then the fields."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        record = {"timestamp": entry.when.isoformat(), "level": entry.level, "event": entry.event, **entry.fields}
        self.output.write(orjson.dumps(record, default=str, option=orjson.OPT_APPEND_NEWLINE).decode())


class NoOpRenderer:
    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Process-wide Configuration
# ─────────────────────────────────────────────────────────────────────────────


_renderer: ContextVar[LogRenderer | None] = ContextVar("simpleresult_log_renderer", default=None)
_level: ContextVar[int] = ContextVar("simpleresult_log_level", default=logging.INFO)


def configure_logging(
    format: str | None = None,  # noqa: A002
    level: str | None = None,
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
) -> LogRenderer:
    """Select renderer and threshold for loggers that do not pin their own.

    Arguments left as None come from `SIMPLERESULT_LOG_*` settings. Console
    colors default to on only when `output` is a terminal.

    Raises:
        ValueError: If `format` is not console, json or none
    """
    from ..config import get_settings
    cfg = get_settings().logging
    fmt = (format or cfg.format).lower()
    match fmt:
        case "console":
            out = output or sys.stderr
            if colors is None:
                colors = cfg.colors if cfg.colors is not None else out.isatty()
            renderer: LogRenderer = ConsoleRenderer(out, colors)
        case "json":
            renderer = JsonRenderer(output or sys.stdout)
        case "none":
            renderer = NoOpRenderer()
        case _:
            raise ValueError(f"Unknown format: {fmt}. Use 'console', 'json', or 'none'")
    _level.set(logging.getLevelNamesMapping().get((level or cfg.level).upper(), logging.INFO))
    _renderer.set(renderer)
    return renderer


def get_logger(name: str | None = None, **context: Any) -> BoundLogger:
    """Logger whose events carry `context`, plus `logger=name` when named."""
    return BoundLogger({**context, "logger": name} if name else context)


def _current_renderer() -> LogRenderer:
    if (renderer := _renderer.get()) is None:
        renderer = configure_logging()
    return renderer
