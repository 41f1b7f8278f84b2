"""Structured, key-value logging for fallible.

Every log call produces a LogEntry (event name plus flat key-value fields)
that a renderer writes out:
- ConsoleRenderer: one readable line per entry, optional ANSI colors
- JsonRenderer: JSON Lines via orjson
- NoOpRenderer: discards everything

Loggers are immutable values. Fields come from three layers, later ones
winning: the ambient log_context() scope, fields bound on the logger, and
the keyword arguments of the call itself.

Quick Start:
    >>> from fallible.observability import configure_logging, get_logger
    >>> configure_logging(format="console", level="DEBUG")
    >>> log = get_logger("ingest").bind(batch=4)
    >>> log.debug("scan stopped", op="sequence", index=2)

Combinators only emit debug entries, which stay hidden at the default INFO
level (see FALLIBLE_LOG_LEVEL / FALLIBLE_DEBUG).
"""

from __future__ import annotations

import logging
import sys
import time
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Protocol, TextIO, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

JsonValue = str | int | float | bool | None | list[Any] | dict[str, Any]
Fields = dict[str, Any]

_scope: ContextVar[Fields] = ContextVar("fallible_log_scope", default={})
_renderer: ContextVar[LogRenderer | None] = ContextVar("fallible_log_renderer", default=None)
_threshold: ContextVar[int] = ContextVar("fallible_log_threshold", default=logging.INFO)


# ─────────────────────────────────────────────────────────────────────────────
# Entries & Loggers
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class LogEntry:
    """A single rendered event."""

    created: float
    level: int
    event: str
    fields: Fields

    @property
    def level_name(self) -> str:
        return logging.getLevelName(self.level).lower()

    @property
    def iso_time(self) -> str:
        return datetime.fromtimestamp(self.created, tz=UTC).isoformat()

    @property
    def clock_time(self) -> str:
        """HH:MM:SS.mmm, UTC."""
        return datetime.fromtimestamp(self.created, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


@dataclass(slots=True, frozen=True)
class BoundLogger:
    """Logger carrying a fixed set of fields.

    bind()/unbind() return new loggers. With level left as None the
    threshold is looked up on every call, so loggers created at import time
    follow a later configure_logging().

    Example:
        >>> log = BoundLogger({"component": "collection"})
        >>> log.bind(op="partition").info("done", successes=3)
    """

    fields: Fields = field(default_factory=dict)
    renderer: LogRenderer | None = None
    level: int | None = None

    def bind(self, **fields: JsonValue) -> BoundLogger:
        return BoundLogger({**self.fields, **fields}, self.renderer, self.level)

    def unbind(self, *names: str) -> BoundLogger:
        kept = {k: v for k, v in self.fields.items() if k not in names}
        return BoundLogger(kept, self.renderer, self.level)

    def is_enabled_for(self, level: int) -> bool:
        return level >= (_threshold.get() if self.level is None else self.level)

    def log(self, level: int, event: str, **fields: JsonValue) -> None:
        if not self.is_enabled_for(level):
            return
        entry = LogEntry(time.time(), level, event, {**_scope.get(), **self.fields, **fields})
        (self.renderer or _active_renderer()).render(entry)

    def debug(self, event: str, **fields: JsonValue) -> None:
        self.log(logging.DEBUG, event, **fields)

    def info(self, event: str, **fields: JsonValue) -> None:
        self.log(logging.INFO, event, **fields)

    def warning(self, event: str, **fields: JsonValue) -> None:
        self.log(logging.WARNING, event, **fields)

    def error(self, event: str, **fields: JsonValue) -> None:
        self.log(logging.ERROR, event, **fields)


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    def render(self, entry: LogEntry) -> None: ...


_ANSI = {"reset": "\033[0m", "dim": "\033[2m", "bold": "\033[1m", "key": "\033[36m", "str": "\033[33m",
         "num": "\033[34m"}
_LEVEL_ANSI = {"debug": "\033[2m", "info": "\033[32m", "warning": "\033[33m", "error": "\033[31m"}


@dataclass(slots=True)
class ConsoleRenderer:
    """`12:00:01.250 [debug] event key=value ...`, keys sorted."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None
    show_time: bool = True

    def __post_init__(self) -> None:
        if self.colors is None:
            isatty = getattr(self.output, "isatty", None)
            self.colors = bool(isatty and isatty())

    def _paint(self, style: str, text: str) -> str:
        return f"{style}{text}{_ANSI['reset']}" if self.colors else text

    def _value(self, value: object) -> str:
        if isinstance(value, str):
            return self._paint(_ANSI["str"], f'"{value}"')
        if isinstance(value, bool):
            return self._paint(_ANSI["num"], "true" if value else "false")
        if isinstance(value, int | float):
            return self._paint(_ANSI["num"], str(value))
        return repr(value)

    def render(self, entry: LogEntry) -> None:
        name = entry.level_name
        parts = [self._paint(_ANSI["dim"], entry.clock_time)] if self.show_time else []
        parts.append(self._paint(_LEVEL_ANSI.get(name, _ANSI["dim"]), f"[{name}]"))
        parts.append(self._paint(_ANSI["bold"], entry.event))
        parts.extend(f"{self._paint(_ANSI['key'], k)}={self._value(v)}" for k, v in sorted(entry.fields.items()))
        self.output.write(" ".join(parts) + "\n")


@dataclass(slots=True)
class JsonRenderer:
    """One JSON object per line: timestamp, level, event, then the fields."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        import orjson

        record = {"timestamp": entry.iso_time, "level": entry.level_name, "event": entry.event, **entry.fields}
        self.output.write(orjson.dumps(record, default=repr, option=orjson.OPT_NON_STR_KEYS).decode() + "\n")


class NoOpRenderer:
    """Drops every entry."""

    __slots__ = ()

    def render(self, entry: LogEntry) -> None:
        return None


# ─────────────────────────────────────────────────────────────────────────────
# Configuration
# ─────────────────────────────────────────────────────────────────────────────


def configure_logging(
    format: str | None = None,  # noqa: A002
    level: str | None = None,
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
) -> LogRenderer:
    """Install the process-wide renderer and threshold.

    Args:
        format: "console", "json" or "none"; defaults to FALLIBLE_LOG_FORMAT
        level: level name; defaults to the effective level from settings
        output: stream for console/json output
        colors: force ANSI colors on or off for the console renderer

    Raises:
        ValueError: unknown format
    """
    if format is None or level is None:
        from fallible.foundation.config import get_settings

        settings = get_settings()
        format = format or settings.logging.format
        level = level or settings.effective_log_level

    renderer: LogRenderer
    if format == "console":
        renderer = ConsoleRenderer(output or sys.stderr, colors)
    elif format == "json":
        renderer = JsonRenderer(output or sys.stdout)
    elif format == "none":
        renderer = NoOpRenderer()
    else:
        raise ValueError(f"Unknown format: {format!r}. Use 'console', 'json' or 'none'")

    threshold = logging.getLevelName(level.upper())
    _threshold.set(threshold if isinstance(threshold, int) else logging.INFO)
    _renderer.set(renderer)
    return renderer


def reset_logging() -> None:
    """Forget the configured renderer and go back to INFO."""
    _renderer.set(None)
    _threshold.set(logging.INFO)


def get_logger(name: str | None = None, **fields: JsonValue) -> BoundLogger:
    """Logger with the given fields bound, plus `logger=name` when named."""
    if name:
        fields["logger"] = name
    return BoundLogger(fields)


def _active_renderer() -> LogRenderer:
    renderer = _renderer.get()
    if renderer is None:
        renderer = ConsoleRenderer()
        _renderer.set(renderer)
    return renderer


class log_context:
    """Add fields to every entry logged inside the with-block."""

    __slots__ = ("_fields", "_token")

    def __init__(self, **fields: JsonValue) -> None:
        self._fields = fields
        self._token: Token[Fields] | None = None

    def __enter__(self) -> log_context:
        self._token = _scope.set({**_scope.get(), **self._fields})
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._token is not None:
            _scope.reset(self._token)
            self._token = None
