"""Process-wide logger registry and access helpers."""

from __future__ import annotations

import contextvars
import sys
from contextlib import contextmanager
from threading import RLock
from typing import Iterator

from micrologging.application.ports.logger import LoggerPort
from micrologging.domain.levels import LogLevel

_GLOBAL: LoggerPort | None = None
_GLOBAL_LOCK = RLock()
_SCOPED: contextvars.ContextVar[LoggerPort | None] = contextvars.ContextVar("micrologging_scoped_logger", default=None)
_DISABLED_LEVEL: LogLevel = LogLevel.BELOW_MIN_LEVEL


def _default_logger() -> LoggerPort:
    from micrologging.adapters.console.terminal_logger import TerminalLogger

    return TerminalLogger(sys.stderr)


def get_global() -> LoggerPort:
    """Return the process-wide logger, creating the default on first use."""

    global _GLOBAL
    with _GLOBAL_LOCK:
        if _GLOBAL is None:
            _GLOBAL = _default_logger()
        return _GLOBAL


def swap_global(logger: LoggerPort) -> LoggerPort:
    """Install ``logger`` process-wide and return the one it replaces."""

    global _GLOBAL
    with _GLOBAL_LOCK:
        previous = _GLOBAL if _GLOBAL is not None else _default_logger()
        _GLOBAL = logger
        return previous


def reset_global() -> None:
    """Forget the process-wide logger so the next access rebuilds the default."""

    global _GLOBAL
    with _GLOBAL_LOCK:
        _GLOBAL = None


def current() -> LoggerPort:
    """Return the innermost scoped logger, else the process-wide one."""

    scoped = _SCOPED.get()
    return scoped if scoped is not None else get_global()


@contextmanager
def scoped(logger: LoggerPort) -> Iterator[LoggerPort]:
    """Make ``logger`` current for the duration of the ``with`` block."""

    token = _SCOPED.set(logger)
    try:
        yield logger
    finally:
        _SCOPED.reset(token)


def set_disabled(level: LogLevel) -> None:
    global _DISABLED_LEVEL
    with _GLOBAL_LOCK:
        _DISABLED_LEVEL = level


def disabled_level() -> LogLevel:
    return _DISABLED_LEVEL


__all__ = [
    "current",
    "disabled_level",
    "get_global",
    "reset_global",
    "scoped",
    "set_disabled",
    "swap_global",
]
