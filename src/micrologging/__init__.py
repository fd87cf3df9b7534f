"""Pluggable leveled logging front-end.

Call sites use :func:`debug`, :func:`info`, :func:`warn`, :func:`error` or
:func:`logmsg`; whichever logger :func:`current_logger` returns decides whether
to render. :class:`TerminalLogger` is the reference implementation and the
process-wide default.
"""

from __future__ import annotations

from .adapters import MicroLoggingHandler, NullLogger, TerminalInfo, TerminalLogger, detect_terminal
from .application.ports import LoggerPort
from .domain import (
    ABOVE_MAX_LEVEL,
    BELOW_MIN_LEVEL,
    DEBUG,
    ERROR,
    INFO,
    WARN,
    InvalidLevel,
    LogEvent,
    LogLevel,
    MicroLoggingError,
    RenderFailure,
    parse_level,
)
from .runtime import (
    configure_logging,
    current_logger,
    debug,
    disable_logging,
    error,
    global_logger,
    info,
    logmsg,
    warn,
    with_logger,
)

__all__ = [
    "ABOVE_MAX_LEVEL",
    "BELOW_MIN_LEVEL",
    "DEBUG",
    "ERROR",
    "INFO",
    "InvalidLevel",
    "LogEvent",
    "LogLevel",
    "LoggerPort",
    "MicroLoggingError",
    "MicroLoggingHandler",
    "NullLogger",
    "RenderFailure",
    "TerminalInfo",
    "TerminalLogger",
    "WARN",
    "configure_logging",
    "current_logger",
    "debug",
    "detect_terminal",
    "disable_logging",
    "error",
    "global_logger",
    "info",
    "logmsg",
    "parse_level",
    "warn",
    "with_logger",
]
