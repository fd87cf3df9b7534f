"""Domain entities and value objects used by the logging front-end."""

from __future__ import annotations

from .errors import InvalidLevel, MicroLoggingError, RenderFailure
from .events import LogEvent
from .levels import (
    ABOVE_MAX_LEVEL,
    BELOW_MIN_LEVEL,
    DEBUG,
    ERROR,
    INFO,
    WARN,
    LogLevel,
    parse_level,
)
from .messages import (
    DocumentMessage,
    ErrorMessage,
    Message,
    MultiPartMessage,
    TextMessage,
    as_message,
)

__all__ = [
    "ABOVE_MAX_LEVEL",
    "BELOW_MIN_LEVEL",
    "DEBUG",
    "DocumentMessage",
    "ERROR",
    "ErrorMessage",
    "INFO",
    "InvalidLevel",
    "LogEvent",
    "LogLevel",
    "Message",
    "MicroLoggingError",
    "MultiPartMessage",
    "RenderFailure",
    "TextMessage",
    "WARN",
    "as_message",
    "parse_level",
]
