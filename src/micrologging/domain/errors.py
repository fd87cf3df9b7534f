"""Error taxonomy shared by every layer of the logging front-end.

Purpose
-------
Give configuration and rendering failures distinct, catchable types so host
applications can tell a bad level string apart from a broken output stream.

Contents
--------
* :class:`MicroLoggingError` - common base class.
* :class:`InvalidLevel` - malformed level input to :func:`parse_level`.
* :class:`RenderFailure` - the output stream failed while a message was written.

System Role
-----------
Domain-level exceptions raised by :mod:`micrologging.domain.levels` and the
logger adapters; the CLI maps them to exit codes through ``lib_cli_exit_tools``.
"""

from __future__ import annotations


class MicroLoggingError(Exception):
    """Base class for all errors raised by :mod:`micrologging`."""


class InvalidLevel(MicroLoggingError, ValueError):
    """Raised when a value cannot be interpreted as a :class:`LogLevel`."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown log level: {value!r}")
        self.value = value


class RenderFailure(MicroLoggingError, OSError):
    """Raised when the logger's output stream rejects a write or flush."""


__all__ = ["InvalidLevel", "MicroLoggingError", "RenderFailure"]
