"""Runtime façade: the active-logger registry and the call-site helpers.

Purpose
-------
Give host code one small API: install or scope a logger, tune thresholds, and
emit leveled events without ever touching the adapters directly.

Contents
--------
* ``global_logger`` / ``current_logger`` / ``with_logger`` - registry access.
* ``disable_logging`` / ``configure_logging`` - threshold controls.
* ``logmsg`` and the ``debug`` / ``info`` / ``warn`` / ``error`` shorthands -
  call-site helpers capturing module, file, line and event identity.
* ``submit`` - the same pipeline for callers that already know the location
  (used by :class:`~micrologging.adapters.MicroLoggingHandler`).

System Role
-----------
Outer shell of the package. The process-wide logger is created lazily as a
:class:`~micrologging.adapters.TerminalLogger` on ``sys.stderr``; swaps are
serialised by a lock while ``with_logger`` overrides are context-local, so
tests can scope a logger without global side effects.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Any, Iterator

from micrologging.application.ports.logger import LoggerPort, ModuleRef, module_name
from micrologging.application.use_cases.dispatch import dispatch
from micrologging.domain.levels import LogLevel, parse_level

from . import _state


def global_logger(logger: LoggerPort | None = None) -> LoggerPort:
    """Return the process-wide logger, or install ``logger`` and return the previous one."""

    if logger is None:
        return _state.get_global()
    return _state.swap_global(logger)


def current_logger() -> LoggerPort:
    """Return the logger call sites on this thread/task currently talk to."""

    return _state.current()


@contextmanager
def with_logger(logger: LoggerPort) -> Iterator[LoggerPort]:
    """Route log calls in the ``with`` block to ``logger``.

    The previous logger is restored on exit, including when the block raises.
    """

    with _state.scoped(logger) as active:
        yield active


def disable_logging(level: LogLevel | str) -> None:
    """Drop every event at or below ``level`` before any logger sees it.

    ``disable_logging(LogLevel.BELOW_MIN_LEVEL)`` re-enables everything.
    """

    _state.set_disabled(parse_level(level))


def configure_logging(
    module: ModuleRef | None = None,
    *,
    min_level: LogLevel | str = LogLevel.INFO,
    logger: LoggerPort | None = None,
) -> LoggerPort:
    """Configure ``logger`` (default: the current one); see :meth:`LoggerPort.configure`."""

    target = logger if logger is not None else current_logger()
    return target.configure(module, min_level=min_level)


def _enabled(level: LogLevel, logger: LoggerPort) -> bool:
    return level > _state.disabled_level() and level >= logger.min_enabled_level()


def submit(
    level: LogLevel,
    message: Any,
    *,
    module: str,
    filepath: str,
    line: int,
    event_id: str | None = None,
    logger: LoggerPort | None = None,
    max_repeats: int | None = None,
    progress: float | None = None,
    banner: bool = False,
    context: dict[str, Any] | None = None,
) -> bool:
    """Run one event with an explicit source location through the pipeline."""

    target = logger if logger is not None else current_logger()
    if not _enabled(level, target):
        return False
    return dispatch(
        target,
        level,
        message,
        module=module,
        filepath=filepath,
        line=line,
        event_id=event_id,
        max_repeats=max_repeats,
        progress=progress,
        banner=banner,
        context=context,
    )


def _log(
    level: LogLevel,
    message: Any,
    depth: int,
    *,
    max_repeats: int | None,
    progress: float | None,
    banner: bool,
    event_id: str | None,
    module: ModuleRef | None,
    filepath: str | None,
    line: int | None,
    logger: LoggerPort | None,
    context: dict[str, Any],
) -> bool:
    target = logger if logger is not None else current_logger()
    if not _enabled(level, target):
        return False
    frame = sys._getframe(depth)
    if module is None:
        module = frame.f_globals.get("__name__", "__main__")
    return dispatch(
        target,
        level,
        message,
        module=module_name(module),
        filepath=filepath if filepath is not None else frame.f_code.co_filename,
        line=line if line is not None else frame.f_lineno,
        event_id=event_id,
        max_repeats=max_repeats,
        progress=progress,
        banner=banner,
        context=context,
    )


def logmsg(
    level: LogLevel | str,
    message: Any,
    *,
    max_repeats: int | None = None,
    progress: float | None = None,
    banner: bool = False,
    event_id: str | None = None,
    module: ModuleRef | None = None,
    filepath: str | None = None,
    line: int | None = None,
    logger: LoggerPort | None = None,
    stacklevel: int = 1,
    **context: Any,
) -> bool:
    """Emit ``message`` at ``level`` from the caller's source location.

    ``message`` may be a zero-argument callable; it is only called when the
    event is accepted. Keyword arguments not listed here become context pairs
    rendered below the message. Returns ``True`` when the event was rendered.

    Examples
    --------
    >>> import io
    >>> from micrologging.adapters import TerminalLogger
    >>> out = io.StringIO()
    >>> with with_logger(TerminalLogger(out, interactive=False)):
    ...     logmsg("warn", "disk low", module="jobs", filepath="jobs.py", line=7)
    True
    >>> out.getvalue()
    'Warn [jobs:jobs.py:7]: disk low\\n'
    """

    return _log(
        parse_level(level),
        message,
        1 + stacklevel,
        max_repeats=max_repeats,
        progress=progress,
        banner=banner,
        event_id=event_id,
        module=module,
        filepath=filepath,
        line=line,
        logger=logger,
        context=context,
    )


def _shorthand(level: LogLevel, name: str):
    def emit(
        message: Any,
        *,
        max_repeats: int | None = None,
        progress: float | None = None,
        banner: bool = False,
        event_id: str | None = None,
        module: ModuleRef | None = None,
        filepath: str | None = None,
        line: int | None = None,
        logger: LoggerPort | None = None,
        stacklevel: int = 1,
        **context: Any,
    ) -> bool:
        return _log(
            level,
            message,
            1 + stacklevel,
            max_repeats=max_repeats,
            progress=progress,
            banner=banner,
            event_id=event_id,
            module=module,
            filepath=filepath,
            line=line,
            logger=logger,
            context=context,
        )

    emit.__name__ = emit.__qualname__ = name
    emit.__doc__ = f"Emit ``message`` at ``{level}``; see :func:`logmsg`."
    return emit


debug = _shorthand(LogLevel.DEBUG, "debug")
info = _shorthand(LogLevel.INFO, "info")
warn = _shorthand(LogLevel.WARN, "warn")
error = _shorthand(LogLevel.ERROR, "error")


__all__ = [
    "configure_logging",
    "current_logger",
    "debug",
    "disable_logging",
    "error",
    "global_logger",
    "info",
    "logmsg",
    "submit",
    "warn",
    "with_logger",
]
