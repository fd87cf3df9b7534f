"""Use case carrying one log call from the call site into a logger.

Purpose
-------
Implement the call-site half of the logger contract: skip the event cheaply
when the logger's :meth:`~LoggerPort.min_enabled_level` rules it out, ask
:meth:`~LoggerPort.should_log`, and only then materialise the message and call
:meth:`~LoggerPort.handle_message`.

Contents
--------
* :func:`derive_event_id` - stable identity for a source location.
* :func:`emit` - run the pipeline for a prebuilt :class:`LogEvent`.
* :func:`dispatch` - build the event from keyword arguments and emit it.

System Role
-----------
Shared by the public helpers in :mod:`micrologging.runtime` and the stdlib
bridge in :mod:`micrologging.adapters.stdlib_bridge`. Message construction
cost is only paid for accepted events; callers may pass a zero-argument
callable as the message to defer formatting until acceptance.
"""

from __future__ import annotations

import zlib
from typing import Any, Callable, Mapping

from micrologging.application.ports.logger import LoggerPort
from micrologging.domain.events import LogEvent
from micrologging.domain.levels import LogLevel


def derive_event_id(module: str, filepath: str, line: int) -> str:
    """Return a stable identifier for the log statement at ``filepath:line``.

    Examples
    --------
    >>> derive_event_id("pkg.jobs", "/src/pkg/jobs.py", 12) == derive_event_id("pkg.jobs", "/src/pkg/jobs.py", 12)
    True
    >>> derive_event_id("pkg.jobs", "/src/pkg/jobs.py", 12).startswith("jobs_")
    True
    """

    prefix = module.rsplit(".", 1)[-1] or "main"
    digest = zlib.crc32(f"{filepath}:{line}".encode("utf-8")) & 0xFFFFFFFF
    return f"{prefix}_{digest:08x}"


def _materialise(message: Any) -> Any:
    if callable(message) and not isinstance(message, type):
        return message()
    return message


def emit(logger: LoggerPort, event: LogEvent, message_factory: Callable[[], Any] | None = None) -> bool:
    """Offer ``event`` to ``logger`` and render it when accepted.

    ``message_factory``, when given, replaces ``event.message`` and is called
    only after acceptance. Returns ``True`` when
    :meth:`~LoggerPort.handle_message` ran.
    """

    if event.level < logger.min_enabled_level():
        return False
    accepted = logger.should_log(
        event.level,
        event.module,
        event.filepath,
        event.line,
        event.event_id,
        event.max_repeats,
        event.progress,
    )
    if not accepted:
        return False
    logger.handle_message(
        event.level,
        message_factory() if message_factory is not None else _materialise(event.message),
        event.module,
        event.filepath,
        event.line,
        event.event_id,
        progress=event.progress,
        banner=event.banner,
        context=event.context,
    )
    return True


def dispatch(
    logger: LoggerPort,
    level: LogLevel,
    message: Any,
    *,
    module: str,
    filepath: str,
    line: int,
    event_id: str | None = None,
    max_repeats: int | None = None,
    progress: float | None = None,
    banner: bool = False,
    context: Mapping[str, Any] | None = None,
) -> bool:
    """Build a :class:`LogEvent` and run it through :func:`emit`.

    Callers on the hot path check :meth:`~LoggerPort.min_enabled_level` before
    calling, so suppressed events are not built at all.
    """

    event = LogEvent(
        level=level,
        message=message,
        module=module,
        filepath=filepath,
        line=line,
        event_id=event_id or derive_event_id(module, filepath, line),
        progress=progress,
        banner=banner,
        max_repeats=max_repeats,
        context=context or {},
    )
    return emit(logger, event)


__all__ = ["derive_event_id", "dispatch", "emit"]
