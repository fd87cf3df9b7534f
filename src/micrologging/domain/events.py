"""Domain event describing a single log statement execution.

Purpose
-------
Bundle everything a logger needs to decide on and render one log call into an
immutable value that call-site helpers can build once and hand to
:func:`micrologging.application.use_cases.dispatch.emit`.

System Role
-----------
Ephemeral: created at the call site, consumed immediately by the active logger
and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .levels import LogLevel


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable description of one log call.

    Attributes
    ----------
    level:
        Severity of the event.
    message:
        Raw message value; coerced with :func:`as_message` at render time.
    module:
        Dotted name of the module that emitted the event.
    filepath, line:
        Source location of the log statement.
    event_id:
        Stable identity of the log statement, used for repeat throttling.
    progress:
        Fraction in ``[0, 1]`` turning the event into a progress-bar update.
    banner:
        Prefix the rendered lines with a horizontal rule.
    max_repeats:
        Cap on how many times ``event_id`` may be rendered.
    context:
        Auxiliary key/value pairs rendered below the message.
    """

    level: LogLevel
    message: Any
    module: str
    filepath: str
    line: int
    event_id: str
    progress: float | None = None
    banner: bool = False
    max_repeats: int | None = None
    context: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.event_id:
            raise ValueError("event_id must not be empty")
        object.__setattr__(self, "context", MappingProxyType(dict(self.context)))


__all__ = ["LogEvent"]
