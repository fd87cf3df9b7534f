"""Logger port describing the capability contract every logger satisfies.

Purpose
-------
Call sites talk to whichever logger is active purely through this protocol:
a cheap static gate (:meth:`LoggerPort.min_enabled_level`), the accept/reject
decision (:meth:`LoggerPort.should_log`), and the rendering call
(:meth:`LoggerPort.handle_message`).

Contents
--------
* :class:`LoggerPort` - runtime-checkable protocol.
* :data:`ModuleRef` - accepted module identities (module object or dotted name).
* :func:`module_name` - normalise a :data:`ModuleRef` to its dotted name.

System Role
-----------
Keeps :mod:`micrologging.application.use_cases.dispatch` and the runtime
registry independent of concrete adapters such as
:class:`~micrologging.adapters.TerminalLogger`.
"""

from __future__ import annotations

from types import ModuleType
from typing import Any, Mapping, Protocol, Union, runtime_checkable

from micrologging.domain.levels import LogLevel

ModuleRef = Union[ModuleType, str]


def module_name(module: ModuleRef | None) -> str | None:
    """Return the dotted name for ``module``.

    Examples
    --------
    >>> import json
    >>> module_name(json)
    'json'
    >>> module_name("pkg.sub")
    'pkg.sub'
    """

    if module is None:
        return None
    if isinstance(module, ModuleType):
        return module.__name__
    return str(module)


@runtime_checkable
class LoggerPort(Protocol):
    """Decide on and render log events."""

    def should_log(
        self,
        level: LogLevel,
        module: str,
        filepath: str,
        line: int,
        event_id: str,
        max_repeats: int | None,
        progress: float | None,
    ) -> bool:
        """Return ``True`` when the event should be rendered; never performs I/O."""

    def min_enabled_level(self) -> LogLevel:
        """Return the lowest level for which :meth:`should_log` can accept."""

    def handle_message(
        self,
        level: LogLevel,
        message: Any,
        module: str,
        filepath: str,
        line: int,
        event_id: str,
        *,
        progress: float | None = None,
        banner: bool = False,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        """Render an accepted event to the logger's destination."""

    def configure(self, module: ModuleRef | None = None, *, min_level: LogLevel | str = LogLevel.INFO) -> "LoggerPort":
        """Set the default floor (``module=None``) or one module override."""


__all__ = ["LoggerPort", "ModuleRef", "module_name"]
