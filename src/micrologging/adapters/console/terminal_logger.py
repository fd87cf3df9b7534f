"""Terminal-aware reference logger implementing :class:`LoggerPort`.

Purpose
-------
Render log events either as decorated, right-aligned lines plus in-place
progress bars (interactive terminals) or as one deterministic line per event
(files, pipes, CI logs).

Contents
--------
* :class:`TerminalLogger` - filtering state (default floor, module overrides,
  repeat counters) and the line/progress rendering state machine.

System Role
-----------
Default process-wide logger installed by :mod:`micrologging.runtime`. Message
materialisation lives in :mod:`._messages`; column arithmetic in
:mod:`micrologging.adapters._formatting`.

Alignment Notes
---------------
The logger performs no locking. ``message_counts``, ``module_limits`` and
``prev_progress_key`` are shared mutable state: hosts logging from several
threads must serialise calls into one instance themselves (a mutex around the
entry points, or a single consumer thread).
"""

from __future__ import annotations

import sys
from typing import Any, Mapping, TextIO

from micrologging.adapters._formatting import layout_lines, plain_line, progress_bar
from micrologging.application.ports.logger import LoggerPort, ModuleRef, module_name
from micrologging.domain.errors import RenderFailure
from micrologging.domain.levels import LogLevel, parse_level

from ._messages import render_message
from .terminal import TerminalInfo, detect_terminal


class TerminalLogger(LoggerPort):
    """Log to a text stream with per-module floors and repeat throttling.

    Parameters
    ----------
    stream:
        Destination; defaults to :data:`sys.stderr`. The logger never closes it.
    min_level:
        Default floor used when no module override applies.
    interactive:
        Force interactive (``True``) or plain (``False``) rendering; detected
        from ``stream`` when ``None``.
    width, height:
        Terminal geometry overrides; detected once at construction otherwise.

    Examples
    --------
    >>> import io
    >>> out = io.StringIO()
    >>> log = TerminalLogger(out, interactive=False)
    >>> log.should_log(LogLevel.INFO, "app", "app.py", 3, "app_1", None, None)
    True
    >>> log.handle_message(LogLevel.INFO, "ready", "app", "/src/app.py", 3, "app_1")
    >>> out.getvalue()
    'Info [app:app.py:3]: ready\\n'
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        min_level: LogLevel | str = LogLevel.INFO,
        interactive: bool | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        self.stream: TextIO = stream if stream is not None else sys.stderr
        self.default_min_level = parse_level(min_level)
        self.terminal: TerminalInfo = detect_terminal(self.stream, width=width, height=height, interactive=interactive)
        self.prev_progress_key: str | None = None
        # Counters only ever grow; a capped event keeps counting after the cap.
        self.message_counts: dict[str, int] = {}
        self.module_limits: dict[str, LogLevel] = {}

    @property
    def interactive(self) -> bool:
        return self.terminal.interactive

    def configure(self, module: ModuleRef | None = None, *, min_level: LogLevel | str = LogLevel.INFO) -> "TerminalLogger":
        """Reset the default floor globally, or set one module's override.

        A global reset (``module=None``) discards every module override.
        """

        level = parse_level(min_level)
        name = module_name(module)
        if name is None:
            self.module_limits.clear()
            self.default_min_level = level
        else:
            self.module_limits[name] = level
        return self

    def should_log(
        self,
        level: LogLevel,
        module: ModuleRef,
        filepath: str,
        line: int,
        event_id: str,
        max_repeats: int | None,
        progress: float | None,
    ) -> bool:
        if level < self.module_limits.get(module_name(module), self.default_min_level):
            return False
        if max_repeats is not None:
            count = self.message_counts.get(event_id, 0) + 1
            self.message_counts[event_id] = count
            if count > max_repeats:
                return False
        return True

    def min_enabled_level(self) -> LogLevel:
        return min([self.default_min_level, *self.module_limits.values()])

    def handle_message(
        self,
        level: LogLevel,
        message: Any,
        module: ModuleRef,
        filepath: str,
        line: int,
        event_id: str,
        *,
        progress: float | None = None,
        banner: bool = False,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        """Render ``message`` and write it to the stream in a single call.

        Raises
        ------
        RenderFailure
            When the stream rejects the write or flush.
        """

        text = render_message(message, interactive=self.interactive, width=self.terminal.width)
        if not self.interactive:
            self._write(plain_line(level, module_name(module), filepath, line, text))
            return
        output, progress_key = self._render_interactive(
            level, text, event_id, progress=progress, banner=banner, context=context
        )
        self._write(output)
        self.prev_progress_key = progress_key

    def _render_interactive(
        self,
        level: LogLevel,
        text: str,
        event_id: str,
        *,
        progress: float | None,
        banner: bool,
        context: Mapping[str, Any] | None,
    ) -> tuple[str, str | None]:
        """Return the frame to write and the progress key that becomes active once it is written."""

        width = self.terminal.width
        text = text.rstrip("\n")
        if progress is None:
            prefix = "\n" if self.prev_progress_key is not None else ""
            return prefix + layout_lines(text, level=level, event_id=event_id, width=width, context=context, banner=banner), None
        prefix = "\n" if self.prev_progress_key not in (None, text) else ""
        return prefix + progress_bar(text, progress, level=level, event_id=event_id, width=width), text

    def _write(self, output: str) -> None:
        try:
            self.stream.write(output)
            self.stream.flush()
        except (OSError, ValueError) as exc:
            raise RenderFailure(f"cannot write log output: {exc}") from exc


__all__ = ["TerminalLogger"]
