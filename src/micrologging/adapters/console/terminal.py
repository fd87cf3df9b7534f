"""Terminal geometry and interactivity detection backed by Rich."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from rich.console import Console


@dataclass(slots=True, frozen=True)
class TerminalInfo:
    """Snapshot of the destination terminal taken when a logger is built."""

    width: int
    height: int
    interactive: bool


def detect_terminal(
    stream: TextIO,
    *,
    width: int | None = None,
    height: int | None = None,
    interactive: bool | None = None,
) -> TerminalInfo:
    """Return :class:`TerminalInfo` for ``stream``, honouring explicit overrides.

    Rich resolves the size from the ``COLUMNS``/``LINES`` environment variables
    or the attached terminal, falling back to 80x25 for files and pipes.
    """

    console = Console(file=stream)
    size = console.size
    return TerminalInfo(
        width=width if width is not None else size.width,
        height=height if height is not None else size.height,
        interactive=interactive if interactive is not None else console.is_terminal,
    )


__all__ = ["TerminalInfo", "detect_terminal"]
