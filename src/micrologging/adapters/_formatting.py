"""Terminal layout helpers shared by the console loggers.

Why
---
Right-aligned metadata and progress bars only line up when padding is computed
from what the terminal actually shows. Colour escapes occupy bytes but no
columns, so every width calculation here goes through :func:`visible_length`.

Contents
--------
* :func:`visible_length` - column count ignoring ANSI ``ESC ... m`` sequences.
* :func:`level_style` / :func:`colorize` - per-level Rich styles rendered as
  standard ANSI SGR sequences.
* :func:`layout_lines` - decorated log lines with right-aligned metadata.
* :func:`progress_bar` - one in-place progress bar frame.
* :func:`plain_line` - the deterministic non-interactive line.
"""

from __future__ import annotations

import math
import os
import re
from typing import Any, Iterable, Mapping

from rich.color import ColorSystem
from rich.style import Style

from micrologging.domain.levels import LogLevel

_ESC = "\x1b"
_SGR = re.compile(r"\x1b\[[0-9;]*m")
_TRAILING_PAD = re.compile(r"(?: |\x1b\[[0-9;]*m)+$", re.MULTILINE)

CONTINUATION_TAG = "..."


def visible_length(text: str) -> int:
    """Return how many terminal columns ``text`` occupies.

    Every character counts as one column except escape sequences running from
    ``ESC`` up to and including the next ``m``.

    Examples
    --------
    >>> visible_length("plain")
    5
    >>> visible_length("\\x1b[1;31mred\\x1b[0m")
    3
    """

    count = 0
    in_escape = False
    for char in text:
        if in_escape:
            if char == "m":
                in_escape = False
        elif char == _ESC:
            in_escape = True
        else:
            count += 1
    return count


def level_style(level: LogLevel) -> Style:
    """Return the Rich style used for ``level`` metadata."""

    if level < LogLevel.INFO:
        return Style(color="cyan")
    if level < LogLevel.WARN:
        return Style(color="blue")
    if level < LogLevel.ERROR:
        return Style(color="yellow", bold=True)
    return Style(color="red", bold=True)


def colorize(text: str, style: Style) -> str:
    """Wrap ``text`` in the ANSI sequences for ``style``."""

    return style.render(text, color_system=ColorSystem.STANDARD)


def metadata_tag(event_id: str, level: LogLevel) -> str:
    return f"{event_id} {level.label}"


def _padding(text: str, tag: str, width: int) -> str:
    return " " * max(1, width - (visible_length(text) + len(tag)))


def layout_lines(
    message: str,
    *,
    level: LogLevel,
    event_id: str,
    width: int,
    context: Mapping[str, Any] | None = None,
    banner: bool = False,
) -> str:
    """Return the interactive rendering of an ordinary (non-progress) event.

    The first line carries ``"<event_id> <label>"`` flush right; later lines
    carry ``"..."``.

    Examples
    --------
    >>> out = layout_lines("hi", level=LogLevel.INFO, event_id="e1", width=20)
    >>> out.startswith("hi ") and out.endswith("e1 -- INFO\\x1b[0m\\n")
    True
    """

    tag = metadata_tag(event_id, level)
    style = level_style(level)
    lines: list[str] = message.split("\n")
    for key, value in (context or {}).items():
        lines.append(f"  {key} = {value}")
    if banner:
        lines.insert(0, "-" * max(0, width - len(tag) - 1))
    rendered: list[str] = []
    for index, text in enumerate(lines):
        if index == 1:
            tag = CONTINUATION_TAG
        rendered.append(f"{text}{_padding(text, tag, width)}{colorize(tag, style)}\n")
    return "".join(rendered)


def progress_bar(message: str, progress: float, *, level: LogLevel, event_id: str, width: int) -> str:
    """Return one frame of the in-place progress bar for ``message``.

    ``progress`` is clamped into ``[0, 1]`` and NaN counts as ``0``; the frame starts with a carriage
    return and has no trailing newline.

    Examples
    --------
    >>> frame = progress_bar("go", 0.5, level=LogLevel.INFO, event_id="e", width=25)
    >>> frame.split("]")[0]
    '\\rgo [-----     '
    """

    tag = metadata_tag(event_id, level)
    bar_width = max(1, width - (visible_length(message) + len(tag)) - 4)
    fraction = 0.0 if math.isnan(progress) else min(max(progress, 0.0), 1.0)
    filled = round(fraction * bar_width)
    bar = "-" * filled + " " * (bar_width - filled)
    return f"\r{message} [{bar}] {colorize(tag, level_style(level))}"


def plain_line(level: LogLevel, module: str, filepath: str, line: int, message: str) -> str:
    """Return the deterministic line used for non-interactive destinations.

    Examples
    --------
    >>> plain_line(LogLevel.INFO, "moduleX", "/src/a.py", 10, "build ok")
    'Info [moduleX:a.py:10]: build ok\\n'
    >>> plain_line(LogLevel.INFO, "moduleX", "a.py", 10, "done\\n")
    'Info [moduleX:a.py:10]: done\\n'
    """

    text = f"{level} [{module}:{os.path.basename(filepath)}:{line}]: {message}"
    return text if text.endswith("\n") else text + "\n"


def join_parts(parts: Iterable[str]) -> str:
    """Concatenate rendered sub-messages, newline after each one."""

    return "".join(f"{part}\n" for part in parts)


def strip_trailing_pad(text: str) -> str:
    """Drop spaces that Rich pads each line with, keeping closing escapes."""

    return _TRAILING_PAD.sub(lambda match: "".join(_SGR.findall(match.group(0))), text)


__all__ = [
    "CONTINUATION_TAG",
    "colorize",
    "join_parts",
    "layout_lines",
    "level_style",
    "metadata_tag",
    "plain_line",
    "progress_bar",
    "strip_trailing_pad",
    "visible_length",
]
