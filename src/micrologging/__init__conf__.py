"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

import sys
from typing import Callable

name = "micrologging"
title = "Pluggable leveled logging front-end with a terminal-aware logger"
version = "0.1.0"
homepage = "https://pypi.org/project/micrologging/"
author = "micrologging contributors"
shell_command = "micrologging"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Emit the metadata banner line by line through ``writer``.

    Each emitted chunk ends with a newline so callers may concatenate them.
    """

    emit = writer if writer is not None else sys.stdout.write
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    emit(f"Info for {name}:\n")
    emit("\n")
    for label, value in fields:
        emit(f"    {label:<{pad}} = {value}\n")


def summary_info() -> str:
    """Return the banner printed by :func:`print_info` as one string."""

    lines: list[str] = []
    print_info(writer=lines.append)
    return "".join(lines)
