"""Console loggers rendering to text streams."""

from __future__ import annotations

from .terminal import TerminalInfo, detect_terminal
from .terminal_logger import TerminalLogger

__all__ = ["TerminalInfo", "TerminalLogger", "detect_terminal"]
