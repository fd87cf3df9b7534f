"""Adapters implementing the logger port and its inbound bridges."""

from __future__ import annotations

from .console import TerminalInfo, TerminalLogger, detect_terminal
from .null_logger import NullLogger
from .stdlib_bridge import MicroLoggingHandler

__all__ = [
    "MicroLoggingHandler",
    "NullLogger",
    "TerminalInfo",
    "TerminalLogger",
    "detect_terminal",
]
