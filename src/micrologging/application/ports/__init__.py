"""Protocols describing the boundary between call sites and logger adapters."""

from __future__ import annotations

from .logger import LoggerPort, ModuleRef, module_name

__all__ = ["LoggerPort", "ModuleRef", "module_name"]
