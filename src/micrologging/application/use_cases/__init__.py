"""Use cases orchestrating a log call from call site to logger."""

from __future__ import annotations

from .dispatch import derive_event_id, dispatch, emit

__all__ = ["derive_event_id", "dispatch", "emit"]
