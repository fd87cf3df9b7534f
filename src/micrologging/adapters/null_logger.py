"""Logger that accepts nothing.

Install it with :func:`micrologging.with_logger` to silence a block of code
entirely; call sites skip message construction because
:meth:`NullLogger.min_enabled_level` is above every real level.
"""

from __future__ import annotations

from typing import Any, Mapping

from micrologging.application.ports.logger import LoggerPort, ModuleRef
from micrologging.domain.levels import LogLevel, parse_level


class NullLogger(LoggerPort):
    """Reject every event and render nothing."""

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
        return False

    def min_enabled_level(self) -> LogLevel:
        return LogLevel.ABOVE_MAX_LEVEL

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
        return None

    def configure(self, module: ModuleRef | None = None, *, min_level: LogLevel | str = LogLevel.INFO) -> "NullLogger":
        # Validated so bad configuration fails the same way for every logger.
        parse_level(min_level)
        return self


__all__ = ["NullLogger"]
