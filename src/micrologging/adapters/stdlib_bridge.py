"""Bridge from the stdlib :mod:`logging` module into micrologging loggers.

Purpose
-------
Third-party libraries log through :mod:`logging`. Attaching
:class:`MicroLoggingHandler` to a stdlib logger routes those records through the
same filtering and rendering as native call sites.

System Role
-----------
Adapter on the inbound side: translates :class:`logging.LogRecord` into a
:func:`micrologging.runtime.submit` call. Level numbers are mapped with
:meth:`LogLevel.from_python_level`, the record's logger name becomes the
module identity, and ``exc_info`` is appended as an error part.
"""

from __future__ import annotations

import logging
from typing import Any

from micrologging.application.ports.logger import LoggerPort
from micrologging.domain.levels import LogLevel
from micrologging.domain.messages import ErrorMessage


def _record_message(record: logging.LogRecord) -> Any:
    text = record.getMessage()
    if record.exc_info and record.exc_info[1] is not None:
        return (text, ErrorMessage(record.exc_info[1]))
    return text


class MicroLoggingHandler(logging.Handler):
    """Forward stdlib log records to a micrologging logger.

    Parameters
    ----------
    logger:
        Fixed destination. When ``None`` each record goes to whatever
        :func:`micrologging.current_logger` returns at emission time.
    level:
        Stdlib level threshold applied before the record is translated.
    """

    def __init__(self, logger: LoggerPort | None = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        from micrologging.runtime import submit

        try:
            submit(
                LogLevel.from_python_level(record.levelno),
                lambda: _record_message(record),
                module=record.name,
                filepath=record.pathname,
                line=record.lineno,
                logger=self._logger,
            )
        except RecursionError:  # pragma: no cover - mirrors logging.StreamHandler
            raise
        except Exception:  # noqa: BLE001
            self.handleError(record)


__all__ = ["MicroLoggingHandler"]
