from __future__ import annotations

import io
from typing import Callable, Iterator

import pytest

from micrologging.adapters import TerminalLogger
from micrologging.domain.levels import LogLevel
from micrologging.runtime import _state


@pytest.fixture(autouse=True)
def reset_runtime() -> Iterator[None]:
    try:
        yield
    finally:
        _state.reset_global()
        _state.set_disabled(LogLevel.BELOW_MIN_LEVEL)


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def make_logger(stream: io.StringIO) -> Callable[..., TerminalLogger]:
    """Build a :class:`TerminalLogger` writing to the shared ``stream`` fixture."""

    def _make(*, interactive: bool = False, width: int = 40, min_level: LogLevel | str = LogLevel.INFO) -> TerminalLogger:
        return TerminalLogger(stream, interactive=interactive, width=width, height=25, min_level=min_level)

    return _make
