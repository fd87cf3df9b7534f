from __future__ import annotations

from typing import Any, Mapping

import pytest

from micrologging.application.ports import LoggerPort
from micrologging.application.use_cases.dispatch import derive_event_id, dispatch, emit
from micrologging.domain.events import LogEvent
from micrologging.domain.levels import DEBUG, ERROR, INFO, WARN, LogLevel


class _RecordingLogger(LoggerPort):
    def __init__(self, *, floor: LogLevel = INFO, accept: bool = True) -> None:
        self.floor = floor
        self.accept = accept
        self.decisions: list[tuple[Any, ...]] = []
        self.rendered: list[dict[str, Any]] = []

    def should_log(self, level, module, filepath, line, event_id, max_repeats, progress) -> bool:  # type: ignore[override]
        self.decisions.append((level, module, filepath, line, event_id, max_repeats, progress))
        return self.accept

    def min_enabled_level(self) -> LogLevel:
        return self.floor

    def handle_message(  # type: ignore[override]
        self,
        level: LogLevel,
        message: Any,
        module: str,
        filepath: str,
        line: int,
        event_id: str,
        *,
        progress: float | None = None,
        banner: bool = False,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        self.rendered.append(
            {
                "level": level,
                "message": message,
                "module": module,
                "event_id": event_id,
                "progress": progress,
                "banner": banner,
                "context": dict(context or {}),
            }
        )

    def configure(self, module=None, *, min_level=INFO):  # type: ignore[override]
        return self


class _CountingMessage:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return "expensive"


def test_derive_event_id_is_stable_and_location_specific() -> None:
    first = derive_event_id("pkg.jobs", "/src/pkg/jobs.py", 10)
    assert first == derive_event_id("pkg.jobs", "/src/pkg/jobs.py", 10)
    assert first != derive_event_id("pkg.jobs", "/src/pkg/jobs.py", 11)
    assert first.startswith("jobs_")
    assert len(first.split("_")[-1]) == 8


def test_below_min_enabled_level_skips_should_log_and_message() -> None:
    logger = _RecordingLogger(floor=WARN)
    message = _CountingMessage()
    assert dispatch(logger, INFO, message, module="m", filepath="f.py", line=1) is False
    assert logger.decisions == []
    assert message.calls == 0


def test_rejected_events_never_materialise_the_message() -> None:
    logger = _RecordingLogger(accept=False)
    message = _CountingMessage()
    assert dispatch(logger, ERROR, message, module="m", filepath="f.py", line=1) is False
    assert len(logger.decisions) == 1
    assert message.calls == 0
    assert logger.rendered == []


def test_accepted_events_materialise_once_and_render() -> None:
    logger = _RecordingLogger()
    message = _CountingMessage()
    assert dispatch(logger, WARN, message, module="m", filepath="f.py", line=1, context={"k": "v"}) is True
    assert message.calls == 1
    assert logger.rendered[0]["message"] == "expensive"
    assert logger.rendered[0]["context"] == {"k": "v"}


def test_dispatch_forwards_event_attributes() -> None:
    logger = _RecordingLogger(floor=DEBUG)
    dispatch(
        logger,
        DEBUG,
        "x",
        module="m",
        filepath="f.py",
        line=7,
        event_id="custom",
        max_repeats=3,
        progress=0.25,
        banner=True,
    )
    assert logger.decisions == [(DEBUG, "m", "f.py", 7, "custom", 3, 0.25)]
    assert logger.rendered[0]["progress"] == 0.25
    assert logger.rendered[0]["banner"] is True


def test_dispatch_derives_event_id_when_missing() -> None:
    logger = _RecordingLogger()
    dispatch(logger, INFO, "x", module="pkg.mod", filepath="f.py", line=3)
    assert logger.rendered[0]["event_id"] == derive_event_id("pkg.mod", "f.py", 3)


def test_exception_classes_are_not_called() -> None:
    logger = _RecordingLogger()
    dispatch(logger, INFO, ValueError, module="m", filepath="f.py", line=1)
    assert logger.rendered[0]["message"] is ValueError


def test_emit_runs_prebuilt_events() -> None:
    logger = _RecordingLogger()
    event = LogEvent(ERROR, lambda: "lazy", "m", "f.py", 2, "ev", max_repeats=1)
    assert emit(logger, event) is True
    assert logger.decisions[0][5] == 1
    assert logger.rendered[0]["message"] == "lazy"


@pytest.mark.parametrize("accept, expected", [(True, 1), (False, 0)])
def test_emit_respects_should_log(accept: bool, expected: int) -> None:
    logger = _RecordingLogger(accept=accept)
    emit(logger, LogEvent(INFO, "x", "m", "f.py", 1, "ev"))
    assert len(logger.rendered) == expected


def test_emit_prefers_message_factory() -> None:
    logger = _RecordingLogger()
    factory = _CountingMessage()
    assert emit(logger, LogEvent(INFO, "placeholder", "m", "f.py", 1, "ev"), factory) is True
    assert factory.calls == 1
    assert logger.rendered[0]["message"] == "expensive"


def test_emit_skips_message_factory_on_rejection() -> None:
    factory = _CountingMessage()
    emit(_RecordingLogger(accept=False), LogEvent(INFO, "placeholder", "m", "f.py", 1, "ev"), factory)
    assert factory.calls == 0
