from __future__ import annotations

import io
import os
from pathlib import Path
from typing import Iterator

import pytest
from click.testing import CliRunner

from micrologging import cli as cli_module
from micrologging import config as log_config
from micrologging.adapters import TerminalLogger
from micrologging.domain.errors import InvalidLevel
from micrologging.domain.levels import LogLevel


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> Iterator[None]:
    """Reset shared dotenv state around each test."""

    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values that were not set yet."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("MICROLOGGING_LEVEL=debug\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("MICROLOGGING_LEVEL", raising=False)

    loaded = log_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ["MICROLOGGING_LEVEL"] == "debug"

    os.environ.pop("MICROLOGGING_LEVEL", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text("MICROLOGGING_LEVEL=debug\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv("MICROLOGGING_LEVEL", "error")

    result = log_config.enable_dotenv()

    assert result is not None
    assert os.environ["MICROLOGGING_LEVEL"] == "error"


def test_enable_dotenv_returns_none_without_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(log_config, "find_dotenv", lambda usecwd: "")

    assert log_config.enable_dotenv() is None


def test_enable_dotenv_runs_once_per_process(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text("MICROLOGGING_UNUSED=1\n")
    (nested / ".env").write_text("MICROLOGGING_UNUSED=2\n")
    monkeypatch.delenv("MICROLOGGING_UNUSED", raising=False)
    monkeypatch.chdir(tmp_path)

    first = log_config.enable_dotenv()
    monkeypatch.chdir(nested)

    assert first == (tmp_path / ".env").resolve()
    assert log_config.enable_dotenv() == first
    assert os.environ["MICROLOGGING_UNUSED"] == "1"

    os.environ.pop("MICROLOGGING_UNUSED", None)


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(log_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(log_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []

    result = runner.invoke(cli_module.cli, ["info"])
    assert calls == []


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [(None, None, False), (None, "yes", True), (None, "off", False), (False, "1", False), (True, None, True)],
)
def test_should_use_dotenv(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert log_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_should_use_dotenv_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        log_config.should_use_dotenv(env_value="sometimes")


def test_settings_from_env_defaults() -> None:
    settings = log_config.settings_from_env({})

    assert settings.min_level == LogLevel.INFO
    assert dict(settings.module_levels) == {}
    assert settings.interactive is None


def test_settings_from_env_reads_every_variable() -> None:
    settings = log_config.settings_from_env(
        {
            log_config.LEVEL_ENV_VAR: " Warn ",
            log_config.MODULE_LEVELS_ENV_VAR: "pkg.db=debug,web=error",
            log_config.INTERACTIVE_ENV_VAR: "true",
        }
    )

    assert settings.min_level == LogLevel.WARN
    assert dict(settings.module_levels) == {"pkg.db": LogLevel.DEBUG, "web": LogLevel.ERROR}
    assert settings.interactive is True


def test_settings_from_env_rejects_unknown_level() -> None:
    with pytest.raises(InvalidLevel):
        log_config.settings_from_env({log_config.LEVEL_ENV_VAR: "loud"})


@pytest.mark.parametrize("value", ["pkg.db", "=debug", "pkg=verbose"])
def test_parse_module_levels_rejects_malformed_entries(value: str) -> None:
    with pytest.raises(ValueError):
        log_config.parse_module_levels(value)


def test_parse_module_levels_skips_empty_chunks() -> None:
    assert log_config.parse_module_levels(" , a=info,, ") == {"a": LogLevel.INFO}


def test_apply_settings_resets_and_overrides() -> None:
    logger = TerminalLogger(io.StringIO(), interactive=False, width=40)
    logger.configure("stale", min_level="error")
    settings = log_config.LoggerSettings(min_level=LogLevel.WARN, module_levels={"pkg.db": LogLevel.DEBUG})

    assert log_config.apply_settings(logger, settings) is logger
    assert logger.default_min_level == LogLevel.WARN
    assert logger.module_limits == {"pkg.db": LogLevel.DEBUG}
    assert logger.min_enabled_level() == LogLevel.DEBUG
