"""Environment-driven configuration for the default logger.

Purpose
-------
Let operators tune thresholds without code changes: levels come from
environment variables, optionally seeded from the nearest ``.env`` file via
``python-dotenv``.

Contents
--------
* :data:`DOTENV_ENV_VAR` plus :func:`should_use_dotenv` / :func:`enable_dotenv`.
* :class:`LoggerSettings` and :func:`settings_from_env` - parsed settings.
* :func:`apply_settings` - push settings into a logger through ``configure``.

Recognised variables
--------------------
``MICROLOGGING_LEVEL``
    Default floor (``debug``, ``info``, ``warn``, ``error``).
``MICROLOGGING_MODULE_LEVELS``
    Comma separated ``module=level`` overrides, e.g. ``"pkg.db=debug,urllib3=warn"``.
``MICROLOGGING_INTERACTIVE``
    ``1/true/yes/on`` or ``0/false/no/off``; unset means detect from the stream.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from micrologging.application.ports.logger import LoggerPort
from micrologging.domain.levels import LogLevel, parse_level

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "MICROLOGGING_USE_DOTENV"
LEVEL_ENV_VAR = "MICROLOGGING_LEVEL"
MODULE_LEVELS_ENV_VAR = "MICROLOGGING_MODULE_LEVELS"
INTERACTIVE_ENV_VAR = "MICROLOGGING_INTERACTIVE"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_dotenv_loaded: Path | None = None
_dotenv_attempted = False


def _parse_flag(name: str, value: str | None) -> bool | None:
    if value is None or not value.strip():
        return None
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be one of {sorted(_TRUTHY | _FALSY)}, got {value!r}")


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is enabled.

    An explicit CLI choice wins; otherwise the :data:`DOTENV_ENV_VAR` toggle
    decides, defaulting to ``False``.
    """

    if explicit is not None:
        return explicit
    return bool(_parse_flag(DOTENV_ENV_VAR, env_value))


def enable_dotenv() -> Path | None:
    """Load the ``.env`` nearest to the working directory once per process.

    Existing environment variables keep precedence. Returns the resolved path
    of the loaded file, or ``None`` when no file was found.
    """

    global _dotenv_loaded, _dotenv_attempted
    if _dotenv_attempted:
        return _dotenv_loaded
    _dotenv_attempted = True
    located = find_dotenv(usecwd=True)
    if not located:
        logger.debug("No .env file found")
        return None
    load_dotenv(located, override=False)
    _dotenv_loaded = Path(located).resolve()
    logger.debug("Loaded environment from %s", _dotenv_loaded)
    return _dotenv_loaded


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_loaded, _dotenv_attempted
    _dotenv_loaded = None
    _dotenv_attempted = False


@dataclass(slots=True, frozen=True)
class LoggerSettings:
    """Thresholds and rendering mode resolved from the environment."""

    min_level: LogLevel = LogLevel.INFO
    module_levels: Mapping[str, LogLevel] = field(default_factory=dict)
    interactive: bool | None = None


def parse_module_levels(value: str) -> dict[str, LogLevel]:
    """Parse ``"mod.a=debug,mod.b=warn"`` into a module-to-level mapping.

    Examples
    --------
    >>> parse_module_levels("pkg.db=debug, web = warn")
    {'pkg.db': LogLevel.DEBUG, 'web': LogLevel.WARN}
    """

    levels: dict[str, LogLevel] = {}
    for chunk in value.split(","):
        if not chunk.strip():
            continue
        module, sep, level = chunk.partition("=")
        if not sep or not module.strip():
            raise ValueError(f"{MODULE_LEVELS_ENV_VAR} entries must look like 'module=level', got {chunk.strip()!r}")
        levels[module.strip()] = parse_level(level)
    return levels


def settings_from_env(environ: Mapping[str, str] | None = None) -> LoggerSettings:
    """Build :class:`LoggerSettings` from ``environ`` (default :data:`os.environ`)."""

    env = os.environ if environ is None else environ
    raw_level = env.get(LEVEL_ENV_VAR, "").strip()
    return LoggerSettings(
        min_level=parse_level(raw_level) if raw_level else LogLevel.INFO,
        module_levels=parse_module_levels(env.get(MODULE_LEVELS_ENV_VAR, "")),
        interactive=_parse_flag(INTERACTIVE_ENV_VAR, env.get(INTERACTIVE_ENV_VAR)),
    )


def apply_settings(target: LoggerPort, settings: LoggerSettings) -> LoggerPort:
    """Reset ``target`` to ``settings.min_level`` then apply each module override."""

    target.configure(None, min_level=settings.min_level)
    for module, level in settings.module_levels.items():
        target.configure(module, min_level=level)
    logger.debug(
        "Applied logger settings: default=%s overrides=%s",
        settings.min_level,
        {module: str(level) for module, level in settings.module_levels.items()},
    )
    return target


__all__ = [
    "DOTENV_ENV_VAR",
    "INTERACTIVE_ENV_VAR",
    "LEVEL_ENV_VAR",
    "LoggerSettings",
    "MODULE_LEVELS_ENV_VAR",
    "apply_settings",
    "enable_dotenv",
    "parse_module_levels",
    "settings_from_env",
    "should_use_dotenv",
]
