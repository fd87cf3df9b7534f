"""Log level abstraction backed by an ordered integer scale.

Purpose
-------
Represent severities as comparable values with a handful of named anchors while
still allowing arbitrary intermediate thresholds (``LogLevel(-500)`` sits
between :data:`DEBUG` and :data:`INFO`).

Contents
--------
* :class:`LogLevel` frozen value type with presentation helpers.
* Named anchors :data:`BELOW_MIN_LEVEL` ... :data:`ABOVE_MAX_LEVEL`.
* :func:`parse_level` converting configuration input into a level.

System Role
-----------
Every other component compares levels exclusively through the ordering
operators defined here; none of them assumes the integer representation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from .errors import InvalidLevel


@dataclass(slots=True, frozen=True, order=True)
class LogLevel:
    """Immutable, totally ordered severity value."""

    value: int

    BELOW_MIN_LEVEL: ClassVar["LogLevel"]
    DEBUG: ClassVar["LogLevel"]
    INFO: ClassVar["LogLevel"]
    WARN: ClassVar["LogLevel"]
    ERROR: ClassVar["LogLevel"]
    ABOVE_MAX_LEVEL: ClassVar["LogLevel"]

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"LogLevel value must be an int, got {self.value!r}")

    def __str__(self) -> str:
        name = _NAME_TABLE.get(self.value)
        return name if name is not None else f"LogLevel({self.value})"

    def __repr__(self) -> str:
        name = _NAME_TABLE.get(self.value)
        return f"LogLevel.{_CONSTANT_TABLE[name]}" if name is not None else f"LogLevel({self.value})"

    @property
    def name(self) -> str | None:
        """Return the anchor name (``"Info"``) or ``None`` for custom levels."""

        return _NAME_TABLE.get(self.value)

    @property
    def label(self) -> str:
        """Return the fixed-width tag shown in the right-hand metadata column."""

        return _LABEL_TABLE.get(self.value, str(self))

    def to_python_level(self) -> int:
        """Return the closest :mod:`logging` integer for this level."""

        return min(max(logging.INFO + self.value // 100, 1), logging.CRITICAL)

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging level integer into :class:`LogLevel`.

        Examples
        --------
        >>> LogLevel.from_python_level(logging.WARNING) == LogLevel.WARN
        True
        >>> LogLevel.from_python_level(logging.CRITICAL) > LogLevel.ERROR
        True
        """

        return cls((int(level) - logging.INFO) * 100)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().lower()
        try:
            return _BY_LOWER_NAME[normalized]
        except KeyError as exc:
            raise InvalidLevel(name) from exc


LogLevel.BELOW_MIN_LEVEL = LogLevel(-1000001)
LogLevel.DEBUG = LogLevel(-1000)
LogLevel.INFO = LogLevel(0)
LogLevel.WARN = LogLevel(1000)
LogLevel.ERROR = LogLevel(2000)
LogLevel.ABOVE_MAX_LEVEL = LogLevel(1000001)

BELOW_MIN_LEVEL = LogLevel.BELOW_MIN_LEVEL
DEBUG = LogLevel.DEBUG
INFO = LogLevel.INFO
WARN = LogLevel.WARN
ERROR = LogLevel.ERROR
ABOVE_MAX_LEVEL = LogLevel.ABOVE_MAX_LEVEL

_NAME_TABLE = {
    BELOW_MIN_LEVEL.value: "BelowMinLevel",
    DEBUG.value: "Debug",
    INFO.value: "Info",
    WARN.value: "Warn",
    ERROR.value: "Error",
    ABOVE_MAX_LEVEL.value: "AboveMaxLevel",
}

_CONSTANT_TABLE = {
    "BelowMinLevel": "BELOW_MIN_LEVEL",
    "Debug": "DEBUG",
    "Info": "INFO",
    "Warn": "WARN",
    "Error": "ERROR",
    "AboveMaxLevel": "ABOVE_MAX_LEVEL",
}

_LABEL_TABLE = {
    DEBUG.value: "- DEBUG",
    INFO.value: "-- INFO",
    WARN.value: "-- WARN",
    ERROR.value: "- ERROR",
}
# Labels are padded to the same width so the metadata column lines up.

_BY_LOWER_NAME = {name.lower(): LogLevel(value) for value, name in _NAME_TABLE.items()}


def parse_level(value: LogLevel | str) -> LogLevel:
    """Return the :class:`LogLevel` described by ``value``.

    Only level instances and anchor names (case-insensitive) are accepted;
    numeric input of any kind raises :class:`InvalidLevel`.

    Examples
    --------
    >>> parse_level("warn")
    LogLevel.WARN
    >>> parse_level(LogLevel(-500))
    LogLevel(-500)
    """

    if isinstance(value, LogLevel):
        return value
    if isinstance(value, str):
        return LogLevel.from_name(value)
    raise InvalidLevel(value)


__all__ = [
    "ABOVE_MAX_LEVEL",
    "BELOW_MIN_LEVEL",
    "DEBUG",
    "ERROR",
    "INFO",
    "LogLevel",
    "WARN",
    "parse_level",
]
