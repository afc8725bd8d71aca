"""
Severity levels and threshold filtering.

Lower numeric rank means higher severity. A message is kept when its rank
is lower than or equal to the rank of the configured threshold.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from streamlog.core.exceptions import ConfigurationError


class Level(IntEnum):
    """
    Ordered severity levels.

    ``NONE`` only exists as a threshold that turns every target off; a
    message logged at ``NONE`` is never emitted.
    """

    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4

    @property
    def tag(self) -> str:
        """Fixed-width tag written in front of file lines."""
        return _TAGS[self]

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


_TAGS: dict[Level, str] = {
    Level.NONE: "     ",
    Level.ERROR: "ERROR",
    Level.WARNING: "WARN ",
    Level.INFO: "INFO ",
    Level.DEBUG: "DEBUG",
}

_ALIASES: dict[str, Level] = {
    "warn": Level.WARNING,
    "err": Level.ERROR,
    "off": Level.NONE,
}


def rank(level: Level) -> int:
    return int(level)


def is_enabled(level: Level, threshold: Level) -> bool:
    """
    Tell whether a message at ``level`` passes ``threshold``.

    :param level: Level of the message.
    :param threshold: Configured threshold of the session.
    :return: False when the threshold is NONE, when the message itself is
             NONE, or when the message is less severe than the threshold.
    """
    if threshold is Level.NONE or level is Level.NONE:
        return False
    return rank(level) <= rank(threshold)


def parse_level(value: Union[Level, int, str]) -> Level:
    """
    Convert a user supplied level into a :class:`Level`.

    :param value: A Level, its numeric rank, or a case-insensitive name.
    :raises ConfigurationError: If the value names no level.
    """
    if isinstance(value, Level):
        return value

    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid log level: {value!r}")

    if isinstance(value, int):
        try:
            return Level(value)
        except ValueError:
            raise ConfigurationError(f"Invalid log level: {value!r}") from None

    if isinstance(value, str):
        name = value.strip().lower()
        if name in _ALIASES:
            return _ALIASES[name]
        for level in Level:
            if level.name.lower() == name:
                return level

    raise ConfigurationError(
        f"Invalid log level: {value!r}. "
        f"Expected one of: {', '.join(level.display_name for level in Level)}"
    )
