"""
Line decoration for console and file targets.

Console lines only ever get indentation. File lines may additionally get a
timestamp and a fixed-width level tag:

    2024-03-09 14:05:07:ERROR: disk full
    2024-03-09 14:05:07: disk full
    ERROR: disk full
    disk full
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Optional

from streamlog.core import timestamp

if TYPE_CHECKING:
    from datetime import datetime

    from streamlog.core.level import Level

DEFAULT_TAB_SIZE = 4
MIN_TAB_SIZE = 1
MAX_TAB_SIZE = 8
MAX_INDENT = 255
DEFAULT_TIMESTAMP_FORMAT = "yyyy-MM-dd HH:mm:ss"

_LINE_BREAK = re.compile(r"\r?\n")


class Target(Enum):
    """An independent output destination."""

    CONSOLE = "console"
    FILE = "file"
    ERROR_FILE = "error_file"


def split_lines(message: Optional[str]) -> list[str]:
    """
    Split a message into independent lines.

    ``\\n`` and ``\\r\\n`` both end a line. ``None`` gives a single empty line.
    """
    return _LINE_BREAK.split(message or "")


class LineFormatter:
    """Turns raw message lines into the text written to a target."""

    def __init__(
        self,
        *,
        tab_size: int = DEFAULT_TAB_SIZE,
        with_level: bool = False,
        with_timestamp: bool = False,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        utc: bool = False,
    ) -> None:
        self.tab_size = tab_size
        self.with_level = with_level
        self.with_timestamp = with_timestamp
        self.timestamp_format = timestamp_format
        self.utc = utc

    def indent_prefix(self, indent: int) -> str:
        """
        Build the indentation for ``indent`` levels.

        :raises ValueError: If ``indent`` is outside ``0..255``.
        """
        if not 0 <= indent <= MAX_INDENT:
            raise ValueError(f"indent must be between 0 and {MAX_INDENT}, got {indent}")
        return " " * (self.tab_size * indent)

    def format_console(self, line: str, indent: int = 0) -> str:
        return self.indent_prefix(indent) + line

    def format_file(
        self,
        line: str,
        level: Level,
        indent: int = 0,
        moment: Optional[datetime] = None,
    ) -> str:
        """
        Decorate one line for a log or error file.

        :param line: A single line without line terminator.
        :param level: Level of the entry, used for the tag.
        :param indent: Indentation level.
        :param moment: Time of the entry, the current time when omitted.
        :raises TimestampFormatError: If the timestamp format cannot render.
        """
        body = self.indent_prefix(indent) + line

        prefixes: list[str] = []
        if self.with_timestamp:
            if moment is None:
                moment = timestamp.now(self.utc)
            prefixes.append(timestamp.render(moment, self.timestamp_format))
        if self.with_level:
            prefixes.append(level.tag)

        if not prefixes:
            return body
        return ":".join(prefixes) + ": " + body

    def format_lines(
        self,
        message: Optional[str],
        level: Level,
        indent: int = 0,
        *,
        target: Target,
    ) -> list[str]:
        """Split ``message`` and decorate every line for ``target``."""
        if target is Target.CONSOLE:
            return [self.format_console(line, indent) for line in split_lines(message)]

        # All lines of one entry share a timestamp.
        moment = timestamp.now(self.utc) if self.with_timestamp else None
        return [
            self.format_file(line, level, indent, moment)
            for line in split_lines(message)
        ]
