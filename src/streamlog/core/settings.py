from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from streamlog.core.colors import ColorPair, ConsoleColor
from streamlog.core.formatter import DEFAULT_TAB_SIZE, DEFAULT_TIMESTAMP_FORMAT
from streamlog.core.level import Level
from streamlog.sinks.file_sink import Disposition


@dataclass
class LogSettings:
    """
    Fully resolved settings handed to :meth:`Session.init`.

    Merging explicit parameters with a configuration file happens before
    this object is built; see :func:`streamlog.config.resolve.resolve_settings`.

    :param level: Threshold; ``Level.NONE`` turns every target off.
    :param console: Enable the console target.
    :param file: Enable the log file target.
    :param error_file: Enable the error file target.
    :param file_path: Log file path, derived from the program when omitted.
    :param error_file_path: Error file path, derived from the program when omitted.
    :param disposition: Handling of pre-existing files, backup when omitted.
    :param with_level: Prefix file lines with the level tag.
    :param with_timestamp: Prefix file lines with a timestamp.
    :param timestamp_format: Pattern of the timestamp, e.g. ``yyyy-MM-dd``.
    :param utc: Render timestamps and backup names in UTC.
    :param tab_size: Spaces per indentation level, 1 to 8.
    :param foreground: Console foreground for every level.
    :param background: Console background for every level.
    :param level_colors: Per-level ``(foreground, background)`` overrides.
    """

    level: Level = Level.INFO
    console: bool = False
    file: bool = False
    error_file: bool = False
    file_path: Optional[Union[str, Path]] = None
    error_file_path: Optional[Union[str, Path]] = None
    disposition: Optional[Disposition] = None
    with_level: bool = False
    with_timestamp: bool = False
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    utc: bool = False
    tab_size: int = DEFAULT_TAB_SIZE
    foreground: Optional[ConsoleColor] = None
    background: Optional[ConsoleColor] = None
    level_colors: dict[Level, ColorPair] = field(default_factory=dict)
