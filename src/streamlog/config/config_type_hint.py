from __future__ import annotations

from typing import Optional, TypedDict, Union

from typing_extensions import NotRequired


class LevelColor(TypedDict, total=False):
    """
    Console colors of one level.

    :param ForegroundColor: Color name, e.g. ``DarkYellow``.
    :param BackgroundColor: Color name.
    """

    ForegroundColor: str
    BackgroundColor: str


class RawConfig(TypedDict, total=False):
    """
    Settings as written in a configuration file or passed on the command line.

    Every key is optional; explicit parameters win over file values.
    """

    LogLevel: NotRequired[Union[str, int]]
    Console: NotRequired[bool]
    File: NotRequired[bool]
    ErrorFile: NotRequired[bool]
    FilePath: NotRequired[Optional[str]]
    ErrorFilePath: NotRequired[Optional[str]]
    Backup: NotRequired[bool]
    Overwrite: NotRequired[bool]
    Append: NotRequired[bool]
    WithLogLevel: NotRequired[bool]
    WithTimestamp: NotRequired[bool]
    TimestampFormat: NotRequired[str]
    UtcTime: NotRequired[bool]
    TabSize: NotRequired[int]
    ForegroundColor: NotRequired[Optional[str]]
    BackgroundColor: NotRequired[Optional[str]]
    LevelColors: NotRequired[dict[str, LevelColor]]
