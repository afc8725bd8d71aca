"""
Options shared by the commands that build a session.

Every option is unset by default so a value from ``--config`` can fill it
in; only options given on the command line override the file. Flags can
only switch a setting on.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from streamlog.config.config_type_hint import RawConfig
from streamlog.config.read_config import read_config
from streamlog.config.resolve import resolve_settings
from streamlog.core.settings import LogSettings

ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        "-c",
        help="YAML or JSON file with default settings. Command line options win.",
    ),
]
LevelOption = Annotated[
    Optional[str],
    typer.Option(
        "--log-level",
        help="Threshold: None, Error, Warning, Info or Debug. Defaults to Info.",
    ),
]
ConsoleOption = Annotated[
    bool, typer.Option("--console", help="Enable the console target.")
]
FileOption = Annotated[
    bool, typer.Option("--file", help="Enable the log file target.")
]
ErrorFileOption = Annotated[
    bool,
    typer.Option("--error-file", help="Enable the error file target (errors only)."),
]
FilePathOption = Annotated[
    Optional[str], typer.Option("--file-path", help="Path of the log file.")
]
ErrorFilePathOption = Annotated[
    Optional[str], typer.Option("--error-file-path", help="Path of the error file.")
]
BackupOption = Annotated[
    bool,
    typer.Option("--backup", help="Rename an existing file with a timestamp (default)."),
]
OverwriteOption = Annotated[
    bool, typer.Option("--overwrite", help="Truncate an existing file.")
]
AppendOption = Annotated[
    bool, typer.Option("--append", help="Append to an existing file.")
]
WithLevelOption = Annotated[
    bool,
    typer.Option("--with-log-level", help="Prefix file lines with the level."),
]
WithTimestampOption = Annotated[
    bool,
    typer.Option("--with-timestamp", help="Prefix file lines with a timestamp."),
]
TimestampFormatOption = Annotated[
    Optional[str],
    typer.Option(
        "--timestamp-format", help="Timestamp pattern, e.g. 'yyyy-MM-dd HH:mm:ss'."
    ),
]
UtcOption = Annotated[
    bool, typer.Option("--utc", help="Use UTC for timestamps and backups.")
]
TabSizeOption = Annotated[
    Optional[int],
    typer.Option("--tab-size", min=1, max=8, help="Spaces per indentation level."),
]
ForegroundOption = Annotated[
    Optional[str],
    typer.Option("--foreground", help="Console foreground color for every level."),
]
BackgroundOption = Annotated[
    Optional[str],
    typer.Option("--background", help="Console background color for every level."),
]


def build_settings(config: Optional[Path], explicit: RawConfig) -> LogSettings:
    """
    Merge command line values with the configuration file.

    :param config: Optional configuration file.
    :param explicit: Command line values keyed by setting name.
    :raises ConfigurationError: If a value is invalid.
    """
    return resolve_settings(explicit, read_config(config))


def explicit_settings(
    *,
    log_level: Optional[str],
    console: bool,
    file: bool,
    error_file: bool,
    file_path: Optional[str],
    error_file_path: Optional[str],
    backup: bool,
    overwrite: bool,
    append: bool,
    with_log_level: bool,
    with_timestamp: bool,
    timestamp_format: Optional[str],
    utc: bool,
    tab_size: Optional[int],
    foreground: Optional[str],
    background: Optional[str],
) -> RawConfig:
    """Collect command line values; flags that were not given stay unset."""
    return {
        "LogLevel": log_level,
        "Console": console or None,
        "File": file or None,
        "ErrorFile": error_file or None,
        "FilePath": file_path,
        "ErrorFilePath": error_file_path,
        "Backup": backup or None,
        "Overwrite": overwrite or None,
        "Append": append or None,
        "WithLogLevel": with_log_level or None,
        "WithTimestamp": with_timestamp or None,
        "TimestampFormat": timestamp_format,
        "UtcTime": utc or None,
        "TabSize": tab_size,
        "ForegroundColor": foreground,
        "BackgroundColor": background,
    }


def fail(message: str) -> typer.Exit:
    """Print ``message`` in red on stderr and return the exit to raise."""
    typer.echo(typer.style(message, fg=typer.colors.RED), err=True)
    return typer.Exit(1)
