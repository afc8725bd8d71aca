"""
Write one entry through a short-lived session.

Each invocation resolves the settings, initializes a session, routes the
message and resets the session, which closes the files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from streamlog.commands.options import (
    AppendOption,
    BackgroundOption,
    BackupOption,
    ConfigOption,
    ConsoleOption,
    ErrorFileOption,
    ErrorFilePathOption,
    FileOption,
    FilePathOption,
    ForegroundOption,
    LevelOption,
    OverwriteOption,
    TabSizeOption,
    TimestampFormatOption,
    UtcOption,
    WithLevelOption,
    WithTimestampOption,
    build_settings,
    explicit_settings,
    fail,
)
from streamlog.core.exceptions import StreamlogError
from streamlog.core.level import Level, parse_level
from streamlog.logger import Logger

app = typer.Typer()


@app.command("log")
def log_message(
    message: Annotated[
        Optional[str],
        typer.Argument(help="Text to log. Embedded newlines give several lines."),
    ] = None,
    level: Annotated[
        str,
        typer.Option(
            "--level",
            "-l",
            help="Level of the entry: Error, Warning, Info or Debug.",
        ),
    ] = "Info",
    indent: Annotated[
        int,
        typer.Option(
            "--indent", "-i", min=0, max=255, help="Indentation level of the entry."
        ),
    ] = 0,
    no_console: Annotated[
        bool, typer.Option("--no-console", help="Skip the console for this entry.")
    ] = False,
    no_file: Annotated[
        bool, typer.Option("--no-file", help="Skip both files for this entry.")
    ] = False,
    error: Annotated[
        bool,
        typer.Option("--error", "-e", help="Treat the message as an error payload."),
    ] = False,
    raw: Annotated[
        bool,
        typer.Option("--raw", help="With --error, log the payload as is, untrimmed."),
    ] = False,
    config: ConfigOption = None,
    log_level: LevelOption = None,
    console: ConsoleOption = False,
    file: FileOption = False,
    error_file: ErrorFileOption = False,
    file_path: FilePathOption = None,
    error_file_path: ErrorFilePathOption = None,
    backup: BackupOption = False,
    overwrite: OverwriteOption = False,
    append: AppendOption = False,
    with_log_level: WithLevelOption = False,
    with_timestamp: WithTimestampOption = False,
    timestamp_format: TimestampFormatOption = None,
    utc: UtcOption = False,
    tab_size: TabSizeOption = None,
    foreground: ForegroundOption = None,
    background: BackgroundOption = None,
) -> None:
    """
    Log MESSAGE to the configured targets.

    :raises typer.Exit: If the settings are invalid or a file cannot be opened.
    """
    try:
        entry_level = parse_level(level)
        settings = build_settings(
            config,
            explicit_settings(
                log_level=log_level,
                console=console,
                file=file,
                error_file=error_file,
                file_path=file_path,
                error_file_path=error_file_path,
                backup=backup,
                overwrite=overwrite,
                append=append,
                with_log_level=with_log_level,
                with_timestamp=with_timestamp,
                timestamp_format=timestamp_format,
                utc=utc,
                tab_size=tab_size,
                foreground=foreground,
                background=background,
            ),
        )

        with Logger() as logger:
            logger.init(settings)
            if error:
                logger.log_errors(
                    [message] if message else [],
                    raw=raw,
                    indent=indent,
                    no_console=no_console,
                    no_file=no_file,
                )
            else:
                logger.log(
                    entry_level,
                    message,
                    indent=indent,
                    no_console=no_console,
                    no_file=no_file,
                )
    except StreamlogError as e:
        raise fail(str(e)) from e
    except OSError as e:
        raise fail(f"Could not write log file: {e}") from e
