from __future__ import annotations

from typing import Annotated

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
from streamlog.core.introspection import dump_config
from streamlog.core.session import Session

app = typer.Typer()


@app.command()
def show_config(
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: json or xml."),
    ] = "json",
    pretty: Annotated[
        bool, typer.Option("--pretty", help="Indent the output.")
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
    """Print the settings a session would run with. No file is created."""
    session = Session()
    try:
        session.init(
            build_settings(
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
        )
        typer.echo(dump_config(session.snapshot(), fmt=output_format, pretty=pretty))
    except (StreamlogError, ValueError) as e:
        raise fail(str(e)) from e
    finally:
        session.reset()
