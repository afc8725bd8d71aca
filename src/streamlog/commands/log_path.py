from __future__ import annotations

from typing import Annotated, Optional

import typer

from streamlog.core.paths import format_log_path

app = typer.Typer()


@app.command()
def log_path(
    directory: Annotated[
        Optional[str],
        typer.Option("--directory", "-d", help="Directory of the file."),
    ] = None,
    name: Annotated[
        Optional[str],
        typer.Option("--name", "-n", help="Base name of the file, without extension."),
    ] = None,
    extension: Annotated[
        Optional[str],
        typer.Option("--extension", help="Extension replacing '.log'."),
    ] = None,
    error_file: Annotated[
        bool,
        typer.Option("--error-file", help="Print the error file path ('.err.log')."),
    ] = False,
) -> None:
    """Print the default log file path, optionally with overrides."""
    typer.echo(format_log_path(directory, name, extension, error_file=error_file))
