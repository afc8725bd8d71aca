from __future__ import annotations

from typing import Annotated

import typer

from streamlog.commands import log, log_path, show_config
from streamlog.config.logging_config import configure_diagnostics

app = typer.Typer(no_args_is_help=True)

# Add commands from different modules
app.add_typer(log.app)
app.add_typer(show_config.app)
app.add_typer(log_path.app)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print streamlog's own diagnostics (opened files, backups) to stderr.",
        ),
    ] = False,
) -> None:
    """Leveled logging to the console, a log file and an error file."""
    if verbose:
        configure_diagnostics("DEBUG")


if __name__ == "__main__":
    app()
