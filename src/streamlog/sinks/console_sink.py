from __future__ import annotations

from typing import TYPE_CHECKING, Optional, TextIO

import typer

from streamlog.core.colors import ColorTable
from streamlog.core.formatter import LineFormatter, Target

if TYPE_CHECKING:
    from streamlog.core.level import Level


class ConsoleSink:
    """
    Writes entries to the terminal with level-dependent colors.

    Console lines are never decorated with a timestamp or level tag, only
    indented; the text itself is written as is, tabs and control characters
    included. Colors are applied per line and do not carry over between
    calls.

    :param colors: Color table of the session.
    :param formatter: Formatter used for the console variant of each line.
    :param stream: Where to write, standard output when omitted.
    :param color: Force colors on or off; detected from the stream when None.
    """

    def __init__(
        self,
        colors: Optional[ColorTable] = None,
        formatter: Optional[LineFormatter] = None,
        stream: Optional[TextIO] = None,
        color: Optional[bool] = None,
    ) -> None:
        self.colors = colors or ColorTable()
        self.formatter = formatter or LineFormatter()
        self.stream = stream
        self.color = color

    def colors_for(self, level: Level) -> tuple[Optional[str], Optional[str]]:
        """Foreground and background color names for ``level``."""
        fg, bg = self.colors.resolve(level)
        return (fg.value if fg else None, bg.value if bg else None)

    def write(self, level: Level, message: Optional[str], indent: int = 0) -> None:
        fg, bg = self.colors_for(level)
        for line in self.formatter.format_lines(
            message, level, indent, target=Target.CONSOLE
        ):
            if fg or bg:
                line = typer.style(line, fg=fg, bg=bg)
            typer.echo(line, file=self.stream, color=self.color)
