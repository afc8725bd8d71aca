from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from streamlog.core.exceptions import ConfigurationError
from streamlog.core.level import Level

if TYPE_CHECKING:
    from collections.abc import Mapping


class ConsoleColor(Enum):
    """
    The sixteen classic console colors.

    Each value is the matching terminal color name accepted by ``typer.style``.
    """

    BLACK = "black"
    DARK_BLUE = "blue"
    DARK_GREEN = "green"
    DARK_CYAN = "cyan"
    DARK_RED = "red"
    DARK_MAGENTA = "magenta"
    DARK_YELLOW = "yellow"
    GRAY = "white"
    DARK_GRAY = "bright_black"
    BLUE = "bright_blue"
    GREEN = "bright_green"
    CYAN = "bright_cyan"
    RED = "bright_red"
    MAGENTA = "bright_magenta"
    YELLOW = "bright_yellow"
    WHITE = "bright_white"

    @property
    def display_name(self) -> str:
        """Name as written in settings, e.g. ``DarkYellow``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


ColorPair = tuple[Optional[ConsoleColor], Optional[ConsoleColor]]


def parse_color(value: Union[ConsoleColor, str, None]) -> Optional[ConsoleColor]:
    """
    Convert a color name such as ``DarkYellow`` or ``dark_yellow``.

    :raises ConfigurationError: If the name is not a console color.
    """
    if value is None or isinstance(value, ConsoleColor):
        return value

    key = str(value).strip().replace("_", "").replace("-", "").lower()
    if not key:
        return None
    for color in ConsoleColor:
        if color.display_name.lower() == key:
            return color

    raise ConfigurationError(
        f"Invalid color: {value!r}. "
        f"Expected one of: {', '.join(c.display_name for c in ConsoleColor)}"
    )


DEFAULT_FOREGROUND: dict[Level, Optional[ConsoleColor]] = {
    Level.ERROR: ConsoleColor.RED,
    Level.WARNING: ConsoleColor.YELLOW,
    Level.INFO: None,
    Level.DEBUG: ConsoleColor.GRAY,
}
DEFAULT_BACKGROUND: dict[Level, Optional[ConsoleColor]] = {
    Level.ERROR: None,
    Level.WARNING: None,
    Level.INFO: None,
    Level.DEBUG: None,
}


@dataclass
class ColorTable:
    """Foreground and background color per level, merged once at init."""

    foreground: dict[Level, Optional[ConsoleColor]] = field(
        default_factory=lambda: dict(DEFAULT_FOREGROUND)
    )
    background: dict[Level, Optional[ConsoleColor]] = field(
        default_factory=lambda: dict(DEFAULT_BACKGROUND)
    )

    @classmethod
    def build(
        cls,
        foreground: Optional[ConsoleColor] = None,
        background: Optional[ConsoleColor] = None,
        per_level: Optional[Mapping[Level, ColorPair]] = None,
    ) -> ColorTable:
        """
        Layer the overrides over the defaults.

        Per-level overrides replace the defaults of their level only; a
        global foreground or background then replaces every level.

        :param foreground: Global foreground for all levels.
        :param background: Global background for all levels.
        :param per_level: ``{level: (foreground, background)}``; ``None``
                          members keep the default of that level.
        """
        table = cls()

        for level, (fg, bg) in (per_level or {}).items():
            if fg is not None:
                table.foreground[level] = fg
            if bg is not None:
                table.background[level] = bg

        for level in table.foreground:
            if foreground is not None:
                table.foreground[level] = foreground
            if background is not None:
                table.background[level] = background

        return table

    def resolve(self, level: Level) -> ColorPair:
        return self.foreground.get(level), self.background.get(level)
