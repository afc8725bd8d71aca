import pytest

from streamlog.core.colors import ColorTable, ConsoleColor, parse_color
from streamlog.core.exceptions import ConfigurationError
from streamlog.core.level import Level


def test_default_table() -> None:
    """Only error, warning and debug have default colors."""
    table = ColorTable()

    assert table.resolve(Level.ERROR) == (ConsoleColor.RED, None)
    assert table.resolve(Level.WARNING) == (ConsoleColor.YELLOW, None)
    assert table.resolve(Level.DEBUG) == (ConsoleColor.GRAY, None)
    assert table.resolve(Level.INFO) == (None, None)


def test_per_level_overrides_keep_other_defaults() -> None:
    """Overriding one level leaves the others at their defaults."""
    table = ColorTable.build(
        per_level={Level.INFO: (ConsoleColor.GREEN, ConsoleColor.BLACK)}
    )

    assert table.resolve(Level.INFO) == (ConsoleColor.GREEN, ConsoleColor.BLACK)
    assert table.resolve(Level.ERROR) == (ConsoleColor.RED, None)


def test_global_color_wins_over_per_level() -> None:
    """A global foreground replaces every per-level foreground."""
    table = ColorTable.build(
        foreground=ConsoleColor.CYAN,
        per_level={Level.ERROR: (ConsoleColor.MAGENTA, ConsoleColor.WHITE)},
    )

    for level in (Level.ERROR, Level.WARNING, Level.INFO, Level.DEBUG):
        assert table.resolve(level)[0] is ConsoleColor.CYAN
    assert table.resolve(Level.ERROR)[1] is ConsoleColor.WHITE


def test_build_does_not_touch_defaults() -> None:
    """Building a table never mutates the module defaults."""
    ColorTable.build(foreground=ConsoleColor.BLUE)

    assert ColorTable().resolve(Level.ERROR) == (ConsoleColor.RED, None)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("DarkYellow", ConsoleColor.DARK_YELLOW),
        ("dark_yellow", ConsoleColor.DARK_YELLOW),
        ("RED", ConsoleColor.RED),
        ("", None),
        (None, None),
    ],
)
def test_parse_color(name, expected) -> None:
    """Names are matched ignoring case and underscores."""
    assert parse_color(name) is expected


def test_parse_color_rejects_unknown_names() -> None:
    """Names outside the sixteen console colors are rejected."""
    with pytest.raises(ConfigurationError):
        parse_color("Chartreuse")
