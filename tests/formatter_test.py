from datetime import datetime

import pytest

from streamlog.core.exceptions import TimestampFormatError
from streamlog.core.formatter import LineFormatter, Target, split_lines
from streamlog.core.level import Level

MOMENT = datetime(2024, 3, 9, 14, 5, 7)


def test_split_lines() -> None:
    """Both line endings split; None is one empty line."""
    assert split_lines("line1\nline2") == ["line1", "line2"]
    assert split_lines("line1\r\nline2\n") == ["line1", "line2", ""]
    assert split_lines("single") == ["single"]
    assert split_lines(None) == [""]


def test_default_formatter_is_identity() -> None:
    """Without timestamp, level tag or indentation a line is unchanged."""
    formatter = LineFormatter()

    for line in ["hello", "", "  keeps spaces  ", "a:b: c"]:
        assert formatter.format_file(line, Level.INFO) == line
        assert formatter.format_console(line) == line


def test_indentation_uses_tab_size() -> None:
    """One indentation level is tab_size spaces."""
    formatter = LineFormatter(tab_size=2)

    assert formatter.indent_prefix(0) == ""
    assert formatter.indent_prefix(3) == "      "
    assert formatter.format_console("x", 1) == "  x"


@pytest.mark.parametrize("indent", [-1, 256])
def test_indent_out_of_range(indent: int) -> None:
    """Negative and oversized indentation levels are rejected."""
    with pytest.raises(ValueError):
        LineFormatter().indent_prefix(indent)


def test_timestamp_and_level() -> None:
    """Timestamp and tag are joined by a colon before the text."""
    formatter = LineFormatter(
        with_level=True, with_timestamp=True, timestamp_format="yyyy-MM-dd"
    )

    assert (
        formatter.format_file("disk full", Level.ERROR, moment=MOMENT)
        == "2024-03-09:ERROR: disk full"
    )


def test_only_one_prefix() -> None:
    """A single prefix is joined to the text by a colon and a space."""
    with_level = LineFormatter(with_level=True, tab_size=2)
    with_timestamp = LineFormatter(with_timestamp=True, timestamp_format="HH:mm")

    assert with_level.format_file("msg", Level.WARNING, 1) == "WARN :   msg"
    assert with_timestamp.format_file("msg", Level.INFO, moment=MOMENT) == "14:05: msg"


def test_console_never_gets_prefixes() -> None:
    """The console variant only indents, even with prefixes configured."""
    formatter = LineFormatter(with_level=True, with_timestamp=True, tab_size=2)

    lines = formatter.format_lines("a\nb", Level.ERROR, 1, target=Target.CONSOLE)

    assert lines == ["  a", "  b"]


def test_multiline_file_message() -> None:
    """line1/line2 with indent 1 and tab size 2 give two indented lines."""
    formatter = LineFormatter(tab_size=2)

    lines = formatter.format_lines("line1\nline2", Level.INFO, 1, target=Target.FILE)

    assert lines == ["  line1", "  line2"]


def test_bad_timestamp_format_fails_at_entry_time() -> None:
    """An unrenderable format fails when a line is formatted."""
    formatter = LineFormatter(with_timestamp=True, timestamp_format="'unterminated")

    with pytest.raises(TimestampFormatError):
        formatter.format_lines("x", Level.INFO, target=Target.FILE)
