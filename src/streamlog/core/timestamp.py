"""
Timestamp rendering with custom date/time patterns.

Formats use the pattern language of classic console tooling rather than
``strftime``: ``yyyy-MM-dd HH:mm:ss``, ``yyyyMMddHHmmss``, ``dddd, MMMM d``
and so on. Letters that are not specifiers are copied as is; quoted text
and backslash escapes are always literal.

Example:
    >>> from datetime import datetime
    >>> render(datetime(2024, 3, 9, 14, 5, 7), "yyyy-MM-dd HH:mm:ss")
    '2024-03-09 14:05:07'
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from streamlog.core.exceptions import TimestampFormatError

if TYPE_CHECKING:
    from collections.abc import Iterator

MAX_FRACTION_DIGITS = 7

_MONTHS: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_WEEKDAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Single-character formats expand to a full pattern.
_STANDARD_FORMATS: dict[str, str] = {
    "d": "MM/dd/yyyy",
    "D": "dddd, dd MMMM yyyy",
    "f": "dddd, dd MMMM yyyy HH:mm",
    "F": "dddd, dd MMMM yyyy HH:mm:ss",
    "g": "MM/dd/yyyy HH:mm",
    "G": "MM/dd/yyyy HH:mm:ss",
    "M": "MMMM dd",
    "m": "MMMM dd",
    "o": "yyyy'-'MM'-'dd'T'HH':'mm':'ss'.'fffffffK",
    "O": "yyyy'-'MM'-'dd'T'HH':'mm':'ss'.'fffffffK",
    "s": "yyyy'-'MM'-'dd'T'HH':'mm':'ss",
    "t": "HH:mm",
    "T": "HH:mm:ss",
    "u": "yyyy'-'MM'-'dd HH':'mm':'ss'Z'",
    "Y": "yyyy MMMM",
    "y": "yyyy MMMM",
}

_SPECIFIERS = frozenset("yMdhHmsfFtzK")


def now(utc: bool = False) -> datetime:
    """Return the current time as an aware datetime, in UTC or local time."""
    if utc:
        return datetime.now(timezone.utc)
    return datetime.now().astimezone()


def render(moment: datetime, fmt: str) -> str:
    """
    Render ``moment`` with a custom or standard pattern.

    :param moment: The time to render.
    :param fmt: Pattern such as ``yyyy-MM-dd HH:mm:ss`` or a single
                standard format character such as ``s``.
    :raises TimestampFormatError: If the pattern cannot be rendered.
    :return: The rendered text.
    """
    if not fmt or not fmt.strip():
        raise TimestampFormatError(fmt, "format is empty")

    pattern = fmt
    if len(fmt) == 1:
        try:
            pattern = _STANDARD_FORMATS[fmt]
        except KeyError:
            raise TimestampFormatError(fmt, "unknown standard format") from None

    return "".join(_render_pattern(moment, pattern, fmt))


def validate(fmt: str, utc: bool = False) -> str:
    """
    Check that ``fmt`` renders by rendering the current time once.

    :raises TimestampFormatError: If the pattern cannot be rendered.
    :return: The current time rendered with ``fmt``.
    """
    return render(now(utc), fmt)


def _render_pattern(moment: datetime, pattern: str, fmt: str) -> Iterator[str]:
    i = 0
    size = len(pattern)

    while i < size:
        char = pattern[i]

        if char in ("'", '"'):
            end = pattern.find(char, i + 1)
            if end < 0:
                raise TimestampFormatError(fmt, "unterminated quoted literal")
            yield pattern[i + 1 : end]
            i = end + 1
            continue

        if char == "\\":
            if i + 1 >= size:
                raise TimestampFormatError(fmt, "dangling escape character")
            yield pattern[i + 1]
            i += 2
            continue

        if char == "%":
            if i + 1 >= size or pattern[i + 1] == "%":
                raise TimestampFormatError(fmt, "dangling '%'")
            following = pattern[i + 1]
            if following in _SPECIFIERS:
                yield _specifier(moment, following, 1, fmt)
            else:
                yield following
            i += 2
            continue

        if char in _SPECIFIERS:
            count = 1
            while i + count < size and pattern[i + count] == char:
                count += 1
            yield _specifier(moment, char, count, fmt)
            i += count
            continue

        yield char
        i += 1


def _specifier(moment: datetime, char: str, count: int, fmt: str) -> str:
    if char == "y":
        year = moment.year
        if count == 1:
            return str(year % 100)
        if count == 2:
            return f"{year % 100:02d}"
        return str(year).zfill(count)

    if char == "M":
        if count <= 2:
            return str(moment.month).zfill(count)
        name = _MONTHS[moment.month - 1]
        return name[:3] if count == 3 else name

    if char == "d":
        if count <= 2:
            return str(moment.day).zfill(count)
        name = _WEEKDAYS[moment.weekday()]
        return name[:3] if count == 3 else name

    if char == "h":
        return str(moment.hour % 12 or 12).zfill(min(count, 2))

    if char == "H":
        return str(moment.hour).zfill(min(count, 2))

    if char == "m":
        return str(moment.minute).zfill(min(count, 2))

    if char == "s":
        return str(moment.second).zfill(min(count, 2))

    if char in ("f", "F"):
        if count > MAX_FRACTION_DIGITS:
            raise TimestampFormatError(
                fmt, f"more than {MAX_FRACTION_DIGITS} fraction digits"
            )
        digits = f"{moment.microsecond:06d}0"[:count]
        return digits if char == "f" else digits.rstrip("0")

    if char == "t":
        marker = "AM" if moment.hour < 12 else "PM"
        return marker[0] if count == 1 else marker

    if char == "z":
        sign, hours, minutes = _split_offset(moment.utcoffset())
        if count == 1:
            return f"{sign}{hours}"
        if count == 2:
            return f"{sign}{hours:02d}"
        return f"{sign}{hours:02d}:{minutes:02d}"

    # "K": time zone information, empty for naive values
    if moment.tzinfo is None:
        return ""
    if moment.tzinfo is timezone.utc:
        return "Z"
    sign, hours, minutes = _split_offset(moment.utcoffset())
    return f"{sign}{hours:02d}:{minutes:02d}"


def _split_offset(offset: timedelta | None) -> tuple[str, int, int]:
    total = int((offset or timedelta(0)).total_seconds()) // 60
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total), 60)
    return sign, hours, minutes
