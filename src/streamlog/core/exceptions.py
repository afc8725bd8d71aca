from __future__ import annotations


class StreamlogError(Exception):
    """Base class for every error raised by streamlog."""


class ConfigurationError(StreamlogError, ValueError):
    """
    A setting could not be accepted.

    Raised when a session is initialized, never while an entry is written,
    except for timestamp formats that only fail at render time.
    """


class TimestampFormatError(ConfigurationError):
    """The configured timestamp format cannot render a date."""

    def __init__(self, fmt: str, reason: str) -> None:
        super().__init__(f"Invalid timestamp format {fmt!r}: {reason}")
        self.fmt = fmt
        self.reason = reason
