"""
Entry point for callers: routes each entry to the eligible targets.

Example:
    >>> from streamlog import Logger, LogSettings, Level
    >>> with Logger() as log:
    ...     log.init(LogSettings(level=Level.DEBUG, file=True, file_path="job.log"))
    ...     log.info("starting")
    ...     log.debug("details", indent=1)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Optional

from streamlog.core.formatter import Target
from streamlog.core.level import Level
from streamlog.core.session import Session

if TYPE_CHECKING:
    from types import TracebackType

    from streamlog.core.settings import LogSettings


def flatten_error(error: Any) -> str:
    """
    Turn an error object into a single message.

    Error records that wrap an exception (an ``exception`` attribute) give
    the message of that exception; exceptions give their own message;
    objects with a string ``message`` attribute or mappings with a string
    ``"message"`` key give that string; anything else gives ``str(error)``. The result is stripped and falls back to the
    type name when empty, so every error produces a line.
    """
    wrapped = getattr(error, "exception", None)
    if isinstance(wrapped, BaseException):
        text = str(wrapped)
    elif isinstance(error, BaseException):
        text = str(error)
    elif isinstance(getattr(error, "message", None), str):
        text = error.message
    elif isinstance(error, Mapping) and isinstance(error.get("message"), str):
        text = error["message"]
    else:
        text = str(error)

    text = text.strip()
    if text:
        return text

    source = wrapped if isinstance(wrapped, BaseException) else error
    return type(source).__name__


def _as_error_list(errors: Any) -> list[Any]:
    if errors is None:
        return []
    if isinstance(errors, (str, bytes, BaseException, Mapping)):
        return [errors]
    if isinstance(errors, Iterable):
        return list(errors)
    return [errors]


class Logger:
    """
    Routes entries to the console, the log file and the error file.

    Each logger owns its :class:`Session`, so several independent loggers
    can live in one process.
    """

    def __init__(self, session: Optional[Session] = None) -> None:
        self.session = session or Session()

    def __enter__(self) -> Logger:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.reset()

    def init(self, settings: Optional[LogSettings] = None) -> Logger:
        self.session.init(settings)
        return self

    def reset(self) -> None:
        self.session.reset()

    def log(
        self,
        level: Level = Level.INFO,
        message: Optional[str] = None,
        *,
        indent: int = 0,
        no_console: bool = False,
        no_file: bool = False,
    ) -> None:
        """
        Send one entry to every eligible target.

        An empty message without indentation is a no-op. The error file only
        ever receives ``Level.ERROR`` entries, independently of the log file.

        :param level: Level of the entry.
        :param message: Text, possibly spanning several lines.
        :param indent: Indentation level, 0 to 255.
        :param no_console: Skip the console for this entry.
        :param no_file: Skip both files for this entry.
        """
        if not message and indent == 0:
            return

        session = self.session

        if not no_console and session.is_eligible(Target.CONSOLE, level):
            session.console_sink.write(level, message, indent)

        if no_file:
            return

        if session.is_eligible(Target.FILE, level):
            session.file_sink.write(level, message, indent)

        if session.is_eligible(Target.ERROR_FILE, level):
            session.error_file_sink.write(level, message, indent)

    def debug(self, message: Optional[str], **kwargs: Any) -> None:
        self.log(Level.DEBUG, message, **kwargs)

    def info(self, message: Optional[str], **kwargs: Any) -> None:
        self.log(Level.INFO, message, **kwargs)

    def warning(self, message: Optional[str], **kwargs: Any) -> None:
        self.log(Level.WARNING, message, **kwargs)

    def error(self, message: Optional[str], **kwargs: Any) -> None:
        self.log(Level.ERROR, message, **kwargs)

    def log_errors(self, errors: Any, *, raw: bool = False, **kwargs: Any) -> None:
        """
        Log one message per error object at ``Level.ERROR``.

        :param errors: One error or an iterable of errors; a string counts
                       as a single error.
        :param raw: Log ``str(error)`` instead of the flattened message.
        :param kwargs: ``indent``, ``no_console`` and ``no_file`` as for :meth:`log`.
        """
        for error in _as_error_list(errors):
            message = str(error) if raw else flatten_error(error)
            self.log(Level.ERROR, message, **kwargs)

    def exception(self, error: BaseException, **kwargs: Any) -> None:
        self.log_errors([error], **kwargs)
