"""
Session state: resolved settings plus the open file streams.

A session starts uninitialized (no target, nothing written). ``init``
replaces the whole state from a :class:`LogSettings`; ``reset`` closes the
streams and goes back to the uninitialized state. Re-initializing an active
session closes its streams first, so handles never leak across inits.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, TextIO

from loguru import logger

from streamlog.core import timestamp
from streamlog.core.colors import ColorTable
from streamlog.core.exceptions import ConfigurationError
from streamlog.core.formatter import MAX_TAB_SIZE, MIN_TAB_SIZE, LineFormatter, Target
from streamlog.core.level import Level, is_enabled
from streamlog.core.paths import default_log_path
from streamlog.core.settings import LogSettings
from streamlog.sinks.console_sink import ConsoleSink
from streamlog.sinks.file_sink import Disposition, FileSink


class Session:
    """
    Holds everything one logging session needs.

    :param stream: Stream of the console target, standard output when omitted.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._set_defaults()

    def _set_defaults(self) -> None:
        self.initialized = False
        self.settings = LogSettings(level=Level.NONE)
        self.level = Level.NONE
        self.console_enabled = False
        self.file_enabled = False
        self.error_file_enabled = False
        self.file_path: Optional[Path] = None
        self.error_file_path: Optional[Path] = None
        self.disposition = Disposition.BACKUP
        self.formatter = LineFormatter()
        self.colors = ColorTable()
        self.console_sink = ConsoleSink(self.colors, self.formatter, self._stream)
        self.file_sink: Optional[FileSink] = None
        self.error_file_sink: Optional[FileSink] = None

    def init(self, settings: Optional[LogSettings] = None) -> None:
        """
        Replace the whole session state from ``settings``.

        Settings are not validated when the level is ``Level.NONE``, since
        nothing will ever be written.

        :param settings: Resolved settings, defaults when omitted.
        :raises ConfigurationError: If the tab size is out of range.
        :raises TimestampFormatError: If the timestamp format cannot render.
        """
        settings = settings or LogSettings()

        if settings.level is not Level.NONE:
            if not MIN_TAB_SIZE <= settings.tab_size <= MAX_TAB_SIZE:
                raise ConfigurationError(
                    f"TabSize must be between {MIN_TAB_SIZE} and {MAX_TAB_SIZE}, "
                    f"got {settings.tab_size}"
                )
            timestamp.validate(settings.timestamp_format, settings.utc)

        self.close_streams()
        self._set_defaults()

        self.settings = settings
        self.level = settings.level
        self.disposition = settings.disposition or Disposition.BACKUP
        self.formatter = LineFormatter(
            tab_size=settings.tab_size,
            with_level=settings.with_level,
            with_timestamp=settings.with_timestamp,
            timestamp_format=settings.timestamp_format,
            utc=settings.utc,
        )
        self.colors = ColorTable.build(
            settings.foreground,
            settings.background,
            settings.level_colors,
        )
        self.console_sink = ConsoleSink(self.colors, self.formatter, self._stream)
        self.initialized = True

        if self.level is Level.NONE:
            logger.debug("Session initialized with level None, all targets disabled")
            return

        self._resolve_targets(settings)

        if self.file_enabled:
            self.file_sink = self._make_file_sink(self.file_path, Target.FILE)
        if self.error_file_enabled:
            self.error_file_sink = self._make_file_sink(
                self.error_file_path, Target.ERROR_FILE
            )

        logger.debug(
            f"Session initialized: level={self.level.display_name}, "
            f"console={self.console_enabled}, file={self.file_path}, "
            f"error_file={self.error_file_path}, disposition={self.disposition.name}"
        )

    def _resolve_targets(self, settings: LogSettings) -> None:
        console = settings.console
        file = settings.file
        error_file = settings.error_file

        if not (console or file or error_file):
            # Paths alone select their targets; nothing at all means console.
            file = settings.file_path is not None
            error_file = settings.error_file_path is not None
            console = not (file or error_file)

        self.console_enabled = console
        self.file_enabled = file
        self.error_file_enabled = error_file

        if file:
            self.file_path = (
                Path(settings.file_path).expanduser().resolve()
                if settings.file_path is not None
                else default_log_path()
            )
        if error_file:
            self.error_file_path = (
                Path(settings.error_file_path).expanduser().resolve()
                if settings.error_file_path is not None
                else default_log_path(error_file=True)
            )

    def _make_file_sink(self, path: Path, target: Target) -> FileSink:
        return FileSink(
            path,
            disposition=self.disposition,
            formatter=self.formatter,
            utc=self.settings.utc,
            target=target,
        )

    def is_eligible(self, target: Target, level: Level) -> bool:
        """Tell whether an entry at ``level`` goes to ``target``."""
        if not is_enabled(level, self.level):
            return False
        if target is Target.CONSOLE:
            return self.console_enabled
        if target is Target.FILE:
            return self.file_enabled and self.file_sink is not None
        return (
            level is Level.ERROR
            and self.error_file_enabled
            and self.error_file_sink is not None
        )

    def close_streams(self) -> None:
        """Close the open file streams; close failures are never raised."""
        for sink in (self.file_sink, self.error_file_sink):
            if sink is not None:
                sink.close()

    def reset(self) -> None:
        """Close the streams and return to the uninitialized state."""
        self.close_streams()
        self._set_defaults()
        logger.debug("Session reset")

    def snapshot(self) -> dict[str, Any]:
        """
        Describe the current settings with their external names.

        Color tables are left out; only the global colors are reported.
        """
        settings = self.settings
        return {
            "LogLevel": self.level.display_name,
            "Console": self.console_enabled,
            "File": self.file_enabled,
            "ErrorFile": self.error_file_enabled,
            "FilePath": str(self.file_path) if self.file_path else None,
            "ErrorFilePath": str(self.error_file_path) if self.error_file_path else None,
            "Disposition": self.disposition.display_name,
            "WithLogLevel": settings.with_level,
            "WithTimestamp": settings.with_timestamp,
            "TimestampFormat": settings.timestamp_format,
            "UtcTime": settings.utc,
            "TabSize": settings.tab_size,
            "ForegroundColor": (
                settings.foreground.display_name if settings.foreground else None
            ),
            "BackgroundColor": (
                settings.background.display_name if settings.background else None
            ),
        }
