"""
Persistent file output for the log file and the error file.

A :class:`FileSink` keeps its stream open for the whole session instead of
opening, seeking and closing the file for every entry. Each line is still
flushed before ``write`` returns, so nothing sits in a buffer when the
process dies.

The file is opened lazily: a sink that never receives a line never creates
or touches its file. What happens to a file left over from an earlier run
depends on the :class:`Disposition`.
"""

from __future__ import annotations

import threading
import time
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional, TextIO, Union

from loguru import logger

from streamlog.core import timestamp
from streamlog.core.formatter import LineFormatter, Target

if TYPE_CHECKING:
    from datetime import datetime

    from streamlog.core.level import Level

BACKUP_EXTENSION = ".bak"
BACKUP_STAMP_FORMAT = "yyyyMMddHHmmss"
BACKUP_RETRY_DELAY = 1.0


class Disposition(Enum):
    """What to do with a file that already exists when the sink opens."""

    BACKUP = "backup"
    OVERWRITE = "overwrite"
    APPEND = "append"

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class FileSink:
    """
    One persistent, append-only output stream.

    :param path: File to write to.
    :param disposition: Handling of a pre-existing file.
    :param formatter: Formatter used for the file variant of each line.
    :param utc: Use UTC for backup names.
    :param target: ``Target.FILE`` or ``Target.ERROR_FILE``.
    :param clock: Returns the current time, used for backup names.
    :param sleep: Called with the delay before retrying a taken backup name.
    """

    def __init__(
        self,
        path: Union[str, Path],
        *,
        disposition: Disposition = Disposition.BACKUP,
        formatter: Optional[LineFormatter] = None,
        utc: bool = False,
        target: Target = Target.FILE,
        clock: Optional[Callable[[], datetime]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.path = Path(path).expanduser().resolve()
        self.disposition = disposition
        self.formatter = formatter or LineFormatter()
        self.utc = utc
        self.target = target
        self.backup_path: Optional[Path] = None

        self._clock = clock or (lambda: timestamp.now(self.utc))
        self._sleep = sleep
        self._stream: Optional[TextIO] = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r}, {self.disposition.name})"

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    def open(self) -> TextIO:
        """
        Open the stream if it is not open yet and return it.

        :raises OSError: If the directory or file cannot be created.
        """
        with self._lock:
            return self._ensure_open()

    def write(self, level: Level, message: Optional[str], indent: int = 0) -> None:
        """
        Write every line of ``message`` and flush after each one.

        :param level: Level of the entry.
        :param message: Text of the entry, possibly spanning several lines.
        :param indent: Indentation level.
        :raises TimestampFormatError: If the timestamp cannot be rendered.
        :raises OSError: If the file cannot be opened or written.
        """
        lines = self.formatter.format_lines(message, level, indent, target=self.target)

        with self._lock:
            stream = self._ensure_open()
            for line in lines:
                stream.write(line + "\n")
                stream.flush()

    def close(self) -> None:
        """
        Flush and release the stream.

        Failures are reported on the diagnostic channel and never raised, so
        shutting a session down always completes.
        """
        with self._lock:
            stream, self._stream = self._stream, None
            if stream is None:
                return

            try:
                stream.flush()
            except (OSError, ValueError) as e:
                logger.debug(f"Could not flush {self.path}: {e}")

            try:
                stream.close()
            except OSError as e:
                logger.debug(f"Could not close {self.path}: {e}")
            else:
                logger.debug(f"Closed {self.path}")

    def _ensure_open(self) -> TextIO:
        if self._stream is not None:
            return self._stream

        self.path.parent.mkdir(parents=True, exist_ok=True)

        if not self.path.exists():
            mode = "x"
        elif self.disposition is Disposition.APPEND:
            mode = "a"
        elif self.disposition is Disposition.OVERWRITE:
            mode = "w"
        else:
            self.backup_path = self._backup_existing()
            mode = "x"

        self._stream = open(self.path, mode, encoding="utf-8", newline="\n")
        logger.debug(f"Opened {self.path} (mode={mode!r})")
        return self._stream

    def _backup_existing(self) -> Path:
        """Rename the existing file to a timestamped backup name."""
        backup = self._backup_name()
        while backup.exists():
            logger.debug(f"Backup name {backup.name} is taken, retrying")
            self._sleep(BACKUP_RETRY_DELAY)
            backup = self._backup_name()

        self.path.rename(backup)
        logger.info(f"Backed up {self.path.name} to {backup.name}")
        return backup

    def _backup_name(self) -> Path:
        stamp = timestamp.render(self._clock(), BACKUP_STAMP_FORMAT)
        return self.path.with_name(f"{self.path.name}.{stamp}{BACKUP_EXTENSION}")
