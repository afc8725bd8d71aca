from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

LOG_EXTENSION = ".log"
ERROR_MARKER = ".err"
FALLBACK_NAME = "streamlog"


def invoking_program() -> Optional[Path]:
    """
    Return the path of the script this process runs, if there is one.

    Interactive sessions and ``python -c`` have no script path.
    """
    argv0 = sys.argv[0] if sys.argv else ""
    if not argv0 or argv0 in ("-", "-c"):
        return None
    return Path(argv0).resolve()


def format_log_path(
    directory: Union[str, Path, None] = None,
    name: Optional[str] = None,
    extension: Optional[str] = None,
    *,
    error_file: bool = False,
) -> Path:
    """
    Build a log file path following the default naming convention.

    The directory and base name default to those of the invoking program,
    so ``/opt/jobs/sync.py`` logs to ``/opt/jobs/sync.log`` and
    ``/opt/jobs/sync.err.log``.

    :param directory: Directory of the file.
    :param name: Base name of the file, without extension.
    :param extension: Replaces ``.log``; error files keep the ``.err`` marker.
    :param error_file: Build the error file path instead of the log path.
    :return: The absolute path.

    Example:
        >>> format_log_path("/var/log", "job", error_file=True)
        PosixPath('/var/log/job.err.log')
    """
    program = invoking_program()

    if directory is None:
        directory = program.parent if program else Path.cwd()
    if not name:
        name = program.stem if program else FALLBACK_NAME

    suffix = LOG_EXTENSION
    if extension:
        suffix = extension if extension.startswith(".") else f".{extension}"
    if error_file:
        suffix = ERROR_MARKER + suffix

    return Path(directory).expanduser().resolve().joinpath(name + suffix)


def default_log_path(error_file: bool = False) -> Path:
    return format_log_path(error_file=error_file)
