"""
streamlog: leveled logging to the console, a log file and an error file.

File streams stay open for the lifetime of a session and every line is
flushed as it is written.
"""

from loguru import logger as _diagnostics

from streamlog.core.colors import ColorTable, ConsoleColor
from streamlog.core.exceptions import (
    ConfigurationError,
    StreamlogError,
    TimestampFormatError,
)
from streamlog.core.introspection import dump_config
from streamlog.core.level import Level, is_enabled, parse_level, rank
from streamlog.core.paths import default_log_path, format_log_path
from streamlog.core.session import Session
from streamlog.core.settings import LogSettings
from streamlog.logger import Logger, flatten_error
from streamlog.sinks.file_sink import Disposition

# Diagnostics stay silent unless the host opts in.
_diagnostics.disable("streamlog")

__version__ = "0.3.0"

__all__ = [
    "ColorTable",
    "ConfigurationError",
    "ConsoleColor",
    "Disposition",
    "Level",
    "LogSettings",
    "Logger",
    "Session",
    "StreamlogError",
    "TimestampFormatError",
    "default_log_path",
    "dump_config",
    "flatten_error",
    "format_log_path",
    "is_enabled",
    "parse_level",
    "rank",
]
