"""
Merge explicit parameters with a configuration file into :class:`LogSettings`.

Both sources use the external setting names (``LogLevel``, ``FilePath``,
``WithTimestamp``...). Names are matched case-insensitively. Explicit values
other than ``None`` win over file values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from loguru import logger

from streamlog.core.colors import ColorPair, parse_color
from streamlog.core.exceptions import ConfigurationError
from streamlog.core.formatter import DEFAULT_TAB_SIZE, DEFAULT_TIMESTAMP_FORMAT
from streamlog.core.level import Level, parse_level
from streamlog.core.settings import LogSettings
from streamlog.sinks.file_sink import Disposition

if TYPE_CHECKING:
    from collections.abc import Mapping

    from streamlog.config.config_type_hint import RawConfig

KNOWN_KEYS: tuple[str, ...] = (
    "LogLevel",
    "Console",
    "File",
    "ErrorFile",
    "FilePath",
    "ErrorFilePath",
    "Backup",
    "Overwrite",
    "Append",
    "WithLogLevel",
    "WithTimestamp",
    "TimestampFormat",
    "UtcTime",
    "TabSize",
    "ForegroundColor",
    "BackgroundColor",
    "LevelColors",
)
_KEY_LOOKUP: dict[str, str] = {key.lower(): key for key in KNOWN_KEYS}

DISPOSITION_KEYS: dict[str, Disposition] = {
    "Backup": Disposition.BACKUP,
    "Overwrite": Disposition.OVERWRITE,
    "Append": Disposition.APPEND,
}

_TRUE = frozenset({"true", "yes", "on", "1"})
_FALSE = frozenset({"false", "no", "off", "0", ""})


def normalize_keys(config: Optional[Mapping[str, Any]], source: str) -> dict[str, Any]:
    """Map keys to their canonical spelling, dropping unknown ones."""
    normalized: dict[str, Any] = {}
    for key, value in (config or {}).items():
        canonical = _KEY_LOOKUP.get(str(key).lower())
        if canonical is None:
            logger.warning(f"Ignoring unknown setting '{key}' from {source}")
            continue
        normalized[canonical] = value
    return normalized


def _as_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
    raise ConfigurationError(f"{key} must be a boolean, got {value!r}")


def _as_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be an integer, got {value!r}") from None


def _disposition(config: Mapping[str, Any], source: str) -> Optional[Disposition]:
    selected = [
        disposition
        for key, disposition in DISPOSITION_KEYS.items()
        if config.get(key) is not None and _as_bool(key, config[key])
    ]
    if len(selected) > 1:
        names = ", ".join(d.display_name for d in selected)
        raise ConfigurationError(
            f"Backup, Overwrite and Append are mutually exclusive ({source} sets {names})"
        )
    return selected[0] if selected else None


def _level_colors(value: Any) -> dict[Level, ColorPair]:
    if not isinstance(value, dict):
        raise ConfigurationError(f"LevelColors must be a mapping, got {value!r}")

    colors: dict[Level, ColorPair] = {}
    for name, pair in value.items():
        level = parse_level(name)
        if level is Level.NONE:
            raise ConfigurationError("LevelColors cannot configure level None")
        if not isinstance(pair, dict):
            raise ConfigurationError(
                f"LevelColors.{name} must be a mapping, got {pair!r}"
            )
        pair = {str(k).lower(): v for k, v in pair.items()}
        colors[level] = (
            parse_color(pair.get("foregroundcolor")),
            parse_color(pair.get("backgroundcolor")),
        )
    return colors


def resolve_settings(
    explicit: Optional[RawConfig] = None,
    file_config: Optional[RawConfig] = None,
) -> LogSettings:
    """
    Build the settings of a session from both sources.

    :param explicit: Parameters given by the caller; ``None`` values are unset.
    :param file_config: Settings read from a configuration file.
    :raises ConfigurationError: If a value is invalid or more than one of
                                Backup, Overwrite and Append is selected.
    :return: Settings ready for :meth:`Session.init`.

    Example:
        >>> resolve_settings({"LogLevel": "Debug"}, {"File": True, "Append": True})
        LogSettings(level=<Level.DEBUG: 4>, console=False, file=True, ...)
    """
    given = {
        key: value
        for key, value in normalize_keys(explicit, "parameters").items()
        if value is not None
    }
    from_file = normalize_keys(file_config, "configuration file")

    # The disposition group is taken as a whole from one source.
    disposition = _disposition(given, "parameters") or _disposition(
        from_file, "configuration file"
    )

    merged: dict[str, Any] = {**from_file, **given}

    def flag(key: str) -> bool:
        value = merged.get(key)
        return False if value is None else _as_bool(key, value)

    tab_size = _as_int("TabSize", merged.get("TabSize", DEFAULT_TAB_SIZE))
    timestamp_format = merged.get("TimestampFormat") or DEFAULT_TIMESTAMP_FORMAT

    return LogSettings(
        level=parse_level(merged.get("LogLevel", Level.INFO)),
        console=flag("Console"),
        file=flag("File"),
        error_file=flag("ErrorFile"),
        file_path=merged.get("FilePath") or None,
        error_file_path=merged.get("ErrorFilePath") or None,
        disposition=disposition,
        with_level=flag("WithLogLevel"),
        with_timestamp=flag("WithTimestamp"),
        timestamp_format=str(timestamp_format),
        utc=flag("UtcTime"),
        tab_size=tab_size,
        foreground=parse_color(merged.get("ForegroundColor")),
        background=parse_color(merged.get("BackgroundColor")),
        level_colors=_level_colors(merged.get("LevelColors") or {}),
    )
