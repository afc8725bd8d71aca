from __future__ import annotations

import json
from typing import TYPE_CHECKING, Optional

import yaml
from loguru import logger

from streamlog.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

    from streamlog.config.config_type_hint import RawConfig

JSON_SUFFIXES = frozenset({".json"})


def read_config(file_path: Optional[Path], /) -> RawConfig:
    """
    Read a YAML or JSON configuration file.

    A missing file is not an error: there is simply nothing to merge.

    :param file_path: The Path object of the configuration file.
    :raises ConfigurationError: If the file cannot be parsed or does not
                                hold a mapping.
    :return: The settings found in the file, possibly empty.
    """
    if file_path is None or not file_path.exists():
        logger.debug(f"No configuration file at {file_path}")
        return {}

    with open(file_path, encoding="utf-8") as file:
        try:
            if file_path.suffix.lower() in JSON_SUFFIXES:
                config = json.load(file)
            else:
                config = yaml.safe_load(file)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Error reading configuration file {file_path}: {e}"
            ) from e

    if config is None:
        return {}

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Configuration file {file_path} must contain a mapping, "
            f"got {type(config).__name__}"
        )

    logger.debug(f"Loaded configuration from {file_path}")
    return config
