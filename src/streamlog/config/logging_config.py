"""
Internal diagnostics of streamlog itself.

streamlog reports what it does (streams opened, backups made, close
failures) through loguru under the ``streamlog`` name. The package disables
that name on import; call :func:`configure_diagnostics` to see it.
"""

from __future__ import annotations

import sys
from contextlib import suppress
from typing import Any, Optional

from loguru import logger

DIAGNOSTICS_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Id loguru gives the stderr handler it installs on import.
DEFAULT_HANDLER_ID = 0


def configure_diagnostics(level: str = "DEBUG", sink: Any = sys.stderr) -> int:
    """
    Send streamlog diagnostics to ``sink``.

    Only the loguru default handler is removed, so diagnostics are not
    printed twice; handlers added by the host application stay in place.

    :param level: Minimum loguru level, e.g. ``DEBUG`` or ``WARNING``.
    :param sink: Anything loguru accepts as a sink.
    :return: The id of the added handler.
    """
    with suppress(ValueError):
        logger.remove(DEFAULT_HANDLER_ID)
    handler_id = logger.add(
        sink,
        level=level.upper(),
        format=DIAGNOSTICS_FORMAT,
        colorize=sink is sys.stderr,
    )
    logger.enable("streamlog")
    return handler_id


def disable_diagnostics(handler_id: Optional[int] = None) -> None:
    """
    Silence streamlog diagnostics again.

    :param handler_id: Handler returned by :func:`configure_diagnostics`,
                       removed when given.
    """
    logger.disable("streamlog")
    if handler_id is not None:
        logger.remove(handler_id)
