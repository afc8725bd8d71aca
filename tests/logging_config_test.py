from io import StringIO
from pathlib import Path

from loguru import logger

import streamlog
from streamlog.config.logging_config import configure_diagnostics, disable_diagnostics
from streamlog.core.level import Level
from streamlog.sinks.file_sink import FileSink


def test_plain_import_keeps_diagnostics_silent(tmp_path: Path) -> None:
    """Importing the package exposes its API and mutes its loguru output."""
    assert isinstance(streamlog.Logger, type)
    assert streamlog.Level.INFO.display_name == "Info"

    buffer = StringIO()
    handler_id = logger.add(buffer, level="DEBUG")
    try:
        with streamlog.Logger() as log:
            log.init(streamlog.LogSettings(file_path=tmp_path / "app.log"))
            log.info("x")
    finally:
        logger.remove(handler_id)

    assert buffer.getvalue() == ""
    assert (tmp_path / "app.log").read_text(encoding="utf-8") == "x\n"


def test_diagnostics_are_silent_by_default(tmp_path: Path) -> None:
    """A file sink says nothing through loguru unless diagnostics are on."""
    buffer = StringIO()
    handler_id = logger.add(buffer, level="DEBUG")
    try:
        sink = FileSink(tmp_path / "app.log")
        sink.write(Level.INFO, "x")
        sink.close()
    finally:
        logger.remove(handler_id)

    assert buffer.getvalue() == ""


def test_configure_diagnostics_reports_backups(tmp_path: Path) -> None:
    """Backups and closes are reported once diagnostics are configured."""
    path = tmp_path / "app.log"
    path.write_text("old\n", encoding="utf-8")
    buffer = StringIO()

    handler_id = configure_diagnostics("DEBUG", buffer)
    try:
        sink = FileSink(path)
        sink.write(Level.INFO, "new")
        sink.close()
    finally:
        disable_diagnostics(handler_id)

    output = buffer.getvalue()
    assert "Backed up app.log to app.log." in output
    assert f"Closed {path.resolve()}" in output


def test_configure_diagnostics_keeps_host_handlers() -> None:
    """Handlers added by the host application survive and keep receiving."""
    host = StringIO()
    host_id = logger.add(host, level="INFO", format="{message}")
    handler_id = configure_diagnostics("DEBUG", StringIO())
    try:
        logger.info("host message")
    finally:
        disable_diagnostics(handler_id)
        logger.remove(host_id)

    assert host.getvalue() == "host message\n"
