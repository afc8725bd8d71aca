import json
import re
from pathlib import Path

from typer.testing import CliRunner

from streamlog.cli import app

runner = CliRunner()


def test_log_to_console() -> None:
    """Without target options the message goes to standard output, indented."""
    result = runner.invoke(app, ["log", "hello\nworld", "--indent", "1", "--tab-size", "2"])

    assert result.exit_code == 0, result.output
    assert result.stdout == "  hello\n  world\n"


def test_debug_is_filtered_by_default() -> None:
    """The default Info threshold drops debug messages."""
    result = runner.invoke(app, ["log", "details", "--level", "Debug"])

    assert result.exit_code == 0
    assert result.stdout == ""


def test_log_to_files(tmp_path: Path) -> None:
    """Two invocations append prefixed lines to the log and error files."""
    log_path = tmp_path / "app.log"
    err_path = tmp_path / "app.err.log"
    args = [
        "--file-path", str(log_path),
        "--error-file-path", str(err_path),
        "--with-log-level",
        "--with-timestamp",
        "--timestamp-format", "yyyy-MM-dd",
        "--append",
    ]

    first = runner.invoke(app, ["log", "started", *args])
    second = runner.invoke(app, ["log", "failed", "--level", "Error", *args])

    assert first.exit_code == 0 and second.exit_code == 0
    assert first.stdout == "" and second.stdout == ""
    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}:INFO : started", lines[0])
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}:ERROR: failed", lines[1])
    assert err_path.read_text(encoding="utf-8").endswith(":ERROR: failed\n")


def test_error_payload(tmp_path: Path) -> None:
    """--error flattens the message before writing it to the error file."""
    err_path = tmp_path / "app.err.log"

    result = runner.invoke(
        app, ["log", "  trimmed  ", "--error", "--error-file-path", str(err_path)]
    )

    assert result.exit_code == 0
    assert err_path.read_text(encoding="utf-8") == "trimmed\n"


def test_config_file_is_merged(tmp_path: Path) -> None:
    """Settings from --config fill in what the command line leaves unset."""
    log_path = tmp_path / "from_config.log"
    config = tmp_path / "streamlog.yaml"
    config.write_text(
        f"LogLevel: Debug\nFilePath: {log_path.as_posix()}\nTabSize: 1\n",
        encoding="utf-8",
    )

    result = runner.invoke(
        app, ["log", "deep", "--level", "Debug", "--indent", "3", "--config", str(config)]
    )

    assert result.exit_code == 0, result.output
    assert log_path.read_text(encoding="utf-8") == "   deep\n"


def test_invalid_timestamp_format_fails() -> None:
    """A timestamp format that cannot render exits with code 1."""
    result = runner.invoke(app, ["log", "x", "--timestamp-format", "Q"])

    assert result.exit_code == 1
    assert "Invalid timestamp format" in result.output


def test_conflicting_dispositions_fail(tmp_path: Path) -> None:
    """Two dispositions at once are rejected before any file is created."""
    result = runner.invoke(
        app, ["log", "x", "--file-path", str(tmp_path / "a.log"), "--backup", "--overwrite"]
    )

    assert result.exit_code == 1
    assert "mutually exclusive" in result.output
    assert not (tmp_path / "a.log").exists()


def test_show_config_json(tmp_path: Path) -> None:
    """show-config prints the resolved session as JSON without opening files."""
    log_path = tmp_path / "app.log"

    result = runner.invoke(
        app, ["show-config", "--file-path", str(log_path), "--log-level", "Warning"]
    )

    assert result.exit_code == 0, result.output
    snapshot = json.loads(result.stdout)
    assert snapshot["LogLevel"] == "Warning"
    assert snapshot["File"] is True
    assert snapshot["Console"] is False
    assert not log_path.exists()


def test_show_config_xml() -> None:
    """show-config can print an indented XML document."""
    result = runner.invoke(app, ["show-config", "--format", "xml", "--pretty"])

    assert result.exit_code == 0
    assert result.stdout.startswith("<StreamlogConfig>\n")
    assert "<Console>true</Console>" in result.stdout


def test_show_config_unknown_format() -> None:
    """Unknown output formats fail."""
    result = runner.invoke(app, ["show-config", "--format", "ini"])

    assert result.exit_code == 1


def test_log_path(tmp_path: Path) -> None:
    """log-path prints the formatted error file path."""
    result = runner.invoke(
        app,
        ["log-path", "--directory", str(tmp_path), "--name", "job", "--error-file"],
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == str(tmp_path.resolve() / "job.err.log")
