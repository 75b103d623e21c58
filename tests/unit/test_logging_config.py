"""Unit tests for logging configuration and the JSON formatter."""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from string_extensions.config.models import LoggingConfig
from string_extensions.logging.config import PACKAGE_LOGGER, configure_logging
from string_extensions.logging.handlers import JSONFormatter

pytestmark = pytest.mark.usefixtures("reset_package_logger")


def _record(name: str = "string_extensions.cli", msg: str = "Test message", args=()):
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=args,
        exc_info=None,
    )


def _handlers() -> list[logging.Handler]:
    return logging.getLogger(PACKAGE_LOGGER).handlers


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("info", logging.INFO),
            ("debug", logging.DEBUG),
            ("warning", logging.WARNING),
            ("DEBUG", logging.DEBUG),
        ],
    )
    def test_configures_level(self, level: str, expected: int) -> None:
        """Should set the package logger level from the config."""
        returned = configure_logging(LoggingConfig(level=level))
        assert returned.name == PACKAGE_LOGGER
        assert returned.level == expected

    def test_leaves_root_logger_alone(self) -> None:
        """Should not touch handlers on the root logger."""
        root = logging.getLogger()
        before = root.handlers[:]

        configure_logging(LoggingConfig(level="debug"))

        assert root.handlers == before

    def test_stderr_only_without_file(self) -> None:
        """Should add a single stderr handler when no file is set."""
        configure_logging(LoggingConfig(file=None))

        assert len(_handlers()) == 1
        assert _handlers()[0].stream is sys.stderr

    def test_file_handler_only(self, tmp_path: Path) -> None:
        """Should add only a rotating file handler when a file is set."""
        configure_logging(
            LoggingConfig(file=tmp_path / "strext.log", max_bytes=2048, backup_count=1)
        )

        assert len(_handlers()) == 1
        handler = _handlers()[0]
        assert isinstance(handler, RotatingFileHandler)
        assert handler.maxBytes == 2048
        assert handler.backupCount == 1

    def test_file_and_stderr(self, tmp_path: Path) -> None:
        """Should add both handlers when include_stderr is set."""
        configure_logging(
            LoggingConfig(file=tmp_path / "strext.log", include_stderr=True)
        )
        assert len(_handlers()) == 2

    def test_creates_log_directory(self, tmp_path: Path) -> None:
        """Should create missing parent directories for the log file."""
        log_dir = tmp_path / "logs" / "nested"
        configure_logging(LoggingConfig(file=log_dir / "strext.log"))
        assert log_dir.exists()

    def test_unusable_file_falls_back_to_stderr(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Should log to stderr when the log path cannot be opened."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        configure_logging(LoggingConfig(file=blocker / "strext.log"))

        assert len(_handlers()) == 1
        assert _handlers()[0].stream is sys.stderr
        assert "Could not open log file" in capsys.readouterr().err

    def test_json_format(self) -> None:
        """Should use JSONFormatter for the json format."""
        configure_logging(LoggingConfig(format="json"))
        assert isinstance(_handlers()[0].formatter, JSONFormatter)

    def test_text_format(self) -> None:
        """Should use a plain formatter for the text format."""
        configure_logging(LoggingConfig(format="text"))
        assert not isinstance(_handlers()[0].formatter, JSONFormatter)

    def test_reconfiguring_replaces_handlers(self) -> None:
        """Should not accumulate handlers across calls."""
        configure_logging(LoggingConfig(level="info"))
        configure_logging(LoggingConfig(level="debug"))
        assert len(_handlers()) == 1

    def test_file_receives_operation_context(self, tmp_path: Path) -> None:
        """Should write JSON records with operation context to the file."""
        log_file = tmp_path / "strext.log"
        configure_logging(LoggingConfig(level="debug", file=log_file, format="json"))

        logging.getLogger("string_extensions.cli.output").debug(
            "Running %s", "trim", extra={"operation": "trim"}
        )
        for handler in _handlers():
            handler.flush()

        entry = json.loads(log_file.read_text().strip())
        assert entry["message"] == "Running trim"
        assert entry["logger"] == "string_extensions.cli.output"
        assert entry["context"] == {"operation": "trim"}


class TestJSONFormatter:
    """Tests for JSONFormatter output."""

    def test_basic_log_entry(self) -> None:
        """Should produce valid JSON with required fields."""
        data = json.loads(JSONFormatter().format(_record()))

        assert "timestamp" in data
        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert data["logger"] == "string_extensions.cli"

    def test_timestamp_uses_record_created_time(self) -> None:
        """Should use record.created as a UTC ISO-8601 timestamp."""
        from datetime import datetime, timezone

        record = _record()
        record.created = 1577836800.0

        data = json.loads(JSONFormatter().format(record))

        assert datetime.fromisoformat(data["timestamp"]) == datetime(
            2020, 1, 1, tzinfo=timezone.utc
        )

    def test_message_formatting_with_args(self) -> None:
        """Should format message with arguments."""
        record = _record(msg="Rejected argument %s", args=("separator",))
        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "Rejected argument separator"

    def test_root_logger_no_logger_field(self) -> None:
        """Should not include logger field for root logger."""
        data = json.loads(JSONFormatter().format(_record(name="root")))
        assert "logger" not in data

    def test_known_fields_go_to_context(self) -> None:
        """Should copy command, operation and argument into context."""
        record = _record()
        record.command = "split"
        record.operation = "split"
        record.argument = "separator"

        data = json.loads(JSONFormatter().format(record))

        assert data["context"] == {
            "command": "split",
            "operation": "split",
            "argument": "separator",
        }

    def test_unknown_extra_fields_are_ignored(self) -> None:
        """Should leave out attributes that are not context fields."""
        record = _record()
        record.request_id = "abc"

        data = json.loads(JSONFormatter().format(record))

        assert "context" not in data
        assert "request_id" not in json.dumps(data)

    def test_none_context_values_are_omitted(self) -> None:
        """Should skip context fields set to None."""
        record = _record()
        record.command = None
        record.operation = "trim"

        data = json.loads(JSONFormatter().format(record))

        assert data["context"] == {"operation": "trim"}

    def test_exception_info(self) -> None:
        """Should include formatted exception info."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]
