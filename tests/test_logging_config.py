"""Tests for logging configuration."""

from __future__ import annotations

import json
import logging
import sys
from io import StringIO

import pytest

from shapepath.logging_config import StructuredFormatter, configure_logging
from shapepath.types import CommandCode, PathCmd, coord


def _record(name: str, level: int = logging.INFO, msg: str = "Test") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestStructuredFormatter:
    """Tests for StructuredFormatter JSON output."""

    @pytest.fixture
    def formatter(self) -> StructuredFormatter:
        """Create a formatter instance."""
        return StructuredFormatter()

    @pytest.fixture
    def log_record(self) -> logging.LogRecord:
        """Create a basic log record."""
        return _record("shapepath.builder", msg="Joined 3 paths")

    def test_basic_json_output(
        self, formatter: StructuredFormatter, log_record: logging.LogRecord
    ) -> None:
        """Test that output is valid JSON with required fields."""
        data = json.loads(formatter.format(log_record))

        assert "timestamp" in data
        assert data["level"] == "INFO"
        assert data["logger"] == "shapepath.builder"
        assert data["message"] == "Joined 3 paths"
        assert "category" in data

    def test_message_args_are_merged(self, formatter: StructuredFormatter) -> None:
        record = _record("shapepath.svg", msg="%d commands")
        record.args = (5,)
        assert json.loads(formatter.format(record))["message"] == "5 commands"

    @pytest.mark.parametrize(
        ("logger_name", "category"),
        [
            ("shapepath.builder", "path"),
            ("shapepath.shapes", "shape"),
            ("shapepath.shapes.polygon", "shape"),
            ("shapepath.samplers", "shape"),
            ("shapepath.svg", "svg"),
            ("shapepath.cli", "cli"),
            ("shapepath.config", "system"),
            ("unknown.logger", "system"),
        ],
    )
    def test_category_detection(
        self, formatter: StructuredFormatter, logger_name: str, category: str
    ) -> None:
        """Test category detection from logger names."""
        data = json.loads(formatter.format(_record(logger_name)))
        assert data["category"] == category, f"Failed for {logger_name}"

    def test_extra_fields_serializable(
        self, formatter: StructuredFormatter, log_record: logging.LogRecord
    ) -> None:
        """Test that serializable extra fields are included."""
        log_record.sequences = 3  # type: ignore[attr-defined]
        log_record.policy = "line"  # type: ignore[attr-defined]
        data = json.loads(formatter.format(log_record))
        assert data["extra"] == {"sequences": 3, "policy": "line"}

    def test_extra_fields_non_serializable(
        self, formatter: StructuredFormatter, log_record: logging.LogRecord
    ) -> None:
        """Test that non-serializable extra fields are converted to string."""
        log_record.custom_obj = object()  # type: ignore[attr-defined]
        data = json.loads(formatter.format(log_record))
        assert isinstance(data["extra"]["custom_obj"], str)

    def test_no_extra_key_without_extras(
        self, formatter: StructuredFormatter, log_record: logging.LogRecord
    ) -> None:
        assert "extra" not in json.loads(formatter.format(log_record))

    def test_command_count_is_top_level(
        self, formatter: StructuredFormatter, log_record: logging.LogRecord
    ) -> None:
        """The commands count is lifted out of extra."""
        log_record.commands = 7  # type: ignore[attr-defined]
        log_record.sequences = 3  # type: ignore[attr-defined]
        data = json.loads(formatter.format(log_record))
        assert data["commands"] == 7
        assert data["extra"] == {"sequences": 3}

    def test_path_command_extras_are_dumped(
        self, formatter: StructuredFormatter, log_record: logging.LogRecord
    ) -> None:
        """Path command records in extras are written as JSON objects."""
        seam = PathCmd(cmd=CommandCode.LINE, contents=[coord(1, 2)])
        log_record.seam = seam  # type: ignore[attr-defined]
        log_record.path = [PathCmd(cmd=CommandCode.CLOSE)]  # type: ignore[attr-defined]
        data = json.loads(formatter.format(log_record))
        assert data["extra"]["seam"] == {
            "cmd": "L",
            "contents": [{"tag": "CoordV", "contents": [1, 2]}],
        }
        assert data["extra"]["path"] == [{"cmd": "Z", "contents": []}]

    def test_category_needs_module_boundary(self, formatter: StructuredFormatter) -> None:
        data = json.loads(formatter.format(_record("shapepath.builders_extra")))
        assert data["category"] == "system"

    def test_timestamp_from_record(
        self, formatter: StructuredFormatter, log_record: logging.LogRecord
    ) -> None:
        log_record.created = 0.0
        data = json.loads(formatter.format(log_record))
        assert data["timestamp"].startswith("1970-01-01T00:00:00")

    def test_exception_info(self, formatter: StructuredFormatter) -> None:
        """Test that exception info is included."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = _record("test", level=logging.ERROR, msg="Error occurred")
        record.exc_info = exc_info
        data = json.loads(formatter.format(record))
        assert "ValueError" in data["exception"]
        assert "Test error" in data["exception"]


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_json_format_output(self) -> None:
        """Test that JSON format produces valid JSON."""
        output = StringIO()
        configure_logging(json_format=True, log_level=logging.INFO, stream=output)

        logging.getLogger("shapepath.test").info("Test message")

        data = json.loads(output.getvalue().strip())
        assert data["message"] == "Test message"

    def test_plain_format_output(self) -> None:
        """Test that plain format produces human-readable output."""
        output = StringIO()
        configure_logging(json_format=False, log_level=logging.INFO, stream=output)

        logging.getLogger("shapepath.test").info("Test message")

        content = output.getvalue()
        assert "Test message" in content
        assert "INFO" in content
        with pytest.raises(json.JSONDecodeError):
            json.loads(content.strip())

    def test_log_level_filtering(self) -> None:
        """Test that log level filtering works."""
        output = StringIO()
        configure_logging(json_format=False, log_level=logging.WARNING, stream=output)

        logger = logging.getLogger("shapepath.test")
        logger.info("hidden")
        logger.warning("shown")

        content = output.getvalue()
        assert "hidden" not in content
        assert "shown" in content

    def test_level_by_name(self) -> None:
        configure_logging(log_level="debug", stream=StringIO())
        assert logging.getLogger().level == logging.DEBUG

    def test_replaces_existing_handlers(self) -> None:
        configure_logging(stream=StringIO())
        configure_logging(stream=StringIO())
        assert len(logging.getLogger().handlers) == 1
