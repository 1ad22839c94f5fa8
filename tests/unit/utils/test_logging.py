"""Unit tests for cast_schedule.utils.logging."""

import io
import logging
import os
import sys
from pathlib import Path

import pytest

from cast_schedule.config.settings import CastScheduleSettings, LoggingSettings
from cast_schedule.utils.logging import (
    VERBOSE,
    AutoColoredFormatter,
    TimestampedFileHandler,
    get_log_level,
    setup_logging,
)

pytestmark = pytest.mark.usefixtures("clean_settings_env")


class TestLogLevels:
    """Tests for the custom VERBOSE level."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("VERBOSE", 15), ("verbose", 15), ("DEBUG", logging.DEBUG), ("warning", logging.WARNING)],
    )
    def test_get_log_level_when_name_given_then_numeric_level(self, name: str, expected: int) -> None:
        assert get_log_level(name) == expected

    def test_get_log_level_when_unknown_then_raises_attribute_error(self) -> None:
        with pytest.raises(AttributeError):
            get_log_level("CHATTY")

    def test_verbose_when_level_enabled_then_record_emitted(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("tests.verbose")

        with caplog.at_level(VERBOSE, logger="tests.verbose"):
            logger.verbose("laid out %d rectangles", 3)  # type: ignore[attr-defined]

        assert caplog.records[-1].levelname == "VERBOSE"
        assert caplog.records[-1].getMessage() == "laid out 3 rectangles"


class _Terminal(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestAutoColoredFormatter:
    def test_format_when_colors_disabled_then_plain_text(self) -> None:
        formatter = AutoColoredFormatter("%(levelname)s - %(message)s", enable_colors=False)
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)

        assert formatter.format(record) == "ERROR - boom"

    def test_format_when_color_terminal_then_level_name_colored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        # Arrange
        monkeypatch.setattr(sys, "stderr", _Terminal())
        monkeypatch.setenv("TERM", "xterm-256color")
        formatter = AutoColoredFormatter("%(levelname)s - %(message)s")
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)

        # Act
        formatted = formatter.format(record)

        # Assert
        assert formatted == "\033[33mWARNING\033[0m - careful"

    def test_format_when_dumb_terminal_then_plain_text(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stderr", _Terminal())
        monkeypatch.setenv("TERM", "dumb")
        formatter = AutoColoredFormatter("%(levelname)s - %(message)s")
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "hi", None, None)

        assert formatter.format(record) == "INFO - hi"


class TestTimestampedFileHandler:
    def test_handler_when_too_many_files_then_oldest_removed(self, tmp_path: Path) -> None:
        # Arrange
        for index in range(4):
            old_log = tmp_path / f"cast_schedule_2022010{index}_000000.log"
            old_log.write_text("old")
            os.utime(old_log, (1_600_000_000 + index, 1_600_000_000 + index))

        # Act
        handler = TimestampedFileHandler(tmp_path, prefix="cast_schedule", max_files=2)
        handler.close()

        # Assert
        assert len(list(tmp_path.glob("cast_schedule_*.log"))) == 2
        assert Path(handler.baseFilename).exists()


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_setup_logging_when_called_then_console_handler_at_configured_level(
        self, reset_package_logger: logging.Logger
    ) -> None:
        settings = CastScheduleSettings(logging=LoggingSettings(console_level="WARNING"))

        logger = setup_logging(settings)

        assert logger is reset_package_logger
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.WARNING
        assert logger.propagate is False

    def test_setup_logging_when_level_overridden_then_override_wins(
        self, reset_package_logger: logging.Logger
    ) -> None:
        logger = setup_logging(CastScheduleSettings(), console_level="VERBOSE")

        assert logger.handlers[0].level == VERBOSE

    def test_setup_logging_when_called_twice_then_handlers_replaced(
        self, reset_package_logger: logging.Logger
    ) -> None:
        settings = CastScheduleSettings()

        setup_logging(settings)
        logger = setup_logging(settings)

        assert len(logger.handlers) == 1

    def test_setup_logging_when_file_enabled_then_log_file_written(
        self, tmp_path: Path, reset_package_logger: logging.Logger
    ) -> None:
        # Arrange
        log_dir = tmp_path / "logs"
        settings = CastScheduleSettings(
            logging=LoggingSettings(file_enabled=True, file_directory=str(log_dir), file_level="INFO")
        )

        # Act
        logger = setup_logging(settings)
        logging.getLogger("cast_schedule.layout").info("hello from layout")
        for handler in logger.handlers:
            handler.flush()

        # Assert
        log_files = list(log_dir.glob("cast_schedule_*.log"))
        assert len(log_files) == 1
        assert "hello from layout" in log_files[0].read_text()

    def test_setup_logging_when_called_then_third_party_quietened(
        self, reset_package_logger: logging.Logger
    ) -> None:
        setup_logging(CastScheduleSettings(logging=LoggingSettings(third_party_level="ERROR")))

        assert logging.getLogger("PIL").level == logging.ERROR
