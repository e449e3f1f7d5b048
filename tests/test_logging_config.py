"""Tests for logging configuration."""

import logging
import logging.handlers
from pathlib import Path

import pytest

from mcdatapack.output import FileWriter
from mcdatapack.settings import AppSettings
from mcdatapack.utils.logging_config import ColoredFormatter, CSVFormatter, setup_logging


def _record(message: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("mcdatapack.test", level, __file__, 10, message, None, None)


class TestFormatters:
    """Test console and CSV formatters."""

    def test_colored_formatter_wraps_level(self) -> None:
        """Test only the level name is colored."""
        formatter = ColoredFormatter(fmt="%(levelname)s %(message)s")
        text = formatter.format(_record("hello", logging.WARNING))
        assert text == "\033[33mWARNING\033[0m hello"

    def test_csv_formatter_escapes_quotes(self) -> None:
        """Test quotes in the message are doubled."""
        text = CSVFormatter().format(_record('say "hi"'))
        assert text.endswith('"say ""hi"""')
        assert ';"mcdatapack.test";"10";' in text


@pytest.mark.usefixtures("restore_logging")
class TestSetupLogging:
    """Test handlers installed by setup_logging."""

    def test_console_only(self, settings: AppSettings) -> None:
        """Test the default setup has one console handler at INFO."""
        settings.console_use_colors = False
        setup_logging(settings)

        root = logging.getLogger()
        assert logging.getLogger("mcdatapack").level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
        assert root.handlers[0].level == logging.INFO

    def test_no_handlers_when_disabled(self, settings: AppSettings) -> None:
        """Test disabling console and file logging leaves no handlers."""
        settings.console_logging = False
        setup_logging(settings)
        assert logging.getLogger().handlers == []

    def test_file_logging(
        self, settings: AppSettings, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test file logging writes CSV lines to the default log path."""
        monkeypatch.chdir(tmp_path)
        settings.console_logging = False
        settings.file_logging = True
        setup_logging(settings)

        logging.getLogger("mcdatapack.test").info("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        log_file = tmp_path / "logs" / "mcdatapack.csv"
        assert log_file.is_file()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_file_level_and_path(self, settings: AppSettings, tmp_path: Path) -> None:
        """Test the configured file path and level are used."""
        log_file = tmp_path / "nested" / "compile.csv"
        settings.console_logging = False
        settings.file_logging = True
        settings.file_log_level = "WARNING"
        settings.log_file_path = log_file
        setup_logging(settings)

        (handler,) = logging.getLogger().handlers
        assert isinstance(handler, logging.handlers.RotatingFileHandler)
        assert handler.level == logging.WARNING

        logging.getLogger("mcdatapack.test").info("below the file level")
        logging.getLogger("mcdatapack.test").warning("at the file level")
        handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "at the file level" in text
        assert "below the file level" not in text


class TestFileWriterLogging:
    """Test the per-file debug lines of FileWriter."""

    def test_logs_each_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test every written file gets a debug line by default."""
        with caplog.at_level(logging.DEBUG, logger="mcdatapack"):
            FileWriter().write_file(tmp_path / "a.txt", "x")
        assert [r.getMessage() for r in caplog.records] == [f"Wrote {tmp_path / 'a.txt'} (1 bytes)"]

    def test_quiet_writer(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test log_files=False writes without logging."""
        with caplog.at_level(logging.DEBUG, logger="mcdatapack"):
            FileWriter(log_files=False).write_json(tmp_path / "a.json", {"a": 1})
        assert caplog.records == []
        assert (tmp_path / "a.json").is_file()
