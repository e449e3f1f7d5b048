"""
Logging settings for mcdatapack.

Covers where log records go (console, CSV file), at which level, and how
chatty a compile is: with `log_compiled_files` on, every written file gets
its own debug line.
"""

import logging
from pathlib import Path

from .base import SettingsSection

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE = "logs/mcdatapack.csv"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(SettingsSection):
    """Console and file handler options plus compile verbosity."""

    section = "logging"

    def _get_level(self, name: str, default: str) -> str:
        level = self._get_str(name, default).upper()
        return level if level in LEVELS else default

    def _set_level(self, name: str, value: str) -> None:
        level = str(value).upper()
        if level not in LEVELS:
            logger.warning(f"Invalid log level for {self._key(name)}: {value}, ignored")
            return
        self._set(name, level)

    # === CONSOLE ===

    @property
    def console_logging(self) -> bool:
        return self._get_bool("console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set("console_enabled", value)

    @property
    def console_log_level(self) -> str:
        """Lowest level the console handler shows (INFO by default)."""
        return self._get_level("console_level", "INFO")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._set_level("console_level", value)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool("console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set("console_use_colors", value)

    # === FILE ===

    @property
    def file_logging(self) -> bool:
        return self._get_bool("file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set("file_enabled", value)

    @property
    def file_log_level(self) -> str:
        """Lowest level written to the CSV log (DEBUG by default)."""
        return self._get_level("file_level", "DEBUG")

    @file_log_level.setter
    def file_log_level(self, value: str) -> None:
        self._set_level("file_level", value)

    @property
    def log_file_path(self) -> str:
        """CSV log location, relative to the working directory unless absolute."""
        return self._get_str("file_path", "") or DEFAULT_LOG_FILE

    @log_file_path.setter
    def log_file_path(self, value: str | Path | None) -> None:
        """Set the CSV log location; an empty value restores the default."""
        self._set("file_path", str(value) if value else "")

    @property
    def log_file_absolute_path(self) -> Path:
        return Path(self.log_file_path).resolve()

    # === COMPILE ===

    @property
    def log_compiled_files(self) -> bool:
        """Emit one debug line per file written during compile."""
        return self._get_bool("compiled_files", True)

    @log_compiled_files.setter
    def log_compiled_files(self, value: bool) -> None:
        self._set("compiled_files", value)
