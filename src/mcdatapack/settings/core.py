"""
Core settings management for mcdatapack.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

from .migration import SettingsMigrator
from .validation import SettingsValidator
from .output import OutputSettings
from .logging import LoggingSettings
from .types import ConfigVersion, ValidationResult

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Settings live in the platform's native store by default, or in an INI
    file when `settings_file` is given. Every profile is a separate group.
    """

    def __init__(
        self,
        profile: str = "default",
        settings_file: Optional[Union[str, Path]] = None,
    ):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: INI file to use instead of the native store
        """
        if settings_file is not None:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("mcdatapack", "mcdatapack")
        self.profile = profile

        # Use profile as a group: mcdatapack/<profile>/...
        self.settings.beginGroup(profile)

        # Initialize subsystems
        self._migrator = SettingsMigrator(self.settings)
        self._validator = SettingsValidator(self)
        self._output = OutputSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        self._migrator.ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def output(self) -> OutputSettings:
        """Access output settings subsystem."""
        return self._output

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === OUTPUT SETTINGS (DELEGATED) ===

    @property
    def output_path(self) -> Optional[Path]:
        """Get default output folder."""
        return self._output.output_path

    @output_path.setter
    def output_path(self, value: Optional[Path]) -> None:
        """Set default output folder."""
        self._output.output_path = value

    @property
    def pack_format(self) -> int:
        """Get default pack_format."""
        return self._output.pack_format

    @pack_format.setter
    def pack_format(self, value: int) -> None:
        """Set default pack_format."""
        self._output.pack_format = value

    @property
    def compile_workers(self) -> int:
        """Get number of compile threads."""
        return self._output.compile_workers

    @compile_workers.setter
    def compile_workers(self, value: int) -> None:
        """Set number of compile threads."""
        self._output.compile_workers = value

    @property
    def pretty_json(self) -> bool:
        """Check if JSON files are written indented."""
        return self._output.pretty_json

    @pretty_json.setter
    def pretty_json(self, value: bool) -> None:
        """Set indented JSON output."""
        self._output.pretty_json = value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        """Set console logging enabled state."""
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        """Set console logging level."""
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        """Set console color usage."""
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        """Set file logging enabled state."""
        self._logging.file_logging = value

    @property
    def file_log_level(self) -> str:
        """Get file logging level."""
        return self._logging.file_log_level

    @file_log_level.setter
    def file_log_level(self, value: str) -> None:
        """Set file logging level."""
        self._logging.file_log_level = value

    @property
    def log_file_path(self) -> str:
        """Get CSV log file path."""
        return self._logging.log_file_path

    @log_file_path.setter
    def log_file_path(self, value: Optional[Union[str, Path]]) -> None:
        """Set CSV log file path (empty restores the default)."""
        self._logging.log_file_path = value

    @property
    def log_compiled_files(self) -> bool:
        """Check if compile logs one debug line per written file."""
        return self._logging.log_compiled_files

    @log_compiled_files.setter
    def log_compiled_files(self, value: bool) -> None:
        """Set per-file compile logging."""
        self._logging.log_compiled_files = value

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
