"""
Settings package for mcdatapack.

Persistent configuration backed by Qt's QSettings.

Usage:
    from mcdatapack.settings import AppSettings

    settings = AppSettings()
    settings.output_path = Path("build")
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .output import OutputSettings
from .logging import LoggingSettings
from .base import SettingsSection

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "OutputSettings",
    "LoggingSettings",
    "SettingsSection",
]
