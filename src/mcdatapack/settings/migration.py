"""
Settings migration system for mcdatapack.
"""

import logging
from typing import TYPE_CHECKING

from .types import ConfigVersion

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class SettingsMigrator:
    """Stamps the configuration version on every profile.

    1.0 is the first configuration layout, so there is nothing to convert
    yet: a profile stamped with any other version keeps its keys and is
    re-stamped as current, with the old version kept in app/migrated_from.
    """

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def ensure_version(self) -> None:
        """Ensure configuration version is set and handle migrations."""
        current_version = str(self.settings.value("app/version", ""))

        if not current_version:
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.sync()
            logger.info("No configuration version found, initializing configuration")
        elif current_version != ConfigVersion.CURRENT.value:
            self._migrate_config(current_version, ConfigVersion.CURRENT.value)

    def _migrate_config(self, from_version: str, to_version: str) -> None:
        """Re-stamp a profile written under another configuration version."""
        logger.warning(
            f"Configuration version {from_version} is not {to_version}, keeping stored keys"
        )
        self.settings.setValue("app/version", to_version)
        self.settings.setValue("app/migrated_from", from_version)
        self.settings.sync()
        logger.info(f"Configuration re-stamped from {from_version} to {to_version}")
