"""
Output-related settings for mcdatapack.
"""

import logging
from pathlib import Path
from typing import Optional

from .base import SettingsSection

logger = logging.getLogger(__name__)

DEFAULT_PACK_FORMAT = 5
DEFAULT_COMPILE_WORKERS = 8


class OutputSettings(SettingsSection):
    """Manages where and how datapacks are compiled."""

    section = "output"

    @property
    def output_path(self) -> Optional[Path]:
        """Get default root folder datapacks compile into."""
        path_str = self._get_str("path", "")
        return Path(path_str) if path_str else None

    @output_path.setter
    def output_path(self, value: Optional[Path]) -> None:
        """Set default output folder."""
        self._set("path", str(value) if value else "")

    @property
    def pack_format(self) -> int:
        """Get pack_format used when a datapack doesn't set one."""
        return self._get_int("pack_format", DEFAULT_PACK_FORMAT)

    @pack_format.setter
    def pack_format(self, value: int) -> None:
        """Set default pack_format."""
        if value >= 1:
            self._set("pack_format", value)
        else:
            logger.warning(
                f"Invalid pack format: {value}, keeping current: {self.pack_format}"
            )

    @property
    def compile_workers(self) -> int:
        """Get number of threads used to compile namespaces."""
        return self._get_int("compile_workers", DEFAULT_COMPILE_WORKERS)

    @compile_workers.setter
    def compile_workers(self, value: int) -> None:
        """Set number of compile threads."""
        if value >= 1:
            self._set("compile_workers", value)
        else:
            logger.warning(
                f"Invalid compile workers: {value}, keeping current: {self.compile_workers}"
            )

    @property
    def pretty_json(self) -> bool:
        """Check if JSON files are written indented."""
        return self._get_bool("pretty_json", True)

    @pretty_json.setter
    def pretty_json(self, value: bool) -> None:
        """Set indented JSON output."""
        self._set("pretty_json", value)
