"""
Shared plumbing for settings subsystems.
"""

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class SettingsSection:
    """One group of keys ("<section>/<name>") inside a QSettings store.

    QSettings hands values back as strings when they come from an INI file
    and as native types from other backends, so every read goes through a
    typed getter with a default.
    """

    section = ""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _key(self, name: str) -> str:
        return f"{self.section}/{name}"

    def _get_str(self, name: str, default: str = "") -> str:
        value = self.settings.value(self._key(name), default)
        return str(value) if value is not None else default

    def _get_bool(self, name: str, default: bool = False) -> bool:
        value = self.settings.value(self._key(name), default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _get_int(self, name: str, default: int) -> int:
        value = self.settings.value(self._key(name), default)
        try:
            return int(str(value)) if value is not None else default
        except (ValueError, TypeError):
            return default

    def _set(self, name: str, value: Any) -> None:
        self.settings.setValue(self._key(name), value)
        self.settings.sync()
