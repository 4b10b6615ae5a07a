"""Application configuration manager wrapping QSettings."""

import logging
from pathlib import Path

from PySide6.QtCore import QObject, Signal, Slot, QSettings

from claude_dashboard.services.claude_paths import ClaudePaths

logger = logging.getLogger(__name__)

# Default values
DEFAULTS = {
    "general/claudeHome": "~/.claude",
    "general/recentSessionLimit": 10,
}


class ConfigManager(QObject):
    """Dashboard settings: where Claude's data lives and how much of it to show."""

    settings_changed = Signal(str)  # key

    def __init__(self, parent=None):
        super().__init__(parent)
        self._settings = QSettings()

    @Slot(str, result=str)
    def get_string(self, key: str) -> str:
        return str(self._settings.value(key, DEFAULTS.get(key, "")))

    @Slot(str, result=int)
    def get_int(self, key: str) -> int:
        val = self._settings.value(key, DEFAULTS.get(key, 0))
        try:
            return int(val)
        except (ValueError, TypeError):
            logger.warning("Ignoring non-integer setting %s=%r", key, val)
            return DEFAULTS.get(key, 0)

    @Slot(str, str)
    def set_string(self, key: str, value: str):
        self._settings.setValue(key, value)
        self.settings_changed.emit(key)

    @Slot(str, int)
    def set_int(self, key: str, value: int):
        self._settings.setValue(key, value)
        self.settings_changed.emit(key)

    def recent_session_limit(self) -> int:
        return self.get_int("general/recentSessionLimit")

    def claude_paths(self) -> ClaudePaths:
        """ClaudePaths for the configured Claude home directory."""
        home = self.get_string("general/claudeHome")
        if home == DEFAULTS["general/claudeHome"]:
            return ClaudePaths.from_home()
        return ClaudePaths(Path(home).expanduser())
