"""Global settings manager for the category browser."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from config.visual_config import TREE_INDENT_PX

logger = logging.getLogger(__name__)

# Default settings
DEFAULT_SETTINGS = {
    "tree_indentation": TREE_INDENT_PX,  # Left margin per tree depth level (px)
    "database_path": None,  # None = data/categories.db
}

# Settings file location
SETTINGS_FILE = Path(__file__).parent.parent.parent / "data" / "settings.json"


class SettingsManager(QObject):
    """Singleton manager for global application settings."""

    # Signal emitted when any setting changes
    settings_changed = pyqtSignal(str, object)  # (setting_name, new_value)

    _instance = None

    def __new__(cls, settings_file: Optional[Path] = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, settings_file: Optional[Path] = None):
        if self._initialized:
            return
        super().__init__()
        self._initialized = True
        self._settings_file = settings_file or SETTINGS_FILE
        self._settings = DEFAULT_SETTINGS.copy()
        self._load_settings()

    def _load_settings(self):
        if not self._settings_file.exists():
            return
        try:
            saved = json.loads(self._settings_file.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self._settings_file, e)
            return
        # Keys no longer in DEFAULT_SETTINGS are dropped
        self._settings.update({k: v for k, v in saved.items() if k in DEFAULT_SETTINGS})
        logger.debug("Settings loaded from %s", self._settings_file)

    def _save_settings(self):
        try:
            self._settings_file.parent.mkdir(parents=True, exist_ok=True)
            self._settings_file.write_text(json.dumps(self._settings, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save settings to %s: %s", self._settings_file, e)

    def reset(self):
        """Restore every default, emitting ``settings_changed`` for each changed key."""
        for key, value in DEFAULT_SETTINGS.items():
            self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value."""
        return self._settings.get(key, default)

    def set(self, key: str, value: Any):
        """Set a setting value and emit change signal."""
        if key in self._settings and self._settings[key] != value:
            self._settings[key] = value
            self._save_settings()
            self.settings_changed.emit(key, value)

    @property
    def tree_indentation(self) -> int:
        """Pixels of left margin per tree depth level."""
        return int(self._settings.get("tree_indentation", TREE_INDENT_PX))

    @tree_indentation.setter
    def tree_indentation(self, value: int):
        self.set("tree_indentation", max(0, int(value)))

    @property
    def database_path(self) -> Optional[Path]:
        """Configured category database, or None for the default location."""
        value = self._settings.get("database_path")
        return Path(value) if value else None

    @database_path.setter
    def database_path(self, value: Optional[Path]):
        self.set("database_path", str(value) if value else None)


# Global instance
settings = SettingsManager()
