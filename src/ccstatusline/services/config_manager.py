"""Status line configuration manager wrapping QSettings."""

import logging
import math
from datetime import timedelta
from pathlib import Path

from PySide6.QtCore import QObject, Signal, Slot, QSettings

from ccstatusline.types.render import WidgetItem

logger = logging.getLogger(__name__)

ORGANIZATION = "ccstatusline"
APPLICATION = "settings"

# Default values
DEFAULTS = {
    "general/projectsDir": "~/.claude/projects",
    "blocks/sessionDurationHours": 5,
    "blocks/scanAllProjects": False,
    "display/widgets": "model,context-percentage,tokens-total,block-timer",
    "display/separator": " | ",
    "display/colors": True,
    "advanced/debugLogging": False,
}

_WIDGET_FLAGS = ("raw", "inverse")

# Longest block length accepted from settings
MAX_SESSION_HOURS = 24 * 7


class ConfigManager(QObject):
    """Persistent status line settings stored as an INI file.

    Without an explicit path the file lives in the per-user config location
    (~/.config/ccstatusline/settings.ini on Linux).
    """

    settings_changed = Signal(str)  # key

    def __init__(self, parent=None, settings_path: str | Path | None = None):
        super().__init__(parent)
        if settings_path is not None:
            self._settings = QSettings(str(settings_path), QSettings.Format.IniFormat)
        else:
            self._settings = QSettings(
                QSettings.Format.IniFormat,
                QSettings.Scope.UserScope,
                ORGANIZATION,
                APPLICATION,
            )

    @property
    def file_name(self) -> str:
        return self._settings.fileName()

    @Slot(str, result=str)
    def get_string(self, key: str) -> str:
        val = self._settings.value(key, DEFAULTS.get(key, ""))
        # Unquoted INI values containing commas come back as lists
        if isinstance(val, list):
            return ",".join(str(v) for v in val)
        return str(val)

    @Slot(str, result=int)
    def get_int(self, key: str) -> int:
        val = self._settings.value(key, DEFAULTS.get(key, 0))
        try:
            return int(val)
        except (ValueError, TypeError):
            logger.debug("Invalid integer for %s: %r", key, val)
            return DEFAULTS.get(key, 0)

    @Slot(str, result=float)
    def get_float(self, key: str) -> float:
        val = self._settings.value(key, DEFAULTS.get(key, 0.0))
        try:
            return float(val)
        except (ValueError, TypeError):
            logger.debug("Invalid number for %s: %r", key, val)
            return float(DEFAULTS.get(key, 0.0))

    @Slot(str, result=bool)
    def get_bool(self, key: str) -> bool:
        val = self._settings.value(key, DEFAULTS.get(key, False))
        if isinstance(val, bool):
            return val
        if isinstance(val, str):
            return val.lower() in ("true", "1", "yes")
        return bool(val)

    @Slot(str, str)
    def set_string(self, key: str, value: str):
        self._settings.setValue(key, value)
        self.settings_changed.emit(key)

    @Slot(str, int)
    def set_int(self, key: str, value: int):
        self._settings.setValue(key, value)
        self.settings_changed.emit(key)

    @Slot(str, float)
    def set_float(self, key: str, value: float):
        self._settings.setValue(key, value)
        self.settings_changed.emit(key)

    @Slot(str, bool)
    def set_bool(self, key: str, value: bool):
        self._settings.setValue(key, value)
        self.settings_changed.emit(key)

    def sync(self):
        """Flush pending writes to disk."""
        self._settings.sync()

    # Derived settings

    def projects_dir(self) -> Path:
        return Path(self.get_string("general/projectsDir")).expanduser()

    def session_duration(self) -> timedelta:
        """Block length, falling back to the default when out of range.

        Non-finite, non-positive and values above a week are rejected.
        """
        hours = self.get_float("blocks/sessionDurationHours")
        if not math.isfinite(hours) or not 0 < hours <= MAX_SESSION_HOURS:
            logger.debug("Invalid session duration %r, using default", hours)
            hours = DEFAULTS["blocks/sessionDurationHours"]
        return timedelta(hours=hours)

    def get_widget_items(self) -> list[WidgetItem]:
        return parse_widget_list(self.get_string("display/widgets"))

    def set_widget_items(self, items: list[WidgetItem]):
        self.set_string("display/widgets", format_widget_list(items))


def parse_widget_list(text: str) -> list[WidgetItem]:
    """Parse "model,context-percentage:inverse,tokens-total:raw" into items.

    Unknown flags are ignored; empty entries are skipped.
    """
    items: list[WidgetItem] = []
    for entry in text.split(","):
        entry = entry.strip()
        if not entry:
            continue
        widget_type, *flags = entry.split(":")
        flags = {f.strip().lower() for f in flags}
        items.append(WidgetItem(
            type=widget_type.strip(),
            raw_value="raw" in flags,
            inverse="inverse" in flags,
        ))
    return items


def format_widget_list(items: list[WidgetItem]) -> str:
    entries = []
    for item in items:
        flags = [f for f in _WIDGET_FLAGS
                 if (f == "raw" and item.raw_value) or (f == "inverse" and item.inverse)]
        entries.append(":".join([item.type, *flags]))
    return ",".join(entries)
