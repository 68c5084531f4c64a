from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QSettings

from inkpad.settings import APP_NAME


@dataclass(frozen=True)
class SettingsKeys:
    UI_THEME: str = "ui/theme"
    UI_GEOMETRY: str = "ui/geometry"
    UI_SPLITTER: str = "ui/splitter_sizes"
    UI_SHOW_PREVIEW: str = "ui/show_preview"
    UI_SHOW_OUTLINE: str = "ui/show_outline"
    EDITOR_FONT_SIZE: str = "editor/font_size"
    LAST_FILE: str = "nav/last_file"


KEYS = SettingsKeys()


def open_settings() -> QSettings:
    return QSettings(APP_NAME, APP_NAME)


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        return str(val) if val is not None else default
    except Exception:
        return default


def get_int(settings: QSettings, key: str, default: int) -> int:
    try:
        return int(settings.value(key, default))
    except Exception:
        return default


def get_bool(settings: QSettings, key: str, default: bool) -> bool:
    # QSettings hands back "true"/"false" strings on some platforms
    try:
        val = settings.value(key, default)
    except Exception:
        return default
    if isinstance(val, str):
        return val.strip().lower() in ("1", "true", "yes", "on")
    return bool(val)
