"""Module de configuration."""

from typed_ini.config.loader import (
    FileSettingsLoader,
    SettingsLoader,
    load_settings,
)
from typed_ini.config.settings import IniSettings

__all__ = [
    "IniSettings",
    "SettingsLoader",
    "FileSettingsLoader",
    "load_settings",
]
