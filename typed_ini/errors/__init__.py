"""Module de gestion des erreurs."""

from typed_ini.errors.exceptions import (ApplicationError,
                                         ConfigurationError,
                                         FileConfigurationError,
                                         IniParsingError,
                                         SettingsError)


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "IniParsingError",
    "SettingsError",
]
