"""
typed_ini - Accès typé aux fichiers de configuration INI.

Modules disponibles:
- store: Lecture/écriture typée de clés (TypedIniStore, codecs)
- dotconf: Modèle de document INI conservant les commentaires
- config: Réglages du format INI (IniSettings, chargés depuis TOML/JSON)
- logging: Gestion des logs (Logger, FileLogger)
- errors: Hiérarchie d'exceptions
"""

__version__ = "1.0.0"

from typed_ini.logging import Logger, FileLogger
from typed_ini.errors import (
    ApplicationError,
    ConfigurationError,
    FileConfigurationError,
    IniParsingError,
    SettingsError,
)
from typed_ini.config import (
    SettingsLoader,
    FileSettingsLoader,
    IniSettings,
    load_settings,
)
from typed_ini.dotconf import (
    IniEntry,
    IniSectionData,
    IniDocument,
    IniDocumentStore,
    LinuxIniDocumentStore,
)
from typed_ini.store import (
    # Codecs
    TextCodec,
    StrCodec,
    BoolCodec,
    IntegerCodec,
    FloatCodec,
    Parseable,
    ParseableCodec,
    PydanticCodec,
    STR,
    BOOL,
    FLOAT,
    INT,
    BYTE,
    INT16,
    UINT16,
    INT32,
    UINT32,
    INT64,
    UINT64,
    # Store
    TypedIniStore,
    initialize_file,
    ensure_exists,
    get_entry,
    get_value,
    get_comments,
    exists,
    read_typed,
    write_value,
    write_entry,
    write_typed,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Errors
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "IniParsingError",
    "SettingsError",
    # Config
    "SettingsLoader",
    "FileSettingsLoader",
    "IniSettings",
    "load_settings",
    # DotConf
    "IniEntry",
    "IniSectionData",
    "IniDocument",
    "IniDocumentStore",
    "LinuxIniDocumentStore",
    # Store - Codecs
    "TextCodec",
    "StrCodec",
    "BoolCodec",
    "IntegerCodec",
    "FloatCodec",
    "Parseable",
    "ParseableCodec",
    "PydanticCodec",
    "STR",
    "BOOL",
    "FLOAT",
    "INT",
    "BYTE",
    "INT16",
    "UINT16",
    "INT32",
    "UINT32",
    "INT64",
    "UINT64",
    # Store - Opérations
    "TypedIniStore",
    "initialize_file",
    "ensure_exists",
    "get_entry",
    "get_value",
    "get_comments",
    "exists",
    "read_typed",
    "write_value",
    "write_entry",
    "write_typed",
]
