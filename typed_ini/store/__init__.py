"""Accès typé aux valeurs d'un fichier INI.

Fonctions du module (sans état, un chargement complet par appel):
    - ensure_exists: Crée le fichier s'il n'existe pas
    - get_entry, get_value, get_comments, exists: Lectures
    - read_typed: Lecture convertie via un TextCodec
    - write_value, write_entry, write_typed: Écritures

Example:
    >>> from typed_ini.store import write_typed, read_typed, UINT16
    >>> write_typed("app.ini", "net", "port", 8080, UINT16)
    >>> read_typed("app.ini", "net", "port", UINT16)
    8080
"""

from typed_ini.store.codecs import (
    BOOL,
    BYTE,
    FLOAT,
    INT,
    INT16,
    INT32,
    INT64,
    STR,
    UINT16,
    UINT32,
    UINT64,
    BoolCodec,
    FloatCodec,
    IntegerCodec,
    Parseable,
    ParseableCodec,
    PydanticCodec,
    StrCodec,
    TextCodec,
)
from typed_ini.store.facade import (
    TypedIniStore,
    ensure_exists,
    exists,
    get_comments,
    get_entry,
    get_value,
    read_typed,
    write_entry,
    write_typed,
    write_value,
)
from typed_ini.store.guard import initialize_file

__all__ = [
    # Codecs
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
    # Store
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
