"""Module DotConf : modèle de document INI et sa persistance.

Classes principales:
    - IniEntry: Clé, valeur et commentaires d'une entrée
    - IniSectionData: Section [nom] et ses entrées
    - IniDocument: Document INI complet en mémoire
    - IniDocumentStore: Interface abstraite de chargement/sauvegarde
    - LinuxIniDocumentStore: Implémentation conservant les commentaires

Example:
    >>> from typed_ini.dotconf import LinuxIniDocumentStore, IniEntry
    >>> store = LinuxIniDocumentStore()
    >>> document = store.load("/etc/app.ini")
    >>> document.set_entry("main", IniEntry("mode", "fast", ["Mode"]))
    >>> store.save("/etc/app.ini", document)
"""

from typed_ini.dotconf.base import (
    COMMENT_PREFIXES,
    ENCODING,
    READ_ENCODING,
    IniDocumentStore,
)
from typed_ini.dotconf.document import IniDocument, IniEntry, IniSectionData
from typed_ini.dotconf.manager import LinuxIniDocumentStore

__all__ = [
    "COMMENT_PREFIXES",
    "ENCODING",
    "READ_ENCODING",
    "IniEntry",
    "IniSectionData",
    "IniDocument",
    "IniDocumentStore",
    "LinuxIniDocumentStore",
]
