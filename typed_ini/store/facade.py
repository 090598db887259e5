"""Façade typée au-dessus d'un document INI.

Chaque opération relit le document depuis le disque et chaque écriture
le réécrit en entier : aucun document n'est mis en cache entre deux
appels. Il n'y a aucun verrouillage ; deux séquences lecture/écriture
concurrentes sur le même fichier peuvent perdre une mise à jour (le
dernier écrivain gagne). Les appelants concurrents doivent sérialiser
leurs accès eux-mêmes.
"""

from pathlib import Path
from typing import TypeVar

from typed_ini.config.settings import IniSettings
from typed_ini.dotconf.base import IniDocumentStore
from typed_ini.dotconf.document import IniEntry
from typed_ini.dotconf.manager import LinuxIniDocumentStore
from typed_ini.logging.base import Logger
from typed_ini.store.codecs import TextCodec
from typed_ini.store.guard import initialize_file

T = TypeVar("T")


class TypedIniStore:
    """Lecture/écriture typée de clés INI, sans état de document.

    Attributes:
        settings: Réglages d'écriture des fichiers.
        logger: Logger optionnel ; sans logger, le store est silencieux.
        document_store: Chargeur/sauvegardeur de documents.

    Example:
        >>> from typed_ini import FileLogger
        >>> store = TypedIniStore(logger=FileLogger("/tmp/typed_ini.log"))
        >>> store.write_typed("app.ini", "main", "debug", True, BOOL)
        >>> store.read_typed("app.ini", "main", "debug", BOOL)
        True
    """

    def __init__(
        self,
        settings: IniSettings | None = None,
        logger: Logger | None = None,
        document_store: IniDocumentStore | None = None
    ) -> None:
        """Initialise le store.

        Args:
            settings: Réglages INI. Si None, valeurs par défaut.
            logger: Instance de Logger optionnelle.
            document_store: Persistance des documents (DIP). Si None,
                LinuxIniDocumentStore avec les mêmes réglages.
        """
        self.settings = settings or IniSettings()
        self.logger = logger
        self.document_store = document_store or LinuxIniDocumentStore(
            self.settings
        )

    def _log_info(self, message: str) -> None:
        if self.logger:
            self.logger.log_info(message)

    def _log_warning(self, message: str) -> None:
        if self.logger:
            self.logger.log_warning(message)

    def ensure_exists(self, path: str | Path) -> bool:
        """Crée le fichier avec un commentaire unique s'il n'existe pas.

        Idempotent : un fichier existant n'est pas touché.

        Returns:
            True si le fichier vient d'être créé.

        Raises:
            OSError: Si la création échoue.
        """
        created = initialize_file(path, self.settings)
        if created:
            self._log_info(f"Fichier {path} initialisé.")
        return created

    def get_entry(
        self, path: str | Path, section: str, key: str
    ) -> IniEntry | None:
        """Retourne l'entrée complète (valeur et commentaires).

        Seul accesseur distinguant une clé absente d'une valeur vide.

        Returns:
            Copie de l'entrée, ou None si la section ou la clé manque.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
        """
        document = self.document_store.load(path)
        entry = document.get_entry(section, key)
        if entry is None:
            return None
        return entry.copy()

    def get_value(self, path: str | Path, section: str, key: str) -> str:
        """Retourne la valeur brute, ou "" si l'entrée est absente."""
        entry = self.get_entry(path, section, key)
        if entry is None:
            return ""
        return entry.value

    def get_comments(
        self, path: str | Path, section: str, key: str
    ) -> list[str]:
        """Retourne les commentaires de la clé, ou une liste vide."""
        entry = self.get_entry(path, section, key)
        if entry is None:
            return []
        return entry.comments

    def exists(self, path: str | Path, section: str, key: str) -> bool:
        """Indique si la clé porte une valeur non vide.

        Une clé présente avec une valeur vide est considérée absente ;
        utiliser get_entry pour faire la distinction.
        """
        return self.get_value(path, section, key) != ""

    def read_typed(
        self,
        path: str | Path,
        section: str,
        key: str,
        codec: TextCodec[T],
        default: T | None = None
    ) -> T | None:
        """Lit une valeur et la convertit via le codec.

        Un texte vide retourne ``default`` sans appeler le codec. Un
        texte que le codec rejette retourne aussi ``default`` : l'échec
        est journalisé en avertissement mais jamais levé.

        Args:
            path: Chemin du fichier INI.
            section: Section INI.
            key: Clé INI.
            codec: Codec du type attendu.
            default: Valeur retournée si absente ou invalide.

        Returns:
            Valeur convertie ou ``default``.
        """
        text = self.get_value(path, section, key)
        if not text:
            return default
        try:
            return codec.parse(text)
        except ValueError as e:
            # Échec d'analyse traité comme une absence, volontairement.
            self._log_warning(
                f"Valeur [{section}] {key}={text!r} illisible dans "
                f"{path} : {e}"
            )
            return default

    def write_value(
        self,
        path: str | Path,
        section: str,
        key: str,
        value: str | None
    ) -> None:
        """Écrit une valeur texte en conservant les commentaires de la clé.

        ``None`` ne fait rien : ni création de fichier, ni effacement.
        La section est créée si besoin.

        Raises:
            OSError: Si le fichier ne peut être créé, lu ou écrit.
            ValueError: Si la section, la clé ou la valeur ne peut pas
                être écrite ; le fichier n'est alors pas créé.
        """
        if value is None:
            return
        self.document_store.validate_entry(section, IniEntry(key, value))
        self.ensure_exists(path)
        document = self.document_store.load(path)
        document.set_value(section, key, value)
        self.document_store.save(path, document)
        self._log_info(f"[{section}] {key} écrit dans {path}.")

    def write_entry(
        self,
        path: str | Path,
        section: str,
        entry: IniEntry | None
    ) -> None:
        """Remplace l'entrée complète (valeur et commentaires) d'une clé.

        ``None`` ne fait rien.

        Raises:
            OSError: Si le fichier ne peut être créé, lu ou écrit.
            ValueError: Si l'entrée ne peut pas être écrite ; le fichier
                n'est alors pas créé.
        """
        if entry is None:
            return
        self.document_store.validate_entry(section, entry)
        self.ensure_exists(path)
        document = self.document_store.load(path)
        document.set_entry(section, entry)
        self.document_store.save(path, document)
        self._log_info(f"[{section}] {entry.key} remplacé dans {path}.")

    def write_typed(
        self,
        path: str | Path,
        section: str,
        key: str,
        value: T,
        codec: TextCodec[T]
    ) -> None:
        """Formate la valeur via le codec puis l'écrit avec write_value.

        ``None`` ne fait rien : le codec n'est pas appelé.
        """
        if value is None:
            return
        self.write_value(path, section, key, codec.format(value))


# Instance par défaut des fonctions du module
_default_store = TypedIniStore()


def ensure_exists(path: str | Path) -> bool:
    """Crée le fichier INI s'il n'existe pas (voir TypedIniStore)."""
    return _default_store.ensure_exists(path)


def get_entry(path: str | Path, section: str, key: str) -> IniEntry | None:
    return _default_store.get_entry(path, section, key)


def get_value(path: str | Path, section: str, key: str) -> str:
    return _default_store.get_value(path, section, key)


def get_comments(path: str | Path, section: str, key: str) -> list[str]:
    return _default_store.get_comments(path, section, key)


def exists(path: str | Path, section: str, key: str) -> bool:
    return _default_store.exists(path, section, key)


def read_typed(
    path: str | Path,
    section: str,
    key: str,
    codec: TextCodec[T],
    default: T | None = None
) -> T | None:
    return _default_store.read_typed(path, section, key, codec, default)


def write_value(
    path: str | Path, section: str, key: str, value: str | None
) -> None:
    _default_store.write_value(path, section, key, value)


def write_entry(path: str | Path, section: str, entry: IniEntry | None) -> None:
    _default_store.write_entry(path, section, entry)


def write_typed(
    path: str | Path, section: str, key: str, value: T, codec: TextCodec[T]
) -> None:
    _default_store.write_typed(path, section, key, value, codec)
