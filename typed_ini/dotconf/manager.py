"""Lecture et écriture de documents INI avec conservation des commentaires.

Ce module fournit LinuxIniDocumentStore. configparser ne conserve pas
les commentaires ; on réutilise donc seulement ses expressions
régulières de section et d'option pour découper chaque ligne, et le
document est reconstruit puis réécrit en entier.

Grammaire supportée : en-têtes ``[section]``, lignes ``key = value``
(``=`` ou ``:``), lignes de commentaire (``;`` ou ``#``) et lignes vides.
"""

import configparser
from pathlib import Path

from typed_ini.config.settings import IniSettings
from typed_ini.dotconf.base import (
    COMMENT_PREFIXES,
    ENCODING,
    READ_ENCODING,
    IniDocumentStore,
)
from typed_ini.dotconf.document import IniDocument, IniEntry
from typed_ini.errors.exceptions import IniParsingError
from typed_ini.logging.base import Logger

_SECTION_RE = configparser.RawConfigParser.SECTCRE
_OPTION_RE = configparser.RawConfigParser.OPTCRE


class LinuxIniDocumentStore(IniDocumentStore):
    """Charge et sauvegarde des IniDocument en UTF-8.

    Attributes:
        settings: Conventions d'écriture (préfixe de commentaire,
            séparateur).
        logger: Logger optionnel pour tracer les lectures/écritures.

    Example:
        >>> store = LinuxIniDocumentStore()
        >>> document = store.load(Path("/etc/app.ini"))
        >>> document.set_value("main", "retries", "3")
        >>> store.save(Path("/etc/app.ini"), document)
    """

    def __init__(
        self,
        settings: IniSettings | None = None,
        logger: Logger | None = None
    ) -> None:
        """Initialise le store.

        Args:
            settings: Réglages d'écriture. Si None, valeurs par défaut.
            logger: Instance de Logger optionnelle.
        """
        self.settings = settings or IniSettings()
        self.logger = logger

    def load(self, path: str | Path) -> IniDocument:
        """Lit un fichier INI et construit son document.

        Les commentaires en attente sont rattachés à l'élément qui les
        suit (en-tête de section ou clé) ; ceux qui restent en fin de
        fichier vont dans ``trailing_comments``.

        Args:
            path: Chemin du fichier INI.

        Returns:
            Document correspondant au fichier.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            IniParsingError: Si une ligne n'est pas reconnue ou si une
                clé précède tout en-tête de section.
        """
        with open(path, "r", encoding=READ_ENCODING) as f:
            lines = f.read().splitlines()

        document = IniDocument()
        pending: list[str] = []
        current = None

        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.strip()
            if not line:
                continue

            if line[0] in COMMENT_PREFIXES:
                pending.append(raw_line.lstrip()[1:])
                continue

            header = _SECTION_RE.match(line)
            if header:
                current = document.section(header.group("header").strip())
                current.comments.extend(pending)
                pending = []
                continue

            option = _OPTION_RE.match(line)
            key = option.group("option").strip() if option else ""
            if current is None or not key:
                raise IniParsingError(str(path), line_number, raw_line)

            value = (option.group("value") or "").strip()
            current.set_entry(IniEntry(key, value, pending))
            pending = []

        document.trailing_comments = pending

        if self.logger:
            self.logger.log_info(f"Fichier {path} lu avec succès.")
        return document

    def save(self, path: str | Path, document: IniDocument) -> None:
        """Réécrit entièrement le fichier avec le document.

        Le contenu est généré avant l'ouverture du fichier : un document
        invalide lève ValueError sans toucher au fichier existant.

        Args:
            path: Chemin du fichier de destination.
            document: Document à écrire.

        Raises:
            ValueError: Si un nom ou une valeur ne peut pas être écrit
                sur une seule ligne relisible.
        """
        content = self.to_ini(document)

        with open(path, "w", encoding=ENCODING) as f:
            f.write(content)

        if self.logger:
            self.logger.log_info(f"Fichier {path} écrit avec succès.")

    def to_ini(self, document: IniDocument) -> str:
        """Génère le contenu INI d'un document.

        Args:
            document: Document à convertir.

        Returns:
            Contenu INI formaté complet.

        Raises:
            ValueError: Si un nom ou une valeur n'est pas représentable.
        """
        lines: list[str] = []

        for section in document.sections():
            _check_section_name(section.name)
            if lines:
                lines.append("")
            lines.extend(self._comment_lines(section.comments))
            lines.append(f"[{section.name}]")

            for entry in section.entries.values():
                _check_key(entry.key)
                _check_value(entry.key, entry.value)
                lines.extend(self._comment_lines(entry.comments))
                lines.append(
                    f"{entry.key}{self.settings.delimiter}{entry.value}"
                )

        if document.trailing_comments:
            if lines:
                lines.append("")
            lines.extend(self._comment_lines(document.trailing_comments))

        return "\n".join(lines) + "\n" if lines else ""

    def validate_entry(self, section: str, entry: IniEntry) -> None:
        """Vérifie section, clé, valeur et commentaires d'une entrée.

        Raises:
            ValueError: Si l'un d'eux ne survivrait pas à un aller-retour.
        """
        _check_section_name(section)
        _check_key(entry.key)
        _check_value(entry.key, entry.value)
        self._comment_lines(entry.comments)

    def _comment_lines(self, comments: list[str]) -> list[str]:
        for comment in comments:
            _check_single_line(comment, "commentaire")
        return [f"{self.settings.comment_prefix}{c}" for c in comments]


def _check_single_line(text: str, label: str) -> None:
    if "\n" in text or "\r" in text:
        raise ValueError(f"{label} multi-ligne non supporté(e) : {text!r}")


def _check_section_name(name: str) -> None:
    _check_single_line(name, "section")
    if not name.strip() or name != name.strip() or "]" in name:
        raise ValueError(f"Nom de section invalide : {name!r}")


def _check_value(key: str, value: str) -> None:
    _check_single_line(value, f"valeur de {key!r}")
    if value != value.strip():
        raise ValueError(
            f"Espaces en bordure de la valeur de {key!r} non conservés : "
            f"{value!r}"
        )


def _check_key(key: str) -> None:
    _check_single_line(key, "clé")
    if (
        not key.strip()
        or key != key.strip()
        or key[0] in COMMENT_PREFIXES + ("[",)
        or "=" in key
        or ":" in key
    ):
        raise ValueError(f"Nom de clé invalide : {key!r}")
