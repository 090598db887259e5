"""Interfaces abstraites pour la lecture/écriture de documents INI.

Ce module définit le contrat (ABC) IniDocumentStore : charger un
document complet depuis un chemin et le réécrire entièrement. Aucune
écriture partielle n'existe.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from typed_ini.dotconf.document import IniDocument, IniEntry

ENCODING = "utf-8"

# Lecture tolérante au BOM des fichiers UTF-8 écrits par d'autres outils
READ_ENCODING = "utf-8-sig"

# Préfixes reconnus en lecture, quel que soit le préfixe écrit
COMMENT_PREFIXES = (";", "#")


class IniDocumentStore(ABC):
    """Interface pour le chargement et la sauvegarde de documents INI."""

    @abstractmethod
    def load(self, path: str | Path) -> IniDocument:
        """Charge un document INI complet.

        Args:
            path: Chemin du fichier INI.

        Returns:
            Document lu depuis le disque.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            IniParsingError: Si une ligne est mal formée.
        """
        pass

    @abstractmethod
    def save(self, path: str | Path, document: IniDocument) -> None:
        """Réécrit entièrement le fichier avec le document.

        Args:
            path: Chemin du fichier de destination.
            document: Document à écrire.
        """
        pass

    def validate_entry(self, section: str, entry: IniEntry) -> None:
        """Vérifie qu'une entrée pourra être écrite puis relue à l'identique.

        Appelée avant toute création de fichier. L'implémentation par
        défaut accepte tout.

        Args:
            section: Section cible.
            entry: Entrée à écrire.

        Raises:
            ValueError: Si l'entrée n'est pas représentable.
        """
