"""Modèle en mémoire d'un document INI.

Un document est une suite ordonnée de sections ; chaque section est une
suite ordonnée d'entrées (clé, valeur, commentaires). Les noms de
sections et de clés sont sensibles à la casse. Les commentaires sont
conservés tels quels, sans leur préfixe.
"""

from dataclasses import dataclass, field


@dataclass
class IniEntry:
    """Unité stockée pour une clé : sa valeur et ses commentaires.

    Attributes:
        key: Nom de la clé, unique dans sa section.
        value: Forme textuelle canonique de la valeur.
        comments: Lignes de commentaire précédant la clé, dans l'ordre.
    """

    key: str
    value: str = ""
    comments: list[str] = field(default_factory=list)

    def copy(self) -> "IniEntry":
        """Retourne une copie indépendante (liste de commentaires incluse)."""
        return IniEntry(self.key, self.value, list(self.comments))


@dataclass
class IniSectionData:
    """Bloc ``[name]`` d'un document et ses entrées.

    Attributes:
        name: Nom de la section.
        entries: Entrées indexées par clé, dans l'ordre du fichier.
        comments: Commentaires précédant l'en-tête de section.
    """

    name: str
    entries: dict[str, IniEntry] = field(default_factory=dict)
    comments: list[str] = field(default_factory=list)

    def contains_key(self, key: str) -> bool:
        return key in self.entries

    def get_entry(self, key: str) -> IniEntry | None:
        return self.entries.get(key)

    def set_value(self, key: str, value: str) -> None:
        """Crée ou met à jour la valeur d'une clé.

        Les commentaires d'une clé existante sont conservés.
        """
        entry = self.entries.get(key)
        if entry is None:
            self.entries[key] = IniEntry(key, value)
        else:
            entry.value = value

    def set_entry(self, entry: IniEntry) -> None:
        """Remplace l'entrée complète (valeur et commentaires)."""
        self.entries[entry.key] = entry.copy()


class IniDocument:
    """Document INI complet.

    Les sections ne sont créées que par les méthodes d'écriture
    (section, set_value, set_entry) : une lecture ne crée jamais
    de section.

    Attributes:
        trailing_comments: Commentaires situés après la dernière clé
            du document, ou seul contenu d'un document sans section.
    """

    def __init__(self) -> None:
        self._sections: dict[str, IniSectionData] = {}
        self.trailing_comments: list[str] = []

    def sections(self) -> list[IniSectionData]:
        """Retourne les sections dans l'ordre du document."""
        return list(self._sections.values())

    def section_names(self) -> list[str]:
        return list(self._sections)

    def contains_section(self, name: str) -> bool:
        return name in self._sections

    def get_section(self, name: str) -> IniSectionData | None:
        return self._sections.get(name)

    def section(self, name: str) -> IniSectionData:
        """Retourne la section, en la créant si elle n'existe pas."""
        section = self._sections.get(name)
        if section is None:
            section = IniSectionData(name)
            self._sections[name] = section
        return section

    def get_entry(self, section: str, key: str) -> IniEntry | None:
        """Retourne l'entrée ou None si la section ou la clé manque."""
        data = self._sections.get(section)
        if data is None:
            return None
        return data.get_entry(key)

    def set_value(self, section: str, key: str, value: str) -> None:
        self.section(section).set_value(key, value)

    def set_entry(self, section: str, entry: IniEntry) -> None:
        self.section(section).set_entry(entry)

    def __len__(self) -> int:
        return len(self._sections)
