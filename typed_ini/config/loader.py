"""Chargement des réglages INI depuis un fichier TOML ou JSON.

Le fichier peut contenir les réglages à la racine ou dans une table
dédiée (``[typed_ini]`` par défaut), ce qui permet de les ranger dans
le fichier de configuration d'une application hôte.
"""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from typed_ini.config.settings import IniSettings
from typed_ini.errors.exceptions import SettingsError

DEFAULT_TABLE = "typed_ini"


class SettingsLoader(ABC):
    """
    Interface abstraite pour le chargement des réglages INI.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(self, config_path: Union[str, Path]) -> IniSettings:
        """
        Charge et valide des réglages.

        Args:
            config_path: Chemin vers le fichier de réglages

        Returns:
            Réglages validés

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si le format n'est pas supporté
            SettingsError: Si le contenu ne respecte pas IniSettings
        """
        pass


class FileSettingsLoader(SettingsLoader):
    """
    Chargeur de réglages depuis un fichier TOML ou JSON.

    Le format est détecté par l'extension. Si le document contient la
    table ``table``, seule cette table est validée ; sinon le document
    entier l'est.

    Attributes:
        table: Nom de la table portant les réglages, ou None pour
            toujours valider la racine.
    """

    def __init__(self, table: str | None = DEFAULT_TABLE) -> None:
        self.table = table

    def load(self, config_path: Union[str, Path]) -> IniSettings:
        """
        Charge un fichier de réglages TOML ou JSON.

        Args:
            config_path: Chemin vers le fichier de réglages

        Returns:
            Réglages validés

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si l'extension n'est pas supportée
            SettingsError: Si la validation Pydantic échoue
        """
        path = Path(config_path)
        raw = self._read(path)

        data: Any = raw
        if self.table is not None and self.table in raw:
            data = raw[self.table]

        try:
            return IniSettings.model_validate(data)
        except ValidationError as e:
            raise SettingsError(
                f"Réglages invalides dans {path}: {e}"
            ) from e

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        """Lit le document brut selon l'extension du fichier."""
        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de réglages non trouvé: {path}"
            )

        suffix = path.suffix.lower()
        if suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f)
        if suffix == ".json":
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, dict):
                raise SettingsError(
                    f"{path} doit contenir un objet JSON, reçu: "
                    f"{type(raw).__name__}"
                )
            return raw
        raise ValueError(
            f"Extension non supportée: {suffix}. "
            "Utilisez .toml ou .json"
        )


def load_settings(
    config_path: Union[str, Path],
    loader: SettingsLoader | None = None
) -> IniSettings:
    """Charge des réglages INI (fonction utilitaire).

    Utilise FileSettingsLoader par défaut.

    Args:
        config_path: Chemin du fichier de réglages.
        loader: Chargeur injectable.

    Returns:
        Réglages validés.
    """
    return (loader or FileSettingsLoader()).load(config_path)
