"""Initialisation des fichiers INI avant écriture."""

from pathlib import Path

from typed_ini.config.settings import IniSettings
from typed_ini.dotconf.base import ENCODING


def initialize_file(
    path: str | Path,
    settings: IniSettings | None = None
) -> bool:
    """Crée le fichier INI s'il n'existe pas.

    Les répertoires parents manquants sont créés, puis le fichier reçoit
    une unique ligne de commentaire pour être non vide et relisible.
    Un fichier existant n'est jamais modifié.

    Args:
        path: Chemin du fichier INI.
        settings: Réglages donnant le préfixe et le texte du commentaire.

    Returns:
        True si le fichier a été créé, False s'il existait déjà.

    Raises:
        OSError: Si la création du répertoire ou du fichier échoue.
    """
    file_path = Path(path)
    if file_path.exists():
        return False

    settings = settings or IniSettings()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=ENCODING) as f:
        f.write(settings.placeholder_line)
    return True
