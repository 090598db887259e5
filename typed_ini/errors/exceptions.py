"""
Module contenant les exceptions personnalisées de typed_ini.

Les absences (section ou clé introuvable) et les échecs de conversion
typée ne sont pas des erreurs : seules les erreurs de format de fichier
et de configuration sont représentées ici. Les erreurs d'E/S restent
des OSError standards.
"""


class ApplicationError(Exception):
    """Exception de base pour toutes les erreurs de typed_ini."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les Configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Exception de base pour tous les fichiers de configuration."""
    pass


class IniParsingError(FileConfigurationError):
    """Ligne d'un fichier INI impossible à interpréter.

    Attributes:
        path: Chemin du fichier fautif.
        line_number: Numéro de la ligne (à partir de 1).
        line: Contenu brut de la ligne.
    """

    def __init__(self, path: str, line_number: int, line: str) -> None:
        self.path = path
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"{path}, ligne {line_number} : ligne INI invalide {line!r}"
        )


class SettingsError(ConfigurationError):
    """Fichier de réglages invalide (échec de validation Pydantic)."""
    pass
