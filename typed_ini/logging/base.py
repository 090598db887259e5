"""Interface de journalisation injectée dans les stores typed_ini.

Les stores n'exigent pas de logger : sans instance, ils restent muets.
Avec une instance, ils tracent en information les initialisations de
fichiers et les écritures, et en avertissement les valeurs stockées
qu'un codec n'a pas pu analyser.
"""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Contrat minimal d'un logger pour typed_ini."""

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Trace une opération réussie (lecture, écriture, création)."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Trace une anomalie sans interruption (valeur illisible)."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Trace une erreur."""
        pass

    def close(self) -> None:
        """Libère les ressources du logger ; ne fait rien par défaut."""
