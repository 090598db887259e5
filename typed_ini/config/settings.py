"""Réglages du format INI écrit par typed_ini."""

from typing import Literal

from pydantic import BaseModel, field_validator


class IniSettings(BaseModel):
    """Conventions d'écriture des fichiers INI.

    L'encodage n'est pas réglable : les fichiers sont toujours lus et
    écrits en UTF-8.

    Attributes:
        comment_prefix: Préfixe des lignes de commentaire écrites.
        placeholder_comment: Texte du commentaire placé dans un
            fichier nouvellement créé.
        spaces_around_delimiter: Écrit ``key = value`` plutôt que
            ``key=value``.
    """

    model_config = {"extra": "forbid", "frozen": True}

    comment_prefix: Literal[";", "#"] = ";"
    placeholder_comment: str = "Temp"
    spaces_around_delimiter: bool = True

    @field_validator("placeholder_comment")
    @classmethod
    def must_be_single_line(cls, v: str) -> str:
        if "\n" in v or "\r" in v:
            raise ValueError("Le commentaire doit tenir sur une ligne")
        return v

    @property
    def delimiter(self) -> str:
        """Séparateur clé/valeur utilisé à l'écriture."""
        return " = " if self.spaces_around_delimiter else "="

    @property
    def placeholder_line(self) -> str:
        """Ligne unique d'un fichier fraîchement initialisé."""
        return f"{self.comment_prefix}{self.placeholder_comment}"
