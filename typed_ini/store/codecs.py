"""Codecs texte <-> type applicatif pour les valeurs INI.

Un codec porte la capacité « analysable » d'un type : ``parse`` convertit
le texte stocké (ValueError si le texte est invalide) et ``format``
produit la forme canonique écrite dans le fichier. Tout codec doit
garantir ``parse(format(v)) == v`` pour chaque valeur représentable ;
le store ne le vérifie pas.
"""

from abc import ABC, abstractmethod
from typing import Generic, Protocol, TypeVar

from pydantic import BaseModel

T = TypeVar("T")
P = TypeVar("P", bound="Parseable")
M = TypeVar("M", bound=BaseModel)


class TextCodec(ABC, Generic[T]):
    """Interface de conversion entre texte stocké et valeur typée."""

    @abstractmethod
    def parse(self, text: str) -> T:
        """Convertit le texte stocké en valeur.

        Args:
            text: Texte non vide lu dans le fichier.

        Returns:
            Valeur convertie.

        Raises:
            ValueError: Si le texte ne représente pas une valeur valide.
        """
        pass

    @abstractmethod
    def format(self, value: T) -> str:
        """Produit la forme textuelle canonique de la valeur.

        Args:
            value: Valeur à écrire.

        Returns:
            Texte relisible par parse().
        """
        pass


class StrCodec(TextCodec[str]):
    """Codec identité pour le texte brut.

    Le format INI ne conserve pas les espaces en bordure d'une valeur :
    l'écriture d'un texte commençant ou finissant par un espace lève
    ValueError au lieu de le tronquer silencieusement.
    """

    def parse(self, text: str) -> str:
        return text

    def format(self, value: str) -> str:
        return str(value)


class BoolCodec(TextCodec[bool]):
    """Booléens écrits ``True``/``False``, relus sans tenir compte de la casse."""

    def parse(self, text: str) -> bool:
        lowered = text.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        raise ValueError(f"Booléen invalide : {text!r}")

    def format(self, value: bool) -> str:
        return "True" if value else "False"


class IntegerCodec(TextCodec[int]):
    """Entiers décimaux, éventuellement bornés.

    Attributes:
        min_value: Borne inférieure incluse, ou None.
        max_value: Borne supérieure incluse, ou None.
    """

    def __init__(
        self,
        min_value: int | None = None,
        max_value: int | None = None
    ) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def _check_range(self, value: int) -> int:
        if self.min_value is not None and value < self.min_value:
            raise ValueError(f"{value} < minimum {self.min_value}")
        if self.max_value is not None and value > self.max_value:
            raise ValueError(f"{value} > maximum {self.max_value}")
        return value

    def parse(self, text: str) -> int:
        return self._check_range(int(text.strip()))

    def format(self, value: int) -> str:
        """Formate l'entier.

        Raises:
            ValueError: Si la valeur sort des bornes du codec.
        """
        return str(self._check_range(int(value)))

    def __repr__(self) -> str:
        return f"IntegerCodec({self.min_value!r}, {self.max_value!r})"


class FloatCodec(TextCodec[float]):
    """Flottants, écrits avec repr() pour un aller-retour exact."""

    def parse(self, text: str) -> float:
        return float(text.strip())

    def format(self, value: float) -> str:
        return repr(float(value))


class Parseable(Protocol):
    """Protocole d'un type applicatif analysable.

    ``parse`` lève ValueError sur un texte invalide ; ``__str__``
    retourne la forme canonique relisible par ``parse``.
    """

    @classmethod
    def parse(cls: type[P], text: str) -> P:
        ...

    def __str__(self) -> str:
        ...


class ParseableCodec(TextCodec[P]):
    """Adapte un type suivant le protocole Parseable.

    Example:
        >>> codec = ParseableCodec(Endpoint)
        >>> write_typed(path, "net", "endpoint", endpoint, codec)
    """

    def __init__(self, cls: type[P]) -> None:
        self.cls = cls

    def parse(self, text: str) -> P:
        return self.cls.parse(text)

    def format(self, value: P) -> str:
        return str(value)


class PydanticCodec(TextCodec[M]):
    """Stocke un modèle Pydantic sous forme de JSON compact sur une ligne.

    Les erreurs de validation Pydantic sont des ValueError et suivent
    donc la même politique que tout échec d'analyse.
    """

    def __init__(self, model: type[M]) -> None:
        self.model = model

    def parse(self, text: str) -> M:
        return self.model.model_validate_json(text)

    def format(self, value: M) -> str:
        return value.model_dump_json()


STR = StrCodec()
BOOL = BoolCodec()
FLOAT = FloatCodec()
INT = IntegerCodec()
BYTE = IntegerCodec(0, 2**8 - 1)
INT16 = IntegerCodec(-2**15, 2**15 - 1)
UINT16 = IntegerCodec(0, 2**16 - 1)
INT32 = IntegerCodec(-2**31, 2**31 - 1)
UINT32 = IntegerCodec(0, 2**32 - 1)
INT64 = IntegerCodec(-2**63, 2**63 - 1)
UINT64 = IntegerCodec(0, 2**64 - 1)
