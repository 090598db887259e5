"""Tests pour les codecs texte du module store."""

import pytest
from pydantic import BaseModel

from typed_ini.store import (
    BOOL,
    BYTE,
    FLOAT,
    INT,
    INT16,
    STR,
    UINT64,
    IntegerCodec,
    ParseableCodec,
    PydanticCodec,
    TextCodec,
)


class Endpoint(BaseModel):
    """Modèle Pydantic de test."""
    host: str
    port: int


class Version:
    """Type Parseable minimal : major.minor."""

    def __init__(self, major: int, minor: int) -> None:
        self.major = major
        self.minor = minor

    @classmethod
    def parse(cls, text: str) -> "Version":
        major, minor = text.split(".")
        return cls(int(major), int(minor))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return (self.major, self.minor) == (other.major, other.minor)


class TestBoolCodec:
    """Tests pour BoolCodec."""

    @pytest.mark.parametrize("text, expected", [
        ("True", True),
        ("true", True),
        ("TRUE", True),
        ("False", False),
        (" false ", False),
    ])
    def test_parse(self, text, expected):
        """La casse et les espaces sont ignorés."""
        assert BOOL.parse(text) is expected

    @pytest.mark.parametrize("text", ["yes", "1", "vrai"])
    def test_parse_invalid(self, text):
        """Seuls true/false sont acceptés."""
        with pytest.raises(ValueError):
            BOOL.parse(text)

    def test_format(self):
        """Sortie canonique True/False."""
        assert BOOL.format(True) == "True"
        assert BOOL.format(False) == "False"


class TestIntegerCodec:
    """Tests pour IntegerCodec."""

    def test_bounds(self):
        """Les bornes sont incluses."""
        assert BYTE.parse("0") == 0
        assert BYTE.parse("255") == 255
        assert INT16.parse("-32768") == -32768

    @pytest.mark.parametrize("codec, text", [
        (BYTE, "-1"),
        (BYTE, "256"),
        (INT16, "32768"),
        (UINT64, str(2**64)),
    ])
    def test_out_of_range(self, codec, text):
        """Une valeur hors bornes est rejetée à la lecture."""
        with pytest.raises(ValueError):
            codec.parse(text)

    def test_format_out_of_range(self):
        """Une valeur hors bornes est rejetée à l'écriture."""
        with pytest.raises(ValueError, match="maximum"):
            BYTE.format(300)

    def test_unbounded(self):
        """INT n'a pas de bornes."""
        assert INT.parse(str(10**30)) == 10**30

    def test_not_a_number(self):
        """Un texte non numérique lève ValueError."""
        with pytest.raises(ValueError):
            IntegerCodec().parse("12a")

    def test_repr(self):
        """repr montre les bornes."""
        assert repr(BYTE) == "IntegerCodec(0, 255)"


class TestOtherCodecs:
    """Tests pour StrCodec, FloatCodec, ParseableCodec et PydanticCodec."""

    def test_str_identity(self):
        """StrCodec ne transforme pas le texte."""
        assert STR.parse("abc") == "abc"
        assert STR.format("abc") == "abc"

    def test_float_round_trip(self):
        """FloatCodec conserve la précision."""
        value = 1 / 3
        assert FLOAT.parse(FLOAT.format(value)) == value

    def test_parseable(self):
        """ParseableCodec délègue à parse() et str()."""
        codec = ParseableCodec(Version)
        assert codec.format(Version(1, 2)) == "1.2"
        assert codec.parse("3.4") == Version(3, 4)

    def test_parseable_invalid(self):
        """Une erreur du type applicatif remonte en ValueError."""
        with pytest.raises(ValueError):
            ParseableCodec(Version).parse("1.2.3")

    def test_pydantic_round_trip(self):
        """PydanticCodec stocke le modèle en JSON sur une ligne."""
        codec = PydanticCodec(Endpoint)
        value = Endpoint(host="localhost", port=8080)

        text = codec.format(value)

        assert "\n" not in text
        assert codec.parse(text) == value

    def test_pydantic_invalid(self):
        """Une erreur de validation est une ValueError."""
        with pytest.raises(ValueError):
            PydanticCodec(Endpoint).parse('{"host": "x"}')

    def test_all_codecs_implement_interface(self):
        """Tous les codecs respectent l'interface TextCodec."""
        for codec in (STR, BOOL, FLOAT, INT, ParseableCodec(Version),
                      PydanticCodec(Endpoint)):
            assert isinstance(codec, TextCodec)
