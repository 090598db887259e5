"""Tests unitaires pour le module errors."""

import pytest

from typed_ini.errors import (ApplicationError,
                              ConfigurationError,
                              FileConfigurationError,
                              IniParsingError,
                              SettingsError)


class TestHierarchy:
    """Tests de la hiérarchie d'exceptions."""

    @pytest.mark.parametrize("error_type, parent", [
        (ConfigurationError, ApplicationError),
        (FileConfigurationError, ConfigurationError),
        (IniParsingError, FileConfigurationError),
        (SettingsError, ConfigurationError),
    ])
    def test_inheritance(self, error_type, parent):
        """Chaque exception hérite de son parent attendu."""
        assert issubclass(error_type, parent)

    def test_io_errors_are_not_application_errors(self):
        """Les erreurs d'E/S restent des OSError standards."""
        assert not issubclass(FileNotFoundError, ApplicationError)


class TestIniParsingError:
    """Tests pour IniParsingError."""

    def test_attributes(self):
        """Chemin, numéro et contenu de ligne sont conservés."""
        error = IniParsingError("/etc/app.ini", 3, "garbage")

        assert error.path == "/etc/app.ini"
        assert error.line_number == 3
        assert error.line == "garbage"

    def test_message(self):
        """Le message cite le fichier et la ligne."""
        error = IniParsingError("/etc/app.ini", 3, "garbage")

        assert str(error) == (
            "/etc/app.ini, ligne 3 : ligne INI invalide 'garbage'"
        )
