# =============================================================================
# test_errors.py - Error Hierarchy and Report Format Tests
# =============================================================================

import pytest

from tinys.errors import (
    TinySError,
    ScanError,
    SetupError,
    LexicalError,
    SourceLocation,
    InvalidFileExtensionError,
    EmptySourceError,
    SourceUnreadableError,
    UnknownSymbolError,
    MalformedOperatorError,
    UnterminatedStringError,
    MalformedNumberError,
)
from tinys.lexer import Scanner


class TestReportFormat:
    """The three-line report must match the course format exactly."""

    def test_lexical_error_report(self):
        error = UnknownSymbolError("$", 3, 7)
        assert str(error) == (
            "ERROR: LEXICO\n"
            "| NUMERO DE LINEA (NUMERO DE COLUMNA) | DESCRIPCION: |\n"
            "| LINEA 3 (COLUMNA 7) | Simbolo desconocido: $"
        )

    def test_custom_description(self):
        error = MalformedNumberError("1.2.", 1, 1, description="Numero con dos puntos")
        assert str(error).endswith("| LINEA 1 (COLUMNA 1) | Numero con dos puntos: 1.2.")

    def test_setup_error_report(self):
        error = InvalidFileExtensionError("tests/prog.java")
        assert str(error).splitlines()[-1] == (
            "| LINEA 0 (COLUMNA 0) | Extension de archivo invalida: tests/prog.java"
        )

    def test_report_from_scanner(self):
        with pytest.raises(MalformedOperatorError) as exc_info:
            list(Scanner.from_string("x = a & b;").tokenize())
        assert str(exc_info.value).splitlines()[-1] == (
            "| LINEA 1 (COLUMNA 7) | Operador mal formado: &"
        )

    def test_unterminated_string_report(self):
        with pytest.raises(UnterminatedStringError) as exc_info:
            list(Scanner.from_string('"abc').tokenize())
        assert str(exc_info.value).splitlines()[-1] == (
            '| LINEA 1 (COLUMNA 1) | Cadena sin cerrar: "abc'
        )


class TestHierarchy:
    """Test exception inheritance and attributes."""

    @pytest.mark.parametrize("error_class", [
        InvalidFileExtensionError,
        EmptySourceError,
        SourceUnreadableError,
    ])
    def test_setup_errors(self, error_class):
        error = error_class("a.s")
        assert isinstance(error, SetupError)
        assert isinstance(error, ScanError)
        assert isinstance(error, TinySError)
        assert not isinstance(error, LexicalError)
        assert error.filename == "a.s"

    def test_lexical_error_attributes(self):
        error = UnknownSymbolError("#", 2, 4, filename="main.s")
        assert isinstance(error, LexicalError)
        assert error.description == "Simbolo desconocido"
        assert error.offending_text == "#"
        assert error.location == SourceLocation("main.s", 2, 4)
        assert str(error.location) == "main.s:2:4"

    def test_catch_all_with_base(self):
        with pytest.raises(TinySError):
            list(Scanner.from_string("1.").tokenize())
