"""
tinyS Error Hierarchy
=====================

This module defines the exception hierarchy for the tinyS toolchain.
All exceptions inherit from TinySError, allowing callers to catch all
toolchain errors with a single except clause if desired.

Exception Hierarchy
-------------------
TinySError (base)
└── ScanError (description, offending text and position)
    ├── SetupError - detected before the first character is scanned
    │   ├── SourceUnreadableError - source file cannot be opened
    │   ├── InvalidFileExtensionError - path does not end in ".s"
    │   └── EmptySourceError - source contains no characters
    └── LexicalError - malformed input found while scanning
        ├── InvalidSymbolError - code point outside the accepted range
        ├── UnknownSymbolError - character not in the language
        ├── IdentifierTooLongError - identifier length limit reached
        ├── StringTooLongError - string literal length limit reached
        ├── InvalidIdentifierCharError - bad character inside an identifier
        ├── IdentifierMustEndInLetterError - class identifier ends badly
        ├── UnterminatedStringError - missing closing quote
        ├── EmptyStringLiteralError - ""
        ├── UnterminatedCommentError - missing closing */
        ├── InvalidCommentError - non-ASCII character inside a comment
        ├── MalformedOperatorError - single & or |
        └── MalformedNumberError - bad fractional part or trailing letter

Error Message Format
--------------------
Every ScanError renders the report expected by the course tooling:

    ERROR: LEXICO
    | NUMERO DE LINEA (NUMERO DE COLUMNA) | DESCRIPCION: |
    | LINEA 3 (COLUMNA 7) | Simbolo desconocido: $

Setup errors are reported at line 0, column 0 because no character has
been read yet.
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class TinySError(Exception):
    """
    Base exception for all tinyS errors.

    All exceptions in the toolchain inherit from this class:

        try:
            tokens = scan_file("program.s")
        except TinySError as e:
            print(e)
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in a source file.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed, 0 before scanning starts)
        column: Column number (1-indexed, 0 before scanning starts)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column'."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Scan Errors
# =============================================================================

REPORT_HEADER = (
    "ERROR: LEXICO\n"
    "| NUMERO DE LINEA (NUMERO DE COLUMNA) | DESCRIPCION: |"
)


class ScanError(TinySError):
    """
    Base exception for every failure surfaced by the scanner.

    Subclasses provide a default ``description``; callers pass the
    offending text and the position where the failure was detected.

    Attributes:
        description: Human-readable cause
        offending_text: The lexeme, fragment or path that triggered it
        line: Line number of the failure
        column: Column number of the failure
        filename: Source file name
    """

    default_description = "Error lexico"

    def __init__(
        self,
        offending_text: str,
        line: int = 0,
        column: int = 0,
        filename: str = "<input>",
        description: Optional[str] = None,
    ):
        self.description = description or self.default_description
        self.offending_text = offending_text
        self.line = line
        self.column = column
        self.filename = filename
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return (
            f"{REPORT_HEADER}\n"
            f"| LINEA {self.line} (COLUMNA {self.column}) | "
            f"{self.description}: {self.offending_text}"
        )

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for this error."""
        return SourceLocation(self.filename, self.line, self.column)


# =============================================================================
# Setup Errors
# =============================================================================

class SetupError(ScanError):
    """
    The source could not be prepared for scanning.

    The offending text is always the source path.
    """

    default_description = "No se pudo preparar el archivo fuente"

    def __init__(self, path: str, description: Optional[str] = None):
        super().__init__(path, 0, 0, filename=path, description=description)


class SourceUnreadableError(SetupError):
    """Source file does not exist or cannot be opened."""

    default_description = "No se pudo abrir el archivo"


class InvalidFileExtensionError(SetupError):
    """Source path does not carry the tinyS extension."""

    default_description = "Extension de archivo invalida"


class EmptySourceError(SetupError):
    """Source holds no characters at all."""

    default_description = "Archivo fuente vacio"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(ScanError):
    """
    Malformed input found while scanning.

    Raised by the scanner at the failure site. Scanning of the current
    file never continues after one of these.
    """
    pass


class InvalidSymbolError(LexicalError):
    """
    Character outside the accepted code-point range.

    Checked when the character is read, so it fires inside comments and
    string literals too.
    """

    default_description = "Simbolo invalido"


class UnknownSymbolError(LexicalError):
    """Character that does not start any tinyS token."""

    default_description = "Simbolo desconocido"


class IdentifierTooLongError(LexicalError):
    default_description = "Identificador demasiado largo"


class StringTooLongError(LexicalError):
    default_description = "Cadena demasiado larga"


class InvalidIdentifierCharError(LexicalError):
    default_description = "Caracter invalido en identificador"


class IdentifierMustEndInLetterError(LexicalError):
    """
    Class identifier whose last character is a digit or underscore.

    Example:
        class Point2 { }    // must end in a letter
    """

    default_description = "El identificador de clase debe terminar en letra"


class UnterminatedStringError(LexicalError):
    """
    String literal without its closing quote.

    Raised on end of input, on a NUL character, or on a raw line feed
    inside the literal (the line-break variant carries its own
    description).
    """

    default_description = "Cadena sin cerrar"
    line_break_description = "Salto de linea dentro de una cadena"


class EmptyStringLiteralError(LexicalError):
    default_description = "Cadena vacia"


class UnterminatedCommentError(LexicalError):
    default_description = "Comentario sin cerrar"


class InvalidCommentError(LexicalError):
    default_description = "Caracter no ASCII en comentario"


class MalformedOperatorError(LexicalError):
    """
    Single ``&`` or ``|``.

    tinyS only has the doubled logical operators ``&&`` and ``||``.
    """

    default_description = "Operador mal formado"


class MalformedNumberError(LexicalError):
    """
    Numeric literal with a bad shape.

    Examples:
        12.       // no digit after the decimal point
        1.2.3     // more than one decimal point
        123abc    // letter right after the number
    """

    default_description = "Numero mal formado"
