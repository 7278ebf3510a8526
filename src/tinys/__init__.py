"""
tinyS - Lexical Analyzer for the tinyS Teaching Language
========================================================

tinyS is a small class-based language used in compiler construction
courses. This package provides its lexical analyzer: a hand-written
scanner that turns ".s" source files into typed, positioned tokens and
reports malformed input with the exact line and column.

Main Components
---------------
- **lexer**: character source, token definitions and the scanner
- **errors**: setup and lexical error hierarchy with the standard report
- **config**: configurable lexical limits
- **cli**: the tslex command-line tool

Quick Start
-----------
Scan a file:
    >>> from tinys import scan_file
    >>> tokens = scan_file("hello.s")

Or use the command-line tool:
    $ tslex hello.s
    $ tslex tests/lexical/fail/
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from tinys.config import ScannerConfig
from tinys.errors import (
    TinySError,
    SourceLocation,
    ScanError,
    SetupError,
    SourceUnreadableError,
    InvalidFileExtensionError,
    EmptySourceError,
    LexicalError,
    InvalidSymbolError,
    UnknownSymbolError,
    IdentifierTooLongError,
    StringTooLongError,
    InvalidIdentifierCharError,
    IdentifierMustEndInLetterError,
    UnterminatedStringError,
    EmptyStringLiteralError,
    UnterminatedCommentError,
    InvalidCommentError,
    MalformedOperatorError,
    MalformedNumberError,
)
from tinys.lexer import (
    CharacterSource,
    END_OF_INPUT,
    Token,
    TokenType,
    KEYWORDS,
    Scanner,
    scan_file,
)

__all__ = [
    # Version info
    "__version__",
    # Configuration
    "ScannerConfig",
    # Lexer
    "CharacterSource",
    "END_OF_INPUT",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Scanner",
    "scan_file",
    # Exception hierarchy
    "TinySError",
    "SourceLocation",
    "ScanError",
    "SetupError",
    "SourceUnreadableError",
    "InvalidFileExtensionError",
    "EmptySourceError",
    "LexicalError",
    "InvalidSymbolError",
    "UnknownSymbolError",
    "IdentifierTooLongError",
    "StringTooLongError",
    "InvalidIdentifierCharError",
    "IdentifierMustEndInLetterError",
    "UnterminatedStringError",
    "EmptyStringLiteralError",
    "UnterminatedCommentError",
    "InvalidCommentError",
    "MalformedOperatorError",
    "MalformedNumberError",
]
