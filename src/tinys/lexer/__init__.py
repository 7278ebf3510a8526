"""
tinyS Lexical Analysis
======================

This package turns tinyS source text into a stream of tokens.

Pipeline
--------
    Source file → CharacterSource → Scanner → Token stream

Usage
-----
>>> from tinys.lexer import scan_file
>>> for token in scan_file("examples/fibonacci.s"):
...     print(token.type.value, token.lexeme, token.line, token.column)

Or drive the scanner token by token:

>>> from tinys.lexer import Scanner, TokenType
>>> with Scanner.from_file("examples/fibonacci.s") as scanner:
...     token = scanner.next_token()
...     while token.type is not TokenType.EOF:
...         token = scanner.next_token()
"""

from tinys.lexer.source import CharacterSource, END_OF_INPUT
from tinys.lexer.tokens import Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS
from tinys.lexer.scanner import Scanner, scan_file

__all__ = [
    # Character source
    "CharacterSource",
    "END_OF_INPUT",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    "SINGLE_CHAR_TOKENS",
    # Scanner
    "Scanner",
    "scan_file",
]
