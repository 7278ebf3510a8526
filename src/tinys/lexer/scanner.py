"""
tinyS Scanner (Tokenizer)
=========================

This module implements the lexical scanner for tinyS, a small class-based
teaching language. It pulls characters from a CharacterSource one at a
time and turns them into positioned tokens, validating each lexeme as it
goes.

Token Categories
----------------
- Class identifiers: start uppercase, must end in a letter (Point, ListNode)
- Method/attribute identifiers: start lowercase (x, get_value2)
- Keywords: class, impl, fn, ret, if, else, while, st, pub, ...
- Literals: "strings", 42, 3.14
- Operators: = == < <= > >= + ++ - * / ! && ||
- Delimiters: ( ) { } [ ] , ; .

Comments
--------
- Single-line: // comment
- Multi-line: /* comment */

Comments and whitespace are trivia: they are skipped and never produce
a token. Comments may only contain ASCII characters.

Positions
---------
Lines and columns start at 1. Every character advances the column by one;
a line feed moves to column 1 of the next line. A token reports the
position of its first character. The EOF token reports the position just
past the last character.

Example Usage
-------------
>>> from tinys.lexer.scanner import Scanner
>>> scanner = Scanner.from_string("Foo bar = 5;")
>>> for token in scanner.tokenize():
...     print(token)
Token(idClass, 'Foo', 1:1)
Token(idMetAt, 'bar', 1:5)
Token(assignOp, '=', 1:9)
Token(intLiteral, '5', 1:11)
Token(semicolon, ';', 1:12)
Token(EOF, 1:13)
"""

import logging
import string
from pathlib import Path
from typing import Iterator, Optional, Type, Union

from tinys.config import ScannerConfig
from tinys.errors import (
    ScanError,
    EmptySourceError,
    InvalidFileExtensionError,
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
from tinys.lexer.source import CharacterSource, END_OF_INPUT
from tinys.lexer.tokens import Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS

logger = logging.getLogger(__name__)


class Scanner:
    """
    Tokenizes tinyS source, one token per next_token() call.

    The scanner always holds one character of lookahead that has been
    read from the source but not yet classified. Every scanning path
    leaves the character that ended its lexeme in that slot for the next
    call.

    Usage:
        with Scanner.from_file("program.s") as scanner:
            tokens = list(scanner.tokenize())

    Attributes:
        filename: Name of the source file (for tokens and errors)
        config: Lexical limits in effect
        token_count: Number of tokens returned so far
    """

    UPPERCASE = frozenset(string.ascii_uppercase)
    LOWERCASE = frozenset(string.ascii_lowercase)
    LETTERS = frozenset(string.ascii_letters)
    DIGITS = frozenset(string.digits)

    # Characters that can continue an identifier
    IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")

    WHITESPACE = frozenset(" \t\n\r")

    # Characters that may end a class identifier directly
    DELIMITERS = frozenset('(){}[],;.-*!/=<>+&|"')

    # Highest code point allowed inside comments
    COMMENT_MAX_CODE_POINT = 127

    def __init__(
        self,
        source: CharacterSource,
        filename: Optional[str] = None,
        config: Optional[ScannerConfig] = None,
    ):
        """
        Initialize the scanner and read the first lookahead character.

        Args:
            source: Character source to scan
            filename: Name used in tokens and errors (default: source name)
            config: Lexical limits (default: ScannerConfig())

        Raises:
            EmptySourceError: If the source holds no characters
            InvalidSymbolError: If the first character is out of range
        """
        self.filename = filename or source.name
        self.config = config or ScannerConfig()
        self.token_count = 0
        self._last_type: Optional[TokenType] = None
        self._source = source

        if source.is_empty():
            raise EmptySourceError(self.filename)

        # Position of the next character to be read from the source
        self._next_line = 1
        self._next_column = 1

        # Lookahead character and its position
        self._char = END_OF_INPUT
        self._line = 1
        self._column = 1

        # Lexeme under construction
        self._lexeme: list[str] = []

        self._advance()

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        config: Optional[ScannerConfig] = None,
    ) -> "Scanner":
        """
        Open and validate a tinyS source file.

        Raises:
            InvalidFileExtensionError: If the path lacks the source extension
            SourceUnreadableError: If the file cannot be opened
            EmptySourceError: If the file is empty
        """
        config = config or ScannerConfig()
        path_str = str(path)

        if not path_str.endswith(config.source_extension):
            raise InvalidFileExtensionError(path_str)

        source = CharacterSource.from_file(path, encoding=config.encoding)
        try:
            return cls(source, path_str, config)
        except ScanError:
            source.close()
            raise

    @classmethod
    def from_string(
        cls,
        text: str,
        filename: str = "<input>",
        config: Optional[ScannerConfig] = None,
    ) -> "Scanner":
        """Create a scanner over in-memory source text."""
        return cls(CharacterSource.from_string(text, filename), filename, config)

    def close(self) -> None:
        """Release the underlying character source."""
        self._source.close()

    def __enter__(self) -> "Scanner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # =========================================================================
    # Public Interface
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Once the end of input is reached every further call returns
        another EOF token at the same position.

        Raises:
            LexicalError: If malformed input is encountered
        """
        while True:
            self._skip_whitespace()
            self._lexeme.clear()

            start_line = self._line
            start_column = self._column

            if self._char == END_OF_INPUT:
                if self._last_type is not TokenType.EOF:
                    logger.debug(
                        f"{self.filename}: end of input at {start_line}:{start_column} "
                        f"after {self.token_count} tokens"
                    )
                return self._make_token(TokenType.EOF, "", start_line, start_column)

            if self._char == "/":
                token = self._scan_comment_or_division(start_line, start_column)
                if token is None:
                    # Comment skipped, keep looking for a real token
                    continue
                return token

            return self._scan_token(start_line, start_column)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including EOF.

        Yields:
            Token objects in source order

        Raises:
            LexicalError: If malformed input is encountered
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _advance(self) -> str:
        """
        Read the next character into the lookahead slot.

        Enforces the code-point ceiling and keeps line/column in step.

        Raises:
            InvalidSymbolError: If the character exceeds max_code_point
        """
        char = self._source.read_character()
        self._line = self._next_line
        self._column = self._next_column
        self._char = char

        if char == END_OF_INPUT:
            return char

        if ord(char) > self.config.max_code_point:
            raise self._error(InvalidSymbolError, char, self._line, self._column)

        if char == "\n":
            self._next_line += 1
            self._next_column = 1
        else:
            self._next_column += 1

        return char

    def _take(self) -> None:
        """Append the lookahead to the lexeme and read the next character."""
        self._lexeme.append(self._char)
        self._advance()

    def _match(self, expected: str) -> bool:
        """
        Consume the lookahead if it matches expected.

        Returns:
            True if matched and consumed, False otherwise
        """
        if self._char == expected:
            self._take()
            return True
        return False

    def _text(self) -> str:
        return "".join(self._lexeme)

    # =========================================================================
    # Token and Error Creation
    # =========================================================================

    def _make_token(
        self,
        token_type: TokenType,
        lexeme: str,
        line: int,
        column: int,
    ) -> Token:
        self.token_count += 1
        self._last_type = token_type
        return Token(token_type, lexeme, line, column, self.filename)

    def _error(
        self,
        error_class: Type[ScanError],
        offending_text: str,
        line: int,
        column: int,
        description: Optional[str] = None,
    ) -> ScanError:
        """Build an error of the given class tagged with this file."""
        return error_class(
            offending_text,
            line,
            column,
            filename=self.filename,
            description=description,
        )

    def _preview(self, text: str) -> str:
        """Shorten an oversized lexeme for error reports."""
        limit = self.config.string_preview_length
        if len(text) <= limit:
            return text
        return text[:limit] + "..."

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace(self) -> None:
        while self._char in self.WHITESPACE:
            self._advance()

    def _scan_comment_or_division(
        self,
        start_line: int,
        start_column: int,
    ) -> Optional[Token]:
        """
        Scan a comment or the division operator.

        Returns:
            An op_div token, or None when a comment was skipped
        """
        self._take()  # consume /

        if self._char == "/":
            self._skip_line_comment()
            return None

        if self._char == "*":
            self._skip_block_comment(start_line, start_column)
            return None

        return self._make_token(TokenType.OP_DIV, "/", start_line, start_column)

    def _check_comment_char(self) -> None:
        if ord(self._char) > self.COMMENT_MAX_CODE_POINT:
            raise self._error(InvalidCommentError, self._char, self._line, self._column)

    def _skip_line_comment(self) -> None:
        """Skip a // comment, leaving the line feed as lookahead."""
        self._advance()  # consume second /

        while self._char != END_OF_INPUT and self._char != "\n":
            self._check_comment_char()
            self._advance()

    def _skip_block_comment(self, start_line: int, start_column: int) -> None:
        """
        Skip a /* ... */ comment including its terminator.

        Raises:
            UnterminatedCommentError: If input ends before */
            InvalidCommentError: On a non-ASCII character
        """
        self._advance()  # consume *

        while True:
            if self._char == END_OF_INPUT:
                raise self._error(UnterminatedCommentError, "/*", start_line, start_column)

            if self._char == "*":
                self._advance()
                if self._char == "/":
                    self._advance()
                    logger.debug(
                        f"{self.filename}: skipped block comment "
                        f"{start_line}:{start_column}-{self._line}:{self._column}"
                    )
                    return
                # Re-examine this character, it may be another *
                continue

            self._check_comment_char()
            self._advance()

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self, start_line: int, start_column: int) -> Token:
        """Dispatch on the lookahead character."""
        char = self._char

        if char in self.UPPERCASE:
            return self._scan_class_identifier(start_line, start_column)

        if char in self.LOWERCASE:
            return self._scan_identifier(start_line, start_column)

        if char == '"':
            return self._scan_string(start_line, start_column)

        if char in self.DIGITS:
            return self._scan_number(start_line, start_column)

        return self._scan_operator(start_line, start_column)

    def _accumulate_identifier(self, start_line: int, start_column: int) -> str:
        """
        Collect identifier characters into the lexeme.

        Raises:
            IdentifierTooLongError: When the length reaches the limit
        """
        while True:
            self._lexeme.append(self._char)
            if len(self._lexeme) >= self.config.max_identifier_length:
                raise self._error(
                    IdentifierTooLongError,
                    self._preview(self._text()),
                    start_line,
                    start_column,
                )
            self._advance()
            if self._char not in self.IDENT_CHARS:
                return self._text()

    def _scan_class_identifier(self, start_line: int, start_column: int) -> Token:
        """
        Scan a class identifier.

        Class identifiers start with an uppercase letter, continue with
        letters, digits or underscores, and must end in a letter. Only
        whitespace, end of input or a delimiter may follow them.
        """
        name = self._accumulate_identifier(start_line, start_column)

        terminator = self._char
        if (
            terminator != END_OF_INPUT
            and terminator not in self.WHITESPACE
            and terminator not in self.DELIMITERS
        ):
            raise self._error(
                InvalidIdentifierCharError,
                name + terminator,
                start_line,
                start_column,
            )

        if name[-1] not in self.LETTERS:
            raise self._error(IdentifierMustEndInLetterError, name, start_line, start_column)

        return self._make_token(TokenType.ID_CLASS, name, start_line, start_column)

    def _scan_identifier(self, start_line: int, start_column: int) -> Token:
        """
        Scan a method/attribute identifier or keyword.

        Keywords are distinguished by an exact lookup in the keyword table.
        """
        name = self._accumulate_identifier(start_line, start_column)

        # A letter or digit the run could not absorb (e.g. 'ñ')
        terminator = self._char
        if terminator.isalnum() or terminator == "_":
            raise self._error(
                InvalidIdentifierCharError,
                name + terminator,
                start_line,
                start_column,
            )

        token_type = KEYWORDS.get(name, TokenType.ID_MET_AT)
        return self._make_token(token_type, name, start_line, start_column)

    def _scan_string(self, start_line: int, start_column: int) -> Token:
        """
        Scan a double-quoted string literal.

        There are no escape sequences: everything up to the next quote on
        the same line is content. The quotes are not part of the lexeme.
        """
        self._advance()  # consume opening "

        while self._char != '"':
            if self._char == END_OF_INPUT or self._char == "\0":
                raise self._error(
                    UnterminatedStringError,
                    '"' + self._text(),
                    start_line,
                    start_column,
                )

            if self._char == "\n":
                raise self._error(
                    UnterminatedStringError,
                    '"' + self._text(),
                    start_line,
                    start_column,
                    description=UnterminatedStringError.line_break_description,
                )

            self._lexeme.append(self._char)
            if len(self._lexeme) >= self.config.max_string_length:
                raise self._error(
                    StringTooLongError,
                    self._preview('"' + self._text()),
                    start_line,
                    start_column,
                )
            self._advance()

        if not self._lexeme:
            raise self._error(EmptyStringLiteralError, '""', start_line, start_column)

        self._advance()  # consume closing "
        return self._make_token(TokenType.STR_LITERAL, self._text(), start_line, start_column)

    def _scan_number(self, start_line: int, start_column: int) -> Token:
        """
        Scan an integer or decimal literal.

        Handles:
        - Integer: 123
        - Double: 3.14 (at least one digit on each side of the point)
        """
        token_type = TokenType.INT_LITERAL

        while self._char in self.DIGITS:
            self._take()

        if self._char == ".":
            self._take()

            if self._char not in self.DIGITS:
                raise self._error(MalformedNumberError, self._text(), start_line, start_column)

            while self._char in self.DIGITS:
                self._take()

            if self._char == ".":
                raise self._error(
                    MalformedNumberError,
                    self._text() + ".",
                    start_line,
                    start_column,
                    description="Numero con mas de un punto decimal",
                )

            token_type = TokenType.DOUBLE_LITERAL

        if self._char.isalpha():
            # Report the whole run, e.g. 123abc
            while self._char.isalnum() or self._char == "_":
                self._take()
            raise self._error(MalformedNumberError, self._text(), start_line, start_column)

        return self._make_token(token_type, self._text(), start_line, start_column)

    def _scan_operator(self, start_line: int, start_column: int) -> Token:
        """
        Scan an operator or delimiter.

        Two-character operators are chosen with one character of
        lookahead; a non-matching second character stays as lookahead.
        """
        char = self._char

        if char in SINGLE_CHAR_TOKENS:
            self._advance()
            return self._make_token(SINGLE_CHAR_TOKENS[char], char, start_line, start_column)

        if char not in "=<>+&|":
            raise self._error(UnknownSymbolError, char, start_line, start_column)

        self._take()

        if char == "=":
            if self._match("="):
                return self._make_token(TokenType.EQUALS_OP, "==", start_line, start_column)
            return self._make_token(TokenType.ASSIGN_OP, "=", start_line, start_column)

        if char == "<":
            if self._match("="):
                return self._make_token(TokenType.LESS_EQ_OP, "<=", start_line, start_column)
            return self._make_token(TokenType.LESS_OP, "<", start_line, start_column)

        if char == ">":
            if self._match("="):
                return self._make_token(TokenType.GREATER_EQ_OP, ">=", start_line, start_column)
            return self._make_token(TokenType.GREATER_OP, ">", start_line, start_column)

        if char == "+":
            if self._match("+"):
                return self._make_token(TokenType.INCREMENT_OP, "++", start_line, start_column)
            return self._make_token(TokenType.ADD_OP, "+", start_line, start_column)

        # && and || have no single-character form
        if char == "&":
            if self._match("&"):
                return self._make_token(TokenType.AND_OP, "&&", start_line, start_column)
        elif self._match("|"):
            return self._make_token(TokenType.OR_OP, "||", start_line, start_column)

        raise self._error(MalformedOperatorError, char, start_line, start_column)


# =============================================================================
# Driver
# =============================================================================

def scan_file(
    path: Union[str, Path],
    config: Optional[ScannerConfig] = None,
) -> list[Token]:
    """
    Scan a whole tinyS file.

    Returns:
        Every token in the file, ending with EOF

    Raises:
        ScanError: On the first setup or lexical error
    """
    with Scanner.from_file(path, config) as scanner:
        tokens = list(scanner.tokenize())
    logger.debug(f"Scanned {len(tokens)} tokens from {path}")
    return tokens
