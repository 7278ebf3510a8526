"""
tinyS Token Definitions
=======================

Token types, the reserved-word table and the immutable Token record
produced by the scanner.

Each TokenType value is the exact spelling used in token listings, so
``TokenType.ID_CLASS.value == "idClass"`` and keyword types are spelled
like the keyword itself (``TokenType.CLASS.value == "class"``).
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from tinys.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the tinyS language.

    Keywords are distinguished from method/attribute identifiers so a
    parser never has to compare lexemes.
    """

    # === Structural Tokens ===
    EOF = "EOF"

    # === Identifiers ===
    ID_CLASS = "idClass"            # Uppercase-leading: Foo, LinkedList
    ID_MET_AT = "idMetAt"           # Lowercase-leading: bar, get_value2

    # === Keywords ===
    CLASS = "class"
    IMPL = "impl"
    ELSE = "else"
    FALSE = "false"
    IF = "if"
    RET = "ret"
    WHILE = "while"
    TRUE = "true"
    NIL = "nil"
    NEW = "new"
    FN = "fn"
    ST = "st"
    PUB = "pub"
    SELF = "self"
    DIV = "div"
    VOID = "void"
    START = "start"

    # === Literals ===
    STR_LITERAL = "StrLiteral"      # "text" (quotes stripped)
    INT_LITERAL = "intLiteral"      # 42
    DOUBLE_LITERAL = "doubleLiteral"  # 3.14

    # === Comparison and Assignment ===
    EQUALS_OP = "equalsOp"          # ==
    ASSIGN_OP = "assignOp"          # =
    LESS_OP = "lessOp"              # <
    LESS_EQ_OP = "lessEqOp"         # <=
    GREATER_OP = "greaterOp"        # >
    GREATER_EQ_OP = "greaterEqOp"   # >=

    # === Arithmetic ===
    ADD_OP = "addOp"                # +
    INCREMENT_OP = "incrementOp"    # ++
    SUB_OP = "subOp"                # -
    MUL_OP = "mulOp"                # *
    OP_DIV = "op_div"               # /

    # === Logical ===
    AND_OP = "andOp"                # &&
    OR_OP = "orOp"                  # ||
    NOT_OP = "notOp"                # !

    # === Delimiters ===
    L_PAREN = "lParen"              # (
    R_PAREN = "rParen"              # )
    L_BRACE = "lBrace"              # {
    R_BRACE = "rBrace"              # }
    L_BRACKET = "lBracket"          # [
    R_BRACKET = "rBracket"          # ]
    COMMA = "comma"                 # ,
    SEMICOLON = "semicolon"         # ;
    DOT = "dot"                     # .


# =============================================================================
# Keyword Mapping
# =============================================================================

KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    keyword: TokenType(keyword)
    for keyword in (
        "class", "impl", "else", "false", "if", "ret", "while", "true",
        "nil", "new", "fn", "st", "pub", "self", "div", "void", "start",
    )
})

# Characters emitted as a token on their own, with no lookahead
SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType({
    "(": TokenType.L_PAREN,
    ")": TokenType.R_PAREN,
    "{": TokenType.L_BRACE,
    "}": TokenType.R_BRACE,
    "[": TokenType.L_BRACKET,
    "]": TokenType.R_BRACKET,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    ".": TokenType.DOT,
    "-": TokenType.SUB_OP,
    "*": TokenType.MUL_OP,
    "!": TokenType.NOT_OP,
})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified token of tinyS source.

    Attributes:
        type: The TokenType classification
        lexeme: Source text of the token (string literals without quotes)
        line: Line of the first character (1-indexed)
        column: Column of the first character (1-indexed)
        filename: Name of the source file
    """
    type: TokenType
    lexeme: str
    line: int
    column: int
    filename: str = "<input>"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.lexeme:
            return f"Token({self.type.value}, {self.lexeme!r}, {self.line}:{self.column})"
        return f"Token({self.type.value}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type.value in KEYWORDS
