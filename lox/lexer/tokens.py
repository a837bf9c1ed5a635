"""
Token definitions for the Lox lexer.

This module defines every token type the scanner can produce:
- Single-character punctuation and operators
- One or two character comparison operators
- Literals (numbers, strings) and identifiers
- The reserved keyword set
- The EOF sentinel that closes every token list
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .literals import LiteralValue


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    New kinds can be appended without disturbing existing ones; nothing
    depends on the ordinal values.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # breakfast, _tmp1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 123, 45.67

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()                    # End of input


@dataclass(frozen=True)
class Token:
    """
    One classified lexeme.

    Holds the token type, the raw source text, the literal payload (only
    NUMBER and STRING tokens have one) and the line the token ends on.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Optional[LiteralValue]  # Payload for NUMBER/STRING, else None
    line: int

    def __str__(self) -> str:
        if self.literal is not None:
            return f"{self.type.name} {self.lexeme} {self.literal}"
        return f"{self.type.name} {self.lexeme}"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal payload."""
        return self.type in (TokenType.NUMBER, TokenType.STRING)

    @property
    def is_keyword(self) -> bool:
        """Check if this token has a reserved-word type, whatever its spelling."""
        return self.type in KEYWORD_TYPES


# Reserved words. Wrapped in a read-only proxy: the table is built once at
# import time and shared by every scanner.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})

KEYWORD_TYPES = frozenset(KEYWORDS.values())

# Characters that always form a token on their own
SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType({
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
})

# Characters whose token changes when followed by '=': bare, with '='
EQUAL_SUFFIX_TOKENS: Mapping[str, tuple] = MappingProxyType({
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
})
