"""
Lox Lexer Package

Single-pass scanner turning Lox source text into a token list that always
ends with exactly one EOF token.

Key Features:
- One and two character operators with one character of lookahead
- Line comments, string literals spanning lines, decimal number literals
- Read-only keyword table that can be swapped out per scanner
- Collects every lexical error in one pass
"""

from .tokens import Token, TokenType, KEYWORDS
from .literals import LiteralKind, LiteralValue
from .scanner import Scanner, scan
from .errors import (
    Diagnostic, ErrorReporter, LoxError, ScanError,
    InvalidCharacterError, UnterminatedStringError,
)

__all__ = [
    "Scanner",
    "scan",
    "Token",
    "TokenType",
    "KEYWORDS",
    "LiteralKind",
    "LiteralValue",
    "Diagnostic",
    "ErrorReporter",
    "LoxError",
    "ScanError",
    "InvalidCharacterError",
    "UnterminatedStringError",
]
