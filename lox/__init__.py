"""
Lox Expression Front End

Scanner and recursive-descent parser for the expression subset of the Lox
language. Source text goes in, a tree of Expr nodes comes out.

Architecture:
    lox/
    ├── lexer/           # Tokens, literal values, scanning, diagnostics
    └── parser/          # AST nodes, recursive descent, printer

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, LiteralValue, scan
from .parser import Parser, AstPrinter, parse_string

__all__ = [
    "Scanner",
    "Parser",
    "AstPrinter",
    "Token",
    "TokenType",
    "LiteralValue",
    "scan",
    "parse_string",

    # Version info
    "__version__",
    "__license__",
]
