"""
Lox Parser Package

Recursive descent parser for Lox expressions, producing a strict tree of
Expr nodes that consumers walk through ExprVisitor.

Key Features:
- Fixed precedence layers with left-associative binary operators
- Right-associative prefix operators
- Typed parse errors reported through the shared diagnostic channel
- Statement-boundary synchronization hook for error recovery
- Bounded nesting depth
"""

from .ast_nodes import Expr, ExprType, ExprVisitor, Binary, Grouping, Literal, Unary
from .parser import Parser, parse_string, MAX_NESTING_DEPTH
from .printer import AstPrinter
from .errors import ParseError, UnexpectedTokenError, PrimaryExpressionError

__all__ = [
    # Core parser
    "Parser",
    "parse_string",
    "MAX_NESTING_DEPTH",

    # AST nodes
    "Expr", "ExprType", "ExprVisitor",
    "Binary", "Grouping", "Literal", "Unary",

    # Consumers
    "AstPrinter",

    # Error handling
    "ParseError", "UnexpectedTokenError", "PrimaryExpressionError",
]
