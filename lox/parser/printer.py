"""
Bracketed, Lisp-style rendering of expression trees.

    -123 * (45.67)  →  (* (- 123) (group 45.67))

Works only through ExprVisitor, never by reading node fields.
"""

from typing import List

from ..lexer.tokens import Token
from ..lexer.literals import LiteralValue
from .ast_nodes import Expr, ExprVisitor


class AstPrinter(ExprVisitor[str]):
    """Render an expression as a fully parenthesized prefix string."""

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def visit_binary(self, left: Expr, operator: Token, right: Expr) -> str:
        return self._parenthesize(operator.lexeme, [left, right])

    def visit_grouping(self, expression: Expr) -> str:
        return self._parenthesize("group", [expression])

    def visit_literal(self, value: LiteralValue) -> str:
        return str(value)

    def visit_unary(self, operator: Token, right: Expr) -> str:
        return self._parenthesize(operator.lexeme, [right])

    def _parenthesize(self, name: str, exprs: List[Expr]) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return "(" + " ".join(parts) + ")"
