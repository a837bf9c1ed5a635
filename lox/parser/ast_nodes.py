"""
Abstract Syntax Tree node definitions for Lox expressions.

Four node shapes: Binary, Grouping, Literal and Unary. Every node owns its
children outright, so a parsed expression is a strict tree with no parent
links. Consumers walk it through ExprVisitor: one handler per shape, each
receiving the node's parts rather than the node.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, TypeVar

from ..lexer.tokens import Token
from ..lexer.literals import LiteralValue

R = TypeVar("R")


class ExprType(Enum):
    """Tag of each expression node shape."""
    BINARY = "Binary"
    GROUPING = "Grouping"
    LITERAL = "Literal"
    UNARY = "Unary"


class ExprVisitor(ABC, Generic[R]):
    """
    Traversal interface implemented by every AST consumer.

    The result type R is chosen by the consumer (a printer returns str, an
    evaluator would return runtime values).
    """

    @abstractmethod
    def visit_binary(self, left: "Expr", operator: Token, right: "Expr") -> R:
        pass

    @abstractmethod
    def visit_grouping(self, expression: "Expr") -> R:
        pass

    @abstractmethod
    def visit_literal(self, value: LiteralValue) -> R:
        pass

    @abstractmethod
    def visit_unary(self, operator: Token, right: "Expr") -> R:
        pass


class Expr(ABC):
    """Base class for expression nodes."""

    node_type: ExprType

    @abstractmethod
    def accept(self, visitor: ExprVisitor[R]) -> R:
        """Dispatch to the visitor handler for this node's shape."""
        pass

    @abstractmethod
    def children(self) -> List["Expr"]:
        """Get all child nodes, left to right."""
        pass


@dataclass(frozen=True)
class Binary(Expr):
    """Infix operation: left operator right."""
    left: Expr
    operator: Token
    right: Expr

    node_type = ExprType.BINARY

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_binary(self.left, self.operator, self.right)

    def children(self) -> List[Expr]:
        return [self.left, self.right]


@dataclass(frozen=True)
class Grouping(Expr):
    """Parenthesized expression."""
    expression: Expr

    node_type = ExprType.GROUPING

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_grouping(self.expression)

    def children(self) -> List[Expr]:
        return [self.expression]


@dataclass(frozen=True)
class Literal(Expr):
    value: LiteralValue

    node_type = ExprType.LITERAL

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_literal(self.value)

    def children(self) -> List[Expr]:
        return []


@dataclass(frozen=True)
class Unary(Expr):
    """Prefix operation: operator right."""
    operator: Token
    right: Expr

    node_type = ExprType.UNARY

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_unary(self.operator, self.right)

    def children(self) -> List[Expr]:
        return [self.right]
