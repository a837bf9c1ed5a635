"""
Lox Recursive Descent Parser

One method per grammar rule, lowest precedence first:

    expression → equality
    equality   → comparison ( ( "!=" | "==" ) comparison )*
    comparison → term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       → factor ( ( "-" | "+" ) factor )*
    factor     → unary ( ( "/" | "*" ) unary )*
    unary      → ( "!" | "-" ) unary | primary
    primary    → NUMBER | STRING | "true" | "false" | "nil"
               | "(" expression ")"

The binary layers loop and fold to the left, so `1 - 2 - 3` is
`(1 - 2) - 3`. unary recurses, so `- - 5` nests to the right.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional

from ..lexer.tokens import Token, TokenType
from ..lexer.literals import LiteralValue
from ..lexer.errors import ErrorReporter
from .ast_nodes import Expr, Binary, Grouping, Literal, Unary
from .errors import (
    ParseError, UnexpectedTokenError, PrimaryExpressionError,
    SyntaxErrorRecovery, create_trailing_token_error, create_nesting_error
)

logger = logging.getLogger(__name__)

# Combined limit on nested groupings and prefix operators. Each level costs
# several Python frames, so this keeps deep input well clear of the
# interpreter's recursion limit.
MAX_NESTING_DEPTH = 64


class Parser:
    """
    Lox expression parser.

    Walks a token list with a single forward-only cursor. The list must end
    with an EOF token; reaching it is how the parser detects end of input.
    """

    def __init__(
        self,
        tokens: List[Token],
        reporter: Optional[ErrorReporter] = None,
        max_depth: int = MAX_NESTING_DEPTH,
    ):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Tokens from the scanner, ending with EOF
            reporter: Diagnostic channel; a stderr reporter is used if omitted
            max_depth: Deepest nesting of groupings and prefix operators allowed
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token list must end with an EOF token")

        self.tokens = tokens
        self.current = 0
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.max_depth = max_depth
        self.errors: List[ParseError] = []
        self._depth = 0

    def parse(self) -> Optional[Expr]:
        """
        Parse the token list into a single expression.

        Returns:
            The root Expr, or None if parsing failed. The failure has already
            been reported and is available in `errors`.
        """
        self.current = 0
        self._depth = 0
        self.errors.clear()

        try:
            expr = self._expression()
            if not self._is_at_end():
                raise self._error(create_trailing_token_error(self._peek()))
        except ParseError:
            logger.debug("parse failed: %s", self.errors[-1])
            return None

        logger.debug("parsed %d token(s) into %s", len(self.tokens), expr.node_type.value)
        return expr

    # ========================================================================
    # Grammar rules
    # ========================================================================

    def _expression(self) -> Expr:
        return self._equality()

    def _equality(self) -> Expr:
        return self._left_associative(
            self._comparison,
            TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL,
        )

    def _comparison(self) -> Expr:
        return self._left_associative(
            self._term,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL,
        )

    def _term(self) -> Expr:
        return self._left_associative(self._factor, TokenType.MINUS, TokenType.PLUS)

    def _factor(self) -> Expr:
        return self._left_associative(self._unary, TokenType.SLASH, TokenType.STAR)

    def _left_associative(self, operand: Callable[[], Expr], *operators: TokenType) -> Expr:
        """Parse `operand ( operator operand )*`, folding to the left."""
        expr = operand()

        while self._match(*operators):
            operator = self._previous()
            right = operand()
            expr = Binary(expr, operator, right)

        return expr

    def _unary(self) -> Expr:
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            with self._nested():
                right = self._unary()
            return Unary(operator, right)

        return self._primary()

    def _primary(self) -> Expr:
        if self._match(TokenType.FALSE):
            return Literal(LiteralValue.boolean(False))
        if self._match(TokenType.TRUE):
            return Literal(LiteralValue.boolean(True))
        if self._match(TokenType.NIL):
            return Literal(LiteralValue.null())

        if self._match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self._previous().literal)

        if self._match(TokenType.LEFT_PAREN):
            with self._nested():
                expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        raise self._error(PrimaryExpressionError(self._peek()))

    # ========================================================================
    # Error recovery
    # ========================================================================

    def synchronize(self):
        """
        Discard tokens until a likely statement boundary.

        Stops just after a ';' or just before a keyword that starts a
        statement. The expression grammar never calls this; it is the restart
        hook for a statement-level parser.
        """
        self._advance()

        while not self._is_at_end():
            if self._previous().type == SyntaxErrorRecovery.STATEMENT_END:
                break
            if self._peek().type in SyntaxErrorRecovery.STATEMENT_STARTS:
                break
            self._advance()

        logger.debug("synchronized at token %d (%s)", self.current, self._peek().type.name)

    def _error(self, error: ParseError) -> ParseError:
        """Record and report a parse error, returning it for the caller to raise."""
        self.errors.append(error)
        self.reporter.report(error.diagnostic)
        return error

    @contextmanager
    def _nested(self) -> Iterator[None]:
        """Count one level of grouping or prefix operator; the top level is depth 0."""
        self._depth += 1
        try:
            if self._depth > self.max_depth:
                raise self._error(create_nesting_error(self._peek(), self.max_depth))
            yield
        finally:
            self._depth -= 1

    # ========================================================================
    # Cursor helpers
    # ========================================================================

    def _consume(self, token_type: TokenType, message: str) -> Token:
        if self._check(token_type):
            return self._advance()

        raise self._error(UnexpectedTokenError(token_type, self._peek(), message))

    def _match(self, *token_types: TokenType) -> bool:
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        if self._is_at_end():
            return self._peek()
        self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]


def parse_string(source: str, reporter: Optional[ErrorReporter] = None) -> Expr:
    """
    Convenience function to scan and parse a source string.

    Args:
        source: Source text holding one expression
        reporter: Diagnostic channel shared by scanner and parser

    Returns:
        Expression AST

    Raises:
        ScanError: If scanning fails
        ParseError: If parsing fails
    """
    from ..lexer import Scanner

    tokens = Scanner(source, reporter=reporter).scan_tokens()
    parser = Parser(tokens, reporter=reporter)
    expr = parser.parse()
    if expr is None:
        raise parser.errors[0]
    return expr
