"""
Error handling for the Lox parser.

Parse errors point at a token; their diagnostics read
``[line N] Error at '<lexeme>': ...`` or ``[line N] Error at end: ...``
when the offending token is EOF.
"""

from typing import Optional

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic, LoxError


class ParseError(LoxError):
    """
    Raised when the token stream does not match the grammar.

    Also used directly for failures that are not tied to one grammar rule,
    such as tokens left over after a complete expression.
    """

    def __init__(self, token: Token, message: str, code: Optional[str] = None,
                 help_text: Optional[str] = None):
        super().__init__(token_diagnostic(token, message, code, help_text))
        self.token = token


class UnexpectedTokenError(ParseError):
    """consume() expected a specific token type and found something else."""

    def __init__(self, expected: TokenType, token: Token, message: str):
        super().__init__(
            token, message, code="P001",
            help_text=f"Expected {expected.name}, found {token.type.name}.",
        )
        self.expected = expected


class PrimaryExpressionError(ParseError):
    """No literal or '(' where an operand was required."""

    def __init__(self, token: Token, message: str = "Expect expression."):
        super().__init__(token, message, code="P002")


class SyntaxErrorRecovery:
    """Token classes used to find a safe restart point after an error."""

    # Keywords that open a new statement
    STATEMENT_STARTS = frozenset({
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    })

    # Token that ends a statement; parsing resumes right after it
    STATEMENT_END = TokenType.SEMICOLON


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Expected token not found",
    "P002": "Expect expression",
    "P003": "Unexpected token after expression",
    "P004": "Expression nested too deeply",
}


def token_diagnostic(token: Token, message: str, code: Optional[str] = None,
                     help_text: Optional[str] = None) -> Diagnostic:
    """Build the diagnostic for an error located at a token."""
    if token.type == TokenType.EOF:
        where = " at end"
    else:
        where = f" at '{token.lexeme}'"
    return Diagnostic(message=message, line=token.line, where=where,
                      code=code, help_text=help_text)


def create_trailing_token_error(token: Token) -> ParseError:
    """Create an error for input left over after a complete expression."""
    return ParseError(
        token,
        "Expect end of expression.",
        code="P003",
        help_text="Only one expression is allowed; remove the extra input.",
    )


def create_nesting_error(token: Token, max_depth: int) -> ParseError:
    """Create an error for expressions nested past the parser's limit."""
    return ParseError(
        token,
        "Expression nested too deeply.",
        code="P004",
        help_text=f"At most {max_depth} levels of parentheses and prefix operators are allowed.",
    )
