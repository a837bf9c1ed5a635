"""
Lox Scanner - turns source text into tokens

Single pass over the source with a start/current cursor pair. Each call to
_scan_token() consumes exactly one lexeme (or one piece of whitespace or
comment) starting at `start`.
"""

import logging
from typing import List, Mapping, Optional

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS
)
from .literals import LiteralValue
from .errors import (
    ErrorReporter, ScanError, InvalidCharacterError, UnterminatedStringError
)

logger = logging.getLogger(__name__)


class Scanner:
    """
    Lox lexical analyzer.

    Converts source text into a list of tokens closed by a single EOF token.
    Lexical errors are reported as they are found and scanning continues
    past them, so one run surfaces every bad character. If any error was
    found, scan_tokens() raises the first one instead of returning a
    partial token list.
    """

    def __init__(
        self,
        source: str,
        keywords: Mapping[str, TokenType] = KEYWORDS,
        reporter: Optional[ErrorReporter] = None,
        fail_fast: bool = False,
    ):
        """
        Initialize the scanner with source text.

        Args:
            source: Complete source text
            keywords: Reserved word table; identifiers found here get its type
            reporter: Diagnostic channel; a stderr reporter is used if omitted
            fail_fast: Stop at the first lexical error instead of collecting all
        """
        self.source = source
        self.keywords = keywords
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.fail_fast = fail_fast

        self.start = 0      # First character of the current lexeme
        self.current = 0    # Character about to be read
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[ScanError] = []

    def scan_tokens(self) -> List[Token]:
        """
        Scan the whole source.

        Returns:
            List of tokens ending with exactly one EOF token

        Raises:
            ScanError: The first lexical error, once the pass is finished
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens.clear()
        self.errors.clear()

        while not self._is_at_end():
            self.start = self.current
            try:
                self._scan_token()
            except ScanError as e:
                self.errors.append(e)
                self.reporter.report(e.diagnostic)
                if self.fail_fast:
                    break

        if self.errors:
            logger.debug("scan failed with %d error(s)", len(self.errors))
            raise self.errors[0]

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        logger.debug("scanned %d token(s) over %d line(s)", len(self.tokens), self.line)
        return list(self.tokens)

    def has_errors(self) -> bool:
        """Check if the last scan found any errors."""
        return len(self.errors) > 0

    def _scan_token(self):
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in EQUAL_SUFFIX_TOKENS:
            bare, with_equal = EQUAL_SUFFIX_TOKENS[char]
            self._add_token(with_equal if self._match("=") else bare)
        elif char == "/":
            if self._match("/"):
                # Line comment runs to the newline, which is left for the
                # next call so the line count stays right.
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char in (" ", "\r", "\t"):
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self._string()
        elif _is_digit(char):
            self._number()
        elif _is_alpha(char):
            self._identifier()
        else:
            raise InvalidCharacterError(char, self.line)

    def _string(self):
        start_line = self.line
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise UnterminatedStringError(start_line)

        self._advance()  # Closing quote

        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, LiteralValue.string(value))

    def _number(self):
        while _is_digit(self._peek()):
            self._advance()

        # A '.' only belongs to the number when a digit follows it
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        text = self.source[self.start:self.current]
        self._add_token(TokenType.NUMBER, LiteralValue.number(float(text)))

    def _identifier(self):
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(self.keywords.get(text, TokenType.IDENTIFIER))

    def _add_token(self, token_type: TokenType, literal: Optional[LiteralValue] = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line))

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


def scan(
    source: str,
    keywords: Mapping[str, TokenType] = KEYWORDS,
    reporter: Optional[ErrorReporter] = None,
) -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source text
        keywords: Reserved word table
        reporter: Diagnostic channel

    Returns:
        List of tokens ending with EOF

    Raises:
        ScanError: If scanning fails
    """
    return Scanner(source, keywords=keywords, reporter=reporter).scan_tokens()
