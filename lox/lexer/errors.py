"""
Error handling for the Lox lexer.

Provides the line-tagged Diagnostic shared by the scanner and the parser,
the ErrorReporter that acts as the diagnostic channel, and the exception
types raised for lexical errors.
"""

import logging
import sys
from typing import Optional, List, TextIO
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class Diagnostic:
    """One reportable problem, tied to a source line."""
    message: str
    line: int
    where: str = ""  # "", " at end" or " at '<lexeme>'"
    severity: str = "error"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] {self.severity.capitalize()}{self.where}: {self.message}"

    def format(self, verbose: bool = False) -> str:
        """Report text; verbose output adds the help line when there is one."""
        result = str(self)
        if verbose and self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class ErrorReporter:
    """
    Diagnostic channel shared by the scanner and the parser.

    Every reported diagnostic is kept in order. Unless the reporter is quiet
    it is also written to ``stream`` (stderr by default, looked up at report
    time). A verbose reporter follows each line with its help text.
    """

    def __init__(self, stream: Optional[TextIO] = None, quiet: bool = False,
                 verbose: bool = False):
        self.stream = stream
        self.quiet = quiet
        self.verbose = verbose
        self.diagnostics: List[Diagnostic] = []

    @property
    def had_error(self) -> bool:
        return any(d.severity == "error" for d in self.diagnostics)

    def report(self, diagnostic: Diagnostic) -> Diagnostic:
        self.diagnostics.append(diagnostic)
        logger.debug("reported %s (%s)", diagnostic, diagnostic.code)
        if not self.quiet:
            stream = self.stream if self.stream is not None else sys.stderr
            print(diagnostic.format(self.verbose), file=stream)
        return diagnostic

    def error(self, line: int, message: str, code: Optional[str] = None) -> Diagnostic:
        """Report an error that has no token to point at."""
        return self.report(Diagnostic(message=message, line=line, code=code))

    def reset(self):
        self.diagnostics.clear()

    def __len__(self) -> int:
        return len(self.diagnostics)


class LoxError(Exception):
    """
    Base class for every error raised while scanning or parsing.

    Carries the Diagnostic describing it; ``str()`` is the formatted
    ``[line N] Error...`` text.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ScanError(LoxError):
    """Raised when the scanner cannot turn the source into tokens."""


class InvalidCharacterError(ScanError):
    """A character that cannot start any token."""

    def __init__(self, char: str, line: int):
        super().__init__(Diagnostic(
            message=f"Unexpected character '{char}'.",
            line=line,
            code="L001",
            help_text=_describe_character(char),
        ))
        self.char = char


class UnterminatedStringError(ScanError):
    """The source ended inside a string literal."""

    def __init__(self, line: int):
        super().__init__(Diagnostic(
            message="Unterminated string.",
            line=line,
            code="L002",
            help_text="String literals must be closed with a matching '\"'.",
        ))


# Error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
}


def _describe_character(char: str) -> str:
    if char.isprintable():
        return f"The character '{char}' is not valid in Lox source code."
    return f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."
