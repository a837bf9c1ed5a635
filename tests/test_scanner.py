"""
Test suite for the Lox scanner.

Tests cover:
- Punctuation and one/two character operators
- Whitespace, newlines and line comments
- String, number and identifier literals
- Keyword lookup, including injected keyword tables
- Error collection and reporting
"""

import io
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer import (
    Scanner, scan, TokenType, LiteralValue, ErrorReporter,
    ScanError, InvalidCharacterError, UnterminatedStringError,
)


class TestScanner(unittest.TestCase):
    """Token streams produced for valid input."""

    def _scan(self, source: str):
        return Scanner(source, reporter=ErrorReporter(quiet=True)).scan_tokens()

    def _types(self, source: str):
        return [token.type for token in self._scan(source)]

    def test_empty_source(self):
        tokens = self._scan("")
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].type, TokenType.EOF)
        self.assertEqual(tokens[0].lexeme, "")
        self.assertEqual(tokens[0].line, 1)

    def test_whitespace_and_comments_only(self):
        cases = [
            ("   ", 1),
            (" \t\r ", 1),
            ("\n", 2),
            ("// just a comment", 1),
            ("  \t\r\n// comment\n  ", 3),
            ("// a\n// b\n// c\n", 4),
        ]
        for source, line in cases:
            with self.subTest(source=source):
                tokens = self._scan(source)
                self.assertEqual([t.type for t in tokens], [TokenType.EOF])
                self.assertEqual(tokens[0].line, line)

    def test_sample_expression(self):
        tokens = self._scan("-123 * 45.67")
        self.assertEqual(
            [t.type for t in tokens],
            [TokenType.MINUS, TokenType.NUMBER, TokenType.STAR, TokenType.NUMBER, TokenType.EOF],
        )
        self.assertEqual(tokens[1].literal, LiteralValue.number(123))
        self.assertEqual(tokens[1].lexeme, "123")
        self.assertEqual(tokens[3].literal, LiteralValue.number(45.67))
        self.assertIsNone(tokens[0].literal)

    def test_single_character_tokens(self):
        self.assertEqual(self._types("(){},.-+;*/"), [
            TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN,
            TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
            TokenType.COMMA, TokenType.DOT, TokenType.MINUS, TokenType.PLUS,
            TokenType.SEMICOLON, TokenType.STAR, TokenType.SLASH, TokenType.EOF,
        ])

    def test_equal_suffix_operators(self):
        self.assertEqual(self._types("! != = == < <= > >="), [
            TokenType.BANG, TokenType.BANG_EQUAL,
            TokenType.EQUAL, TokenType.EQUAL_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
            TokenType.EOF,
        ])
        # No whitespace needed between operators
        self.assertEqual(self._types("!==="), [
            TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL, TokenType.EOF,
        ])

    def test_slash_versus_comment(self):
        tokens = self._scan("1 / 2 // 3 / 4\n5")
        self.assertEqual([t.type for t in tokens], [
            TokenType.NUMBER, TokenType.SLASH, TokenType.NUMBER,
            TokenType.NUMBER, TokenType.EOF,
        ])
        self.assertEqual(tokens[3].line, 2)

    def test_newlines_advance_line(self):
        tokens = self._scan("1\n2\n\n3")
        self.assertEqual([t.line for t in tokens], [1, 2, 4, 4])

    def test_string_literal(self):
        tokens = self._scan('"hello world"')
        self.assertEqual(tokens[0].type, TokenType.STRING)
        self.assertEqual(tokens[0].lexeme, '"hello world"')
        self.assertEqual(tokens[0].literal, LiteralValue.string("hello world"))

    def test_empty_string_literal(self):
        tokens = self._scan('""')
        self.assertEqual(tokens[0].literal, LiteralValue.string(""))

    def test_multiline_string_counts_lines(self):
        tokens = self._scan('"a\nb\nc" 1')
        self.assertEqual(tokens[0].literal, LiteralValue.string("a\nb\nc"))
        self.assertEqual(tokens[0].line, 3)
        self.assertEqual(tokens[1].line, 3)
        self.assertEqual(tokens[-1].line, 3)

    def test_comment_characters_inside_string(self):
        tokens = self._scan('"// not a comment"')
        self.assertEqual(tokens[0].literal, LiteralValue.string("// not a comment"))

    def test_integer_and_decimal_numbers(self):
        tokens = self._scan("0 7 1234 3.14159 10.0")
        values = [t.literal.value for t in tokens[:-1]]
        self.assertEqual(values, [0.0, 7.0, 1234.0, 3.14159, 10.0])
        for value in values:
            self.assertIsInstance(value, float)

    def test_trailing_dot_is_not_part_of_number(self):
        tokens = self._scan("123.")
        self.assertEqual([t.type for t in tokens], [TokenType.NUMBER, TokenType.DOT, TokenType.EOF])
        self.assertEqual(tokens[0].lexeme, "123")

    def test_leading_dot_is_not_part_of_number(self):
        tokens = self._scan(".5")
        self.assertEqual([t.type for t in tokens], [TokenType.DOT, TokenType.NUMBER, TokenType.EOF])
        self.assertEqual(tokens[1].literal, LiteralValue.number(5))

    def test_only_one_fraction_part(self):
        tokens = self._scan("1.2.3")
        self.assertEqual([t.lexeme for t in tokens[:-1]], ["1.2", ".", "3"])

    def test_identifiers_and_keywords(self):
        tokens = self._scan("and class orchid _x1 nil nilly true")
        self.assertEqual([t.type for t in tokens], [
            TokenType.AND, TokenType.CLASS, TokenType.IDENTIFIER,
            TokenType.IDENTIFIER, TokenType.NIL, TokenType.IDENTIFIER,
            TokenType.TRUE, TokenType.EOF,
        ])
        self.assertEqual(tokens[3].lexeme, "_x1")
        self.assertIsNone(tokens[2].literal)

    def test_identifier_starting_with_digits_splits(self):
        tokens = self._scan("12abc")
        self.assertEqual([t.type for t in tokens], [TokenType.NUMBER, TokenType.IDENTIFIER, TokenType.EOF])

    def test_injected_keyword_table(self):
        scanner = Scanner(
            "print show", keywords={"show": TokenType.PRINT},
            reporter=ErrorReporter(quiet=True),
        )
        tokens = scanner.scan_tokens()
        self.assertEqual([t.type for t in tokens], [TokenType.IDENTIFIER, TokenType.PRINT, TokenType.EOF])

    def test_single_eof_at_end(self):
        sources = ["", "1 + 2", "(((", '"s"\n// c', "a\nb\nc\n"]
        for source in sources:
            with self.subTest(source=source):
                types = self._types(source)
                self.assertEqual(types.count(TokenType.EOF), 1)
                self.assertEqual(types[-1], TokenType.EOF)

    def test_rescan_is_repeatable(self):
        scanner = Scanner("1 + 2", reporter=ErrorReporter(quiet=True))
        first = scanner.scan_tokens()
        second = scanner.scan_tokens()
        self.assertEqual(first, second)

    def test_module_scan_function(self):
        tokens = scan("true", reporter=ErrorReporter(quiet=True))
        self.assertEqual([t.type for t in tokens], [TokenType.TRUE, TokenType.EOF])


class TestScannerErrors(unittest.TestCase):
    """Lexical errors, their reporting and recovery."""

    def setUp(self):
        self.reporter = ErrorReporter(quiet=True)

    def test_invalid_character(self):
        scanner = Scanner("1 + @", reporter=self.reporter)
        with self.assertRaises(InvalidCharacterError) as ctx:
            scanner.scan_tokens()
        self.assertEqual(ctx.exception.char, "@")
        self.assertEqual(ctx.exception.line, 1)
        self.assertEqual(ctx.exception.code, "L001")
        self.assertEqual(str(ctx.exception), "[line 1] Error: Unexpected character '@'.")

    def test_unterminated_string_reports_opening_line(self):
        scanner = Scanner('1\n"abc\ndef', reporter=self.reporter)
        with self.assertRaises(UnterminatedStringError) as ctx:
            scanner.scan_tokens()
        self.assertEqual(ctx.exception.line, 2)
        self.assertEqual(str(ctx.exception), "[line 2] Error: Unterminated string.")

    def test_unterminated_string_simple(self):
        with self.assertRaises(UnterminatedStringError) as ctx:
            Scanner('"abc', reporter=self.reporter).scan_tokens()
        self.assertEqual(ctx.exception.line, 1)

    def test_scan_errors_share_base_class(self):
        with self.assertRaises(ScanError):
            Scanner("#", reporter=self.reporter).scan_tokens()

    def test_collects_every_error(self):
        scanner = Scanner("1 @ 2\n# 3", reporter=self.reporter)
        with self.assertRaises(InvalidCharacterError) as ctx:
            scanner.scan_tokens()
        self.assertEqual(ctx.exception.char, "@")
        self.assertTrue(scanner.has_errors())
        self.assertEqual([e.char for e in scanner.errors], ["@", "#"])
        self.assertEqual([e.line for e in scanner.errors], [1, 2])
        self.assertEqual(
            [str(d) for d in self.reporter.diagnostics],
            ["[line 1] Error: Unexpected character '@'.",
             "[line 2] Error: Unexpected character '#'."],
        )

    def test_fail_fast_stops_at_first_error(self):
        scanner = Scanner("@ # $", reporter=self.reporter, fail_fast=True)
        with self.assertRaises(InvalidCharacterError):
            scanner.scan_tokens()
        self.assertEqual(len(scanner.errors), 1)
        self.assertEqual(len(self.reporter), 1)

    def test_no_partial_tokens_on_failure(self):
        scanner = Scanner("1 + 2 ~", reporter=self.reporter)
        result = None
        with self.assertRaises(ScanError):
            result = scanner.scan_tokens()
        self.assertIsNone(result)

    def test_default_reporter_writes_stream(self):
        stream = io.StringIO()
        with self.assertRaises(ScanError):
            scan("?", reporter=ErrorReporter(stream=stream))
        self.assertEqual(stream.getvalue(), "[line 1] Error: Unexpected character '?'.\n")


if __name__ == '__main__':
    unittest.main()
