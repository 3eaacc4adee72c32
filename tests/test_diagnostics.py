"""
Tests for token value types and lexer diagnostics.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from ember.lexer.tokens import Token, TokenKind, Span, SourceLocation, PUNCTUATION
from ember.lexer.errors import (
    Diagnostic, LexerError, UnrecognizedCharacterError,
    create_unrecognized_character_error, ERROR_CODES
)
from ember.lexer.lexer import Tokenizer


class TestTokenTypes(unittest.TestCase):
    """Test cases for Token, Span and SourceLocation."""

    def test_token_raw_is_resolved_from_source(self):
        source = "alpha beta"
        token = Token(TokenKind.IDENTIFIER, Span(6, 10), source)
        self.assertEqual(token.raw, "beta")
        self.assertEqual(token.start, 6)
        self.assertEqual(token.end, 10)

    def test_token_is_immutable(self):
        token = Token(TokenKind.NUMBER, Span(0, 1), "1")
        with self.assertRaises(AttributeError):
            token.kind = TokenKind.IDENTIFIER

    def test_token_str_and_repr(self):
        token = Token(TokenKind.NUMBER, Span(0, 2), "42")
        self.assertEqual(str(token), "NUMBER('42')")
        self.assertEqual(repr(token), "Token(NUMBER, '42', 0, 2)")

    def test_token_category_properties(self):
        source = "x 1 ;"
        self.assertTrue(Token(TokenKind.IDENTIFIER, Span(0, 1), source).is_identifier)
        self.assertTrue(Token(TokenKind.NUMBER, Span(2, 3), source).is_literal)
        self.assertTrue(Token(TokenKind.SEMICOLON, Span(4, 5), source).is_punctuation)
        self.assertFalse(Token(TokenKind.NUMBER, Span(2, 3), source).is_punctuation)

    def test_every_kind_reachable(self):
        """Each token kind is produced by some input."""
        produced = {TokenKind.NUMBER, TokenKind.IDENTIFIER} | set(PUNCTUATION.values())
        self.assertEqual(produced, set(TokenKind))

    def test_span(self):
        self.assertEqual(len(Span(3, 7)), 4)
        self.assertEqual(str(Span(3, 7)), "3..7")
        with self.assertRaises(ValueError):
            Span(5, 2)
        with self.assertRaises(ValueError):
            Span(-1, 2)

    def test_location_from_offset(self):
        source = "one\ntwo\nthree"
        location = SourceLocation.from_offset(source, 9, "f.em")
        self.assertEqual((location.line, location.column), (3, 2))
        self.assertEqual(str(location), "f.em:3:2")

        first = SourceLocation.from_offset(source, 0)
        self.assertEqual((first.line, first.column, first.filename), (1, 1, "<unknown>"))

    def test_tokenizer_location_of(self):
        tokenizer = Tokenizer("a\nb", filename="x.em")
        self.assertEqual(tokenizer.location_of(2), SourceLocation("x.em", 2, 1, 2))


class TestDiagnostics(unittest.TestCase):
    """Test cases for error construction and rendering."""

    def test_error_code_table(self):
        self.assertEqual(ERROR_CODES["L001"], "Unrecognized character")

    def test_rendered_error_points_at_column(self):
        tokenizer = Tokenizer("ab\n  #x", filename="prog.em")
        with self.assertRaises(UnrecognizedCharacterError) as ctx:
            tokenizer.process()

        lines = str(ctx.exception).splitlines()
        self.assertEqual(lines[0], "ERROR[L001]: Unrecognized character: '#'")
        self.assertEqual(lines[1], "  --> prog.em:2:3")
        self.assertEqual(lines[2], "   2 |   #x")
        self.assertEqual(lines[3], "         ^")
        self.assertTrue(lines[4].startswith("  help:"))

    def test_caret_keeps_tabs_from_source_line(self):
        tokenizer = Tokenizer("\t\tx #", filename="tabs.em")
        with self.assertRaises(UnrecognizedCharacterError) as ctx:
            tokenizer.process()

        lines = str(ctx.exception).splitlines()
        self.assertEqual(lines[1], "  --> tabs.em:1:5")
        self.assertEqual(lines[2], "   1 | \t\tx #")
        self.assertEqual(lines[3], "       \t\t  ^")

    def test_lookalike_suggestions(self):
        error = create_unrecognized_character_error("[", 0, SourceLocation("<s>", 1, 1, 0))
        self.assertEqual(error.diagnostic.suggestions, ["("])
        self.assertIn("Did you mean '('?", error.diagnostic.help_text)

    def test_non_printable_help(self):
        error = create_unrecognized_character_error("\x07", 4, SourceLocation("<s>", 1, 5, 4))
        self.assertIn("U+0007", error.diagnostic.help_text)
        self.assertIsNone(error.diagnostic.suggestions)
        self.assertEqual(error.offset, 4)

    def test_plain_diagnostic_without_excerpt(self):
        diagnostic = Diagnostic("odd", SourceLocation("<s>", 1, 1, 0), "warning")
        self.assertEqual(str(diagnostic), "WARNING: odd\n  --> <s>:1:1\n")

    def test_lexer_error_is_exception(self):
        error = LexerError("boom", SourceLocation("<s>", 1, 1, 0))
        self.assertIsInstance(error, Exception)
        self.assertEqual(error.location.offset, 0)
        self.assertEqual(error.diagnostic.severity, "error")


if __name__ == "__main__":
    unittest.main()
