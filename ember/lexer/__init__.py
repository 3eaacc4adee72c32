"""
Ember Lexer Package

Implements the lexical analyzer (tokenizer) for the Ember language front end.
Source text is scanned into a FIFO queue of typed tokens that the parser
pulls with `peek()`/`next()`.

Key Features:
- Maximal-run scanning of digit and identifier sequences
- Single-character punctuation table
- Zero-copy tokens (spans resolved against the source on demand)
- Fail-fast diagnostics with line/column and a highlighted excerpt

Author: xwest
"""

from .tokens import Token, TokenKind, CharClass, Span, SourceLocation, PUNCTUATION
from .lexer import Tokenizer, classify, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError, UnrecognizedCharacterError

__all__ = [
    "Tokenizer",
    "Token",
    "TokenKind",
    "CharClass",
    "Span",
    "SourceLocation",
    "PUNCTUATION",
    "classify",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
    "UnrecognizedCharacterError",
]
