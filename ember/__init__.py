"""
Ember Language Front End

Tokenizer for the Ember language. Produces the token stream consumed by
the parser.

Architecture:
    ember/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # ember-lex token dump

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@ember-lang.org"
__license__ = "MIT"

from .lexer import Tokenizer, Token, TokenKind, LexerError, UnrecognizedCharacterError

__all__ = [
    # Core classes
    "Tokenizer",
    "Token",
    "TokenKind",
    "LexerError",
    "UnrecognizedCharacterError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
