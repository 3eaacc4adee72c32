"""
Ember Lexer - turns source text into a queue of tokens

Single-character lookahead, run-length scanner. Every token is either a
maximal run of digits, a maximal run of identifier characters, or a
single punctuation character; whitespace between them is dropped.

xwest
"""

import logging
import unicodedata
from collections import deque
from typing import Callable, Deque, Iterator, List, Optional

from .tokens import Token, TokenKind, CharClass, Span, SourceLocation, PUNCTUATION
from .errors import LexerError, create_unrecognized_character_error

logger = logging.getLogger(__name__)


def classify(char: str) -> CharClass:
    """Classify a single character for scanner dispatch."""
    if char.isspace():
        return CharClass.WHITESPACE
    if char.isdecimal():
        return CharClass.DIGIT
    if is_identifier_char(char):
        return CharClass.IDENTIFIER_START
    if char in PUNCTUATION:
        return CharClass.PUNCTUATION
    return CharClass.OTHER


# Letters plus the mark/number categories that carry the Unicode Alphabetic
# property (vowel signs in Indic scripts, letter-like numerals)
ALPHABETIC_CATEGORIES = ('Mn', 'Mc', 'Nl')


def is_identifier_char(char: str) -> bool:
    """Identifiers are runs of alphabetic characters and underscores."""
    return (char.isalpha() or char == "_" or
            unicodedata.category(char) in ALPHABETIC_CATEGORIES)


class Tokenizer:
    """
    Ember lexical analyzer.

    Owns the source text, a scan cursor and a FIFO queue of produced
    tokens. `process()` scans the whole input; `peek()` and `next()`
    hand the queued tokens to the parser one at a time.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the tokenizer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self._source = source
        self.filename = filename
        self._cursor = 0
        self._pending: Deque[Token] = deque()

    @property
    def source(self) -> str:
        return self._source

    @property
    def cursor(self) -> int:
        """Index of the next unread character."""
        return self._cursor

    def peek(self) -> Optional[Token]:
        """Return the front of the queue without consuming it."""
        if self._pending:
            return self._pending[0]
        return None

    def next(self) -> Optional[Token]:
        """Remove and return the front of the queue."""
        if self._pending:
            return self._pending.popleft()
        return None

    def process(self):
        """
        Scan the remaining source, queueing every token found.

        Raises:
            UnrecognizedCharacterError: on a character that starts no token.
                Tokens queued before it stay available and the cursor is
                left on the offending character.
        """
        produced = len(self._pending)
        try:
            while self._peek_char() is not None:
                self._skip_whitespace()
                if self._peek_char() is None:
                    break
                self._scan_next()
        except LexerError as e:
            logger.debug("%s: lexing aborted at offset %d: %s",
                         self.filename, self._cursor, e.diagnostic.message)
            raise

        logger.debug("%s: produced %d tokens from %d characters",
                     self.filename, len(self._pending) - produced, len(self._source))

    def pending_count(self) -> int:
        """Number of tokens produced but not yet consumed."""
        return len(self._pending)

    def is_exhausted(self) -> bool:
        """True once the source is fully scanned and the queue drained."""
        return self._cursor >= len(self._source) and not self._pending

    def location_of(self, offset: int) -> SourceLocation:
        """Line/column location of a code point offset in this source."""
        return SourceLocation.from_offset(self._source, offset, self.filename)

    def __len__(self) -> int:
        return len(self._pending)

    def __iter__(self) -> Iterator[Token]:
        """Drain queued tokens; does not scan."""
        token = self.next()
        while token is not None:
            yield token
            token = self.next()

    def _scan_next(self):
        """Dispatch on the class of the next unread character."""
        char_class = classify(self._peek_char())

        if char_class == CharClass.DIGIT:
            self._scan_number()
        elif char_class == CharClass.IDENTIFIER_START:
            self._scan_identifier()
        else:
            self._scan_special()

    def _scan_number(self):
        """Scan a maximal run of decimal digits."""
        span = self._scan_while(str.isdecimal)
        self._push(TokenKind.NUMBER, span)

    def _scan_identifier(self):
        """Scan a maximal run of alphabetic/underscore characters."""
        span = self._scan_while(is_identifier_char)
        self._push(TokenKind.IDENTIFIER, span)

    def _scan_special(self):
        """Scan a single punctuation character."""
        start = self._cursor
        char = self._peek_char()
        kind = PUNCTUATION.get(char)

        if kind is None:
            raise create_unrecognized_character_error(
                char,
                start,
                self.location_of(start),
                source_line=self._line_containing(start)
            )

        self._advance()
        self._push(kind, Span(start, self._cursor))

    def _skip_whitespace(self):
        self._scan_while(str.isspace)

    def _scan_while(self, predicate: Callable[[str], bool]) -> Span:
        """Advance over the maximal run satisfying `predicate`."""
        start = self._cursor
        char = self._peek_char()
        while char is not None and predicate(char):
            self._advance()
            char = self._peek_char()
        return Span(start, self._cursor)

    def _push(self, kind: TokenKind, span: Span):
        self._pending.append(Token(kind, span, self._source))

    def _peek_char(self) -> Optional[str]:
        """Peek at the next unread character without advancing."""
        if self._cursor < len(self._source):
            return self._source[self._cursor]
        return None

    def _advance(self):
        """Advance the cursor by one character."""
        if self._cursor < len(self._source):
            self._cursor += 1

    def _line_containing(self, offset: int) -> str:
        start = self._source.rfind("\n", 0, offset) + 1
        end = self._source.find("\n", offset)
        if end == -1:
            end = len(self._source)
        return self._source[start:end]


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        UnrecognizedCharacterError: If lexing fails
    """
    tokenizer = Tokenizer(source, filename)
    tokenizer.process()
    return list(tokenizer)


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        UnrecognizedCharacterError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
