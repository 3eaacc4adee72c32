"""
Token definitions for the Ember lexer.

This module defines the token taxonomy produced by the tokenizer:
- Literals (plain decimal digit runs)
- Identifiers (alphabetic or underscore runs)
- Punctuation and delimiters

along with the character classes the scanner dispatches on and the
span/location types used to tie tokens back to their source text.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field


class TokenKind(Enum):
    """
    Enumeration of all lexical categories in Ember.

    Closed set: the parser matches on these exhaustively, so adding a
    kind means updating every consumer.
    """

    # ========================================================================
    # Literals and Identifiers
    # ========================================================================
    NUMBER = auto()                 # 42, 007
    IDENTIFIER = auto()             # name, _tmp, Ünïcode

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LCURLY = auto()                 # {
    RCURLY = auto()                 # }
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;


class CharClass(Enum):
    """Result of classifying the next unread character."""
    DIGIT = auto()
    IDENTIFIER_START = auto()
    WHITESPACE = auto()
    PUNCTUATION = auto()
    OTHER = auto()


@dataclass(frozen=True)
class Span:
    """Half-open range [start, end) of code point offsets into the source."""
    start: int
    end: int

    def __post_init__(self):
        if not 0 <= self.start <= self.end:
            raise ValueError(f"invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Line and column are 1-based; offset is the 0-based code point index.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"

    @classmethod
    def from_offset(cls, source: str, offset: int, filename: str = "<unknown>") -> "SourceLocation":
        """Compute the line/column of `offset` within `source`."""
        line = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(filename, line, offset - line_start + 1, offset)


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Only the span is stored; `raw` is sliced out of the retained source
    on demand so no substring copy is held by the token.
    """
    kind: TokenKind
    span: Span
    source: str = field(repr=False, compare=False)

    @property
    def raw(self) -> str:
        """Exact source text covered by this token."""
        return self.source[self.span.start:self.span.end]

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end

    def __str__(self) -> str:
        return f"{self.kind.name}({self.raw!r})"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.raw!r}, {self.span.start}, {self.span.end})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.kind == TokenKind.NUMBER

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.kind == TokenKind.IDENTIFIER

    @property
    def is_punctuation(self) -> bool:
        """Check if this token is a punctuation/delimiter."""
        return self.kind in PUNCTUATION.values()


# Single-character punctuation table used by the special-character scanner
PUNCTUATION = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LCURLY,
    "}": TokenKind.RCURLY,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}
