"""
Error handling for the Ember lexer.

Provides error reporting with source location information and a
caret-highlighted excerpt of the offending line.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A lexer diagnostic (error, warning, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None
    source_line: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.source_line is not None:
            gutter = f"{self.location.line:>4} | "
            result += f"{gutter}{self.source_line}\n"
            # Tabs are kept so the caret lines up under the rendered line
            lead = "".join(
                c if c == "\t" else " " for c in self.source_line[:self.location.column - 1]
            )
            result += " " * len(gutter) + lead + "^\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a fatal error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None,
        source_line: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions,
            source_line=source_line
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnrecognizedCharacterError(LexerError):
    """
    Raised when the next unread character starts no known token.

    Keeps the offending character and its code point offset so callers
    can point at it.
    """

    def __init__(self, char: str, offset: int, location: SourceLocation, **kwargs):
        super().__init__(f"Unrecognized character: {char!r}", location, code="L001", **kwargs)
        self.char = char
        self.offset = offset


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unrecognized character",
}

# Characters that are easy to confuse with a supported delimiter
PUNCTUATION_LOOKALIKES = {
    "[": ["("],
    "]": [")"],
    "<": ["("],
    ">": [")"],
    ":": [";"],
    ".": [","],
}


def create_unrecognized_character_error(
    char: str,
    offset: int,
    location: SourceLocation,
    source_line: Optional[str] = None
) -> UnrecognizedCharacterError:
    """Create an error for a character that starts no token."""
    suggestions = PUNCTUATION_LOOKALIKES.get(char, [])

    if suggestions:
        help_text = f"Did you mean {' or '.join(repr(s) for s in suggestions)}?"
    elif char.isprintable():
        help_text = f"The character {char!r} is not valid in Ember source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnrecognizedCharacterError(
        char,
        offset,
        location,
        help_text=help_text,
        suggestions=suggestions or None,
        source_line=source_line
    )
