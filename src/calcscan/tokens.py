"""Token kinds, character classes, data structures, and the character classifier."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CharClass(Enum):
    SPACE = auto()  # space, tab
    NEWLINE = auto()  # \n, \r
    SLASH = auto()  # /
    STAR = auto()  # *
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    PLUS = auto()  # +
    MINUS = auto()  # -
    COLON = auto()  # :
    EQUAL = auto()  # =
    DOT = auto()  # .
    DIGIT = auto()  # 0-9
    LETTER = auto()  # alphabetic
    OTHER = auto()


class TokenKind(Enum):
    # End of input sentinel
    NONE = auto()

    # Operators
    DIVIDE = auto()  # /
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    PLUS = auto()  # +
    MINUS = auto()  # -
    TIMES = auto()  # *
    ASSIGN = auto()  # :=

    # Content
    NUMBER = auto()  # digit+ ('.' digit+)?
    IDENTIFIER = auto()  # letter (letter | digit)*

    # Trivia
    COMMENT = auto()  # /* ... */ or // ...
    WHITESPACE = auto()  # runs of spaces, tabs, newlines

    # Keywords (only produced by reclassifying an IDENTIFIER)
    READ = auto()
    WRITE = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token and the exact source text it covers."""

    kind: TokenKind
    lexeme: str
    span: Span


_SYMBOL_CLASSES: dict[str, CharClass] = {
    " ": CharClass.SPACE,
    "\t": CharClass.SPACE,
    "\n": CharClass.NEWLINE,
    "\r": CharClass.NEWLINE,
    "/": CharClass.SLASH,
    "*": CharClass.STAR,
    "(": CharClass.LPAREN,
    ")": CharClass.RPAREN,
    "+": CharClass.PLUS,
    "-": CharClass.MINUS,
    ":": CharClass.COLON,
    "=": CharClass.EQUAL,
    ".": CharClass.DOT,
}


def classify(ch: str) -> CharClass:
    """Return the character class of ch. Never fails; unknown input is OTHER."""
    cls = _SYMBOL_CLASSES.get(ch)
    if cls is not None:
        return cls
    if len(ch) != 1:
        return CharClass.OTHER
    if ch.isdecimal():
        return CharClass.DIGIT
    if ch.isalpha():
        return CharClass.LETTER
    return CharClass.OTHER
