"""Table-driven lexical scanner for a small arithmetic/assignment language."""

from __future__ import annotations

from calcscan.errors import ScanError
from calcscan.scanner import Scanner, tokenize
from calcscan.tokens import CharClass, Position, Span, Token, TokenKind, classify

__version__ = "0.1.0"

__all__ = [
    "CharClass",
    "Position",
    "ScanError",
    "Scanner",
    "Span",
    "Token",
    "TokenKind",
    "classify",
    "tokenize",
]
