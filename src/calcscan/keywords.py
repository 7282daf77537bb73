"""Reserved words and identifier reclassification."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from calcscan.tokens import TokenKind

KEYWORDS: Mapping[str, TokenKind] = MappingProxyType(
    {
        "read": TokenKind.READ,
        "write": TokenKind.WRITE,
    }
)


def reclassify(kind: TokenKind, lexeme: str) -> TokenKind:
    """Promote an IDENTIFIER to its keyword kind if lexeme is reserved (case-sensitive)."""
    if kind is not TokenKind.IDENTIFIER:
        return kind
    return KEYWORDS.get(lexeme, kind)
