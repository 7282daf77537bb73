"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from calcscan.errors import ScanError
from calcscan.scanner import Scanner, tokenize
from calcscan.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding the NONE sentinel)."""

    def _lex(source: str) -> list[Token]:
        tokens = tokenize(source)
        # Strip trailing sentinel for convenience
        return [t for t in tokens if t.kind != TokenKind.NONE]

    return _lex


@pytest.fixture
def scan_all():
    """Return a helper that runs Scanner.scan() to end of input, errors included."""

    def _scan_all(source: str) -> list[Token | ScanError]:
        scanner = Scanner(source)
        results: list[Token | ScanError] = []
        while True:
            result = scanner.scan()
            if isinstance(result, Token) and result.kind == TokenKind.NONE:
                return results
            results.append(result)

    return _scan_all


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def significant(tokens: list[Token]) -> list[Token]:
    """Return tokens without whitespace."""
    return [t for t in tokens if t.kind != TokenKind.WHITESPACE]
