"""DFA transition and accept tables for the calculator language."""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

from calcscan.tokens import CharClass, TokenKind


class State(IntEnum):
    REJECT = 0  # sentinel: no transition
    START = 1
    SLASH = 2
    LINE_COMMENT = 3
    BLOCK_COMMENT = 4
    BLOCK_COMMENT_STAR = 5
    LPAREN = 6
    RPAREN = 7
    PLUS = 8
    MINUS = 9
    TIMES = 10
    COLON = 11
    ASSIGN = 12
    NUMBER_DOT = 13  # integer followed by '.', waiting for a fraction digit
    INTEGER = 14
    FRACTION = 15
    IDENTIFIER = 16
    WHITESPACE = 17
    COMMENT = 18


def _build_transitions() -> dict[tuple[State, CharClass], State]:
    t: dict[tuple[State, CharClass], State] = {}

    # Start state
    t[State.START, CharClass.SPACE] = State.WHITESPACE
    t[State.START, CharClass.NEWLINE] = State.WHITESPACE
    t[State.START, CharClass.SLASH] = State.SLASH
    t[State.START, CharClass.STAR] = State.TIMES
    t[State.START, CharClass.LPAREN] = State.LPAREN
    t[State.START, CharClass.RPAREN] = State.RPAREN
    t[State.START, CharClass.PLUS] = State.PLUS
    t[State.START, CharClass.MINUS] = State.MINUS
    t[State.START, CharClass.COLON] = State.COLON
    t[State.START, CharClass.DIGIT] = State.INTEGER
    t[State.START, CharClass.LETTER] = State.IDENTIFIER

    # '/' is either division or the opening of a comment
    t[State.SLASH, CharClass.SLASH] = State.LINE_COMMENT
    t[State.SLASH, CharClass.STAR] = State.BLOCK_COMMENT

    for cls in CharClass:
        if cls is not CharClass.NEWLINE:
            t[State.LINE_COMMENT, cls] = State.LINE_COMMENT
        t[State.BLOCK_COMMENT, cls] = (
            State.BLOCK_COMMENT_STAR if cls is CharClass.STAR else State.BLOCK_COMMENT
        )
        t[State.BLOCK_COMMENT_STAR, cls] = State.BLOCK_COMMENT
    t[State.BLOCK_COMMENT_STAR, CharClass.STAR] = State.BLOCK_COMMENT_STAR
    t[State.BLOCK_COMMENT_STAR, CharClass.SLASH] = State.COMMENT

    # ':=' only; a bare ':' has no accepting state
    t[State.COLON, CharClass.EQUAL] = State.ASSIGN

    # Numbers: digits, then optionally '.' and at least one more digit
    t[State.INTEGER, CharClass.DIGIT] = State.INTEGER
    t[State.INTEGER, CharClass.DOT] = State.NUMBER_DOT
    t[State.NUMBER_DOT, CharClass.DIGIT] = State.FRACTION
    t[State.FRACTION, CharClass.DIGIT] = State.FRACTION

    t[State.IDENTIFIER, CharClass.LETTER] = State.IDENTIFIER
    t[State.IDENTIFIER, CharClass.DIGIT] = State.IDENTIFIER

    t[State.WHITESPACE, CharClass.SPACE] = State.WHITESPACE
    t[State.WHITESPACE, CharClass.NEWLINE] = State.WHITESPACE

    return t


TRANSITIONS: Mapping[tuple[State, CharClass], State] = MappingProxyType(_build_transitions())

ACCEPTS: Mapping[State, TokenKind] = MappingProxyType(
    {
        State.START: TokenKind.NONE,
        State.SLASH: TokenKind.DIVIDE,
        State.LINE_COMMENT: TokenKind.COMMENT,
        State.BLOCK_COMMENT: TokenKind.NONE,
        State.BLOCK_COMMENT_STAR: TokenKind.NONE,
        State.LPAREN: TokenKind.LPAREN,
        State.RPAREN: TokenKind.RPAREN,
        State.PLUS: TokenKind.PLUS,
        State.MINUS: TokenKind.MINUS,
        State.TIMES: TokenKind.TIMES,
        State.COLON: TokenKind.NONE,
        State.ASSIGN: TokenKind.ASSIGN,
        State.NUMBER_DOT: TokenKind.NONE,
        State.INTEGER: TokenKind.NUMBER,
        State.FRACTION: TokenKind.NUMBER,
        State.IDENTIFIER: TokenKind.IDENTIFIER,
        State.WHITESPACE: TokenKind.WHITESPACE,
        State.COMMENT: TokenKind.COMMENT,
    }
)


def next_state(state: State, cls: CharClass) -> State:
    """Return the transition target, or State.REJECT if there is none."""
    return TRANSITIONS.get((state, cls), State.REJECT)


def accepted_kind(state: State) -> TokenKind:
    """Return the token kind accepted in state (NONE for intermediate states)."""
    return ACCEPTS.get(state, TokenKind.NONE)


def is_accepting(state: State) -> bool:
    return accepted_kind(state) is not TokenKind.NONE
