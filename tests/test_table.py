"""Test the DFA tables and keyword reclassification."""

import pytest

from calcscan.keywords import KEYWORDS, reclassify
from calcscan.table import ACCEPTS, TRANSITIONS, State, accepted_kind, is_accepting, next_state
from calcscan.tokens import CharClass, TokenKind


def _reachable() -> set[State]:
    seen = {State.START}
    frontier = [State.START]
    while frontier:
        state = frontier.pop()
        for cls in CharClass:
            target = next_state(state, cls)
            if target is not State.REJECT and target not in seen:
                seen.add(target)
                frontier.append(target)
    return seen


class TestAcceptTable:
    def test_every_reachable_state_listed(self):
        for state in _reachable():
            assert state in ACCEPTS, f"{state} missing from accept table"

    def test_reject_is_not_a_state(self):
        assert State.REJECT not in ACCEPTS
        assert State.REJECT not in _reachable()

    def test_start_is_not_accepting(self):
        assert not is_accepting(State.START)

    def test_keywords_never_accepted_directly(self):
        kinds = set(ACCEPTS.values())
        assert TokenKind.READ not in kinds
        assert TokenKind.WRITE not in kinds

    def test_intermediate_states(self):
        for state in (State.COLON, State.NUMBER_DOT, State.BLOCK_COMMENT, State.BLOCK_COMMENT_STAR):
            assert accepted_kind(state) == TokenKind.NONE

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            ACCEPTS[State.COLON] = TokenKind.ASSIGN  # type: ignore[index]
        with pytest.raises(TypeError):
            TRANSITIONS[State.START, CharClass.EQUAL] = State.ASSIGN  # type: ignore[index]


class TestTransitions:
    def test_unknown_pair_rejects(self):
        assert next_state(State.START, CharClass.EQUAL) == State.REJECT
        assert next_state(State.START, CharClass.DOT) == State.REJECT
        assert next_state(State.START, CharClass.OTHER) == State.REJECT

    def test_single_char_states_have_no_exits(self):
        for state in (State.LPAREN, State.RPAREN, State.PLUS, State.MINUS, State.TIMES):
            assert all(next_state(state, cls) == State.REJECT for cls in CharClass)

    def test_accepting_states_loop_on_extending_classes(self):
        assert next_state(State.INTEGER, CharClass.DIGIT) == State.INTEGER
        assert next_state(State.FRACTION, CharClass.DIGIT) == State.FRACTION
        assert next_state(State.IDENTIFIER, CharClass.LETTER) == State.IDENTIFIER
        assert next_state(State.IDENTIFIER, CharClass.DIGIT) == State.IDENTIFIER
        assert next_state(State.WHITESPACE, CharClass.SPACE) == State.WHITESPACE
        assert next_state(State.WHITESPACE, CharClass.NEWLINE) == State.WHITESPACE
        assert next_state(State.LINE_COMMENT, CharClass.OTHER) == State.LINE_COMMENT

    def test_fraction_needs_a_digit_after_dot(self):
        assert next_state(State.INTEGER, CharClass.DOT) == State.NUMBER_DOT
        assert next_state(State.NUMBER_DOT, CharClass.DIGIT) == State.FRACTION
        assert next_state(State.NUMBER_DOT, CharClass.DOT) == State.REJECT

    def test_block_comment_body_accepts_everything(self):
        for cls in CharClass:
            assert next_state(State.BLOCK_COMMENT, cls) != State.REJECT
            assert next_state(State.BLOCK_COMMENT_STAR, cls) != State.REJECT

    def test_line_comment_stops_at_newline(self):
        assert next_state(State.LINE_COMMENT, CharClass.NEWLINE) == State.REJECT


class TestReclassify:
    def test_keywords(self):
        assert reclassify(TokenKind.IDENTIFIER, "read") == TokenKind.READ
        assert reclassify(TokenKind.IDENTIFIER, "write") == TokenKind.WRITE

    def test_plain_identifier_unchanged(self):
        assert reclassify(TokenKind.IDENTIFIER, "reading") == TokenKind.IDENTIFIER

    def test_case_sensitive(self):
        assert reclassify(TokenKind.IDENTIFIER, "Read") == TokenKind.IDENTIFIER
        assert reclassify(TokenKind.IDENTIFIER, "WRITE") == TokenKind.IDENTIFIER

    def test_only_identifiers_reclassified(self):
        assert reclassify(TokenKind.COMMENT, "read") == TokenKind.COMMENT

    def test_keyword_table(self):
        assert dict(KEYWORDS) == {"read": TokenKind.READ, "write": TokenKind.WRITE}
