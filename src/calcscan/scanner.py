"""Table-driven scanner: turns source text into tokens by longest match over the DFA."""

from __future__ import annotations

from collections.abc import Iterator

from calcscan.errors import ScanError
from calcscan.keywords import reclassify
from calcscan.logger import get_logger
from calcscan.table import State, accepted_kind, is_accepting, next_state
from calcscan.tokens import CharClass, Position, Span, Token, TokenKind, classify

logger = get_logger(__name__)


class Scanner:
    """Scan calculator source one token at a time.

    The cursor (offset, line, column) is the only state kept between calls.
    A scanner is not safe to share between threads; use one per input.
    """

    def __init__(self, source: str, filename: str = "input.calc", *, strict: bool = False) -> None:
        self._source = source
        self._filename = filename
        self._strict = strict
        self._pos = 0
        self._line = 1
        self._col = 1
        self.errors: list[ScanError] = []

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._source)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, the end-of-input sentinel."""
        while True:
            tok = self.next_token()
            if tok.kind is TokenKind.NONE:
                return
            yield tok

    def next_token(self) -> Token:
        """Return the next token, or a NONE token with empty lexeme at end of input.

        Illegal characters are skipped one at a time. In lenient mode each one is
        logged and recorded in ``errors``; in strict mode the ScanError is raised
        after the offending character has been skipped.
        """
        while True:
            result = self.scan()
            if isinstance(result, Token):
                return result
            self.errors.append(result)
            if self._strict:
                raise result
            logger.warning(
                "%s:%d:%d: %s",
                self._filename,
                result.position.line,
                result.position.column,
                result.message,
            )

    def scan(self) -> Token | ScanError:
        """Run one recognition attempt and return its token or its error."""
        start = self._current_pos()
        state = State.START
        last_accept: tuple[State, Position] | None = None
        rejected: CharClass | None = None

        while True:
            ch = self._peek()
            if not ch:
                break
            cls = classify(ch)
            target = next_state(state, cls)
            if target is State.REJECT:
                rejected = cls
                break
            if is_accepting(state):
                last_accept = (state, self._current_pos())
            self._advance()
            state = target

        if not is_accepting(state):
            if last_accept is not None:
                # Backtrack over characters consumed after the last accepting state
                state, end = last_accept
                self._rewind(end)
            elif self._pos == start.offset and rejected is None:
                return Token(TokenKind.NONE, "", Span(start, start))
            else:
                return self._illegal(start, state, rejected)

        lexeme = self._source[start.offset : self._pos]
        kind = reclassify(accepted_kind(state), lexeme)
        tok = Token(kind, lexeme, Span(start, self._current_pos()))
        logger.debug("%s %r at %d:%d", kind.name, lexeme, start.line, start.column)
        return tok

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n" or (ch == "\r" and self._peek() != "\n"):
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _rewind(self, pos: Position) -> None:
        self._pos = pos.offset
        self._line = pos.line
        self._col = pos.column

    def _illegal(self, start: Position, state: State, rejected: CharClass | None) -> ScanError:
        """Skip the first character of the failed attempt and describe it."""
        self._rewind(start)
        skipped = self._advance()
        if rejected is None:
            detail = f"state {state.name}, end of input"
        else:
            detail = f"state {state.name}, class {rejected.name}"
        return ScanError(
            f"illegal character {skipped!r} ({detail})",
            start,
            self._source,
            state,
            rejected,
            skipped,
            self._filename,
        )


def tokenize(source: str, filename: str = "input.calc", *, strict: bool = False) -> list[Token]:
    """Convenience function: scan source and return every token, ending with the NONE sentinel."""
    scanner = Scanner(source, filename, strict=strict)
    tokens = list(scanner)
    tokens.append(scanner.next_token())
    return tokens
