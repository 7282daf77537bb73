"""--debug token dump and --table DFA dump."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from calcscan.table import ACCEPTS, State, next_state
from calcscan.tokens import CharClass, Token

# Short column headings for the transition matrix
_CLASS_LABELS: dict[CharClass, str] = {
    CharClass.SPACE: "sp",
    CharClass.NEWLINE: "nl",
    CharClass.SLASH: "/",
    CharClass.STAR: "*",
    CharClass.LPAREN: "(",
    CharClass.RPAREN: ")",
    CharClass.PLUS: "+",
    CharClass.MINUS: "-",
    CharClass.COLON: ":",
    CharClass.EQUAL: "=",
    CharClass.DOT: ".",
    CharClass.DIGIT: "dig",
    CharClass.LETTER: "let",
    CharClass.OTHER: "oth",
}


def dump_tokens(tokens: Iterable[Token], *, file: TextIO | None = None) -> None:
    """Print one line per token with its span to *file* (default: stderr)."""
    if file is None:
        file = sys.stderr
    for tok in tokens:
        start, end = tok.span.start, tok.span.end
        where = f"{start.line}:{start.column}-{end.line}:{end.column}"
        file.write(f"{where:<12} {tok.kind.name:<10} {tok.lexeme!r}\n")


def dump_table(*, file: TextIO | None = None) -> None:
    """Print the transition matrix, one row per state, with its accepted kind (default: stdout)."""
    if file is None:
        file = sys.stdout
    width = 4
    header = "state".ljust(22) + "".join(_CLASS_LABELS[c].rjust(width) for c in CharClass)
    file.write(header + "  accepts\n")
    for state in State:
        if state is State.REJECT:
            continue
        cells = []
        for cls in CharClass:
            target = next_state(state, cls)
            cells.append(("-" if target is State.REJECT else str(int(target))).rjust(width))
        label = f"{int(state):>2} {state.name}".ljust(22)
        file.write(f"{label}{''.join(cells)}  {ACCEPTS[state].name}\n")
