"""Error types with formatted source context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from calcscan.tokens import CharClass, Position

if TYPE_CHECKING:
    from calcscan.table import State


class ScanError(Exception):
    """Illegal input: the DFA rejected a character before reaching any accepting state.

    Returned as a value by Scanner.scan() and raised by Scanner.next_token() in
    strict mode. ``lexeme`` is the single character the scanner skipped to
    resynchronize; ``char_class`` is None when the attempt ran into end of input.
    The source context is only rendered by format() and str().
    """

    def __init__(
        self,
        message: str,
        position: Position,
        source: str,
        state: State,
        char_class: CharClass | None,
        lexeme: str,
        filename: str = "input.calc",
    ) -> None:
        self.message = message
        self.position = position
        self.source = source
        self.state = state
        self.char_class = char_class
        self.lexeme = lexeme
        self.filename = filename
        super().__init__(message)

    def __str__(self) -> str:
        return self.format()

    def _source_line(self) -> str:
        # Line boundaries match the scanner's: \n, \r\n, or a lone \r
        offset = self.position.offset
        start = max(self.source.rfind("\n", 0, offset), self.source.rfind("\r", 0, offset)) + 1
        ends = [
            i for i in (self.source.find("\n", offset), self.source.find("\r", offset)) if i >= 0
        ]
        end = min(ends) if ends else len(self.source)
        return self.source[start:end]

    def format(self, filename: str | None = None) -> str:
        if filename is None:
            filename = self.filename
        col = self.position.column
        source_line = self._source_line()

        pad = " " * (col - 1)
        carets = "^" * max(1, len(self.lexeme.rstrip("\r\n")))

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class ConfigError(Exception):
    """Raised when a calcscan.toml file cannot be read or has invalid values."""

    def __init__(self, message: str, path: str) -> None:
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}")
