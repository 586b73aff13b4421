"""Forkable read position over a token stream."""

from dataclasses import dataclass

from toyc.lexer import Lexeme, TokenStream
from toyc.text import ZERO, TextRange


@dataclass(slots=True)
class ParseCursor:
    """Index into a shared, immutable `TokenStream`.

    Rules parse on a `fork()` and `commit()` it back only on success, so a
    failed attempt never moves the caller's position.
    """

    stream: TokenStream
    index: int = 0

    @property
    def is_at_end(self) -> bool:
        return self.index >= len(self.stream)

    def peek(self) -> Lexeme | None:
        if self.is_at_end:
            return None
        return self.stream[self.index]

    def next(self) -> Lexeme | None:
        lexeme = self.peek()
        if lexeme is not None:
            self.index += 1
        return lexeme

    def fork(self) -> "ParseCursor":
        return ParseCursor(self.stream, self.index)

    def commit(self, fork: "ParseCursor") -> None:
        if fork.stream is not self.stream:
            raise ValueError("Cannot commit a fork of a different token stream")
        if fork.index < self.index:
            raise RuntimeError(f"Fork at {fork.index} is behind cursor at {self.index}")
        self.index = fork.index

    def current_range(self) -> TextRange:
        """Range of the next lexeme, or an empty range at the end of input."""
        lexeme = self.peek()
        if lexeme is not None:
            return lexeme.range
        if self.stream:
            return TextRange.empty(self.stream[-1].range.end)
        return TextRange.empty(ZERO)
