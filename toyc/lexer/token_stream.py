"""Materialized token stream shared by every parse cursor."""

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, overload

from toyc.lexer.lexer import Lexer
from toyc.lexer.tokens import Lexeme

if TYPE_CHECKING:
    from toyc.parser.cursor import ParseCursor

Source = bytes | bytearray | str | Iterable[int]


def source_bytes(source: Source) -> Iterable[int]:
    if isinstance(source, str):
        return source.encode("utf-8")
    return source


class TokenStream(Sequence[Lexeme]):
    """Immutable, ordered (token, lexeme) pairs of one whole source.

    Built once per run, up front, and then only read. Cursors hold a reference
    to the stream plus an index, so forking a cursor never copies tokens.
    """

    __slots__ = ("_lexemes",)

    def __init__(self, lexemes: Iterable[Lexeme]) -> None:
        self._lexemes: tuple[Lexeme, ...] = tuple(lexemes)

    @staticmethod
    def from_source(source: Source) -> "TokenStream":
        """Drive a fresh lexer over the whole source.

        Raises `LexicalError`; no partial stream is produced.
        """
        return TokenStream(Lexer().lex(source_bytes(source)))

    @property
    def lexemes(self) -> tuple[Lexeme, ...]:
        return self._lexemes

    @overload
    def __getitem__(self, index: int) -> Lexeme: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Lexeme, ...]: ...

    def __getitem__(self, index):
        return self._lexemes[index]

    def __len__(self) -> int:
        return len(self._lexemes)

    def __iter__(self) -> Iterator[Lexeme]:
        return iter(self._lexemes)

    def __repr__(self) -> str:
        return f"TokenStream({len(self._lexemes)} lexemes)"

    def cursor(self) -> "ParseCursor":
        from toyc.parser.cursor import ParseCursor

        return ParseCursor(self)


def tokenize(source: Source) -> TokenStream:
    return TokenStream.from_source(source)
