"""Lexer.

A byte-at-a-time state machine. Reserved words are tracked one character
position at a time so that a reserved word which turns out to be the prefix of
a longer identifier (`intx`, `floats`, `returned`) falls back to a plain
identifier instead of splitting into keyword + identifier.
"""

from collections.abc import Iterable
from enum import IntEnum
from typing import Final, TextIO
import sys

from toyc.diagnostics import (
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNSUPPORTED_CHARACTER,
    Diagnostic,
    DiagnosticSpec,
    diagnostic_from_spec,
)
from toyc.lexer.chars import CharClass, CharClassKind, classify, is_whitespace
from toyc.lexer.tokens import (
    FLOAT_LITERAL_TOKEN,
    IDENTIFIER_TOKEN,
    INT_LITERAL_TOKEN,
    RETURN_TOKEN,
    Lexeme,
    Symbol,
    Token,
    TypeKeyword,
)
from toyc.text import TextRange, TextSize


class LexState(IntEnum):
    SCROLL_TO_NEXT = 0

    NUMBER_DIGIT = 10
    NUMBER_FLOAT = 11

    IDENTIFIER = 20

    # `int`
    INT_I = 30
    INT_IN = 31
    CONFIRM_INT = 32

    # `float`
    FLOAT_F = 40
    FLOAT_FL = 41
    FLOAT_FLO = 42
    FLOAT_FLOA = 43
    CONFIRM_FLOAT = 44

    # `return`
    RETURN_R = 50
    RETURN_RE = 51
    RETURN_RET = 52
    RETURN_RETU = 53
    RETURN_RETUR = 54
    CONFIRM_RETURN = 55


_KEYWORD_STARTS: Final[dict[int, LexState]] = {
    ord("i"): LexState.INT_I,
    ord("f"): LexState.FLOAT_F,
    ord("r"): LexState.RETURN_R,
}

# prefix state -> (next expected byte, state after consuming it)
_KEYWORD_ADVANCE: Final[dict[LexState, tuple[int, LexState]]] = {
    LexState.INT_I: (ord("n"), LexState.INT_IN),
    LexState.INT_IN: (ord("t"), LexState.CONFIRM_INT),
    LexState.FLOAT_F: (ord("l"), LexState.FLOAT_FL),
    LexState.FLOAT_FL: (ord("o"), LexState.FLOAT_FLO),
    LexState.FLOAT_FLO: (ord("a"), LexState.FLOAT_FLOA),
    LexState.FLOAT_FLOA: (ord("t"), LexState.CONFIRM_FLOAT),
    LexState.RETURN_R: (ord("e"), LexState.RETURN_RE),
    LexState.RETURN_RE: (ord("t"), LexState.RETURN_RET),
    LexState.RETURN_RET: (ord("u"), LexState.RETURN_RETU),
    LexState.RETURN_RETU: (ord("r"), LexState.RETURN_RETUR),
    LexState.RETURN_RETUR: (ord("n"), LexState.CONFIRM_RETURN),
}

_CONFIRMED_TOKENS: Final[dict[LexState, Token]] = {
    LexState.CONFIRM_INT: Token.of_type(TypeKeyword.INT),
    LexState.CONFIRM_FLOAT: Token.of_type(TypeKeyword.FLOAT),
    LexState.CONFIRM_RETURN: RETURN_TOKEN,
}

_KEYWORD_STATES: Final[frozenset[LexState]] = frozenset(_KEYWORD_ADVANCE) | frozenset(_CONFIRMED_TOKENS)

_FLUSH_WHITESPACE: Final[int] = ord(" ")


class LexicalError(Exception):
    """Fatal lexer failure: an unsupported byte or an invalid transition."""

    def __init__(self, diagnostic: Diagnostic, byte: int, position: int, partial: str) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
        self.byte = byte
        self.position = position
        self.partial = partial


class Lexer:
    """Lexical state machine fed one byte at a time."""

    def __init__(self) -> None:
        self._state = LexState.SCROLL_TO_NEXT
        self._buffer = bytearray()
        self._lexeme_start = 0
        self._position = 0

    @property
    def state(self) -> LexState:
        return self._state

    @property
    def position(self) -> int:
        """Offset of the next byte to be ticked."""
        return self._position

    @property
    def pending(self) -> str:
        """The lexeme accumulated so far (not yet flushed)."""
        return self._buffer.decode("ascii")

    def tick(self, byte: int) -> tuple[Lexeme, ...]:
        """Advance by one byte, returning the lexemes completed by it (zero, one or two).

        Raises `LexicalError` on a byte that cannot continue the current lexeme.
        """
        if is_whitespace(byte):
            flushed = self._flush()
        else:
            char_class = classify(byte)
            if char_class.kind == CharClassKind.UNKNOWN:
                raise self._error(LEXER_UNSUPPORTED_CHARACTER, byte)
            flushed = self._step(byte, char_class)
        self._position += 1
        return flushed

    def finalize(self) -> tuple[Lexeme, ...]:
        """Flush the pending lexeme at end of input (an implicit trailing whitespace)."""
        return self.tick(_FLUSH_WHITESPACE)

    def lex(self, source: Iterable[int]) -> list[Lexeme]:
        lexemes: list[Lexeme] = []
        for byte in source:
            lexemes.extend(self.tick(byte))
        lexemes.extend(self.finalize())
        return lexemes

    def _step(self, byte: int, char_class: CharClass) -> tuple[Lexeme, ...]:
        state = self._state

        if state == LexState.SCROLL_TO_NEXT:
            if char_class.kind == CharClassKind.LETTER:
                self._start(byte, _KEYWORD_STARTS.get(byte, LexState.IDENTIFIER))
                return ()
            if char_class.kind == CharClassKind.DIGIT:
                self._start(byte, LexState.NUMBER_DIGIT)
                return ()
            if char_class.symbol == Symbol.UNDERSCORE:
                self._start(byte, LexState.IDENTIFIER)
                return ()
            return (self._symbol_lexeme(char_class.symbol),)

        if state == LexState.NUMBER_DIGIT or state == LexState.NUMBER_FLOAT:
            return self._step_number(byte, char_class)

        if char_class.kind == CharClassKind.SYMBOL and char_class.symbol != Symbol.UNDERSCORE:
            return (*self._flush(), self._symbol_lexeme(char_class.symbol))

        if state in _KEYWORD_STATES:
            expected = _KEYWORD_ADVANCE.get(state)
            if expected is not None and expected[0] == byte:
                self._push(byte, expected[1])
                return ()

        # Coincidental keyword prefix, or plain identifier continuation.
        self._push(byte, LexState.IDENTIFIER)
        return ()

    def _step_number(self, byte: int, char_class: CharClass) -> tuple[Lexeme, ...]:
        if char_class.kind == CharClassKind.DIGIT:
            self._push(byte, self._state)
            return ()
        if char_class.symbol == Symbol.PERIOD:
            if self._state == LexState.NUMBER_FLOAT:
                raise self._error(LEXER_UNEXPECTED_CHARACTER, byte)
            self._push(byte, LexState.NUMBER_FLOAT)
            return ()
        if char_class.kind == CharClassKind.SYMBOL and char_class.symbol != Symbol.UNDERSCORE:
            return (*self._flush(), self._symbol_lexeme(char_class.symbol))
        raise self._error(LEXER_UNEXPECTED_CHARACTER, byte)

    def _start(self, byte: int, state: LexState) -> None:
        self._lexeme_start = self._position
        self._push(byte, state)

    def _push(self, byte: int, state: LexState) -> None:
        self._buffer.append(byte)
        self._state = state

    def _flush(self) -> tuple[Lexeme, ...]:
        token = self._pending_token()
        if token is None:
            return ()
        lexeme = Lexeme(
            token=token,
            text=self.pending,
            range=TextRange(self._lexeme_start, self._position),
        )
        self._buffer.clear()
        self._state = LexState.SCROLL_TO_NEXT
        return (lexeme,)

    def _pending_token(self) -> Token | None:
        state = self._state
        if state == LexState.SCROLL_TO_NEXT:
            return None
        if state == LexState.NUMBER_DIGIT:
            return INT_LITERAL_TOKEN
        if state == LexState.NUMBER_FLOAT:
            return FLOAT_LITERAL_TOKEN
        return _CONFIRMED_TOKENS.get(state, IDENTIFIER_TOKEN)

    def _symbol_lexeme(self, symbol: Symbol) -> Lexeme:
        return Lexeme(
            token=Token.of_symbol(symbol),
            text=symbol.value,
            range=TextRange.at(TextSize(self._position), TextSize(1)),
        )

    def _error(self, spec: DiagnosticSpec, byte: int) -> LexicalError:
        partial = self.pending
        shown = chr(byte) if 0x21 <= byte <= 0x7E else f"0x{byte:02X}"
        message = f"{spec.message} `{shown}`"
        if partial:
            message += f" after `{partial}`"
        start = self._lexeme_start if partial else self._position
        diagnostic = diagnostic_from_spec(spec, TextRange(start, self._position + 1), message)
        return LexicalError(diagnostic, byte, self._position, partial)


def format_token_table(lexemes: Iterable[Lexeme]) -> str:
    lines = [f"{'TOKEN':<24}|LEXEME", f"{'':<24}|"]
    for lexeme in lexemes:
        lines.append(f"{str(lexeme.token):<24}|{lexeme.text}")
    return "\n".join(lines)


def dump_tokens(lexemes: Iterable[Lexeme], file: TextIO | None = None) -> None:
    """Print the token / lexeme table."""
    print(format_token_table(lexemes), file=file if file is not None else sys.stdout)
