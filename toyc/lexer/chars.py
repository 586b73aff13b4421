"""Byte classification for the lexer."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from toyc.lexer.tokens import Symbol


class CharClassKind(IntEnum):
    LETTER = 1  # [a-zA-Z]
    DIGIT = 2  # [0-9]
    SYMBOL = 3  # [+-*/=;(){}_,.]
    UNKNOWN = 4


@dataclass(frozen=True, slots=True)
class CharClass:
    kind: CharClassKind
    symbol: Symbol | None = None


LETTER: Final[CharClass] = CharClass(CharClassKind.LETTER)
DIGIT: Final[CharClass] = CharClass(CharClassKind.DIGIT)
UNKNOWN: Final[CharClass] = CharClass(CharClassKind.UNKNOWN)

_SYMBOL_CLASSES: Final[dict[int, CharClass]] = {
    ord(symbol.value): CharClass(CharClassKind.SYMBOL, symbol) for symbol in Symbol
}

WHITESPACE: Final[frozenset[int]] = frozenset(b"\t\n\x0b\x0c\r ")
"""Tab, LF, VT, FF, CR and space."""


def is_whitespace(byte: int) -> bool:
    return byte in WHITESPACE


def classify(byte: int) -> CharClass:
    """Classify a byte, expecting a printable 7-bit ASCII code.

    Whitespace is not a class of its own; check `is_whitespace` first.
    """
    if byte < 0x21 or 0x7E < byte:
        return UNKNOWN
    if 0x61 <= byte <= 0x7A or 0x41 <= byte <= 0x5A:
        return LETTER
    if 0x30 <= byte <= 0x39:
        return DIGIT
    return _SYMBOL_CLASSES.get(byte, UNKNOWN)
