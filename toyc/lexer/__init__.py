"""Lexer."""

from toyc.lexer.chars import CharClass, CharClassKind, classify, is_whitespace
from toyc.lexer.lexer import (
    LexicalError,
    Lexer,
    LexState,
    dump_tokens,
    format_token_table,
)
from toyc.lexer.token_stream import Source, TokenStream, source_bytes, tokenize
from toyc.lexer.tokens import Lexeme, Symbol, Token, TokenKind, TypeKeyword

__all__ = [
    "CharClass",
    "CharClassKind",
    "LexState",
    "Lexeme",
    "Lexer",
    "LexicalError",
    "Source",
    "Symbol",
    "Token",
    "TokenKind",
    "TokenStream",
    "TypeKeyword",
    "classify",
    "dump_tokens",
    "format_token_table",
    "is_whitespace",
    "source_bytes",
    "tokenize",
]
