"""Lex/parse carriers shared by the CLI and library callers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from toyc.diagnostics import collect_diagnostics, has_errors
from toyc.lexer import Lexeme, format_token_table

if TYPE_CHECKING:
    from toyc.diagnostics import Diagnostic
    from toyc.lexer import LexicalError, TokenStream
    from toyc.parser import FunctionDefinition, ParsedSyntax, ParseError, ParserOptions


@dataclass(frozen=True, slots=True)
class LexResult:
    """Outcome of one tokenization pass.

    `stream` is None when the pass hit a lexical error; no partial stream is kept.
    """

    source: bytes
    stream: TokenStream | None
    diagnostics: list[Diagnostic]
    error: LexicalError | None = None

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def lexemes(self) -> tuple[Lexeme, ...]:
        return self.stream.lexemes if self.stream is not None else ()

    def token_table(self) -> str:
        return format_token_table(self.lexemes)


@dataclass(slots=True)
class ToycParseResult:
    """Toy C parse result: the lexing pass, the root parse and their diagnostics."""

    lexed: LexResult
    parsed: ParsedSyntax | None
    options: ParserOptions
    _diagnostics: list[Diagnostic] | None = field(default=None, init=False, repr=False)

    @property
    def source_text(self) -> str:
        return self.lexed.source.decode("utf-8", errors="replace")

    @property
    def error(self) -> ParseError | None:
        if self.parsed is None:
            return None
        return self.parsed.error

    @property
    def diagnostics(self) -> list[Diagnostic]:
        if self._diagnostics is None:
            parser_diagnostics = [self.error.to_diagnostic()] if self.error is not None else []
            self._diagnostics = collect_diagnostics(self.lexed.diagnostics, parser_diagnostics)
        return self._diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def root(self) -> FunctionDefinition | None:
        if self.parsed is None or self.parsed.is_absent():
            return None
        return self.parsed.node

    def render_tree(self) -> str:
        root = self.root()
        if root is None:
            return ""
        return "\n".join(root.render())
