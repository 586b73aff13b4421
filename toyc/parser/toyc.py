"""High-level lex / parse entrypoints for Toy C source."""

from __future__ import annotations

from typing import TYPE_CHECKING

from toyc.lexer import LexicalError, Source, TokenStream
from toyc.parser.cursor import ParseCursor
from toyc.parser.grammar import FunctionDefinition
from toyc.parser.options import ParseMode, ParserOptions
from toyc.parser.parsed_syntax import ParsedSyntax, ParseError
from toyc.parser.syntax import ParseNode

if TYPE_CHECKING:
    from toyc.pipeline import LexResult, ToycParseResult


def resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse_tokens(
    stream: TokenStream,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    root: type[ParseNode] = FunctionDefinition,
) -> ParsedSyntax:
    """Parse an already built token stream with `root` as the start rule."""
    resolved_options = resolve_options(options=options, mode=mode)

    cursor = ParseCursor(stream)
    parsed = root.parse(cursor)
    if parsed.is_absent():
        return parsed

    if resolved_options.require_end_of_input and not cursor.is_at_end:
        return ParsedSyntax.absent(ParseError.trailing(root.parse_label(), cursor))
    return parsed


def lex(text: Source) -> LexResult:
    """Tokenize a whole source; a lexical error yields no tokens and one diagnostic."""
    from toyc.pipeline import LexResult

    source = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    try:
        stream = TokenStream.from_source(source)
    except LexicalError as error:
        return LexResult(source=source, stream=None, diagnostics=[error.diagnostic], error=error)
    return LexResult(source=source, stream=stream, diagnostics=[])


def parse(
    text: Source,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedSyntax:
    """Lex and parse; lexical errors raise `LexicalError`."""
    stream = TokenStream.from_source(text)
    return parse_tokens(stream, options, mode=mode)


def parse_result(
    text: Source,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ToycParseResult:
    from toyc.pipeline import ToycParseResult

    resolved_options = resolve_options(options=options, mode=mode)
    lexed = lex(text)
    if lexed.stream is None:
        return ToycParseResult(lexed=lexed, parsed=None, options=resolved_options)

    parsed = parse_tokens(lexed.stream, resolved_options)
    return ToycParseResult(lexed=lexed, parsed=parsed, options=resolved_options)
