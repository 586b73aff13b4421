"""Entrypoints that lex once and parse from the shared lex result."""

from __future__ import annotations

from pathlib import Path

from toyc.lexer import Source
from toyc.parser import ParseMode, ParserOptions, lex, parse_result, parse_tokens, resolve_options
from toyc.pipeline.result import LexResult, ToycParseResult


def load_source(path: str | Path) -> bytes:
    """Read a source file as raw bytes (raises `OSError`)."""
    return Path(path).read_bytes()


def run_lex(text: Source) -> LexResult:
    """Run the lexer over a whole source."""
    return lex(text)


def run_parse(
    text: Source | None = None,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    lexed: LexResult | None = None,
) -> ToycParseResult:
    """Parse a source, or the stream of an earlier `run_lex` result."""
    if lexed is None:
        if text is None:
            raise ValueError("Pass either text or lexed")
        return parse_result(text, options=options, mode=mode)
    if text is not None:
        raise ValueError("Pass either text or lexed, not both")

    resolved_options = resolve_options(options=options, mode=mode)
    if lexed.stream is None:
        return ToycParseResult(lexed=lexed, parsed=None, options=resolved_options)
    parsed = parse_tokens(lexed.stream, resolved_options)
    return ToycParseResult(lexed=lexed, parsed=parsed, options=resolved_options)


def run_lex_file(path: str | Path) -> LexResult:
    return run_lex(load_source(path))


def run_parse_file(
    path: str | Path,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ToycParseResult:
    return run_parse(load_source(path), options=options, mode=mode)
