"""Shared lex/parse carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from pathlib import Path

from toyc.lexer import Source
from toyc.parser.options import ParseMode, ParserOptions
from toyc.pipeline.result import LexResult, ToycParseResult


def run_lex(text: Source) -> LexResult:
    from toyc.pipeline.entrypoints import run_lex as _run_lex

    return _run_lex(text)


def run_parse(
    text: Source | None = None,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    lexed: LexResult | None = None,
) -> ToycParseResult:
    from toyc.pipeline.entrypoints import run_parse as _run_parse

    return _run_parse(text, options=options, mode=mode, lexed=lexed)


def run_lex_file(path: str | Path) -> LexResult:
    from toyc.pipeline.entrypoints import run_lex_file as _run_lex_file

    return _run_lex_file(path)


def run_parse_file(
    path: str | Path,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ToycParseResult:
    from toyc.pipeline.entrypoints import run_parse_file as _run_parse_file

    return _run_parse_file(path, options=options, mode=mode)


__all__ = [
    "LexResult",
    "ToycParseResult",
    "run_lex",
    "run_lex_file",
    "run_parse",
    "run_parse_file",
]
