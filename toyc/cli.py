"""Command line entry point: `toyc lex -i FILE` / `toyc parse -i FILE`."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path
import sys

from toyc.diagnostics import Diagnostic
from toyc.parser import ParseMode
from toyc.pipeline import run_lex, run_parse
from toyc.pipeline.entrypoints import load_source

EXIT_OK = 0
EXIT_SOURCE_ERROR = 1
EXIT_READ_ERROR = 3


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="toyc", description="Lex or parse a Toy C source file.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lex_parser = subparsers.add_parser("lex", help="Print the token / lexeme table")
    lex_parser.add_argument("-i", "--input", type=Path, required=True, help="Source file to read")

    parse_parser = subparsers.add_parser("parse", help="Print the parse tree")
    parse_parser.add_argument("-i", "--input", type=Path, required=True, help="Source file to read")
    parse_parser.add_argument(
        "--mode",
        type=ParseMode,
        choices=list(ParseMode),
        default=ParseMode.STRICT,
        help="`permissive` ignores tokens after the function definition (default: strict)",
    )
    parse_parser.add_argument(
        "--show-hints",
        action="store_true",
        help="Print diagnostic hints below error messages",
    )
    return parser


def _report(diagnostics: Iterable[Diagnostic], *, show_hints: bool = False) -> None:
    for diagnostic in diagnostics:
        category = (diagnostic.category or "toyc").upper()
        print(f"{category} ERROR:", file=sys.stderr)
        print(diagnostic.message, file=sys.stderr)
        if show_hints and diagnostic.hint:
            print(f"hint: {diagnostic.hint}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        source = load_source(args.input)
    except OSError:
        print(f"ERROR - cannot read contents of {args.input}", file=sys.stderr)
        return EXIT_READ_ERROR

    lexed = run_lex(source)
    if lexed.has_errors:
        _report(lexed.diagnostics, show_hints=getattr(args, "show_hints", False))
        return EXIT_SOURCE_ERROR

    if args.command == "lex":
        print(lexed.token_table())
        return EXIT_OK

    result = run_parse(mode=args.mode, lexed=lexed)
    if result.has_errors:
        _report(result.diagnostics, show_hints=args.show_hints)
        return EXIT_SOURCE_ERROR

    print(result.render_tree())
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
