"""Parse outcomes: a present node or an absent one with its error."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

from toyc.diagnostics import (
    PARSER_DANGLING_DELIMITER,
    PARSER_EXPECTED_ONE_OF,
    PARSER_EXPECTED_TOKEN,
    PARSER_MISSING_TERMINATOR,
    PARSER_TRAILING_TOKENS,
    Diagnostic,
    DiagnosticSpec,
    diagnostic_from_spec,
)
from toyc.lexer import Lexeme
from toyc.parser.cursor import ParseCursor
from toyc.text import TextRange

T = TypeVar("T")


class ParseErrorKind(StrEnum):
    EXPECTED_TOKEN = "expected_token"
    EXPECTED_ONE_OF = "expected_one_of"
    DANGLING_DELIMITER = "dangling_delimiter"
    MISSING_TERMINATOR = "missing_terminator"
    TRAILING_TOKENS = "trailing_tokens"


_DIAGNOSTIC_SPECS: dict[ParseErrorKind, DiagnosticSpec] = {
    ParseErrorKind.EXPECTED_TOKEN: PARSER_EXPECTED_TOKEN,
    ParseErrorKind.EXPECTED_ONE_OF: PARSER_EXPECTED_ONE_OF,
    ParseErrorKind.DANGLING_DELIMITER: PARSER_DANGLING_DELIMITER,
    ParseErrorKind.MISSING_TERMINATOR: PARSER_MISSING_TERMINATOR,
    ParseErrorKind.TRAILING_TOKENS: PARSER_TRAILING_TOKENS,
}


@dataclass(frozen=True, slots=True)
class ParseError:
    """Why a rule did not match.

    `found` is the lexeme at the failure point, or None when the input was
    exhausted. List failures wrap the element/delimiter failure in `cause`.
    """

    kind: ParseErrorKind
    expected: str
    found: Lexeme | None
    range: TextRange
    expected_alternatives: tuple[str, ...] = ()
    alternatives: tuple["ParseError", ...] = ()
    cause: "ParseError | None" = None

    @staticmethod
    def expected_token(expected: str, cursor: ParseCursor) -> "ParseError":
        return ParseError(
            kind=ParseErrorKind.EXPECTED_TOKEN,
            expected=expected,
            found=cursor.peek(),
            range=cursor.current_range(),
        )

    @staticmethod
    def one_of(
        expected: str,
        expected_alternatives: tuple[str, ...],
        alternatives: tuple["ParseError", ...],
        cursor: ParseCursor,
    ) -> "ParseError":
        return ParseError(
            kind=ParseErrorKind.EXPECTED_ONE_OF,
            expected=expected,
            found=cursor.peek(),
            range=cursor.current_range(),
            expected_alternatives=expected_alternatives,
            alternatives=alternatives,
        )

    @staticmethod
    def in_list(kind: ParseErrorKind, list_label: str, cause: "ParseError") -> "ParseError":
        return ParseError(
            kind=kind,
            expected=list_label,
            found=cause.found,
            range=cause.range,
            cause=cause,
        )

    @staticmethod
    def trailing(expected: str, cursor: ParseCursor) -> "ParseError":
        return ParseError(
            kind=ParseErrorKind.TRAILING_TOKENS,
            expected=expected,
            found=cursor.peek(),
            range=cursor.current_range(),
        )

    @property
    def found_text(self) -> str:
        return "nothing" if self.found is None else f"`{self.found.text}`"

    @property
    def message(self) -> str:
        match self.kind:
            case ParseErrorKind.EXPECTED_TOKEN:
                return f"Expected `{self.expected}`, but found {self.found_text} instead"
            case ParseErrorKind.EXPECTED_ONE_OF:
                names = ", ".join(f"`{name}`" for name in self.expected_alternatives)
                return f"Expected one of {names} for `{self.expected}`, but found {self.found_text} instead"
            case ParseErrorKind.TRAILING_TOKENS:
                return f"Expected end of input after `{self.expected}`, but found {self.found_text} instead"
            case _:
                inner = self.cause.message if self.cause is not None else ""
                return f"While parsing {self.expected}...\n    " + inner.replace("\n", "\n    ")

    def innermost(self) -> "ParseError":
        error = self
        while error.cause is not None:
            error = error.cause
        return error

    def to_diagnostic(self) -> Diagnostic:
        return diagnostic_from_spec(_DIAGNOSTIC_SPECS[self.kind], self.range, self.message)


@dataclass(frozen=True, slots=True)
class ParsedSyntax(Generic[T]):
    """Success/failure wrapper returned by every parse routine.

    A present result may still carry `node=None` for optional rules that
    matched nothing.
    """

    ok: bool
    node: T | None = None
    error: ParseError | None = None

    @staticmethod
    def present(node: T | None = None) -> "ParsedSyntax[T]":
        return ParsedSyntax(ok=True, node=node)

    @staticmethod
    def absent(error: ParseError) -> "ParsedSyntax[T]":
        return ParsedSyntax(ok=False, error=error)

    def is_present(self) -> bool:
        return self.ok

    def is_absent(self) -> bool:
        return not self.ok

    def unwrap(self) -> T:
        if not self.ok or self.node is None:
            raise RuntimeError(f"Called unwrap on an absent parse: {self.error.message if self.error else 'no node'}")
        return self.node
