"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from toyc.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNSUPPORTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNSUPPORTED_CHARACTER",
    message="Unsupported character",
    hint="Only printable 7-bit ASCII letters, digits, whitespace and `+ - * / = ; ( ) { } _ , .` are accepted.",
    severity="error",
    category="lexer",
)

LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character",
    hint="Separate the lexemes with whitespace or punctuation.",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_ONE_OF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_ONE_OF",
    message="Expected one of several alternatives",
    severity="error",
    category="parser",
)

PARSER_DANGLING_DELIMITER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DANGLING_DELIMITER",
    message="Delimiter is not followed by another list item",
    hint="Remove the trailing delimiter.",
    severity="error",
    category="parser",
)

PARSER_MISSING_TERMINATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_TERMINATOR",
    message="List item is not followed by its terminator",
    hint="Terminate every item, including the last one.",
    severity="error",
    category="parser",
)

PARSER_TRAILING_TOKENS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TRAILING_TOKENS",
    message="Expected end of input",
    hint="Only a single function definition is accepted per source.",
    severity="error",
    category="parser",
)
