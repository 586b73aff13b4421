"""Diagnostics."""

from toyc.diagnostics.codes import (
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNSUPPORTED_CHARACTER,
    PARSER_DANGLING_DELIMITER,
    PARSER_EXPECTED_ONE_OF,
    PARSER_EXPECTED_TOKEN,
    PARSER_MISSING_TERMINATOR,
    PARSER_TRAILING_TOKENS,
    DiagnosticSpec,
)
from toyc.diagnostics.diagnostic import Diagnostic, Severity
from toyc.diagnostics.report import collect_diagnostics, diagnostic_from_spec, has_errors

__all__ = [
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNSUPPORTED_CHARACTER",
    "PARSER_DANGLING_DELIMITER",
    "PARSER_EXPECTED_ONE_OF",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_MISSING_TERMINATOR",
    "PARSER_TRAILING_TOKENS",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "diagnostic_from_spec",
    "has_errors",
]
