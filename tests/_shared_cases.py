"""Centralized Toy C source cases used across lexer/parser/pipeline tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap


@dataclass(frozen=True, slots=True)
class ToycCase:
    name: str
    source: str
    signature: str


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


VALID_PROGRAMS: tuple[ToycCase, ...] = (
    ToycCase(
        name="empty_function",
        source="int f() {}",
        signature="int f () { }",
    ),
    ToycCase(
        name="parameters_and_statements",
        source="int main(int x, float y) { x = 1; return x; }",
        signature="int main (int x, float y) { x = 1; return x; }",
    ),
    ToycCase(
        name="multiline_with_arithmetic",
        source=_dedent(
            """
            float area(float w, float h) {
                a = w * h;
                b = a / 2 + 0.5;
                return b;
            }
            """
        ),
        signature="float area (float w, float h) { a = w * h; b = a / 2 + 0.5; return b; }",
    ),
    ToycCase(
        name="typecast_and_keyword_prefixed_names",
        source="int convert(float floats) { intx = (int)floats; returned = intx - 1 - 2; return returned; }",
        signature=(
            "int convert (float floats) { intx = (int)floats; returned = intx - 1 - 2; return returned; }"
        ),
    ),
    ToycCase(
        name="underscores_and_dense_punctuation",
        source="int _f(int _a,int b_2){_x=_a*b_2;return _x;}",
        signature="int _f (int _a, int b_2) { _x = _a * b_2; return _x; }",
    ),
    ToycCase(
        name="trailing_point_float",
        source="float g() {\n\treturn 12.;\n}\n",
        signature="float g () { return 12.; }",
    ),
)


# Sources that lex cleanly but are rejected by the parser.
INVALID_PROGRAMS: tuple[tuple[str, str, str], ...] = (
    # (name, source, diagnostic code)
    ("dangling_parameter_comma", "int f(int x,) {}", "PARSER_DANGLING_DELIMITER"),
    ("missing_statement_terminator", "int f() { return x }", "PARSER_MISSING_TERMINATOR"),
    ("missing_closing_curly", "int f() {", "PARSER_EXPECTED_TOKEN"),
    ("missing_return_type", "main() {}", "PARSER_EXPECTED_TOKEN"),
    ("trailing_tokens", "int f() {} int g() {}", "PARSER_TRAILING_TOKENS"),
    ("empty_source", "", "PARSER_EXPECTED_TOKEN"),
)
