from pathlib import Path

import pytest

from tests._debug import debug_dump_diagnostics
from tests._shared_cases import INVALID_PROGRAMS, VALID_PROGRAMS
from toyc.parser import FunctionDefinition, ParseMode, ParserOptions
from toyc.pipeline import run_lex, run_lex_file, run_parse, run_parse_file


def test_run_lex_returns_stream_and_no_diagnostics() -> None:
    result = run_lex("int x;")

    assert result.has_errors is False
    assert result.diagnostics == []
    assert result.source == b"int x;"
    assert [lexeme.text for lexeme in result.lexemes] == ["int", "x", ";"]
    assert result.token_table().splitlines()[2] == f"{'Type(Int)':<24}|int"


def test_run_lex_error_keeps_no_partial_stream() -> None:
    result = run_lex("int 1x")

    assert result.stream is None
    assert result.lexemes == ()
    assert result.has_errors is True
    assert result.error is not None
    assert result.error.partial == "1"
    assert [diagnostic.code for diagnostic in result.diagnostics] == ["LEXER_UNEXPECTED_CHARACTER"]


def test_run_parse_returns_root_and_tree() -> None:
    source = "int main() { return 0; }"

    result = run_parse(source)

    assert result.has_errors is False
    assert result.diagnostics == []
    assert isinstance(result.root(), FunctionDefinition)
    assert result.source_text == source
    assert result.render_tree().splitlines()[0] == "Function Definition: int main () { return 0; }"


def test_run_parse_reuses_provided_lex_result() -> None:
    lexed = run_lex("int f() {}")

    result = run_parse(lexed=lexed)

    assert result.lexed is lexed
    assert result.parsed.is_present()
    assert result.root().lexeme_signature() == "int f () { }"


def test_run_parse_after_lex_error_has_only_lexer_diagnostics() -> None:
    lexed = run_lex("int f() { x = #; }")

    result = run_parse(lexed=lexed)

    assert result.parsed is None
    assert result.root() is None
    assert result.error is None
    assert result.render_tree() == ""
    assert result.diagnostics == lexed.diagnostics
    assert result.diagnostics[0].code == "LEXER_UNSUPPORTED_CHARACTER"


def test_run_parse_rejects_text_and_lexed_together() -> None:
    lexed = run_lex("int f() {}")

    try:
        run_parse("int f() {}", lexed=lexed)
    except ValueError as exc:
        assert "Pass either text or lexed, not both" in str(exc)
    else:
        raise AssertionError("Expected ValueError when passing text and lexed together")

    with pytest.raises(ValueError):
        run_parse()


def test_run_parse_rejects_options_and_mode_together() -> None:
    with pytest.raises(ValueError, match="Pass either options or mode, not both"):
        run_parse("int f() {}", ParserOptions(), mode=ParseMode.PERMISSIVE)


def test_mode_resolves_to_options() -> None:
    strict = run_parse("int f() {}")
    permissive = run_parse("int f() {}", mode=ParseMode.PERMISSIVE)
    explicit = run_parse("int f() {}", ParserOptions(require_end_of_input=False))

    assert strict.options == ParserOptions()
    assert permissive.options.mode == ParseMode.PERMISSIVE
    assert permissive.options.require_end_of_input is False
    assert explicit.options.require_end_of_input is False


@pytest.mark.parametrize(("name", "source", "code"), INVALID_PROGRAMS, ids=[case[0] for case in INVALID_PROGRAMS])
def test_invalid_programs_report_one_parser_diagnostic(name: str, source: str, code: str) -> None:
    result = run_parse(source)
    debug_dump_diagnostics(name, result.diagnostics, source)

    assert result.has_errors is True
    assert result.root() is None
    assert [diagnostic.code for diagnostic in result.diagnostics] == [code]
    assert result.diagnostics[0].category == "parser"


def test_parse_diagnostic_renders_code_and_range() -> None:
    result = run_parse("int f() {")

    diagnostic = result.diagnostics[0]
    assert diagnostic.range.as_tuple() == (9, 9)
    assert diagnostic.render() == "ERROR PARSER_EXPECTED_TOKEN [9..9]: Expected `}`, but found nothing instead"


def test_diagnostics_are_cached_per_result() -> None:
    result = run_parse("int f() { return x }")

    assert result.diagnostics is result.diagnostics


def test_file_entrypoints_read_raw_bytes(tmp_path: Path) -> None:
    case = VALID_PROGRAMS[2]
    path = tmp_path / "area.toyc"
    path.write_text(case.source, encoding="utf-8")

    lexed = run_lex_file(path)
    parsed = run_parse_file(str(path))

    assert lexed.source == case.source.encode("utf-8")
    assert parsed.root().lexeme_signature() == case.signature


def test_file_entrypoints_propagate_read_errors(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        run_lex_file(tmp_path / "missing.toyc")
