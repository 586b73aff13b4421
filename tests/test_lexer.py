import pytest

from tests._debug import debug_dump_tokens
from tests._shared_cases import VALID_PROGRAMS, ToycCase
from toyc.lexer import (
    CharClassKind,
    Lexeme,
    Lexer,
    LexicalError,
    LexState,
    Symbol,
    Token,
    TokenKind,
    TokenStream,
    TypeKeyword,
    classify,
    dump_tokens,
    format_token_table,
    is_whitespace,
    tokenize,
)
from toyc.text import TextRange, slice_text_range


def lex(text: str) -> list[Lexeme]:
    return Lexer().lex(text.encode("utf-8"))


def pairs(text: str) -> list[tuple[str, str]]:
    return [(str(lexeme.token), lexeme.text) for lexeme in lex(text)]


def lex_error(text: str) -> LexicalError:
    try:
        lex(text)
    except LexicalError as exc:
        return exc
    raise AssertionError(f"Expected a lexical error for {text!r}")


def test_classify_covers_letters_digits_and_symbols() -> None:
    assert classify(ord("a")).kind == CharClassKind.LETTER
    assert classify(ord("Z")).kind == CharClassKind.LETTER
    assert classify(ord("7")).kind == CharClassKind.DIGIT
    assert classify(ord("_")).symbol == Symbol.UNDERSCORE
    assert classify(ord("{")).symbol == Symbol.LEFT_CURLY
    assert classify(ord(".")).symbol == Symbol.PERIOD


@pytest.mark.parametrize("byte", [ord("#"), ord("\""), ord(" "), 0x00, 0x7F, 0xC3])
def test_classify_rejects_bytes_outside_the_alphabet(byte: int) -> None:
    assert classify(byte).kind == CharClassKind.UNKNOWN


def test_whitespace_set_is_tab_lf_vt_ff_cr_space() -> None:
    assert all(is_whitespace(byte) for byte in b"\t\n\x0b\x0c\r ")
    assert not is_whitespace(ord("_"))
    assert not is_whitespace(0x00)


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("int", [("Type(Int)", "int")]),
        ("float", [("Type(Float)", "float")]),
        ("return", [("Return", "return")]),
        ("intx", [("Identifier", "intx")]),
        ("in", [("Identifier", "in")]),
        ("i", [("Identifier", "i")]),
        ("floats", [("Identifier", "floats")]),
        ("flout", [("Identifier", "flout")]),
        ("returned", [("Identifier", "returned")]),
        ("retur", [("Identifier", "retur")]),
        ("int_", [("Identifier", "int_")]),
        ("int1", [("Identifier", "int1")]),
        ("Int", [("Identifier", "Int")]),
    ],
)
def test_keyword_prefixes_fall_back_to_identifiers(source: str, expected: list[tuple[str, str]]) -> None:
    assert pairs(source) == expected


def test_keyword_flushed_by_symbol_emits_both_tokens() -> None:
    assert pairs("return(") == [("Return", "return"), ("Symbol(LeftParen)", "(")]
    assert pairs("int;") == [("Type(Int)", "int"), ("Symbol(Semicolon)", ";")]


def test_underscore_starts_and_continues_identifiers() -> None:
    assert pairs("_ _a a_b_1") == [
        ("Identifier", "_"),
        ("Identifier", "_a"),
        ("Identifier", "a_b_1"),
    ]


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("12", [("LiteralInt", "12")]),
        ("12.34", [("LiteralFloat", "12.34")]),
        ("12.", [("LiteralFloat", "12.")]),
        ("0.5;", [("LiteralFloat", "0.5"), ("Symbol(Semicolon)", ";")]),
        ("1+2", [("LiteralInt", "1"), ("Symbol(Plus)", "+"), ("LiteralInt", "2")]),
    ],
)
def test_numbers_promote_from_int_to_float(source: str, expected: list[tuple[str, str]]) -> None:
    assert pairs(source) == expected


def test_second_decimal_point_is_a_lexical_error() -> None:
    error = lex_error("12.34.5")

    assert error.diagnostic.code == "LEXER_UNEXPECTED_CHARACTER"
    assert error.byte == ord(".")
    assert error.partial == "12.34"
    assert error.position == 5
    assert error.diagnostic.range.as_tuple() == (0, 6)
    assert str(error) == "Unexpected character `.` after `12.34`"


@pytest.mark.parametrize("source", ["12a", "3_", "1.5e"])
def test_digit_lexeme_cannot_continue_with_a_letter_or_underscore(source: str) -> None:
    error = lex_error(source)

    assert error.diagnostic.code == "LEXER_UNEXPECTED_CHARACTER"
    assert error.partial == source[:-1]


def test_unsupported_character_reports_offset_and_byte() -> None:
    error = lex_error("x = #;")

    assert error.diagnostic.code == "LEXER_UNSUPPORTED_CHARACTER"
    assert error.diagnostic.category == "lexer"
    assert error.position == 4
    assert error.partial == ""
    assert error.diagnostic.range.as_tuple() == (4, 5)
    assert str(error) == "Unsupported character `#`"


def test_unsupported_character_inside_identifier_names_the_partial_lexeme() -> None:
    error = lex_error("ab#")

    assert error.partial == "ab"
    assert error.diagnostic.range.as_tuple() == (0, 3)
    assert str(error) == "Unsupported character `#` after `ab`"


def test_non_ascii_text_is_rejected_with_hex_byte() -> None:
    error = lex_error("x = é")

    assert error.byte == 0xC3
    assert str(error) == "Unsupported character `0xC3`"


def test_leading_period_is_a_symbol() -> None:
    assert pairs(".5 x.y") == [
        ("Symbol(Period)", "."),
        ("LiteralInt", "5"),
        ("Identifier", "x"),
        ("Symbol(Period)", "."),
        ("Identifier", "y"),
    ]


def test_tick_returns_zero_one_or_two_lexemes() -> None:
    lexer = Lexer()

    assert lexer.tick(ord("x")) == ()
    assert lexer.pending == "x"
    completed = lexer.tick(ord(";"))
    assert [str(lexeme.token) for lexeme in completed] == ["Identifier", "Symbol(Semicolon)"]
    assert [lexeme.range.as_tuple() for lexeme in completed] == [(0, 1), (1, 2)]
    assert lexer.tick(ord("=")) == (
        Lexeme(Token.of_symbol(Symbol.EQUAL), "=", TextRange(2, 3)),
    )
    assert lexer.state == LexState.SCROLL_TO_NEXT


def test_keyword_prefix_states_are_tracked_per_character() -> None:
    lexer = Lexer()
    lexer.tick(ord("f"))
    assert lexer.state == LexState.FLOAT_F
    lexer.tick(ord("l"))
    assert lexer.state == LexState.FLOAT_FL
    lexer.tick(ord("x"))
    assert lexer.state == LexState.IDENTIFIER


def test_finalize_flushes_once() -> None:
    lexer = Lexer()
    for byte in b"return":
        assert lexer.tick(byte) == ()
    assert lexer.state == LexState.CONFIRM_RETURN

    flushed = lexer.finalize()
    assert [lexeme.kind for lexeme in flushed] == [TokenKind.RETURN]
    assert lexer.finalize() == ()


def test_trailing_whitespace_does_not_change_the_stream() -> None:
    assert lex("x = 1") == lex("x = 1 \n\t\r\x0b\x0c")


def test_lexeme_ranges_slice_back_to_lexeme_text() -> None:
    source = "float area(float w) {\n    return w * 2.5;\n}\n".encode()

    for lexeme in Lexer().lex(source):
        assert slice_text_range(source, lexeme.range) == lexeme.text.encode()


def test_token_display_names() -> None:
    assert str(Token.of_symbol(Symbol.LEFT_PAREN)) == "Symbol(LeftParen)"
    assert str(Token.of_symbol(Symbol.RIGHT_CURLY)) == "Symbol(RightCurly)"
    assert str(Token.of_type(TypeKeyword.FLOAT)) == "Type(Float)"
    assert str(Token(TokenKind.INT_LITERAL)) == "LiteralInt"
    assert str(Token(TokenKind.FLOAT_LITERAL)) == "LiteralFloat"


def test_token_payload_must_match_kind() -> None:
    with pytest.raises(ValueError):
        Token(TokenKind.SYMBOL)
    with pytest.raises(ValueError):
        Token(TokenKind.IDENTIFIER, symbol=Symbol.PLUS)
    with pytest.raises(ValueError):
        Token(TokenKind.TYPE)


def test_token_table_has_24_wide_token_column() -> None:
    table = format_token_table(lex("int x;"))

    assert table.splitlines() == [
        f"{'TOKEN':<24}|LEXEME",
        f"{'':<24}|",
        f"{'Type(Int)':<24}|int",
        f"{'Identifier':<24}|x",
        f"{'Symbol(Semicolon)':<24}|;",
    ]


def test_token_stream_accepts_str_bytes_and_byte_iterables() -> None:
    from_text = tokenize("int x")
    from_bytes = TokenStream.from_source(b"int x")
    from_iterable = TokenStream.from_source(iter(b"int x"))

    assert from_text.lexemes == from_bytes.lexemes == from_iterable.lexemes
    assert len(from_text) == 2
    assert from_text[-1].text == "x"
    assert [lexeme.text for lexeme in from_text] == ["int", "x"]


def test_token_stream_is_not_built_on_lexical_error() -> None:
    with pytest.raises(LexicalError):
        TokenStream.from_source("int 1x")


@pytest.mark.parametrize("case", VALID_PROGRAMS, ids=lambda case: case.name)
def test_valid_programs_lex_without_errors(case: ToycCase) -> None:
    lexemes = lex(case.source)
    debug_dump_tokens(case.name, case.source, lexemes)

    assert lexemes
    assert all(lexeme.text for lexeme in lexemes)
    assert not any(lexeme.token.is_symbol(Symbol.UNDERSCORE) for lexeme in lexemes)


def test_dump_tokens_prints_the_table(capsys: pytest.CaptureFixture[str]) -> None:
    lexemes = lex("return 1;")

    dump_tokens(lexemes)

    assert capsys.readouterr().out == format_token_table(lexemes) + "\n"
