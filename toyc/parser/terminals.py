"""Terminal rules: one token each.

All terminals share one matcher; they differ only in the token predicate and
the label used in errors and the printed tree.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import ClassVar

from toyc.lexer import Lexeme, Symbol, Token, TokenKind
from toyc.parser.cursor import ParseCursor
from toyc.parser.parsed_syntax import ParsedSyntax, ParseError
from toyc.parser.syntax import ParseNode, make_indent

TokenPredicate = Callable[[Token], bool]


@dataclass(frozen=True, slots=True)
class Terminal(ParseNode):
    lexeme: Lexeme

    LABEL: ClassVar[str] = "{terminal}"

    @staticmethod
    def matches(token: Token) -> bool:
        return False

    @classmethod
    def parse(cls, cursor: ParseCursor) -> ParsedSyntax:
        lexeme = cursor.peek()
        if lexeme is None or not cls.matches(lexeme.token):
            return ParsedSyntax.absent(ParseError.expected_token(cls.parse_label(), cursor))
        cursor.next()
        return ParsedSyntax.present(cls(lexeme))

    @property
    def token(self) -> Token:
        return self.lexeme.token

    @property
    def text(self) -> str:
        return self.lexeme.text

    def lexeme_signature(self) -> str:
        return self.lexeme.text

    def render(self, depth: int = 0, label: str | None = None) -> Iterator[str]:
        yield f"{make_indent(depth)}{label or self.parse_label()}: {self.lexeme.text}"


def terminal(name: str, label: str, matches: TokenPredicate) -> type[Terminal]:
    """Create a terminal rule accepting tokens for which `matches` holds."""
    return type(
        name,
        (Terminal,),
        {
            "__slots__": (),
            "__module__": __name__,
            "__qualname__": name,
            "__doc__": f"Terminal `{label}`.",
            "LABEL": label,
            "matches": staticmethod(matches),
        },
    )


def kind_is(kind: TokenKind) -> TokenPredicate:
    return lambda token: token.kind == kind


def symbol_is(symbol: Symbol) -> TokenPredicate:
    return lambda token: token.kind == TokenKind.SYMBOL and token.symbol == symbol


def symbol_terminal(name: str, symbol: Symbol) -> type[Terminal]:
    return terminal(name, symbol.value, symbol_is(symbol))


Identifier = terminal("Identifier", "{identifier}", kind_is(TokenKind.IDENTIFIER))
Type = terminal("Type", "{type}", kind_is(TokenKind.TYPE))
Literal = terminal("Literal", "{literal}", lambda token: token.kind.is_literal)
Return = terminal("Return", "return", kind_is(TokenKind.RETURN))

Equals = symbol_terminal("Equals", Symbol.EQUAL)
Semicolon = symbol_terminal("Semicolon", Symbol.SEMICOLON)
LeftParen = symbol_terminal("LeftParen", Symbol.LEFT_PAREN)
RightParen = symbol_terminal("RightParen", Symbol.RIGHT_PAREN)
LeftCurly = symbol_terminal("LeftCurly", Symbol.LEFT_CURLY)
RightCurly = symbol_terminal("RightCurly", Symbol.RIGHT_CURLY)
Plus = symbol_terminal("Plus", Symbol.PLUS)
Minus = symbol_terminal("Minus", Symbol.MINUS)
Multiply = symbol_terminal("Multiply", Symbol.MULTIPLY)
Divide = symbol_terminal("Divide", Symbol.DIVIDE)
Comma = symbol_terminal("Comma", Symbol.COMMA)

TERMINALS: tuple[type[Terminal], ...] = (
    Identifier,
    Type,
    Literal,
    Return,
    Equals,
    Semicolon,
    LeftParen,
    RightParen,
    LeftCurly,
    RightCurly,
    Plus,
    Minus,
    Multiply,
    Divide,
    Comma,
)
