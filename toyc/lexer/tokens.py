"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, StrEnum

from toyc.text import TextRange


class Symbol(StrEnum):
    """Fixed punctuation vocabulary; the value is the source character."""

    # Arithmetic operators
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    # Assignment / statement terminator
    EQUAL = "="
    SEMICOLON = ";"

    # Grouping
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_CURLY = "{"
    RIGHT_CURLY = "}"

    # Identifier continuation only, never emitted as a token
    UNDERSCORE = "_"

    COMMA = ","
    PERIOD = "."

    @property
    def display_name(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))


class TypeKeyword(StrEnum):
    INT = "int"
    FLOAT = "float"


class TokenKind(IntEnum):
    # -------------------------
    # Literals
    # -------------------------
    INT_LITERAL = 1
    FLOAT_LITERAL = 2

    # -------------------------
    # Names
    # -------------------------
    IDENTIFIER = 10

    # -------------------------
    # Punctuation (see Symbol)
    # -------------------------
    SYMBOL = 20

    # -------------------------
    # Reserved words
    # -------------------------
    TYPE = 30  # int / float
    RETURN = 31

    @property
    def is_literal(self) -> bool:
        return self in (TokenKind.INT_LITERAL, TokenKind.FLOAT_LITERAL)


@dataclass(frozen=True, slots=True)
class Token:
    """Classified category of a lexeme.

    `symbol` is set only for SYMBOL tokens and `type_keyword` only for TYPE
    tokens.
    """

    kind: TokenKind
    symbol: Symbol | None = None
    type_keyword: TypeKeyword | None = None

    def __post_init__(self):
        if (self.kind == TokenKind.SYMBOL) != (self.symbol is not None):
            raise ValueError(f"Symbol payload mismatch for {self.kind.name}")
        if (self.kind == TokenKind.TYPE) != (self.type_keyword is not None):
            raise ValueError(f"Type payload mismatch for {self.kind.name}")

    @staticmethod
    def of_symbol(symbol: Symbol) -> "Token":
        return Token(TokenKind.SYMBOL, symbol=symbol)

    @staticmethod
    def of_type(type_keyword: TypeKeyword) -> "Token":
        return Token(TokenKind.TYPE, type_keyword=type_keyword)

    def is_symbol(self, symbol: Symbol) -> bool:
        return self.symbol == symbol

    def __str__(self) -> str:
        match self.kind:
            case TokenKind.INT_LITERAL:
                return "LiteralInt"
            case TokenKind.FLOAT_LITERAL:
                return "LiteralFloat"
            case TokenKind.IDENTIFIER:
                return "Identifier"
            case TokenKind.SYMBOL:
                return f"Symbol({self.symbol.display_name})"
            case TokenKind.TYPE:
                return f"Type({self.type_keyword.name.capitalize()})"
            case TokenKind.RETURN:
                return "Return"


INT_LITERAL_TOKEN = Token(TokenKind.INT_LITERAL)
FLOAT_LITERAL_TOKEN = Token(TokenKind.FLOAT_LITERAL)
IDENTIFIER_TOKEN = Token(TokenKind.IDENTIFIER)
RETURN_TOKEN = Token(TokenKind.RETURN)


@dataclass(frozen=True, slots=True)
class Lexeme:
    """A token paired with the exact source text (and byte range) that produced it."""

    token: Token
    text: str
    range: TextRange

    @property
    def kind(self) -> TokenKind:
        return self.token.kind
