"""Parser infrastructure (cursor + backtracking rules + grammar)."""

from toyc.parser.cursor import ParseCursor
from toyc.parser.grammar import (
    ArithmeticExpression,
    AssignmentStatement,
    CompoundStatements,
    Expression,
    Factor,
    FactorExtend,
    FunctionDefinition,
    FunctionParameter,
    FunctionParameters,
    ReturnStatement,
    Statement,
    Term,
    TermExtend,
    TypecastExpression,
)
from toyc.parser.options import ParseMode, ParserOptions
from toyc.parser.parse_lists import Delimited, Terminated
from toyc.parser.parsed_syntax import ParsedSyntax, ParseError, ParseErrorKind
from toyc.parser.syntax import (
    Alternative,
    Extension,
    Field,
    ParseNode,
    Product,
    Sum,
    make_indent,
)
from toyc.parser.terminals import Terminal, terminal
from toyc.parser.toyc import lex, parse, parse_result, parse_tokens, resolve_options

__all__ = [
    "Alternative",
    "ArithmeticExpression",
    "AssignmentStatement",
    "CompoundStatements",
    "Delimited",
    "Expression",
    "Extension",
    "Factor",
    "FactorExtend",
    "Field",
    "FunctionDefinition",
    "FunctionParameter",
    "FunctionParameters",
    "ParseCursor",
    "ParseError",
    "ParseErrorKind",
    "ParseMode",
    "ParseNode",
    "ParsedSyntax",
    "ParserOptions",
    "Product",
    "ReturnStatement",
    "Statement",
    "Sum",
    "Term",
    "TermExtend",
    "Terminal",
    "Terminated",
    "TypecastExpression",
    "lex",
    "make_indent",
    "parse",
    "parse_result",
    "parse_tokens",
    "resolve_options",
    "terminal",
]
