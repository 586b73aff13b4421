"""Toy C grammar.

```text
<FUNCTION DEFINITION>   -> type identifier ( <FUNCTION PARAMETERS> ) { <COMPOUND STATEMENTS> }
<FUNCTION PARAMETERS>   -> <FUNCTION PARAMETER> <FUNCTION PARAMETERS'> | ε
<FUNCTION PARAMETERS'>  -> , <FUNCTION PARAMETER> <FUNCTION PARAMETERS'> | ε
<FUNCTION PARAMETER>    -> type identifier
<COMPOUND STATEMENTS>   -> <STATEMENT> ; <COMPOUND STATEMENTS> | ε
<STATEMENT>             -> <ASSIGNMENT STATEMENT> | <RETURN STATEMENT>
<ASSIGNMENT STATEMENT>  -> identifier = <EXPRESSION>
<RETURN STATEMENT>      -> return <EXPRESSION>
<EXPRESSION>            -> <ARITHMETIC EXPRESSION> | <TYPECAST EXPRESSION>
<TYPECAST EXPRESSION>   -> ( type ) identifier
<ARITHMETIC EXPRESSION> -> <TERM> <TERM'>
<TERM'>                 -> + <ARITHMETIC EXPRESSION> | - <ARITHMETIC EXPRESSION> | ε
<TERM>                  -> <FACTOR> <FACTOR'>
<FACTOR'>               -> * <TERM> | / <TERM> | ε
<FACTOR>                -> identifier | literal
```

`<TERM'>` and `<FACTOR'>` recurse into the whole remaining chain, so operators
of equal precedence group to the right: `a - b - c` is `a - (b - c)`.

Sum rules try their alternatives in the listed order and keep the first that
parses, not the longest.
"""

from dataclasses import dataclass
from typing import ClassVar

from toyc.parser.parse_lists import Delimited, Terminated
from toyc.parser.syntax import Alternative, Extension, Field, ParseNode, Product, Sum
from toyc.parser.terminals import (
    Comma,
    Divide,
    Equals,
    Identifier,
    LeftCurly,
    LeftParen,
    Literal,
    Minus,
    Multiply,
    Plus,
    Return,
    RightCurly,
    RightParen,
    Semicolon,
    Type,
)


@dataclass(frozen=True, slots=True)
class Factor(Sum):
    """An identifier or a literal."""

    variant: Identifier | Literal

    LABEL: ClassVar[str] = "Factor"
    ALTERNATIVES: ClassVar[tuple[Alternative, ...]] = (
        Alternative(Identifier, "Variable"),
        Alternative(Literal, "Literal"),
    )


@dataclass(frozen=True, slots=True)
class FactorExtend(Extension):
    """`* <TERM>` or `/ <TERM>`."""

    operator: Multiply | Divide
    operand: "Term"

    LABEL: ClassVar[str] = "Factor Extension"
    OPERATORS: ClassVar[tuple[tuple[type[ParseNode], str], ...]] = (
        (Multiply, "Multiply"),
        (Divide, "Divide"),
    )

    @classmethod
    def operand_rule(cls) -> type[Product]:
        return Term


@dataclass(frozen=True, slots=True)
class Term(Product):
    factor: Factor
    extend: FactorExtend | None

    LABEL: ClassVar[str] = "Term"
    FIELDS: ClassVar[tuple[Field, ...]] = (
        Field("factor", Factor),
        Field("extend", FactorExtend),
    )


@dataclass(frozen=True, slots=True)
class TermExtend(Extension):
    """`+ <ARITHMETIC EXPRESSION>` or `- <ARITHMETIC EXPRESSION>`."""

    operator: Plus | Minus
    operand: "ArithmeticExpression"

    LABEL: ClassVar[str] = "Term Extension"
    OPERATORS: ClassVar[tuple[tuple[type[ParseNode], str], ...]] = (
        (Plus, "Add"),
        (Minus, "Subtract"),
    )

    @classmethod
    def operand_rule(cls) -> type[Product]:
        return ArithmeticExpression


@dataclass(frozen=True, slots=True)
class ArithmeticExpression(Product):
    lhs_term: Term
    extend: TermExtend | None

    LABEL: ClassVar[str] = "Arithmetic Expression"
    FIELDS: ClassVar[tuple[Field, ...]] = (
        Field("lhs_term", Term),
        Field("extend", TermExtend),
    )


@dataclass(frozen=True, slots=True)
class TypecastExpression(Product):
    left_paren: LeftParen
    type_: Type
    right_paren: RightParen
    identifier: Identifier

    LABEL: ClassVar[str] = "Typecast Expression"
    FIELDS: ClassVar[tuple[Field, ...]] = (
        Field("left_paren", LeftParen, "Left Paren", spaced=False),
        Field("type_", Type, "Cast Type", spaced=False),
        Field("right_paren", RightParen, "Right Paren", spaced=False),
        Field("identifier", Identifier, "Cast Identifier", spaced=False),
    )


@dataclass(frozen=True, slots=True)
class Expression(Sum):
    variant: ArithmeticExpression | TypecastExpression

    LABEL: ClassVar[str] = "Expression"
    SHOW_SIGNATURE: ClassVar[bool] = False
    ALTERNATIVES: ClassVar[tuple[Alternative, ...]] = (
        Alternative(ArithmeticExpression),
        Alternative(TypecastExpression),
    )


@dataclass(frozen=True, slots=True)
class AssignmentStatement(Product):
    lhs_identifier: Identifier
    equals: Equals
    expression: Expression

    LABEL: ClassVar[str] = "Assignment Statement"
    FIELDS: ClassVar[tuple[Field, ...]] = (
        Field("lhs_identifier", Identifier, "Identifier"),
        Field("equals", Equals, "Equals"),
        Field("expression", Expression),
    )


@dataclass(frozen=True, slots=True)
class ReturnStatement(Product):
    return_: Return
    expression: Expression

    LABEL: ClassVar[str] = "Return Statement"
    FIELDS: ClassVar[tuple[Field, ...]] = (
        Field("return_", Return, "Return"),
        Field("expression", Expression),
    )


@dataclass(frozen=True, slots=True)
class Statement(Sum):
    variant: AssignmentStatement | ReturnStatement

    LABEL: ClassVar[str] = "Statement"
    SHOW_SIGNATURE: ClassVar[bool] = False
    ALTERNATIVES: ClassVar[tuple[Alternative, ...]] = (
        Alternative(AssignmentStatement),
        Alternative(ReturnStatement),
    )


@dataclass(frozen=True, slots=True)
class FunctionParameter(Product):
    type_: Type
    identifier: Identifier

    LABEL: ClassVar[str] = "Function Parameter"
    FIELDS: ClassVar[tuple[Field, ...]] = (
        Field("type_", Type, "Parameter Type"),
        Field("identifier", Identifier, "Parameter Identifier"),
    )


FunctionParameters = Delimited.of(FunctionParameter, Comma, "FunctionParameters")
CompoundStatements = Terminated.of(Statement, Semicolon, "CompoundStatements")


@dataclass(frozen=True, slots=True)
class FunctionDefinition(Product):
    """Root rule."""

    type_: Type
    function_name: Identifier
    left_paren: LeftParen
    parameters: FunctionParameters
    right_paren: RightParen
    left_curly: LeftCurly
    compound_statements: CompoundStatements
    right_curly: RightCurly

    LABEL: ClassVar[str] = "Function Definition"
    FIELDS: ClassVar[tuple[Field, ...]] = (
        Field("type_", Type, "Function Return Type"),
        Field("function_name", Identifier, "Function Identifier"),
        Field("left_paren", LeftParen, "Left Paren"),
        Field("parameters", FunctionParameters, "Function Parameters", spaced=False),
        Field("right_paren", RightParen, "Right Paren", spaced=False),
        Field("left_curly", LeftCurly, "Left Curly"),
        Field("compound_statements", CompoundStatements, "Compound Statements"),
        Field("right_curly", RightCurly, "Right Curly"),
    )
