"""Parse tree node bases: products, sums, optional operator extensions.

Every node knows how to parse itself from a `ParseCursor` (classmethod
`parse`), how to name itself in errors (`parse_label`), how to flatten back to
its lexemes (`lexeme_signature`) and how to print itself as an indented tree
(`render` / `display`).
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar, TextIO

from toyc.parser.cursor import ParseCursor
from toyc.parser.parsed_syntax import ParsedSyntax, ParseError

INDENT = "    "


def make_indent(depth: int) -> str:
    return INDENT * depth


class ParseNode:
    """Base of every parse tree node."""

    __slots__ = ()

    LABEL: ClassVar[str] = "Node"

    @classmethod
    def parse_label(cls) -> str:
        """Label used to describe the rule in parse errors and headers."""
        return cls.LABEL

    @classmethod
    def parse(cls, cursor: ParseCursor) -> ParsedSyntax:
        """Parse at the cursor.

        On success the cursor is advanced past the node. On failure it is
        left exactly where it was.
        """
        raise NotImplementedError

    def lexeme_signature(self) -> str:
        """All lexemes of the subtree, in order, in one string."""
        raise NotImplementedError

    def render(self, depth: int = 0, label: str | None = None) -> Iterator[str]:
        raise NotImplementedError

    def display(self, depth: int = 0, label: str | None = None, *, file: TextIO | None = None) -> None:
        for line in self.render(depth, label):
            print(line, file=file)


@dataclass(frozen=True, slots=True)
class Field:
    """One required (or optional, see `Extension`) component of a product rule."""

    name: str
    rule: type[ParseNode]
    label: str | None = None
    spaced: bool = True  # single space before this field in the signature


class Product(ParseNode):
    """All fields required, in order.

    Subclasses are dataclasses whose fields line up with `FIELDS`.
    """

    __slots__ = ()

    FIELDS: ClassVar[tuple[Field, ...]] = ()

    @classmethod
    def parse(cls, cursor: ParseCursor) -> ParsedSyntax:
        if cursor.peek() is None:
            return ParsedSyntax.absent(ParseError.expected_token(cls.parse_label(), cursor))

        fork = cursor.fork()
        values: dict[str, ParseNode | None] = {}
        for field in cls.FIELDS:
            parsed = field.rule.parse(fork)
            if parsed.is_absent():
                return ParsedSyntax.absent(parsed.error)
            values[field.name] = parsed.node

        cursor.commit(fork)
        return ParsedSyntax.present(cls(**values))

    def children(self) -> Iterator[tuple[Field, ParseNode | None]]:
        for field in self.FIELDS:
            yield field, getattr(self, field.name)

    def lexeme_signature(self) -> str:
        signature = ""
        for field, child in self.children():
            if child is None:
                continue
            part = child.lexeme_signature()
            if not part:
                continue
            if signature and field.spaced:
                signature += " "
            signature += part
        return signature

    def render(self, depth: int = 0, label: str | None = None) -> Iterator[str]:
        yield f"{make_indent(depth)}{label or self.parse_label()}: {self.lexeme_signature()}"
        for field, child in self.children():
            if child is not None:
                yield from child.render(depth + 1, field.label)


@dataclass(frozen=True, slots=True)
class Alternative:
    rule: type[ParseNode]
    label: str | None = None


class Sum(ParseNode):
    """Exactly one of `ALTERNATIVES`; the first that parses wins.

    Subclasses are dataclasses with a single `variant` field.
    """

    __slots__ = ()

    ALTERNATIVES: ClassVar[tuple[Alternative, ...]] = ()
    SHOW_SIGNATURE: ClassVar[bool] = True

    variant: ParseNode

    @classmethod
    def parse(cls, cursor: ParseCursor) -> ParsedSyntax:
        if cursor.peek() is None:
            return ParsedSyntax.absent(ParseError.expected_token(cls.parse_label(), cursor))

        errors: list[ParseError] = []
        for alternative in cls.ALTERNATIVES:
            fork = cursor.fork()
            parsed = alternative.rule.parse(fork)
            if parsed.is_present():
                cursor.commit(fork)
                return ParsedSyntax.present(cls(parsed.node))
            errors.append(parsed.error)

        return ParsedSyntax.absent(
            ParseError.one_of(
                cls.parse_label(),
                tuple(alternative.rule.parse_label() for alternative in cls.ALTERNATIVES),
                tuple(errors),
                cursor,
            )
        )

    @property
    def tag(self) -> str:
        """Name of the alternative that matched."""
        return type(self.variant).__name__

    def lexeme_signature(self) -> str:
        return self.variant.lexeme_signature()

    def render(self, depth: int = 0, label: str | None = None) -> Iterator[str]:
        header = f"{make_indent(depth)}{label or self.parse_label()}:"
        if self.SHOW_SIGNATURE:
            header += f" {self.lexeme_signature()}"
        yield header

        child_label = next(
            (alternative.label for alternative in self.ALTERNATIVES if isinstance(self.variant, alternative.rule)),
            None,
        )
        yield from self.variant.render(depth + 1, child_label)


class Extension(ParseNode):
    """Optional `operator operand` tail of an arithmetic rule.

    Parsing yields a present `None` when no operator follows. Once an operator
    has matched, a missing operand is a hard error. Subclasses are dataclasses
    with `operator` and `operand` fields.

    The operand rule is a two-field product `head [extension]` whose second
    field is this same extension, so a chain `op h1 op h2 ...` nests to the
    right. Chains are parsed, flattened and rendered by iterating over their
    `(operator, head)` links.
    """

    __slots__ = ()

    # (operator terminal, operation name)
    OPERATORS: ClassVar[tuple[tuple[type[ParseNode], str], ...]] = ()

    operator: ParseNode
    operand: Product

    @classmethod
    def operand_rule(cls) -> type[Product]:
        raise NotImplementedError

    @classmethod
    def parse(cls, cursor: ParseCursor) -> ParsedSyntax:
        operand_rule = cls.operand_rule()
        head_field = operand_rule.FIELDS[0]

        fork = cursor.fork()
        chain: list[tuple[ParseNode, ParseNode]] = []
        while True:
            operator = cls._parse_operator(fork)
            if operator is None:
                break
            if fork.peek() is None:
                return ParsedSyntax.absent(ParseError.expected_token(operand_rule.parse_label(), fork))
            head = head_field.rule.parse(fork)
            if head.is_absent():
                return ParsedSyntax.absent(head.error)
            chain.append((operator, head.node))

        if not chain:
            return ParsedSyntax.present(None)

        extension = None
        for operator, head in reversed(chain):
            extension = cls(operator, operand_rule(head, extension))
        cursor.commit(fork)
        return ParsedSyntax.present(extension)

    @classmethod
    def _parse_operator(cls, cursor: ParseCursor) -> ParseNode | None:
        for operator_rule, _ in cls.OPERATORS:
            operator = operator_rule.parse(cursor)
            if operator.is_present():
                return operator.node
        return None

    def links(self) -> Iterator[tuple[ParseNode, Product]]:
        """`(operator, operand)` pairs from this extension to the end of the chain."""
        extension: Extension | None = self
        while extension is not None:
            yield extension.operator, extension.operand
            _, (_, extension) = extension.operand.children()

    @property
    def operation(self) -> str:
        for operator_rule, name in self.OPERATORS:
            if isinstance(self.operator, operator_rule):
                return name
        raise RuntimeError(f"Unknown operator {self.operator!r}")

    def lexeme_signature(self) -> str:
        parts: list[str] = []
        for operator, operand in self.links():
            (_, head), _ = operand.children()
            parts.append(operator.lexeme_signature())
            parts.append(head.lexeme_signature())
        return " ".join(part for part in parts if part)

    def render(self, depth: int = 0, label: str | None = None) -> Iterator[str]:
        # Each operand sits at its operator's depth; its head one level below.
        for operator, operand in self.links():
            (head_field, head), _ = operand.children()
            yield f"{make_indent(depth)}{label or 'Operator'}: {operator.lexeme_signature()}"
            yield f"{make_indent(depth)}{operand.parse_label()}: {operand.lexeme_signature()}"
            yield from head.render(depth + 1, head_field.label)
            depth += 1
            label = None
