"""List rules parameterized by an element rule and a delimiter rule.

Delimited (separated, no trailing delimiter)::

    <A>  -> e<A'> | ε
    <A'> -> de<A'> | ε

Terminated (every element followed by its delimiter)::

    <A>  -> ed<A> | ε
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from toyc.parser.cursor import ParseCursor
from toyc.parser.parsed_syntax import ParsedSyntax, ParseError, ParseErrorKind
from toyc.parser.syntax import ParseNode, make_indent


class _NodeList(ParseNode):
    __slots__ = ()

    ELEMENT: ClassVar[type[ParseNode]]
    DELIMITER: ClassVar[type[ParseNode]]
    KIND_LABEL: ClassVar[str] = "Sequence"

    items: tuple[tuple[ParseNode, ParseNode | None], ...]

    @classmethod
    def of(cls, element: type[ParseNode], delimiter: type[ParseNode], name: str | None = None) -> type:
        """Specialize the list for one element rule and one delimiter rule."""
        name = name or f"{cls.__name__}{element.__name__}By{delimiter.__name__}"
        return type(
            name,
            (cls,),
            {
                "__slots__": (),
                "__module__": cls.__module__,
                "__qualname__": name,
                "ELEMENT": element,
                "DELIMITER": delimiter,
            },
        )

    @classmethod
    def parse_label(cls) -> str:
        return f"{cls.KIND_LABEL} of `{cls.ELEMENT.parse_label()}` by `{cls.DELIMITER.parse_label()}`"

    @property
    def elements(self) -> tuple[ParseNode, ...]:
        return tuple(element for element, _ in self.items)

    def __iter__(self) -> Iterator[tuple[ParseNode, ParseNode | None]]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def render(self, depth: int = 0, label: str | None = None) -> Iterator[str]:
        yield f"{make_indent(depth)}{label or self.parse_label()}: {self.lexeme_signature()}"
        for element in self.elements:
            yield from element.render(depth + 1, None)


@dataclass(frozen=True, slots=True)
class Delimited(_NodeList):
    """Zero or more elements separated, but not terminated, by a delimiter.

    `int hello(int x, float y)` parses its parameters; `int hello(int x, float y,)`
    fails on the dangling comma. Only the last item has no delimiter.
    """

    items: tuple[tuple[ParseNode, ParseNode | None], ...] = ()

    KIND_LABEL: ClassVar[str] = "Delimited Sequence"

    @classmethod
    def parse(cls, cursor: ParseCursor) -> ParsedSyntax:
        fork = cursor.fork()

        # An absent first element is an empty list, not an error.
        first = cls.ELEMENT.parse(fork)
        if first.is_absent():
            return ParsedSyntax.present(cls(()))

        items: list[tuple[ParseNode, ParseNode | None]] = []
        element = first.node
        while True:
            delimiter = cls.DELIMITER.parse(fork)
            if delimiter.is_absent():
                items.append((element, None))
                cursor.commit(fork)
                return ParsedSyntax.present(cls(tuple(items)))
            items.append((element, delimiter.node))

            parsed = cls.ELEMENT.parse(fork)
            if parsed.is_absent():
                return ParsedSyntax.absent(
                    ParseError.in_list(ParseErrorKind.DANGLING_DELIMITER, cls.parse_label(), parsed.error)
                )
            element = parsed.node

    def lexeme_signature(self) -> str:
        signature = ""
        for element, delimiter in self.items:
            signature += element.lexeme_signature()
            if delimiter is not None:
                signature += delimiter.lexeme_signature() + " "
        return signature


@dataclass(frozen=True, slots=True)
class Terminated(_NodeList):
    """Zero or more elements, each followed by a mandatory delimiter.

    ::

        hello = 1;
        hello = 2    <- missing `;` is an error
    """

    items: tuple[tuple[ParseNode, ParseNode], ...] = ()

    KIND_LABEL: ClassVar[str] = "Terminated Sequence"

    @classmethod
    def parse(cls, cursor: ParseCursor) -> ParsedSyntax:
        fork = cursor.fork()
        items: list[tuple[ParseNode, ParseNode]] = []
        while True:
            # The first element missing means an empty list; a later one, the end of the list.
            parsed = cls.ELEMENT.parse(fork)
            if parsed.is_absent():
                cursor.commit(fork)
                return ParsedSyntax.present(cls(tuple(items)))

            delimiter = cls.DELIMITER.parse(fork)
            if delimiter.is_absent():
                return ParsedSyntax.absent(
                    ParseError.in_list(ParseErrorKind.MISSING_TERMINATOR, cls.parse_label(), delimiter.error)
                )
            items.append((parsed.node, delimiter.node))

    def lexeme_signature(self) -> str:
        return " ".join(element.lexeme_signature() + delimiter.lexeme_signature() for element, delimiter in self.items)
