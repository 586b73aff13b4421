"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Flags controlling how much of the token stream the root rule must consume."""

    mode: ParseMode = ParseMode.STRICT
    require_end_of_input: bool = True

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            # Tokens after the root rule are ignored.
            return ParserOptions(mode=mode, require_end_of_input=False)

        return ParserOptions(mode=mode, require_end_of_input=True)
