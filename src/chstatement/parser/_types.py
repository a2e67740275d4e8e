"""Internal types for fact discovery."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class LexemeKind(enum.Enum):
    WORD = "word"            # bare keyword or identifier
    NAME = "name"            # quoted identifier
    STRING = "string"
    NUMBER = "number"
    PARAMETER = "parameter"  # ? placeholder
    SYMBOL = "symbol"


@dataclass(frozen=True)
class Lexeme:
    kind: LexemeKind
    text: str  # unquoted for STRING and NAME
    start: int
    end: int  # exclusive
    depth: int  # parenthesis nesting level

    @property
    def is_identifier(self) -> bool:
        return self.kind in (LexemeKind.WORD, LexemeKind.NAME)

    def is_word(self, *words: str) -> bool:
        return self.kind is LexemeKind.WORD and self.text.upper() in words

    def is_symbol(self, symbol: str) -> bool:
        return self.kind is LexemeKind.SYMBOL and self.text == symbol


@dataclass(frozen=True)
class Target:
    cluster: str | None = None
    database: str | None = None
    table: str | None = None
