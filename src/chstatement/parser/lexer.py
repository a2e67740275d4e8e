"""Turn the sqlglot token stream into lexemes with offsets and nesting depth."""

from __future__ import annotations

import functools
import re

from sqlglot.dialects.dialect import Dialect
from sqlglot.tokens import Tokenizer, TokenType

from chstatement.parser._types import Lexeme, LexemeKind

_WORD_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@functools.lru_cache(maxsize=None)
def _tokenizer_class(dialect: str) -> type[Tokenizer]:
    """The dialect's tokenizer, minus command folding.

    sqlglot folds everything after a leading SHOW or RENAME into one string
    token; every word is needed here, so no token type is a command.
    """
    base = Dialect.get_or_raise(dialect).tokenizer_class
    return type(f"{base.__name__}Lexer", (base,), {"COMMANDS": set()})


def lex(sql: str, *, dialect: str) -> list[Lexeme]:
    """Tokenize ``sql`` with the sqlglot tokenizer for ``dialect``.

    Multi-word keyword tokens (``ORDER BY``) are split into one WORD lexeme
    per word so that every keyword carries its own offset.

    Raises sqlglot.errors.SqlglotError when the text cannot be tokenized.
    """
    lexemes: list[Lexeme] = []
    depth = 0

    tokenizer = _tokenizer_class(dialect)(dialect=dialect)
    for token in tokenizer.tokenize(sql):
        token_type = token.token_type
        start, end = token.start, token.end + 1

        if token_type == TokenType.R_PAREN:
            depth = max(depth - 1, 0)

        if token_type.name.endswith("STRING"):
            lexemes.append(Lexeme(LexemeKind.STRING, token.text, start, end, depth))
        elif token_type == TokenType.IDENTIFIER:
            lexemes.append(Lexeme(LexemeKind.NAME, token.text, start, end, depth))
        elif token_type == TokenType.NUMBER:
            lexemes.append(Lexeme(LexemeKind.NUMBER, sql[start:end], start, end, depth))
        elif token.text == "?":
            lexemes.append(Lexeme(LexemeKind.PARAMETER, "?", start, end, depth))
        else:
            raw = sql[start:end]
            words = list(_WORD_RE.finditer(raw))
            if not words:
                lexemes.append(Lexeme(LexemeKind.SYMBOL, raw, start, end, depth))
            for m in words:
                lexemes.append(
                    Lexeme(LexemeKind.WORD, m.group(), start + m.start(), start + m.end(), depth)
                )

        if token_type == TokenType.L_PAREN:
            depth += 1

    return lexemes


def split_lexemes(lexemes: list[Lexeme]) -> list[list[Lexeme]]:
    """Split on top-level semicolons, dropping empty statements."""
    groups: list[list[Lexeme]] = [[]]
    for lx in lexemes:
        if lx.depth == 0 and lx.is_symbol(";"):
            groups.append([])
        else:
            groups[-1].append(lx)
    return [g for g in groups if g]


def leading_word(lexemes: list[Lexeme]) -> int | None:
    """Index of the statement's first keyword, skipping opening parentheses."""
    for i, lx in enumerate(lexemes):
        if lx.kind is LexemeKind.WORD:
            return i
        if not lx.is_symbol("("):
            return None
    return None


def statement_depth(lexemes: list[Lexeme], head: int | None) -> int:
    """Nesting level of the statement body: ``(SELECT ...) FORMAT JSON`` is at 1."""
    return lexemes[head].depth if head is not None else 0


def find_word(lexemes: list[Lexeme], *words: str, start: int = 0, depth: int = 0) -> int:
    """Index of the first WORD in ``words`` nested no deeper than ``depth``, or -1."""
    for i in range(start, len(lexemes)):
        if lexemes[i].depth <= depth and lexemes[i].is_word(*words):
            return i
    return -1


def skip_words(lexemes: list[Lexeme], i: int, words: frozenset[str]) -> int:
    while i < len(lexemes) and lexemes[i].is_word(*words):
        i += 1
    return i


def read_qualified_name(
    lexemes: list[Lexeme], i: int, *, reject_calls: bool = True
) -> tuple[list[str], int] | None:
    """Read ``name`` or ``db.name`` starting at ``i``.

    Returns the name parts and the index after them, or None when there is no
    identifier at ``i``. With ``reject_calls`` a name followed by ``(`` is a
    function call (``FROM numbers(10)``) and also yields None.
    """
    n = len(lexemes)
    if i >= n or not lexemes[i].is_identifier:
        return None

    parts = [lexemes[i].text]
    i += 1
    while i + 1 < n and lexemes[i].is_symbol(".") and lexemes[i + 1].is_identifier:
        parts.append(lexemes[i + 1].text)
        i += 2

    if reject_calls and i < n and lexemes[i].is_symbol("("):
        return None
    return parts, i
