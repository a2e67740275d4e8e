"""Clause extraction: FORMAT, INTO OUTFILE, input, SETTINGS, parameters, keyword positions."""

from __future__ import annotations

from chstatement.parser._types import Lexeme, LexemeKind
from chstatement.parser.lexer import find_word, statement_depth
from chstatement.parser.tables import object_word_index
from chstatement.statement import StatementType, keywords

# Words that can follow a column named "format" but never name a format.
_NOT_A_FORMAT = frozenset({
    "AS", "FORMAT", "FROM", "GROUP", "HAVING", "INTO", "JOIN", "LIMIT", "ON",
    "ORDER", "PREWHERE", "SELECT", "SETTINGS", "UNION", "VALUES", "WHERE", "WITH",
})

# Keywords that end a SETTINGS list.
_SETTINGS_END = frozenset({"FORMAT", "FROM", "INTO", "SELECT", "UNION", "VALUES", "WITH"})


def _is_format_name(lexemes: list[Lexeme], i: int) -> bool:
    """Whether the lexeme at ``i``, right after FORMAT, names a format."""
    candidate = lexemes[i]
    # Values is a format; its rows follow in parentheses.
    if candidate.is_word(keywords.VALUES):
        return True
    is_call = i + 1 < len(lexemes) and lexemes[i + 1].is_symbol("(")
    return candidate.is_identifier and not is_call and not candidate.is_word(*_NOT_A_FORMAT)


def extract_format(lexemes: list[Lexeme], *, depth: int = 0) -> str | None:
    """Output/input format from the last top-level ``FORMAT name`` clause."""
    found = None
    i = find_word(lexemes, keywords.FORMAT, depth=depth)
    while i != -1:
        if i + 1 < len(lexemes) and _is_format_name(lexemes, i + 1):
            found = lexemes[i + 1].text
        i = find_word(lexemes, keywords.FORMAT, start=i + 1, depth=depth)
    return found


def _string_after(lexemes: list[Lexeme], first: str, second: str, *, depth: int = 0) -> str | None:
    """Literal in ``<first> <second> 'literal'``."""
    for i in range(len(lexemes) - 2):
        if lexemes[i].depth > depth:
            continue
        if (
            lexemes[i].is_word(first)
            and lexemes[i + 1].is_word(second)
            and lexemes[i + 2].kind is LexemeKind.STRING
        ):
            return lexemes[i + 2].text
    return None


def extract_outfile(lexemes: list[Lexeme], *, depth: int = 0) -> str | None:
    return _string_after(lexemes, keywords.INTO, keywords.OUTFILE, depth=depth)


def extract_input(lexemes: list[Lexeme], *, depth: int = 0) -> str | None:
    """Source of an INSERT: ``FROM INFILE 'path'`` or the ``input('structure')`` function."""
    infile = _string_after(lexemes, keywords.FROM, keywords.INFILE, depth=depth)
    if infile is not None:
        return infile

    for i in range(len(lexemes) - 2):
        if (
            lexemes[i].is_word("INPUT")
            and lexemes[i + 1].is_symbol("(")
            and lexemes[i + 2].kind is LexemeKind.STRING
        ):
            return lexemes[i + 2].text
    return None


def extract_parameters(lexemes: list[Lexeme]) -> list[int]:
    """Offsets of ``?`` placeholders outside literals and quoted names."""
    return [lx.start for lx in lexemes if lx.kind is LexemeKind.PARAMETER]


def _value_text(sql: str, value: list[Lexeme]) -> str:
    if len(value) == 1 and value[0].kind is LexemeKind.STRING:
        return value[0].text
    return sql[value[0].start : value[-1].end]


def _read_assignments(sql: str, lexemes: list[Lexeme], i: int) -> dict[str, str]:
    """Read ``name = value[, name = value ...]`` starting at ``i``."""
    settings: dict[str, str] = {}
    n = len(lexemes)
    if i >= n:
        return settings
    depth = lexemes[i].depth

    while i + 2 < n:
        name = lexemes[i]
        if not name.is_identifier or not lexemes[i + 1].is_symbol("="):
            break

        j = i + 2
        while j < n and not (
            lexemes[j].depth == depth
            and (lexemes[j].is_symbol(",") or lexemes[j].is_word(*_SETTINGS_END))
        ):
            j += 1
        if j == i + 2:
            break

        settings[name.text] = _value_text(sql, lexemes[i + 2 : j])
        if j < n and lexemes[j].is_symbol(","):
            i = j + 1
        else:
            break

    return settings


def extract_settings(
    sql: str, lexemes: list[Lexeme], kind: StatementType, head: int | None
) -> dict[str, str]:
    """Inline ``SETTINGS k = v`` pairs, or the assignments of a SET statement."""
    if kind is StatementType.SET and head is not None:
        return _read_assignments(sql, lexemes, head + 1)

    i = find_word(lexemes, keywords.SETTINGS, depth=statement_depth(lexemes, head))
    if i == -1:
        return {}
    return _read_assignments(sql, lexemes, i + 1)


def _is_column_name(lexemes: list[Lexeme], i: int) -> bool:
    """A keyword-like word used as a name: ``SELECT database, table FROM ...``."""
    prev = lexemes[i - 1] if i > 0 else None
    nxt = lexemes[i + 1] if i + 1 < len(lexemes) else None
    if prev is not None and prev.is_symbol("."):
        return True
    if nxt is None:
        return False
    return nxt.is_word("AS", keywords.FROM) or any(nxt.is_symbol(s) for s in (",", "=", "."))


def extract_positions(
    lexemes: list[Lexeme], kind: StatementType, head: int | None
) -> dict[str, int]:
    """First top-level offset of each tracked keyword.

    TOTALS counts only after WITH, REPLACE only after OR or as the leading
    word, and EXISTS not when it is an ``EXISTS(...)`` subquery test. TABLE
    and DATABASE count only as the object of the leading verb, VALUES only
    in the data part of an INSERT. Words used as column names are skipped.
    """
    positions: dict[str, int] = {}
    n = len(lexemes)
    depth = statement_depth(lexemes, head)
    object_word = object_word_index(lexemes, head)
    in_insert_data = kind is StatementType.INSERT

    for i, lx in enumerate(lexemes):
        if lx.kind is not LexemeKind.WORD or lx.depth > depth:
            continue
        word = lx.text.upper()
        if word == keywords.SELECT:
            # INSERT ... SELECT: what follows is a query, not inline data
            in_insert_data = False
        if word not in keywords.TRACKED or word in positions:
            continue
        if _is_column_name(lexemes, i):
            continue

        prev = lexemes[i - 1] if i > 0 else None
        nxt = lexemes[i + 1] if i + 1 < n else None
        if word == keywords.TOTALS and (prev is None or not prev.is_word(keywords.WITH)):
            continue
        if word == keywords.REPLACE and prev is not None and not prev.is_word("OR"):
            continue
        if word == keywords.EXISTS and nxt is not None and nxt.is_symbol("("):
            continue
        if word in (keywords.TABLE, keywords.DATABASE) and i != object_word:
            continue
        if word == keywords.VALUES and not in_insert_data:
            continue

        positions[word] = lx.start

    return positions
