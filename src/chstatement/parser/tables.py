"""Target extraction: cluster, database and table a statement operates on."""

from __future__ import annotations

from collections.abc import Callable

from chstatement.parser._types import Lexeme, LexemeKind, Target
from chstatement.parser.lexer import find_word, read_qualified_name, skip_words, statement_depth
from chstatement.statement import StatementType

_OBJECT_WORDS = ("TABLE", "VIEW", "DICTIONARY", "DATABASE")
_PRELUDE = frozenset({"OR", "REPLACE", "TEMPORARY", "MATERIALIZED", "LIVE", "WINDOW"})
_GUARD = frozenset({"IF", "NOT", "EXISTS"})

_Names = tuple[str | None, str | None]


def _split(parts: list[str]) -> _Names:
    """Return (database, table) from ``[table]`` or ``[..., database, table]``."""
    database = parts[-2] if len(parts) > 1 else None
    return database, parts[-1]


def _name_at(lexemes: list[Lexeme], i: int, *, reject_calls: bool = True) -> _Names:
    name = read_qualified_name(lexemes, i, reject_calls=reject_calls)
    if name is None:
        return None, None
    return _split(name[0])


def _object_word(lexemes: list[Lexeme], i: int) -> int | None:
    """Index of TABLE|VIEW|DICTIONARY|DATABASE after an ``OR REPLACE``-style prelude at ``i``."""
    i = skip_words(lexemes, i, _PRELUDE)
    if i < len(lexemes) and lexemes[i].is_word(*_OBJECT_WORDS):
        return i
    return None


def object_word_index(lexemes: list[Lexeme], head: int | None) -> int | None:
    """Index of the object keyword following the leading verb, if any.

    Covers ``DROP TABLE``, ``CREATE OR REPLACE VIEW``, ``INSERT INTO TABLE``
    and ``SHOW CREATE DATABASE``.
    """
    if head is None:
        return None
    i = head + 1
    if i < len(lexemes) and lexemes[i].is_word("INTO", "CREATE"):
        i += 1
    return _object_word(lexemes, i)


def _object_target(lexemes: list[Lexeme], i: int, *, keyword_optional: bool = False) -> _Names:
    """``[OR REPLACE] TABLE|VIEW|DICTIONARY|DATABASE [IF [NOT] EXISTS] name``."""
    is_database = False
    word = _object_word(lexemes, i)
    if word is not None:
        is_database = lexemes[word].is_word("DATABASE")
        i = skip_words(lexemes, word + 1, _GUARD)
    elif keyword_optional:
        i = skip_words(lexemes, i, _PRELUDE)
    else:
        return None, None

    # A column list may follow: CREATE TABLE t (a Int8)
    database, table = _name_at(lexemes, i, reject_calls=False)
    if is_database:
        return table, None
    return database, table


def _after_word(lexemes: list[Lexeme], *words: str, start: int = 0, depth: int = 0) -> _Names:
    i = find_word(lexemes, *words, start=start, depth=depth)
    if i == -1:
        return None, None
    return _name_at(lexemes, i + 1)


def _select_target(lexemes: list[Lexeme], head: int) -> _Names:
    return _after_word(lexemes, "FROM", start=head, depth=lexemes[head].depth)


def _insert_target(lexemes: list[Lexeme], head: int) -> _Names:
    i = find_word(lexemes, "INTO", start=head, depth=lexemes[head].depth)
    if i == -1:
        return None, None
    i = skip_words(lexemes, i + 1, frozenset({"TABLE"}))
    if i < len(lexemes) and lexemes[i].is_word("FUNCTION"):
        return None, None
    return _name_at(lexemes, i, reject_calls=False)


def _use_target(lexemes: list[Lexeme], head: int) -> _Names:
    _, name = _name_at(lexemes, head + 1)
    return name, None


def _show_target(lexemes: list[Lexeme], head: int) -> _Names:
    if head + 1 < len(lexemes) and lexemes[head + 1].is_word("CREATE"):
        return _object_target(lexemes, head + 2, keyword_optional=True)
    i = find_word(lexemes, "FROM", "IN", start=head + 1, depth=lexemes[head].depth)
    if i == -1:
        return None, None
    _, name = _name_at(lexemes, i + 1)
    return name, None


def _leading_object(lexemes: list[Lexeme], head: int) -> _Names:
    return _object_target(lexemes, head + 1)


def _leading_object_optional(lexemes: list[Lexeme], head: int) -> _Names:
    return _object_target(lexemes, head + 1, keyword_optional=True)


def _leading_name(lexemes: list[Lexeme], head: int) -> _Names:
    return _name_at(lexemes, head + 1)


def _delete_target(lexemes: list[Lexeme], head: int) -> _Names:
    return _after_word(lexemes, "FROM", start=head + 1, depth=lexemes[head].depth)


_TARGET_READERS: dict[StatementType, Callable[[list[Lexeme], int], _Names]] = {
    StatementType.SELECT: _select_target,
    StatementType.INSERT: _insert_target,
    StatementType.ALTER: _leading_object,
    StatementType.ALTER_DELETE: _leading_object,
    StatementType.ALTER_UPDATE: _leading_object,
    StatementType.ATTACH: _leading_object,
    StatementType.CHECK: _leading_object,
    StatementType.CREATE: _leading_object,
    StatementType.DETACH: _leading_object,
    StatementType.DROP: _leading_object,
    StatementType.OPTIMIZE: _leading_object,
    StatementType.RENAME: _leading_object,
    StatementType.DESCRIBE: _leading_object_optional,
    StatementType.EXISTS: _leading_object_optional,
    StatementType.TRUNCATE: _leading_object_optional,
    StatementType.DELETE: _delete_target,
    StatementType.UPDATE: _leading_name,
    StatementType.WATCH: _leading_name,
    StatementType.USE: _use_target,
    StatementType.SHOW: _show_target,
}


def extract_cluster(lexemes: list[Lexeme], *, depth: int = 0) -> str | None:
    """Cluster named by a top-level ``ON CLUSTER name`` clause."""
    i = find_word(lexemes, "ON", depth=depth)
    while i != -1:
        if i + 2 < len(lexemes) and lexemes[i + 1].is_word("CLUSTER"):
            candidate = lexemes[i + 2]
            if candidate.is_identifier or candidate.kind is LexemeKind.STRING:
                return candidate.text
        i = find_word(lexemes, "ON", start=i + 1, depth=depth)
    return None


def extract_target(lexemes: list[Lexeme], kind: StatementType, head: int | None) -> Target:
    """Extract the cluster, database and table a statement operates on.

    Subqueries and table functions (``FROM numbers(10)``) yield no table.
    """
    cluster = extract_cluster(lexemes, depth=statement_depth(lexemes, head))
    reader = _TARGET_READERS.get(kind)
    if head is None or reader is None:
        return Target(cluster=cluster)

    database, table = reader(lexemes, head)
    return Target(cluster=cluster, database=database, table=table)
