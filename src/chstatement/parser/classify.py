"""Classify statements by their leading keyword."""

from __future__ import annotations

from chstatement.parser._types import Lexeme
from chstatement.parser.lexer import read_qualified_name, skip_words
from chstatement.statement import StatementType

_LEADING: dict[str, StatementType] = {
    "ALTER": StatementType.ALTER,
    "ATTACH": StatementType.ATTACH,
    "BEGIN": StatementType.TRANSACTION,
    "CHECK": StatementType.CHECK,
    "COMMIT": StatementType.TRANSACTION,
    "CREATE": StatementType.CREATE,
    "DELETE": StatementType.DELETE,
    "DESC": StatementType.DESCRIBE,
    "DESCRIBE": StatementType.DESCRIBE,
    "DETACH": StatementType.DETACH,
    "DROP": StatementType.DROP,
    "EXISTS": StatementType.EXISTS,
    "EXPLAIN": StatementType.EXPLAIN,
    "GRANT": StatementType.GRANT,
    "INSERT": StatementType.INSERT,
    "KILL": StatementType.KILL,
    "OPTIMIZE": StatementType.OPTIMIZE,
    "RENAME": StatementType.RENAME,
    "REVOKE": StatementType.REVOKE,
    "ROLLBACK": StatementType.TRANSACTION,
    "SELECT": StatementType.SELECT,
    "SET": StatementType.SET,
    "SHOW": StatementType.SHOW,
    "SYSTEM": StatementType.SYSTEM,
    "TRUNCATE": StatementType.TRUNCATE,
    "UPDATE": StatementType.UPDATE,
    "USE": StatementType.USE,
    "WATCH": StatementType.WATCH,
    "WITH": StatementType.SELECT,
}

_ALTER_OBJECTS = frozenset({"TABLE", "TEMPORARY"})


def _alter_kind(lexemes: list[Lexeme], head: int) -> StatementType:
    """ALTER TABLE t [ON CLUSTER c] DELETE|UPDATE ... are mutations."""
    i = skip_words(lexemes, head + 1, _ALTER_OBJECTS)
    name = read_qualified_name(lexemes, i, reject_calls=False)
    if name is None:
        return StatementType.ALTER
    i = name[1]

    if i + 2 < len(lexemes) and lexemes[i].is_word("ON") and lexemes[i + 1].is_word("CLUSTER"):
        i += 3
    if i < len(lexemes):
        if lexemes[i].is_word("DELETE"):
            return StatementType.ALTER_DELETE
        if lexemes[i].is_word("UPDATE"):
            return StatementType.ALTER_UPDATE
    return StatementType.ALTER


def classify(lexemes: list[Lexeme], head: int | None) -> StatementType:
    """Classify a statement from its leading keyword at index ``head``.

    Anything without a recognizable leading keyword is UNKNOWN, which callers
    treat as a non-retryable mutation.
    """
    if head is None:
        return StatementType.UNKNOWN

    word = lexemes[head].text.upper()
    if word == "START":
        follows = head + 1 < len(lexemes) and lexemes[head + 1].is_word("TRANSACTION")
        return StatementType.TRANSACTION if follows else StatementType.UNKNOWN

    kind = _LEADING.get(word, StatementType.UNKNOWN)
    if kind is StatementType.ALTER:
        return _alter_kind(lexemes, head)
    return kind
