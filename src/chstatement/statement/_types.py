"""Statement taxonomy: every statement kind tagged along two axes plus retry safety."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class LanguageType(enum.Enum):
    UNKNOWN = "unknown"
    DCL = "dcl"  # GRANT, REVOKE, KILL, SET
    DDL = "ddl"
    DML = "dml"
    TCL = "tcl"  # BEGIN, COMMIT, ROLLBACK


class OperationType(enum.Enum):
    UNKNOWN = "unknown"
    READ = "read"
    WRITE = "write"


class StatementType(enum.Enum):
    UNKNOWN = "unknown"
    ALTER = "alter"
    ALTER_DELETE = "alter_delete"
    ALTER_UPDATE = "alter_update"
    ATTACH = "attach"
    CHECK = "check"
    CREATE = "create"
    DELETE = "delete"  # lightweight delete
    DESCRIBE = "describe"
    DETACH = "detach"
    DROP = "drop"
    EXISTS = "exists"
    EXPLAIN = "explain"
    GRANT = "grant"
    INSERT = "insert"
    KILL = "kill"
    OPTIMIZE = "optimize"
    RENAME = "rename"
    REVOKE = "revoke"
    SELECT = "select"
    SET = "set"
    SHOW = "show"
    SYSTEM = "system"
    TRUNCATE = "truncate"
    UPDATE = "update"  # lightweight update
    USE = "use"
    WATCH = "watch"
    TRANSACTION = "transaction"

    @property
    def language_type(self) -> LanguageType:
        return _AXES[self].language

    @property
    def operation_type(self) -> OperationType:
        return _AXES[self].operation

    @property
    def idempotent(self) -> bool:
        return _AXES[self].idempotent


@dataclass(frozen=True)
class StatementAxes:
    language: LanguageType
    operation: OperationType
    idempotent: bool


_L = LanguageType
_O = OperationType

# One row per kind. A new kind must be added here with all three facets.
_AXES: dict[StatementType, StatementAxes] = {
    StatementType.UNKNOWN: StatementAxes(_L.UNKNOWN, _O.UNKNOWN, False),
    StatementType.ALTER: StatementAxes(_L.DDL, _O.UNKNOWN, False),
    StatementType.ALTER_DELETE: StatementAxes(_L.DDL, _O.WRITE, False),
    StatementType.ALTER_UPDATE: StatementAxes(_L.DDL, _O.WRITE, False),
    StatementType.ATTACH: StatementAxes(_L.DDL, _O.UNKNOWN, False),
    StatementType.CHECK: StatementAxes(_L.DDL, _O.UNKNOWN, True),
    StatementType.CREATE: StatementAxes(_L.DDL, _O.UNKNOWN, False),
    StatementType.DELETE: StatementAxes(_L.DML, _O.WRITE, False),
    StatementType.DESCRIBE: StatementAxes(_L.DDL, _O.READ, True),
    StatementType.DETACH: StatementAxes(_L.DDL, _O.UNKNOWN, False),
    StatementType.DROP: StatementAxes(_L.DDL, _O.UNKNOWN, False),
    StatementType.EXISTS: StatementAxes(_L.DML, _O.READ, True),
    StatementType.EXPLAIN: StatementAxes(_L.DDL, _O.READ, True),
    StatementType.GRANT: StatementAxes(_L.DCL, _O.UNKNOWN, True),
    StatementType.INSERT: StatementAxes(_L.DML, _O.WRITE, False),
    StatementType.KILL: StatementAxes(_L.DCL, _O.UNKNOWN, False),
    StatementType.OPTIMIZE: StatementAxes(_L.DDL, _O.UNKNOWN, False),
    StatementType.RENAME: StatementAxes(_L.DDL, _O.UNKNOWN, False),
    StatementType.REVOKE: StatementAxes(_L.DCL, _O.UNKNOWN, True),
    StatementType.SELECT: StatementAxes(_L.DML, _O.READ, True),
    StatementType.SET: StatementAxes(_L.DCL, _O.UNKNOWN, True),
    StatementType.SHOW: StatementAxes(_L.DDL, _O.READ, True),
    StatementType.SYSTEM: StatementAxes(_L.DDL, _O.UNKNOWN, False),
    StatementType.TRUNCATE: StatementAxes(_L.DDL, _O.UNKNOWN, True),
    StatementType.UPDATE: StatementAxes(_L.DML, _O.WRITE, False),
    StatementType.USE: StatementAxes(_L.DDL, _O.UNKNOWN, True),
    StatementType.WATCH: StatementAxes(_L.DDL, _O.UNKNOWN, True),
    StatementType.TRANSACTION: StatementAxes(_L.TCL, _O.WRITE, True),
}


def axis_of(kind: StatementType) -> StatementAxes:
    """Return the language, operation and default idempotency of a statement kind."""
    return _AXES[kind]
