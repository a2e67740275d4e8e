"""Immutable statement descriptor built once from a SQL string and its discovered facts.

Construction is permissive: missing or partial facts degrade to the sentinel
table name and shared empty collections instead of raising, so a statement
that was only partly understood can still be sent downstream as-is.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from chstatement.statement import keywords
from chstatement.statement._types import LanguageType, OperationType, StatementType

DEFAULT_DATABASE = "system"
DEFAULT_TABLE = "unknown"
DEFAULT_PARAMETERS: tuple[int, ...] = ()
DEFAULT_POSITIONS: Mapping[str, int] = MappingProxyType({})
DEFAULT_SETTINGS: Mapping[str, str] = MappingProxyType({})

# Kinds that are unsafe to retry unless guarded by IF [NOT] EXISTS / OR REPLACE.
_GUARDED_KINDS = frozenset({
    StatementType.ATTACH,
    StatementType.CREATE,
    StatementType.DETACH,
    StatementType.DROP,
})


def _freeze_positions(positions: Mapping[str | None, int | None] | None) -> Mapping[str, int]:
    if not positions:
        return DEFAULT_POSITIONS
    kept = {k: v for k, v in positions.items() if k is not None and v is not None}
    return MappingProxyType(kept) if kept else DEFAULT_POSITIONS


def _freeze_settings(settings: Mapping[str | None, object] | None) -> Mapping[str, str]:
    if not settings:
        return DEFAULT_SETTINGS
    kept = {k: str(v) for k, v in settings.items() if k is not None and v is not None}
    return MappingProxyType(kept) if kept else DEFAULT_SETTINGS


@dataclass(frozen=True)
class StatementDescriptor:
    sql: str
    statement_type: StatementType = StatementType.UNKNOWN
    cluster: str | None = None
    database: str | None = None
    table: str | None = None
    input: str | None = None
    format: str | None = None
    outfile: str | None = None
    parameters: Iterable[int] | None = None
    positions: Mapping[str, int] | None = None
    settings: Mapping[str, object] | None = None

    def __post_init__(self) -> None:
        set_field = object.__setattr__
        if self.statement_type is None:
            set_field(self, "statement_type", StatementType.UNKNOWN)
        if not self.table:
            set_field(self, "table", DEFAULT_TABLE)
        set_field(self, "parameters", tuple(self.parameters or ()) or DEFAULT_PARAMETERS)
        set_field(self, "positions", _freeze_positions(self.positions))
        set_field(self, "settings", _freeze_settings(self.settings))

    def __hash__(self) -> int:
        return hash((
            self.sql,
            self.statement_type,
            self.cluster,
            self.database,
            self.table,
            self.input,
            self.format,
            self.outfile,
            self.parameters,
            frozenset(self.positions.items()),
            frozenset(self.settings.items()),
        ))

    def __str__(self) -> str:
        return (
            f"[{self.statement_type.name}] cluster={self.cluster}, database={self.database}, "
            f"table={self.table}, input={self.input}, format={self.format}, "
            f"outfile={self.outfile}, parameters={list(self.parameters)}, "
            f"positions={dict(self.positions)}, settings={dict(self.settings)}"
            f"\nSQL:\n{self.sql}"
        )

    # -- Taxonomy ---------------------------------------------------------------

    @property
    def language_type(self) -> LanguageType:
        return self.statement_type.language_type

    @property
    def operation_type(self) -> OperationType:
        return self.statement_type.operation_type

    @property
    def is_recognized(self) -> bool:
        return self.statement_type is not StatementType.UNKNOWN

    @property
    def is_ddl(self) -> bool:
        return self.language_type is LanguageType.DDL

    @property
    def is_dml(self) -> bool:
        return self.language_type is LanguageType.DML

    @property
    def is_query(self) -> bool:
        """A read that produces a result set; INTO OUTFILE turns it into a side effect."""
        return self.operation_type is OperationType.READ and not self.has_outfile

    @property
    def is_mutation(self) -> bool:
        return self.operation_type is OperationType.WRITE or self.has_outfile

    @property
    def is_idempotent(self) -> bool:
        """Whether the statement is safe to retry.

        Falls back to the guard keywords for ATTACH/CREATE/DETACH/DROP, so
        ``CREATE TABLE IF NOT EXISTS`` and ``CREATE OR REPLACE`` count as
        retryable. The guard check does not look at the outfile.
        """
        if self.statement_type.idempotent and not self.has_outfile:
            return True
        if self.statement_type in _GUARDED_KINDS:
            return keywords.EXISTS in self.positions or keywords.REPLACE in self.positions
        return False

    # -- Structure --------------------------------------------------------------

    def database_or_default(self, database: str | None = None) -> str:
        """Explicit database, else the caller's fallback, else ``system``."""
        if self.database is not None:
            return self.database
        return database if database is not None else DEFAULT_DATABASE

    @property
    def has_format(self) -> bool:
        return bool(self.format)

    @property
    def has_outfile(self) -> bool:
        return bool(self.outfile)

    @property
    def has_settings(self) -> bool:
        return bool(self.settings)

    @property
    def has_with_totals(self) -> bool:
        return keywords.TOTALS in self.positions

    @property
    def has_values(self) -> bool:
        return keywords.VALUES in self.positions

    # -- Keyword positions ------------------------------------------------------

    def contains_keyword(self, keyword: str | None) -> bool:
        if not keyword:
            return False
        return keyword.upper() in self.positions

    def start_position(self, keyword: str | None) -> int:
        """Offset of ``keyword`` in the SQL, or -1 if it was not recorded."""
        if not keyword or not self.positions:
            return -1
        return self.positions.get(keyword.upper(), -1)

    def end_position(self, keyword: str | None) -> int:
        start = self.start_position(keyword)
        if start == -1:
            return -1
        return start + len(keyword)
