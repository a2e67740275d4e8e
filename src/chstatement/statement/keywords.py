"""Keyword names recorded in a descriptor's position map.

Position keys are always uppercase. The first group is queried directly by
descriptor predicates; the rest are recorded so callers can locate clauses
without re-scanning the SQL.
"""

from __future__ import annotations

# Queried by StatementDescriptor predicates
DATABASE = "DATABASE"
EXISTS = "EXISTS"
FORMAT = "FORMAT"
REPLACE = "REPLACE"
TOTALS = "TOTALS"
VALUES = "VALUES"

# Clause anchors
CLUSTER = "CLUSTER"
FROM = "FROM"
INFILE = "INFILE"
INSERT = "INSERT"
INTO = "INTO"
LIMIT = "LIMIT"
OUTFILE = "OUTFILE"
SELECT = "SELECT"
SETTINGS = "SETTINGS"
TABLE = "TABLE"
WHERE = "WHERE"
WITH = "WITH"

TRACKED: frozenset[str] = frozenset({
    CLUSTER,
    DATABASE,
    EXISTS,
    FORMAT,
    FROM,
    INFILE,
    INSERT,
    INTO,
    LIMIT,
    OUTFILE,
    REPLACE,
    SELECT,
    SETTINGS,
    TABLE,
    TOTALS,
    VALUES,
    WHERE,
    WITH,
})
