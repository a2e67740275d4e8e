"""chstatement: classify ClickHouse SQL statements into immutable descriptors."""

from chstatement.parser import parse_statement, parse_statements
from chstatement.statement import (
    LanguageType,
    OperationType,
    StatementDescriptor,
    StatementType,
)

__all__ = [
    "LanguageType",
    "OperationType",
    "StatementDescriptor",
    "StatementType",
    "parse_statement",
    "parse_statements",
]
