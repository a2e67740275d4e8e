"""Statement model: taxonomy, immutable descriptor, and rendering."""

from chstatement.statement._types import (
    LanguageType,
    OperationType,
    StatementAxes,
    StatementType,
    axis_of,
)
from chstatement.statement.descriptor import (
    DEFAULT_DATABASE,
    DEFAULT_TABLE,
    StatementDescriptor,
)

__all__ = [
    "DEFAULT_DATABASE",
    "DEFAULT_TABLE",
    "LanguageType",
    "OperationType",
    "StatementAxes",
    "StatementDescriptor",
    "StatementType",
    "axis_of",
]
