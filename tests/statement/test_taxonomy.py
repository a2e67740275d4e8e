"""Test the statement taxonomy mapping."""

import pytest

from chstatement.statement import (
    LanguageType,
    OperationType,
    StatementAxes,
    StatementType,
    axis_of,
)


def test_every_kind_has_axes():
    for kind in StatementType:
        axes = axis_of(kind)
        assert isinstance(axes, StatementAxes)
        assert isinstance(axes.language, LanguageType)
        assert isinstance(axes.operation, OperationType)
        assert isinstance(axes.idempotent, bool)


def test_unknown_is_unknown_on_both_axes():
    axes = axis_of(StatementType.UNKNOWN)
    assert axes.language is LanguageType.UNKNOWN
    assert axes.operation is OperationType.UNKNOWN
    assert axes.idempotent is False


def test_only_unknown_has_unknown_language():
    kinds = [k for k in StatementType if k.language_type is LanguageType.UNKNOWN]
    assert kinds == [StatementType.UNKNOWN]


@pytest.mark.parametrize(
    "kind,language,operation,idempotent",
    [
        (StatementType.SELECT, LanguageType.DML, OperationType.READ, True),
        (StatementType.INSERT, LanguageType.DML, OperationType.WRITE, False),
        (StatementType.CREATE, LanguageType.DDL, OperationType.UNKNOWN, False),
        (StatementType.DROP, LanguageType.DDL, OperationType.UNKNOWN, False),
        (StatementType.ALTER_DELETE, LanguageType.DDL, OperationType.WRITE, False),
        (StatementType.ALTER_UPDATE, LanguageType.DDL, OperationType.WRITE, False),
        (StatementType.DESCRIBE, LanguageType.DDL, OperationType.READ, True),
        (StatementType.SHOW, LanguageType.DDL, OperationType.READ, True),
        (StatementType.EXISTS, LanguageType.DML, OperationType.READ, True),
        (StatementType.SET, LanguageType.DCL, OperationType.UNKNOWN, True),
        (StatementType.KILL, LanguageType.DCL, OperationType.UNKNOWN, False),
        (StatementType.TRUNCATE, LanguageType.DDL, OperationType.UNKNOWN, True),
        (StatementType.TRANSACTION, LanguageType.TCL, OperationType.WRITE, True),
    ],
)
def test_axes(kind, language, operation, idempotent):
    assert kind.language_type is language
    assert kind.operation_type is operation
    assert kind.idempotent is idempotent
    assert axis_of(kind) == StatementAxes(language, operation, idempotent)


def test_kinds_are_distinct_members():
    # Kinds sharing the same axes must not collapse into enum aliases.
    assert StatementType.ATTACH is not StatementType.CREATE
    assert len({k.value for k in StatementType}) == len(list(StatementType))
