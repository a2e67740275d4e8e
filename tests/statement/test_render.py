"""Test descriptor rendering for JSON and text output."""

import json

from chstatement.statement import StatementDescriptor, StatementType
from chstatement.statement.render import render_json, render_text


def test_render_json_fields():
    d = StatementDescriptor(
        "SELECT * FROM t WHERE id = ? FORMAT JSON",
        StatementType.SELECT,
        table="t",
        format="JSON",
        parameters=[26],
        positions={"SELECT": 0, "FROM": 9},
        settings={"max_threads": 2},
    )
    data = render_json(d)
    assert data["statement_type"] == "select"
    assert data["language_type"] == "dml"
    assert data["operation_type"] == "read"
    assert data["recognized"] is True
    assert data["query"] is True
    assert data["mutation"] is False
    assert data["idempotent"] is True
    assert data["table"] == "t"
    assert data["database"] is None
    assert data["effective_database"] == "system"
    assert data["parameters"] == [26]
    assert data["positions"] == {"SELECT": 0, "FROM": 9}
    assert data["settings"] == {"max_threads": "2"}
    # Must be serializable as-is.
    json.dumps(data)


def test_render_json_database_fallback():
    d = StatementDescriptor("SELECT 1", StatementType.SELECT)
    assert render_json(d, database="analytics")["effective_database"] == "analytics"
    d = StatementDescriptor("SELECT 1", StatementType.SELECT, database="db")
    assert render_json(d, database="analytics")["effective_database"] == "db"


def test_render_text_query():
    d = StatementDescriptor(
        "SELECT * FROM db.t FORMAT JSON",
        StatementType.SELECT,
        database="db",
        table="t",
        format="JSON",
    )
    text = render_text(d)
    assert text.splitlines()[0] == "SELECT (DML/READ) [query, idempotent]"
    assert "  target: db.t" in text
    assert "  format: JSON" in text
    assert "not recognized" not in text


def test_render_text_unknown():
    text = render_text(StatementDescriptor("VACUUM"))
    assert text.startswith("UNKNOWN (UNKNOWN/UNKNOWN)")
    assert "  target: system.unknown" in text
    assert "not recognized" in text


def test_render_text_details():
    d = StatementDescriptor(
        "INSERT INTO t SETTINGS async_insert = 1 VALUES (?, ?)",
        StatementType.INSERT,
        cluster="c1",
        table="t",
        outfile=None,
        parameters=[47, 50],
        settings={"async_insert": "1"},
    )
    text = render_text(d, database="default")
    assert text.splitlines()[0] == "INSERT (DML/WRITE) [mutation]"
    assert "  target: default.t" in text
    assert "  cluster: c1" in text
    assert "  parameters: 47, 50" in text
    assert "  settings: async_insert=1" in text
