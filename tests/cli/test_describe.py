"""Test the describe and types CLI commands end-to-end."""

import json
from unittest.mock import patch

from click.testing import CliRunner

from chstatement.cli import main


def test_describe_select_text() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["describe", "SELECT * FROM db.t FORMAT JSON"])
    assert result.exit_code == 0
    assert "SELECT (DML/READ) [query, idempotent]" in result.output
    assert "target: db.t" in result.output
    assert "format: JSON" in result.output


def test_describe_json_output() -> None:
    runner = CliRunner()
    result = runner.invoke(
        main, ["describe", "--format", "json", "DROP TABLE IF EXISTS db.t ON CLUSTER c"],
    )
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["statement_type"] == "drop"
    assert data["language_type"] == "ddl"
    assert data["idempotent"] is True
    assert data["cluster"] == "c"
    assert data["database"] == "db"
    assert data["table"] == "t"


def test_describe_database_fallback() -> None:
    runner = CliRunner()
    result = runner.invoke(
        main, ["describe", "--format", "json", "--database", "analytics", "SELECT * FROM t"],
    )
    assert result.exit_code == 0
    assert json.loads(result.output)["effective_database"] == "analytics"


def test_describe_split_json() -> None:
    runner = CliRunner()
    result = runner.invoke(
        main, ["describe", "--split", "--format", "json", "SELECT 1; INSERT INTO t VALUES (1)"],
    )
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [d["statement_type"] for d in data] == ["select", "insert"]


def test_describe_from_stdin() -> None:
    runner = CliRunner()
    result = runner.invoke(
        main, ["describe", "--from-stdin", "--format", "json"], input="INSERT INTO t VALUES (?)\n",
    )
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["statement_type"] == "insert"
    assert len(data["parameters"]) == 1


def test_describe_requires_sql() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["describe"])
    assert result.exit_code == 2
    assert "Missing argument 'SQL'" in result.output


def test_describe_rejects_two_sources() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["describe", "--from-stdin", "SELECT 1"], input="SELECT 2")
    assert result.exit_code == 2
    assert "not both" in result.output


def test_describe_strict_unknown() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["describe", "--strict", "VACUUM t"])
    assert result.exit_code == 1
    assert "not recognized" in result.output


def test_describe_unknown_not_strict() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["describe", "VACUUM t"])
    assert result.exit_code == 0


def test_describe_unknown_dialect() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["describe", "--dialect", "no-such-dialect", "SELECT 1"])
    assert result.exit_code == 2
    assert "--dialect" in result.output


def test_describe_uses_config(isolated_home) -> None:
    isolated_home.mkdir(parents=True)
    (isolated_home / "config.toml").write_text(
        '[parser]\ndefault_database = "warehouse"\n'
    )
    runner = CliRunner()
    result = runner.invoke(main, ["describe", "--format", "json", "SELECT * FROM t"])
    assert result.exit_code == 0
    assert json.loads(result.output)["effective_database"] == "warehouse"


def test_describe_bad_config(isolated_home) -> None:
    isolated_home.mkdir(parents=True)
    (isolated_home / "config.toml").write_text("[parser\n")
    runner = CliRunner()
    result = runner.invoke(main, ["describe", "SELECT 1"])
    assert result.exit_code == 1
    assert "cannot read" in result.output


def test_describe_logs_when_enabled(isolated_home) -> None:
    isolated_home.mkdir(parents=True)
    (isolated_home / "config.toml").write_text("[log]\nenabled = true\n")
    runner = CliRunner()
    with patch("chstatement.statementlog.os.getcwd", return_value="/test/project"):
        result = runner.invoke(main, ["describe", "SELECT 1"])
    assert result.exit_code == 0

    log_files = list((isolated_home / "logs" / "test-project").glob("*.jsonl"))
    assert len(log_files) == 1
    entry = json.loads(log_files[0].read_text().strip())
    assert entry["sql"] == "SELECT 1"
    assert entry["statement_type"] == "select"


def test_describe_no_log_flag(isolated_home) -> None:
    isolated_home.mkdir(parents=True)
    (isolated_home / "config.toml").write_text("[log]\nenabled = true\n")
    runner = CliRunner()
    result = runner.invoke(main, ["describe", "--no-log", "SELECT 1"])
    assert result.exit_code == 0
    assert not (isolated_home / "logs").exists()


def test_describe_does_not_log_by_default(isolated_home) -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["describe", "SELECT 1"])
    assert result.exit_code == 0
    assert not (isolated_home / "logs").exists()


def test_types_text() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["types"])
    assert result.exit_code == 0
    assert "select" in result.output
    assert "alter_delete" in result.output


def test_types_json() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["types", "--format", "json"])
    assert result.exit_code == 0
    rows = {r["statement_type"]: r for r in json.loads(result.output)}
    assert rows["unknown"] == {
        "statement_type": "unknown",
        "language_type": "unknown",
        "operation_type": "unknown",
        "idempotent": False,
    }
    assert rows["insert"]["operation_type"] == "write"
