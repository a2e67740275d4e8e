"""Statement logging — daily JSONL files per project, with automatic retention cleanup."""

from __future__ import annotations

import contextlib
import json
import os
from datetime import UTC, date, datetime, timedelta
from pathlib import Path

from chstatement.statement import StatementDescriptor

DEFAULT_RETENTION_DAYS = 30
_LOG_ROOT = Path.home() / ".chstatement" / "logs"


def _project_slug() -> str:
    """Encode cwd into a directory-safe slug."""
    cwd = os.getcwd()
    return cwd.replace("/", "-").lstrip("-")


def _log_dir() -> Path:
    return _LOG_ROOT / _project_slug()


def _today_file() -> Path:
    today = datetime.now(UTC).strftime("%Y-%m-%d")
    return _log_dir() / f"{today}.jsonl"


def log_statement(descriptor: StatementDescriptor, *, dialect: str | None = None) -> None:
    """Append a descriptor summary to today's JSONL file."""
    entry = {
        "ts": datetime.now(UTC).isoformat(),
        "dialect": dialect,
        "sql": descriptor.sql,
        "statement_type": descriptor.statement_type.value,
        "language_type": descriptor.language_type.value,
        "operation_type": descriptor.operation_type.value,
        "cluster": descriptor.cluster,
        "database": descriptor.database,
        "table": descriptor.table,
        "format": descriptor.format,
        "outfile": descriptor.outfile,
        "recognized": descriptor.is_recognized,
        "query": descriptor.is_query,
        "mutation": descriptor.is_mutation,
        "idempotent": descriptor.is_idempotent,
        "settings": dict(descriptor.settings),
    }

    log_file = _today_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    with open(log_file, "a") as f:
        f.write(json.dumps(entry, default=str) + "\n")


def _log_date(log_file: Path) -> date | None:
    """Day a log file covers, from its ``YYYY-MM-DD.jsonl`` name."""
    try:
        return date.fromisoformat(log_file.stem)
    except ValueError:
        return None


def cleanup_old_logs(*, retention_days: int = DEFAULT_RETENTION_DAYS) -> int:
    """Delete this project's log files older than ``retention_days``.

    Files whose name is not a date are left alone. Returns how many were deleted.
    """
    log_dir = _log_dir()
    if not log_dir.is_dir():
        return 0

    oldest_kept = datetime.now(UTC).date() - timedelta(days=retention_days)
    stale = [
        f for f in log_dir.glob("*.jsonl")
        if (day := _log_date(f)) is not None and day < oldest_kept
    ]
    for log_file in stale:
        log_file.unlink()

    with contextlib.suppress(OSError):
        log_dir.rmdir()  # no-op unless empty

    return len(stale)
