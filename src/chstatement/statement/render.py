"""Render descriptors for terminal (text) and machine (JSON) output."""

from __future__ import annotations

from chstatement.statement.descriptor import StatementDescriptor


def render_json(descriptor: StatementDescriptor, *, database: str | None = None) -> dict:
    """Render a descriptor as a JSON-serializable dict.

    ``database`` is the caller's fallback used for ``effective_database``.
    """
    return {
        "sql": descriptor.sql,
        "statement_type": descriptor.statement_type.value,
        "language_type": descriptor.language_type.value,
        "operation_type": descriptor.operation_type.value,
        "recognized": descriptor.is_recognized,
        "query": descriptor.is_query,
        "mutation": descriptor.is_mutation,
        "idempotent": descriptor.is_idempotent,
        "cluster": descriptor.cluster,
        "database": descriptor.database,
        "effective_database": descriptor.database_or_default(database),
        "table": descriptor.table,
        "input": descriptor.input,
        "format": descriptor.format,
        "outfile": descriptor.outfile,
        "parameters": list(descriptor.parameters),
        "positions": dict(descriptor.positions),
        "settings": dict(descriptor.settings),
    }


def render_text(descriptor: StatementDescriptor, *, database: str | None = None) -> str:
    """Render a descriptor as human-readable text."""
    flags = [
        name
        for name, on in (
            ("query", descriptor.is_query),
            ("mutation", descriptor.is_mutation),
            ("idempotent", descriptor.is_idempotent),
        )
        if on
    ]
    kind = descriptor.statement_type.name
    lines = [
        f"{kind} ({descriptor.language_type.name}/{descriptor.operation_type.name})"
        + (f" [{', '.join(flags)}]" if flags else ""),
        f"  target: {descriptor.database_or_default(database)}.{descriptor.table}",
    ]
    if descriptor.cluster is not None:
        lines.append(f"  cluster: {descriptor.cluster}")
    if descriptor.input is not None:
        lines.append(f"  input: {descriptor.input}")
    if descriptor.has_format:
        lines.append(f"  format: {descriptor.format}")
    if descriptor.has_outfile:
        lines.append(f"  outfile: {descriptor.outfile}")
    if descriptor.parameters:
        lines.append(f"  parameters: {', '.join(str(p) for p in descriptor.parameters)}")
    if descriptor.has_settings:
        pairs = ", ".join(f"{k}={v}" for k, v in descriptor.settings.items())
        lines.append(f"  settings: {pairs}")
    if not descriptor.is_recognized:
        lines.append("  = note: statement not recognized; treat as a non-retryable mutation")
    return "\n".join(lines)
