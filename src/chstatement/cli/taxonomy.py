"""The `types` command: print the statement taxonomy."""

from __future__ import annotations

import json

import click

from chstatement.statement import StatementType, axis_of


@click.command("types")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="text",
    help="Output format.",
)
def types_cmd(output_format: str) -> None:
    """List statement kinds with their language, operation and retry safety."""
    rows = [
        {
            "statement_type": kind.value,
            "language_type": axis_of(kind).language.value,
            "operation_type": axis_of(kind).operation.value,
            "idempotent": axis_of(kind).idempotent,
        }
        for kind in StatementType
    ]

    if output_format == "json":
        click.echo(json.dumps(rows, indent=2))
        return

    for row in rows:
        retry = "idempotent" if row["idempotent"] else "-"
        click.echo(
            f"  {row['statement_type']:<14} {row['language_type']:<8} "
            f"{row['operation_type']:<8} {retry}"
        )
