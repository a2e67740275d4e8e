"""The `describe` command: classify SQL and print its descriptor."""

from __future__ import annotations

import click

from chstatement.cli._output import format_descriptors
from chstatement.cli._shared import load_config_or_fail, resolve_sql_stdin
from chstatement.parser import parse_statement, parse_statements
from chstatement.statementlog import cleanup_old_logs, log_statement


@click.command()
@click.argument("sql", required=False, default=None)
@click.option("--from-stdin", is_flag=True, help="Read SQL from stdin instead of argument.")
@click.option("--dialect", default=None, help="sqlglot dialect used for tokenizing (default: clickhouse).")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="text",
    help="Output format.",
)
@click.option("--database", default=None, help="Fallback database for unqualified statements.")
@click.option("--split", is_flag=True, help="Describe every statement of a semicolon-separated script.")
@click.option("--strict", is_flag=True, help="Exit 1 if any statement is not recognized.")
@click.option("--no-log", is_flag=True, help="Do not write to the statement log.")
def describe(
    sql: str | None,
    from_stdin: bool,
    dialect: str | None,
    output_format: str,
    database: str | None,
    split: bool,
    strict: bool,
    no_log: bool,
) -> None:
    """Classify SQL and print its statement descriptor."""
    config = load_config_or_fail()
    sql = resolve_sql_stdin(sql, from_stdin)
    dialect = dialect or config.dialect
    database = database or config.default_database

    try:
        if split:
            descriptors = parse_statements(sql, dialect=dialect)
        else:
            descriptors = [parse_statement(sql, dialect=dialect)]
    except ValueError as e:
        # sqlglot rejects unknown dialect names
        raise click.BadParameter(str(e), param_hint="'--dialect'") from e

    output = format_descriptors(
        descriptors, output_format=output_format, database=database, as_list=split,
    )
    if output:
        click.echo(output)

    if config.log_enabled and not no_log:
        for d in descriptors:
            log_statement(d, dialect=dialect)
        cleanup_old_logs(retention_days=config.log_retention_days)

    if strict and not all(d.is_recognized for d in descriptors):
        raise SystemExit(1)
