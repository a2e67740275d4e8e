"""Shared helpers for CLI commands."""

from __future__ import annotations

import sys

import click

from chstatement.config import Config, load_config
from chstatement.errors import ConfigError


def resolve_sql_stdin(sql: str | None, from_stdin: bool) -> str:
    """Resolve SQL from positional argument or stdin. Exactly one source required."""
    if sql and from_stdin:
        raise click.UsageError("Provide SQL as an argument or --from-stdin, not both.")
    if from_stdin:
        if sys.stdin.isatty():
            raise click.UsageError("--from-stdin requires piped input (stdin is a terminal).")
        text = sys.stdin.read().strip()
        if not text:
            raise click.UsageError("--from-stdin: stdin was empty.")
        return text
    if not sql:
        raise click.UsageError("Missing argument 'SQL'. Provide SQL or use --from-stdin.")
    return sql


def load_config_or_fail() -> Config:
    """Load the user config, turning ConfigError into a click error (exit 1)."""
    try:
        return load_config()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
