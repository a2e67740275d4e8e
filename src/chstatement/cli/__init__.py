"""CLI entry point. Both `chstatement` and `chst` resolve here."""

from __future__ import annotations

import click

from chstatement.cli.describe import describe
from chstatement.cli.taxonomy import types_cmd


@click.group()
@click.version_option(package_name="chstatement")
def main() -> None:
    """chstatement: classify ClickHouse SQL statements."""


main.add_command(describe)
main.add_command(types_cmd)
