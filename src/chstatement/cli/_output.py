"""Shared output formatting for CLI commands."""

from __future__ import annotations

import json

from chstatement.statement import StatementDescriptor
from chstatement.statement.render import render_json, render_text


def format_descriptors(
    descriptors: list[StatementDescriptor],
    *,
    output_format: str = "text",
    database: str | None = None,
    as_list: bool = False,
) -> str:
    """Format one or more descriptors.

    JSON output is a single object unless ``as_list`` is set.
    """
    if output_format == "json":
        data = [render_json(d, database=database) for d in descriptors]
        if not as_list and len(data) == 1:
            return json.dumps(data[0], indent=2)
        return json.dumps(data, indent=2)
    return "\n\n".join(render_text(d, database=database) for d in descriptors)
