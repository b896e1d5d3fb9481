"""Output formatters for CLI commands.

Commands emit flat records: ISO date strings or dates, booleans, counts and
labels. Three renderings are offered:
- JSON: Pretty-printed JSON
- Table: Rich table, one row per record
- Plain: "start..end" for ranges, one item per line otherwise
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any

from rich.table import Table

Record = dict[str, Any]


def _iso(obj: Any) -> str:
    """Serialize dates left in command output as ISO strings."""
    if isinstance(obj, date):
        return obj.isoformat()
    raise TypeError(f"Cannot serialize {type(obj).__name__}")


def format_json(data: Record | list[Any]) -> str:
    """Format data as pretty-printed JSON (2-space indent, UTF-8 kept)."""
    return json.dumps(data, indent=2, default=_iso, ensure_ascii=False)


def format_table(data: Record | list[Any], columns: list[str] | None = None) -> Table:
    """Format records as a Rich table.

    Args:
        data: One record or a list of records. Bare values become a single
            "value" column.
        columns: Record keys to show, in order. Defaults to the first
            record's keys.

    Returns:
        Rich Table object ready for printing.
    """
    rows: list[Any] = [data] if isinstance(data, dict) else list(data)
    table = Table(show_header=True, header_style="bold")
    if not rows:
        return table

    first = rows[0]
    if columns is None:
        columns = list(first) if isinstance(first, dict) else ["value"]
    for col in columns:
        table.add_column(col.upper().replace("_", " "))

    for row in rows:
        if isinstance(row, dict):
            table.add_row(*(_cell(row.get(col)) for col in columns))
        else:
            table.add_row(_cell(row))
    return table


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def format_plain(data: Record | list[Any]) -> str:
    """Format data as minimal plain text.

    Ranges (records with "start" and "end") print as "start..end", other
    records as key=value lines, and lists one item per line.
    """
    if isinstance(data, list):
        return "\n".join(
            format_plain(item) if isinstance(item, dict) else str(item)
            for item in data
        )
    if "start" in data and "end" in data:
        return f"{_cell(data['start'])}..{_cell(data['end'])}"
    return "\n".join(f"{key}={_cell(value)}" for key, value in data.items())
