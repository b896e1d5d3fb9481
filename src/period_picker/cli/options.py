"""Shared CLI option definitions.

Provides reusable Annotated type aliases for common CLI options
to avoid duplication across commands.
"""

from __future__ import annotations

from typing import Annotated, Literal

import typer

# Output format type for formatting command output
OutputFormat = Literal["json", "table", "plain"]

# Reusable Annotated type for --format option
FormatOption = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        "-f",
        help="Output format: json, table, plain.",
    ),
]

# Granularity; falls back to the configured default_mode when omitted
ModeOption = Annotated[
    str | None,
    typer.Option(
        "--mode",
        "-m",
        help="Granularity: daily, weekly, monthly, yearly, all.",
    ),
]

# Reference day for presets and navigation
NowOption = Annotated[
    str | None,
    typer.Option(
        "--now",
        "-n",
        help="Reference day (YYYY-MM-DD). Defaults to today.",
    ),
]
