"""Quick-select preset commands.

This module provides commands for preset ranges:
- resolve: Resolve a preset label to a concrete range
- labels: List presets offered for a granularity
"""

from __future__ import annotations

from typing import Annotated

import typer

from period_picker._internal.quick_select import (
    find_preset,
    labels_for,
    resolve_label,
)
from period_picker.cli.options import FormatOption, ModeOption, NowOption
from period_picker.cli.utils import (
    handle_errors,
    output_result,
    parse_day,
    resolve_mode,
)
from period_picker.cli.validators import validate_granularity, validate_tab

quick_app = typer.Typer(
    name="quick",
    help="Resolve quick-select presets.",
    no_args_is_help=True,
    rich_markup_mode="markdown",
)


@quick_app.command("resolve")
@handle_errors
def resolve(
    ctx: typer.Context,
    label: Annotated[str, typer.Argument(help='Preset label, e.g. "This Month".')],
    mode: ModeOption = None,
    now: NowOption = None,
    format: FormatOption = "json",
) -> None:
    """Resolve a preset label to a start/end pair.

    Examples:

        periodpick quick resolve "This Month" --now 2024-06-15
        periodpick quick resolve "Last Year" -m yearly -f plain
    """
    granularity = validate_granularity(resolve_mode(ctx, mode))
    reference = parse_day(now)
    resolved = resolve_label(label, reference, granularity)
    if format == "plain":
        output_result(ctx, resolved.to_dict(), format=format)
        return
    data = {
        "label": find_preset(label).label,
        "mode": granularity,
        **resolved.to_dict(),
    }
    output_result(ctx, data, format=format)


@quick_app.command("labels")
@handle_errors
def labels(
    ctx: typer.Context,
    mode: ModeOption = None,
    tab: Annotated[
        str | None,
        typer.Option("--tab", "-t", help="Only list one tab: current or past."),
    ] = None,
    format: FormatOption = "json",
) -> None:
    """List quick-select presets offered for a granularity.

    Examples:

        periodpick quick labels --mode weekly
        periodpick quick labels -m monthly -t past -f plain
    """
    granularity = validate_granularity(resolve_mode(ctx, mode))
    tabs = [validate_tab(tab)] if tab is not None else ["current", "past"]
    data = [
        {"label": label, "tab": t}
        for t in tabs
        for label in labels_for(granularity, t)  # type: ignore[arg-type]
    ]
    if format == "plain":
        output_result(ctx, [item["label"] for item in data], format=format)
    else:
        output_result(ctx, data, columns=["label", "tab"], format=format)
