"""Click-replay commands for the selection engine.

This module provides commands that drive the state machine from the shell:
- select: Replay a sequence of clicks and show the resulting state
- preview: Show the hover preview for an anchor and a hovered day
- units: List the period units a range covers
"""

from __future__ import annotations

from typing import Annotated

import typer

from period_picker._internal.policy import get_policy
from period_picker._internal.preview import PreviewCalculator
from period_picker._internal.state_machine import RangeSelectionStateMachine
from period_picker.cli.options import FormatOption, ModeOption
from period_picker.cli.utils import (
    handle_errors,
    output_result,
    parse_day,
    resolve_mode,
)
from period_picker.cli.validators import validate_granularity
from period_picker.types import DateRange, SelectionState

range_app = typer.Typer(
    name="range",
    help="Build ranges by replaying clicks.",
    no_args_is_help=True,
    rich_markup_mode="markdown",
)


@range_app.command("select")
@handle_errors
def select(
    ctx: typer.Context,
    days: Annotated[
        list[str],
        typer.Argument(help="Clicked days (YYYY-MM-DD), in click order."),
    ],
    mode: ModeOption = None,
    steps: Annotated[
        bool,
        typer.Option("--steps", "-s", help="Show the state after every click."),
    ] = False,
    format: FormatOption = "json",
) -> None:
    """Replay clicks and print the selection state.

    Any day inside a week, month or year selects that whole unit in the
    matching mode.

    Examples:

        periodpick range select 2024-01-05 2024-01-10
        periodpick range select 2024-01-10 2024-01-24 --mode weekly
        periodpick range select 2024-03-15 2024-06-02 -m monthly -f table
    """
    granularity = validate_granularity(resolve_mode(ctx, mode))
    machine = RangeSelectionStateMachine(granularity)
    state = SelectionState.empty()
    history: list[dict[str, object]] = []
    for raw in days:
        clicked = parse_day(raw, "DAY")
        state = machine.click(state, clicked)
        history.append({"click": clicked.isoformat(), **state.to_dict()})

    if steps:
        output_result(
            ctx,
            history,
            columns=["click", "phase", "anchor", "start", "end"],
            format=format,
        )
    else:
        output_result(ctx, state.to_dict(), format=format)


@range_app.command("preview")
@handle_errors
def preview(
    ctx: typer.Context,
    anchor: Annotated[str, typer.Argument(help="First clicked day (YYYY-MM-DD).")],
    hovered: Annotated[str, typer.Argument(help="Hovered day (YYYY-MM-DD).")],
    mode: ModeOption = None,
    format: FormatOption = "json",
) -> None:
    """Show the hover preview after a single click.

    Examples:

        periodpick range preview 2024-06-10 2024-06-01
        periodpick range preview 2024-06-10 2024-07-01 --mode monthly
    """
    granularity = validate_granularity(resolve_mode(ctx, mode))
    machine = RangeSelectionStateMachine(granularity)
    calculator = PreviewCalculator(granularity)
    state = machine.click(SelectionState.empty(), parse_day(anchor, "ANCHOR"))
    day = parse_day(hovered, "HOVERED")
    result = calculator.preview(state, day)
    data: dict[str, object] = {"anchor": state.anchor, "hovered": day}
    if result is not None:
        data.update(result.to_dict())
    data["tooltip"] = calculator.tooltip(state, day)
    output_result(ctx, data, format=format)


@range_app.command("units")
@handle_errors
def units(
    ctx: typer.Context,
    start: Annotated[str, typer.Argument(help="Range start (YYYY-MM-DD).")],
    end: Annotated[str, typer.Argument(help="Range end (YYYY-MM-DD).")],
    mode: ModeOption = None,
    format: FormatOption = "json",
) -> None:
    """List the start of every period unit a range covers.

    Examples:

        periodpick range units 2024-01-01 2024-03-31 --mode monthly
    """
    granularity = validate_granularity(resolve_mode(ctx, mode))
    policy = get_policy(granularity)
    value = DateRange(parse_day(start, "START"), parse_day(end, "END"))
    data = [
        {"start": unit, "end": policy.period_end(unit)}
        for unit in policy.iter_units(value)
    ]
    output_result(ctx, data, columns=["start", "end"], format=format)
