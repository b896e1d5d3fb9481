"""Picker configuration commands.

This module provides commands for managing picker defaults:
- show: Display resolved settings
- set: Store one setting in the config file
- path: Print the config file location
"""

from __future__ import annotations

from typing import Annotated

import typer

from period_picker.cli.options import FormatOption
from period_picker.cli.utils import (
    console,
    get_config,
    get_settings,
    handle_errors,
    output_result,
)

config_app = typer.Typer(
    name="config",
    help="Manage picker defaults.",
    no_args_is_help=True,
    rich_markup_mode="markdown",
)


@config_app.command("show")
@handle_errors
def show(
    ctx: typer.Context,
    format: FormatOption = "json",
) -> None:
    """Show settings resolved from the config file and environment.

    Examples:

        periodpick config show
        PERIODPICK_MODE=weekly periodpick config show -f table
    """
    settings = get_settings(ctx)
    output_result(ctx, settings.model_dump(), format=format)


@config_app.command("set")
@handle_errors
def set_value(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Setting name, e.g. default_mode.")],
    value: Annotated[str, typer.Argument(help="New value.")],
    format: FormatOption = "json",
) -> None:
    """Store one setting in the config file.

    Examples:

        periodpick config set default_mode monthly
        periodpick config set months_view 1
    """
    config = get_config(ctx)
    settings = config.set_value(key, value)
    ctx.obj["settings"] = None
    output_result(ctx, settings.model_dump(), format=format)


@config_app.command("path")
@handle_errors
def path(ctx: typer.Context) -> None:
    """Print the config file location.

    Examples:

        periodpick config path
    """
    console.print(str(get_config(ctx).config_path), highlight=False)
