"""CLI entry point for period_picker.

This module provides the `periodpick` command-line interface, the main
entry point for the CLI. It defines global options and registers command
groups.

Usage:
    periodpick [OPTIONS] COMMAND [ARGS]...

Examples:
    periodpick --help
    periodpick quick resolve "This Month" --now 2024-06-15
    periodpick range select 2024-01-10 2024-01-24 --mode weekly
    periodpick config set default_mode monthly
"""

from __future__ import annotations

import logging
import signal
import sys
from typing import Annotated

import typer

import period_picker
from period_picker.cli.utils import ExitCode, err_console

# Create main application
app = typer.Typer(
    name="periodpick",
    help="Period range picker CLI - resolve presets and replay range clicks.",
    epilog="""[dim]Granularities:[/dim] daily, weekly, monthly, yearly, all

[dim]Workflow:[/dim] periodpick quick labels → periodpick quick resolve LABEL""",
    no_args_is_help=True,
    add_completion=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        print(f"periodpick version {period_picker.__version__}")
        raise typer.Exit()


def _handle_interrupt(_signum: int, _frame: object) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    err_console.print("\n[yellow]Interrupted[/yellow]")
    sys.exit(ExitCode.INTERRUPTED)


# Set up signal handler for Ctrl+C
signal.signal(signal.SIGINT, _handle_interrupt)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug output.",
        ),
    ] = False,
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Period range picker CLI - resolve presets and replay range clicks.

    Drives the same selection engine the dashboard picker uses, so ranges
    can be checked or produced for report filters from a shell.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = None
    ctx.obj["settings"] = None
    if verbose:
        logging.basicConfig(
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )
        logging.getLogger("period_picker").setLevel(logging.DEBUG)


# Import and register command groups
# These imports are done here to avoid circular imports
def _register_commands() -> None:
    """Register all command groups with the main app."""
    from period_picker.cli.commands.config import config_app
    from period_picker.cli.commands.quick import quick_app
    from period_picker.cli.commands.range import range_app

    app.add_typer(quick_app, name="quick", help="Resolve quick-select presets.")
    app.add_typer(range_app, name="range", help="Build ranges by replaying clicks.")
    app.add_typer(config_app, name="config", help="Manage picker defaults.")


# Register commands when module is imported
_register_commands()


if __name__ == "__main__":
    app()
