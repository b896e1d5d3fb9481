"""CLI utility functions and error handling.

This module provides shared utilities for the CLI:
- ExitCode enum for standardized exit codes
- handle_errors decorator for exception-to-exit-code mapping
- Console instances for stdout/stderr separation
- Lazy config initialization helpers
- parse_day for date arguments
"""

from __future__ import annotations

import functools
import os
from collections.abc import Callable
from datetime import date
from enum import IntEnum
from typing import TYPE_CHECKING, Any, TypeVar

import typer
from rich.console import Console

from period_picker.exceptions import (
    ConfigError,
    InvalidDateRangeError,
    InvalidGranularityError,
    InvalidLabelForGranularityError,
    PeriodPickerError,
)

if TYPE_CHECKING:
    from period_picker._internal.config import ConfigManager, PickerSettings

# Console instances for stdout/stderr separation
# Data output goes to stdout; errors go to stderr
console = Console()
err_console = Console(stderr=True, no_color=bool(os.environ.get("NO_COLOR")))


class ExitCode(IntEnum):
    """Standardized exit codes for CLI commands.

    Exit codes follow Unix conventions:
    - 0: Success
    - 1-3: Application-specific errors
    - 130: Interrupted by SIGINT (Ctrl+C)
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGS = 3
    INTERRUPTED = 130


F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(func: F) -> F:
    """Decorator to convert library exceptions to CLI exit codes.

    Maps PeriodPickerError subclasses to appropriate exit codes and
    displays formatted error messages to stderr.

    Usage:
        @handle_errors
        def my_command(ctx: typer.Context):
            settings = get_settings(ctx)
            output_result(ctx, resolve_label(...).to_dict())
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except InvalidLabelForGranularityError as e:
            err_console.print(f"[red]Invalid quick select:[/red] {e.message}")
            if e.valid_labels:
                err_console.print(f"Available: {', '.join(e.valid_labels)}")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None
        except InvalidGranularityError as e:
            err_console.print(f"[red]Invalid mode:[/red] {e.mode}")
            err_console.print(f"Valid modes: {', '.join(e.valid_modes)}")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None
        except InvalidDateRangeError as e:
            err_console.print(f"[red]Invalid range:[/red] {e.message}")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None
        except ConfigError as e:
            err_console.print(f"[red]Configuration error:[/red] {e.message}")
            raise typer.Exit(ExitCode.GENERAL_ERROR) from None
        except PeriodPickerError as e:
            err_console.print(f"[red]Error:[/red] {e.message}")
            raise typer.Exit(ExitCode.GENERAL_ERROR) from None
        except ValueError as e:
            # Handle validation errors (e.g., invalid date format)
            err_console.print(f"[red]Invalid argument:[/red] {e}")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None

    return wrapper  # type: ignore[return-value]


def get_config(ctx: typer.Context) -> ConfigManager:
    """Get or create ConfigManager from context.

    Lazily initializes a ConfigManager instance. The instance is
    cached in the context for reuse.

    Args:
        ctx: Typer context with global options in obj dict.

    Returns:
        ConfigManager instance.
    """
    from period_picker._internal.config import ConfigManager

    if "config" not in ctx.obj or ctx.obj["config"] is None:
        ctx.obj["config"] = ConfigManager()
    config: ConfigManager = ctx.obj["config"]
    return config


def get_settings(ctx: typer.Context) -> PickerSettings:
    """Get picker settings resolved from config file and environment."""
    if ctx.obj.get("settings") is None:
        ctx.obj["settings"] = get_config(ctx).load_settings()
    settings: PickerSettings = ctx.obj["settings"]
    return settings


def resolve_mode(ctx: typer.Context, mode: str | None) -> str:
    """Return the explicit --mode, or the configured default."""
    if mode is not None:
        return mode
    return get_settings(ctx).default_mode


def parse_day(value: str | None, param_name: str = "--now") -> date:
    """Parse a YYYY-MM-DD argument, defaulting to today when None.

    Raises:
        ValueError: If value is not in YYYY-MM-DD format.
    """
    if value is None:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise ValueError(
            f"{param_name} must be YYYY-MM-DD, got {value!r}"
        ) from e


def output_result(
    ctx: typer.Context,
    data: dict[str, Any] | list[Any],
    columns: list[str] | None = None,
    *,
    format: str | None = None,
) -> None:
    """Output data in the requested format.

    Routes data to the appropriate formatter based on the --format
    option. Supports json, table, and plain formats.

    Args:
        ctx: Typer context with global options in obj dict.
        data: Data to output (dict or list).
        columns: Column names for table format (auto-detected if None).
        format: Output format. If None, falls back to ctx.obj["format"] or "json".
    """
    from period_picker.cli.formatters import format_json, format_plain, format_table

    # Priority: explicit format param > ctx.obj > default
    fmt = format if format is not None else ctx.obj.get("format", "json")

    if fmt == "table":
        console.print(format_table(data, columns))
    elif fmt == "plain":
        console.print(format_plain(data), highlight=False)
    else:
        # Default to JSON for unknown formats
        console.print(format_json(data), highlight=False)
