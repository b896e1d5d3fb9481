"""CLI parameter validators for Literal types.

Validates string inputs from Typer against Literal types before
passing to the engine, providing early error feedback.
"""

from __future__ import annotations

from typing import Any, cast, get_args

import typer

from period_picker._literal_types import Granularity, QuickSelectTab
from period_picker.cli.utils import ExitCode, err_console


def validate_literal(value: str, literal_type: Any, param_name: str) -> Any:
    """Validate a CLI string against a Literal type.

    Args:
        value: String value from CLI.
        literal_type: The Literal type to validate against.
        param_name: Parameter name for error message.

    Returns:
        The validated value, cast to the Literal type.

    Raises:
        typer.Exit: With code 3 (INVALID_ARGS) if invalid.
    """
    valid_values = get_args(literal_type)
    if value not in valid_values:
        err_console.print(
            f"[red]Error:[/red] Invalid value for {param_name}: '{value}'"
        )
        err_console.print(f"Valid options: {', '.join(str(v) for v in valid_values)}")
        raise typer.Exit(ExitCode.INVALID_ARGS)
    return value


def validate_granularity(value: str, param_name: str = "--mode") -> Granularity:
    """Validate granularity (case-insensitive).

    Args:
        value: String value from CLI.
        param_name: Parameter name for error message. Default: "--mode".

    Returns:
        Validated value as Granularity literal type.

    Raises:
        typer.Exit: With code 3 (INVALID_ARGS) if value is invalid.
    """
    validate_literal(value.lower(), Granularity, param_name)
    return cast(Granularity, value.lower())


def validate_tab(value: str, param_name: str = "--tab") -> QuickSelectTab:
    """Validate quick-select tab ("current" or "past").

    Raises:
        typer.Exit: With code 3 (INVALID_ARGS) if value is invalid.
    """
    validate_literal(value, QuickSelectTab, param_name)
    return cast(QuickSelectTab, value)
