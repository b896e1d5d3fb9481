"""CLI package for period_picker.

This module provides the `periodpick` command-line interface for driving
the range-selection engine from a shell. All commands delegate to the
engine components or ConfigManager, adding only I/O formatting.
"""

from period_picker.cli.main import app

__all__ = ["app"]
