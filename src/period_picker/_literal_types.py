"""Shared Literal type aliases for parameter validation.

These types are exported from the public API and can be used by
library consumers for their own type hints.

Example:
    from period_picker import Granularity, PeriodPicker

    def open_picker(mode: Granularity) -> PeriodPicker:
        return PeriodPicker(mode=mode)
"""

from __future__ import annotations

from typing import Literal

# Unit a click refers to; "all" behaves like "daily"
Granularity = Literal["daily", "weekly", "monthly", "yearly", "all"]

# Quick-select tabs
QuickSelectTab = Literal["current", "past"]

# Number of month panels rendered side by side
MonthsView = Literal[1, 2]

# Period units produced by a granularity policy
PeriodUnit = Literal["day", "week", "month", "year"]

__all__ = ["Granularity", "MonthsView", "PeriodUnit", "QuickSelectTab"]
