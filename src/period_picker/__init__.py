"""
period_picker - range-selection engine for reporting date filters.

Turns clicks on days, weeks, months or years, hover events and quick-select
presets into a normalized, period-aligned {start, end} date pair.
"""

from period_picker._internal.config import ConfigManager, PickerSettings
from period_picker._internal.navigation import Navigator, month_grid_days
from period_picker._internal.policy import (
    DayPolicy,
    GranularityPolicy,
    MonthPolicy,
    WeekPolicy,
    YearPolicy,
    get_policy,
)
from period_picker._internal.preview import PreviewCalculator
from period_picker._internal.quick_select import (
    QuickSelectResolver,
    all_labels,
    find_preset,
    labels_for,
    resolve_label,
)
from period_picker._internal.state_machine import RangeSelectionStateMachine
from period_picker._literal_types import (
    Granularity,
    MonthsView,
    PeriodUnit,
    QuickSelectTab,
)
from period_picker.exceptions import (
    ConfigError,
    InvalidDateRangeError,
    InvalidGranularityError,
    InvalidLabelForGranularityError,
    PeriodPickerError,
    UnknownQuickSelectLabelError,
)
from period_picker.picker import PeriodPicker
from period_picker.types import (
    DateRange,
    NavigationCursor,
    PreviewRange,
    SelectionPhase,
    SelectionState,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "PeriodPicker",
    # Type aliases
    "Granularity",
    "MonthsView",
    "PeriodUnit",
    "QuickSelectTab",
    # Exceptions
    "PeriodPickerError",
    "ConfigError",
    "InvalidDateRangeError",
    "InvalidGranularityError",
    "InvalidLabelForGranularityError",
    "UnknownQuickSelectLabelError",
    # Value types
    "DateRange",
    "NavigationCursor",
    "PreviewRange",
    "SelectionPhase",
    "SelectionState",
    # Engine components
    "GranularityPolicy",
    "DayPolicy",
    "WeekPolicy",
    "MonthPolicy",
    "YearPolicy",
    "get_policy",
    "RangeSelectionStateMachine",
    "PreviewCalculator",
    "QuickSelectResolver",
    "Navigator",
    "month_grid_days",
    "resolve_label",
    "find_preset",
    "labels_for",
    "all_labels",
    # Configuration
    "ConfigManager",
    "PickerSettings",
]
