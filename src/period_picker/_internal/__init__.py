"""Internal implementation modules. Not part of the public API."""

from period_picker._internal.config import ConfigManager, PickerSettings
from period_picker._internal.navigation import Navigator
from period_picker._internal.preview import PreviewCalculator
from period_picker._internal.quick_select import QuickSelectResolver
from period_picker._internal.state_machine import RangeSelectionStateMachine

__all__ = [
    "ConfigManager",
    "Navigator",
    "PickerSettings",
    "PreviewCalculator",
    "QuickSelectResolver",
    "RangeSelectionStateMachine",
]
