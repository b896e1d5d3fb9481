"""Quick-select preset resolution.

Turns a preset label such as "This Month" or "Last Year" plus a reference
day into a complete, period-aligned DateRange. Labels are split into a
"current" and a "past" tab, and each granularity offers only the presets
that make sense at its resolution (yearly mode has no "Today").
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime

from period_picker._internal.policy import (
    GranularityPolicy,
    policy_for_unit,
    validate_granularity,
)
from period_picker._literal_types import Granularity, PeriodUnit, QuickSelectTab
from period_picker.exceptions import (
    InvalidLabelForGranularityError,
    UnknownQuickSelectLabelError,
)
from period_picker.types import DateRange, as_date

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuickSelectPreset:
    """A named preset: a unit and how many units back from now."""

    label: str
    unit: PeriodUnit
    units_back: int

    @property
    def policy(self) -> GranularityPolicy:
        """Boundary policy for this preset's unit."""
        return policy_for_unit(self.unit)

    @property
    def tab(self) -> QuickSelectTab:
        """Tab the preset is listed under."""
        return "current" if self.units_back == 0 else "past"


PRESETS: dict[str, QuickSelectPreset] = {
    preset.label: preset
    for preset in (
        QuickSelectPreset("Today", "day", 0),
        QuickSelectPreset("This Week", "week", 0),
        QuickSelectPreset("This Month", "month", 0),
        QuickSelectPreset("This Year", "year", 0),
        QuickSelectPreset("Yesterday", "day", 1),
        QuickSelectPreset("Last Week", "week", 1),
        QuickSelectPreset("Last Month", "month", 1),
        QuickSelectPreset("Last Year", "year", 1),
    )
}

# Smallest unit each mode offers presets for
_FINEST_UNIT: dict[str, PeriodUnit] = {
    "daily": "day",
    "all": "day",
    "weekly": "week",
    "monthly": "month",
    "yearly": "year",
}

_UNIT_ORDER: tuple[PeriodUnit, ...] = ("day", "week", "month", "year")


def labels_for(mode: Granularity | str, tab: QuickSelectTab) -> list[str]:
    """Return the preset labels offered on one tab for a granularity.

    Args:
        mode: Active granularity.
        tab: "current" or "past".

    Returns:
        Labels in display order, finest unit first.

    Example:
        ```python
        labels_for("monthly", "past")  # ["Last Month", "Last Year"]
        ```
    """
    finest = _UNIT_ORDER.index(_FINEST_UNIT[validate_granularity(mode)])
    return [
        preset.label
        for preset in PRESETS.values()
        if preset.tab == tab and _UNIT_ORDER.index(preset.unit) >= finest
    ]


def all_labels(mode: Granularity | str) -> list[str]:
    """Return every label offered for a granularity, current tab first."""
    return labels_for(mode, "current") + labels_for(mode, "past")


def find_preset(label: str) -> QuickSelectPreset:
    """Return the preset for a label, matched exactly then case-insensitively.

    Raises:
        UnknownQuickSelectLabelError: If no preset has that label.
    """
    preset = PRESETS.get(label)
    if preset is not None:
        return preset
    folded = label.strip().casefold()
    for candidate in PRESETS.values():
        if candidate.label.casefold() == folded:
            return candidate
    raise UnknownQuickSelectLabelError(label, list(PRESETS))


def resolve_label(
    label: str,
    now: date | datetime,
    mode: Granularity | str | None = None,
) -> DateRange:
    """Resolve a preset label to a concrete range.

    Pure function of its arguments: the same label and now always give the
    same range.

    Args:
        label: Preset label, e.g. "This Month". Matched exactly first, then
            case-insensitively.
        now: Reference instant; a datetime is truncated to its date.
        mode: Active granularity. When given, labels the mode does not offer
            are rejected.

    Returns:
        Complete range aligned to the preset's unit.

    Raises:
        UnknownQuickSelectLabelError: If label is not a known preset.
        InvalidLabelForGranularityError: If mode does not offer label.

    Example:
        ```python
        resolve_label("This Month", date(2024, 6, 15))
        # DateRange(start=date(2024, 6, 1), end=date(2024, 6, 30))
        resolve_label("Last Year", date(2024, 6, 15))
        # DateRange(start=date(2023, 1, 1), end=date(2023, 12, 31))
        ```
    """
    preset = find_preset(label)
    if mode is not None:
        offered = all_labels(mode)
        if preset.label not in offered:
            raise InvalidLabelForGranularityError(preset.label, str(mode), offered)

    policy = preset.policy
    reference = policy.shift(as_date(now), -preset.units_back)
    resolved = policy.bounds(reference)
    _logger.debug(
        "Resolved quick select %r at %s to %s..%s",
        preset.label,
        as_date(now),
        resolved.start,
        resolved.end,
    )
    return resolved


class QuickSelectResolver:
    """Preset resolver bound to one granularity.

    Example:
        ```python
        resolver = QuickSelectResolver("weekly")
        resolver.labels("current")  # ["This Week", "This Month", "This Year"]
        resolver.resolve("Last Week", date(2024, 1, 10))
        ```
    """

    def __init__(self, mode: Granularity | str = "daily") -> None:
        """Initialize resolver.

        Args:
            mode: Granularity whose presets this resolver offers.

        Raises:
            InvalidGranularityError: If mode is not supported.
        """
        self._mode = validate_granularity(mode)

    @property
    def mode(self) -> Granularity:
        """Granularity this resolver is bound to."""
        return self._mode

    def labels(self, tab: QuickSelectTab) -> list[str]:
        """Return labels on one tab."""
        return labels_for(self._mode, tab)

    def resolve(self, label: str, now: date | datetime) -> DateRange:
        """Resolve a label offered by this resolver's mode."""
        return resolve_label(label, now, self._mode)
