"""Value types for period_picker.

All types are immutable frozen dataclasses with:
- JSON serialization via the `to_dict()` method (all values JSON-serializable)
- Full type hints for IDE/mypy support

Immutability: transitions never modify a value in place. Every click, hover
or quick select produces a new state object, so any state can be kept around
(for undo, for tests) without being affected by later events.

Dates are plain `datetime.date` values. A `datetime.datetime` handed to any
constructor is truncated to its calendar date; no time zone conversion is
performed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any

from period_picker.exceptions import InvalidDateRangeError


def as_date(value: date | datetime | str) -> date:
    """Truncate a date-like value to a calendar date.

    Args:
        value: A date, a datetime (time part dropped), or an ISO string
            (YYYY-MM-DD, or a full ISO timestamp).

    Returns:
        The calendar date.

    Raises:
        ValueError: If a string is not ISO formatted.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value[:10])
    except ValueError as e:
        raise ValueError(f"Invalid date {value!r}. Expected YYYY-MM-DD") from e


def _optional_date(value: date | datetime | str | None) -> date | None:
    return None if value is None else as_date(value)


# =============================================================================
# Date Range
# =============================================================================


@dataclass(frozen=True)
class DateRange:
    """A calendar range with optional ends.

    Both ends are inclusive. When both are present `start <= end` holds;
    constructing a range that violates this raises InvalidDateRangeError.

    A range with only a start is a half-built selection waiting for its
    second click. A range with neither end means "no filter".

    Example:
        ```python
        r = DateRange(date(2024, 6, 1), date(2024, 6, 30))
        r.days  # 30
        r.to_dict()  # {"start": "2024-06-01", "end": "2024-06-30"}
        ```
    """

    start: date | None = None
    """First day of the range (inclusive)."""

    end: date | None = None
    """Last day of the range (inclusive)."""

    def __post_init__(self) -> None:
        """Normalize ends to dates and validate ordering."""
        object.__setattr__(self, "start", _optional_date(self.start))
        object.__setattr__(self, "end", _optional_date(self.end))
        if self.start is None and self.end is not None:
            # An end without a start is meaningless; treat it as a start
            object.__setattr__(self, "start", self.end)
            object.__setattr__(self, "end", None)
        if self.start is not None and self.end is not None and self.start > self.end:
            raise InvalidDateRangeError(self.start, self.end)

    @classmethod
    def empty(cls) -> DateRange:
        """Return the null-filled range meaning "no filter"."""
        return cls(None, None)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> DateRange:
        """Build a range from a serialized mapping.

        Accepts `start`/`end` keys as well as the `start_date`/`end_date`
        keys used by dashboard payloads. Values may be dates, datetimes,
        ISO strings or None.

        Args:
            data: Mapping with the range ends, or None for an empty range.

        Returns:
            The parsed DateRange.
        """
        if not data:
            return cls.empty()
        start = data.get("start", data.get("start_date"))
        end = data.get("end", data.get("end_date"))
        return cls(start, end)

    @property
    def is_empty(self) -> bool:
        """True when neither end is set."""
        return self.start is None

    @property
    def is_complete(self) -> bool:
        """True when both ends are set."""
        return self.start is not None and self.end is not None

    @property
    def phase(self) -> SelectionPhase:
        """Selection phase implied by which ends are present."""
        if self.start is None:
            return SelectionPhase.EMPTY
        if self.end is None:
            return SelectionPhase.PENDING_END
        return SelectionPhase.COMPLETE

    @property
    def days(self) -> int | None:
        """Inclusive number of days covered, or None if incomplete."""
        if self.start is None or self.end is None:
            return None
        return (self.end - self.start).days + 1

    def contains(self, day: date | datetime) -> bool:
        """Return True if day falls inside a complete range."""
        if self.start is None or self.end is None:
            return False
        return self.start <= as_date(day) <= self.end

    def to_dict(self) -> dict[str, Any]:
        """Serialize range for JSON output.

        Returns:
            Dictionary with ISO date strings (or None) for start and end.
        """
        return {
            "start": self.start.isoformat() if self.start else None,
            "end": self.end.isoformat() if self.end else None,
        }


# =============================================================================
# Selection State
# =============================================================================


class SelectionPhase(str, Enum):
    """Where a two-click selection currently is.

    - EMPTY: nothing picked yet
    - PENDING_END: one unit picked, waiting for the second click
    - COMPLETE: both ends picked
    """

    EMPTY = "empty"
    PENDING_END = "pending_end"
    COMPLETE = "complete"


@dataclass(frozen=True)
class SelectionState:
    """Tentative selection owned by one picker activation.

    Build instances with the named constructors rather than directly; they
    keep `phase`, `anchor` and `range` consistent with each other.

    Attributes:
        phase: Current selection phase.
        anchor: Period start of the first picked unit while PENDING_END,
            otherwise None.
        range: The tentative range. Start-only while PENDING_END.
    """

    phase: SelectionPhase = SelectionPhase.EMPTY
    anchor: date | None = None
    range: DateRange = field(default_factory=DateRange.empty)

    @classmethod
    def empty(cls) -> SelectionState:
        """Return a state with nothing selected."""
        return cls()

    @classmethod
    def pending(cls, anchor: date) -> SelectionState:
        """Return a state waiting for the second click."""
        anchor = as_date(anchor)
        return cls(SelectionPhase.PENDING_END, anchor, DateRange(anchor, None))

    @classmethod
    def complete(cls, start: date, end: date) -> SelectionState:
        """Return a state holding a finished range."""
        return cls(SelectionPhase.COMPLETE, None, DateRange(start, end))

    @classmethod
    def from_range(cls, value: DateRange | None) -> SelectionState:
        """Seed a state from an externally supplied range.

        Args:
            value: Applied range to start from, or None.

        Returns:
            EMPTY for None or an empty range, PENDING_END for a start-only
            range, COMPLETE otherwise.
        """
        if value is None or value.start is None:
            return cls.empty()
        if value.end is None:
            return cls.pending(value.start)
        return cls.complete(value.start, value.end)

    def to_dict(self) -> dict[str, Any]:
        """Serialize state for JSON output."""
        return {
            "phase": self.phase.value,
            "anchor": self.anchor.isoformat() if self.anchor else None,
            **self.range.to_dict(),
        }


# =============================================================================
# Preview
# =============================================================================


@dataclass(frozen=True)
class PreviewRange:
    """Advisory highlight shown while waiting for the second click.

    Never written into the selection. `whole_unit` is True when the preview
    is the anchored week/month/year rather than an anchor-to-hover span.
    """

    start: date
    """First highlighted day."""

    end: date
    """Last highlighted day."""

    whole_unit: bool = False
    """True when the preview covers the anchored unit only."""

    @property
    def days(self) -> int:
        """Inclusive number of highlighted days."""
        return (self.end - self.start).days + 1

    def contains(self, day: date | datetime) -> bool:
        """Return True if day is highlighted."""
        return self.start <= as_date(day) <= self.end

    def to_dict(self) -> dict[str, Any]:
        """Serialize preview for JSON output."""
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "days": self.days,
            "whole_unit": self.whole_unit,
        }


# =============================================================================
# Navigation
# =============================================================================


@dataclass(frozen=True)
class NavigationCursor:
    """Which calendar window is on screen.

    Purely a viewport index: it never limits which dates can be selected.

    Attributes:
        displayed_month: First day of the left-most displayed month.
        decade_offset: Decades away from the current decade in year view.
    """

    displayed_month: date
    decade_offset: int = 0

    def __post_init__(self) -> None:
        """Pin displayed_month to the first of its month."""
        object.__setattr__(
            self, "displayed_month", as_date(self.displayed_month).replace(day=1)
        )

    @property
    def displayed_year(self) -> int:
        """Year of the displayed month."""
        return self.displayed_month.year

    def to_dict(self) -> dict[str, Any]:
        """Serialize cursor for JSON output."""
        return {
            "displayed_month": self.displayed_month.isoformat(),
            "decade_offset": self.decade_offset,
        }
