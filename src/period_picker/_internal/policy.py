"""Period boundary policies, one per granularity.

A policy answers three questions about a calendar unit (a day, a Monday to
Sunday week, a month or a year): where it starts, where it ends, and whether
two dates fall inside the same one. The selection engine picks a policy once
per activation with get_policy() and never branches on the mode again.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterator
from datetime import date, datetime, timedelta
from typing import get_args

from dateutil.relativedelta import relativedelta

from period_picker._literal_types import Granularity, PeriodUnit
from period_picker.exceptions import InvalidGranularityError
from period_picker.types import DateRange, as_date

GRANULARITIES: tuple[str, ...] = get_args(Granularity)


class GranularityPolicy:
    """Boundary computation for one kind of period unit.

    Subclasses implement period_start, period_end and shift. Everything else
    is derived from those three.
    """

    unit: PeriodUnit

    def period_start(self, day: date | datetime) -> date:
        """Return the first day of the unit containing day."""
        raise NotImplementedError

    def period_end(self, day: date | datetime) -> date:
        """Return the last day of the unit containing day."""
        raise NotImplementedError

    def shift(self, day: date | datetime, units: int) -> date:
        """Move day by a whole number of units.

        Month and year steps clamp the day of month, so Mar 31 minus one
        month is Feb 28 (or 29).
        """
        raise NotImplementedError

    def is_same_unit(self, a: date | datetime, b: date | datetime) -> bool:
        """Return True if a and b fall in the same unit."""
        return self.period_start(a) == self.period_start(b)

    def bounds(self, day: date | datetime) -> DateRange:
        """Return the whole unit containing day as a range."""
        return DateRange(self.period_start(day), self.period_end(day))

    def is_aligned(self, value: DateRange) -> bool:
        """Return True if both ends of a complete range sit on unit boundaries."""
        if value.start is None or value.end is None:
            return False
        return (
            self.period_start(value.start) == value.start
            and self.period_end(value.end) == value.end
        )

    def iter_units(self, value: DateRange) -> Iterator[date]:
        """Yield the start of every unit overlapping a complete range.

        Reports use this to bucket a series by the picker's granularity.
        Yields nothing for an incomplete range.
        """
        if value.start is None or value.end is None:
            return
        current = self.period_start(value.start)
        while current <= value.end:
            yield current
            current = self.period_start(self.shift(current, 1))

    def __repr__(self) -> str:
        """Return policy name."""
        return f"{self.__class__.__name__}()"


class DayPolicy(GranularityPolicy):
    """A unit is a single day."""

    unit: PeriodUnit = "day"

    def period_start(self, day: date | datetime) -> date:
        return as_date(day)

    def period_end(self, day: date | datetime) -> date:
        return as_date(day)

    def shift(self, day: date | datetime, units: int) -> date:
        return as_date(day) + timedelta(days=units)


class WeekPolicy(GranularityPolicy):
    """A unit is a Monday to Sunday week."""

    unit: PeriodUnit = "week"

    def period_start(self, day: date | datetime) -> date:
        d = as_date(day)
        return d - timedelta(days=d.weekday())

    def period_end(self, day: date | datetime) -> date:
        return self.period_start(day) + timedelta(days=6)

    def shift(self, day: date | datetime, units: int) -> date:
        return as_date(day) + timedelta(weeks=units)


class MonthPolicy(GranularityPolicy):
    """A unit is a calendar month."""

    unit: PeriodUnit = "month"

    def period_start(self, day: date | datetime) -> date:
        return as_date(day).replace(day=1)

    def period_end(self, day: date | datetime) -> date:
        d = as_date(day)
        return d.replace(day=calendar.monthrange(d.year, d.month)[1])

    def shift(self, day: date | datetime, units: int) -> date:
        return as_date(day) + relativedelta(months=units)


class YearPolicy(GranularityPolicy):
    """A unit is a calendar year."""

    unit: PeriodUnit = "year"

    def period_start(self, day: date | datetime) -> date:
        return date(as_date(day).year, 1, 1)

    def period_end(self, day: date | datetime) -> date:
        return date(as_date(day).year, 12, 31)

    def shift(self, day: date | datetime, units: int) -> date:
        return as_date(day) + relativedelta(years=units)


DAY = DayPolicy()
WEEK = WeekPolicy()
MONTH = MonthPolicy()
YEAR = YearPolicy()

_POLICIES: dict[str, GranularityPolicy] = {
    "daily": DAY,
    "all": DAY,
    "weekly": WEEK,
    "monthly": MONTH,
    "yearly": YEAR,
}

_UNIT_POLICIES: dict[str, GranularityPolicy] = {
    "day": DAY,
    "week": WEEK,
    "month": MONTH,
    "year": YEAR,
}


def validate_granularity(mode: str) -> Granularity:
    """Check a mode string against the supported granularities.

    Args:
        mode: Granularity name (case-insensitive).

    Returns:
        The normalized granularity.

    Raises:
        InvalidGranularityError: If mode is not supported.
    """
    normalized = mode.lower() if isinstance(mode, str) else mode
    if normalized not in _POLICIES:
        raise InvalidGranularityError(str(mode), list(GRANULARITIES))
    return normalized  # type: ignore[return-value]


def get_policy(mode: Granularity | str) -> GranularityPolicy:
    """Return the boundary policy for a granularity.

    Args:
        mode: Granularity name. "all" shares the daily policy.

    Returns:
        Stateless policy instance.

    Raises:
        InvalidGranularityError: If mode is not supported.
    """
    return _POLICIES[validate_granularity(mode)]


def policy_for_unit(unit: PeriodUnit) -> GranularityPolicy:
    """Return the policy that handles a period unit name."""
    return _UNIT_POLICIES[unit]


def is_daily_like(mode: Granularity | str) -> bool:
    """Return True for modes where a click picks a single day."""
    return validate_granularity(mode) in ("daily", "all")
