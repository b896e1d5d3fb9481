"""Calendar viewport navigation.

The cursor says which month (or, in year view, which decade) is on screen.
Moving it never touches the selection, and the selection never limits where
it can go.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from period_picker._internal.policy import WEEK, validate_granularity
from period_picker._literal_types import Granularity, MonthsView
from period_picker.types import NavigationCursor, as_date

YEAR_GRID_SIZE = 12


class Navigator:
    """Page-sized cursor moves for one granularity.

    Day and week views page by one month, the month grid pages by one year,
    and the year grid pages by one decade.

    Example:
        ```python
        nav = Navigator("daily")
        cursor = nav.home(date(2024, 6, 15))
        cursor = nav.advance(cursor)  # July 2024 on screen
        nav.visible_months(cursor, 2)  # [2024-07-01, 2024-08-01]
        ```
    """

    def __init__(self, mode: Granularity | str = "daily") -> None:
        """Initialize navigator.

        Args:
            mode: Active granularity.

        Raises:
            InvalidGranularityError: If mode is not supported.
        """
        self._mode = validate_granularity(mode)

    @property
    def mode(self) -> Granularity:
        """Granularity this navigator pages for."""
        return self._mode

    def home(self, now: date | datetime) -> NavigationCursor:
        """Return a cursor showing the month containing now."""
        return NavigationCursor(as_date(now))

    def focus(
        self,
        cursor: NavigationCursor,
        day: date | datetime,
        today: date | datetime | None = None,
    ) -> NavigationCursor:
        """Jump to the month containing day.

        In yearly mode, when today is given, the decade offset is moved so
        the year grid shows the decade containing day. Otherwise the offset
        is kept.
        """
        day = as_date(day)
        if self._mode == "yearly" and today is not None:
            offset = day.year // 10 - as_date(today).year // 10
            return NavigationCursor(day, offset)
        return NavigationCursor(day, cursor.decade_offset)

    def advance(self, cursor: NavigationCursor, steps: int = 1) -> NavigationCursor:
        """Move forward by steps pages."""
        if self._mode == "yearly":
            return NavigationCursor(
                cursor.displayed_month, cursor.decade_offset + steps
            )
        months = 12 * steps if self._mode == "monthly" else steps
        return NavigationCursor(
            cursor.displayed_month + relativedelta(months=months),
            cursor.decade_offset,
        )

    def retreat(self, cursor: NavigationCursor, steps: int = 1) -> NavigationCursor:
        """Move back by steps pages."""
        return self.advance(cursor, -steps)

    def visible_months(
        self,
        cursor: NavigationCursor,
        months_view: MonthsView = 2,
    ) -> list[date]:
        """Return the first day of each month panel on screen.

        Month and year grids show one panel whatever months_view says.
        """
        panels = months_view if self._mode in ("daily", "all", "weekly") else 1
        return [
            cursor.displayed_month + relativedelta(months=offset)
            for offset in range(panels)
        ]

    def decade_base(self, cursor: NavigationCursor, today: date | datetime) -> int:
        """Return the first year of the displayed decade."""
        return (as_date(today).year // 10) * 10 + 10 * cursor.decade_offset

    def year_grid(self, cursor: NavigationCursor, today: date | datetime) -> list[date]:
        """Return Jan 1 of each year in the year grid."""
        base = self.decade_base(cursor, today)
        return [date(base + i, 1, 1) for i in range(YEAR_GRID_SIZE)]

    def month_grid(self, cursor: NavigationCursor) -> list[date]:
        """Return the first day of each month of the displayed year."""
        return [date(cursor.displayed_year, month, 1) for month in range(1, 13)]


def month_grid_days(month: date | datetime) -> list[list[date]]:
    """Return the weeks a calendar panel shows for a month.

    Each week runs Monday to Sunday. The first and last weeks are padded
    with days from the neighbouring months.

    Example:
        ```python
        weeks = month_grid_days(date(2024, 1, 1))
        weeks[0][0]  # date(2024, 1, 1), a Monday
        weeks[-1][-1]  # date(2024, 2, 4)
        ```
    """
    first = as_date(month).replace(day=1)
    last = first + relativedelta(months=1) - timedelta(days=1)
    day = WEEK.period_start(first)
    stop = WEEK.period_end(last)
    weeks: list[list[date]] = []
    while day <= stop:
        weeks.append([day + timedelta(days=i) for i in range(7)])
        day += timedelta(days=7)
    return weeks
