"""PeriodPicker facade for one date range picker.

The PeriodPicker class is the unified entry point of the selection engine,
orchestrating RangeSelectionStateMachine, PreviewCalculator,
QuickSelectResolver and Navigator around one explicit state tuple
(selection state, hover target, navigation cursor).

Example:
    Two clicks, then apply:

    ```python
    picker = PeriodPicker(mode="weekly", on_change=print)
    picker.open()
    picker.click(date(2024, 1, 10))
    picker.click(date(2024, 1, 24))
    picker.apply()  # prints DateRange(start=2024-01-08, end=2024-01-28)
    ```

    Quick select:

    ```python
    picker = PeriodPicker(clock=lambda: date(2024, 6, 15))
    picker.quick_select("This Month")
    picker.selection.range  # 2024-06-01 .. 2024-06-30
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime
from typing import Literal

from period_picker._internal.config import PickerSettings
from period_picker._internal.formatting import format_summary, format_trigger
from period_picker._internal.navigation import Navigator, month_grid_days
from period_picker._internal.policy import GranularityPolicy, validate_granularity
from period_picker._internal.preview import PreviewCalculator
from period_picker._internal.quick_select import QuickSelectResolver
from period_picker._internal.state_machine import RangeSelectionStateMachine
from period_picker._literal_types import Granularity, MonthsView, QuickSelectTab
from period_picker.types import (
    DateRange,
    NavigationCursor,
    PreviewRange,
    SelectionPhase,
    SelectionState,
    as_date,
)

_logger = logging.getLogger(__name__)

Overlay = Literal["none", "month", "year"]


class PeriodPicker:
    """One picker instance: its tentative selection, hover and viewport.

    Each instance owns its state outright; two pickers on one page never
    share anything. All selection logic is delegated to pure transition
    functions, so the facade only stores results and fires callbacks.

    Attributes:
        on_change: Called with the emitted range on Apply.
        on_apply: Called after on_change on Apply.
    """

    # =========================================================================
    # LIFECYCLE & CONSTRUCTION
    # =========================================================================

    def __init__(
        self,
        mode: Granularity | str | None = None,
        months_view: MonthsView | None = None,
        value: DateRange | None = None,
        on_change: Callable[[DateRange], None] | None = None,
        on_apply: Callable[[], None] | None = None,
        clock: Callable[[], date | datetime] | None = None,
        settings: PickerSettings | None = None,
    ) -> None:
        """Create a picker.

        Args:
            mode: Granularity fixed for this picker. Defaults to
                settings.default_mode.
            months_view: Month panels shown side by side. Defaults to
                settings.months_view. Rendering only.
            value: Externally applied range used to seed the selection.
            on_change: Callback fired with the emitted range on Apply.
            on_apply: Callback fired after on_change on Apply.
            clock: Zero-argument callable returning "now". Defaults to
                date.today.
            settings: Picker defaults. Defaults to PickerSettings().

        Raises:
            InvalidGranularityError: If mode is not supported.
        """
        self._settings = settings or PickerSettings()
        self._mode: Granularity = validate_granularity(
            mode if mode is not None else self._settings.default_mode
        )
        self._months_view: MonthsView = (
            months_view if months_view is not None else self._settings.months_view
        )
        self._clock: Callable[[], date | datetime] = clock or date.today
        self.on_change = on_change
        self.on_apply = on_apply

        self._machine = RangeSelectionStateMachine(self._mode)
        self._previewer = PreviewCalculator(self._mode)
        self._resolver = QuickSelectResolver(self._mode)
        self._navigator = Navigator(self._mode)

        self._value: DateRange | None = value
        self._state = self._machine.seed(value)
        self._hovered: date | None = None
        self._cursor = self._navigator.home(self.today())
        self._overlay: Overlay = "none"
        self._tab: QuickSelectTab = "current"
        self._is_open = False

    def open(self, value: DateRange | None = None) -> None:
        """Start a fresh activation.

        Args:
            value: New externally applied range. If None, the picker's
                current applied value seeds the selection.
        """
        if value is not None:
            self._value = value
        self._state = self._machine.seed(self._value)
        self._hovered = None
        self._overlay = "none"
        self._is_open = True
        _logger.debug("Opened %s picker with %s", self._mode, self._state.to_dict())

    def close(self) -> None:
        """End the activation without applying; the tentative range is dropped."""
        self._state = self._machine.seed(self._value)
        self._hovered = None
        self._overlay = "none"
        self._is_open = False
        _logger.debug("Closed %s picker without applying", self._mode)

    def today(self) -> date:
        """Return the clock's current date."""
        return as_date(self._clock())

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def mode(self) -> Granularity:
        """Granularity fixed for this picker."""
        return self._mode

    @property
    def months_view(self) -> MonthsView:
        """Number of month panels shown side by side."""
        return self._months_view

    @property
    def policy(self) -> GranularityPolicy:
        """Boundary policy of this picker's granularity."""
        return self._machine.policy

    @property
    def value(self) -> DateRange | None:
        """Last applied range, or the seed value if nothing was applied."""
        return self._value

    @property
    def selection(self) -> SelectionState:
        """Tentative selection of the current activation."""
        return self._state

    @property
    def phase(self) -> SelectionPhase:
        """Phase of the tentative selection."""
        return self._state.phase

    @property
    def cursor(self) -> NavigationCursor:
        """Displayed calendar window."""
        return self._cursor

    @property
    def is_open(self) -> bool:
        """True between open() and apply()/close()."""
        return self._is_open

    @property
    def overlay(self) -> Overlay:
        """Header overlay currently shown ("none", "month" or "year")."""
        return self._overlay

    @property
    def can_apply(self) -> bool:
        """True unless the selection is waiting for its second click."""
        return self._machine.apply(self._state) is not None

    # =========================================================================
    # SELECTION EVENTS
    # =========================================================================

    def click(self, unit: date | datetime) -> SelectionState:
        """Click the day, week, month or year containing unit.

        Args:
            unit: Any date inside the clicked unit.

        Returns:
            The new tentative selection.
        """
        previous = self._state
        self._state = self._machine.click(previous, unit)
        _logger.debug(
            "Click %s: %s -> %s",
            as_date(unit),
            previous.phase.value,
            self._state.to_dict(),
        )
        return self._state

    def select_month(self, month: int, year: int | None = None) -> SelectionState:
        """Pick a month from the month grid or header overlay.

        In monthly mode this is an ordinary click on that month. In other
        modes it is the overlay shortcut, which can select the whole month
        at once, and it closes the overlay.

        Args:
            month: Month number, 1-12.
            year: Year of the month. Defaults to the displayed year.

        Returns:
            The new tentative selection.
        """
        target = date(year if year is not None else self._cursor.displayed_year, month, 1)
        if self._mode == "monthly":
            return self.click(target)
        self._state = self._machine.pick_month(self._state, target)
        self._overlay = "none"
        _logger.debug("Month shortcut %s: %s", target, self._state.to_dict())
        return self._state

    def select_year(self, year: int) -> SelectionState:
        """Pick a year from the year grid or header overlay.

        In yearly mode this is an ordinary click on that year. In other
        modes it is the overlay shortcut, and it closes the overlay.

        Args:
            year: Calendar year.

        Returns:
            The new tentative selection.
        """
        target = date(year, 1, 1)
        if self._mode == "yearly":
            return self.click(target)
        self._state = self._machine.pick_year(self._state, target)
        self._overlay = "none"
        _logger.debug("Year shortcut %s: %s", year, self._state.to_dict())
        return self._state

    def quick_select(self, label: str) -> DateRange:
        """Replace the selection with a preset range.

        The selection becomes COMPLETE whatever its phase, the calendar
        jumps to the resolved start (its decade in yearly mode), and any
        open overlay or hover target is dropped.

        Args:
            label: Preset label offered by this picker's mode.

        Returns:
            The resolved range.

        Raises:
            InvalidLabelForGranularityError: If this mode does not offer label.
        """
        today = self.today()
        resolved = self._resolver.resolve(label, today)
        self._state = SelectionState.from_range(resolved)
        self._cursor = self._navigator.focus(
            self._cursor, resolved.start or today, today
        )
        self._overlay = "none"
        self._hovered = None
        return resolved

    def quick_select_labels(self, tab: QuickSelectTab | None = None) -> list[str]:
        """Return the preset labels on a tab (default: the active tab)."""
        return self._resolver.labels(tab or self._tab)

    @property
    def quick_select_tab(self) -> QuickSelectTab:
        """Quick-select tab currently shown."""
        return self._tab

    @quick_select_tab.setter
    def quick_select_tab(self, tab: QuickSelectTab) -> None:
        if tab not in ("current", "past"):
            raise ValueError(f"Tab must be 'current' or 'past'. Got: {tab}")
        self._tab = tab

    # =========================================================================
    # HOVER
    # =========================================================================

    def hover(self, day: date | datetime) -> PreviewRange | None:
        """Point at a day and return the resulting preview, if any."""
        self._hovered = as_date(day)
        return self.preview

    def leave(self) -> None:
        """Pointer left the calendar; drop the hover target."""
        self._hovered = None

    @property
    def preview(self) -> PreviewRange | None:
        """Advisory highlight for the current hover target."""
        return self._previewer.preview(self._state, self._hovered)

    @property
    def tooltip(self) -> str | None:
        """Hover tooltip text in daily modes."""
        return self._previewer.tooltip(self._state, self._hovered)

    # =========================================================================
    # NAVIGATION
    # =========================================================================

    def next_page(self, steps: int = 1) -> NavigationCursor:
        """Show the next month, year or decade."""
        self._cursor = self._navigator.advance(self._cursor, steps)
        return self._cursor

    def prev_page(self, steps: int = 1) -> NavigationCursor:
        """Show the previous month, year or decade."""
        self._cursor = self._navigator.retreat(self._cursor, steps)
        return self._cursor

    def open_overlay(self, overlay: Overlay) -> None:
        """Show the month or year overlay from the calendar header."""
        if overlay not in ("none", "month", "year"):
            raise ValueError(f"Unknown overlay: {overlay}")
        self._overlay = overlay

    def cancel_overlay(self) -> None:
        """Hide the header overlay without picking anything."""
        self._overlay = "none"

    def visible_months(self) -> list[date]:
        """First day of each displayed month panel."""
        return self._navigator.visible_months(self._cursor, self._months_view)

    def calendar_weeks(self, month: date) -> list[list[date]]:
        """Monday-to-Sunday weeks shown for a month panel."""
        return month_grid_days(month)

    def month_grid(self) -> list[date]:
        """Months of the displayed year, for the month grid."""
        return self._navigator.month_grid(self._cursor)

    def year_grid(self) -> list[date]:
        """Years of the displayed decade, for the year grid."""
        return self._navigator.year_grid(self._cursor, self.today())

    # =========================================================================
    # APPLY & RESET
    # =========================================================================

    def apply(self) -> DateRange | None:
        """Commit the tentative selection.

        COMPLETE emits its range; EMPTY emits the null-filled range. While
        waiting for a second click nothing happens and None is returned.

        Returns:
            The emitted range, or None if the selection is incomplete.
        """
        emitted = self._machine.apply(self._state)
        if emitted is None:
            _logger.debug("Apply ignored: selection is waiting for its end")
            return None
        self._value = emitted
        self._is_open = False
        self._hovered = None
        _logger.info(
            "Applied %s range %s..%s", self._mode, emitted.start, emitted.end
        )
        if self.on_change is not None:
            self.on_change(emitted)
        if self.on_apply is not None:
            self.on_apply()
        return emitted

    def reset(self) -> None:
        """Clear the tentative selection and show the current month again."""
        self._state = self._machine.reset()
        self._hovered = None
        self._cursor = self._navigator.home(self.today())
        _logger.info("Reset %s picker", self._mode)

    # =========================================================================
    # LABELS
    # =========================================================================

    @property
    def trigger_label(self) -> str:
        """Text for the button that opens the picker."""
        return format_trigger(
            self._value, self._settings.trigger_format, self._settings.placeholder
        )

    @property
    def summary_label(self) -> str:
        """Text for the tentative range inside the open picker."""
        return format_summary(self._state.range, self._settings.summary_format)

    def __repr__(self) -> str:
        """Return picker mode and phase."""
        return (
            f"PeriodPicker(mode={self._mode!r}, phase={self._state.phase.value!r}, "
            f"range={self._state.range.to_dict()!r})"
        )
