"""Unit tests for the PeriodPicker facade."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from unittest.mock import MagicMock

import pytest

from period_picker import PeriodPicker, PickerSettings
from period_picker.exceptions import (
    InvalidGranularityError,
    InvalidLabelForGranularityError,
)
from period_picker.types import (
    DateRange,
    NavigationCursor,
    PreviewRange,
    SelectionPhase,
    SelectionState,
)


class TestConstruction:
    """Tests for picker creation."""

    def test_defaults_from_settings(self, fixed_clock: Callable[[], date]) -> None:
        """Mode and months_view fall back to settings."""
        settings = PickerSettings(default_mode="monthly", months_view=1)
        picker = PeriodPicker(settings=settings, clock=fixed_clock)

        assert picker.mode == "monthly"
        assert picker.months_view == 1
        assert picker.phase is SelectionPhase.EMPTY

    def test_explicit_mode_wins(self, fixed_clock: Callable[[], date]) -> None:
        """Explicit arguments override settings."""
        picker = PeriodPicker(
            mode="Weekly", settings=PickerSettings(default_mode="yearly"), clock=fixed_clock
        )
        assert picker.mode == "weekly"

    def test_invalid_mode(self) -> None:
        """Unknown modes are rejected up front."""
        with pytest.raises(InvalidGranularityError):
            PeriodPicker(mode="hourly")

    def test_cursor_starts_at_today(self, fixed_clock: Callable[[], date]) -> None:
        """The calendar opens on the current month."""
        picker = PeriodPicker(clock=fixed_clock)
        assert picker.cursor == NavigationCursor(date(2024, 6, 1))

    def test_seeded_from_value(self, fixed_clock: Callable[[], date]) -> None:
        """A complete external value seeds a COMPLETE selection."""
        value = DateRange(date(2024, 1, 1), date(2024, 1, 31))
        picker = PeriodPicker(value=value, clock=fixed_clock)

        assert picker.selection == SelectionState.complete(date(2024, 1, 1), date(2024, 1, 31))
        assert picker.value == value


class TestClickFlow:
    """Two-click selection through the facade."""

    def test_daily_range(self, fixed_clock: Callable[[], date]) -> None:
        """Clicking Jan 10 then Jan 20 selects those days."""
        picker = PeriodPicker(mode="daily", clock=fixed_clock)
        picker.open()

        picker.click(date(2024, 1, 10))
        assert picker.phase is SelectionPhase.PENDING_END
        picker.click(date(2024, 1, 20))

        assert picker.selection.range == DateRange(date(2024, 1, 10), date(2024, 1, 20))

    def test_weekly_range(self, fixed_clock: Callable[[], date]) -> None:
        """Weekly clicks snap to Monday and Sunday."""
        picker = PeriodPicker(mode="weekly", clock=fixed_clock)

        picker.click(date(2024, 1, 10))
        picker.click(date(2024, 1, 24))

        assert picker.selection.range == DateRange(date(2024, 1, 8), date(2024, 1, 28))

    def test_monthly_reverse_click(self, fixed_clock: Callable[[], date]) -> None:
        """Clicking an earlier month keeps the anchor month's end."""
        picker = PeriodPicker(mode="monthly", clock=fixed_clock)

        picker.click(date(2024, 6, 1))
        picker.click(date(2024, 3, 1))

        assert picker.selection.range == DateRange(date(2024, 3, 1), date(2024, 6, 30))

    def test_third_click_restarts(self, fixed_clock: Callable[[], date]) -> None:
        """A click on a complete selection starts a new one."""
        picker = PeriodPicker(clock=fixed_clock)
        picker.click(date(2024, 1, 10))
        picker.click(date(2024, 1, 20))

        state = picker.click(date(2024, 2, 5))

        assert state == SelectionState.pending(date(2024, 2, 5))


class TestApply:
    """Tests for apply(), reset() and the callbacks."""

    def test_apply_complete(self, fixed_clock: Callable[[], date]) -> None:
        """Apply emits the range, then fires on_change before on_apply."""
        calls = MagicMock()
        picker = PeriodPicker(
            clock=fixed_clock, on_change=calls.on_change, on_apply=calls.on_apply
        )
        picker.open()
        picker.click(date(2024, 1, 10))
        picker.click(date(2024, 1, 20))

        emitted = picker.apply()

        expected = DateRange(date(2024, 1, 10), date(2024, 1, 20))
        assert emitted == expected
        assert picker.value == expected
        assert not picker.is_open
        assert [c[0] for c in calls.mock_calls] == ["on_change", "on_apply"]
        calls.on_change.assert_called_once_with(expected)

    def test_apply_while_pending_is_ignored(
        self, fixed_clock: Callable[[], date]
    ) -> None:
        """Nothing is emitted while the end is still missing."""
        on_change = MagicMock()
        picker = PeriodPicker(clock=fixed_clock, on_change=on_change)
        picker.open()
        picker.click(date(2024, 1, 10))

        assert not picker.can_apply
        assert picker.apply() is None
        assert picker.is_open
        assert picker.phase is SelectionPhase.PENDING_END
        on_change.assert_not_called()

    def test_reset_then_apply_emits_empty(
        self, fixed_clock: Callable[[], date]
    ) -> None:
        """Reset followed by Apply clears the external value."""
        on_change = MagicMock()
        picker = PeriodPicker(
            value=DateRange(date(2024, 1, 1), date(2024, 1, 31)),
            clock=fixed_clock,
            on_change=on_change,
        )
        picker.open()
        picker.next_page(3)

        picker.reset()

        assert picker.phase is SelectionPhase.EMPTY
        assert picker.cursor == NavigationCursor(date(2024, 6, 1))
        assert picker.apply() == DateRange.empty()
        on_change.assert_called_once_with(DateRange(None, None))

    def test_apply_logs(
        self, fixed_clock: Callable[[], date], caplog: pytest.LogCaptureFixture
    ) -> None:
        """Apply is logged at INFO."""
        picker = PeriodPicker(clock=fixed_clock)
        picker.quick_select("Today")

        with caplog.at_level(logging.INFO, logger="period_picker"):
            picker.apply()

        assert "Applied daily range 2024-06-15..2024-06-15" in caplog.text

    def test_close_discards_tentative(self, fixed_clock: Callable[[], date]) -> None:
        """Closing without apply reverts to the applied value."""
        value = DateRange(date(2024, 1, 1), date(2024, 1, 31))
        picker = PeriodPicker(value=value, clock=fixed_clock)
        picker.open()
        picker.click(date(2024, 3, 3))

        picker.close()

        assert picker.selection == SelectionState.from_range(value)
        assert not picker.is_open

    def test_open_with_new_value(self, fixed_clock: Callable[[], date]) -> None:
        """open(value) replaces the seed."""
        picker = PeriodPicker(clock=fixed_clock)

        picker.open(DateRange(date(2024, 5, 1), date(2024, 5, 2)))

        assert picker.is_open
        assert picker.selection.range == DateRange(date(2024, 5, 1), date(2024, 5, 2))


class TestStartOnlySeed:
    """A start-only applied value continues as an aligned selection."""

    @pytest.mark.parametrize(
        ("mode", "seed_start", "clicked", "expected"),
        [
            (
                "weekly",
                date(2024, 1, 10),
                date(2024, 1, 24),
                DateRange(date(2024, 1, 8), date(2024, 1, 28)),
            ),
            (
                "monthly",
                date(2024, 3, 15),
                date(2024, 6, 2),
                DateRange(date(2024, 3, 1), date(2024, 6, 30)),
            ),
            (
                "yearly",
                date(2021, 7, 4),
                date(2019, 2, 2),
                DateRange(date(2019, 1, 1), date(2021, 12, 31)),
            ),
        ],
    )
    def test_open_then_click_is_aligned(
        self,
        fixed_clock: Callable[[], date],
        mode: str,
        seed_start: date,
        clicked: date,
        expected: DateRange,
    ) -> None:
        """The seeded anchor is the unit start, so the range is aligned."""
        picker = PeriodPicker(mode=mode, clock=fixed_clock)
        picker.open(DateRange(seed_start))

        assert picker.phase is SelectionPhase.PENDING_END
        picker.click(clicked)

        assert picker.selection.range == expected
        assert picker.policy.is_aligned(picker.selection.range)

    def test_constructor_value_snapped(self, fixed_clock: Callable[[], date]) -> None:
        """A start-only value passed at construction is snapped too."""
        picker = PeriodPicker(
            mode="weekly", value=DateRange(date(2024, 1, 10)), clock=fixed_clock
        )

        assert picker.selection == SelectionState.pending(date(2024, 1, 8))

    def test_close_reseeds_snapped(self, fixed_clock: Callable[[], date]) -> None:
        """Closing restores the snapped seed, not the raw start."""
        picker = PeriodPicker(
            mode="monthly", value=DateRange(date(2024, 3, 15)), clock=fixed_clock
        )
        picker.open()
        picker.click(date(2024, 8, 1))

        picker.close()

        assert picker.selection == SelectionState.pending(date(2024, 3, 1))


class TestQuickSelect:
    """Tests for quick select through the facade."""

    def test_replaces_pending_selection(self, fixed_clock: Callable[[], date]) -> None:
        """Quick select completes the selection from any phase."""
        picker = PeriodPicker(clock=fixed_clock)
        picker.click(date(2024, 1, 10))

        resolved = picker.quick_select("Last Month")

        assert resolved == DateRange(date(2024, 5, 1), date(2024, 5, 31))
        assert picker.phase is SelectionPhase.COMPLETE

    def test_moves_cursor(self, fixed_clock: Callable[[], date]) -> None:
        """The calendar jumps to the resolved start."""
        picker = PeriodPicker(clock=fixed_clock)

        picker.quick_select("Last Year")

        assert picker.cursor.displayed_month == date(2023, 1, 1)

    def test_clears_overlay_and_hover(self, fixed_clock: Callable[[], date]) -> None:
        """Quick select closes the header overlay and drops the hover target."""
        picker = PeriodPicker(clock=fixed_clock)
        picker.click(date(2024, 6, 1))
        picker.hover(date(2024, 6, 9))
        picker.open_overlay("month")

        picker.quick_select("This Week")

        assert picker.overlay == "none"
        assert picker.preview is None
        assert picker.tooltip is None

    def test_yearly_shows_resolved_decade(
        self, fixed_clock: Callable[[], date]
    ) -> None:
        """After paging decades away, the year grid returns to the resolved year."""
        picker = PeriodPicker(mode="yearly", clock=fixed_clock)
        picker.next_page(3)
        assert picker.year_grid()[0] == date(2050, 1, 1)

        resolved = picker.quick_select("This Year")

        assert resolved.start in picker.year_grid()
        assert picker.year_grid()[0] == date(2020, 1, 1)
        assert picker.cursor.decade_offset == 0

    def test_label_not_offered(self, fixed_clock: Callable[[], date]) -> None:
        """Labels outside the mode are rejected and the state is kept."""
        picker = PeriodPicker(mode="monthly", clock=fixed_clock)

        with pytest.raises(InvalidLabelForGranularityError):
            picker.quick_select("Yesterday")

        assert picker.phase is SelectionPhase.EMPTY

    def test_labels_and_tab(self, fixed_clock: Callable[[], date]) -> None:
        """Labels follow the active tab."""
        picker = PeriodPicker(mode="monthly", clock=fixed_clock)

        assert picker.quick_select_labels() == ["This Month", "This Year"]
        picker.quick_select_tab = "past"
        assert picker.quick_select_labels() == ["Last Month", "Last Year"]
        assert picker.quick_select_labels("current") == ["This Month", "This Year"]

    def test_invalid_tab(self, fixed_clock: Callable[[], date]) -> None:
        """Only current and past tabs exist."""
        picker = PeriodPicker(clock=fixed_clock)
        with pytest.raises(ValueError, match="Tab must be"):
            picker.quick_select_tab = "future"  # type: ignore[assignment]


class TestShortcuts:
    """Tests for the month/year header overlays."""

    def test_month_shortcut_selects_whole_month(
        self, fixed_clock: Callable[[], date]
    ) -> None:
        """From EMPTY, a month pick selects the whole month and closes the overlay."""
        picker = PeriodPicker(mode="daily", clock=fixed_clock)
        picker.open_overlay("month")

        picker.select_month(2)

        assert picker.selection.range == DateRange(date(2024, 2, 1), date(2024, 2, 29))
        assert picker.overlay == "none"
        assert picker.cursor.displayed_month == date(2024, 6, 1)

    def test_month_shortcut_completes_pending(
        self, fixed_clock: Callable[[], date]
    ) -> None:
        """With a pending anchor, a later month extends to its end."""
        picker = PeriodPicker(mode="daily", clock=fixed_clock)
        picker.click(date(2024, 1, 10))

        picker.select_month(3)

        assert picker.selection.range == DateRange(date(2024, 1, 10), date(2024, 3, 31))

    def test_year_shortcut(self, fixed_clock: Callable[[], date]) -> None:
        """A year pick selects the whole year."""
        picker = PeriodPicker(mode="weekly", clock=fixed_clock)
        picker.open_overlay("year")

        picker.select_year(2022)

        assert picker.selection.range == DateRange(date(2022, 1, 1), date(2022, 12, 31))

    def test_grid_mode_month_is_a_click(self, fixed_clock: Callable[[], date]) -> None:
        """In monthly mode, picking a month is an ordinary click."""
        picker = PeriodPicker(mode="monthly", clock=fixed_clock)

        state = picker.select_month(4, year=2023)

        assert state == SelectionState.pending(date(2023, 4, 1))

    def test_grid_mode_year_is_a_click(self, fixed_clock: Callable[[], date]) -> None:
        """In yearly mode, picking a year is an ordinary click."""
        picker = PeriodPicker(mode="yearly", clock=fixed_clock)

        picker.select_year(2020)
        picker.select_year(2022)

        assert picker.selection.range == DateRange(date(2020, 1, 1), date(2022, 12, 31))

    def test_unknown_overlay(self, fixed_clock: Callable[[], date]) -> None:
        """Only month and year overlays exist."""
        picker = PeriodPicker(clock=fixed_clock)
        with pytest.raises(ValueError, match="Unknown overlay"):
            picker.open_overlay("decade")  # type: ignore[arg-type]


class TestHoverAndNavigation:
    """Tests for hover previews and paging."""

    def test_hover_preview_and_tooltip(self, fixed_clock: Callable[[], date]) -> None:
        """Hover after the first click previews the range."""
        picker = PeriodPicker(clock=fixed_clock)
        picker.click(date(2024, 6, 1))

        preview = picker.hover(date(2024, 6, 10))

        assert preview == PreviewRange(date(2024, 6, 1), date(2024, 6, 10))
        assert picker.tooltip == "Jun 01 → Jun 10 (10 days)"
        picker.leave()
        assert picker.preview is None

    def test_hover_does_not_change_selection(
        self, fixed_clock: Callable[[], date]
    ) -> None:
        """Hover never alters the tentative selection."""
        picker = PeriodPicker(clock=fixed_clock)
        picker.click(date(2024, 6, 1))

        picker.hover(date(2024, 6, 20))

        assert picker.selection == SelectionState.pending(date(2024, 6, 1))

    def test_paging(self, fixed_clock: Callable[[], date]) -> None:
        """Pages move the cursor without touching the selection."""
        picker = PeriodPicker(clock=fixed_clock, months_view=2)
        picker.click(date(2024, 6, 1))

        picker.next_page()

        assert picker.visible_months() == [date(2024, 7, 1), date(2024, 8, 1)]
        assert picker.prev_page(2).displayed_month == date(2024, 5, 1)
        assert picker.phase is SelectionPhase.PENDING_END

    def test_year_grid(self, fixed_clock: Callable[[], date]) -> None:
        """Year grid pages by decade."""
        picker = PeriodPicker(mode="yearly", clock=fixed_clock)

        picker.prev_page()

        assert picker.year_grid()[0] == date(2010, 1, 1)

    def test_calendar_weeks(self, fixed_clock: Callable[[], date]) -> None:
        """Month panels are laid out Monday to Sunday."""
        picker = PeriodPicker(clock=fixed_clock)
        weeks = picker.calendar_weeks(date(2024, 6, 1))

        assert weeks[0][0] == date(2024, 5, 27)


class TestLabels:
    """Tests for trigger and summary labels."""

    def test_trigger_placeholder(self, fixed_clock: Callable[[], date]) -> None:
        """No applied value shows the placeholder."""
        picker = PeriodPicker(
            clock=fixed_clock, settings=PickerSettings(placeholder="Any time")
        )
        assert picker.trigger_label == "Any time"

    def test_trigger_follows_apply(self, fixed_clock: Callable[[], date]) -> None:
        """The trigger shows the applied range, not the tentative one."""
        picker = PeriodPicker(clock=fixed_clock)
        picker.quick_select("This Month")
        assert picker.trigger_label == "Select date range"

        picker.apply()

        assert picker.trigger_label == "Jun 01, 24 - Jun 30, 24"

    def test_summary_while_pending(self, fixed_clock: Callable[[], date]) -> None:
        """Summary shows the start only while waiting for the end."""
        picker = PeriodPicker(clock=fixed_clock)
        picker.click(date(2024, 6, 3))

        assert picker.summary_label == "Jun 03, 2024"


def test_pickers_are_isolated(fixed_clock: Callable[[], date]) -> None:
    """Two pickers on one page never share state."""
    first = PeriodPicker(clock=fixed_clock)
    second = PeriodPicker(mode="monthly", clock=fixed_clock)

    first.click(date(2024, 1, 10))
    second.next_page()

    assert second.phase is SelectionPhase.EMPTY
    assert first.cursor == NavigationCursor(date(2024, 6, 1))
