"""Two-click range selection as pure state transitions.

Every function here takes the current SelectionState and an event and
returns the next state. Nothing is mutated, nothing is logged, no clock is
read; the PeriodPicker facade owns the state and feeds events in.

Click protocol:
    EMPTY or COMPLETE --click(u)--> PENDING_END(start(u))
    PENDING_END(a) --click(u), start(u) <  a--> COMPLETE(start(u), end(a))
    PENDING_END(a) --click(u), start(u) >= a--> COMPLETE(a, end(u))

Clicking before the anchor only pulls the start earlier: the end stays at
the end of the anchor's own unit.
"""

from __future__ import annotations

from datetime import date, datetime

from period_picker._internal.policy import MONTH, YEAR, GranularityPolicy, get_policy
from period_picker._literal_types import Granularity
from period_picker.types import DateRange, SelectionPhase, SelectionState


def click(
    state: SelectionState,
    unit: date | datetime,
    policy: GranularityPolicy,
) -> SelectionState:
    """Apply a click on the unit containing a date.

    Args:
        state: Current selection state.
        unit: Any date inside the clicked day/week/month/year.
        policy: Boundary policy of the active granularity.

    Returns:
        The next state. Always PENDING_END or COMPLETE.
    """
    start = policy.period_start(unit)
    if state.phase is not SelectionPhase.PENDING_END or state.anchor is None:
        return SelectionState.pending(start)
    anchor = state.anchor
    if start < anchor:
        return SelectionState.complete(start, policy.period_end(anchor))
    return SelectionState.complete(anchor, policy.period_end(unit))


def pick_whole_unit(
    state: SelectionState,
    unit: date | datetime,
    unit_policy: GranularityPolicy,
) -> SelectionState:
    """Apply a month or year picked from the header overlay.

    Unlike click(), a pick with nothing pending selects the whole unit at
    once. With a pick pending it completes the range using the same
    ordering rule as click(), measured in the overlay's unit.

    Args:
        state: Current selection state.
        unit: Any date inside the picked month or year.
        unit_policy: MONTH or YEAR policy.

    Returns:
        A COMPLETE state.
    """
    start = unit_policy.period_start(unit)
    end = unit_policy.period_end(unit)
    if state.phase is not SelectionPhase.PENDING_END or state.anchor is None:
        return SelectionState.complete(start, end)
    anchor = state.anchor
    if start < anchor:
        return SelectionState.complete(start, unit_policy.period_end(anchor))
    return SelectionState.complete(anchor, end)


def seed(value: DateRange | None, policy: GranularityPolicy) -> SelectionState:
    """Seed a state from an externally applied range.

    A start-only value becomes PENDING_END anchored at the start of the
    unit containing it, so the next click completes an aligned range.
    Complete values are kept as supplied.
    """
    state = SelectionState.from_range(value)
    if state.phase is SelectionPhase.PENDING_END and state.anchor is not None:
        return SelectionState.pending(policy.period_start(state.anchor))
    return state


def apply(state: SelectionState) -> DateRange | None:
    """Return the range an Apply would emit, or None if it cannot apply.

    COMPLETE emits its range, EMPTY emits the null-filled range, and
    PENDING_END cannot be applied.
    """
    if state.phase is SelectionPhase.PENDING_END:
        return None
    if state.phase is SelectionPhase.EMPTY:
        return DateRange.empty()
    return state.range


def reset() -> SelectionState:
    """Return the state after Reset."""
    return SelectionState.empty()


class RangeSelectionStateMachine:
    """Click transitions bound to one granularity.

    Example:
        ```python
        machine = RangeSelectionStateMachine("monthly")
        state = machine.click(SelectionState.empty(), date(2024, 3, 15))
        state = machine.click(state, date(2024, 6, 2))
        state.range  # DateRange(2024-03-01, 2024-06-30)
        ```
    """

    def __init__(self, mode: Granularity | str = "daily") -> None:
        """Initialize state machine.

        Args:
            mode: Active granularity.

        Raises:
            InvalidGranularityError: If mode is not supported.
        """
        self._policy = get_policy(mode)

    @property
    def policy(self) -> GranularityPolicy:
        """Boundary policy used for snapping."""
        return self._policy

    def seed(self, value: DateRange | None) -> SelectionState:
        """Seed a state from an externally applied range."""
        return seed(value, self._policy)

    def click(self, state: SelectionState, unit: date | datetime) -> SelectionState:
        """Apply a click on a unit."""
        return click(state, unit, self._policy)

    def pick_month(self, state: SelectionState, month: date | datetime) -> SelectionState:
        """Apply a whole-month pick from the header overlay."""
        return pick_whole_unit(state, month, MONTH)

    def pick_year(self, state: SelectionState, year: date | datetime) -> SelectionState:
        """Apply a whole-year pick from the header overlay."""
        return pick_whole_unit(state, year, YEAR)

    def apply(self, state: SelectionState) -> DateRange | None:
        """Return the range an Apply would emit."""
        return apply(state)

    def reset(self) -> SelectionState:
        """Return the state after Reset."""
        return reset()
