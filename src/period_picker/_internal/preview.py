"""Hover preview while a selection waits for its second click.

In daily modes the preview spans from the anchor to the hovered day, in
whichever order they fall. In week, month and year modes a partial span
inside a unit means nothing, so the preview is the anchored unit as a whole.
Previews are advisory: nothing here writes into the selection.
"""

from __future__ import annotations

from datetime import date, datetime

from period_picker._internal.formatting import format_tooltip
from period_picker._internal.policy import get_policy, is_daily_like
from period_picker._literal_types import Granularity
from period_picker.types import PreviewRange, SelectionPhase, SelectionState, as_date


class PreviewCalculator:
    """Computes hover previews for one granularity."""

    def __init__(self, mode: Granularity | str = "daily") -> None:
        """Initialize calculator.

        Args:
            mode: Active granularity.

        Raises:
            InvalidGranularityError: If mode is not supported.
        """
        self._policy = get_policy(mode)
        self._daily = is_daily_like(mode)

    def preview(
        self,
        state: SelectionState,
        hovered: date | datetime | None,
    ) -> PreviewRange | None:
        """Return the preview for a hover event.

        Args:
            state: Current selection state.
            hovered: Day under the pointer, or None when nothing is hovered.

        Returns:
            None unless the state is PENDING_END. In daily modes also None
            when nothing is hovered.
        """
        if state.phase is not SelectionPhase.PENDING_END or state.anchor is None:
            return None
        anchor = state.anchor
        if not self._daily:
            return PreviewRange(
                self._policy.period_start(anchor),
                self._policy.period_end(anchor),
                whole_unit=True,
            )
        if hovered is None:
            return None
        day = as_date(hovered)
        return PreviewRange(min(anchor, day), max(anchor, day))

    def tooltip(
        self,
        state: SelectionState,
        hovered: date | datetime | None,
    ) -> str | None:
        """Return hover tooltip text such as "Jun 01 → Jun 10 (10 days)".

        Only daily modes show a tooltip.
        """
        if not self._daily:
            return None
        preview = self.preview(state, hovered)
        if preview is None:
            return None
        return format_tooltip(preview)
