"""Text shown around the picker: trigger button, range summary, tooltip."""

from __future__ import annotations

from period_picker.types import DateRange, PreviewRange

DEFAULT_TRIGGER_FORMAT = "%b %d, %y"
DEFAULT_SUMMARY_FORMAT = "%b %d, %Y"
DEFAULT_PLACEHOLDER = "Select date range"
TOOLTIP_FORMAT = "%b %d"


def format_trigger(
    value: DateRange | None,
    fmt: str = DEFAULT_TRIGGER_FORMAT,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> str:
    """Label for the button that opens the picker.

    Shows the applied range when it is complete, the placeholder otherwise.

    Example:
        ```python
        format_trigger(DateRange(date(2024, 6, 1), date(2024, 6, 30)))
        # "Jun 01, 24 - Jun 30, 24"
        ```
    """
    if value is None or value.start is None or value.end is None:
        return placeholder
    return f"{value.start.strftime(fmt)} - {value.end.strftime(fmt)}"


def format_summary(value: DateRange | None, fmt: str = DEFAULT_SUMMARY_FORMAT) -> str:
    """Header text for the tentative range inside the open picker.

    A start-only range shows just its start; an empty range gives "".
    """
    if value is None or value.start is None:
        return ""
    if value.end is None:
        return value.start.strftime(fmt)
    return f"{value.start.strftime(fmt)} - {value.end.strftime(fmt)}"


def format_tooltip(preview: PreviewRange) -> str:
    """Hover tooltip for a daily preview, e.g. "Jun 01 → Jun 10 (10 days)"."""
    return (
        f"{preview.start.strftime(TOOLTIP_FORMAT)} → "
        f"{preview.end.strftime(TOOLTIP_FORMAT)} ({preview.days} days)"
    )
