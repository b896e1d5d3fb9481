"""Exception hierarchy for period_picker.

All library exceptions inherit from PeriodPickerError, enabling callers to
catch all library errors with a single except clause while still allowing
fine-grained exception handling when needed.

Selection transitions themselves never raise: they are total over valid
dates. Exceptions are reserved for inputs that cannot be given a meaning,
such as a quick-select label the active granularity does not offer or a
seed range whose start falls after its end.
"""

from __future__ import annotations

from datetime import date
from typing import Any


class PeriodPickerError(Exception):
    """Base exception for all period_picker errors.

    All library exceptions inherit from this class, allowing callers to:
    - Catch all library errors: except PeriodPickerError
    - Handle specific errors: except InvalidLabelForGranularityError
    - Serialize errors: error.to_dict()
    """

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Human-readable error message.
            code: Machine-readable error code for programmatic handling.
            details: Additional structured data about the error.
        """
        super().__init__(message)
        self._message = message
        self._code = code
        self._details = details or {}

    @property
    def code(self) -> str:
        """Machine-readable error code."""
        return self._code

    @property
    def message(self) -> str:
        """Human-readable error message."""
        return self._message

    @property
    def details(self) -> dict[str, Any]:
        """Additional structured error data."""
        return self._details

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/JSON output.

        Returns:
            Dictionary with keys: code, message, details.
            All values are JSON-serializable.
        """
        return {
            "code": self._code,
            "message": self._message,
            "details": self._details,
        }

    def __str__(self) -> str:
        """Return human-readable error message."""
        return self._message

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return (
            f"{self.__class__.__name__}(message={self._message!r}, code={self._code!r})"
        )


# Configuration Exceptions


class ConfigError(PeriodPickerError):
    """Base for configuration-related errors.

    Raised when there's a problem with the config file or with
    environment variable overrides.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize ConfigError.

        Args:
            message: Human-readable error message.
            details: Additional structured data.
        """
        super().__init__(message, code="CONFIG_ERROR", details=details)


# Validation Exceptions


class InvalidDateRangeError(PeriodPickerError):
    """A range was built with its start after its end.

    Ranges produced by the selection engine are ordered by construction, so
    this is only raised for externally supplied values.

    Example:
        ```python
        try:
            DateRange(date(2024, 2, 1), date(2024, 1, 1))
        except InvalidDateRangeError as e:
            print(e.start, e.end)
        ```
    """

    def __init__(self, start: date, end: date) -> None:
        """Initialize InvalidDateRangeError.

        Args:
            start: Requested start date.
            end: Requested end date.
        """
        self._start = start
        self._end = end

        message = (
            f"Range start {start.isoformat()} is after range end {end.isoformat()}"
        )
        details: dict[str, Any] = {
            "start": start.isoformat(),
            "end": end.isoformat(),
        }
        super().__init__(message, code="INVALID_DATE_RANGE", details=details)

    @property
    def start(self) -> date:
        """Requested start date."""
        return self._start

    @property
    def end(self) -> date:
        """Requested end date."""
        return self._end


class InvalidGranularityError(PeriodPickerError):
    """Granularity value is not one of the supported modes."""

    def __init__(self, mode: str, valid_modes: list[str]) -> None:
        """Initialize InvalidGranularityError.

        Args:
            mode: The rejected mode value.
            valid_modes: Supported granularity names.
        """
        self._mode = mode
        self._valid_modes = valid_modes

        message = f"Unknown granularity {mode!r}. Valid: {', '.join(valid_modes)}"
        super().__init__(
            message,
            code="INVALID_GRANULARITY",
            details={"mode": mode, "valid_modes": valid_modes},
        )

    @property
    def mode(self) -> str:
        """The rejected mode value."""
        return self._mode

    @property
    def valid_modes(self) -> list[str]:
        """Supported granularity names."""
        return self._valid_modes


class InvalidLabelForGranularityError(PeriodPickerError):
    """Quick-select label is not offered for the active granularity.

    The picker only shows valid labels, so this is raised when a caller asks
    for one anyway. The valid_labels property lists what the mode offers.

    Example:
        ```python
        try:
            resolve_label("Today", now, mode="yearly")
        except InvalidLabelForGranularityError as e:
            print(f"Try one of: {', '.join(e.valid_labels)}")
        ```
    """

    def __init__(
        self,
        label: str,
        mode: str | None,
        valid_labels: list[str],
        *,
        message: str | None = None,
        code: str = "INVALID_LABEL_FOR_GRANULARITY",
    ) -> None:
        """Initialize InvalidLabelForGranularityError.

        Args:
            label: The requested label.
            mode: Active granularity, or None when no mode was given.
            valid_labels: Labels the mode (or the resolver) accepts.
            message: Override for the default message.
            code: Machine-readable error code.
        """
        self._label = label
        self._mode = mode
        self._valid_labels = valid_labels

        if message is None:
            message = f"Quick select {label!r} is not available in {mode} mode"
        details: dict[str, Any] = {
            "label": label,
            "mode": mode,
            "valid_labels": valid_labels,
        }
        super().__init__(message, code=code, details=details)

    @property
    def label(self) -> str:
        """The requested label."""
        return self._label

    @property
    def mode(self) -> str | None:
        """Active granularity, if one was given."""
        return self._mode

    @property
    def valid_labels(self) -> list[str]:
        """Labels that would have been accepted."""
        return self._valid_labels


class UnknownQuickSelectLabelError(InvalidLabelForGranularityError):
    """Quick-select label is not known in any granularity."""

    def __init__(self, label: str, valid_labels: list[str]) -> None:
        """Initialize UnknownQuickSelectLabelError.

        Args:
            label: The requested label.
            valid_labels: Every label the resolver knows.
        """
        super().__init__(
            label,
            None,
            valid_labels,
            message=f"Unknown quick select label {label!r}",
            code="UNKNOWN_QUICK_SELECT_LABEL",
        )
