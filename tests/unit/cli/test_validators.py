"""Unit tests for CLI validators."""

from __future__ import annotations

from typing import get_args

import pytest
from typer import Exit

from period_picker._literal_types import Granularity, QuickSelectTab
from period_picker.cli.validators import (
    validate_granularity,
    validate_literal,
    validate_tab,
)


class TestTypeAliases:
    """Tests for type alias definitions."""

    def test_granularity_values(self) -> None:
        """Granularity should list the five picker modes."""
        assert get_args(Granularity) == ("daily", "weekly", "monthly", "yearly", "all")

    def test_quick_select_tab_values(self) -> None:
        """QuickSelectTab should accept current, past."""
        assert get_args(QuickSelectTab) == ("current", "past")


class TestValidateLiteral:
    """Tests for the generic validate_literal function."""

    def test_valid_value_returns_cast(self) -> None:
        """Test that valid values pass through."""
        assert validate_literal("weekly", Granularity, "--mode") == "weekly"

    def test_invalid_value_raises_exit_code_3(self) -> None:
        """Test that invalid values raise typer.Exit with code 3."""
        with pytest.raises(Exit) as exc:
            validate_literal("hourly", Granularity, "--mode")
        assert exc.value.exit_code == 3

    def test_error_lists_valid_options(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that the error message names the valid options."""
        with pytest.raises(Exit):
            validate_literal("hourly", Granularity, "--mode")

        captured = capsys.readouterr()
        assert "Valid options" in captured.err


class TestValidateGranularity:
    """Tests for validate_granularity."""

    @pytest.mark.parametrize("value", ["daily", "weekly", "monthly", "yearly", "all"])
    def test_all_values_valid(self, value: str) -> None:
        """Test all Granularity values pass validation."""
        assert validate_granularity(value) == value

    def test_case_insensitive(self) -> None:
        """Test that mode matching ignores case."""
        assert validate_granularity("Monthly") == "monthly"

    def test_invalid(self) -> None:
        """Test that unknown modes exit with code 3."""
        with pytest.raises(Exit) as exc:
            validate_granularity("quarterly")
        assert exc.value.exit_code == 3


class TestValidateTab:
    """Tests for validate_tab."""

    def test_valid(self) -> None:
        """Test both tabs pass validation."""
        assert validate_tab("current") == "current"
        assert validate_tab("past") == "past"

    def test_invalid(self) -> None:
        """Test that other tabs exit with code 3."""
        with pytest.raises(Exit) as exc:
            validate_tab("future")
        assert exc.value.exit_code == 3
