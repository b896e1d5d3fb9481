"""Configuration management for period_picker.

Handles picker defaults (granularity, number of month panels, label
formats). Configuration is stored in TOML format at
~/.periodpick/config.toml by default, under a [picker] table.
"""

from __future__ import annotations

import logging
import os
import sys

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from pathlib import Path
from typing import Any, get_args

import tomli_w
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from period_picker._internal.formatting import (
    DEFAULT_PLACEHOLDER,
    DEFAULT_SUMMARY_FORMAT,
    DEFAULT_TRIGGER_FORMAT,
)
from period_picker._literal_types import Granularity, MonthsView
from period_picker.exceptions import ConfigError

_logger = logging.getLogger(__name__)

VALID_MODES: tuple[str, ...] = get_args(Granularity)

# Environment overrides, applied on top of the config file
ENV_OVERRIDES = {
    "PERIODPICK_MODE": "default_mode",
    "PERIODPICK_MONTHS_VIEW": "months_view",
}


class PickerSettings(BaseModel):
    """Immutable picker defaults.

    This is a frozen Pydantic model: all fields are validated on
    construction and the object cannot be modified afterwards.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_mode: Granularity = "daily"
    """Granularity used when a picker is opened without one."""

    months_view: MonthsView = 2
    """Number of month panels shown side by side (1 or 2)."""

    trigger_format: str = DEFAULT_TRIGGER_FORMAT
    """strftime format for the applied range on the trigger button."""

    summary_format: str = DEFAULT_SUMMARY_FORMAT
    """strftime format for the tentative range inside the picker."""

    placeholder: str = DEFAULT_PLACEHOLDER
    """Trigger text when no range is applied."""

    @field_validator("default_mode", mode="before")
    @classmethod
    def validate_mode(cls, v: Any) -> str:
        """Validate and normalize mode to lowercase."""
        if not isinstance(v, str):
            raise ValueError(f"Mode must be a string. Got: {type(v).__name__}")
        v_lower = v.strip().lower()
        if v_lower not in VALID_MODES:
            valid = ", ".join(VALID_MODES)
            raise ValueError(f"Mode must be one of: {valid}. Got: {v}")
        return v_lower

    @field_validator("months_view", mode="before")
    @classmethod
    def validate_months_view(cls, v: Any) -> int:
        """Accept numeric strings from env vars and the CLI."""
        if isinstance(v, str) and v.strip().isdigit():
            return int(v.strip())
        return v  # type: ignore[no-any-return]

    @field_validator("trigger_format", "summary_format", "placeholder")
    @classmethod
    def validate_non_empty(cls, v: str) -> str:
        """Validate string fields are non-empty."""
        if not v or not v.strip():
            raise ValueError("Field cannot be empty")
        return v


SETTINGS_KEYS: tuple[str, ...] = tuple(PickerSettings.model_fields)


class ConfigManager:
    """Loads and stores picker settings.

    Handles:
    - Reading settings from the [picker] table of the config file
    - Applying PERIODPICK_* environment overrides
    - Writing settings back

    Config file location (in priority order):
    1. Explicit config_path parameter
    2. PERIODPICK_CONFIG_PATH environment variable
    3. Default: ~/.periodpick/config.toml
    """

    DEFAULT_CONFIG_PATH = Path.home() / ".periodpick" / "config.toml"

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize ConfigManager.

        Args:
            config_path: Override config file location.
                         Default: ~/.periodpick/config.toml
        """
        if config_path is not None:
            self._config_path = config_path
        elif "PERIODPICK_CONFIG_PATH" in os.environ:
            self._config_path = Path(os.environ["PERIODPICK_CONFIG_PATH"])
        else:
            self._config_path = self.DEFAULT_CONFIG_PATH

    @property
    def config_path(self) -> Path:
        """Return the config file path."""
        return self._config_path

    def _read_config(self) -> dict[str, Any]:
        """Read and parse the config file.

        Returns:
            Parsed config dictionary, or empty dict if file doesn't exist.
        """
        if not self._config_path.exists():
            return {}

        try:
            with self._config_path.open("rb") as f:
                return dict(tomllib.load(f))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(
                f"Invalid TOML in config file: {e}",
                details={"path": str(self._config_path)},
            ) from e

    def _write_config(self, config: dict[str, Any]) -> None:
        """Write config to file, creating directory if needed.

        Args:
            config: Configuration dictionary to write.
        """
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        with self._config_path.open("wb") as f:
            tomli_w.dump(config, f)

    def _build_settings(self, values: dict[str, Any], source: str) -> PickerSettings:
        try:
            return PickerSettings(**values)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise ConfigError(
                f"Invalid picker settings from {source}: {'; '.join(errors)}",
                details={"path": str(self._config_path), "errors": errors},
            ) from e

    def file_settings(self) -> dict[str, Any]:
        """Return the raw [picker] table from the config file."""
        picker = self._read_config().get("picker", {})
        if not isinstance(picker, dict):
            raise ConfigError(
                "[picker] must be a table",
                details={"path": str(self._config_path)},
            )
        return dict(picker)

    def load_settings(self) -> PickerSettings:
        """Resolve settings from the config file and environment.

        Resolution order (later wins):
        1. Built-in defaults
        2. [picker] table of the config file
        3. PERIODPICK_MODE / PERIODPICK_MONTHS_VIEW environment variables

        Returns:
            Validated, immutable settings.

        Raises:
            ConfigError: If the file is not valid TOML or a value is invalid.
        """
        values = self.file_settings()
        unknown = sorted(set(values) - set(SETTINGS_KEYS))
        if unknown:
            _logger.warning(
                "Ignoring unknown [picker] keys in %s: %s",
                self._config_path,
                ", ".join(unknown),
            )
            for key in unknown:
                values.pop(key)

        for env_var, key in ENV_OVERRIDES.items():
            if env_var in os.environ:
                values[key] = os.environ[env_var]

        return self._build_settings(values, str(self._config_path))

    def save_settings(self, settings: PickerSettings) -> None:
        """Write settings to the [picker] table, keeping other tables.

        Args:
            settings: Settings to store.
        """
        config = self._read_config()
        config["picker"] = settings.model_dump()
        self._write_config(config)
        _logger.debug("Saved picker settings to %s", self._config_path)

    def set_value(self, key: str, value: Any) -> PickerSettings:
        """Update one setting in the config file.

        Args:
            key: Setting name, e.g. "default_mode".
            value: New value (strings are coerced where the field allows).

        Returns:
            The settings as stored after the update.

        Raises:
            ConfigError: If key is unknown or value is invalid.
        """
        if key not in SETTINGS_KEYS:
            raise ConfigError(
                f"Unknown setting '{key}'. Valid: {', '.join(SETTINGS_KEYS)}",
                details={"key": key, "valid_keys": list(SETTINGS_KEYS)},
            )
        values = {
            k: v for k, v in self.file_settings().items() if k in SETTINGS_KEYS
        }
        values[key] = value
        settings = self._build_settings(values, f"setting {key}")
        self.save_settings(settings)
        return settings
