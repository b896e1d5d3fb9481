"""CLI command groups for period_picker.

Command groups:
- quick: Quick-select preset resolution
- range: Click replay, hover preview, unit listing
- config: Picker defaults
"""
