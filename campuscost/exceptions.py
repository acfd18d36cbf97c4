"""Custom exception hierarchy for the campuscost engine."""

from __future__ import annotations


class CampusCostError(Exception):
    """Base exception for all campuscost errors."""


class UnknownPresetError(CampusCostError):
    """Raised when an expense-rule preset name is not registered."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = sorted(available or [])
        msg = f"Unknown expense-rule preset '{name}'"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        super().__init__(msg)


class UnknownSchoolError(CampusCostError):
    """Raised when a school id is not present in the repository."""

    def __init__(self, school_id: str) -> None:
        self.school_id = school_id
        super().__init__(f"No school record found for id '{school_id}'")


class RecordLoadError(CampusCostError):
    """Raised when a school record file cannot be read or validated."""
