"""Editing modes that govern how saves to a content item are treated."""

from __future__ import annotations

from enum import StrEnum


class EditingMode(StrEnum):
    OFF = "off"
    OPEN = "open"
    APPROVAL_REQUIRED = "approval-required"
    LOCKED = "locked"

    @classmethod
    def parse(cls, value: object) -> EditingMode | None:
        """Return the matching mode, or None for empty or unrecognized values."""
        if not isinstance(value, str) or not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# Modes an individual item may be switched to; "off" only applies per type
ITEM_SELECTABLE_MODES: tuple[EditingMode, ...] = (
    EditingMode.OPEN,
    EditingMode.APPROVAL_REQUIRED,
    EditingMode.LOCKED,
)
