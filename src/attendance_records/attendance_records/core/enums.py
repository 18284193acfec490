from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes shared by every transport."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL"


class StatusMessage(str, Enum):
    """Human-readable status attached to each returned record."""

    CHECKED_IN = "User checked in successfully."
    CHECKED_OUT = "User checked out successfully."
    FOUND = "Record found."
    RETRIEVED = "Record retrieved."
