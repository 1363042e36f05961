from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """User role used for authorization of master-data changes."""

    ADMIN = "admin"
    STAFF = "staff"


class ActivityCode(str, Enum):
    """Kind of billable duty (活動種別)."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    DISASTER = "DISASTER"
    CUSTOM = "CUSTOM"
    # Legacy flat-rate code; not offered in the selectable catalog.
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value) -> Optional["ActivityCode"]:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class DestinationCode(str, Enum):
    """Travel-distance tier (行き先区分)."""

    SCHOOL = "school"
    INSIDE_SHORT = "inside_short"
    INSIDE_LONG = "inside_long"
    OUTSIDE = "outside"

    @classmethod
    def parse(cls, value) -> Optional["DestinationCode"]:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None
