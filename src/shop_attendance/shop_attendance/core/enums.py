from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for route authorization."""

    ADMIN = "admin"
    MECHANIC = "mechanic"


class WeekdayClass(str, Enum):
    """Schedule class of a calendar day."""

    WEEKDAY = "WEEKDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"


class AttendanceState(str, Enum):
    """Per user and day: NO_RECORD -> CHECKED_IN -> CHECKED_OUT."""

    NO_RECORD = "NO_RECORD"
    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"


class AttendanceOutcome(str, Enum):
    """Result of a check-in / check-out request."""

    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"
    ALREADY_CHECKED_IN = "ALREADY_CHECKED_IN"
    ALREADY_CHECKED_OUT = "ALREADY_CHECKED_OUT"
    NOT_CHECKED_IN = "NOT_CHECKED_IN"
