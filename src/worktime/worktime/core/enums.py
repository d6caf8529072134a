from __future__ import annotations

from enum import Enum


class TimeEntryType(str, Enum):
    """Kind of clock event recorded by a punch action."""

    IN = "IN"
    OUT = "OUT"
    BREAK = "BREAK"
    RESUME = "RESUME"


class TimeEntrySource(str, Enum):
    """Channel a clock event was recorded through."""

    WEB = "WEB"
    MOBILE = "MOBILE"
    ADMIN = "ADMIN"
    API = "API"
    KIOSK = "KIOSK"


class EffectiveKind(str, Enum):
    """Outcome of schedule resolution for one employee on one date."""

    REST = "rest"
    SCHEDULED = "scheduled"
    UNSCHEDULED = "unscheduled"


class WeekStart(str, Enum):
    """First day of a calendar week.

    Weekly overrides and report periods historically used different
    conventions, so every call site names the one it uses.
    """

    SUNDAY = "sunday"
    MONDAY = "monday"


class PunctualityStatus(str, Enum):
    """Punctuality of a work day compared with its effective schedule."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    EARLY_LEAVE = "EARLY_LEAVE"
    ABSENT = "ABSENT"
    UNKNOWN = "UNKNOWN"
