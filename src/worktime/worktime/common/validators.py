from __future__ import annotations

from ..core.exceptions import ValidationError


def require_day_of_week(value: int, field_name: str = "day_of_week") -> int:
    day = int(value)
    if day < 0 or day > 6:
        raise ValidationError(f"{field_name} must be between 0 (Sunday) and 6 (Saturday)")
    return day


def require_hour(value: int, field_name: str) -> int:
    hour = int(value)
    if hour < 0 or hour > 23:
        raise ValidationError(f"{field_name} must be between 0 and 23")
    return hour


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value
