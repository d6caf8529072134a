from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from ..core.enums import WeekStart
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Period:
    """Half-open time window ``[start, end)``."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValidationError("Period end must not be before its start")

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def day_of_week(day: date) -> int:
    """Weekday number with 0 = Sunday ... 6 = Saturday."""
    return (day.weekday() + 1) % 7


def week_start_for(day: date, convention: WeekStart) -> date:
    """First day of the calendar week containing ``day``."""
    if convention == WeekStart.SUNDAY:
        offset = day_of_week(day)
    else:
        offset = day.weekday()
    return day - timedelta(days=offset)


def week_days(day: date, convention: WeekStart) -> list[date]:
    first = week_start_for(day, convention)
    return [first + timedelta(days=i) for i in range(7)]


def day_period(day: date) -> Period:
    start = datetime.combine(day, time.min)
    return Period(start=start, end=start + timedelta(days=1))


def week_period(day: date, convention: WeekStart) -> Period:
    start = datetime.combine(week_start_for(day, convention), time.min)
    return Period(start=start, end=start + timedelta(days=7))


def month_period(day: date) -> Period:
    first = day.replace(day=1)
    if first.month == 12:
        following = first.replace(year=first.year + 1, month=1)
    else:
        following = first.replace(month=first.month + 1)
    return Period(start=datetime.combine(first, time.min), end=datetime.combine(following, time.min))


def work_day_for(moment: datetime, rollover_hour: int) -> date:
    """Work day a timestamp belongs to.

    Clock events before ``rollover_hour`` count towards the previous day so
    that night shifts are not split at midnight.
    """
    if moment.hour < rollover_hour:
        return (moment - timedelta(days=1)).date()
    return moment.date()


def work_day_period(day: date, rollover_hour: int) -> Period:
    start = datetime.combine(day, time(hour=rollover_hour))
    return Period(start=start, end=start + timedelta(days=1))
