from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.constants import SECONDS_PER_DAY
from ..core.enums import EffectiveKind


@dataclass(frozen=True)
class Schedule:
    """Named, reusable work-time template of a company.

    ``start_time``/``end_time`` are times of day. A template whose end is not
    after its start runs overnight and finishes on the following day.
    """

    schedule_id: str
    company_id: str
    name: str
    start_time: time
    end_time: time
    active: bool = True
    break_minutes: int = 0

    @property
    def is_overnight(self) -> bool:
        return self.end_time <= self.start_time

    @property
    def duration_seconds(self) -> int:
        start = self.start_time.hour * 3600 + self.start_time.minute * 60 + self.start_time.second
        end = self.end_time.hour * 3600 + self.end_time.minute * 60 + self.end_time.second
        if end <= start:
            end += SECONDS_PER_DAY
        return end - start


@dataclass(frozen=True)
class ScheduleDay:
    schedule_id: str
    day_of_week: int


@dataclass(frozen=True)
class EmployeeSchedule:
    """Recurring assignment of a schedule template to an employee."""

    assignment_id: str
    employee_id: str
    schedule_id: str
    start_date: date
    end_date: Optional[date]
    created_at: datetime
    active: bool = True
    schedule: Optional[Schedule] = None

    def covers(self, on_date: date) -> bool:
        if on_date < self.start_date:
            return False
        return self.end_date is None or self.end_date >= on_date


@dataclass(frozen=True)
class WeeklySchedule:
    """Per-week, per-weekday override; ``schedule_id=None`` marks a rest day."""

    employee_id: str
    week_start: date
    day_of_week: int
    schedule_id: Optional[str] = None
    notes: Optional[str] = None

    @property
    def is_rest_day(self) -> bool:
        return self.schedule_id is None


@dataclass(frozen=True)
class EffectiveSchedule:
    kind: EffectiveKind
    schedule: Optional[Schedule] = None

    @classmethod
    def rest(cls) -> "EffectiveSchedule":
        return cls(kind=EffectiveKind.REST)

    @classmethod
    def scheduled(cls, schedule: Schedule) -> "EffectiveSchedule":
        return cls(kind=EffectiveKind.SCHEDULED, schedule=schedule)

    @classmethod
    def unscheduled(cls) -> "EffectiveSchedule":
        return cls(kind=EffectiveKind.UNSCHEDULED)

    @property
    def is_scheduled(self) -> bool:
        return self.kind == EffectiveKind.SCHEDULED
