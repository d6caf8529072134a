from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from ..common.datetime_utils import day_of_week, week_days, week_start_for
from ..core.constants import DAY_NAMES, SECONDS_PER_HOUR
from .resolver import EffectiveScheduleResolver


@dataclass(frozen=True)
class DailyAssignedHours:
    day_of_week: int
    day_name: str
    total_seconds: int
    employee_count: int

    @property
    def total_hours(self) -> float:
        return self.total_seconds / SECONDS_PER_HOUR


@dataclass(frozen=True)
class WeeklyHoursSummary:
    week_start: date
    total_employees: int
    employees_with_schedule: int
    total_seconds: int
    daily_breakdown: list[DailyAssignedHours] = field(default_factory=list)

    @property
    def total_hours(self) -> float:
        return self.total_seconds / SECONDS_PER_HOUR


class ScheduleSummaryService:
    """Assigned (planned) hours per weekday, as resolved day by day."""

    def __init__(self, resolver: EffectiveScheduleResolver):
        self._resolver = resolver

    def weekly_hours(self, *, employee_ids: Iterable[str], company_id: str, any_day: date) -> WeeklyHoursSummary:
        employees = list(dict.fromkeys(employee_ids))
        seconds = [0] * 7
        counts = [0] * 7
        scheduled_employees: set[str] = set()

        for day in week_days(any_day, self._resolver.week_start):
            dow = day_of_week(day)
            for employee_id in employees:
                effective = self._resolver.resolve(employee_id, company_id, day)
                if not effective.is_scheduled:
                    continue
                seconds[dow] += effective.schedule.duration_seconds
                counts[dow] += 1
                scheduled_employees.add(employee_id)

        breakdown = [
            DailyAssignedHours(day_of_week=i, day_name=DAY_NAMES[i], total_seconds=seconds[i], employee_count=counts[i])
            for i in range(7)
        ]
        return WeeklyHoursSummary(
            week_start=week_start_for(any_day, self._resolver.week_start),
            total_employees=len(employees),
            employees_with_schedule=len(scheduled_employees),
            total_seconds=sum(seconds),
            daily_breakdown=breakdown,
        )
