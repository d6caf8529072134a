from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import EmployeeSchedule, Schedule, WeeklySchedule


class ScheduleRepository(Protocol):
    def get_schedule(self, schedule_id: str) -> Optional[Schedule]:
        raise NotImplementedError


class WeeklyOverrideRepository(Protocol):
    def get_weekly_override(self, *, employee_id: str, week_start: date, day_of_week: int) -> Optional[WeeklySchedule]:
        raise NotImplementedError


class RecurringAssignmentRepository(Protocol):
    def get_recurring_assignments(
        self,
        *,
        employee_id: str,
        company_id: str,
        day_of_week: int,
        on_date: date,
    ) -> Sequence[EmployeeSchedule]:
        """Assignments valid on ``on_date`` for an active company schedule
        listing ``day_of_week``, newest ``created_at`` first, each carrying
        its resolved ``schedule``.
        """

        raise NotImplementedError
