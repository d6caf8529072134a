from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Iterable, Optional, Sequence

from .catalog import ScheduleCatalog
from .model import EmployeeSchedule, Schedule, WeeklySchedule


class SnapshotScheduleRepository:
    """In-memory schedule reads over rows fetched up front by the caller.

    Implements the schedule, weekly override and recurring assignment
    repository protocols. The snapshot is never mutated after construction.
    """

    def __init__(
        self,
        catalog: ScheduleCatalog,
        *,
        assignments: Iterable[EmployeeSchedule] = (),
        overrides: Iterable[WeeklySchedule] = (),
    ):
        self._catalog = catalog
        self._assignments = tuple(assignments)
        self._overrides = {(o.employee_id, o.week_start, o.day_of_week): o for o in overrides}

    @property
    def catalog(self) -> ScheduleCatalog:
        return self._catalog

    def get_schedule(self, schedule_id: str) -> Optional[Schedule]:
        return self._catalog.get(schedule_id)

    def get_weekly_override(self, *, employee_id: str, week_start: date, day_of_week: int) -> Optional[WeeklySchedule]:
        return self._overrides.get((employee_id, week_start, day_of_week))

    def get_recurring_assignments(
        self,
        *,
        employee_id: str,
        company_id: str,
        day_of_week: int,
        on_date: date,
    ) -> Sequence[EmployeeSchedule]:
        matches: list[EmployeeSchedule] = []
        for a in self._assignments:
            if a.employee_id != employee_id or not a.active or not a.covers(on_date):
                continue
            schedule = self._catalog.usable_for(a.schedule_id, company_id)
            if schedule is None or not self._catalog.applies_on(a.schedule_id, day_of_week):
                continue
            matches.append(replace(a, schedule=schedule))

        matches.sort(key=lambda a: (a.created_at, a.assignment_id), reverse=True)
        return matches
