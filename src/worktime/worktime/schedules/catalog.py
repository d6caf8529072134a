from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from ..common.validators import require_day_of_week
from .model import Schedule, ScheduleDay


class ScheduleCatalog:
    """Read-only view of schedule templates and the weekdays they apply to."""

    def __init__(self, schedules: Iterable[Schedule], days: Iterable[ScheduleDay]):
        by_id = {s.schedule_id: s for s in schedules}
        weekdays: dict[str, set[int]] = {}
        for d in days:
            weekdays.setdefault(d.schedule_id, set()).add(require_day_of_week(d.day_of_week))

        self._by_id: Mapping[str, Schedule] = MappingProxyType(by_id)
        self._weekdays: Mapping[str, frozenset[int]] = MappingProxyType(
            {schedule_id: frozenset(values) for schedule_id, values in weekdays.items()}
        )

    def get(self, schedule_id: str) -> Optional[Schedule]:
        return self._by_id.get(schedule_id)

    def weekdays_for(self, schedule_id: str) -> frozenset[int]:
        return self._weekdays.get(schedule_id, frozenset())

    def applies_on(self, schedule_id: str, day_of_week: int) -> bool:
        return day_of_week in self.weekdays_for(schedule_id)

    def for_company(self, company_id: str, *, active_only: bool = True) -> Sequence[Schedule]:
        items = [
            s
            for s in self._by_id.values()
            if s.company_id == company_id and (s.active or not active_only)
        ]
        items.sort(key=lambda s: (s.start_time, s.name))
        return items

    def usable_for(self, schedule_id: str, company_id: str) -> Optional[Schedule]:
        """The schedule when it exists, is active and belongs to ``company_id``."""

        schedule = self.get(schedule_id)
        if schedule is None or not schedule.active or schedule.company_id != company_id:
            return None
        return schedule
