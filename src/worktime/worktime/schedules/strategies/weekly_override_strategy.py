from __future__ import annotations

import logging
from typing import Optional

from ..model import EffectiveSchedule
from ..repository import ScheduleRepository, WeeklyOverrideRepository
from .base import ResolutionContext, ResolutionStrategy

logger = logging.getLogger("worktime.schedules")


class WeeklyOverrideResolver(ResolutionStrategy):
    """Explicit per-week decision: a rest day or a specific template.

    A found row always ends resolution. A row naming a schedule that cannot be
    used for the company resolves to unscheduled.
    """

    name = "weekly_override"

    def __init__(self, overrides: WeeklyOverrideRepository, schedules: ScheduleRepository):
        self._overrides = overrides
        self._schedules = schedules

    def attempt(self, context: ResolutionContext) -> Optional[EffectiveSchedule]:
        row = self._overrides.get_weekly_override(
            employee_id=context.employee_id,
            week_start=context.week_start,
            day_of_week=context.day_of_week,
        )
        if row is None:
            return None

        if row.is_rest_day:
            return EffectiveSchedule.rest()

        schedule = self._schedules.get_schedule(row.schedule_id)
        if schedule is None or not schedule.active or schedule.company_id != context.company_id:
            logger.info(
                "weekly_override_unusable",
                extra={
                    "employee_id": context.employee_id,
                    "on_date": context.on_date.isoformat(),
                    "schedule_id": row.schedule_id,
                },
            )
            return EffectiveSchedule.unscheduled()

        return EffectiveSchedule.scheduled(schedule)
