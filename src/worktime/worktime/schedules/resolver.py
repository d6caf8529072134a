from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from ..common.datetime_utils import day_of_week, week_start_for
from ..core.enums import WeekStart
from .factory import ResolutionStrategyFactory
from .model import EffectiveSchedule
from .repository import RecurringAssignmentRepository, ScheduleRepository, WeeklyOverrideRepository
from .strategies.base import ResolutionContext, ResolutionStrategy

logger = logging.getLogger("worktime.schedules")


class EffectiveScheduleResolver:
    """Resolve the single schedule decision for an employee on a date.

    Strategies are consulted strictly in order; the first definitive answer
    wins. ``week_start`` fixes how the week of a date is located when
    matching weekly overrides.
    """

    def __init__(self, strategies: Sequence[ResolutionStrategy], *, week_start: WeekStart):
        self._strategies = tuple(strategies)
        self._week_start = WeekStart(week_start)

    @classmethod
    def from_repositories(
        cls,
        *,
        overrides: WeeklyOverrideRepository,
        assignments: RecurringAssignmentRepository,
        schedules: ScheduleRepository,
        week_start: WeekStart,
        factory: ResolutionStrategyFactory | None = None,
    ) -> "EffectiveScheduleResolver":
        factory = factory or ResolutionStrategyFactory()
        chain = factory.default_chain(overrides=overrides, assignments=assignments, schedules=schedules)
        return cls(chain, week_start=week_start)

    @property
    def week_start(self) -> WeekStart:
        return self._week_start

    def context_for(self, *, employee_id: str, company_id: str, on_date: date) -> ResolutionContext:
        return ResolutionContext(
            employee_id=employee_id,
            company_id=company_id,
            on_date=on_date,
            day_of_week=day_of_week(on_date),
            week_start=week_start_for(on_date, self._week_start),
        )

    def resolve(self, employee_id: str, company_id: str, on_date: date) -> EffectiveSchedule:
        context = self.context_for(employee_id=employee_id, company_id=company_id, on_date=on_date)

        for strategy in self._strategies:
            result = strategy.attempt(context)
            if result is not None:
                logger.debug(
                    "schedule_resolved",
                    extra={
                        "employee_id": employee_id,
                        "on_date": on_date.isoformat(),
                        "strategy": strategy.name,
                        "kind": result.kind.value,
                    },
                )
                return result

        return EffectiveSchedule.unscheduled()


def resolve_effective_schedule(
    resolver: EffectiveScheduleResolver, employee_id: str, company_id: str, on_date: date
) -> EffectiveSchedule:
    return resolver.resolve(employee_id, company_id, on_date)
