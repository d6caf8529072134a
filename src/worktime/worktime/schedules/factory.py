from __future__ import annotations

from dataclasses import dataclass

from .repository import RecurringAssignmentRepository, ScheduleRepository, WeeklyOverrideRepository
from .strategies.base import ResolutionStrategy
from .strategies.recurring_assignment_strategy import RecurringAssignmentResolver
from .strategies.unscheduled_strategy import UnscheduledFallback
from .strategies.weekly_override_strategy import WeeklyOverrideResolver


@dataclass
class ResolutionStrategyFactory:
    """Factory Pattern: build the precedence chain in priority order."""

    def default_chain(
        self,
        *,
        overrides: WeeklyOverrideRepository,
        assignments: RecurringAssignmentRepository,
        schedules: ScheduleRepository,
    ) -> list[ResolutionStrategy]:
        return [
            WeeklyOverrideResolver(overrides, schedules),
            RecurringAssignmentResolver(assignments),
            UnscheduledFallback(),
        ]
