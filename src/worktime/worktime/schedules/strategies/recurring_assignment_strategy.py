from __future__ import annotations

from typing import Optional

from ..model import EffectiveSchedule, EmployeeSchedule
from ..repository import RecurringAssignmentRepository
from .base import ResolutionContext, ResolutionStrategy


class RecurringAssignmentResolver(ResolutionStrategy):
    """Standing, date-bounded, weekday-filtered employee/template bindings.

    When several assignments match, the newest ``created_at`` wins and equal
    timestamps fall back to the highest assignment id.
    """

    name = "recurring_assignment"

    def __init__(self, assignments: RecurringAssignmentRepository):
        self._assignments = assignments

    def attempt(self, context: ResolutionContext) -> Optional[EffectiveSchedule]:
        rows = self._assignments.get_recurring_assignments(
            employee_id=context.employee_id,
            company_id=context.company_id,
            day_of_week=context.day_of_week,
            on_date=context.on_date,
        )
        candidates = [a for a in rows if self._is_applicable(a, context)]
        if not candidates:
            return None

        winner = max(candidates, key=lambda a: (a.created_at, a.assignment_id))
        return EffectiveSchedule.scheduled(winner.schedule)

    @staticmethod
    def _is_applicable(assignment: EmployeeSchedule, context: ResolutionContext) -> bool:
        schedule = assignment.schedule
        if schedule is None or not schedule.active or schedule.company_id != context.company_id:
            return False
        return assignment.active and assignment.covers(context.on_date)
