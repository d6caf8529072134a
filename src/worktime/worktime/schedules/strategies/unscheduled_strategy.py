from __future__ import annotations

from ..model import EffectiveSchedule
from .base import ResolutionContext, ResolutionStrategy


class UnscheduledFallback(ResolutionStrategy):
    """Last link of the chain: no expected work that day."""

    name = "unscheduled"

    def attempt(self, context: ResolutionContext) -> EffectiveSchedule:
        return EffectiveSchedule.unscheduled()
