from __future__ import annotations

from datetime import date, datetime

from ...core.enums import PunctualityStatus
from ...schedules.model import Schedule
from .base import PunctualityStrategy, StatusDecision


class NormalStrategy(PunctualityStrategy):
    """On-time check-in, normal check-out."""

    def decide_checkin(self, *, clock_in: datetime, day: date, schedule: Schedule, grace_minutes: int) -> StatusDecision:
        return StatusDecision(status=PunctualityStatus.ON_TIME)

    def decide_checkout(
        self, *, clock_out: datetime, day: date, schedule: Schedule, current: PunctualityStatus
    ) -> StatusDecision:
        return StatusDecision(status=current)
