from __future__ import annotations

from datetime import date, datetime

from ...core.enums import PunctualityStatus
from ...schedules.model import Schedule
from .base import PunctualityStrategy, StatusDecision
from .timing import scheduled_start


class LateStrategy(PunctualityStrategy):
    """Late check-in."""

    def decide_checkin(self, *, clock_in: datetime, day: date, schedule: Schedule, grace_minutes: int) -> StatusDecision:
        minutes = int((clock_in - scheduled_start(day, schedule)).total_seconds() // 60)
        return StatusDecision(status=PunctualityStatus.LATE, note=f"{minutes} min late for {schedule.name}")

    def decide_checkout(
        self, *, clock_out: datetime, day: date, schedule: Schedule, current: PunctualityStatus
    ) -> StatusDecision:
        return StatusDecision(status=current)
