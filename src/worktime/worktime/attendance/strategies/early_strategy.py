from __future__ import annotations

from datetime import date, datetime

from ...core.enums import PunctualityStatus
from ...schedules.model import Schedule
from .base import PunctualityStrategy, StatusDecision
from .timing import scheduled_end


class EarlyLeaveStrategy(PunctualityStrategy):
    """Early leave on checkout (only when check-in was ON_TIME)."""

    def decide_checkin(self, *, clock_in: datetime, day: date, schedule: Schedule, grace_minutes: int) -> StatusDecision:
        return StatusDecision(status=PunctualityStatus.UNKNOWN)

    def decide_checkout(
        self, *, clock_out: datetime, day: date, schedule: Schedule, current: PunctualityStatus
    ) -> StatusDecision:
        minutes = int((scheduled_end(day, schedule) - clock_out).total_seconds() // 60)
        return StatusDecision(status=PunctualityStatus.EARLY_LEAVE, note=f"left {minutes} min early")
