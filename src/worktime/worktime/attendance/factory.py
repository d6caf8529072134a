from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..core.enums import PunctualityStatus
from ..schedules.model import Schedule
from .strategies.base import PunctualityStrategy
from .strategies.early_strategy import EarlyLeaveStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy
from .strategies.timing import scheduled_end, scheduled_start


@dataclass
class PunctualityStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(self, *, clock_in: datetime, day: date, schedule: Schedule, grace_minutes: int) -> PunctualityStrategy:
        if clock_in <= scheduled_start(day, schedule) + timedelta(minutes=grace_minutes):
            return NormalStrategy()
        return LateStrategy()

    def for_checkout(
        self, *, clock_out: datetime, day: date, schedule: Schedule, current_status: PunctualityStatus
    ) -> PunctualityStrategy:
        if clock_out < scheduled_end(day, schedule) and current_status == PunctualityStatus.ON_TIME:
            return EarlyLeaveStrategy()
        return NormalStrategy()
