from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ...core.enums import PunctualityStatus
from ...schedules.model import Schedule


@dataclass(frozen=True)
class StatusDecision:
    status: PunctualityStatus
    note: Optional[str] = None


class PunctualityStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a punctuality status."""

    @abstractmethod
    def decide_checkin(self, *, clock_in: datetime, day: date, schedule: Schedule, grace_minutes: int) -> StatusDecision:
        raise NotImplementedError

    @abstractmethod
    def decide_checkout(
        self, *, clock_out: datetime, day: date, schedule: Schedule, current: PunctualityStatus
    ) -> StatusDecision:
        raise NotImplementedError
