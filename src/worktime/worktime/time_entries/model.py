from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import TimeEntrySource, TimeEntryType


@dataclass(frozen=True)
class TimeEntry:
    """Clock event recorded by a punch action; append-only."""

    entry_id: str
    employee_id: str
    company_id: str
    type: TimeEntryType
    timestamp: datetime
    source: TimeEntrySource = TimeEntrySource.WEB
    created_by_employee: bool = True


@dataclass(frozen=True)
class Interval:
    """Work interval ``[start, end)`` between a clock-in and its clock-out."""

    start: datetime
    end: datetime
    duration_seconds: float


@dataclass(frozen=True)
class AggregationResult:
    total_seconds: float
    intervals: tuple[Interval, ...]
    open_interval_start: Optional[datetime]
    malformed_count: int
    break_seconds: float = 0.0
    open_break_start: Optional[datetime] = None

    @property
    def has_open_shift(self) -> bool:
        return self.open_interval_start is not None

    @property
    def net_seconds(self) -> float:
        """Worked time with closed breaks taken out, never below zero."""
        return max(0.0, self.total_seconds - self.break_seconds)
