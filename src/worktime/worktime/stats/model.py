from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import Period
from ..common.validators import require_non_negative
from ..core.constants import (
    DEFAULT_AUTO_CHECKOUT_MARGIN_AFTER_MINUTES,
    DEFAULT_AUTO_CHECKOUT_MARGIN_BEFORE_MINUTES,
    DEFAULT_AUTO_CHECKOUT_MAX_MINUTES,
    SECONDS_PER_HOUR,
)


def format_hours(seconds: float) -> str:
    minutes = int(seconds // 60)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(frozen=True)
class EmployeeTotals:
    employee_id: str
    total_seconds: float
    net_seconds: float
    break_seconds: float
    interval_count: int
    malformed_count: int
    open_interval_start: Optional[datetime] = None

    @property
    def total_hours(self) -> str:
        return format_hours(self.total_seconds)


@dataclass(frozen=True)
class EmployeeFailure:
    employee_id: str
    error: str


@dataclass(frozen=True)
class StatsReport:
    window: Period
    employees: list[EmployeeTotals] = field(default_factory=list)
    failures: list[EmployeeFailure] = field(default_factory=list)

    @property
    def total_seconds(self) -> float:
        return sum(e.total_seconds for e in self.employees)

    @property
    def total_hours(self) -> float:
        return self.total_seconds / SECONDS_PER_HOUR

    @property
    def malformed_count(self) -> int:
        return sum(e.malformed_count for e in self.employees)

    @property
    def open_shifts(self) -> list[str]:
        return [e.employee_id for e in self.employees if e.open_interval_start is not None]

    def for_employee(self, employee_id: str) -> Optional[EmployeeTotals]:
        for e in self.employees:
            if e.employee_id == employee_id:
                return e
        return None


@dataclass(frozen=True)
class CheckoutReport:
    employee_ids: list[str] = field(default_factory=list)
    failures: list[EmployeeFailure] = field(default_factory=list)


@dataclass(frozen=True)
class DailyTotals:
    work_date: date
    total_seconds: float
    net_seconds: float
    regular_seconds: float
    overtime_seconds: float
    malformed_count: int
    open_interval_start: Optional[datetime] = None


@dataclass(frozen=True)
class AutoCheckoutRule:
    """When an open shift counts as forgotten, in minutes."""

    max_minutes: int = DEFAULT_AUTO_CHECKOUT_MAX_MINUTES
    margin_before: int = DEFAULT_AUTO_CHECKOUT_MARGIN_BEFORE_MINUTES
    margin_after: int = DEFAULT_AUTO_CHECKOUT_MARGIN_AFTER_MINUTES

    def __post_init__(self) -> None:
        require_non_negative(self.max_minutes, "max_minutes")
        require_non_negative(self.margin_before, "margin_before")
        require_non_negative(self.margin_after, "margin_after")


@dataclass(frozen=True)
class OverdueShift:
    employee_id: str
    open_since: datetime
    close_at: datetime
    reason: str
