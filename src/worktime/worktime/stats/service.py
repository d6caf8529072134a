from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Mapping, Optional

from ..attendance.strategies.timing import scheduled_end, scheduled_start
from ..common.datetime_utils import Period, day_period, month_period, week_period, work_day_for
from ..common.validators import require_hour
from ..core.constants import DEFAULT_WORK_DAY_ROLLOVER_HOUR
from ..core.enums import TimeEntryType, WeekStart
from ..core.exceptions import RepositoryError
from ..schedules.model import EffectiveSchedule
from ..time_entries.aggregator import TimeEntryAggregator
from ..time_entries.model import TimeEntry
from ..time_entries.repository import TimeEntryRepository
from .calculator.base import OvertimeCalculator
from .calculator.standard_calculator import StandardOvertimeCalculator
from .model import (
    AutoCheckoutRule,
    CheckoutReport,
    DailyTotals,
    EmployeeFailure,
    EmployeeTotals,
    OverdueShift,
    StatsReport,
)

logger = logging.getLogger("worktime.stats")


def needs_checkout(entries_by_employee: Mapping[str, Iterable[TimeEntry]]) -> list[str]:
    """Employees with at least one IN and no OUT among their entries."""

    with_in: list[str] = []
    with_out: set[str] = set()
    for employee_id, entries in entries_by_employee.items():
        types = {e.type for e in entries}
        if TimeEntryType.IN in types:
            with_in.append(employee_id)
        if TimeEntryType.OUT in types:
            with_out.add(employee_id)
    return [employee_id for employee_id in with_in if employee_id not in with_out]


def _minutes_between(start: datetime, end: datetime) -> int:
    return int((end - start).total_seconds() // 60)


def overdue_shift(
    *,
    employee_id: str,
    open_since: Optional[datetime],
    now: datetime,
    work_date: date,
    effective: EffectiveSchedule,
    rule: Optional[AutoCheckoutRule] = None,
) -> Optional[OverdueShift]:
    """Decide whether a shift still open at ``now`` should be closed, and when.

    ``now`` and ``open_since`` are wall-clock times of the company. Nothing is
    written; the caller decides what to do with the suggested ``close_at``.
    Nothing is overdue before ``rule.max_minutes`` have passed since the IN.
    With a scheduled day:

    - IN before the schedule start: closed at the start once ``now`` is more
      than ``margin_before`` minutes past it.
    - IN during the schedule: closed at the schedule end once ``now`` is more
      than ``margin_after`` minutes past it.
    - IN after the schedule end: closed ``max_minutes`` after the IN once
      ``now`` is more than ``margin_after`` minutes past the end.

    Without a schedule the shift is closed at ``now`` once
    ``max_minutes + margin_after`` have passed.
    """

    if open_since is None:
        return None

    rule = rule or AutoCheckoutRule()
    open_minutes = _minutes_between(open_since, now)
    if open_minutes <= rule.max_minutes:
        return None

    def overdue(close_at: datetime, reason: str) -> OverdueShift:
        return OverdueShift(employee_id=employee_id, open_since=open_since, close_at=close_at, reason=reason)

    if not effective.is_scheduled:
        if open_minutes > rule.max_minutes + rule.margin_after:
            return overdue(now, f"open for {open_minutes} min without a schedule")
        return None

    start = scheduled_start(work_date, effective.schedule)
    end = scheduled_end(work_date, effective.schedule)

    if open_since < start:
        if now > start and _minutes_between(start, now) > rule.margin_before:
            return overdue(start, f"checked in before {effective.schedule.name}, {rule.margin_before} min margin exceeded")
        return None

    if open_since <= end:
        past_end = _minutes_between(end, now)
        if now > end and past_end > rule.margin_after:
            return overdue(end, f"{effective.schedule.name} ended {past_end} min ago")
        return None

    if _minutes_between(end, now) > rule.margin_after:
        return overdue(open_since + timedelta(minutes=rule.max_minutes), f"checked in after {effective.schedule.name} ended")
    return None


class StatsReporter:
    """Multi-employee, multi-period worked-time reports.

    A persistence failure for one employee is logged and reported next to the
    successful results; the remaining employees are still computed.
    """

    def __init__(
        self,
        entries: TimeEntryRepository,
        *,
        aggregator: Optional[TimeEntryAggregator] = None,
        calculator: Optional[OvertimeCalculator] = None,
        rollover_hour: int = DEFAULT_WORK_DAY_ROLLOVER_HOUR,
    ):
        self._entries = entries
        self._aggregator = aggregator or TimeEntryAggregator()
        self._calculator = calculator or StandardOvertimeCalculator()
        self._rollover_hour = require_hour(rollover_hour, "rollover_hour")

    def _fetch(self, employee_id: str, window: Period) -> list[TimeEntry]:
        rows = self._entries.get_time_entries(employee_id=employee_id, from_ts=window.start, to_ts=window.end)
        return [e for e in rows if window.contains(e.timestamp)]

    def _fetch_all(
        self, employee_ids: Iterable[str], window: Period
    ) -> tuple[dict[str, list[TimeEntry]], list[EmployeeFailure]]:
        fetched: dict[str, list[TimeEntry]] = {}
        failures: list[EmployeeFailure] = []
        for employee_id in dict.fromkeys(employee_ids):
            try:
                fetched[employee_id] = self._fetch(employee_id, window)
            except RepositoryError as exc:
                logger.warning(
                    "time_entries_fetch_failed",
                    extra={"employee_id": employee_id, "window_start": window.start.isoformat(), "error": str(exc)},
                )
                failures.append(EmployeeFailure(employee_id=employee_id, error=str(exc)))
        return fetched, failures

    def totals(self, *, employee_ids: Iterable[str], window: Period) -> StatsReport:
        fetched, failures = self._fetch_all(employee_ids, window)

        rows: list[EmployeeTotals] = []
        for employee_id, entries in fetched.items():
            result = self._aggregator.aggregate(entries)
            rows.append(
                EmployeeTotals(
                    employee_id=employee_id,
                    total_seconds=result.total_seconds,
                    net_seconds=result.net_seconds,
                    break_seconds=result.break_seconds,
                    interval_count=len(result.intervals),
                    malformed_count=result.malformed_count,
                    open_interval_start=result.open_interval_start,
                )
            )

        return StatsReport(window=window, employees=rows, failures=failures)

    def period_totals(self, *, employee_ids: Iterable[str], now: datetime, week_start: WeekStart) -> dict[str, StatsReport]:
        """Today, this week and this month, all with the same week convention."""

        employees = list(employee_ids)
        today = now.date()
        windows = {
            "today": day_period(today),
            "week": week_period(today, WeekStart(week_start)),
            "month": month_period(today),
        }
        return {name: self.totals(employee_ids=employees, window=window) for name, window in windows.items()}

    def pending_checkouts(self, *, employee_ids: Iterable[str], window: Period) -> CheckoutReport:
        fetched, failures = self._fetch_all(employee_ids, window)
        return CheckoutReport(employee_ids=needs_checkout(fetched), failures=failures)

    def daily_breakdown(self, *, employee_id: str, window: Period) -> list[DailyTotals]:
        """Per work day totals with the regular/overtime split.

        Propagates persistence failures: there is only one employee to report.
        """

        by_day: dict[date, list[TimeEntry]] = {}
        for entry in self._fetch(employee_id, window):
            by_day.setdefault(work_day_for(entry.timestamp, self._rollover_hour), []).append(entry)

        out: list[DailyTotals] = []
        for work_date in sorted(by_day):
            result = self._aggregator.aggregate(by_day[work_date])
            split = self._calculator.split(result.net_seconds)
            out.append(
                DailyTotals(
                    work_date=work_date,
                    total_seconds=result.total_seconds,
                    net_seconds=result.net_seconds,
                    regular_seconds=split.regular_seconds,
                    overtime_seconds=split.overtime_seconds,
                    malformed_count=result.malformed_count,
                    open_interval_start=result.open_interval_start,
                )
            )
        return out
