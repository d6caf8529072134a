from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.worktime.worktime.core.exceptions import ValidationError
from src.worktime.worktime.schedules.model import EffectiveSchedule, Schedule
from src.worktime.worktime.stats.model import AutoCheckoutRule
from src.worktime.worktime.stats.service import overdue_shift

WEDNESDAY = date(2026, 3, 4)
MORNING = Schedule(schedule_id="s-morning", company_id="c1", name="Morning", start_time=time(8, 0), end_time=time(17, 0))
NIGHT = Schedule(schedule_id="s-night", company_id="c1", name="Night", start_time=time(22, 0), end_time=time(6, 0))


def _check(open_since, now, effective=EffectiveSchedule.scheduled(MORNING), **kwargs):
    return overdue_shift(
        employee_id="e1", open_since=open_since, now=now, work_date=WEDNESDAY, effective=effective, **kwargs
    )


def test_closed_shift_is_never_overdue():
    assert _check(None, datetime(2026, 3, 5, 12, 0)) is None


def test_shift_within_max_minutes_is_not_overdue():
    assert _check(datetime(2026, 3, 4, 8, 0), datetime(2026, 3, 4, 15, 0)) is None


def test_in_during_schedule_closes_at_schedule_end_after_margin():
    open_since = datetime(2026, 3, 4, 8, 0)

    assert _check(open_since, datetime(2026, 3, 4, 17, 30)) is None

    result = _check(open_since, datetime(2026, 3, 4, 17, 31))

    assert result.employee_id == "e1"
    assert result.open_since == open_since
    assert result.close_at == datetime(2026, 3, 4, 17, 0)
    assert result.reason == "Morning ended 31 min ago"


def test_in_before_schedule_closes_at_schedule_start():
    result = _check(datetime(2026, 3, 4, 6, 0), datetime(2026, 3, 4, 14, 30))

    assert result.close_at == datetime(2026, 3, 4, 8, 0)


def test_in_after_schedule_end_closes_after_max_minutes():
    result = _check(datetime(2026, 3, 4, 18, 0), datetime(2026, 3, 5, 3, 0))

    assert result.close_at == datetime(2026, 3, 5, 2, 0)


def test_overnight_schedule_ends_next_morning():
    result = _check(
        datetime(2026, 3, 4, 22, 0), datetime(2026, 3, 5, 6, 31), effective=EffectiveSchedule.scheduled(NIGHT)
    )

    assert result.close_at == datetime(2026, 3, 5, 6, 0)


def test_without_schedule_waits_for_max_plus_margin():
    open_since = datetime(2026, 3, 4, 8, 0)

    assert _check(open_since, datetime(2026, 3, 4, 16, 30), effective=EffectiveSchedule.unscheduled()) is None

    result = _check(open_since, datetime(2026, 3, 4, 16, 31), effective=EffectiveSchedule.rest())

    assert result.close_at == datetime(2026, 3, 4, 16, 31)


def test_custom_rule():
    rule = AutoCheckoutRule(max_minutes=60, margin_after=0)

    result = _check(datetime(2026, 3, 4, 16, 0), datetime(2026, 3, 4, 17, 1), rule=rule)

    assert result.close_at == datetime(2026, 3, 4, 17, 0)


def test_negative_rule_values_are_rejected():
    with pytest.raises(ValidationError):
        AutoCheckoutRule(margin_after=-1)
