from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.worktime.worktime.core.enums import EffectiveKind, WeekStart
from src.worktime.worktime.schedules.catalog import ScheduleCatalog
from src.worktime.worktime.schedules.model import EffectiveSchedule, EmployeeSchedule, Schedule, ScheduleDay, WeeklySchedule
from src.worktime.worktime.schedules.resolver import EffectiveScheduleResolver
from src.worktime.worktime.schedules.snapshot_repository import SnapshotScheduleRepository
from src.worktime.worktime.schedules.strategies.base import ResolutionStrategy

# 2026-03-04 is a Wednesday (day_of_week 3); its Sunday-aligned week starts
# 2026-03-01 and its Monday-aligned week starts 2026-03-02.
WEDNESDAY = date(2026, 3, 4)
SUNDAY_WEEK = date(2026, 3, 1)
MONDAY_WEEK = date(2026, 3, 2)

MORNING = Schedule(schedule_id="s-morning", company_id="c1", name="Morning", start_time=time(9, 0), end_time=time(17, 0))
EVENING = Schedule(schedule_id="s-evening", company_id="c1", name="Evening", start_time=time(14, 0), end_time=time(22, 0))
FOREIGN = Schedule(schedule_id="s-foreign", company_id="c2", name="Other", start_time=time(8, 0), end_time=time(16, 0))
RETIRED = Schedule(
    schedule_id="s-retired", company_id="c1", name="Retired", start_time=time(7, 0), end_time=time(15, 0), active=False
)

DAYS = (
    [ScheduleDay("s-morning", d) for d in range(1, 6)]
    + [ScheduleDay("s-evening", d) for d in range(0, 7)]
    + [ScheduleDay("s-foreign", d) for d in range(0, 7)]
    + [ScheduleDay("s-retired", d) for d in range(0, 7)]
)


def _assignment(assignment_id: str, schedule_id: str, *, created_at: datetime, **kwargs) -> EmployeeSchedule:
    return EmployeeSchedule(
        assignment_id=assignment_id,
        employee_id=kwargs.pop("employee_id", "e1"),
        schedule_id=schedule_id,
        start_date=kwargs.pop("start_date", date(2026, 1, 1)),
        end_date=kwargs.pop("end_date", None),
        created_at=created_at,
        **kwargs,
    )


def _resolver(*, assignments=(), overrides=(), week_start: WeekStart = WeekStart.SUNDAY) -> EffectiveScheduleResolver:
    repo = SnapshotScheduleRepository(
        ScheduleCatalog([MORNING, EVENING, FOREIGN, RETIRED], DAYS),
        assignments=assignments,
        overrides=overrides,
    )
    return EffectiveScheduleResolver.from_repositories(
        overrides=repo, assignments=repo, schedules=repo, week_start=week_start
    )


def test_no_data_is_unscheduled():
    result = _resolver().resolve("e1", "c1", WEDNESDAY)

    assert result == EffectiveSchedule.unscheduled()
    assert result.schedule is None


def test_recurring_assignment_applies_on_listed_weekday():
    resolver = _resolver(assignments=[_assignment("a-1", "s-morning", created_at=datetime(2026, 1, 1))])

    result = resolver.resolve("e1", "c1", WEDNESDAY)

    assert result.kind == EffectiveKind.SCHEDULED
    assert result.schedule == MORNING


def test_recurring_assignment_ignored_on_unlisted_weekday():
    resolver = _resolver(assignments=[_assignment("a-1", "s-morning", created_at=datetime(2026, 1, 1))])

    assert resolver.resolve("e1", "c1", date(2026, 3, 8)).kind == EffectiveKind.UNSCHEDULED


def test_newest_overlapping_assignment_wins():
    resolver = _resolver(
        assignments=[
            _assignment("a-1", "s-evening", created_at=datetime(2026, 2, 1)),
            _assignment("a-2", "s-morning", created_at=datetime(2026, 1, 1)),
        ]
    )

    assert resolver.resolve("e1", "c1", WEDNESDAY).schedule == EVENING


def test_equal_created_at_falls_back_to_highest_assignment_id():
    created = datetime(2026, 1, 1, 12, 0)
    resolver = _resolver(
        assignments=[
            _assignment("a-2", "s-evening", created_at=created),
            _assignment("a-1", "s-morning", created_at=created),
        ]
    )

    assert resolver.resolve("e1", "c1", WEDNESDAY).schedule == EVENING


@pytest.mark.parametrize(
    "start_date,end_date,expected",
    [
        (WEDNESDAY, None, EffectiveKind.SCHEDULED),
        (date(2026, 1, 1), WEDNESDAY, EffectiveKind.SCHEDULED),
        (date(2026, 1, 1), date(2026, 3, 3), EffectiveKind.UNSCHEDULED),
        (date(2026, 3, 5), None, EffectiveKind.UNSCHEDULED),
    ],
)
def test_assignment_date_range_is_inclusive(start_date, end_date, expected):
    resolver = _resolver(
        assignments=[
            _assignment("a-1", "s-morning", created_at=datetime(2026, 1, 1), start_date=start_date, end_date=end_date)
        ]
    )

    assert resolver.resolve("e1", "c1", WEDNESDAY).kind == expected


def test_inactive_assignment_and_inactive_schedule_are_skipped():
    resolver = _resolver(
        assignments=[
            _assignment("a-1", "s-morning", created_at=datetime(2026, 1, 1), active=False),
            _assignment("a-2", "s-retired", created_at=datetime(2026, 2, 1)),
        ]
    )

    assert resolver.resolve("e1", "c1", WEDNESDAY).kind == EffectiveKind.UNSCHEDULED


def test_assignment_of_other_company_schedule_is_skipped():
    resolver = _resolver(assignments=[_assignment("a-1", "s-foreign", created_at=datetime(2026, 1, 1))])

    assert resolver.resolve("e1", "c1", WEDNESDAY).kind == EffectiveKind.UNSCHEDULED


def test_weekly_rest_day_beats_recurring_assignment():
    resolver = _resolver(
        assignments=[_assignment("a-1", "s-morning", created_at=datetime(2026, 3, 3))],
        overrides=[WeeklySchedule(employee_id="e1", week_start=SUNDAY_WEEK, day_of_week=3, schedule_id=None)],
    )

    result = resolver.resolve("e1", "c1", WEDNESDAY)

    assert result.kind == EffectiveKind.REST
    assert result.schedule is None


def test_weekly_override_beats_newer_recurring_assignment():
    resolver = _resolver(
        assignments=[_assignment("a-1", "s-morning", created_at=datetime(2026, 3, 3, 23, 0))],
        overrides=[WeeklySchedule(employee_id="e1", week_start=SUNDAY_WEEK, day_of_week=3, schedule_id="s-evening")],
    )

    assert resolver.resolve("e1", "c1", WEDNESDAY).schedule == EVENING


def test_override_with_foreign_schedule_is_terminal_and_unscheduled():
    resolver = _resolver(
        assignments=[_assignment("a-1", "s-morning", created_at=datetime(2026, 1, 1))],
        overrides=[WeeklySchedule(employee_id="e1", week_start=SUNDAY_WEEK, day_of_week=3, schedule_id="s-foreign")],
    )

    result = resolver.resolve("e1", "c1", WEDNESDAY)

    assert result.kind == EffectiveKind.UNSCHEDULED
    assert result.schedule is None


def test_override_with_inactive_schedule_beats_active_assignment():
    resolver = _resolver(
        assignments=[_assignment("a-1", "s-morning", created_at=datetime(2026, 1, 1))],
        overrides=[WeeklySchedule(employee_id="e1", week_start=SUNDAY_WEEK, day_of_week=3, schedule_id="s-retired")],
    )

    assert resolver.resolve("e1", "c1", WEDNESDAY) == EffectiveSchedule.unscheduled()


def test_override_with_inactive_schedule_and_no_assignment_is_unscheduled():
    resolver = _resolver(
        overrides=[WeeklySchedule(employee_id="e1", week_start=SUNDAY_WEEK, day_of_week=3, schedule_id="s-retired")],
    )

    assert resolver.resolve("e1", "c1", WEDNESDAY).kind == EffectiveKind.UNSCHEDULED


def test_override_lookup_uses_the_configured_week_convention():
    overrides = [WeeklySchedule(employee_id="e1", week_start=SUNDAY_WEEK, day_of_week=3, schedule_id=None)]
    assignments = [_assignment("a-1", "s-morning", created_at=datetime(2026, 1, 1))]

    sunday = _resolver(assignments=assignments, overrides=overrides, week_start=WeekStart.SUNDAY)
    monday = _resolver(assignments=assignments, overrides=overrides, week_start=WeekStart.MONDAY)

    assert sunday.resolve("e1", "c1", WEDNESDAY).kind == EffectiveKind.REST
    assert monday.resolve("e1", "c1", WEDNESDAY).kind == EffectiveKind.SCHEDULED


def test_override_for_other_employee_does_not_apply():
    resolver = _resolver(
        overrides=[WeeklySchedule(employee_id="e2", week_start=SUNDAY_WEEK, day_of_week=3, schedule_id=None)],
    )

    assert resolver.resolve("e1", "c1", WEDNESDAY).kind == EffectiveKind.UNSCHEDULED


def test_resolution_is_idempotent():
    resolver = _resolver(
        assignments=[_assignment("a-1", "s-morning", created_at=datetime(2026, 1, 1))],
        overrides=[WeeklySchedule(employee_id="e1", week_start=SUNDAY_WEEK, day_of_week=4, schedule_id=None)],
    )

    for day in (WEDNESDAY, date(2026, 3, 5)):
        assert resolver.resolve("e1", "c1", day) == resolver.resolve("e1", "c1", day)


class RecordingStrategy(ResolutionStrategy):
    def __init__(self, name: str, answer, calls: list[str]):
        self.name = name
        self._answer = answer
        self._calls = calls

    def attempt(self, context):
        self._calls.append(self.name)
        return self._answer


def test_strategies_are_consulted_in_order_until_one_answers():
    calls: list[str] = []
    resolver = EffectiveScheduleResolver(
        [
            RecordingStrategy("first", None, calls),
            RecordingStrategy("second", EffectiveSchedule.rest(), calls),
            RecordingStrategy("third", EffectiveSchedule.scheduled(MORNING), calls),
        ],
        week_start=WeekStart.MONDAY,
    )

    assert resolver.resolve("e1", "c1", WEDNESDAY).kind == EffectiveKind.REST
    assert calls == ["first", "second"]


def test_chain_without_answer_is_unscheduled():
    resolver = EffectiveScheduleResolver([RecordingStrategy("only", None, [])], week_start=WeekStart.SUNDAY)

    assert resolver.resolve("e1", "c1", WEDNESDAY).kind == EffectiveKind.UNSCHEDULED


def test_context_carries_day_of_week_and_week_start():
    context = _resolver(week_start=WeekStart.MONDAY).context_for(employee_id="e1", company_id="c1", on_date=WEDNESDAY)

    assert context.day_of_week == 3
    assert context.week_start == MONDAY_WEEK
