from __future__ import annotations

from datetime import date, datetime, time, timedelta

from src.worktime.worktime.schedules.mysql_schedule_repository import MySQLScheduleRepository


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows
        self.executed = []

    def execute(self, sql, params=None):
        self.executed.append((sql, params))

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, rows):
        self.cur = FakeCursor(rows)

    def cursor(self, dictionary=True):
        return self.cur

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, rows):
        self.conn = FakeConnection(rows)

    def connect(self):
        return self.conn


def test_get_schedule_maps_timedelta_times():
    factory = FakeConnFactory(
        [
            {
                "schedule_id": 7,
                "company_id": "c1",
                "name": "Night",
                "start_time": timedelta(hours=22),
                "end_time": timedelta(hours=6),
                "active": 1,
                "break_minutes": None,
            }
        ]
    )

    schedule = MySQLScheduleRepository(factory).get_schedule("7")

    assert schedule.schedule_id == "7"
    assert schedule.start_time == time(22, 0)
    assert schedule.end_time == time(6, 0)
    assert schedule.active is True
    assert schedule.break_minutes == 0
    assert factory.conn.cur.executed[0][1] == ("7",)


def test_get_schedule_missing_returns_none():
    assert MySQLScheduleRepository(FakeConnFactory([])).get_schedule("nope") is None


def test_weekly_override_rest_day_has_no_schedule_id():
    factory = FakeConnFactory(
        [{"employee_id": "e1", "week_start": date(2026, 3, 1), "day_of_week": 3, "schedule_id": None, "notes": "rest"}]
    )

    row = MySQLScheduleRepository(factory).get_weekly_override(employee_id="e1", week_start=date(2026, 3, 1), day_of_week=3)

    assert row.is_rest_day
    assert row.notes == "rest"
    assert factory.conn.cur.executed[0][1] == ("e1", date(2026, 3, 1), 3)


def test_recurring_assignments_carry_their_schedule():
    factory = FakeConnFactory(
        [
            {
                "assignment_id": 2,
                "employee_id": "e1",
                "schedule_id": 5,
                "start_date": date(2026, 1, 1),
                "end_date": None,
                "assignment_active": 1,
                "created_at": datetime(2026, 1, 2, 9, 0),
                "company_id": "c1",
                "name": "Office",
                "start_time": "09:00:00",
                "end_time": "17:00:00",
                "active": 1,
                "break_minutes": 30,
            }
        ]
    )

    rows = MySQLScheduleRepository(factory).get_recurring_assignments(
        employee_id="e1", company_id="c1", day_of_week=3, on_date=date(2026, 3, 4)
    )

    assert len(rows) == 1
    assert rows[0].assignment_id == "2"
    assert rows[0].schedule.name == "Office"
    assert rows[0].schedule.break_minutes == 30
    assert rows[0].covers(date(2026, 3, 4))
    assert factory.conn.cur.executed[0][1] == ("e1", "c1", date(2026, 3, 4), date(2026, 3, 4), 3)
