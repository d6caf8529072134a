from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import EmployeeSchedule, Schedule, WeeklySchedule


def _to_schedule(r: dict[str, Any]) -> Schedule:
    return Schedule(
        schedule_id=str(r["schedule_id"]),
        company_id=str(r["company_id"]),
        name=r["name"],
        start_time=normalize_mysql_time(r["start_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
        active=bool(r["active"]),
        break_minutes=int(r.get("break_minutes") or 0),
    )


class MySQLScheduleRepository:
    """Read-only schedule queries.

    Implements the schedule, weekly override and recurring assignment
    repository protocols.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_schedule(self, schedule_id: str) -> Optional[Schedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id AS schedule_id, company_id, name, start_time, end_time, active,
                       break_time AS break_minutes
                FROM schedules
                WHERE id=%s
                """,
                (schedule_id,),
            )
            r = fetchone(cur)
            return _to_schedule(r) if r else None

    def get_weekly_override(self, *, employee_id: str, week_start: date, day_of_week: int) -> Optional[WeeklySchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, week_start, day_of_week, schedule_id, notes
                FROM weekly_schedules
                WHERE employee_id=%s AND week_start=%s AND day_of_week=%s AND active=1
                ORDER BY created_at DESC, id DESC
                LIMIT 1
                """,
                (employee_id, week_start, int(day_of_week)),
            )
            r = fetchone(cur)
            if not r:
                return None
            return WeeklySchedule(
                employee_id=str(r["employee_id"]),
                week_start=r["week_start"],
                day_of_week=int(r["day_of_week"]),
                schedule_id=str(r["schedule_id"]) if r["schedule_id"] is not None else None,
                notes=r.get("notes"),
            )

    def get_recurring_assignments(
        self,
        *,
        employee_id: str,
        company_id: str,
        day_of_week: int,
        on_date: date,
    ) -> Sequence[EmployeeSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    es.id AS assignment_id,
                    es.employee_id,
                    es.schedule_id,
                    es.start_date,
                    es.end_date,
                    es.active AS assignment_active,
                    es.created_at,
                    s.company_id,
                    s.name,
                    s.start_time,
                    s.end_time,
                    s.active,
                    s.break_time AS break_minutes
                FROM employee_schedules es
                JOIN schedules s ON s.id = es.schedule_id
                WHERE es.employee_id=%s
                  AND s.company_id=%s
                  AND s.active=1
                  AND es.active=1
                  AND es.start_date <= %s
                  AND (es.end_date IS NULL OR es.end_date >= %s)
                  AND EXISTS (
                      SELECT 1 FROM schedule_days sd
                      WHERE sd.schedule_id = s.id AND sd.day_of_week=%s
                  )
                ORDER BY es.created_at DESC, es.id DESC
                """,
                (employee_id, company_id, on_date, on_date, int(day_of_week)),
            )
            out: list[EmployeeSchedule] = []
            for r in fetchall(cur):
                out.append(
                    EmployeeSchedule(
                        assignment_id=str(r["assignment_id"]),
                        employee_id=str(r["employee_id"]),
                        schedule_id=str(r["schedule_id"]),
                        start_date=r["start_date"],
                        end_date=r.get("end_date"),
                        created_at=r["created_at"],
                        active=bool(r["assignment_active"]),
                        schedule=_to_schedule(r),
                    )
                )
            return out
