from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..core.enums import TimeEntrySource, TimeEntryType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import TimeEntry


class MySQLTimeEntryRepository:
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_time_entries(self, *, employee_id: str, from_ts: datetime, to_ts: datetime) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, company_id, type, timestamp, source, created_by_employee
                FROM time_entries
                WHERE employee_id=%s AND timestamp >= %s AND timestamp < %s
                """,
                (employee_id, from_ts, to_ts),
            )
            return [
                TimeEntry(
                    entry_id=str(r["id"]),
                    employee_id=str(r["employee_id"]),
                    company_id=str(r["company_id"]),
                    type=TimeEntryType(r["type"]),
                    timestamp=r["timestamp"],
                    source=TimeEntrySource(r.get("source") or TimeEntrySource.WEB.value),
                    created_by_employee=bool(r.get("created_by_employee", True)),
                )
                for r in fetchall(cur)
            ]
