from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import TimeEntry


class TimeEntryRepository(Protocol):
    def get_time_entries(self, *, employee_id: str, from_ts: datetime, to_ts: datetime) -> Sequence[TimeEntry]:
        """Entries with ``from_ts <= timestamp < to_ts``, in no particular order."""

        raise NotImplementedError
