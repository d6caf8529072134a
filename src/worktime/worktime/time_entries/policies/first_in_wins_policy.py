from __future__ import annotations

from datetime import datetime

from ..model import TimeEntry
from .last_in_wins_policy import LastInWinsPolicy


class FirstInWinsPolicy(LastInWinsPolicy):
    """Overlapping INs extend the shift from the earliest one."""

    def on_repeated_in(self, *, open_start: datetime, entry: TimeEntry) -> datetime:
        return open_start
