from __future__ import annotations

from datetime import datetime

from ..model import TimeEntry
from .base import MalformedEntryPolicy


class LastInWinsPolicy(MalformedEntryPolicy):
    """Default recovery: a repeated IN restarts the shift, orphan OUTs are ignored."""

    def on_repeated_in(self, *, open_start: datetime, entry: TimeEntry) -> datetime:
        return entry.timestamp

    def on_orphan_out(self, *, entry: TimeEntry) -> None:
        return None
