from __future__ import annotations

from datetime import datetime

from ...core.exceptions import MalformedSequenceError
from ..model import TimeEntry
from .base import MalformedEntryPolicy


class StrictPolicy(MalformedEntryPolicy):
    """Reject the whole batch on the first inconsistency."""

    def on_repeated_in(self, *, open_start: datetime, entry: TimeEntry) -> datetime:
        raise MalformedSequenceError(
            f"Entry {entry.entry_id}: IN at {entry.timestamp.isoformat()} while a shift is open since {open_start.isoformat()}"
        )

    def on_orphan_out(self, *, entry: TimeEntry) -> None:
        raise MalformedSequenceError(f"Entry {entry.entry_id}: OUT at {entry.timestamp.isoformat()} without an open shift")
