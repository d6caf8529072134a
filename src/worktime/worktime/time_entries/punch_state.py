from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.enums import TimeEntryType
from .aggregator import sort_entries
from .model import TimeEntry


@dataclass(frozen=True)
class PunchState:
    current: Optional[TimeEntryType]
    last_entry: Optional[TimeEntry]
    can_punch_in: bool
    can_punch_out: bool
    can_start_break: bool
    can_resume: bool

    def allows(self, action: TimeEntryType) -> bool:
        return {
            TimeEntryType.IN: self.can_punch_in,
            TimeEntryType.OUT: self.can_punch_out,
            TimeEntryType.BREAK: self.can_start_break,
            TimeEntryType.RESUME: self.can_resume,
        }[TimeEntryType(action)]


def punch_state(entries_today: Iterable[TimeEntry]) -> PunchState:
    """Clock actions available after the latest entry of the current work day."""

    ordered = sort_entries(entries_today)
    last = ordered[-1] if ordered else None
    current = last.type if last else None

    working = current in (TimeEntryType.IN, TimeEntryType.RESUME)
    return PunchState(
        current=current,
        last_entry=last,
        can_punch_in=current is None or current == TimeEntryType.OUT,
        can_punch_out=working,
        can_start_break=working,
        can_resume=current == TimeEntryType.BREAK,
    )
