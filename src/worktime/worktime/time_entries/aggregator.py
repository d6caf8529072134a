from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from ..core.enums import TimeEntryType
from .model import AggregationResult, Interval, TimeEntry
from .policies.base import MalformedEntryPolicy
from .policies.last_in_wins_policy import LastInWinsPolicy

logger = logging.getLogger("worktime.time_entries")

# Simultaneous events: an OUT closes the running shift before an IN at the
# same instant opens the next one.
_TYPE_ORDER = {
    TimeEntryType.OUT: 0,
    TimeEntryType.IN: 1,
    TimeEntryType.BREAK: 2,
    TimeEntryType.RESUME: 3,
}


def sort_entries(entries: Iterable[TimeEntry]) -> list[TimeEntry]:
    return sorted(entries, key=lambda e: (e.timestamp, _TYPE_ORDER[e.type], str(e.entry_id)))


class TimeEntryAggregator:
    """Turn one employee's clock events into work intervals and totals.

    The caller partitions entries by employee. IN opens a shift and OUT closes
    it; BREAK/RESUME are paired separately and never change ``total_seconds``.
    A shift still open at the end of the input is reported, not counted.
    """

    def __init__(self, policy: Optional[MalformedEntryPolicy] = None):
        self._policy = policy or LastInWinsPolicy()

    def aggregate(self, entries: Iterable[TimeEntry]) -> AggregationResult:
        open_start: Optional[datetime] = None
        break_start: Optional[datetime] = None
        intervals: list[Interval] = []
        total = 0.0
        break_total = 0.0
        malformed = 0

        for entry in sort_entries(entries):
            if entry.type == TimeEntryType.IN:
                if open_start is None:
                    open_start = entry.timestamp
                else:
                    malformed += 1
                    open_start = self._policy.on_repeated_in(open_start=open_start, entry=entry)

            elif entry.type == TimeEntryType.OUT:
                if open_start is None:
                    malformed += 1
                    self._policy.on_orphan_out(entry=entry)
                    continue

                seconds = (entry.timestamp - open_start).total_seconds()
                if seconds < 0:
                    malformed += 1
                    seconds = 0.0
                intervals.append(Interval(start=open_start, end=entry.timestamp, duration_seconds=seconds))
                total += seconds
                open_start = None

            elif entry.type == TimeEntryType.BREAK:
                if break_start is not None:
                    break_total += (entry.timestamp - break_start).total_seconds()
                break_start = entry.timestamp

            elif entry.type == TimeEntryType.RESUME:
                if break_start is not None:
                    break_total += (entry.timestamp - break_start).total_seconds()
                    break_start = None

        if malformed:
            logger.debug("malformed_clock_sequence", extra={"malformed_count": malformed})

        return AggregationResult(
            total_seconds=total,
            intervals=tuple(intervals),
            open_interval_start=open_start,
            malformed_count=malformed,
            break_seconds=break_total,
            open_break_start=break_start,
        )


def aggregate(entries: Iterable[TimeEntry], *, policy: Optional[MalformedEntryPolicy] = None) -> AggregationResult:
    return TimeEntryAggregator(policy).aggregate(entries)
