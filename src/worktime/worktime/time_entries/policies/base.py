from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ..model import TimeEntry


class MalformedEntryPolicy(ABC):
    """Strategy Pattern: how the aggregator recovers from inconsistent clock sequences.

    The aggregator counts every anomaly in ``malformed_count``; the policy only
    decides what happens to the running shift, or rejects the batch by raising.
    """

    @abstractmethod
    def on_repeated_in(self, *, open_start: datetime, entry: TimeEntry) -> datetime:
        """Return the start of the shift that stays open."""

        raise NotImplementedError

    @abstractmethod
    def on_orphan_out(self, *, entry: TimeEntry) -> None:
        raise NotImplementedError
