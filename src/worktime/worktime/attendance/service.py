from __future__ import annotations

from datetime import date
from typing import Iterable

from ..common.validators import require_non_negative
from ..core.constants import DEFAULT_LATE_GRACE_MINUTES
from ..core.enums import PunctualityStatus, TimeEntryType
from ..schedules.resolver import EffectiveScheduleResolver
from ..time_entries.aggregator import sort_entries
from ..time_entries.model import TimeEntry
from .factory import PunctualityStrategyFactory
from .model import PunctualityRecord
from .strategies.base import StatusDecision


class PunctualityService:
    def __init__(
        self,
        resolver: EffectiveScheduleResolver,
        *,
        strategy_factory: PunctualityStrategyFactory | None = None,
        grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
    ):
        self._resolver = resolver
        self._factory = strategy_factory or PunctualityStrategyFactory()
        self._grace_minutes = int(require_non_negative(grace_minutes, "grace_minutes"))

    def evaluate(self, *, employee_id: str, company_id: str, day: date, entries: Iterable[TimeEntry]) -> PunctualityRecord:
        """Classify ``day`` from its first IN and last OUT.

        Days without a scheduled template are UNKNOWN; scheduled days without
        any IN are ABSENT.
        """

        effective = self._resolver.resolve(employee_id, company_id, day)
        ordered = sort_entries(entries)
        ins = [e for e in ordered if e.type == TimeEntryType.IN]
        outs = [e for e in ordered if e.type == TimeEntryType.OUT]
        first_in = ins[0].timestamp if ins else None
        last_out = outs[-1].timestamp if outs else None

        record = dict(employee_id=employee_id, work_date=day, effective=effective, first_in=first_in, last_out=last_out)

        if not effective.is_scheduled:
            return PunctualityRecord(status=PunctualityStatus.UNKNOWN, **record)
        if first_in is None:
            return PunctualityRecord(status=PunctualityStatus.ABSENT, **record)

        schedule = effective.schedule
        strategy = self._factory.for_checkin(clock_in=first_in, day=day, schedule=schedule, grace_minutes=self._grace_minutes)
        decision = strategy.decide_checkin(clock_in=first_in, day=day, schedule=schedule, grace_minutes=self._grace_minutes)

        if last_out is not None and last_out > first_in:
            strategy = self._factory.for_checkout(
                clock_out=last_out, day=day, schedule=schedule, current_status=decision.status
            )
            checkout = strategy.decide_checkout(clock_out=last_out, day=day, schedule=schedule, current=decision.status)
            decision = StatusDecision(status=checkout.status, note=checkout.note or decision.note)

        return PunctualityRecord(status=decision.status, note=decision.note, **record)
