from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import PunctualityStatus
from ..schedules.model import EffectiveSchedule


@dataclass(frozen=True)
class PunctualityRecord:
    """Punctuality of one employee's work day against its effective schedule."""

    employee_id: str
    work_date: date
    effective: EffectiveSchedule
    status: PunctualityStatus
    first_in: Optional[datetime] = None
    last_out: Optional[datetime] = None
    note: Optional[str] = None
