from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..model import EffectiveSchedule


@dataclass(frozen=True)
class ResolutionContext:
    employee_id: str
    company_id: str
    on_date: date
    day_of_week: int
    week_start: date


class ResolutionStrategy(ABC):
    """Strategy Pattern: one source of schedule decisions in the precedence chain.

    ``attempt`` returns a definitive answer, or ``None`` to defer to the next
    strategy.
    """

    name: str = "strategy"

    @abstractmethod
    def attempt(self, context: ResolutionContext) -> Optional[EffectiveSchedule]:
        raise NotImplementedError
