from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class WorkSplit:
    regular_seconds: float
    overtime_seconds: float


class OvertimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for overtime)."""

    @abstractmethod
    def split(self, worked_seconds: float) -> WorkSplit:
        raise NotImplementedError
