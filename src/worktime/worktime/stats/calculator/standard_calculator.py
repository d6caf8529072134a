from __future__ import annotations

from ...common.validators import require_non_negative
from ...core.constants import DEFAULT_REGULAR_DAY_HOURS, SECONDS_PER_HOUR
from .base import OvertimeCalculator, WorkSplit


class StandardOvertimeCalculator(OvertimeCalculator):
    """Standard rule: anything beyond the regular day length is overtime."""

    def __init__(self, regular_day_hours: float = DEFAULT_REGULAR_DAY_HOURS):
        self._regular_seconds = require_non_negative(regular_day_hours, "regular_day_hours") * SECONDS_PER_HOUR

    def split(self, worked_seconds: float) -> WorkSplit:
        worked = max(worked_seconds, 0.0)
        regular = min(worked, self._regular_seconds)
        return WorkSplit(regular_seconds=regular, overtime_seconds=worked - regular)
