from __future__ import annotations

from datetime import date, datetime, timedelta

from ...schedules.model import Schedule


def scheduled_start(day: date, schedule: Schedule) -> datetime:
    return datetime.combine(day, schedule.start_time)


def scheduled_end(day: date, schedule: Schedule) -> datetime:
    # Overnight templates finish on the following calendar day.
    return scheduled_start(day, schedule) + timedelta(seconds=schedule.duration_seconds)
