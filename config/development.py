import os

from .config import DB_CONFIG, Config

SCHEDULE_WEEK_START = Config.SCHEDULE_WEEK_START
REPORT_WEEK_START = Config.REPORT_WEEK_START
LATE_GRACE_MINUTES = Config.LATE_GRACE_MINUTES
WORK_DAY_ROLLOVER_HOUR = Config.WORK_DAY_ROLLOVER_HOUR
REGULAR_DAY_HOURS = Config.REGULAR_DAY_HOURS

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
LOG_JSON = bool(int(os.getenv("LOG_JSON", "1")))

DEBUG = True

__all__ = [
    "DB_CONFIG",
    "SCHEDULE_WEEK_START",
    "REPORT_WEEK_START",
    "LATE_GRACE_MINUTES",
    "WORK_DAY_ROLLOVER_HOUR",
    "REGULAR_DAY_HOURS",
    "LOG_LEVEL",
    "LOG_JSON",
    "DEBUG",
]
