from .config import DB_CONFIG, Config

SCHEDULE_WEEK_START = Config.SCHEDULE_WEEK_START
REPORT_WEEK_START = Config.REPORT_WEEK_START
LATE_GRACE_MINUTES = Config.LATE_GRACE_MINUTES
WORK_DAY_ROLLOVER_HOUR = Config.WORK_DAY_ROLLOVER_HOUR
REGULAR_DAY_HOURS = Config.REGULAR_DAY_HOURS

LOG_LEVEL = Config.LOG_LEVEL
LOG_JSON = True

DEBUG = False

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
