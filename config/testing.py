import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "worktime_test"),
}

SCHEDULE_WEEK_START = "sunday"
REPORT_WEEK_START = "monday"
LATE_GRACE_MINUTES = 5
WORK_DAY_ROLLOVER_HOUR = 5
REGULAR_DAY_HOURS = 8

LOG_LEVEL = "WARNING"
LOG_JSON = False

DEBUG = False
TESTING = True
