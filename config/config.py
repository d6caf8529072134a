import os


class Config:
    # Read-only database used by the MySQL repositories
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_NAME = os.environ.get("DB_NAME", "worktime")

    # Weekly overrides are stored per Sunday-aligned week; dashboards report
    # Monday-aligned weeks. Both stay configurable until product settles it.
    SCHEDULE_WEEK_START = os.environ.get("SCHEDULE_WEEK_START", "sunday").lower()
    REPORT_WEEK_START = os.environ.get("REPORT_WEEK_START", "monday").lower()

    LATE_GRACE_MINUTES = int(os.environ.get("LATE_GRACE_MINUTES", "5"))
    WORK_DAY_ROLLOVER_HOUR = int(os.environ.get("WORK_DAY_ROLLOVER_HOUR", "5"))
    REGULAR_DAY_HOURS = float(os.environ.get("REGULAR_DAY_HOURS", "8"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    LOG_JSON = bool(int(os.environ.get("LOG_JSON", "0")))


DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}
