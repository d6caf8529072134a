"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LATE_GRACE_MINUTES = 5
DEFAULT_WORK_DAY_ROLLOVER_HOUR = 5
DEFAULT_REGULAR_DAY_HOURS = 8

DEFAULT_AUTO_CHECKOUT_MAX_MINUTES = 480
DEFAULT_AUTO_CHECKOUT_MARGIN_BEFORE_MINUTES = 15
DEFAULT_AUTO_CHECKOUT_MARGIN_AFTER_MINUTES = 30

SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
