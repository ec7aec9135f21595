"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STORAGE_KEY = "timecardRecords"

ALL_EMPLOYEES = "all"

DEFAULT_START = "09:00"
DEFAULT_END = "18:00"
DEFAULT_BREAK_HOURS = "1.0"
DEFAULT_OVERTIME = "00:00"

INVALID_WORK_MINUTES = -1

RECORD_ID_PREFIX = "r_"
