"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_THRESHOLD = 75
STORAGE_KEY = "attendanceTrackerSubjects"
PERCENTAGE_DECIMALS = 1
DEFAULT_DATA_FILE = "instance/attendance.json"
KV_TABLE = "kv_store"
