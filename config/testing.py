import os

SECRET_KEY = "test-secret"

ATTENDANCE_THRESHOLD = 75

STORAGE_BACKEND = "memory"
STORAGE_KEY = "attendanceTrackerSubjects"
DATA_FILE = os.getenv("DATA_FILE", "instance/attendance-test.json")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker_test"),
}
KV_TABLE = "kv_store"

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = False
