import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

ATTENDANCE_THRESHOLD = os.getenv("ATTENDANCE_THRESHOLD", "75")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")
STORAGE_KEY = os.getenv("STORAGE_KEY", "attendanceTrackerSubjects")
DATA_FILE = os.getenv("DATA_FILE", "/var/lib/attendance-tracker/attendance.json")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
}
KV_TABLE = os.getenv("KV_TABLE", "kv_store")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
