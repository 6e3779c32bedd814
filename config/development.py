import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Minimum attendance percentage for the safe zone (0 < value < 100).
ATTENDANCE_THRESHOLD = os.getenv("ATTENDANCE_THRESHOLD", "75")

# memory | file | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
STORAGE_KEY = os.getenv("STORAGE_KEY", "attendanceTrackerSubjects")
DATA_FILE = os.getenv("DATA_FILE", "instance/attendance.json")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
}
KV_TABLE = os.getenv("KV_TABLE", "kv_store")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled with the mysql backend, the key-value table is created on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
