from __future__ import annotations

from enum import Enum


class AttendanceZone(str, Enum):
    """Vùng chuyên cần của một môn học so với ngưỡng cấu hình."""

    SAFE = "SAFE"
    DANGER = "DANGER"


class StorageBackend(str, Enum):
    """Key-value backends the subject list can be persisted to."""

    MEMORY = "memory"
    FILE = "file"
    MYSQL = "mysql"
