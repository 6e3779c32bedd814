from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .calculator.threshold_calculator import ThresholdCalculator
from .core.constants import DEFAULT_DATA_FILE, DEFAULT_THRESHOLD, KV_TABLE, STORAGE_KEY
from .core.enums import StorageBackend
from .core.exceptions import ValidationError
from .database.connection import DBConfig, DatabaseConnection
from .storage.base import KeyValueStore
from .storage.file_store import JsonFileKeyValueStore
from .storage.memory_store import InMemoryKeyValueStore
from .storage.mysql_store import MySQLKeyValueStore
from .subjects.service import AttendanceService
from .subjects.store import SubjectStore


@dataclass(frozen=True)
class Container:
    kv_store: KeyValueStore
    subject_store: SubjectStore
    calculator: ThresholdCalculator
    attendance_service: AttendanceService
    conn: Optional[DatabaseConnection] = None


def storage_backend(settings: Any) -> StorageBackend:
    value = str(getattr(settings, "STORAGE_BACKEND", StorageBackend.FILE.value)).lower()
    try:
        return StorageBackend(value)
    except ValueError as e:
        raise ValidationError(f"Unknown storage backend: {value!r}") from e


def build_container(*, settings: Any, kv_store: Optional[KeyValueStore] = None) -> Container:
    """Wire stores and services from a settings module (or any attribute bag).

    Passing `kv_store` skips backend selection; tests use it with an in-memory store.
    """

    conn = None
    if kv_store is None:
        backend = storage_backend(settings)
        if backend is StorageBackend.MYSQL:
            conn = DatabaseConnection(DBConfig.from_dict(dict(getattr(settings, "DB_CONFIG"))))
            kv_store = MySQLKeyValueStore(conn, table=str(getattr(settings, "KV_TABLE", KV_TABLE)))
        elif backend is StorageBackend.FILE:
            kv_store = JsonFileKeyValueStore(Path(getattr(settings, "DATA_FILE", DEFAULT_DATA_FILE)))
        else:
            kv_store = InMemoryKeyValueStore()

    subject_store = SubjectStore(kv_store, key=str(getattr(settings, "STORAGE_KEY", STORAGE_KEY)))
    calculator = ThresholdCalculator(getattr(settings, "ATTENDANCE_THRESHOLD", DEFAULT_THRESHOLD))
    attendance_service = AttendanceService(subject_store, calculator=calculator)

    return Container(
        kv_store=kv_store,
        subject_store=subject_store,
        calculator=calculator,
        attendance_service=attendance_service,
        conn=conn,
    )
