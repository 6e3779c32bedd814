from __future__ import annotations

from types import SimpleNamespace

import pytest

from attendance_tracker.container import build_container
from attendance_tracker.core.exceptions import ValidationError
from attendance_tracker.storage.file_store import JsonFileKeyValueStore
from attendance_tracker.storage.memory_store import InMemoryKeyValueStore
from attendance_tracker.storage.mysql_store import MySQLKeyValueStore


def test_file_backend_from_settings(tmp_path):
    settings = SimpleNamespace(STORAGE_BACKEND="file", DATA_FILE=str(tmp_path / "a.json"), ATTENDANCE_THRESHOLD="80")

    container = build_container(settings=settings)

    assert isinstance(container.kv_store, JsonFileKeyValueStore)
    assert container.calculator.threshold == 80.0
    assert container.attendance_service.threshold == 80.0


def test_memory_backend_and_custom_key():
    container = build_container(settings=SimpleNamespace(STORAGE_BACKEND="memory", STORAGE_KEY="mine"))

    assert isinstance(container.kv_store, InMemoryKeyValueStore)
    assert container.subject_store.key == "mine"


def test_mysql_backend_does_not_connect_on_build():
    settings = SimpleNamespace(
        STORAGE_BACKEND="mysql",
        DB_CONFIG={"host": "db", "port": 3307, "user": "u", "password": "p", "database": "tracker"},
    )

    container = build_container(settings=settings)

    assert isinstance(container.kv_store, MySQLKeyValueStore)
    assert container.conn.config.port == 3307


def test_testing_settings_module_uses_memory():
    import config.testing as settings

    container = build_container(settings=settings)

    assert isinstance(container.kv_store, InMemoryKeyValueStore)


def test_unknown_backend_rejected():
    with pytest.raises(ValidationError):
        build_container(settings=SimpleNamespace(STORAGE_BACKEND="redis"))


def test_invalid_threshold_rejected():
    with pytest.raises(ValidationError):
        build_container(settings=SimpleNamespace(STORAGE_BACKEND="memory", ATTENDANCE_THRESHOLD="100"))
