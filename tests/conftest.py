from __future__ import annotations

import pytest

from attendance_tracker.calculator.threshold_calculator import ThresholdCalculator
from attendance_tracker.storage.memory_store import InMemoryKeyValueStore
from attendance_tracker.subjects.service import AttendanceService
from attendance_tracker.subjects.store import SubjectStore


class RecordingKeyValueStore(InMemoryKeyValueStore):
    """In-memory store that counts writes, to assert rejected calls never save."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.writes = 0

    def set(self, key, value):
        self.writes += 1
        super().set(key, value)


@pytest.fixture
def kv():
    return RecordingKeyValueStore()


@pytest.fixture
def store(kv):
    return SubjectStore(kv)


@pytest.fixture
def calculator():
    return ThresholdCalculator(75)


@pytest.fixture
def service(store, calculator):
    return AttendanceService(store, calculator=calculator)
