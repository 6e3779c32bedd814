"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the attendance rules live in services and the calculator.
"""

from types import SimpleNamespace

from attendance_tracker.container import build_container
from attendance_tracker.storage.memory_store import InMemoryKeyValueStore


def main():
    settings = SimpleNamespace(ATTENDANCE_THRESHOLD=75)
    container = build_container(settings=settings, kv_store=InMemoryKeyValueStore())
    service = container.attendance_service

    service.add_subject(name="Data Structures", credits=4, attended_classes=20, total_classes=40)
    service.add_subject(name="Linear Algebra", credits=3, attended_classes=30, total_classes=36)
    service.mark_missed(1)

    for summary in service.list_summaries():
        print(summary.to_dict())


if __name__ == "__main__":
    main()
