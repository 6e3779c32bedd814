from __future__ import annotations

from abc import ABC, abstractmethod

from ..subjects.model import Subject


class AttendanceCalculator(ABC):
    """Calculator interface (Strategy Pattern for attendance rules)."""

    @abstractmethod
    def percentage(self, subject: Subject) -> float:
        raise NotImplementedError

    @abstractmethod
    def is_safe(self, subject: Subject) -> bool:
        raise NotImplementedError

    @abstractmethod
    def classes_to_reach_threshold(self, subject: Subject) -> int:
        raise NotImplementedError

    @abstractmethod
    def classes_bunkable(self, subject: Subject) -> int:
        raise NotImplementedError
