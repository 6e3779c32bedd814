from __future__ import annotations

from typing import Protocol, Sequence

from .model import Subject


class SubjectRepository(Protocol):
    def load(self) -> list[Subject]:
        raise NotImplementedError

    def save(self, subjects: Sequence[Subject]) -> None:
        raise NotImplementedError

    def append(self, subject: Subject) -> int:
        """Validate and append; returns the new subject's position."""

        raise NotImplementedError

    def update_by_position(self, position: int, attended: bool) -> Subject:
        raise NotImplementedError

    def remove_by_position(self, position: int) -> Subject:
        raise NotImplementedError
