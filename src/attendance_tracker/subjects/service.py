from __future__ import annotations

import logging
from typing import Any, Optional

from ..calculator.threshold_calculator import SubjectSummary, ThresholdCalculator
from ..common.validators import require_int, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Subject
from .repository import SubjectRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases called by the presentation layer.

    Controllers hand over raw form/JSON values; everything returned is plain data
    (`SubjectSummary`), formatting stays with the caller.
    """

    def __init__(
        self,
        subjects: SubjectRepository,
        *,
        calculator: Optional[ThresholdCalculator] = None,
    ):
        self._subjects = subjects
        self._calculator = calculator or ThresholdCalculator()

    @property
    def threshold(self) -> float:
        return self._calculator.threshold

    def add_subject(
        self,
        *,
        name: Any,
        credits: Any,
        attended_classes: Any = 0,
        total_classes: Any = 0,
    ) -> SubjectSummary:
        subject = Subject(
            name=require_non_empty(name, "Subject name"),
            credits=require_int(credits, "Credits"),
            attended_classes=require_int(attended_classes, "Attended classes"),
            total_classes=require_int(total_classes, "Total classes"),
        )
        position = self._subjects.append(subject)
        return self._calculator.summarize(subject, position=position)

    def mark_attended(self, position: Any) -> SubjectSummary:
        return self._record(position, attended=True)

    def mark_missed(self, position: Any) -> SubjectSummary:
        return self._record(position, attended=False)

    def delete_subject(self, position: Any) -> None:
        self._subjects.remove_by_position(self._position(position))

    def list_summaries(self) -> list[SubjectSummary]:
        return [self._calculator.summarize(s, position=i) for i, s in enumerate(self._subjects.load())]

    def get_summary(self, position: Any) -> SubjectSummary:
        index = self._position(position)
        subjects = self._subjects.load()
        if not 0 <= index < len(subjects):
            raise NotFoundError(f"No subject at position {index}")
        return self._calculator.summarize(subjects[index], position=index)

    def _record(self, position: Any, *, attended: bool) -> SubjectSummary:
        index = self._position(position)
        updated = self._subjects.update_by_position(index, attended)
        return self._calculator.summarize(updated, position=index)

    @staticmethod
    def _position(position: Any) -> int:
        try:
            return require_int(position, "Position")
        except ValidationError:
            logger.warning("Rejected non-numeric position %r", position)
            raise
