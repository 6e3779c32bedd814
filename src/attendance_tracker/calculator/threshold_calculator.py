from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional, Union

from ..core.constants import DEFAULT_THRESHOLD, PERCENTAGE_DECIMALS
from ..core.enums import AttendanceZone
from ..core.exceptions import ValidationError
from ..subjects.model import Subject
from .base import AttendanceCalculator

ThresholdLike = Union[int, float, str, Decimal, Fraction]


@dataclass(frozen=True)
class SubjectSummary:
    """Read-model cho tầng trình bày: số liệu thô, không định dạng."""

    position: Optional[int]
    subject: Subject
    percentage: float
    zone: AttendanceZone
    is_safe: bool
    classes_to_attend: int
    classes_bunkable: int
    threshold: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": self.position,
            **self.subject.to_dict(),
            "percentage": self.percentage,
            "zone": self.zone.value,
            "isSafe": self.is_safe,
            "classesToAttend": self.classes_to_attend,
            "classesBunkable": self.classes_bunkable,
            "threshold": self.threshold,
        }


def parse_threshold(value: ThresholdLike) -> Fraction:
    """Exact threshold in percent; must lie strictly between 0 and 100."""

    if isinstance(value, bool):
        raise ValidationError(f"Invalid attendance threshold: {value!r}")
    try:
        threshold = value if isinstance(value, Fraction) else Fraction(str(value).strip())
    except (ValueError, ZeroDivisionError) as e:
        raise ValidationError(f"Invalid attendance threshold: {value!r}") from e

    if not 0 < threshold < 100:
        raise ValidationError("Attendance threshold must be between 0 and 100 (exclusive)")
    return threshold


class ThresholdCalculator(AttendanceCalculator):
    """Percentage/threshold rules over a subject's counters.

    All comparisons run on `Fraction` values so a subject sitting exactly on
    the threshold is safe, with no float drift in the ceil/floor formulas.
    """

    def __init__(self, threshold: ThresholdLike = DEFAULT_THRESHOLD):
        self._threshold = parse_threshold(threshold)
        self._ratio = self._threshold / 100

    @property
    def threshold(self) -> float:
        return float(self._threshold)

    def exact_percentage(self, subject: Subject) -> Fraction:
        if subject.total_classes == 0:
            return Fraction(0)
        return Fraction(100 * subject.attended_classes, subject.total_classes)

    def percentage(self, subject: Subject) -> float:
        """Percentage rounded half-up for display; never use it for comparisons."""

        exact = self.exact_percentage(subject)
        scale = 10**PERCENTAGE_DECIMALS
        return float(Fraction(math.floor(exact * scale + Fraction(1, 2)), scale))

    def is_safe(self, subject: Subject) -> bool:
        if subject.total_classes == 0:
            return False
        return self.exact_percentage(subject) >= self._threshold

    def zone(self, subject: Subject) -> AttendanceZone:
        return AttendanceZone.SAFE if self.is_safe(subject) else AttendanceZone.DANGER

    def classes_to_reach_threshold(self, subject: Subject) -> int:
        # Nothing to catch up on without any classes held yet.
        if subject.total_classes == 0 or self.is_safe(subject):
            return 0
        needed = math.ceil((self._ratio * subject.total_classes - subject.attended_classes) / (1 - self._ratio))
        return max(needed, 0)

    def classes_bunkable(self, subject: Subject) -> int:
        if not self.is_safe(subject):
            return 0
        allowed = math.floor((subject.attended_classes - self._ratio * subject.total_classes) / self._ratio)
        return max(allowed, 0)

    def summarize(self, subject: Subject, *, position: Optional[int] = None) -> SubjectSummary:
        safe = self.is_safe(subject)
        return SubjectSummary(
            position=position,
            subject=subject,
            percentage=self.percentage(subject),
            zone=AttendanceZone.SAFE if safe else AttendanceZone.DANGER,
            is_safe=safe,
            classes_to_attend=self.classes_to_reach_threshold(subject),
            classes_bunkable=self.classes_bunkable(subject),
            threshold=self.threshold,
        )
