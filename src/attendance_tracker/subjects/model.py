from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError

# Wire names used by the persisted JSON blob.
FIELD_NAMES = ("name", "credits", "attendedClasses", "totalClasses")


@dataclass(frozen=True)
class Subject:
    """Thực thể miền (domain): Môn học được theo dõi chuyên cần."""

    name: str
    credits: int
    attended_classes: int = 0
    total_classes: int = 0

    def record_class(self, *, attended: bool) -> "Subject":
        """One more class held; counted as attended only when `attended`."""

        return replace(
            self,
            attended_classes=self.attended_classes + (1 if attended else 0),
            total_classes=self.total_classes + 1,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "credits": self.credits,
            "attendedClasses": self.attended_classes,
            "totalClasses": self.total_classes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Subject":
        return cls(
            name=data["name"],
            credits=data["credits"],
            attended_classes=data["attendedClasses"],
            total_classes=data["totalClasses"],
        )


def _require_count(value: Any, field_name: str) -> int:
    # Stored subjects hold real ints; coercion from text happens in the service.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be a whole number")
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def validate_subject(subject: Subject) -> Subject:
    if not isinstance(subject, Subject):
        raise ValidationError("Not a subject record")

    require_non_empty(subject.name, "Subject name")
    _require_count(subject.credits, "Credits")
    attended = _require_count(subject.attended_classes, "Attended classes")
    total = _require_count(subject.total_classes, "Total classes")

    if attended > total:
        raise ValidationError("Attended classes cannot be more than total classes")
    return subject
