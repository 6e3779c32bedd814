"""JSON encoding of the subject list.

The blob is a JSON array of objects with the fields `name`, `credits`,
`attendedClasses` and `totalClasses`, in list order.
"""

from __future__ import annotations

import json
from typing import Optional, Sequence

from ..core.exceptions import CorruptStateError, ValidationError
from .model import FIELD_NAMES, Subject, validate_subject


def encode_subjects(subjects: Sequence[Subject]) -> str:
    return json.dumps([s.to_dict() for s in subjects], ensure_ascii=False)


def decode_subjects(text: Optional[str]) -> list[Subject]:
    if text is None or text == "":
        return []
    if not isinstance(text, str):
        raise CorruptStateError(f"Stored subject list is not text: {type(text).__name__}")

    try:
        data = json.loads(text)
    except ValueError as e:
        raise CorruptStateError(f"Stored subject list is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise CorruptStateError("Stored subject list is not a JSON array")

    subjects: list[Subject] = []
    for position, item in enumerate(data):
        if not isinstance(item, dict):
            raise CorruptStateError(f"Stored subject at position {position} is not an object")
        missing = [f for f in FIELD_NAMES if f not in item]
        if missing:
            raise CorruptStateError(f"Stored subject at position {position} is missing {', '.join(missing)}")

        subject = Subject.from_dict(item)
        try:
            validate_subject(subject)
        except ValidationError as e:
            raise CorruptStateError(f"Stored subject at position {position} is invalid: {e}") from e
        subjects.append(subject)

    return subjects
