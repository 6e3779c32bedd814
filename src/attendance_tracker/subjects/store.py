from __future__ import annotations

import logging
import threading
from typing import Sequence

from ..core.constants import STORAGE_KEY
from ..core.exceptions import NotFoundError, ValidationError
from ..storage.base import KeyValueStore
from .codec import decode_subjects, encode_subjects
from .model import Subject, validate_subject
from .repository import SubjectRepository

logger = logging.getLogger(__name__)


class SubjectStore(SubjectRepository):
    """Owns the persisted subject list under a single key.

    Every operation is one load-mutate-save unit: the whole list is read, changed
    in memory and written back with a single `set`. The backend has no
    transactions, so operations are serialised on a non-reentrant lock.
    """

    def __init__(self, kv: KeyValueStore, *, key: str = STORAGE_KEY):
        self._kv = kv
        self._key = key
        self._lock = threading.Lock()

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Subject]:
        with self._lock:
            return self._load()

    def save(self, subjects: Sequence[Subject]) -> None:
        for s in subjects:
            validate_subject(s)
        with self._lock:
            self._save(list(subjects))

    def append(self, subject: Subject) -> int:
        try:
            validate_subject(subject)
        except ValidationError as e:
            logger.warning("Rejected subject %r: %s", getattr(subject, "name", subject), e)
            raise

        with self._lock:
            subjects = self._load()
            subjects.append(subject)
            self._save(subjects)
            position = len(subjects) - 1

        logger.info("Added subject %r at position %d", subject.name, position)
        return position

    def update_by_position(self, position: int, attended: bool) -> Subject:
        with self._lock:
            subjects = self._load()
            index = self._resolve(position, subjects)
            updated = subjects[index].record_class(attended=bool(attended))
            subjects[index] = updated
            self._save(subjects)

        logger.info(
            "Recorded %s class for position %d (%d/%d)",
            "attended" if attended else "missed",
            index,
            updated.attended_classes,
            updated.total_classes,
        )
        return updated

    def remove_by_position(self, position: int) -> Subject:
        with self._lock:
            subjects = self._load()
            index = self._resolve(position, subjects)
            removed = subjects.pop(index)
            self._save(subjects)

        logger.info("Removed subject %r from position %d", removed.name, index)
        return removed

    def _load(self) -> list[Subject]:
        return decode_subjects(self._kv.get(self._key))

    def _save(self, subjects: list[Subject]) -> None:
        self._kv.set(self._key, encode_subjects(subjects))

    @staticmethod
    def _resolve(position: int, subjects: Sequence[Subject]) -> int:
        # Positions are list indexes; negative values never wrap around.
        if isinstance(position, bool) or not isinstance(position, int) or not 0 <= position < len(subjects):
            raise NotFoundError(f"No subject at position {position!r}")
        return position
