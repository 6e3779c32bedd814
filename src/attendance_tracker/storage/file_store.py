from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from ..core.exceptions import CorruptStateError
from .base import KeyValueStore


class JsonFileKeyValueStore(KeyValueStore):
    """All keys in one JSON object on disk.

    Writes go to a temp file in the same directory, then `os.replace` swaps it
    in, so a reader sees either the old file or the new one.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Value for {key!r} must be str, got {type(value).__name__}")
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}

        raw = self._path.read_text(encoding="utf-8")
        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise CorruptStateError(f"{self._path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise CorruptStateError(f"{self._path} does not hold a JSON object")
        bad_keys = [k for k, v in data.items() if not isinstance(v, str)]
        if bad_keys:
            raise CorruptStateError(f"{self._path} holds non-text values for {', '.join(bad_keys)}")
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
