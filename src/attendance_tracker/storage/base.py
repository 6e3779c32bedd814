from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Text blob store addressed by key (the persistence backend contract)."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
