"""Time-bounded in-memory cache used in front of the forecast endpoint."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional

from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="cache")


@dataclass
class CacheEntry:
    """Cached value with the wall-clock time (epoch seconds) it was stored."""
    value: Any
    stored_at: float


class TimedCache:
    """
    Key/value store whose entries expire `duration_ms` after they were written.

    Expired entries are only dropped when their key is read again; nothing
    sweeps the store in the background.
    """

    def __init__(self, duration_ms: int, clock: Callable[[], float] = time.time) -> None:
        self.duration_ms = duration_ms
        self._clock = clock
        self._store: Dict[Hashable, CacheEntry] = {}

    def set(self, key: Hashable, value: Any) -> None:
        """Store `value` under `key`, replacing any previous entry."""
        self._store[key] = CacheEntry(value=value, stored_at=self._clock())

    def get(self, key: Hashable) -> Optional[Any]:
        """Return the live value for `key`, or None if absent or expired."""
        entry = self._store.get(key)
        if entry is None:
            return None

        age_ms = (self._clock() - entry.stored_at) * 1000
        if age_ms > self.duration_ms:
            logger.debug("Cache entry expired", extra={"key": key, "age_ms": round(age_ms)})
            del self._store[key]
            return None

        return entry.value

    def __contains__(self, key: Hashable) -> bool:
        # reports stored entries, expired or not; does not purge
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)
