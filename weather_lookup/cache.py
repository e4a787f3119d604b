# ABOUTME: In-memory TTL cache keyed by city name, shared by all requests in the process.
# ABOUTME: Expiry is lazy: stale entries are evicted when they are read or when size() sweeps.

import threading
import time
from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")

DEFAULT_TTL_MS = 10 * 60 * 1000


def _now_ms() -> int:
    return int(time.time() * 1000)


class CacheEntry(BaseModel, Generic[T]):
    """A cached value and the epoch-millis time it was stored."""

    model_config = ConfigDict(frozen=True)

    data: T
    stored_at_ms: int


class TTLCache(Generic[T]):
    """Map from normalized city name to value, with a fixed time-to-live.

    Keys are lowercased and stripped on every operation, so "Boston",
    " boston " and "BOSTON" share one entry. There is no background expiry.
    """

    def __init__(self, ttl_ms: int = DEFAULT_TTL_MS, clock: Callable[[], int] = _now_ms):
        self._ttl_ms = ttl_ms
        self._clock = clock
        self._store: dict[str, CacheEntry[T]] = {}
        self._lock = threading.Lock()

    @property
    def ttl_ms(self) -> int:
        return self._ttl_ms

    @staticmethod
    def normalize_key(key: str) -> str:
        return key.strip().lower()

    def _is_expired(self, entry: CacheEntry[T], now: int) -> bool:
        return now - entry.stored_at_ms > self._ttl_ms

    def get(self, key: str) -> T | None:
        """Return the live value for key, evicting it first if it has expired."""
        normalized = self.normalize_key(key)
        with self._lock:
            entry = self._store.get(normalized)
            if entry is None:
                return None
            if self._is_expired(entry, self._clock()):
                del self._store[normalized]
                return None
            return entry.data

    def set(self, key: str, value: T) -> None:
        entry = CacheEntry(data=value, stored_at_ms=self._clock())
        with self._lock:
            self._store[self.normalize_key(key)] = entry

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._store.pop(self.normalize_key(key), None) is not None

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def size(self) -> int:
        """Count live entries, dropping every expired one on the way."""
        with self._lock:
            now = self._clock()
            expired = [k for k, entry in self._store.items() if self._is_expired(entry, now)]
            for k in expired:
                del self._store[k]
            return len(self._store)

    def __len__(self) -> int:
        return self.size()
