"""Thread-safe TTL cache for directions lookups.

Entries are keyed by the formatted request coordinates. Expired entries are
dropped on read and swept before eviction, so a full cache only evicts live
results when nothing has expired yet.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Generic, Optional, TypeVar

V = TypeVar("V")


class MemoryCache(Generic[V]):
    def __init__(
        self,
        default_ttl: float = 600.0,
        max_size: int = 500,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_size < 1:
            raise ValueError("max_size must be positive")
        self._store: dict[str, tuple[V, float]] = {}
        self._default_ttl = default_ttl
        self._max_size = max_size
        self._clock = clock
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: str) -> Optional[V]:
        with self._lock:
            entry = self._store.get(key)
            if entry is not None and self._clock() >= entry[1]:
                del self._store[key]
                entry = None
            if entry is None:
                self._misses += 1
                return None
            self._hits += 1
            return entry[0]

    def set(self, key: str, value: V, ttl: Optional[float] = None) -> None:
        expire_at = self._clock() + (self._default_ttl if ttl is None else ttl)
        with self._lock:
            if key not in self._store and len(self._store) >= self._max_size:
                self._make_room()
            self._store[key] = (value, expire_at)

    def _make_room(self) -> None:
        now = self._clock()
        expired = [k for k, (_, expire_at) in self._store.items() if now >= expire_at]
        for k in expired:
            del self._store[k]
        if len(self._store) < self._max_size:
            return
        # Still full: drop the entry closest to expiry.
        oldest = min(self._store, key=lambda k: self._store[k][1])
        del self._store[oldest]
        self._evictions += 1

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    @property
    def stats(self) -> dict[str, Any]:
        total = self._hits + self._misses
        return {
            "size": len(self._store),
            "max_size": self._max_size,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "hit_rate": round(self._hits / total, 3) if total > 0 else 0.0,
        }
