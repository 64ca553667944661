"""In-memory call budgets for the directions API."""

from __future__ import annotations

import datetime as dt
import threading
import time


def _today() -> dt.date:
    return dt.date.today()


class InMemoryRateLimiter:
    """Thread-safe sliding-window limiter."""

    backend = "memory"

    def __init__(self, max_requests: int, window_seconds: int):
        self._max = max(1, int(max_requests))
        self._window = max(1, int(window_seconds))
        self._counters: dict[str, list[float]] = {}
        self._lock = threading.Lock()

    def allow(self, key: str) -> bool:
        now = time.time()
        with self._lock:
            hits = [t for t in self._counters.get(key, []) if now - t < self._window]
            if len(hits) >= self._max:
                self._counters[key] = hits
                return False
            hits.append(now)
            self._counters[key] = hits
            return True


class DailyQuota:
    """Calendar-day counter; resets when the local date changes."""

    def __init__(self, limit: int | None = None):
        self._limit = None if limit is None else max(1, int(limit))
        self._day = _today()
        self._count = 0
        self._lock = threading.Lock()

    def _roll(self) -> None:
        today = _today()
        if today != self._day:
            self._day = today
            self._count = 0

    def allow(self) -> bool:
        with self._lock:
            self._roll()
            if self._limit is not None and self._count >= self._limit:
                return False
            self._count += 1
            return True

    def increment(self) -> None:
        with self._lock:
            self._roll()
            self._count += 1

    @property
    def count(self) -> int:
        with self._lock:
            self._roll()
            return self._count
